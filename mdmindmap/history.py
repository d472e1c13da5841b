"""A record of the operations performed in an interactive session."""

from __future__ import annotations

from collections.abc import Callable, Iterator
from dataclasses import dataclass
from datetime import datetime

MAX_PATH = 1024
MAX_OPERATION = 128
TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"
_RULE = "=" * 42


@dataclass(frozen=True)
class LogEntry:
    """One logged operation on a file."""

    timestamp: str
    filename: str
    operation: str


class OperationLog:
    """Operations in the order they are listed: newest first."""

    def __init__(self, clock: Callable[[], datetime] = datetime.now) -> None:
        self._clock = clock
        self._entries: list[LogEntry] = []

    def add(self, filename: str, operation: str) -> LogEntry:
        """Record ``operation`` on ``filename`` with the current local time."""
        entry = LogEntry(
            timestamp=self._clock().strftime(TIMESTAMP_FORMAT),
            filename=filename[: MAX_PATH - 1],
            operation=operation[: MAX_OPERATION - 1],
        )
        self._entries.insert(0, entry)
        return entry

    def format(self) -> str:
        """Return the history as the text shown to the user."""
        parts = [f"{_RULE}\n               操作日志历史\n{_RULE}\n\n"]
        if not self._entries:
            parts.append("暂无操作记录\n\n")
            return "".join(parts)
        parts.append(f"总操作次数: {len(self)}\n\n")
        for number, entry in enumerate(self, start=1):
            parts.append(
                f"{number}. [{entry.timestamp}]\n"
                f"   文件: {entry.filename}\n"
                f"   操作: {entry.operation}\n\n"
            )
        return "".join(parts)

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[LogEntry]:
        return iter(self._entries)