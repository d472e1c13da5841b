"""The mind map report written next to a Markdown file."""

from __future__ import annotations

import os
from dataclasses import dataclass
from datetime import datetime
from pathlib import Path
from typing import ClassVar

from mdmindmap.tree import MindMap, RenderStyle

_RULE = "=" * 42


@dataclass(frozen=True)
class ReportLabels:
    """The header wording of a report."""

    file_line: str
    level_line: str
    generated_line: str

    ENGLISH: ClassVar[ReportLabels]
    CHINESE: ClassVar[ReportLabels]


ReportLabels.ENGLISH = ReportLabels(
    file_line="Markdown File: {source}",
    level_line="Extraction Level: Level {level} and below",
    generated_line="Generated: {when}",
)
ReportLabels.CHINESE = ReportLabels(
    file_line="Markdown文件: {source}",
    level_line="提取级别: {level}级及以下",
    generated_line="生成时间: {when}",
)


def _stamp(moment: datetime) -> str:
    """Format like a compiler date and time stamp, e.g. ``Jan  5 2024 09:08:07``."""
    return f"{moment:%b} {moment.day:2d} {moment.year} {moment:%H:%M:%S}"


def format_report(
    source_name: str,
    max_level: int,
    mind_map: MindMap,
    style: RenderStyle = RenderStyle.TEXT,
    labels: ReportLabels = ReportLabels.ENGLISH,
    generated: datetime | None = None,
) -> str:
    """Return the full report text: header, rule, mind map, rule."""
    when = _stamp(generated if generated is not None else datetime.now())
    header = (
        f"{labels.file_line.format(source=source_name)}\n"
        f"{labels.level_line.format(level=max_level)}\n"
        f"{labels.generated_line.format(when=when)}\n"
    )
    return f"{header}{_RULE}\n{mind_map.render(style)}{_RULE}\n"


def write_report(
    path: str | os.PathLike[str],
    source_name: str,
    max_level: int,
    mind_map: MindMap,
    style: RenderStyle = RenderStyle.TEXT,
    labels: ReportLabels = ReportLabels.ENGLISH,
    generated: datetime | None = None,
) -> Path:
    """Write the report to ``path`` as UTF-8 and return the path.

    Raises OSError when the file cannot be created.
    """
    target = Path(path)
    text = format_report(source_name, max_level, mind_map, style, labels, generated)
    with target.open("w", encoding="utf-8", newline="") as handle:
        handle.write(text)
    return target