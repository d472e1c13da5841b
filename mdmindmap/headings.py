"""Recognising Markdown headings in lines of text."""

from __future__ import annotations

import enum
import io
import re
from collections.abc import Iterable, Iterator
from dataclasses import dataclass

MAX_LINE_LENGTH = 512
MAX_TITLE_LENGTH = 256
MAX_LEVEL = 6

_C_SPACE = " \t\n\v\f\r"
_UNTIL_LINE_END = re.compile(r"[^\r\n]*")


@dataclass(frozen=True)
class Heading:
    """A heading found in a document, with its 1-based line number."""

    level: int
    text: str
    line_number: int


class ParseMode(enum.Enum):
    """How lines are scanned for headings."""

    STANDARD = "standard"
    """Trimmed lines; ATX headings and Setext underlines are both recognised."""

    STRICT_ATX = "strict-atx"
    """Raw lines; only ATX headings that end with a line break count."""


def trim_whitespace(text: str) -> str:
    """Strip ASCII whitespace from both ends of ``text``."""
    return text.strip(_C_SPACE)


def _split_hashes(line: str) -> tuple[int, str]:
    rest = line.lstrip("#")
    return len(line) - len(rest), rest


def parse_atx_heading(line: str) -> tuple[int, str] | None:
    """Return ``(level, title)`` for an ATX heading such as ``## Title ##``."""
    count, rest = _split_hashes(line)
    if not 0 < count <= MAX_LEVEL or not rest or rest[0] not in _C_SPACE:
        return None
    title = trim_whitespace(rest).rstrip("#")
    return count, trim_whitespace(title)


def parse_strict_atx_heading(line: str) -> tuple[int, str] | None:
    """Return ``(level, title)`` for ``#`` marks, a space, a title and a line break.

    The title is kept as written up to the line break; a line without a
    break, or with a title too long to hold, is not a heading.
    """
    count, rest = _split_hashes(line)
    if not 0 < count <= MAX_LEVEL or not rest.startswith(" "):
        return None
    rest = rest.lstrip(" ")
    match = _UNTIL_LINE_END.match(rest)
    title = match.group()
    if match.end() == len(rest) or len(title) > MAX_TITLE_LENGTH - 1:
        return None
    return count, title


def parse_setext_heading(current_line: str, next_line: str) -> tuple[int, str] | None:
    """Return ``(level, title)`` when ``next_line`` underlines ``current_line``.

    An underline made only of ``=`` gives level 1, only of ``-`` level 2.
    An empty underline counts as made of ``=``.
    """
    if not current_line or current_line.startswith("#"):
        return None
    underline = set(next_line.split("\n", 1)[0])
    if underline <= {"="}:
        level = 1
    elif underline <= {"-"}:
        level = 2
    else:
        return None
    return level, trim_whitespace(current_line)


def _read_chunks(lines: Iterable[str] | str) -> Iterator[str]:
    """Yield lines the way a fixed line buffer reads them: long lines in pieces."""
    if isinstance(lines, str):
        lines = io.StringIO(lines, newline=None)
    width = MAX_LINE_LENGTH - 1
    for line in lines:
        while line:
            yield line[:width]
            line = line[width:]


def _heading(level: int, title: str, line_number: int) -> Heading:
    return Heading(level, title[: MAX_TITLE_LENGTH - 1], line_number)


def iter_headings(
    lines: Iterable[str] | str, mode: ParseMode = ParseMode.STANDARD
) -> Iterator[Heading]:
    """Yield the headings found in ``lines`` (an iterable of lines or one text)."""
    previous = ""
    for number, raw in enumerate(_read_chunks(lines), start=1):
        if mode is ParseMode.STRICT_ATX:
            found = parse_strict_atx_heading(raw)
            if found:
                yield _heading(*found, number)
            continue

        line = trim_whitespace(raw)
        found = parse_atx_heading(line)
        if found:
            yield _heading(*found, number)
        elif number > 1 and (found := parse_setext_heading(previous, line)):
            yield _heading(*found, number - 1)
        previous = line