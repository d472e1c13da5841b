"""Print the mind map of a Markdown file named on the command line."""

from __future__ import annotations

import sys

from mdmindmap.headings import MAX_LEVEL
from mdmindmap.prompts import RULE, _atoi
from mdmindmap.tree import RenderStyle, build_mind_map

PROG = "mdmindmap-outline"


def parse_args(argv: list[str]) -> tuple[str, int]:
    """Return ``(filename, max_level)`` from the arguments after the program name.

    Raises ValueError, carrying the message to show, when the file name is
    missing or the level is outside 1 to the maximum.
    """
    if not argv:
        raise ValueError(
            f"使用方法: {PROG} <文件名> [最大级别(1-6)]\n示例: {PROG} document.md 3"
        )
    filename = argv[0]
    max_level = MAX_LEVEL
    if len(argv) >= 2:
        max_level = _atoi(argv[1])
        if not 1 <= max_level <= MAX_LEVEL:
            raise ValueError(f"错误: 最大级别必须在1-{MAX_LEVEL}之间")
    return filename, max_level


def main(argv: list[str] | None = None) -> int:
    """Print the mind map of the named file; return an exit status."""
    if argv is None:
        argv = sys.argv[1:]
    try:
        filename, max_level = parse_args(argv)
    except ValueError as error:
        print(error)
        return 1

    try:
        source = open(filename, encoding="utf-8", errors="replace")
    except OSError:
        print(f"错误: 无法打开文件 {filename}")
        return 1

    with source:
        print(f"正在处理文件: {filename}")
        print(f"提取 {max_level} 级及以下标题...")
        print(RULE)
        mind_map = build_mind_map(source, max_level)
        sys.stdout.write(mind_map.render(RenderStyle.EMOJI))
    return 0