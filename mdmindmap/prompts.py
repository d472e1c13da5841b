"""Interactive prompts and the one-shot mind map wizard."""

from __future__ import annotations

import argparse
import os
import re
import subprocess
import sys
from collections.abc import Callable
from dataclasses import dataclass
from typing import ClassVar, TextIO

from mdmindmap.headings import MAX_LEVEL, ParseMode, trim_whitespace
from mdmindmap.paths import mindmap_filename
from mdmindmap.report import ReportLabels, format_report
from mdmindmap.tree import RenderStyle, build_mind_map

RULE = "=" * 42
DASHES = "-" * 42

_LEADING_INT = re.compile(r"[ \t\n\v\f\r]*([+-]?\d+)")

InputFunc = Callable[[], str]


def _atoi(text: str) -> int:
    """Read a leading decimal integer the way C's atoi does; 0 when there is none."""
    match = _LEADING_INT.match(text)
    return int(match.group(1)) if match else 0


def _use_utf8_console() -> None:
    """Switch a Windows console to the UTF-8 code page."""
    if os.name == "nt":
        subprocess.run("chcp 65001 >nul", shell=True, check=False)


@dataclass(frozen=True)
class PromptText:
    """The wording of the interactive prompts and messages."""

    title: str
    filename_prompt: str
    filename_error: str
    level_prompt: str
    level_error: str
    open_error: str
    check_path: str
    create_error: str
    pause: str
    final_pause: str
    processing: str
    extracting: str
    preview: str
    saved: str

    ENGLISH: ClassVar[PromptText]
    CHINESE: ClassVar[PromptText]


PromptText.ENGLISH = PromptText(
    title="      Markdown Mind Map Generator",
    filename_prompt="Enter Markdown filename (e.g., document.md): ",
    filename_error="Error: Filename cannot be empty, please re-enter!",
    level_prompt="Enter maximum heading level (1-{max}, default 6): ",
    level_error="Error: Level must be between 1-{max}, please re-enter!",
    open_error="Error: Cannot open file {filename}",
    check_path="Please check if the file exists or the path is correct.",
    create_error="Error: Cannot create output file {filename}",
    pause="Press any key to exit...",
    final_pause="Press any key to exit...",
    processing="Processing file: {filename}",
    extracting="Extracting headings at level {level} or below...",
    preview="Mind Map Preview:",
    saved="Mind map saved to: {filename}",
)
PromptText.CHINESE = PromptText(
    title="      Markdown 思维导图生成器",
    filename_prompt="请输入Markdown文件名（例如：document.md）: ",
    filename_error="错误：文件名不能为空，请重新输入！",
    level_prompt="请输入要提取的最大标题级别(1-{max}，默认6): ",
    level_error="错误：级别必须在1-{max}之间，请重新输入！",
    open_error="错误: 无法打开文件 {filename}",
    check_path="请检查文件是否存在或路径是否正确。",
    create_error="错误: 无法创建输出文件 {filename}",
    pause="按任意键退出...",
    final_pause="按任意键退出程序...",
    processing="正在处理文件: {filename}",
    extracting="提取 {level} 级及以下标题...",
    preview="思维导图预览:",
    saved="✅ 思维导图已保存到文件: {filename}",
)


def _write(output: TextIO, text: str) -> None:
    output.write(text)
    output.flush()


def _pause(input_func: InputFunc, output: TextIO, message: str, times: int = 1) -> None:
    _write(output, message)
    for _ in range(times):
        try:
            input_func()
        except EOFError:
            return


def ask_filename(
    input_func: InputFunc = input,
    output: TextIO | None = None,
    text: PromptText = PromptText.ENGLISH,
) -> str:
    """Ask until a non-blank file name is given and return it trimmed."""
    output = sys.stdout if output is None else output
    while True:
        _write(output, text.filename_prompt)
        filename = trim_whitespace(input_func())
        if filename:
            return filename
        _write(output, f"{text.filename_error}\n")


def ask_max_level(
    input_func: InputFunc = input,
    output: TextIO | None = None,
    text: PromptText = PromptText.ENGLISH,
) -> int:
    """Ask for the deepest heading level to keep; a blank answer means the maximum."""
    output = sys.stdout if output is None else output
    while True:
        _write(output, text.level_prompt.format(max=MAX_LEVEL))
        entry = trim_whitespace(input_func())
        if not entry:
            return MAX_LEVEL
        level = _atoi(entry)
        if 1 <= level <= MAX_LEVEL:
            return level
        _write(output, f"{text.level_error.format(max=MAX_LEVEL)}\n")


def clear_screen() -> None:
    """Clear the terminal using the system's own command."""
    try:
        if os.name == "nt":
            subprocess.run("cls", shell=True, check=False)
        else:
            subprocess.run(["clear"], check=False)
    except OSError:
        pass


def run_wizard(
    input_func: InputFunc = input,
    output: TextIO | None = None,
    text: PromptText = PromptText.CHINESE,
    style: RenderStyle = RenderStyle.EMOJI,
    labels: ReportLabels = ReportLabels.CHINESE,
) -> int:
    """Ask for a file and level, show its mind map and save it; return an exit status."""
    output = sys.stdout if output is None else output
    _write(output, f"{RULE}\n{text.title}\n{RULE}\n\n")
    filename = ask_filename(input_func, output, text)
    max_level = ask_max_level(input_func, output, text)
    _write(output, "\n")

    try:
        source = open(filename, encoding="utf-8", errors="replace")
    except OSError:
        _write(output, f"{text.open_error.format(filename=filename)}\n{text.check_path}\n")
        _pause(input_func, output, text.pause)
        return 1

    with source:
        target_name = mindmap_filename(filename)
        try:
            target = open(target_name, "w", encoding="utf-8", newline="")
        except OSError:
            _write(output, f"{text.create_error.format(filename=target_name)}\n")
            _pause(input_func, output, text.pause)
            return 1
        with target:
            _write(
                output,
                f"{text.processing.format(filename=filename)}\n"
                f"{text.extracting.format(level=max_level)}\n"
                f"{RULE}\n\n",
            )
            mind_map = build_mind_map(source, max_level, ParseMode.STANDARD)
            _write(output, f"{text.preview}\n{DASHES}\n{mind_map.render(style)}{DASHES}\n\n")
            target.write(format_report(filename, max_level, mind_map, style, labels))
            _write(output, f"{text.saved.format(filename=target_name)}\n\n")

    _pause(input_func, output, text.final_pause)
    return 0


def main(argv: list[str] | None = None) -> int:
    """Run the wizard once; ``--plain`` uses English text and ASCII branches."""
    parser = argparse.ArgumentParser(
        prog="mdmindmap-wizard",
        description="Turn the headings of a Markdown file into a text mind map.",
    )
    parser.add_argument(
        "--plain",
        action="store_true",
        help="English messages, bracket icons and ASCII branch lines",
    )
    args = parser.parse_args(argv)
    if args.plain:
        _use_utf8_console()
        return run_wizard(
            input, sys.stdout, PromptText.ENGLISH, RenderStyle.ASCII, ReportLabels.ENGLISH
        )
    return run_wizard(input, sys.stdout)