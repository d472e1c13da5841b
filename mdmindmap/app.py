"""The menu-driven mind map application with an operation history."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Callable
from dataclasses import replace
from typing import TextIO

from mdmindmap.headings import ParseMode, trim_whitespace
from mdmindmap.history import LogEntry, OperationLog
from mdmindmap.paths import mindmap_filename_beside
from mdmindmap.prompts import (
    DASHES,
    RULE,
    InputFunc,
    PromptText,
    _use_utf8_console,
    ask_filename,
    ask_max_level,
    clear_screen,
)
from mdmindmap.report import ReportLabels, format_report
from mdmindmap.tree import RenderStyle, build_mind_map

MENU_TEXT = replace(
    PromptText.ENGLISH,
    filename_prompt="Enter Markdown filename (e.g., document.md or full path): ",
    pause="Press any key to continue...",
    final_pause="Press any key to continue...",
)

_SUCCESS_LIMIT = 255


class MindMapApp:
    """An interactive session: process files, review history, exit."""

    def __init__(
        self,
        input_func: InputFunc = input,
        output: TextIO | None = None,
        clear: Callable[[], None] = clear_screen,
        log: OperationLog | None = None,
        style: RenderStyle = RenderStyle.TEXT,
        labels: ReportLabels = ReportLabels.ENGLISH,
        text: PromptText = MENU_TEXT,
    ) -> None:
        self._input = input_func
        self.output = sys.stdout if output is None else output
        self._clear = clear
        self.log = OperationLog() if log is None else log
        self.style = style
        self.labels = labels
        self.text = text

    def _write(self, text: str) -> None:
        self.output.write(text)
        self.output.flush()

    def _pause(self, message: str, times: int = 1) -> None:
        self._write(message)
        for _ in range(times):
            try:
                self._input()
            except EOFError:
                return

    def show_menu(self) -> None:
        """Clear the screen and show the main menu."""
        self._clear()
        self._write(
            f"{RULE}\n{self.text.title}\n{RULE}\n"
            f"         Total Operations: {len(self.log)}\n"
            f"{RULE}\n\n"
            "1. Process Markdown File\n"
            "2. View Operation History\n"
            "3. Clear Screen\n"
            "4. Exit\n\n"
            "Please select an option (1-4): "
        )

    def process_file(self) -> LogEntry:
        """Ask for a file, save its mind map beside it, and log the outcome."""
        text = self.text
        self._clear()
        self._write(f"{RULE}\n{text.title}\n{RULE}\n\n")
        filename = ask_filename(self._input, self.output, text)
        max_level = ask_max_level(self._input, self.output, text)
        self._write("\n")

        try:
            source = open(filename, encoding="utf-8", errors="replace")
        except OSError:
            self._write(f"{text.open_error.format(filename=filename)}\n{text.check_path}\n")
            entry = self.log.add(filename, "Failed to open file")
            self._pause(text.pause)
            return entry

        with source:
            target_name = mindmap_filename_beside(filename)
            try:
                target = open(target_name, "w", encoding="utf-8", newline="")
            except OSError:
                self._write(f"{text.create_error.format(filename=target_name)}\n")
                entry = self.log.add(filename, "Failed to create output file")
                self._pause(text.pause)
                return entry
            with target:
                self._write(
                    f"{text.processing.format(filename=filename)}\n"
                    f"{text.extracting.format(level=max_level)}\n"
                    f"{RULE}\n\n"
                )
                mind_map = build_mind_map(source, max_level, ParseMode.STRICT_ATX)
                self._write(
                    f"{text.preview}\n{DASHES}\n{mind_map.render(self.style)}{DASHES}\n\n"
                )
                target.write(
                    format_report(filename, max_level, mind_map, self.style, self.labels)
                )
                self._write(f"{text.saved.format(filename=target_name)}\n\n")

        message = f"Successfully processed, output: {target_name}"[:_SUCCESS_LIMIT]
        entry = self.log.add(filename, message)
        self._pause(text.final_pause, times=2)
        return entry

    def show_history(self) -> None:
        """Show the logged operations, newest first."""
        self._clear()
        self._write(self.log.format())
        if len(self.log):
            self._pause("按任意键返回主菜单...")

    def run(self) -> int:
        """Serve the menu until the user exits or input ends; return an exit status."""
        while True:
            self.show_menu()
            try:
                choice = trim_whitespace(self._input())
            except EOFError:
                self._write("\n")
                return 0
            if choice == "1":
                self.process_file()
            elif choice == "2":
                self.show_history()
            elif choice == "3":
                self._clear()
            elif choice == "4":
                self._write(
                    "\nThank you for using Markdown Mind Map Generator!\n"
                    f"Total operations performed: {len(self.log)}\n"
                )
                return 0
            else:
                self._write("Invalid option! Please select 1-4.\n")
                self._pause(self.text.pause)


def main(argv: list[str] | None = None) -> int:
    """Start the interactive mind map application."""
    parser = argparse.ArgumentParser(
        prog="mdmindmap",
        description="Menu-driven Markdown mind map generator with an operation history.",
    )
    parser.parse_args(argv)
    _use_utf8_console()
    return MindMapApp().run()