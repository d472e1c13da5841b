# mdmindmap

`mdmindmap` reads a Markdown document, picks out its headings and draws them
as a tree: a plain-text mind map of the document's structure.

Headings are nested by level: a `##` heading goes under the nearest `#`
heading before it, a `###` under the nearest `##`, and so on. You choose the
deepest level to keep (1 to 6, default 6); deeper headings are left out.
Input files are read as UTF-8; bytes that are not valid UTF-8 are replaced.

## Installing

```
pip install .
```

Python 3.10 or later is required. There are no other dependencies.

## Commands

### `mdmindmap-outline`: one file, straight to the terminal

```
mdmindmap-outline document.md
mdmindmap-outline document.md 3
```

The first argument is the Markdown file; the optional second one is the
maximum heading level (1 to 6). Both ATX headings (`# Title`, with optional
closing `#`s) and Setext headings (a line underlined with `===` or `---`) are
recognised. The mind map is printed to standard output with emoji icons and
box-drawing branches; messages are in Chinese. A missing file name, a file
that cannot be opened or a level outside 1 to 6 is reported and the command
exits with status 1.

### `mdmindmap-wizard`: ask, show, save

```
mdmindmap-wizard
mdmindmap-wizard --plain
```

Asks for a file name and a maximum level (press Enter for 6), shows a preview
of the mind map, and saves a report as `<name>_mindmap.txt`, where everything
from the last dot of the given name is replaced: for `notes/plan.md` that is
`notes/plan_mindmap.txt`. The report states the source file, the level and
when it was generated, followed by the tree. ATX and Setext headings are
both recognised.

By default the prompts and report header are in Chinese and the tree uses
emoji icons. With `--plain` the text is English, icons are `[B]`, `[C]`,
`[S]`, … and branches are drawn with plain ASCII characters (`|--`, `\--`).

### `mdmindmap`: an interactive session

```
mdmindmap
```

A small menu to process files one after another, view the history of what
was done in this session (each entry with its time, file and result, newest
first), clear the screen, or quit. The report is saved in the same directory
as the input, named after the file with its own extension dropped. Only ATX
headings that stand on a complete line (ending with a line break) are taken
in this mode; Setext underlines are ignored.

## Using it from Python

- `mdmindmap.headings`: `iter_headings(lines, mode)` yields `Heading`
  values (`level`, `text`, `line_number`) from an iterable of lines or a
  single string; `ParseMode.STANDARD` or `ParseMode.STRICT_ATX` picks the
  rules. `parse_atx_heading`, `parse_strict_atx_heading` and
  `parse_setext_heading` check single lines and return `(level, title)` or
  `None`.
- `mdmindmap.tree`: `build_mind_map(lines, max_level, mode)` returns a
  `MindMap`; `MindMap.render(style)` returns the drawn tree as text and
  `MindMap.render_lines(style)` returns it as a list of lines.
  `RenderStyle.EMOJI`, `RenderStyle.TEXT` and `RenderStyle.ASCII` choose the
  icons and branch characters. `MindMap.add(heading)` places one heading;
  `MindMap.from_headings(headings, max_level)` builds from many.
- `mdmindmap.paths`: `mindmap_filename(input_filename)` and
  `mindmap_filename_beside(input_filename)` give the name of the output file;
  `split_path(full_path)` splits a path into directory and file name.
- `mdmindmap.report`: `format_report(...)` and `write_report(...)` produce
  the saved report, with `ReportLabels.ENGLISH` or `ReportLabels.CHINESE`
  wording.
- `mdmindmap.history`: `OperationLog` keeps the session history as
  `LogEntry` values.

```python
from pathlib import Path

from mdmindmap.headings import ParseMode
from mdmindmap.tree import RenderStyle, build_mind_map

text = Path("document.md").read_text(encoding="utf-8")
mind_map = build_mind_map(text, 3, ParseMode.STANDARD)
print(mind_map.render(RenderStyle.TEXT), end="")
```

## What it does not do

The operation history lives only as long as one `mdmindmap` session; it is
not saved anywhere. Output is plain text only; there is no graphical or
image rendering of the mind map.

## Running the tests

```
pip install .[test]
pytest
```