from datetime import datetime

import pytest

from mdmindmap.report import ReportLabels, format_report, write_report
from mdmindmap.tree import RenderStyle, build_mind_map

MOMENT = datetime(2024, 1, 5, 9, 8, 7)
RULE = "=" * 42


@pytest.fixture
def mind_map():
    return build_mind_map("# Intro\n## Scope\n# Usage\n", 3)


def test_header_lines_english(mind_map):
    lines = format_report("doc.md", 3, mind_map, generated=MOMENT).splitlines()
    assert lines[0] == "Markdown File: doc.md"
    assert lines[1] == "Extraction Level: Level 3 and below"
    assert lines[2] == "Generated: Jan  5 2024 09:08:07"
    assert lines[3] == RULE


def test_header_lines_chinese(mind_map):
    text = format_report(
        "doc.md", 2, mind_map, RenderStyle.EMOJI, ReportLabels.CHINESE, MOMENT
    )
    lines = text.splitlines()
    assert lines[0] == "Markdown文件: doc.md"
    assert lines[1] == "提取级别: 2级及以下"
    assert lines[2].startswith("生成时间: ")


def test_body_is_rendered_map_between_rules(mind_map):
    for style in RenderStyle:
        text = format_report("doc.md", 3, mind_map, style, generated=MOMENT)
        body = text.split(f"{RULE}\n", 1)[1]
        assert body == mind_map.render(style) + f"{RULE}\n"


def test_empty_map_reports_message():
    empty = build_mind_map("no headings here\n", 2)
    text = format_report("doc.md", 2, empty, generated=MOMENT)
    assert "No headings found at level 2 or below\n" in text


def test_default_time_is_filled_in(mind_map):
    line = format_report("doc.md", 3, mind_map).splitlines()[2]
    assert line.startswith("Generated: ")
    assert len(line) > len("Generated: ")


def test_write_report_round_trip(tmp_path, mind_map):
    target = tmp_path / "doc_mindmap.txt"
    returned = write_report(target, "doc.md", 3, mind_map, generated=MOMENT)
    assert returned == target
    expected = format_report("doc.md", 3, mind_map, generated=MOMENT)
    assert target.read_text(encoding="utf-8") == expected


def test_write_report_missing_directory(tmp_path, mind_map):
    with pytest.raises(OSError):
        write_report(tmp_path / "absent" / "out.txt", "doc.md", 3, mind_map)