import pytest

from mdmindmap.headings import MAX_LEVEL, Heading, ParseMode
from mdmindmap.tree import (
    MAX_HEADINGS,
    HeadingNode,
    MindMap,
    RenderStyle,
    build_mind_map,
)


def _titles(nodes):
    return [node.text for node in nodes]


def _headings(*pairs):
    return [Heading(level, text, number) for number, (level, text) in enumerate(pairs, 1)]


def test_add_child_links_parent_and_keeps_order():
    parent = HeadingNode(1, "A")
    first = parent.add_child(HeadingNode(2, "B"))
    second = parent.add_child(HeadingNode(2, "C"))
    assert parent.children == [first, second]
    assert first.parent is parent and second.parent is parent


def test_icons():
    assert RenderStyle.EMOJI.icon(1) == "📚"
    assert RenderStyle.TEXT.icon(6) == "[L]"
    assert RenderStyle.ASCII.icon(MAX_LEVEL + 1) == "[*]"
    assert RenderStyle.EMOJI.icon(0) == "•"


def test_hierarchy_follows_levels():
    mind_map = MindMap.from_headings(
        _headings((1, "A"), (2, "B"), (3, "C"), (2, "D"), (1, "E"))
    )
    top = mind_map.root.children
    assert _titles(top) == ["A", "E"]
    assert _titles(top[0].children) == ["B", "D"]
    assert _titles(top[0].children[0].children) == ["C"]
    assert top[0].parent is mind_map.root


def test_skipped_level_climbs_to_shallower_parent():
    mind_map = MindMap.from_headings(_headings((1, "A"), (3, "B"), (2, "C")))
    (a,) = mind_map.root.children
    assert _titles(a.children) == ["B", "C"]


def test_first_heading_deeper_than_later_ones():
    mind_map = MindMap.from_headings(_headings((3, "Deep"), (1, "Top")))
    assert _titles(mind_map.root.children) == ["Deep", "Top"]


def test_max_level_drops_deeper_headings():
    mind_map = MindMap(max_level=1)
    assert mind_map.add(Heading(2, "Sub", 1)) is None
    node = mind_map.add(Heading(1, "Top", 2))
    assert node.text == "Top"
    assert _titles(mind_map.root.children) == ["Top"]


@pytest.mark.parametrize("level", [0, MAX_LEVEL + 1])
def test_invalid_max_level(level):
    with pytest.raises(ValueError):
        MindMap(level)


def test_recent_headings_are_capped():
    mind_map = MindMap()
    for index in range(MAX_HEADINGS):
        mind_map.add(Heading(1, f"h{index}", index + 1))
    mind_map.add(Heading(1, "late", MAX_HEADINGS + 1))
    child = mind_map.add(Heading(2, "child", MAX_HEADINGS + 2))
    assert child.parent.text == f"h{MAX_HEADINGS - 1}"


def test_render_empty_map():
    mind_map = MindMap(max_level=3)
    assert mind_map.render_lines(RenderStyle.ASCII) == [
        "No headings found at level 3 or below"
    ]


def test_render_text_style_worked_example():
    mind_map = MindMap.from_headings(_headings((1, "A"), (2, "B"), (2, "C"), (1, "D")))
    assert mind_map.render_lines(RenderStyle.TEXT) == [
        "[D] Document Structure",
        "[B] A",
        "│   ├── [C] B",
        "│   └── [C] C",
        "[B] D",
    ]


def test_render_ascii_style_worked_example():
    mind_map = MindMap.from_headings(_headings((1, "A"), (2, "B"), (2, "C"), (1, "D")))
    assert mind_map.render_lines(RenderStyle.ASCII) == [
        "[D] Document Structure",
        "[B] A",
        "|   |-- [C] B",
        "|   \\-- [C] C",
        "[B] D",
    ]


def test_render_emoji_style_root_label():
    mind_map = MindMap.from_headings(_headings((1, "A")))
    lines = mind_map.render_lines(RenderStyle.EMOJI)
    assert lines == ["📁 文档结构", "📚 A"]


def test_render_joins_lines():
    mind_map = MindMap.from_headings(_headings((1, "A"), (2, "B")))
    text = mind_map.render(RenderStyle.TEXT)
    assert text.endswith("\n")
    assert text.splitlines() == mind_map.render_lines(RenderStyle.TEXT)


def test_render_line_count_matches_nodes():
    mind_map = MindMap.from_headings(
        _headings((1, "A"), (2, "B"), (3, "C"), (2, "D"), (1, "E"), (4, "F"))
    )
    lines = mind_map.render_lines(RenderStyle.ASCII)
    assert len(lines) == 6 + 1
    assert all(line.endswith(title) for line, title in zip(lines[1:], "ABCDEF"))


def test_build_mind_map_from_text():
    text = "Intro\n=====\n## Part\n### Detail\n# Next\n"
    mind_map = build_mind_map(text)
    assert _titles(mind_map.root.children) == ["Intro", "Next"]
    assert _titles(mind_map.root.children[0].children) == ["Part"]


def test_build_mind_map_strict_mode_and_level():
    lines = ["# A\n", "## B\n", "C\n", "---\n"]
    mind_map = build_mind_map(lines, 1, ParseMode.STRICT_ATX)
    (a,) = mind_map.root.children
    assert a.text == "A"
    assert a.children == []