"""Heading trees and their rendering as text mind maps."""

from __future__ import annotations

import enum
from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field

from mdmindmap.headings import MAX_LEVEL, Heading, ParseMode, iter_headings

MAX_HEADINGS = 1000
ROOT_TEXT = "Document Structure"


@dataclass(eq=False)
class HeadingNode:
    """A heading in the tree, with its parent and ordered children."""

    level: int
    text: str
    line_number: int = 0
    parent: HeadingNode | None = field(default=None, repr=False)
    children: list[HeadingNode] = field(default_factory=list, repr=False)

    def add_child(self, node: HeadingNode) -> HeadingNode:
        """Append ``node`` as the last child and return it."""
        node.parent = self
        self.children.append(node)
        return node


@dataclass(frozen=True)
class _Look:
    icons: tuple[str, ...]
    fallback_icon: str
    root_label: str
    empty_message: str
    tee: str
    elbow: str
    pipe: str
    gap: str = "    "


_BRACKET_ICONS = ("[B]", "[C]", "[S]", "[P]", "[I]", "[L]")


class RenderStyle(enum.Enum):
    """Icons, labels and branch lines used to draw a mind map."""

    EMOJI = _Look(
        icons=("📚", "📖", "📝", "📌", "🔖", "\U0001f3f7\ufe0f"),
        fallback_icon="•",
        root_label="📁 文档结构",
        empty_message="没有找到{max_level}级及以下的标题",
        tee="├── ",
        elbow="└── ",
        pipe="│   ",
    )
    TEXT = _Look(
        icons=_BRACKET_ICONS,
        fallback_icon="[*]",
        root_label="[D] Document Structure",
        empty_message="No headings found at level {max_level} or below",
        tee="├── ",
        elbow="└── ",
        pipe="│   ",
    )
    ASCII = _Look(
        icons=_BRACKET_ICONS,
        fallback_icon="[*]",
        root_label="[D] Document Structure",
        empty_message="No headings found at level {max_level} or below",
        tee="|-- ",
        elbow="\\-- ",
        pipe="|   ",
    )

    def icon(self, level: int) -> str:
        """Return the icon drawn before a heading of ``level``."""
        icons = self.value.icons
        if 1 <= level <= len(icons):
            return icons[level - 1]
        return self.value.fallback_icon


def _with_last(nodes: list[HeadingNode]) -> Iterator[tuple[HeadingNode, bool]]:
    for position, node in enumerate(nodes, start=1):
        yield node, position == len(nodes)


class MindMap:
    """Headings arranged into a tree under a document root."""

    def __init__(self, max_level: int = MAX_LEVEL) -> None:
        if not 1 <= max_level <= MAX_LEVEL:
            raise ValueError(f"max_level must be between 1 and {MAX_LEVEL}, got {max_level}")
        self.max_level = max_level
        self.root = HeadingNode(0, ROOT_TEXT)
        self._recent: list[HeadingNode] = []

    def add(self, heading: Heading) -> HeadingNode | None:
        """Place ``heading`` in the tree; return its node, or None if too deep."""
        if heading.level > self.max_level:
            return None
        node = HeadingNode(heading.level, heading.text, heading.line_number)
        parent = self._recent[-1] if self._recent else self.root
        while parent is not self.root and parent.level >= node.level:
            parent = parent.parent
        parent.add_child(node)
        if len(self._recent) < MAX_HEADINGS:
            self._recent.append(node)
        return node

    @classmethod
    def from_headings(cls, headings: Iterable[Heading], max_level: int = MAX_LEVEL) -> MindMap:
        """Build a mind map from headings in document order."""
        mind_map = cls(max_level)
        for heading in headings:
            mind_map.add(heading)
        return mind_map

    def _node_lines(
        self, node: HeadingNode, depth: int, is_last: bool, prefix: str, style: RenderStyle
    ) -> Iterator[str]:
        look = style.value
        branch = prefix + (look.elbow if is_last else look.tee) if depth > 0 else ""
        yield f"{branch}{style.icon(node.level)} {node.text}"
        child_prefix = prefix + (look.gap if is_last else look.pipe)
        for child, last_child in _with_last(node.children):
            yield from self._node_lines(child, depth + 1, last_child, child_prefix, style)

    def render_lines(self, style: RenderStyle = RenderStyle.TEXT) -> list[str]:
        """Return the mind map as a list of lines without line breaks."""
        look = style.value
        if not self.root.children:
            return [look.empty_message.format(max_level=self.max_level)]
        lines = [look.root_label]
        for node, is_last in _with_last(self.root.children):
            lines.extend(self._node_lines(node, 0, is_last, "", style))
        return lines

    def render(self, style: RenderStyle = RenderStyle.TEXT) -> str:
        """Return the mind map as text, each line ending with a line break."""
        return "".join(f"{line}\n" for line in self.render_lines(style))


def build_mind_map(
    lines: Iterable[str] | str,
    max_level: int = MAX_LEVEL,
    mode: ParseMode = ParseMode.STANDARD,
) -> MindMap:
    """Parse ``lines`` for headings and arrange them into a mind map."""
    return MindMap.from_headings(iter_headings(lines, mode), max_level)