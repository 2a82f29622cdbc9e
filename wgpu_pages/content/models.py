"""Immutable node types making up a rendered page fragment."""

from __future__ import annotations

import dataclasses as dc
import typing as typ


@dc.dataclass(frozen=True, slots=True)
class Text:
    """Literal run of text."""

    text: str


@dc.dataclass(frozen=True, slots=True)
class Code:
    """Inline code span."""

    text: str


@dc.dataclass(frozen=True, slots=True)
class Emphasis:
    """Emphasised (``<em>``) or strong (``<strong>``) inline content."""

    children: tuple[Inline, ...]
    strong: bool = False


@dc.dataclass(frozen=True, slots=True)
class Link:
    """Hyperlink; ``external`` links get outbound decoration when rendered."""

    href: str
    children: tuple[Inline, ...]
    external: bool = False


Inline: typ.TypeAlias = Text | Code | Emphasis | Link


@dc.dataclass(frozen=True, slots=True)
class Heading:
    """Section heading carrying the anchor used for in-page deep links."""

    level: int
    anchor: str
    children: tuple[Inline, ...]

    @property
    def text(self) -> str:
        """Plain text of the heading."""
        return plain_text(self.children)


@dc.dataclass(frozen=True, slots=True)
class Paragraph:
    """Paragraph of inline content."""

    children: tuple[Inline, ...]


@dc.dataclass(frozen=True, slots=True)
class BulletList:
    """Unordered list; each item is a run of inline content."""

    items: tuple[tuple[Inline, ...], ...]


@dc.dataclass(frozen=True, slots=True)
class CodeBlock:
    """Fenced code block with an optional language tag."""

    code: str
    language: str | None = None


Block: typ.TypeAlias = Heading | Paragraph | BulletList | CodeBlock


@dc.dataclass(frozen=True, slots=True)
class ContentFragment:
    """Ordered sequence of blocks making up a page body.

    Attributes
    ----------
    nodes : tuple[Block, ...]
        Blocks in document order. Fragments are built once and never
        modified afterwards.
    """

    nodes: tuple[Block, ...] = ()

    @property
    def title(self) -> str | None:
        """Text of the first level-one heading, if any."""
        for heading in self.headings(1):
            return heading.text
        return None

    def headings(self, level: int | None = None) -> list[Heading]:
        """Return headings in document order, optionally filtered by level."""
        return [
            node
            for node in self.nodes
            if isinstance(node, Heading) and (level is None or node.level == level)
        ]

    def links(self) -> list[Link]:
        """Return every link in the fragment, including nested ones."""
        found: list[Link] = []
        for node in self.nodes:
            match node:
                case Heading(children=children) | Paragraph(children=children):
                    _collect_links(children, found)
                case BulletList(items=items):
                    for item in items:
                        _collect_links(item, found)
                case _:
                    pass
        return found


def _collect_links(children: typ.Iterable[Inline], found: list[Link]) -> None:
    for child in children:
        match child:
            case Link():
                found.append(child)
                _collect_links(child.children, found)
            case Emphasis():
                _collect_links(child.children, found)
            case _:
                pass


def plain_text(children: typ.Iterable[Inline]) -> str:
    """Flatten inline nodes into their text content."""
    parts: list[str] = []
    for child in children:
        match child:
            case Text(text=text) | Code(text=text):
                parts.append(text)
            case Emphasis(children=nested) | Link(children=nested):
                parts.append(plain_text(nested))
    return "".join(parts)


__all__ = [
    "Block",
    "BulletList",
    "Code",
    "CodeBlock",
    "ContentFragment",
    "Emphasis",
    "Heading",
    "Inline",
    "Link",
    "Paragraph",
    "Text",
    "plain_text",
]
