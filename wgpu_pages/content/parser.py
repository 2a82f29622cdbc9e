r"""Parse Markdown page sources into immutable content fragments.

Markdown is converted to HTML with Python-Markdown and the resulting tree is
walked with BeautifulSoup into :mod:`wgpu_pages.content.models` nodes. Only
the block types the page layout knows how to render are accepted; anything
else raises :class:`ContentError` so unsupported markup is caught at build
time instead of silently disappearing.

Example
-------
>>> from wgpu_pages.content.parser import parse_fragment
>>> fragment = parse_fragment("# Intro\n\nSee [wgpu](https://github.com/gfx-rs/wgpu).")
>>> fragment.title
'Intro'
>>> fragment.links()[0].external
True
"""

from __future__ import annotations

import re

from bs4 import BeautifulSoup, Comment, NavigableString, Tag
from markdown import Markdown

from .models import (
    Block,
    BulletList,
    Code,
    CodeBlock,
    ContentFragment,
    Emphasis,
    Heading,
    Inline,
    Link,
    Paragraph,
    Text,
    plain_text,
)
from .slugs import slugify, unique_slug

EXTERNAL_LINK_PATTERN = re.compile(r"^https?:", re.IGNORECASE)
HEADING_TAGS = {f"h{level}": level for level in range(1, 7)}
MARKDOWN_EXTENSIONS = ["fenced_code", "sane_lists", "tables"]


class ContentError(ValueError):
    """Raised when page content cannot be represented as a fragment."""


def is_external(href: str) -> bool:
    """Return True when ``href`` points outside the site."""
    return bool(EXTERNAL_LINK_PATTERN.match(href))


def parse_fragment(markdown_text: str) -> ContentFragment:
    """Convert Markdown into a ContentFragment.

    Parameters
    ----------
    markdown_text : str
        Page source. Headings, paragraphs, bullet lists, fenced code blocks,
        links, inline code and emphasis are supported. HTML comments are
        dropped.

    Returns
    -------
    ContentFragment
        Blocks in document order. Headings carry unique anchors derived from
        their text.

    Raises
    ------
    ContentError
        If the Markdown produces a block or inline element that has no
        fragment counterpart (tables, ordered lists, images, raw HTML, ...).
    """
    html = Markdown(extensions=MARKDOWN_EXTENSIONS).convert(markdown_text)
    soup = BeautifulSoup(html, "html.parser")
    used_anchors: set[str] = set()
    nodes: list[Block] = []
    for element in soup.children:
        if isinstance(element, Comment):
            continue
        if isinstance(element, NavigableString):
            if element.strip():
                nodes.append(Paragraph((Text(str(element).strip()),)))
            continue
        if isinstance(element, Tag):
            nodes.append(_parse_block(element, used_anchors))
    return ContentFragment(tuple(nodes))


def _parse_block(element: Tag, used_anchors: set[str]) -> Block:
    """Return the block node for a top-level HTML element."""
    name = element.name
    if name in HEADING_TAGS:
        children = _parse_inlines(element)
        anchor = unique_slug(slugify(plain_text(children)), used_anchors)
        return Heading(level=HEADING_TAGS[name], anchor=anchor, children=children)
    if name == "p":
        return Paragraph(_parse_inlines(element))
    if name == "ul":
        items = tuple(
            _parse_list_item(item) for item in element.find_all("li", recursive=False)
        )
        return BulletList(items)
    if name == "pre":
        return _parse_code_block(element)
    msg = f"Unsupported block element <{name}> in page content."
    raise ContentError(msg)


def _parse_list_item(item: Tag) -> tuple[Inline, ...]:
    """Flatten a list item (tight or loose) into one run of inline nodes."""
    inlines: list[Inline] = []
    for child in item.children:
        if isinstance(child, Tag) and child.name == "p":
            if inlines:
                inlines.append(Text(" "))
            inlines.extend(_parse_inlines(child))
        elif isinstance(child, Tag) and child.name in {"ul", "ol", "pre"}:
            msg = f"Nested <{child.name}> inside a list item is not supported."
            raise ContentError(msg)
        elif isinstance(child, NavigableString) and not child.strip():
            continue
        else:
            inlines.extend(_parse_inline_node(child))
    return tuple(inlines)


def _parse_code_block(element: Tag) -> CodeBlock:
    code = element.find("code")
    if code is None:
        return CodeBlock(code=element.get_text())
    language = None
    for css_class in code.get("class") or []:
        if css_class.startswith("language-"):
            language = css_class.removeprefix("language-") or None
            break
    return CodeBlock(code=code.get_text(), language=language)


def _parse_inlines(element: Tag) -> tuple[Inline, ...]:
    inlines: list[Inline] = []
    for child in element.children:
        inlines.extend(_parse_inline_node(child))
    return tuple(inlines)


def _parse_inline_node(node: object) -> list[Inline]:
    """Return the inline nodes for a single HTML child node."""
    if isinstance(node, Comment):
        return []
    if isinstance(node, NavigableString):
        text = str(node)
        return [Text(text)] if text else []
    if not isinstance(node, Tag):
        return []
    match node.name:
        case "a":
            href = str(node.get("href") or "")
            children = _parse_inlines(node)
            return [Link(href=href, children=children, external=is_external(href))]
        case "code":
            return [Code(node.get_text())]
        case "em":
            return [Emphasis(_parse_inlines(node), strong=False)]
        case "strong":
            return [Emphasis(_parse_inlines(node), strong=True)]
        case "br":
            return [Text("\n")]
        case _:
            msg = f"Unsupported inline element <{node.name}> in page content."
            raise ContentError(msg)


__all__ = ["ContentError", "is_external", "parse_fragment"]
