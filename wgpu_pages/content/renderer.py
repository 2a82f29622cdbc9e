"""Render content fragments into HTML with highlighted code blocks."""

from __future__ import annotations

import re
import typing as typ
from html import escape
from pathlib import Path

from jinja2 import Environment, FileSystemLoader, select_autoescape
from markupsafe import Markup
from pygments import highlight
from pygments.formatters.html import HtmlFormatter
from pygments.lexers import get_lexer_by_name
from pygments.util import ClassNotFound

from .models import (
    BulletList,
    Code,
    CodeBlock,
    Emphasis,
    Heading,
    Link,
    Paragraph,
    Text,
)

if typ.TYPE_CHECKING:
    import collections.abc as cabc

    from .models import ContentFragment

CODEHILITE_OPEN_TAG = re.compile(r'<div class="codehilite">')
DEFAULT_TEMPLATES_DIR = Path(__file__).resolve().parents[1] / "templates"


class FragmentRenderer:
    """Render a ContentFragment into the HTML for one content slot.

    Rendering has no side effects and keeps no state between calls, so the
    same fragment and slot key always produce byte-identical output.
    """

    def __init__(
        self,
        pygments_style: str = "monokai",
        *,
        templates_dir: Path | None = None,
        code_copy: bool = False,
    ) -> None:
        """Initialize the renderer and its Jinja environment.

        Parameters
        ----------
        pygments_style : str, optional
            Name of the Pygments style used for syntax highlighting. Defaults to
            ``"monokai"``.
        templates_dir : Path, optional
            Directory containing ``fragment.jinja``; defaults to the package
            templates.
        code_copy : bool, optional
            Add a copy button to every highlighted code block.
        """
        self.pygments_style = pygments_style
        self.code_copy = code_copy
        self._formatter = HtmlFormatter(style=pygments_style, cssclass="codehilite")
        self.env = Environment(
            loader=FileSystemLoader(str(templates_dir or DEFAULT_TEMPLATES_DIR)),
            autoescape=select_autoescape(["html", "xml", "jinja"]),
            trim_blocks=True,
            lstrip_blocks=True,
        )
        self.env.filters["highlight"] = self._highlight_filter
        self.env.tests.update(
            {
                "heading_node": lambda node: isinstance(node, Heading),
                "paragraph_node": lambda node: isinstance(node, Paragraph),
                "bullet_list_node": lambda node: isinstance(node, BulletList),
                "code_block_node": lambda node: isinstance(node, CodeBlock),
                "text_node": lambda node: isinstance(node, Text),
                "code_node": lambda node: isinstance(node, Code),
                "emphasis_node": lambda node: isinstance(node, Emphasis),
                "link_node": lambda node: isinstance(node, Link),
            }
        )
        self.template = self.env.get_template("fragment.jinja")

    @property
    def stylesheet(self) -> str:
        """Return the CSS used for highlighted code blocks."""
        return self._formatter.get_style_defs(".codehilite")

    def render(
        self,
        fragment: ContentFragment,
        slot_key: str,
        *,
        link_resolver: cabc.Callable[[str], str] | None = None,
    ) -> str:
        """Render ``fragment`` into the content slot named ``slot_key``.

        Parameters
        ----------
        fragment : ContentFragment
            Page body to render.
        slot_key : str
            Layout slot the fragment fills; emitted as ``data-slot-key``.
        link_resolver : callable, optional
            Maps internal link targets onto site URLs; external links are never
            passed through it.

        Returns
        -------
        str
            HTML for the slot. Headings carry anchors with a ``#`` permalink and
            external links open in a new tab with an outbound marker.
        """
        return self.template.render(
            fragment=fragment,
            slot_key=slot_key,
            resolve_link=link_resolver or _identity,
            code_copy=self.code_copy,
        )

    def code_block(self, code: str, language: str | None = None) -> str:
        """Render ``code`` into highlighted HTML with an optional language tag.

        Parameters
        ----------
        code : str
            Source snippet to highlight.
        language : str, optional
            Pygments lexer name; defaults to ``"text"`` when not provided or
            when the lexer lookup fails.

        Returns
        -------
        str
            HTML containing the highlighted block with ``data-language``
            metadata applied.
        """
        lang = language or "text"
        try:
            lexer = get_lexer_by_name(lang)
        except ClassNotFound:
            lexer = get_lexer_by_name("text")
        html = highlight(code, lexer, self._formatter)
        return self._attach_language_attribute(html, lang)

    def _highlight_filter(self, node: CodeBlock) -> Markup:
        return Markup(self.code_block(node.code, node.language))

    @staticmethod
    def _attach_language_attribute(html: str, language: str) -> str:
        """Add a single language attribute to an already highlighted block."""
        safe_lang = escape(language or "text", quote=True)

        def _repl(match: re.Match[str]) -> str:
            return f'<div class="codehilite" data-language="{safe_lang}">'

        return CODEHILITE_OPEN_TAG.sub(_repl, html, 1)


def _identity(target: str) -> str:
    return target


__all__ = ["FragmentRenderer"]
