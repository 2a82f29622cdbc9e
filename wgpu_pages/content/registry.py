"""Explicit mapping from page paths to their content fragments.

The build owns a :class:`PageRegistry` and fills it up front, either from a
directory of Markdown sources or from the bundled introduction page. Pages
never register themselves.

Example
-------
>>> from wgpu_pages.content.registry import default_registry
>>> registry = default_registry()
>>> registry.get("/").title
'Introduction'
"""

from __future__ import annotations

import collections.abc as cabc
import dataclasses as dc
import datetime as dt
import typing as typ
from pathlib import Path

from wgpu_pages._constants import DIRECTORY_PAGE_NAMES

from .parser import ContentError, parse_fragment

if typ.TYPE_CHECKING:
    from .models import ContentFragment
    from .renderer import FragmentRenderer

BUNDLED_PAGES_DIR = Path(__file__).resolve().parent / "pages"
INTRODUCTION_PAGE = BUNDLED_PAGES_DIR / "README.md"


@dc.dataclass(frozen=True, slots=True)
class ContentPage:
    """A single page: its path, fragment, and where it came from."""

    path: str
    title: str
    fragment: ContentFragment
    source: Path | None = None
    updated_at: dt.datetime | None = None


class PageRegistry:
    """Ordered mapping of page path to ContentPage."""

    def __init__(self, pages: cabc.Iterable[ContentPage] = ()) -> None:
        self._pages: dict[str, ContentPage] = {}
        for page in pages:
            self.add(page)

    def add(self, page: ContentPage) -> None:
        """Register ``page``; a path may only be registered once."""
        if page.path in self._pages:
            msg = f"Page '{page.path}' is already registered."
            raise ContentError(msg)
        self._pages[page.path] = page

    def get(self, path: str) -> ContentPage | None:
        """Return the page registered at ``path``, or None."""
        return self._pages.get(path)

    def __contains__(self, path: object) -> bool:
        return path in self._pages

    def __iter__(self) -> cabc.Iterator[ContentPage]:
        return iter(self._pages.values())

    def __len__(self) -> int:
        return len(self._pages)

    @property
    def paths(self) -> list[str]:
        """Registered page paths in insertion order."""
        return list(self._pages)

    def render(
        self,
        path: str,
        renderer: FragmentRenderer,
        slot_key: str,
        *,
        link_resolver: cabc.Callable[[str], str] | None = None,
    ) -> str:
        """Render the page at ``path`` into ``slot_key``.

        Raises
        ------
        KeyError
            If no page is registered at ``path``.
        """
        page = self._pages.get(path)
        if page is None:
            available = ", ".join(self._pages)
            msg = f"Unknown page '{path}'. Known pages: {available}"
            raise KeyError(msg)
        return renderer.render(page.fragment, slot_key, link_resolver=link_resolver)

    @classmethod
    def from_directory(cls, root: Path) -> PageRegistry:
        """Build a registry from every Markdown file below ``root``.

        ``README.md`` and ``index.md`` files map to their directory (``/``,
        ``/beginner/tutorial1-window/``); any other ``name.md`` maps to
        ``name.html``. Files are visited in sorted order. A directory holding
        both a ``README.md`` and an ``index.md`` raises ``ContentError``.

        Raises
        ------
        FileNotFoundError
            If ``root`` is not a directory.
        ContentError
            If a page cannot be parsed.
        """
        if not root.is_dir():
            msg = f"Content directory '{root}' not found."
            raise FileNotFoundError(msg)
        registry = cls()
        for source in sorted(root.rglob("*.md")):
            registry.add(load_page(source, page_path_for(source, root)))
        return registry


def page_path_for(source: Path, root: Path) -> str:
    """Return the page path a Markdown file under ``root`` is served at."""
    relative = source.relative_to(root).as_posix()
    parent, _, name = relative.rpartition("/")
    prefix = f"/{parent}/" if parent else "/"
    if name.lower() in DIRECTORY_PAGE_NAMES:
        return prefix
    return f"{prefix}{name.removesuffix('.md')}.html"


def load_page(source: Path, path: str) -> ContentPage:
    """Parse a Markdown file into a ContentPage served at ``path``."""
    try:
        fragment = parse_fragment(source.read_text(encoding="utf-8"))
    except ContentError as exc:
        msg = f"{source}: {exc}"
        raise ContentError(msg) from exc
    updated_at = dt.datetime.fromtimestamp(source.stat().st_mtime, tz=dt.UTC)
    return ContentPage(
        path=path,
        title=fragment.title or path,
        fragment=fragment,
        source=source,
        updated_at=updated_at,
    )


def introduction_fragment() -> ContentFragment:
    """Return the fragment for the bundled introduction page."""
    return parse_fragment(INTRODUCTION_PAGE.read_text(encoding="utf-8"))


def default_registry() -> PageRegistry:
    """Return a registry holding only the bundled introduction page at ``/``."""
    return PageRegistry([load_page(INTRODUCTION_PAGE, "/")])


__all__ = [
    "BUNDLED_PAGES_DIR",
    "INTRODUCTION_PAGE",
    "ContentPage",
    "PageRegistry",
    "default_registry",
    "introduction_fragment",
    "load_page",
    "page_path_for",
]
