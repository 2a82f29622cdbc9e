"""Traverse and validate the sidebar navigation tree.

The loader returns the sidebar exactly as authored. Nothing here runs
implicitly: callers that want authoring rules enforced (the ``pages check``
command, or ``SiteBuilder(strict=True)``) call :func:`validate_navigation`
or :func:`ensure_valid_navigation` themselves.

Example
-------
>>> from wgpu_pages.config import site_settings
>>> from wgpu_pages.navigation import page_paths
>>> page_paths(site_settings().sidebar)[:2]
['/', '/beginner/tutorial1-window/']
"""

from __future__ import annotations

import collections.abc as cabc
import dataclasses as dc
import typing as typ

from .config import NavGroup, NavPage, SiteConfigError

if typ.TYPE_CHECKING:
    from .config import NavigationEntry


@dc.dataclass(frozen=True, slots=True)
class NavigationProblem:
    """Single authoring problem found in the sidebar tree.

    Attributes
    ----------
    kind : str
        One of ``"invalid-path"``, ``"empty-title"``, ``"empty-group"`` or
        ``"duplicate-path"``.
    message : str
        Human-readable description naming the offending entry.
    """

    kind: str
    message: str


class NavigationError(SiteConfigError):
    """Raised when the sidebar tree breaks an authoring rule."""

    def __init__(self, problems: cabc.Sequence[NavigationProblem]) -> None:
        self.problems = tuple(problems)
        details = "; ".join(problem.message for problem in self.problems)
        super().__init__(f"Invalid navigation: {details}")


def iter_pages(entries: cabc.Iterable[NavigationEntry]) -> cabc.Iterator[NavPage]:
    """Yield every leaf depth-first, in display order."""
    for entry in entries:
        if isinstance(entry, NavGroup):
            yield from iter_pages(entry.children)
        else:
            yield entry


def page_paths(entries: cabc.Iterable[NavigationEntry]) -> list[str]:
    """Return the path of every leaf, in display order."""
    return [page.path for page in iter_pages(entries)]


def find_group(
    entries: cabc.Iterable[NavigationEntry], title: str
) -> NavGroup | None:
    """Return the first group titled ``title`` at any depth, or None."""
    for entry in entries:
        if not isinstance(entry, NavGroup):
            continue
        if entry.title == title:
            return entry
        nested = find_group(entry.children, title)
        if nested is not None:
            return nested
    return None


def group_of(entries: cabc.Iterable[NavigationEntry], path: str) -> NavGroup | None:
    """Return the innermost group holding the leaf ``path``.

    Top-level leaves and unknown paths both return None.
    """
    for entry in entries:
        if not isinstance(entry, NavGroup):
            continue
        nested = group_of(entry.children, path)
        if nested is not None:
            return nested
        if any(
            isinstance(child, NavPage) and child.path == path
            for child in entry.children
        ):
            return entry
    return None


def contains_path(entry: NavigationEntry, path: str) -> bool:
    """Return True when ``path`` is ``entry`` or a leaf beneath it."""
    if isinstance(entry, NavGroup):
        return any(contains_path(child, path) for child in entry.children)
    return entry.path == path


def validate_navigation(
    entries: cabc.Iterable[NavigationEntry],
) -> list[NavigationProblem]:
    """Check the sidebar tree and return every problem found.

    Leaves must be non-empty and start with ``/``; groups need a non-empty
    title and at least one child; no path may appear twice anywhere in the
    tree. An empty list means the tree is valid.
    """
    problems: list[NavigationProblem] = []
    seen: set[str] = set()
    _collect_problems(entries, problems, seen)
    return problems


def _collect_problems(
    entries: cabc.Iterable[NavigationEntry],
    problems: list[NavigationProblem],
    seen: set[str],
) -> None:
    for entry in entries:
        if isinstance(entry, NavGroup):
            if not entry.title.strip():
                problems.append(
                    NavigationProblem("empty-title", "sidebar group has an empty title")
                )
            if not entry.children:
                problems.append(
                    NavigationProblem(
                        "empty-group", f"sidebar group '{entry.title}' has no children"
                    )
                )
            _collect_problems(entry.children, problems, seen)
            continue
        if not entry.path.startswith("/"):
            problems.append(
                NavigationProblem(
                    "invalid-path", f"sidebar path {entry.path!r} must start with '/'"
                )
            )
        if entry.path in seen:
            problems.append(
                NavigationProblem(
                    "duplicate-path", f"sidebar path {entry.path!r} appears twice"
                )
            )
        seen.add(entry.path)


def ensure_valid_navigation(entries: cabc.Iterable[NavigationEntry]) -> None:
    """Raise NavigationError listing every problem in ``entries``."""
    problems = validate_navigation(entries)
    if problems:
        raise NavigationError(problems)


__all__ = [
    "NavigationError",
    "NavigationProblem",
    "contains_path",
    "ensure_valid_navigation",
    "find_group",
    "group_of",
    "iter_pages",
    "page_paths",
    "validate_navigation",
]
