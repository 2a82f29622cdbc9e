"""Resolve relative Markdown links into site URLs.

Page sources link to each other the way they sit on disk
(``../tutorial2-swapchain/README.md``). When a page is rendered those targets
have to become the URLs the site is served under
(``/learn-wgpu/beginner/tutorial2-swapchain/``).
"""

from __future__ import annotations

import posixpath
from urllib.parse import urlsplit

from wgpu_pages._constants import DIRECTORY_PAGE_NAMES

IGNORED_PREFIXES = ("http://", "https://", "mailto:", "tel:", "data:", "javascript:")


class InternalLinkResolver:
    """Rewrite page-relative links against the page path and site base."""

    def __init__(self, base: str, page_path: str) -> None:
        self.base = base
        self.page_path = page_path

    def __call__(self, target: str) -> str:
        """Return the resolved URL for ``target``, or ``target`` unchanged."""
        return self.resolve(target) or target

    def resolve(self, target: str | None) -> str | None:
        """Return the site URL for an internal link, or None when not internal."""
        if not target:
            return None
        if target.lower().startswith(IGNORED_PREFIXES):
            return None
        if target.startswith(("#", "//")) or "://" in target:
            return None

        parsed = urlsplit(target)
        if parsed.scheme or parsed.netloc or not parsed.path:
            return None

        if parsed.path.startswith("/"):
            joined = parsed.path
        else:
            page_dir = self.page_path
            if not page_dir.endswith("/"):
                page_dir = posixpath.dirname(page_dir) + "/"
            # normpath clamps ".." at the root and drops trailing slashes.
            joined = posixpath.normpath(posixpath.join(page_dir, parsed.path))
            if parsed.path.endswith("/") and not joined.endswith("/"):
                joined = f"{joined}/"

        url = self.base.rstrip("/") + _page_path_for(joined)
        if parsed.query:
            url = f"{url}?{parsed.query}"
        if parsed.fragment:
            url = f"{url}#{parsed.fragment}"
        return url


def _page_path_for(path: str) -> str:
    """Map a Markdown file path onto the page path it is served under."""
    head, name = posixpath.split(path)
    if name.lower() in DIRECTORY_PAGE_NAMES:
        return head.rstrip("/") + "/"
    if name.endswith(".md"):
        return f"{head.rstrip('/')}/{name[:-3]}.html"
    return path


__all__ = ["InternalLinkResolver"]
