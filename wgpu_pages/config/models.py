"""Typed dataclasses describing the site configuration structures."""

from __future__ import annotations

import dataclasses as dc
import typing as typ


class SiteConfigError(ValueError):
    """Raised when the site configuration is invalid or incomplete."""


@dc.dataclass(frozen=True, slots=True)
class NavPage:
    """Sidebar leaf pointing at a single page path (``/beginner/``)."""

    path: str


@dc.dataclass(frozen=True, slots=True)
class NavGroup:
    """Titled, ordered collection of sidebar entries."""

    title: str
    children: tuple[NavigationEntry, ...]
    collapsable: bool = True


NavigationEntry: typ.TypeAlias = NavPage | NavGroup


@dc.dataclass(frozen=True, slots=True)
class AuthorConfig:
    """Author metadata shown in the page footer and SEO tags."""

    name: str = ""
    twitter: str | None = None


@dc.dataclass(frozen=True, slots=True)
class ThemeSettings:
    """Options handed to the theme when laying out each page.

    Attributes
    ----------
    author : AuthorConfig
        Author name and optional social handle.
    display_all_headers : bool
        List the sub-headers of every page in the sidebar, not only the
        active one.
    last_updated : str | None
        Label rendered in front of the page modification date; ``None``
        disables the footer line.
    sidebar : tuple[NavigationEntry, ...]
        Sidebar tree in display order.
    """

    author: AuthorConfig = AuthorConfig()
    display_all_headers: bool = False
    last_updated: str | None = None
    sidebar: tuple[NavigationEntry, ...] = ()


@dc.dataclass(frozen=True, slots=True)
class SiteSettings:
    """A fully resolved site definition."""

    base: str = "/"
    title: str = ""
    theme: str = "default"
    plugins: dict[str, bool | dict[str, typ.Any]] = dc.field(default_factory=dict)
    theme_config: ThemeSettings = ThemeSettings()

    @property
    def sidebar(self) -> tuple[NavigationEntry, ...]:
        """Shortcut for ``theme_config.sidebar``."""
        return self.theme_config.sidebar

    @property
    def author(self) -> AuthorConfig:
        """Shortcut for ``theme_config.author``."""
        return self.theme_config.author


__all__ = [
    "AuthorConfig",
    "NavGroup",
    "NavPage",
    "NavigationEntry",
    "SiteConfigError",
    "SiteSettings",
    "ThemeSettings",
]
