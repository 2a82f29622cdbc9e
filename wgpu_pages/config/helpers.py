"""Utility helpers shared by the site configuration loader."""

from __future__ import annotations

import typing as typ

from .models import (
    AuthorConfig,
    NavGroup,
    NavigationEntry,
    NavPage,
    SiteConfigError,
    ThemeSettings,
)

DEFAULT_LAST_UPDATED_LABEL = "Last Updated"


def _optional_str(value: object | None) -> str | None:
    """Return a stripped string value or None when empty."""
    if value is None:
        return None
    text = str(value).strip()
    return text or None


def _build_author(payload: typ.Mapping[str, typ.Any] | None) -> AuthorConfig:
    """Build an AuthorConfig from the ``themeConfig.author`` mapping."""
    if not payload:
        return AuthorConfig()
    if not isinstance(payload, dict):
        msg = "'themeConfig.author' must be a mapping."
        raise SiteConfigError(msg)
    return AuthorConfig(
        name=_optional_str(payload.get("name")) or "",
        twitter=_optional_str(payload.get("twitter")),
    )


def _parse_last_updated(value: object) -> str | None:
    """Normalize ``lastUpdated`` into a label, or None when disabled."""
    match value:
        case None | False:
            return None
        case True:
            return DEFAULT_LAST_UPDATED_LABEL
        case str() as label:
            return label.strip() or DEFAULT_LAST_UPDATED_LABEL
        case _:
            msg = "'themeConfig.lastUpdated' must be a string or boolean."
            raise SiteConfigError(msg)


def _parse_plugins(value: object) -> dict[str, bool | dict[str, typ.Any]]:
    """Normalize the plugin declaration into an ordered name -> options map.

    VuePress accepts a mapping (``{name: true}``), a list of names, or a list of
    ``[name, options]`` pairs; all three collapse into the mapping form.
    """
    plugins: dict[str, bool | dict[str, typ.Any]] = {}
    match value:
        case None:
            return plugins
        case dict():
            for name, options in value.items():
                plugins[str(name)] = _plugin_options(str(name), options)
        case list():
            for item in value:
                match item:
                    case str() as name:
                        plugins[name] = True
                    case [str() as name, options]:
                        plugins[name] = _plugin_options(name, options)
                    case _:
                        msg = f"Unsupported plugin declaration: {item!r}"
                        raise SiteConfigError(msg)
        case _:
            msg = "'plugins' must be a mapping or a list."
            raise SiteConfigError(msg)
    return plugins


def _plugin_options(name: str, options: object) -> bool | dict[str, typ.Any]:
    """Return plugin options as a bool flag or a plain dict."""
    if options is None:
        return {}
    if isinstance(options, bool):
        return options
    if isinstance(options, dict):
        return dict(options)
    msg = f"Options for plugin '{name}' must be a boolean or a mapping."
    raise SiteConfigError(msg)


def _parse_sidebar(value: object) -> tuple[NavigationEntry, ...]:
    """Convert the raw ``themeConfig.sidebar`` list into navigation entries."""
    if value is None:
        return ()
    if not isinstance(value, list):
        msg = "'themeConfig.sidebar' must be a list."
        raise SiteConfigError(msg)
    return tuple(_parse_nav_entry(item) for item in value)


def _parse_nav_entry(item: object) -> NavigationEntry:
    """Return a NavPage or NavGroup for a single sidebar item."""
    match item:
        case str() as path:
            return NavPage(path)
        case dict():
            title = item.get("title")
            if not isinstance(title, str):
                msg = f"Sidebar group is missing a string 'title': {item!r}"
                raise SiteConfigError(msg)
            children = item.get("children", [])
            if not isinstance(children, list):
                msg = f"Sidebar group '{title}' must list its 'children'."
                raise SiteConfigError(msg)
            return NavGroup(
                title=title,
                children=tuple(_parse_nav_entry(child) for child in children),
                collapsable=bool(item.get("collapsable", True)),
            )
        case _:
            msg = f"Unsupported sidebar entry: {item!r}"
            raise SiteConfigError(msg)


def _build_theme_settings(payload: typ.Mapping[str, typ.Any] | None) -> ThemeSettings:
    """Build ThemeSettings from the ``themeConfig`` mapping."""
    if payload is None:
        return ThemeSettings()
    if not isinstance(payload, dict):
        msg = "'themeConfig' must be a mapping."
        raise SiteConfigError(msg)
    return ThemeSettings(
        author=_build_author(payload.get("author")),
        display_all_headers=bool(payload.get("displayAllHeaders", False)),
        last_updated=_parse_last_updated(payload.get("lastUpdated")),
        sidebar=_parse_sidebar(payload.get("sidebar")),
    )


__all__ = [
    "DEFAULT_LAST_UPDATED_LABEL",
    "_build_author",
    "_build_theme_settings",
    "_optional_str",
    "_parse_last_updated",
    "_parse_nav_entry",
    "_parse_plugins",
    "_parse_sidebar",
]
