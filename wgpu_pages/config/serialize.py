"""Serialize SiteSettings back into the VuePress-shaped mapping.

The mapping can be written as YAML (ruamel round-trip dumper, matching the
layout of ``config/site.yaml``) or as JSON via msgspec. Loading either output
with :func:`build_site_settings` reproduces an equal record.
"""

from __future__ import annotations

import typing as typ

import msgspec
import msgspec.json as msgspec_json
from ruamel.yaml import YAML

from .loader import build_site_settings
from .models import NavGroup, NavigationEntry, SiteConfigError, SiteSettings


def settings_to_mapping(settings: SiteSettings) -> dict[str, typ.Any]:
    """Return ``settings`` as a plain mapping using the VuePress key names."""
    author: dict[str, str] = {"name": settings.author.name}
    if settings.author.twitter is not None:
        author["twitter"] = settings.author.twitter
    theme_config = settings.theme_config
    return {
        "base": settings.base,
        "title": settings.title,
        "theme": settings.theme,
        "plugins": {
            name: options if isinstance(options, bool) else dict(options)
            for name, options in settings.plugins.items()
        },
        "themeConfig": {
            "author": author,
            "displayAllHeaders": theme_config.display_all_headers,
            "lastUpdated": theme_config.last_updated or False,
            "sidebar": [_entry_to_raw(entry) for entry in theme_config.sidebar],
        },
    }


def _entry_to_raw(entry: NavigationEntry) -> str | dict[str, typ.Any]:
    if isinstance(entry, NavGroup):
        return {
            "title": entry.title,
            "collapsable": entry.collapsable,
            "children": [_entry_to_raw(child) for child in entry.children],
        }
    return entry.path


def _build_roundtrip_yaml() -> YAML:
    yaml = YAML()
    yaml.width = 120
    yaml.indent(mapping=2, sequence=4, offset=2)
    return yaml


def dump_site_config(settings: SiteSettings, stream: typ.TextIO) -> None:
    """Write ``settings`` to ``stream`` as YAML."""
    _build_roundtrip_yaml().dump(settings_to_mapping(settings), stream)


def dumps_site_config_json(settings: SiteSettings) -> bytes:
    """Return ``settings`` encoded as JSON bytes."""
    return msgspec_json.encode(settings_to_mapping(settings))


def loads_site_config_json(data: bytes | str) -> SiteSettings:
    """Decode JSON produced by :func:`dumps_site_config_json`.

    Raises
    ------
    SiteConfigError
        If ``data`` is not valid JSON or does not describe a site.
    """
    try:
        raw = msgspec_json.decode(data)
    except msgspec.DecodeError as exc:
        msg = f"Invalid site configuration JSON: {exc}"
        raise SiteConfigError(msg) from exc
    return build_site_settings(raw)


__all__ = [
    "dump_site_config",
    "dumps_site_config_json",
    "loads_site_config_json",
    "settings_to_mapping",
]
