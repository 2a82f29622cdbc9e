"""Load site configuration YAML into typed dataclasses."""

from __future__ import annotations

import typing as typ

from ruamel.yaml import YAML

from .helpers import _build_theme_settings, _optional_str, _parse_plugins
from .models import SiteConfigError, SiteSettings

if typ.TYPE_CHECKING:
    from pathlib import Path


def load_site_config(path: Path) -> SiteSettings:
    """Load the YAML configuration describing the site and its sidebar.

    Parameters
    ----------
    path : Path
        Filesystem path to the YAML configuration file (for example,
        ``config/site.yaml``).

    Returns
    -------
    SiteSettings
        Parsed site configuration. Sidebar paths are returned exactly as
        written; the ``base`` prefix is applied later by the site builder.

    Raises
    ------
    FileNotFoundError
        If the configuration file does not exist at ``path``.
    SiteConfigError
        If the document is not a mapping or a field has the wrong shape.
    YAMLError
        If the YAML content cannot be parsed by the underlying loader.

    Examples
    --------
    >>> from pathlib import Path
    >>> from wgpu_pages.config import load_site_config
    >>> settings = load_site_config(Path("config/site.yaml"))  # doctest: +SKIP
    >>> settings.base  # doctest: +SKIP
    '/learn-wgpu/'
    """
    if not path.exists():
        msg = f"Configuration file '{path}' not found."
        raise FileNotFoundError(msg)

    loader = YAML(typ="safe")
    loader.version = (1, 2)
    with path.open("r", encoding="utf-8") as handle:
        loaded = loader.load(handle) or {}
    return build_site_settings(loaded)


def build_site_settings(raw: typ.Mapping[str, typ.Any]) -> SiteSettings:
    """Build SiteSettings from a VuePress-shaped mapping.

    Both the YAML loader and the built-in configuration go through this
    function, so the two always agree on defaults and validation.
    """
    if not isinstance(raw, dict):
        msg = "Top-level configuration must be a mapping."
        raise SiteConfigError(msg)
    base = _optional_str(raw.get("base")) or "/"
    if not base.startswith("/") or not base.endswith("/"):
        msg = f"'base' must start and end with '/': {base!r}"
        raise SiteConfigError(msg)
    return SiteSettings(
        base=base,
        title=_optional_str(raw.get("title")) or "",
        theme=_optional_str(raw.get("theme")) or "default",
        plugins=_parse_plugins(raw.get("plugins")),
        theme_config=_build_theme_settings(raw.get("themeConfig")),
    )


__all__ = ["build_site_settings", "load_site_config"]
