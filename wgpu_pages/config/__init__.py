"""Load and serialize the site configuration.

This subpackage turns the VuePress-style site configuration (``base``,
``title``, ``theme``, ``plugins`` and ``themeConfig``) into frozen dataclasses
that the site builder consumes. :func:`site_settings` returns the built-in
Learn Wgpu configuration; :func:`load_site_config` reads the same shape from a
YAML file. Neither applies ``base`` to sidebar paths.

Examples
--------
>>> from wgpu_pages.config import site_settings
>>> settings = site_settings()
>>> settings.base
'/learn-wgpu/'
>>> settings.sidebar[0]
NavPage(path='/')
"""

from .loader import build_site_settings, load_site_config
from .models import (
    AuthorConfig,
    NavGroup,
    NavigationEntry,
    NavPage,
    SiteConfigError,
    SiteSettings,
    ThemeSettings,
)
from .serialize import (
    dump_site_config,
    dumps_site_config_json,
    loads_site_config_json,
    settings_to_mapping,
)
from .site import LEARN_WGPU_SITE, site_settings

__all__ = [
    "LEARN_WGPU_SITE",
    "AuthorConfig",
    "NavGroup",
    "NavPage",
    "NavigationEntry",
    "SiteConfigError",
    "SiteSettings",
    "ThemeSettings",
    "build_site_settings",
    "dump_site_config",
    "dumps_site_config_json",
    "load_site_config",
    "loads_site_config_json",
    "settings_to_mapping",
    "site_settings",
]
