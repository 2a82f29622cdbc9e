"""Site generation: navigation shell, page layout, plugins and stylesheet."""

from .plugins import PluginFeatures, normalize_plugin_name, unknown_plugins
from .site_builder import BuildResult, SiteBuilder, available_themes

__all__ = [
    "BuildResult",
    "PluginFeatures",
    "SiteBuilder",
    "available_themes",
    "normalize_plugin_name",
    "unknown_plugins",
]
