"""Map configured plugin names onto the layout features they switch on."""

from __future__ import annotations

import dataclasses as dc
import typing as typ

if typ.TYPE_CHECKING:
    from wgpu_pages.config import SiteSettings

KNOWN_PLUGINS = frozenset({"back-to-top", "code-copy", "seo"})
PLUGIN_PREFIXES = ("@vuepress/plugin-", "@vuepress/", "vuepress-plugin-", "plugin-")


def normalize_plugin_name(name: str) -> str:
    """Strip package prefixes: ``@vuepress/back-to-top`` -> ``back-to-top``."""
    for prefix in PLUGIN_PREFIXES:
        if name.startswith(prefix):
            return name.removeprefix(prefix)
    return name


@dc.dataclass(frozen=True, slots=True)
class PluginFeatures:
    """Layout features enabled by the site's plugin list."""

    back_to_top: bool = False
    code_copy: bool = False
    seo: dict[str, typ.Any] | None = None

    @classmethod
    def from_settings(cls, settings: SiteSettings) -> PluginFeatures:
        """Resolve the enabled plugins of ``settings``.

        A plugin set to ``False`` is disabled; ``True`` or an options mapping
        enables it.
        """
        enabled: dict[str, dict[str, typ.Any]] = {}
        for name, options in settings.plugins.items():
            if options is False:
                continue
            enabled[normalize_plugin_name(name)] = (
                options if isinstance(options, dict) else {}
            )
        return cls(
            back_to_top="back-to-top" in enabled,
            code_copy="code-copy" in enabled,
            seo=enabled.get("seo"),
        )


def unknown_plugins(settings: SiteSettings) -> list[str]:
    """Return configured plugin names this builder has no behaviour for."""
    return [
        name
        for name in settings.plugins
        if normalize_plugin_name(name) not in KNOWN_PLUGINS
    ]


def seo_meta(
    settings: SiteSettings, html_title: str, options: dict[str, typ.Any]
) -> list[dict[str, str]]:
    """Return ``<meta>`` attribute sets for the SEO plugin."""
    tags = [
        {"property": "og:title", "content": html_title},
        {"property": "og:site_name", "content": settings.title},
        {"name": "twitter:card", "content": "summary"},
    ]
    twitter = options.get("twitter") or settings.author.twitter
    if twitter:
        tags.append({"name": "twitter:creator", "content": str(twitter)})
    if settings.author.name:
        tags.append({"name": "author", "content": settings.author.name})
    return tags


__all__ = [
    "KNOWN_PLUGINS",
    "PluginFeatures",
    "normalize_plugin_name",
    "seo_meta",
    "unknown_plugins",
]
