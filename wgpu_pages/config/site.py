"""Built-in configuration for the Learn Wgpu site.

``config/site.yaml`` at the repository root carries the same data for builds
driven from a file; ``tests/test_config_loader.py`` keeps the two in step.
"""

from __future__ import annotations

import typing as typ

from .loader import build_site_settings

if typ.TYPE_CHECKING:
    from .models import SiteSettings

LEARN_WGPU_SITE: dict[str, typ.Any] = {
    "base": "/learn-wgpu/",
    "title": "Learn Wgpu",
    "theme": "thindark",
    "plugins": {
        "vuepress-plugin-code-copy": True,
        "@vuepress/back-to-top": True,
        "seo": {},
    },
    "themeConfig": {
        "author": {
            "name": "Benjamin R Hansen",
            "twitter": "https://twitter.com/sotrh760",
        },
        "displayAllHeaders": False,
        "lastUpdated": "Last Updated",
        "sidebar": [
            "/",
            {
                "title": "Beginner",
                "collapsable": False,
                "children": [
                    "/beginner/tutorial1-window/",
                    "/beginner/tutorial2-swapchain/",
                    "/beginner/tutorial3-pipeline/",
                    "/beginner/tutorial4-buffer/",
                    "/beginner/tutorial5-textures/",
                    "/beginner/tutorial6-uniforms/",
                    "/beginner/tutorial7-instancing/",
                    "/beginner/tutorial8-depth/",
                    "/beginner/tutorial9-models/",
                ],
            },
            {
                "title": "Intermediate",
                "collapsable": False,
                "children": [
                    "/intermediate/tutorial10-lighting/",
                    "/intermediate/tutorial11-normals/",
                    "/intermediate/tutorial12-camera/",
                    "/intermediate/tutorial13-threading/",
                ],
            },
            {
                "title": "Showcase",
                "collapsable": True,
                "children": [
                    "/showcase/",
                    "/showcase/windowless/",
                    "/showcase/gifs/",
                    "/showcase/pong/",
                    "/showcase/compute/",
                    "/showcase/alignment/",
                    "/showcase/imgui-demo/",
                ],
            },
            "/news/",
        ],
    },
}


def site_settings() -> SiteSettings:
    """Return the Learn Wgpu site configuration.

    The record is rebuilt on every call and has no side effects. Sidebar paths
    are unprefixed; ``base`` is applied by the site builder.

    Examples
    --------
    >>> from wgpu_pages.config import site_settings
    >>> site_settings().title
    'Learn Wgpu'
    """
    return build_site_settings(LEARN_WGPU_SITE)


__all__ = ["LEARN_WGPU_SITE", "site_settings"]
