"""Render the whole site: navigation shell plus every registered page.

This module plays the part of the static-site generator. It consumes a
:class:`~wgpu_pages.config.SiteSettings` and a
:class:`~wgpu_pages.content.PageRegistry`, lays every page out with the
sidebar, header and footer described by the settings, and writes the HTML and
stylesheet under ``output_dir``. The ``base`` prefix is applied here and only
here; the configuration itself always carries unprefixed paths.

Example
-------
>>> from pathlib import Path
>>> from wgpu_pages.config import site_settings
>>> from wgpu_pages.content import default_registry
>>> from wgpu_pages.generator import SiteBuilder
>>> builder = SiteBuilder(
...     site_settings(), default_registry(), output_dir=Path("public")
... )
>>> builder.url_for("/beginner/tutorial1-window/")
'/learn-wgpu/beginner/tutorial1-window/'
>>> builder.run()  # doctest: +SKIP
BuildResult(written=[PosixPath('public/index.html'), ...], missing=[...])
"""

from __future__ import annotations

import dataclasses as dc
import typing as typ
from pathlib import Path

from jinja2 import Environment, FileSystemLoader, select_autoescape

from wgpu_pages._constants import DEFAULT_SLOT_KEY, STYLESHEET_PATH
from wgpu_pages.config import NavGroup, SiteConfigError
from wgpu_pages.content import FragmentRenderer, InternalLinkResolver
from wgpu_pages.navigation import contains_path, ensure_valid_navigation, iter_pages

from .plugins import PluginFeatures, seo_meta

if typ.TYPE_CHECKING:
    from wgpu_pages.config import NavigationEntry, SiteSettings
    from wgpu_pages.content import ContentPage, PageRegistry

DEFAULT_TEMPLATES_DIR = Path(__file__).resolve().parents[1] / "templates"


@dc.dataclass(slots=True)
class BuildResult:
    """Outcome of a site build.

    Attributes
    ----------
    written : list[Path]
        Files written, pages first (in registry order) then the stylesheet.
    missing : list[str]
        Sidebar paths with no registered page, in sidebar order.
    """

    written: list[Path] = dc.field(default_factory=list)
    missing: list[str] = dc.field(default_factory=list)


def available_themes(templates_dir: Path | None = None) -> list[str]:
    """Return the theme names that ship a stylesheet under ``themes/``."""
    themes_dir = (templates_dir or DEFAULT_TEMPLATES_DIR) / "themes"
    return sorted(path.stem for path in themes_dir.glob("*.css"))


class SiteBuilder:
    """Lay out registered pages with the configured navigation shell."""

    def __init__(
        self,
        settings: SiteSettings,
        registry: PageRegistry,
        *,
        output_dir: Path = Path("public"),
        templates_dir: Path | None = None,
        pygments_style: str = "monokai",
        strict: bool = False,
    ) -> None:
        """Initialize the builder and its Jinja environment.

        Parameters
        ----------
        settings : SiteSettings
            Site configuration providing the base path, theme, plugins and
            sidebar.
        registry : PageRegistry
            Pages to render, keyed by page path.
        output_dir : Path, optional
            Directory receiving the generated files. Defaults to ``public``.
        templates_dir : Path, optional
            Directory containing ``page.jinja``, ``fragment.jinja`` and
            ``themes/``; defaults to the package templates.
        pygments_style : str, optional
            Pygments style used for code blocks and the generated CSS.
        strict : bool, optional
            Fail the build on sidebar problems or missing pages instead of
            reporting them in the result.

        Raises
        ------
        SiteConfigError
            If ``settings.theme`` names a theme without a stylesheet.
        """
        self.settings = settings
        self.registry = registry
        self.output_dir = output_dir
        self.templates_dir = templates_dir or DEFAULT_TEMPLATES_DIR
        self.strict = strict
        themes = available_themes(self.templates_dir)
        if settings.theme not in themes:
            msg = (
                f"Unknown theme '{settings.theme}'. "
                f"Available themes: {', '.join(themes)}"
            )
            raise SiteConfigError(msg)
        self.plugins = PluginFeatures.from_settings(settings)
        self.renderer = FragmentRenderer(
            pygments_style,
            templates_dir=self.templates_dir,
            code_copy=self.plugins.code_copy,
        )
        self.env = Environment(
            loader=FileSystemLoader(str(self.templates_dir)),
            autoescape=select_autoescape(["html", "xml", "jinja"]),
            trim_blocks=True,
            lstrip_blocks=True,
        )
        self.template = self.env.get_template("page.jinja")

    def run(self) -> BuildResult:
        """Render every registered page and the stylesheet to disk.

        Returns
        -------
        BuildResult
            Written paths and the sidebar paths that have no page.

        Raises
        ------
        NavigationError
            In strict mode, when the sidebar breaks an authoring rule.
        SiteConfigError
            In strict mode, when a sidebar path has no registered page.
        """
        missing = self.missing_pages()
        if self.strict:
            ensure_valid_navigation(self.settings.sidebar)
            if missing:
                msg = f"Sidebar pages without content: {', '.join(missing)}"
                raise SiteConfigError(msg)

        result = BuildResult(missing=missing)
        for page in self.registry:
            output_path = self.output_path_for(page.path)
            output_path.parent.mkdir(parents=True, exist_ok=True)
            html = self.render_page(page)
            output_path.write_text(html, encoding="utf-8")
            result.written.append(output_path)
        result.written.append(self._write_stylesheet())
        return result

    def render_page(self, page: ContentPage) -> str:
        """Return the full HTML document for ``page``."""
        html_title = self.format_page_title(page.title)
        content_html = self.registry.render(
            page.path,
            self.renderer,
            DEFAULT_SLOT_KEY,
            link_resolver=InternalLinkResolver(self.settings.base, page.path),
        )
        context = {
            "site": self.settings,
            "page": page,
            "html_title": html_title,
            "home_url": self.url_for("/"),
            "stylesheet_url": self.url_for(STYLESHEET_PATH),
            "sidebar": self.sidebar_for(page.path),
            "content_html": content_html,
            "last_updated": self._last_updated(page),
            "plugins": self.plugins,
            "seo_meta": (
                seo_meta(self.settings, html_title, self.plugins.seo)
                if self.plugins.seo is not None
                else []
            ),
        }
        html = self.template.render(**context)
        if not html.endswith("\n"):
            html += "\n"
        return html

    def url_for(self, path: str) -> str:
        """Prefix ``path`` with the site base: ``/news/`` -> ``/learn-wgpu/news/``."""
        return self.settings.base.rstrip("/") + "/" + path.lstrip("/")

    def output_path_for(self, path: str) -> Path:
        """Return the file a page path is written to under ``output_dir``."""
        relative = path.strip("/")
        if not relative:
            return self.output_dir / "index.html"
        if path.endswith("/"):
            return self.output_dir / relative / "index.html"
        return self.output_dir / relative

    def format_page_title(self, page_title: str) -> str:
        """Compose the ``<title>`` from page and site titles."""
        site_title = self.settings.title
        if not site_title or page_title == site_title:
            return page_title
        return f"{page_title} | {site_title}"

    def missing_pages(self) -> list[str]:
        """Return sidebar paths that have no registered page."""
        return [
            leaf.path
            for leaf in iter_pages(self.settings.sidebar)
            if leaf.path not in self.registry
        ]

    def sidebar_for(self, active_path: str) -> list[dict[str, typ.Any]]:
        """Build the sidebar model for the page at ``active_path``.

        Groups keep their order and collapsibility and are open when they
        are not collapsable or contain the active page. Page entries list
        their second-level headers when active, or always when
        ``displayAllHeaders`` is set.
        """
        return [
            self._sidebar_item(entry, active_path) for entry in self.settings.sidebar
        ]

    def _sidebar_item(
        self, entry: NavigationEntry, active_path: str
    ) -> dict[str, typ.Any]:
        if isinstance(entry, NavGroup):
            return {
                "type": "group",
                "title": entry.title,
                "collapsable": entry.collapsable,
                "is_open": not entry.collapsable or contains_path(entry, active_path),
                "children": [
                    self._sidebar_item(child, active_path) for child in entry.children
                ],
            }

        page = self.registry.get(entry.path)
        is_active = entry.path == active_path
        href = self.url_for(entry.path)
        headers: list[dict[str, str]] = []
        if page is not None and (
            is_active or self.settings.theme_config.display_all_headers
        ):
            page_url = "" if is_active else href
            headers = [
                {"label": heading.text, "href": f"{page_url}#{heading.anchor}"}
                for heading in page.fragment.headings(2)
            ]
        return {
            "type": "page",
            "path": entry.path,
            "label": page.title if page is not None else entry.path,
            "href": href,
            "is_active": is_active,
            "missing": page is None,
            "headers": headers,
        }

    def _last_updated(self, page: ContentPage) -> dict[str, str] | None:
        label = self.settings.theme_config.last_updated
        if not label or page.updated_at is None:
            return None
        return {
            "label": label,
            "value": page.updated_at.strftime("%b %d, %Y"),
            "iso": page.updated_at.isoformat(),
        }

    def _write_stylesheet(self) -> Path:
        theme_css = self.templates_dir / "themes" / f"{self.settings.theme}.css"
        css = theme_css.read_text(encoding="utf-8").rstrip("\n")
        output_path = self.output_dir / STYLESHEET_PATH.lstrip("/")
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(
            f"{css}\n\n{self.renderer.stylesheet}\n", encoding="utf-8"
        )
        return output_path


__all__ = ["BuildResult", "SiteBuilder", "available_themes"]
