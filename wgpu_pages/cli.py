"""Cyclopts CLI entrypoint for building and checking the Learn Wgpu site.

The ``pages`` console script defined here renders the static site from the
site configuration and a directory of Markdown pages, checks the sidebar for
authoring mistakes, and prints the configuration in YAML or JSON. Without
``--config`` the built-in Learn Wgpu configuration is used; without
``--content`` only the bundled introduction page is rendered.

Examples
--------
Build the site into ``public``:

>>> from wgpu_pages.cli import main
>>> main()  # doctest: +SKIP

Build from a checked-out docs tree with a custom configuration:

>>> from wgpu_pages.cli import app
>>> app(
...     ["build", "--config", "config/site.yaml", "--content", "docs"]
... )  # doctest: +SKIP
"""

from __future__ import annotations

import sys
import typing as typ
from pathlib import Path

import cyclopts
from cyclopts import App, Parameter

from .config import (
    dump_site_config,
    dumps_site_config_json,
    load_site_config,
    site_settings,
)
from .content import PageRegistry, default_registry
from .generator import SiteBuilder, unknown_plugins
from .navigation import page_paths, validate_navigation

if typ.TYPE_CHECKING:
    from .config import SiteSettings

DEFAULT_OUTPUT_DIR = Path("public")

app = App(name="pages", config=cyclopts.config.Env("INPUT_", command=False))  # type: ignore[unknown-argument]


def _format_path(path: Path) -> str:
    """Return a cwd-relative path when possible, otherwise the absolute path."""
    if path.is_absolute():
        try:
            return str(path.relative_to(Path.cwd()))
        except ValueError:  # pragma: no cover - fallback for different roots
            return str(path)
    return str(path)


def _resolve_settings(config: Path | None) -> SiteSettings:
    """Load ``config`` when given, otherwise return the built-in settings."""
    if config is None:
        return site_settings()
    return load_site_config(config)


@app.command(help="Render the site from Markdown pages into static HTML.")
def build(
    *,
    config: typ.Annotated[
        Path | None, Parameter(help="Path to site config", env_var="INPUT_CONFIG")
    ] = None,
    content: typ.Annotated[
        Path | None,
        Parameter(help="Directory of Markdown pages", env_var="INPUT_CONTENT"),
    ] = None,
    output_dir: typ.Annotated[
        Path, Parameter(help="Output folder", env_var="INPUT_OUTPUT_DIR")
    ] = DEFAULT_OUTPUT_DIR,
    strict: typ.Annotated[
        bool, Parameter(help="Fail on sidebar problems or missing pages")
    ] = False,
) -> None:
    """Build the site for the requested configuration.

    Parameters
    ----------
    config : Path or None, optional
        YAML site configuration; the built-in Learn Wgpu settings are used
        when ``None`` (overridable via ``INPUT_CONFIG``).
    content : Path or None, optional
        Directory of Markdown pages (``README.md`` per page directory); when
        ``None`` only the bundled introduction page is rendered.
    output_dir : Path, optional
        Directory receiving the generated HTML and stylesheet.
    strict : bool, optional
        Raise instead of reporting sidebar problems and missing pages.

    Returns
    -------
    None
        Writes rendered artifacts and prints the generated paths followed by
        any sidebar paths that have no page.
    """
    settings = _resolve_settings(config)
    registry = PageRegistry.from_directory(content) if content else default_registry()
    for name in unknown_plugins(settings):
        print(f"ignoring unknown plugin {name}")
    builder = SiteBuilder(settings, registry, output_dir=output_dir, strict=strict)
    result = builder.run()
    for path in result.written:
        print(f"wrote {_format_path(path)}")
    for path in result.missing:
        print(f"missing {path}")


@app.command(help="Check the sidebar for invalid, empty or duplicate entries.")
def check(
    *,
    config: typ.Annotated[
        Path | None, Parameter(help="Path to site config", env_var="INPUT_CONFIG")
    ] = None,
) -> None:
    """Validate the sidebar of the site configuration.

    Prints one line per problem and exits with status 1 when any are found;
    otherwise prints the number of sidebar pages.
    """
    settings = _resolve_settings(config)
    problems = validate_navigation(settings.sidebar)
    for problem in problems:
        print(f"{problem.kind}: {problem.message}")
    if problems:
        raise SystemExit(1)
    print(f"navigation ok ({len(page_paths(settings.sidebar))} pages)")


@app.command(help="Print the site configuration as YAML or JSON.")
def nav(
    *,
    config: typ.Annotated[
        Path | None, Parameter(help="Path to site config", env_var="INPUT_CONFIG")
    ] = None,
    format: typ.Annotated[  # noqa: A002 - mirrors the CLI flag
        typ.Literal["yaml", "json"], Parameter(help="Output format")
    ] = "yaml",
) -> None:
    """Print the resolved configuration; paths are printed without ``base``."""
    settings = _resolve_settings(config)
    if format == "json":
        print(dumps_site_config_json(settings).decode("utf-8"))
        return
    dump_site_config(settings, sys.stdout)


def main() -> None:
    """Invoke the Cyclopts application that powers the `pages` console command.

    Examples
    --------
    >>> main()  # doctest: +SKIP
    """
    app()


if __name__ == "__main__":  # pragma: no cover - manual invocation helper
    main()
