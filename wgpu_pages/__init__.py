"""Build the Learn Wgpu documentation site.

This package exposes the CLI entry points used by ``pages`` to render the
site from its configuration and Markdown pages, check the sidebar, and print
the configuration.

Exports
-------
- ``app``: Cyclopts application entry for subcommands.
- ``main``: Convenience function that invokes the Cyclopts app.

Examples
--------
>>> from wgpu_pages import main
>>> main()  # doctest: +SKIP
"""

from __future__ import annotations

from .cli import app, main

__all__ = ["app", "main"]
