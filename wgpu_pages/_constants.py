"""Common literal values used across wgpu_pages.

These constants keep slot names and asset paths centralized so templates,
builders, and tests can import the same values without drifting.

Examples
--------
>>> from wgpu_pages import _constants
>>> _constants.DEFAULT_SLOT_KEY
'default'
>>> _constants.STYLESHEET_PATH.startswith('/')
True
"""

DEFAULT_SLOT_KEY = "default"
STYLESHEET_PATH = "/assets/style.css"
# Markdown files served as their directory's page (``a/README.md`` -> ``/a/``).
DIRECTORY_PAGE_NAMES = frozenset({"readme.md", "index.md"})
