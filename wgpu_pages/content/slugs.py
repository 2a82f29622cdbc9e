r"""Heading anchor slugs compatible with the VuePress markdown pipeline.

Anchors must match the ids the original site published so that existing deep
links (``#wgpu-とは何ですか？``) keep working.

Example
-------
>>> from wgpu_pages.content.slugs import slugify
>>> slugify("Why Rust?")
'why-rust'
>>> slugify("なぜ Rust でしょう")
'なぜ-rust-でしょう'
"""

from __future__ import annotations

import re
import unicodedata

COMBINING_MARKS = re.compile(r"[\u0300-\u036f]")
CONTROL_CHARS = re.compile(r"[\x00-\x1f]")
LEADING_DIGIT = re.compile(r"[0-9]")
SEPARATORS = re.compile(r"[\s~`!@#$%^&*()\-_+=\[\]{}|\\;:\"'“”‘’–—<>,.?/]+")
EDGE_DASHES = re.compile(r"^-+|-+$")


def slugify(text: str) -> str:
    """Return the anchor slug for a heading's plain text."""
    # Only Latin diacritics are stripped; kana voicing marks and full-width
    # punctuation survive the NFD/NFC round trip unchanged.
    slug = COMBINING_MARKS.sub("", unicodedata.normalize("NFD", text))
    slug = CONTROL_CHARS.sub("", unicodedata.normalize("NFC", slug))
    slug = SEPARATORS.sub("-", slug)
    slug = re.sub(r"-{2,}", "-", slug)
    slug = EDGE_DASHES.sub("", slug)
    if LEADING_DIGIT.match(slug):
        slug = f"_{slug}"
    return slug.lower()


def unique_slug(base: str, used: set[str]) -> str:
    """Return ``base`` or ``base-N`` not yet in ``used``, recording the result."""
    candidate = base
    suffix = 1
    while candidate in used:
        candidate = f"{base}-{suffix}"
        suffix += 1
    used.add(candidate)
    return candidate


__all__ = ["slugify", "unique_slug"]
