"""Unit tests for loading and serializing the site configuration.

These tests cover ``site_settings`` (the built-in Learn Wgpu configuration),
``load_site_config`` for YAML files, and the YAML/JSON serializers. They check
that the file under ``config/site.yaml`` matches the built-in record, that
sidebar order survives a round trip, and that malformed shapes raise
``SiteConfigError``.

Usage
-----
Run ``pytest tests/test_config_loader.py -v``. Only pytest's built-in
``tmp_path`` fixture is required.
"""

from __future__ import annotations

import io
import typing as typ
from pathlib import Path

import pytest

from wgpu_pages.config import (
    AuthorConfig,
    NavGroup,
    NavPage,
    SiteConfigError,
    build_site_settings,
    dump_site_config,
    dumps_site_config_json,
    load_site_config,
    loads_site_config_json,
    settings_to_mapping,
    site_settings,
)

REPO_ROOT = Path(__file__).resolve().parents[1]


def _write_config(tmp_path: Path, body: str) -> Path:
    path = tmp_path / "site.yaml"
    path.write_text(body.strip() + "\n", encoding="utf-8")
    return path


def test_site_settings_literal_fields() -> None:
    settings = site_settings()
    assert settings.base == "/learn-wgpu/"
    assert settings.title == "Learn Wgpu"
    assert settings.theme == "thindark"
    assert list(settings.plugins) == [
        "vuepress-plugin-code-copy",
        "@vuepress/back-to-top",
        "seo",
    ]
    assert settings.plugins["seo"] == {}
    assert settings.author == AuthorConfig(
        name="Benjamin R Hansen", twitter="https://twitter.com/sotrh760"
    )
    assert settings.theme_config.display_all_headers is False
    assert settings.theme_config.last_updated == "Last Updated"


def test_site_settings_sidebar_shape() -> None:
    sidebar = site_settings().sidebar
    assert sidebar[0] == NavPage("/")
    assert sidebar[-1] == NavPage("/news/")
    groups = [entry for entry in sidebar if isinstance(entry, NavGroup)]
    assert [(g.title, g.collapsable, len(g.children)) for g in groups] == [
        ("Beginner", False, 9),
        ("Intermediate", False, 4),
        ("Showcase", True, 7),
    ]
    assert groups[1].children[-1] == NavPage("/intermediate/tutorial13-threading/")


def test_site_settings_is_rebuilt_each_call() -> None:
    first = site_settings()
    second = site_settings()
    assert first == second
    assert first is not second


def test_repo_config_file_matches_builtin_settings() -> None:
    assert load_site_config(REPO_ROOT / "config" / "site.yaml") == site_settings()


def test_missing_config_file_raises(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        load_site_config(tmp_path / "absent.yaml")


def test_loader_applies_defaults(tmp_path: Path) -> None:
    settings = load_site_config(_write_config(tmp_path, "title: Minimal"))
    assert settings.base == "/"
    assert settings.theme == "default"
    assert settings.plugins == {}
    assert settings.sidebar == ()
    assert settings.theme_config.last_updated is None
    assert settings.author == AuthorConfig()


def test_loader_keeps_paths_unprefixed(tmp_path: Path) -> None:
    path = _write_config(
        tmp_path,
        """
base: /learn-wgpu/
themeConfig:
  sidebar:
    - /
    - title: Beginner
      collapsable: false
      children:
        - /beginner/tutorial1-window/
""",
    )
    settings = load_site_config(path)
    group = settings.sidebar[1]
    assert isinstance(group, NavGroup)
    assert group.children == (NavPage("/beginner/tutorial1-window/"),)


@pytest.mark.parametrize(
    ("value", "expected"),
    [(True, "Last Updated"), (False, None), ("更新日", "更新日")],
)
def test_last_updated_accepts_label_or_flag(
    value: object, expected: str | None
) -> None:
    settings = build_site_settings({"themeConfig": {"lastUpdated": value}})
    assert settings.theme_config.last_updated == expected


def test_plugins_accept_list_forms() -> None:
    settings = build_site_settings(
        {"plugins": ["@vuepress/back-to-top", ["seo", {"twitter": "@x"}]]}
    )
    assert settings.plugins == {"@vuepress/back-to-top": True, "seo": {"twitter": "@x"}}


@pytest.mark.parametrize(
    "raw",
    [
        {"base": "learn-wgpu"},
        {"plugins": "seo"},
        {"plugins": {"seo": 3}},
        {"themeConfig": {"sidebar": "/"}},
        {"themeConfig": {"sidebar": [{"children": ["/a/"]}]}},
        {"themeConfig": {"sidebar": [{"title": "A", "children": "/a/"}]}},
        {"themeConfig": {"sidebar": [42]}},
        {"themeConfig": {"lastUpdated": 1}},
    ],
)
def test_malformed_shapes_raise(raw: dict[str, typ.Any]) -> None:
    with pytest.raises(SiteConfigError):
        build_site_settings(raw)


def test_non_mapping_document_raises(tmp_path: Path) -> None:
    with pytest.raises(SiteConfigError):
        load_site_config(_write_config(tmp_path, "- just\n- a list"))


def test_yaml_round_trip_preserves_settings(tmp_path: Path) -> None:
    settings = site_settings()
    path = tmp_path / "dumped.yaml"
    with path.open("w", encoding="utf-8") as handle:
        dump_site_config(settings, handle)
    assert load_site_config(path) == settings


def test_yaml_dump_keeps_vuepress_key_order() -> None:
    buffer = io.StringIO()
    dump_site_config(site_settings(), buffer)
    text = buffer.getvalue()
    assert text.index("base:") < text.index("themeConfig:")
    assert text.index("tutorial1-window") < text.index("tutorial2-swapchain")
    assert "collapsable: false" in text


def test_json_round_trip_preserves_settings() -> None:
    settings = site_settings()
    assert loads_site_config_json(dumps_site_config_json(settings)) == settings


def test_invalid_json_raises_site_config_error() -> None:
    with pytest.raises(SiteConfigError):
        loads_site_config_json(b"{not json")


def test_mapping_omits_missing_twitter() -> None:
    settings = build_site_settings({"themeConfig": {"author": {"name": "A"}}})
    mapping = settings_to_mapping(settings)
    assert mapping["themeConfig"]["author"] == {"name": "A"}
