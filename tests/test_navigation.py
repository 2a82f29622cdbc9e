"""Unit tests for sidebar traversal and validation helpers."""

from __future__ import annotations

import pytest

from wgpu_pages.config import (
    NavGroup,
    NavPage,
    SiteConfigError,
    build_site_settings,
    site_settings,
)
from wgpu_pages.navigation import (
    NavigationError,
    ensure_valid_navigation,
    find_group,
    group_of,
    iter_pages,
    page_paths,
    validate_navigation,
)

BEGINNER_ENTRY = {
    "title": "Beginner",
    "collapsable": False,
    "children": ["/beginner/tutorial1-window/", "/beginner/tutorial2-swapchain/"],
}


def test_builtin_sidebar_is_valid() -> None:
    assert validate_navigation(site_settings().sidebar) == []


def test_builtin_sidebar_leaves_are_absolute_and_unique() -> None:
    paths = page_paths(site_settings().sidebar)
    assert len(paths) == 22
    assert len(set(paths)) == len(paths)
    assert all(path.startswith("/") for path in paths)
    assert not any(path.startswith("/learn-wgpu/") for path in paths)


def test_beginner_entry_exposes_two_ordered_leaves() -> None:
    settings = build_site_settings({"themeConfig": {"sidebar": [BEGINNER_ENTRY]}})
    group = find_group(settings.sidebar, "Beginner")
    assert group is not None
    assert group.collapsable is False
    assert [leaf.path for leaf in iter_pages([group])] == [
        "/beginner/tutorial1-window/",
        "/beginner/tutorial2-swapchain/",
    ]


def test_iter_pages_is_depth_first_in_display_order() -> None:
    sidebar = (
        NavPage("/"),
        NavGroup("Outer", (NavGroup("Inner", (NavPage("/a/"),)), NavPage("/b/"))),
        NavPage("/c/"),
    )
    assert page_paths(sidebar) == ["/", "/a/", "/b/", "/c/"]


def test_find_group_searches_nested_groups() -> None:
    inner = NavGroup("Inner", (NavPage("/a/"),))
    sidebar = (NavGroup("Outer", (inner,)),)
    assert find_group(sidebar, "Inner") is inner
    assert find_group(sidebar, "Missing") is None


def test_group_of_returns_innermost_group() -> None:
    sidebar = site_settings().sidebar
    group = group_of(sidebar, "/showcase/gifs/")
    assert group is not None
    assert group.title == "Showcase"
    assert group_of(sidebar, "/") is None
    assert group_of(sidebar, "/unknown/") is None


def test_validate_reports_every_problem() -> None:
    sidebar = (
        NavPage("relative/"),
        NavPage(""),
        NavGroup("", (NavPage("/a/"),)),
        NavGroup("Empty", ()),
        NavGroup("Dupes", (NavPage("/a/"),)),
    )
    kinds = [problem.kind for problem in validate_navigation(sidebar)]
    assert kinds == [
        "invalid-path",
        "invalid-path",
        "empty-title",
        "empty-group",
        "duplicate-path",
    ]


def test_ensure_valid_navigation_raises_with_problems() -> None:
    sidebar = (NavPage("/a/"), NavPage("/a/"))
    with pytest.raises(NavigationError) as excinfo:
        ensure_valid_navigation(sidebar)
    assert len(excinfo.value.problems) == 1
    assert "'/a/' appears twice" in str(excinfo.value)


def test_navigation_error_is_a_site_config_error() -> None:
    assert issubclass(NavigationError, SiteConfigError)
