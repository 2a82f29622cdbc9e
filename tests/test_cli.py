"""Tests for the ``pages`` commands, called directly as functions.

Each test invokes ``build``, ``check`` or ``nav`` from :mod:`wgpu_pages.cli`
and asserts on the printed lines, the files written under ``tmp_path``, or the
exit status. Configs are written as small YAML files next to the output.

Usage
-----
Run ``pytest tests/test_cli.py -v``.
"""

from __future__ import annotations

from pathlib import Path

import msgspec
import pytest

from wgpu_pages import cli
from wgpu_pages.config import SiteConfigError, load_site_config, site_settings


def _write_config(tmp_path: Path, body: str) -> Path:
    path = tmp_path / "site.yaml"
    path.write_text(body.strip() + "\n", encoding="utf-8")
    return path


def test_build_defaults_to_bundled_introduction(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    monkeypatch.chdir(tmp_path)
    cli.build(output_dir=tmp_path / "public")
    lines = capsys.readouterr().out.splitlines()
    assert lines[0] == "wrote public/index.html"
    assert lines[1] == "wrote public/assets/style.css"
    assert lines[2] == "missing /beginner/tutorial1-window/"
    assert lines[-1] == "missing /news/"
    assert (tmp_path / "public" / "index.html").exists()


def test_build_reads_content_directory(
    tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    content = tmp_path / "docs"
    (content / "news").mkdir(parents=True)
    (content / "README.md").write_text("# Home\n", encoding="utf-8")
    (content / "news" / "README.md").write_text("# News\n", encoding="utf-8")
    config = _write_config(
        tmp_path,
        """
title: Demo
themeConfig:
  sidebar:
    - /
    - /news/
""",
    )
    cli.build(config=config, content=content, output_dir=tmp_path / "out")
    out = capsys.readouterr().out
    assert "missing" not in out
    assert (tmp_path / "out" / "news" / "index.html").exists()


def test_build_reports_unknown_plugins(
    tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    config = _write_config(
        tmp_path,
        """
plugins:
  - vuepress-plugin-mathjax
  - "@vuepress/back-to-top"
""",
    )
    cli.build(config=config, output_dir=tmp_path / "out")
    lines = capsys.readouterr().out.splitlines()
    assert lines[0] == "ignoring unknown plugin vuepress-plugin-mathjax"


def test_strict_build_fails_on_missing_pages(tmp_path: Path) -> None:
    with pytest.raises(SiteConfigError):
        cli.build(output_dir=tmp_path / "out", strict=True)
    assert not (tmp_path / "out" / "index.html").exists()


def test_check_accepts_builtin_sidebar(capsys: pytest.CaptureFixture[str]) -> None:
    cli.check()
    assert capsys.readouterr().out.strip() == "navigation ok (22 pages)"


def test_check_exits_on_problems(
    tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    config = _write_config(
        tmp_path,
        """
themeConfig:
  sidebar:
    - /a/
    - title: Again
      children:
        - /a/
    - relative/
""",
    )
    with pytest.raises(SystemExit) as excinfo:
        cli.check(config=config)
    assert excinfo.value.code == 1
    lines = capsys.readouterr().out.splitlines()
    assert lines == [
        "duplicate-path: sidebar path '/a/' appears twice",
        "invalid-path: sidebar path 'relative/' must start with '/'",
    ]


def test_nav_prints_yaml(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    cli.nav()
    dumped = tmp_path / "dumped.yaml"
    dumped.write_text(capsys.readouterr().out, encoding="utf-8")
    assert load_site_config(dumped) == site_settings()


def test_nav_prints_json(capsys: pytest.CaptureFixture[str]) -> None:
    cli.nav(format="json")
    data = msgspec.json.decode(capsys.readouterr().out)
    assert data["base"] == "/learn-wgpu/"
    assert data["themeConfig"]["sidebar"][0] == "/"
    assert data["themeConfig"]["sidebar"][1]["title"] == "Beginner"
