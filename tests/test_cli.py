"""Tests for the ``docsite`` command functions."""

from __future__ import annotations

from pathlib import Path

import pytest

from docsite import cli


def test_generate_writes_pages_and_stylesheet(
    project_config_path: Path,
    monkeypatch: pytest.MonkeyPatch,
    capsys: pytest.CaptureFixture[str],
) -> None:
    monkeypatch.chdir(project_config_path.parent)

    cli.generate(config=Path("docsite.yaml"))

    lines = capsys.readouterr().out.splitlines()
    assert lines == [
        "wrote public/index.html",
        "wrote public/guide/setup/index.html",
        "wrote public/drafts/index.html",
        "wrote public/styles.css",
    ]
    assert (project_config_path.parent / "public" / "styles.css").is_file()


def test_styles_honours_output_override(
    project_config_path: Path, tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    target = tmp_path / "dist" / "site.css"

    cli.styles(config=project_config_path, output=target)

    assert target.is_file()
    assert ".prose {" in target.read_text(encoding="utf-8")
    assert capsys.readouterr().out.strip().startswith("wrote ")


def test_missing_config_is_reported(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        cli.styles(config=tmp_path / "absent.yaml")


def test_generate_output_dir_moves_stylesheet_with_pages(
    project_config_path: Path,
    tmp_path: Path,
    capsys: pytest.CaptureFixture[str],
) -> None:
    target = tmp_path / "dist"

    cli.generate(config=project_config_path, output_dir=target)

    stylesheet = target / "styles.css"
    assert stylesheet.is_file()
    assert not (project_config_path.parent / "public").exists()
    page = (target / "guide" / "setup" / "index.html").read_text(encoding="utf-8")
    assert '<link rel="stylesheet" href="/styles.css">' in page
    css = stylesheet.read_text(encoding="utf-8")
    assert ".nuxt-link-exact-active.exact\\:bg-cyan-50 {" in css
    assert capsys.readouterr().out.splitlines()[-1].endswith("dist/styles.css")
