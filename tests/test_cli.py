from __future__ import annotations

from pathlib import Path

from bs4 import BeautifulSoup
import pytest
from typer.testing import CliRunner

from indexsmith.ui.cli import app


@pytest.fixture
def project(tmp_path: Path) -> Path:
    root = tmp_path / "talk"
    root.mkdir()
    (root / "slides.md").write_text(
        "---\ntitle: Release Notes\ninfo: What changed\n---\n# Hello\n", encoding="utf-8"
    )
    (root / "index.html").write_text("<body><footer>custom</footer></body>", encoding="utf-8")
    return root


def test_render_to_stdout(project: Path) -> None:
    runner = CliRunner()
    result = runner.invoke(app, ["render", str(project / "slides.md")])

    assert result.exit_code == 0, result.output
    soup = BeautifulSoup(result.stdout, "html.parser")
    assert soup.title.string == "Release Notes - Slidev"
    assert soup.find("footer").string == "custom"
    assert soup.find("meta", attrs={"name": "description"})["content"] == '"What changed"'
    assert soup.find("meta", attrs={"property": "slidev:entry"}) is None


def test_render_dev_mode_with_theme_root(project: Path, tmp_path: Path) -> None:
    theme = tmp_path / "theme"
    theme.mkdir()
    (theme / "index.html").write_text("<head><meta name='theme' content='t'></head>")
    output = tmp_path / "dist" / "index.html"

    runner = CliRunner()
    result = runner.invoke(
        app,
        [
            "render",
            str(project / "slides.md"),
            "--root",
            str(theme),
            "--mode",
            "dev",
            "--base",
            "/talk/",
            "-o",
            str(output),
        ],
    )

    assert result.exit_code == 0, result.output
    soup = BeautifulSoup(output.read_text(encoding="utf-8"), "html.parser")
    assert soup.find("meta", attrs={"name": "theme"})["content"] == "t"
    assert soup.find("meta", attrs={"property": "slidev:entry"}) is not None
    assert soup.find("script", attrs={"type": "module"})["src"].startswith("/talk/@fs/")


def test_render_warns_about_generated_user_index(project: Path) -> None:
    (project / "index.html").write_text(
        "<!DOCTYPE html><html><body><footer>stale</footer></body></html>", encoding="utf-8"
    )

    runner = CliRunner()
    result = runner.invoke(app, ["render", str(project / "slides.md")])

    assert result.exit_code == 0, result.output
    assert "Ignored provided index.html" in result.output
    assert BeautifulSoup(result.stdout, "html.parser").find("footer") is None


def test_render_missing_client_template(project: Path, tmp_path: Path) -> None:
    runner = CliRunner()
    result = runner.invoke(
        app,
        ["render", str(project / "slides.md"), "--client-root", str(tmp_path / "missing")],
    )

    assert result.exit_code == 1
    assert "Base template not found" in result.output


def test_render_keeps_user_markup_verbatim(project: Path) -> None:
    fragment = '<svg viewBox="0 0 24 24"><path d="M0 0h24"/></svg>&nbsp;<button disabled>Go</button>'
    (project / "index.html").write_text(f"<body>{fragment}</body>", encoding="utf-8")

    runner = CliRunner()
    result = runner.invoke(app, ["render", str(project / "slides.md")])

    assert result.exit_code == 0, result.output
    assert fragment in result.stdout
    assert '<meta name="description" content="&quot;What changed&quot;">' in result.stdout
