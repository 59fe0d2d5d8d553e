"""Tests for the console report (compgen.reporter)."""

from __future__ import annotations

from pathlib import Path

import pytest
from rich.console import Console

from compgen.generator import GenerationResult
from compgen.reporter import build_tree, list_generated_files, print_report


pytestmark = pytest.mark.unit


@pytest.fixture
def component_dir(tmp_path: Path) -> Path:
    root = tmp_path / "MyButton"
    root.mkdir()
    (root / "index.js").write_text("", encoding="utf-8")
    (root / "MyButton.js").write_text("", encoding="utf-8")
    (root / "MyButton.css").write_text("", encoding="utf-8")
    (root / "__snapshots__").mkdir()
    (root / "__snapshots__" / "MyButton.test.js.snap").write_text("", encoding="utf-8")
    (root / "empty").mkdir()
    (root / "empty" / "deeper").mkdir()
    return root


def _console() -> Console:
    return Console(record=True, width=100, color_system=None)


class TestListGeneratedFiles:
    def test_lists_files_and_non_empty_dirs(self, component_dir: Path):
        assert list_generated_files(component_dir) == [
            Path("MyButton.css"),
            Path("MyButton.js"),
            Path("__snapshots__"),
            Path("__snapshots__/MyButton.test.js.snap"),
            Path("index.js"),
        ]

    def test_empty_directory(self, tmp_path: Path):
        assert list_generated_files(tmp_path) == []


class TestBuildTree:
    def test_tree_output(self, component_dir: Path):
        console = _console()
        console.print(build_tree(component_dir))
        text = console.export_text()
        assert text.splitlines()[0] == "MyButton"
        for name in ("index.js", "MyButton.js", "MyButton.css", "__snapshots__", "MyButton.test.js.snap"):
            assert name in text
        assert "empty" not in text
        assert "deeper" not in text

    def test_markup_in_names_is_escaped(self, tmp_path: Path):
        root = tmp_path / "comp"
        root.mkdir()
        (root / "[bold]x.js").write_text("", encoding="utf-8")
        console = _console()
        console.print(build_tree(root))
        assert "[bold]x.js" in console.export_text()


def test_print_report(component_dir: Path):
    console = _console()
    result = GenerationResult(
        component_name="MyButton",
        file_name="MyButton",
        component_path=component_dir,
        files=(),
    )
    print_report(result, console=console)
    lines = console.export_text().splitlines()
    assert lines[0] == "Generated MyButton:"
    assert lines[1] == ""
    assert lines[2] == "MyButton"
    assert any("index.js" in line for line in lines[3:])
