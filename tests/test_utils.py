"""Unit tests for utility functions (compgen.utils).

Tests cover:
- ensure_dir
- relative_path
- Rich output helpers (print_success, print_error)
"""

from __future__ import annotations

from pathlib import Path

import pytest
from rich.console import Console

from compgen.utils import ensure_dir, print_error, print_success, relative_path


class TestEnsureDir:
    @pytest.mark.unit
    def test_creates_nested(self, tmp_path: Path):
        target = tmp_path / "a" / "b" / "c"
        result = ensure_dir(target)
        assert result == target
        assert target.is_dir()

    @pytest.mark.unit
    def test_existing_is_fine(self, tmp_path: Path):
        assert ensure_dir(tmp_path) == tmp_path

    @pytest.mark.unit
    def test_accepts_str(self, tmp_path: Path):
        assert ensure_dir(str(tmp_path / "x")).is_dir()


class TestRelativePath:
    @pytest.mark.unit
    def test_from_start(self, tmp_path: Path):
        path = tmp_path / "src" / "components" / "Button"
        assert relative_path(path, tmp_path) == "./src/components/Button"

    @pytest.mark.unit
    def test_from_cwd(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.chdir(tmp_path)
        assert relative_path(tmp_path / "src") == "./src"


class TestRichHelpers:
    @pytest.mark.unit
    def test_print_success(self, capsys):
        print_success("All done")
        assert "All done" in capsys.readouterr().out

    @pytest.mark.unit
    def test_print_error_goes_to_stderr(self, capsys):
        print_error("Something failed")
        captured = capsys.readouterr()
        assert "Something failed" in captured.err
        assert captured.out == ""

    @pytest.mark.unit
    def test_print_success_to_given_console(self, capsys):
        out = Console(record=True, width=80, color_system=None)
        print_success("Generated Card:", out)
        assert out.export_text() == "Generated Card:\n"
        assert capsys.readouterr().out == ""
