"""Shared pytest fixtures for the compgen test suite.

Provides reusable fixtures for:
- A temporary working directory the generator writes into
- An in-memory template store with predictable template bodies
- Default generation options
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import pytest
from jinja2 import DictLoader

from compgen.templates import TemplateStore


# ---------------------------------------------------------------------------
# Paths & Directories
# ---------------------------------------------------------------------------

@pytest.fixture
def workdir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Temporary project root, also made the current working directory."""
    project_dir = tmp_path / "app"
    project_dir.mkdir()
    monkeypatch.chdir(project_dir)
    yield project_dir


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep COMPGEN_* variables from the developer's shell out of the tests."""
    import os

    for key in list(os.environ):
        if key.startswith("COMPGEN_"):
            monkeypatch.delenv(key, raising=False)


# ---------------------------------------------------------------------------
# Templates
# ---------------------------------------------------------------------------

SAMPLE_TEMPLATES: dict[str, str] = {
    "index.js": "export { default } from './$Name$'$semi$\n",
    "stateless.js": (
        "import './$name$.$css-ext$'$semi$\n"
        "const $Name$ = () => null$semi$\n"
        "export default $Name$$semi$\n"
    ),
    "stateful.js": (
        "import './$name$.$css-ext$'$semi$\n"
        "class $Name$ extends Component {}\n"
        "export default $Name$$semi$\n"
    ),
    "jest.js": "describe('$Name$', () => {})$semi$ // $name$\n",
    "styles.css": ".$Name$ {}\n/* $name$.$css-ext$ */\n",
}


@pytest.fixture
def sample_templates() -> dict[str, str]:
    """The raw bodies served by ``memory_store``."""
    return dict(SAMPLE_TEMPLATES)


@pytest.fixture
def memory_store(sample_templates: dict[str, str]) -> TemplateStore:
    """A TemplateStore backed by a Jinja2 DictLoader."""
    return TemplateStore(DictLoader(sample_templates))


# ---------------------------------------------------------------------------
# Options
# ---------------------------------------------------------------------------

@pytest.fixture
def button_options() -> dict[str, Any]:
    """Options for the "my button" component used across the suite."""
    return {
        "directory": "components",
        "file_format": "paramCase",
        "component_format": "pascalCase",
        "is_functional": True,
        "type_check": None,
        "test": None,
        "css_extension": "css",
        "semi": True,
    }
