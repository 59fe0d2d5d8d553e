"""Component generation pipeline.

Takes a ``GenerationRequest`` and writes one component directory::

    src/<directory>/<fileName>/
        index.js
        <fileName>.js
        <fileName>.test.js      (only with test="jest")
        <fileName>.<cssExtension>

The pipeline never prints and never exits the process; every failure is
raised as a ``compgen.errors.CompgenError`` (or an ``OSError`` from the file
system) for the caller to report.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any

from .config import GenerationRequest
from .errors import ComponentExistsError
from .naming import transform_names
from .templates import (
    SCRIPT_EXTENSION,
    RenderedFile,
    TemplateFile,
    TemplateStore,
    apply_type_checking,
    normalize_css_extension,
    replace_vars,
    script_name_for,
)
from .utils import ensure_dir, relative_path


@dataclass(frozen=True)
class GenerationResult:
    """What a successful run produced."""

    component_name: str
    file_name: str
    component_path: Path
    files: tuple[RenderedFile, ...]


# ---------------------------------------------------------------------------
# Path resolution and writing
# ---------------------------------------------------------------------------


def resolve_component_path(
    component_name: str,
    directory: str,
    file_name: str,
    cwd: str | Path | None = None,
) -> Path:
    """Create and return ``<cwd>/src/<directory>/<file_name>``.

    ``src/`` and ``src/<directory>/`` are created as needed and are left in
    place even when the component itself turns out to exist already.

    Raises:
        ComponentExistsError: If the component path is already taken.
    """
    base = Path(cwd) if cwd is not None else Path.cwd()
    root = ensure_dir(base / "src")
    parent = ensure_dir(root / directory)
    component_path = parent / file_name

    if component_path.exists():
        raise ComponentExistsError(component_name, relative_path(component_path, base))

    component_path.mkdir()
    return component_path


def save_to_file(path: Path, content: str) -> None:
    path.write_text(content, encoding="utf-8")


# ---------------------------------------------------------------------------
# Generator
# ---------------------------------------------------------------------------


class ComponentGenerator:
    """Runs name transform, path resolution, rendering and writing in order."""

    def __init__(
        self,
        request: GenerationRequest,
        store: TemplateStore | None = None,
        cwd: str | Path | None = None,
    ) -> None:
        self.request = request
        self.store = store or TemplateStore()
        self.cwd = Path(cwd) if cwd is not None else Path.cwd()

    def generate(self) -> GenerationResult:
        """Generate the component described by ``self.request``.

        Raises:
            InvalidTransformError: A case selector is unknown.  Nothing has
                been touched on disk at that point.
            ComponentExistsError: The component directory already exists.
            TemplateLoadError: A template is missing.
        """
        request = self.request
        names = transform_names(request.raw_name, request.file_format, request.component_format)
        component_path = resolve_component_path(
            names.component_name, request.directory, names.file_name, self.cwd
        )

        scripts = self.store.script_templates(request.is_functional, request.test)
        styles = self.store.style_templates()
        css_extension = normalize_css_extension(request.css_extension)

        rendered = [
            self.render_script(script, component_path, names.component_name, names.file_name, css_extension)
            for script in scripts
        ]
        rendered.extend(
            self.render_style(style, component_path, names.component_name, names.file_name, css_extension)
            for style in styles
        )

        for item in rendered:
            save_to_file(item.target_path, item.content)

        return GenerationResult(
            component_name=names.component_name,
            file_name=names.file_name,
            component_path=component_path,
            files=tuple(rendered),
        )

    def render_script(
        self,
        script: TemplateFile,
        component_path: Path,
        component_name: str,
        file_name: str,
        css_extension: str,
    ) -> RenderedFile:
        content = apply_type_checking(self.request.type_check, script.raw_content)
        script_name = script_name_for(script.stem, file_name)
        return RenderedFile(
            target_path=component_path / f"{script_name}.{SCRIPT_EXTENSION}",
            content=replace_vars(content, component_name, script_name, css_extension, self.request.semi),
        )

    def render_style(
        self,
        style: TemplateFile,
        component_path: Path,
        component_name: str,
        file_name: str,
        css_extension: str,
    ) -> RenderedFile:
        return RenderedFile(
            target_path=component_path / f"{file_name}.{css_extension}",
            content=replace_vars(style.raw_content, component_name, file_name, css_extension, self.request.semi),
        )


def generate(
    component: str,
    options: dict[str, Any] | None = None,
    cwd: str | Path | None = None,
    store: TemplateStore | None = None,
) -> GenerationResult:
    """Generate *component* with *options* (``GenerationRequest`` field names)."""
    request = GenerationRequest(raw_name=component, **(options or {}))
    return ComponentGenerator(request, store=store, cwd=cwd).generate()
