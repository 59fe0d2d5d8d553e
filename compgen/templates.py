"""Component templates: loading, type-check pragmas and placeholder substitution.

Templates are plain source files under ``compgen/templates/component/`` that
carry four placeholder tokens:

* ``$Name$``    -- the exported component symbol (``MyButton``)
* ``$name$``    -- the per-file name (``index``, ``my-button``, ``my-button.test``)
* ``$semi$``    -- ``;`` or nothing, depending on the semicolon style
* ``$css-ext$`` -- the stylesheet extension without its leading dot

The raw text is fetched through a Jinja2 loader so that any loader can serve
as the template source (a ``DictLoader`` in tests, for instance).  The text is
never rendered as Jinja; the tokens are substituted literally.

``$name$`` is ``index`` inside the entry template, so ``index.js`` can only
refer to the implementation file as ``./$Name$``.  The import resolves when
the file and component name formats are the same (the default).
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path, PurePath

from jinja2 import BaseLoader, Environment, FileSystemLoader, TemplateNotFound

from .errors import TemplateLoadError


# ---------------------------------------------------------------------------
# Template directory discovery
# ---------------------------------------------------------------------------

_DEFAULT_TEMPLATE_DIR = Path(__file__).parent / "templates" / "component"

INDEX_TEMPLATE = "index.js"
STATELESS_TEMPLATE = "stateless.js"
STATEFUL_TEMPLATE = "stateful.js"
JEST_TEMPLATE = "jest.js"
STYLES_TEMPLATE = "styles.css"

SCRIPT_EXTENSION = "js"
FLOW_PRAGMA = "// @flow"


# ---------------------------------------------------------------------------
# Data
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class TemplateFile:
    """Raw text of one template and where it was read from."""

    source_path: str
    raw_content: str

    @property
    def stem(self) -> str:
        """File name without extension (``"index"``, ``"jest"``, ...)."""
        return PurePath(self.source_path).stem


@dataclass(frozen=True)
class RenderedFile:
    """A fully substituted file and the path it is written to."""

    target_path: Path
    content: str


# ---------------------------------------------------------------------------
# TemplateStore
# ---------------------------------------------------------------------------


class TemplateStore:
    """Reads raw component templates from a Jinja2 loader.

    By default the templates shipped with the package are used.  Pass any
    ``jinja2.BaseLoader`` to serve them from elsewhere.
    """

    def __init__(self, loader: BaseLoader | None = None) -> None:
        if loader is None:
            loader = FileSystemLoader(str(_DEFAULT_TEMPLATE_DIR), encoding="utf-8")
        self.loader = loader
        self.env = Environment(loader=loader, keep_trailing_newline=True)

    def load(self, name: str) -> TemplateFile:
        """Return the raw text of template *name*.

        Raises:
            TemplateLoadError: If the loader has no template called *name*.
        """
        try:
            source, filename, _uptodate = self.loader.get_source(self.env, name)
        except TemplateNotFound:
            raise TemplateLoadError(name) from None
        return TemplateFile(source_path=filename or name, raw_content=source)

    def script_templates(self, is_functional: bool, test: str | None = None) -> list[TemplateFile]:
        """Templates for every script file of a component, entry file first."""
        scripts = [
            self.load(INDEX_TEMPLATE),
            self.load(STATELESS_TEMPLATE if is_functional else STATEFUL_TEMPLATE),
        ]
        if test == "jest":
            scripts.append(self.load(JEST_TEMPLATE))
        return scripts

    def style_templates(self) -> list[TemplateFile]:
        return [self.load(STYLES_TEMPLATE)]

    def list_templates(self) -> list[str]:
        """Return the sorted names the loader knows about."""
        return sorted(self.loader.list_templates())


# ---------------------------------------------------------------------------
# Content transforms
# ---------------------------------------------------------------------------


def apply_type_checking(type_system: str | None, content: str) -> str:
    """Prepend the type-checker pragma for *type_system* to script *content*.

    Only ``"flow"`` is supported; any other value leaves the content as is.
    """
    if type_system == "flow":
        return f"{FLOW_PRAGMA}\n\n{content}"
    return content


def normalize_css_extension(css_extension: str) -> str:
    """Strip one leading dot: ``".scss"`` -> ``"scss"``."""
    return css_extension[1:] if css_extension.startswith(".") else css_extension


def replace_vars(
    content: str,
    component_name: str,
    file_name: str,
    css_extension: str,
    semi: bool,
) -> str:
    """Substitute every placeholder token in *content*."""
    return (
        content.replace("$Name$", component_name)
        .replace("$name$", file_name)
        .replace("$semi$", ";" if semi else "")
        .replace("$css-ext$", css_extension)
    )


def script_name_for(stem: str, file_name: str) -> str:
    """Name used for a generated script (and its ``$name$`` placeholder).

    The entry file is always ``index`` and the test file gets a ``.test``
    suffix; every other script is named after the component file.
    """
    if stem == "index":
        return "index"
    if stem == "jest":
        return f"{file_name}.test"
    return file_name
