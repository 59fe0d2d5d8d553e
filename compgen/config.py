"""compgen configuration.

Option defaults for component generation, kept in a Pydantic v2 model so they
can be validated at construction time and read from a JSON file or from
environment variables.  The JSON file may use either the snake_case field
names or the camelCase option names (``fileFormat``, ``cssExtension``,
``isFunctional``, ...).

Precedence, lowest to highest: model defaults, config file, environment,
command-line flags.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError
from pydantic.alias_generators import to_camel

from .errors import ConfigError
from .naming import CaseKind

DEFAULT_CONFIG_FILE = ".compgen.json"


class GenerationRequest(BaseModel):
    """Everything needed to generate one component.

    The case selectors are kept as plain strings: they are checked by
    ``compgen.naming.transform_names`` so that an unknown value is reported
    together with the full list of allowed transforms.
    """

    model_config = ConfigDict(frozen=True)

    raw_name: str = Field(..., min_length=1, description="Component name as typed by the user")
    directory: str = Field(default="components", description="Subdirectory under src/")
    file_format: str = Field(default=CaseKind.PASCAL.value)
    component_format: str = Field(default=CaseKind.PASCAL.value)
    is_functional: bool = Field(default=False, description="Stateless instead of class component")
    type_check: str | None = Field(default=None, description="'flow' or unset")
    test: str | None = Field(default=None, description="'jest' or unset")
    css_extension: str = Field(default="css")
    semi: bool = Field(default=True)


class Config(BaseModel):
    """Option defaults applied to every generated component."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    directory: str = Field(default="components")
    file_format: str = Field(default=CaseKind.PASCAL.value)
    component_format: str = Field(default=CaseKind.PASCAL.value)
    is_functional: bool = Field(default=False)
    type_check: str | None = Field(default=None)
    test: str | None = Field(default=None)
    css_extension: str = Field(default="css")
    semi: bool = Field(default=True)

    # ------------------------------------------------------------------
    # Serialisation helpers
    # ------------------------------------------------------------------

    def save(self, path: Path | None = None) -> Path:
        """Persist the configuration to a JSON file.

        Args:
            path: Destination file. Defaults to ``./.compgen.json``.

        Returns:
            The path where the file was written.
        """
        target = Path(path or DEFAULT_CONFIG_FILE)
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(
            self.model_dump_json(indent=2, by_alias=True, exclude_none=True) + "\n",
            encoding="utf-8",
        )
        return target

    @classmethod
    def load(cls, path: str | Path) -> "Config":
        """Load a configuration from JSON.

        Raises:
            ConfigError: If the file cannot be read, is not valid JSON or
                contains values of the wrong type.
        """
        file_path = Path(path)
        try:
            raw = file_path.read_text(encoding="utf-8")
            return cls.model_validate_json(raw)
        except OSError as exc:
            raise ConfigError(str(file_path), exc.strerror or str(exc)) from exc
        except ValidationError as exc:
            raise ConfigError(str(file_path), _first_error(exc)) from exc

    @classmethod
    def from_env(cls, base: "Config | None" = None) -> "Config":
        """Overlay environment variables on *base* (or the defaults).

        Recognised variables (all optional):
            COMPGEN_DIRECTORY, COMPGEN_FILE_FORMAT, COMPGEN_COMPONENT_FORMAT,
            COMPGEN_FUNCTIONAL, COMPGEN_TYPE_CHECK, COMPGEN_TEST,
            COMPGEN_CSS_EXTENSION, COMPGEN_SEMI.
        """
        base = base or cls()
        overrides: dict[str, Any] = {}
        for field in ("directory", "file_format", "component_format", "type_check", "test", "css_extension"):
            value = os.environ.get(f"COMPGEN_{field.upper()}")
            if value:
                overrides[field] = value
        if os.environ.get("COMPGEN_FUNCTIONAL"):
            overrides["is_functional"] = _env_flag(os.environ["COMPGEN_FUNCTIONAL"])
        if os.environ.get("COMPGEN_SEMI"):
            overrides["semi"] = _env_flag(os.environ["COMPGEN_SEMI"])
        return base.model_copy(update=overrides)

    @classmethod
    def discover(cls, path: str | Path | None = None, cwd: str | Path | None = None) -> "Config":
        """Build the effective configuration: file (if any), then environment.

        An explicit *path* must exist; otherwise ``.compgen.json`` in *cwd* is
        used when present.
        """
        if path is not None:
            base = cls.load(path)
        else:
            default = Path(cwd or Path.cwd()) / DEFAULT_CONFIG_FILE
            base = cls.load(default) if default.is_file() else cls()
        return cls.from_env(base)

    # ------------------------------------------------------------------
    # Request construction
    # ------------------------------------------------------------------

    def to_request(self, raw_name: str, **overrides: Any) -> GenerationRequest:
        """Combine these defaults with *overrides* into a ``GenerationRequest``.

        Overrides set to ``None`` are ignored so unset CLI flags fall through
        to the configured value.
        """
        values = self.model_dump()
        values.update({key: value for key, value in overrides.items() if value is not None})
        return GenerationRequest(raw_name=raw_name, **values)


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------


def _env_flag(value: str) -> bool:
    return value.strip().lower() in {"1", "true", "yes", "on"}


def _first_error(exc: ValidationError) -> str:
    errors = exc.errors()
    if not errors:
        return str(exc)
    first = errors[0]
    location = ".".join(str(part) for part in first.get("loc", ()))
    if location:
        return f"{location}: {first.get('msg', 'invalid value')}"
    return first.get("msg", "invalid value")
