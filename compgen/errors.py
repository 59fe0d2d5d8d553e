"""Exceptions raised by the component generator.

Every failure aborts the run.  The pipeline raises one of these and the CLI
entry point (``compgen.cli.main``) is the only place that turns them into a
console message and an exit status.
"""

from __future__ import annotations

from typing import Any


class CompgenError(Exception):
    """Base exception for compgen."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        self.message = message
        self.details = details or {}
        super().__init__(message)


class InvalidTransformError(CompgenError):
    """A case-kind selector is not one of the supported transforms."""

    def __init__(self, key: str, value: str, allowed: list[str]) -> None:
        super().__init__(
            f"Invalid {key} name transform",
            {"key": key, "value": value, "allowed": list(allowed)},
        )
        self.key = key
        self.value = value
        self.allowed = list(allowed)


class InvalidNameError(CompgenError):
    """The component name converts to an empty file or symbol name."""

    def __init__(self, raw_name: str) -> None:
        super().__init__(
            f"Invalid component name '{raw_name}': it must contain at least one letter or digit",
            {"raw_name": raw_name},
        )
        self.raw_name = raw_name


class ComponentExistsError(CompgenError):
    """The target component directory is already present on disk."""

    def __init__(self, component_name: str, path: str) -> None:
        super().__init__(
            f"Component {component_name} already exists at {path}",
            {"component_name": component_name, "path": path},
        )
        self.component_name = component_name
        self.path = path


class TemplateLoadError(CompgenError):
    """A template could not be found in the template source."""

    def __init__(self, template: str) -> None:
        super().__init__(f"Template not found: {template}", {"template": template})
        self.template = template


class ConfigError(CompgenError):
    """The configuration file could not be read or failed validation."""

    def __init__(self, path: str, message: str) -> None:
        super().__init__(f"Invalid config {path}: {message}", {"path": path})
        self.path = path
