"""compgen -- scaffolds React component directories from templates.

Quick usage::

    from compgen import generate

    result = generate(
        "my button",
        {"file_format": "paramCase", "component_format": "pascalCase"},
    )
    # ./src/components/my-button/{index.js, my-button.js, my-button.css}
"""

__version__ = "0.1.0"

from compgen.config import Config, GenerationRequest
from compgen.errors import (
    CompgenError,
    ComponentExistsError,
    ConfigError,
    InvalidNameError,
    InvalidTransformError,
    TemplateLoadError,
)
from compgen.generator import ComponentGenerator, GenerationResult, generate
from compgen.naming import CaseKind, transform_names
from compgen.templates import TemplateStore

__all__ = [
    "CaseKind",
    "CompgenError",
    "ComponentExistsError",
    "ComponentGenerator",
    "Config",
    "ConfigError",
    "GenerationRequest",
    "GenerationResult",
    "InvalidNameError",
    "InvalidTransformError",
    "TemplateLoadError",
    "TemplateStore",
    "generate",
    "transform_names",
]
