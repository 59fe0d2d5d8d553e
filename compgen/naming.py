"""Name transforms for generated components.

Turns a free-text component name (``"my button"``, ``"UserProfile"``,
``"user_profile"``) into the file name and the exported symbol name, each with
its own case convention.  Word splitting follows the ``change-case`` family of
JavaScript packages so names come out the way a front-end developer expects.
"""

from __future__ import annotations

import re
from collections.abc import Callable
from enum import Enum
from typing import NamedTuple

from .errors import InvalidNameError, InvalidTransformError


class CaseKind(str, Enum):
    """Supported naming conventions, keyed by their ``change-case`` name."""

    CAMEL = "camelCase"
    CONSTANT = "constantCase"
    HEADER = "headerCase"
    PARAM = "paramCase"
    PASCAL = "pascalCase"
    SNAKE = "snakeCase"


ALLOWED_TRANSFORMS: list[str] = [kind.value for kind in CaseKind]


class NameSet(NamedTuple):
    file_name: str
    component_name: str


# ---------------------------------------------------------------------------
# Word splitting
# ---------------------------------------------------------------------------

_SEPARATOR_RE = re.compile(r"[\W_]+")


def _case_boundaries(chunk: str) -> list[str]:
    # "myButton" -> my|Button, "v2Beta" -> v2|Beta, "HTMLParser" -> HTML|Parser.
    # str.isupper/islower keep this correct for non-ASCII letters.
    words: list[str] = []
    start = 0
    for index in range(1, len(chunk)):
        prev, char = chunk[index - 1], chunk[index]
        following = chunk[index + 1] if index + 1 < len(chunk) else ""
        lower_to_upper = (prev.islower() or prev.isdigit()) and char.isupper()
        acronym_end = prev.isupper() and char.isupper() and following.islower()
        if lower_to_upper or acronym_end:
            words.append(chunk[start:index])
            start = index
    words.append(chunk[start:])
    return words


def split_words(value: str) -> list[str]:
    """Split *value* into lowercase words.

    Any run of characters that are not letters or digits separates words, and
    so does a case change inside a run.

    Examples::

        split_words("my button")    -> ["my", "button"]
        split_words("HTMLParser")   -> ["html", "parser"]
        split_words("--user_Card-") -> ["user", "card"]
        split_words("überButton")   -> ["über", "button"]
    """
    return [
        word.lower()
        for chunk in _SEPARATOR_RE.split(value)
        if chunk
        for word in _case_boundaries(chunk)
    ]


# ---------------------------------------------------------------------------
# Case functions
# ---------------------------------------------------------------------------


def _join_capitalized(words: list[str]) -> str:
    # A word that starts with a digit cannot be told apart from the previous
    # one once capitalised, so it is glued on with an underscore.
    parts: list[str] = []
    for index, word in enumerate(words):
        if index > 0 and word[0].isdigit():
            parts.append(f"_{word}")
        else:
            parts.append(word.capitalize())
    return "".join(parts)


def camel_case(value: str) -> str:
    """``"my button"`` -> ``"myButton"``."""
    pascal = pascal_case(value)
    if pascal:
        return pascal[0].lower() + pascal[1:]
    return ""


def pascal_case(value: str) -> str:
    """``"my button"`` -> ``"MyButton"``."""
    return _join_capitalized(split_words(value))


def constant_case(value: str) -> str:
    """``"my button"`` -> ``"MY_BUTTON"``."""
    return "_".join(word.upper() for word in split_words(value))


def header_case(value: str) -> str:
    """``"my button"`` -> ``"My-Button"``."""
    return "-".join(word.capitalize() for word in split_words(value))


def param_case(value: str) -> str:
    """``"my button"`` -> ``"my-button"``."""
    return "-".join(split_words(value))


def snake_case(value: str) -> str:
    """``"my button"`` -> ``"my_button"``."""
    return "_".join(split_words(value))


CASE_FUNCTIONS: dict[CaseKind, Callable[[str], str]] = {
    CaseKind.CAMEL: camel_case,
    CaseKind.CONSTANT: constant_case,
    CaseKind.HEADER: header_case,
    CaseKind.PARAM: param_case,
    CaseKind.PASCAL: pascal_case,
    CaseKind.SNAKE: snake_case,
}


# ---------------------------------------------------------------------------
# Validation and transform
# ---------------------------------------------------------------------------


def validate_transform(key: str, transform: str | CaseKind) -> CaseKind:
    """Return the ``CaseKind`` for *transform*.

    Args:
        key: Which option the selector came from (``"fileName"`` or
            ``"component"``); used in the error report.
        transform: The selector as supplied by the user.

    Raises:
        InvalidTransformError: If *transform* is not a supported case kind.
    """
    try:
        return CaseKind(transform)
    except ValueError:
        raise InvalidTransformError(key, str(transform), ALLOWED_TRANSFORMS) from None


def transform_names(
    component: str,
    file_fn: str | CaseKind,
    comp_fn: str | CaseKind,
) -> NameSet:
    """Compute the file name and the component symbol name for *component*.

    The file selector is validated before the component selector, so when
    both are wrong the report names the file option.

    Raises:
        InvalidTransformError: A selector is not a supported case kind.
        InvalidNameError: *component* has no letters or digits, so the
            converted names would be empty.
    """
    file_kind = validate_transform("fileName", file_fn)
    file_name = CASE_FUNCTIONS[file_kind](component)
    comp_kind = validate_transform("component", comp_fn)
    component_name = CASE_FUNCTIONS[comp_kind](component)
    if not file_name or not component_name:
        raise InvalidNameError(component)
    return NameSet(file_name=file_name, component_name=component_name)
