"""Identifier derivation for generated call sites.

Parameter names become snake_case Python identifiers, services become
PascalCase class names.
"""

import keyword
import re

from openapi_params.config import DEFAULT_TAG

_LEADING_NON_LETTERS = re.compile(r"^[^a-zA-Z]+")
_DELIMITERS = re.compile(r"[^a-zA-Z0-9]+")
_ACRONYM = re.compile(r"([A-Z])([A-Z][a-z])")
_LOWER_UPPER = re.compile(r"([a-z0-9])([A-Z])")


def snakecase(value: str) -> str:
    """Convert to snake_case, splitting camelCase and acronyms.

    >>> snakecase("getHTTPResponse")
    'get_http_response'
    """
    value = _ACRONYM.sub(r"\1_\2", value)
    value = _LOWER_UPPER.sub(r"\1_\2", value)
    value = _DELIMITERS.sub("_", value)
    return value.strip("_").lower()


def pascalcase(value: str) -> str:
    return "".join(part[:1].upper() + part[1:] for part in _DELIMITERS.split(value) if part)


def sanitize_name(value: str) -> str:
    """Derive a call-site identifier from a raw parameter or property key."""
    clean = _LEADING_NON_LETTERS.sub("", value).replace("[]", "Array")
    name = snakecase(clean)
    if not name:
        # no letters at all, e.g. "123"
        return snakecase(f"param_{value}")
    if keyword.iskeyword(name):
        return f"{name}_"
    return name


def get_service_name(tag: str) -> str:
    name = pascalcase(_LEADING_NON_LETTERS.sub("", tag))
    return name or DEFAULT_TAG


def get_operation_name(path: str, method: str, operation_id: str | None = None) -> str:
    if operation_id:
        name = sanitize_name(operation_id)
        if name:
            return name
    # /pets/{petId} -> get_pets_by_pet_id
    segments = []
    for segment in path.split("/"):
        if not segment:
            continue
        if segment.startswith("{") and segment.endswith("}"):
            segments.append(f"by_{snakecase(segment[1:-1])}")
        else:
            segments.append(snakecase(segment))
    return "_".join([method.lower(), *filter(None, segments)])
