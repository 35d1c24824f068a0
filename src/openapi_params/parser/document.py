"""Walk a whole API document and assemble every operation.

Operations are grouped into services by tag.
"""

import logging
from pathlib import Path

import yaml

from openapi_params.config import DEFAULT_TAG, HTTP_METHODS, ParserSettings
from openapi_params.errors import DocumentError, OperationParseError, ReferenceResolutionError
from openapi_params.parser import openapi, operation, swagger
from openapi_params.parser.base import Operation, Service
from openapi_params.parser.detect import detect_dialect

logger = logging.getLogger(__name__)

DIALECTS = {
    "swagger": (swagger.get_operation_parameters, swagger.get_operation),
    "openapi": (openapi.get_operation_parameters, operation.get_operation),
}


def load_document(file_path: Path) -> dict:
    """Load a JSON or YAML API document."""
    text = file_path.read_text(encoding="utf-8")
    try:
        document = yaml.safe_load(text)
    except yaml.YAMLError as e:
        raise DocumentError(f"Cannot parse {file_path}: {e}") from e
    if not isinstance(document, dict):
        raise DocumentError(f"{file_path} does not contain an API document")
    return document


def parse_document(document: dict, settings: ParserSettings | None = None) -> list[Service]:
    """Assemble all operations of a loaded document, grouped into services."""
    settings = settings or ParserSettings()
    dialect = detect_dialect(document)
    get_parameters, get_operation = DIALECTS[dialect]
    logger.debug("Parsing %s document", dialect)

    services: dict[str, Service] = {}
    for path, path_item in (document.get("paths") or {}).items():
        path_item = path_item or {}
        try:
            path_params = get_parameters(document, path_item.get("parameters") or [], settings=settings)
        except ReferenceResolutionError as e:
            raise OperationParseError("*", path, e) from e

        for method in HTTP_METHODS:
            op = path_item.get(method)
            if op is None:
                continue
            for tag in _unique_tags(op):
                try:
                    record = get_operation(document, path, method, tag, op, path_params, settings=settings)
                except ReferenceResolutionError as e:
                    raise OperationParseError(method, path, e) from e
                _add_operation(services, record)

    return [services[name] for name in sorted(services)]


def parse_file(file_path: Path, settings: ParserSettings | None = None) -> list[Service]:
    return parse_document(load_document(file_path), settings=settings)


def _unique_tags(op: dict) -> list[str]:
    tags = []
    for tag in op.get("tags") or [DEFAULT_TAG]:
        if tag not in tags:
            tags.append(tag)
    return tags


def _add_operation(services: dict[str, Service], record: Operation) -> None:
    service = services.setdefault(record.service, Service(name=record.service))
    service.operations.append(record)
    for item in record.imports:
        if item not in service.imports:
            service.imports.append(item)
    service.imports.sort()
