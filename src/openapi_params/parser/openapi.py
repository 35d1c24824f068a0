"""OpenAPI 3.x parameter declarations.

Request bodies are a separate construct in this dialect and are handled
by the operation assembler, so there is no body location here.
"""

import logging
from collections.abc import Iterable

from openapi_params.config import ParserSettings
from openapi_params.errors import DocumentError
from openapi_params.parser.base import OperationParameter, OperationParameters
from openapi_params.parser.collector import ParameterCollector
from openapi_params.parser.expand import expand_parameter
from openapi_params.parser.naming import sanitize_name
from openapi_params.parser.refs import get_ref
from openapi_params.parser.schema import build_model, copy_fields

logger = logging.getLogger(__name__)

LOCATIONS = {
    "path": "path",
    "query": "query",
    "header": "header",
    "cookie": "cookie",
    "formData": "form",
    "form": "form",
}


def get_operation_parameter(document: dict, parameter: dict) -> OperationParameter:
    """Normalize one resolved parameter declaration."""
    if "name" not in parameter or "in" not in parameter:
        raise DocumentError(f"Parameter declaration needs 'name' and 'in': {parameter!r}")

    prop = parameter["name"]
    schema = parameter.get("schema") or {}
    model = build_model(document, schema)
    return OperationParameter(
        location=LOCATIONS.get(parameter["in"], parameter["in"]),
        prop=prop,
        name=sanitize_name(prop),
        description=parameter.get("description") or model.description,
        deprecated=parameter.get("deprecated") is True,
        is_required=parameter.get("required") is True,
        is_nullable=parameter.get("nullable") is True or model.is_nullable,
        **copy_fields(model, "name", "description", "deprecated", "is_required", "is_nullable"),
    )


def get_operation_parameters(
    document: dict,
    parameters: list[dict],
    settings: ParserSettings | None = None,
    reserved_names: Iterable[str] = (),
) -> OperationParameters:
    """Bucket parameter declarations by location, first name wins.

    Names in `reserved_names` count as already taken, so operation-level
    parameters cannot shadow inherited path-level ones.
    """
    settings = settings or ParserSettings()
    collector = ParameterCollector(unique_names=True, reserved_names=reserved_names)

    for parameter_or_ref in parameters:
        declaration = get_ref(document, parameter_or_ref)
        parameter = get_operation_parameter(document, declaration)

        if parameter.prop == settings.version_marker:
            continue

        if parameter.location in ("path", "cookie", "header"):
            collector.add(parameter)
        elif parameter.location in ("query", "form"):
            for candidate in expand_parameter(document, declaration, parameter, settings):
                collector.add(candidate)
        else:
            logger.debug("Ignoring parameter %r in unsupported location %r", parameter.prop, parameter.location)

    return collector.build()
