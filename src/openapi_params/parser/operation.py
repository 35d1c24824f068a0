"""Operation assembly for OpenAPI 3 documents.

Combines path-level and operation-level parameters, decides whether the
request body is passed whole or exploded into named fields, and attaches
results and errors.
"""

import logging

from openapi_params.config import ParserSettings
from openapi_params.parser.base import Operation, OperationParameter, OperationParameters
from openapi_params.parser.collector import ParameterCollector
from openapi_params.parser.expand import expand_schema_properties
from openapi_params.parser.naming import get_operation_name, get_service_name
from openapi_params.parser.openapi import get_operation_parameters
from openapi_params.parser.refs import get_ref, is_ref
from openapi_params.parser.request_body import get_content, get_operation_request_body, is_json_media_type
from openapi_params.parser.responses import (
    get_operation_errors,
    get_operation_response_header,
    get_operation_responses,
    get_operation_results,
)

logger = logging.getLogger(__name__)

BUCKET_FIELDS = tuple(field for field in OperationParameters.model_fields if field not in ("imports", "parameters"))


def sort_by_required(parameters: list[OperationParameter]) -> list[OperationParameter]:
    """Required parameters first; ties keep their input order."""
    return sorted(parameters, key=lambda p: not p.is_required)


def get_operation(
    document: dict,
    path: str,
    method: str,
    tag: str,
    op: dict,
    path_params: OperationParameters,
    settings: ParserSettings | None = None,
) -> Operation:
    settings = settings or ParserSettings()

    collector = ParameterCollector()
    collector.extend(path_params)

    if op.get("parameters"):
        collector.extend(
            get_operation_parameters(
                document,
                op["parameters"],
                settings=settings,
                reserved_names=[p.name for p in path_params.parameters],
            )
        )

    if op.get("requestBody"):
        _add_request_body(document, op["requestBody"], collector, settings)

    return create_operation(document, path, method, tag, op, collector.build())


def _add_request_body(
    document: dict,
    body_or_ref: dict,
    collector: ParameterCollector,
    settings: ParserSettings,
) -> None:
    body = get_ref(document, body_or_ref)
    request_body = get_operation_request_body(document, body)

    content = get_content(document, body.get("content") or {})
    if (
        settings.expand_request_body
        and content is not None
        and is_ref(content.schema)
        and is_json_media_type(request_body.media_type)
    ):
        fields = expand_schema_properties(document, content.schema, "body", media_type=request_body.media_type)
        if fields:
            for field in fields:
                collector.add_body_field(field)
            collector.body = None
            return
        logger.debug("Request body schema %s has no properties, passing it whole", content.schema["$ref"])

    collector.set_body(request_body)


def create_operation(
    document: dict,
    path: str,
    method: str,
    tag: str,
    op: dict,
    parameters: OperationParameters,
) -> Operation:
    """Attach naming, responses and the final ordering to aggregated parameters."""
    imports = list(parameters.imports)
    results = []
    errors = []
    response_header = None

    if op.get("responses"):
        responses = get_operation_responses(document, op["responses"])
        results = get_operation_results(responses)
        errors = get_operation_errors(responses)
        response_header = get_operation_response_header(results)
        for result in results:
            imports.extend(result.imports)

    return Operation(
        service=get_service_name(tag),
        name=get_operation_name(path, method, op.get("operationId")),
        summary=op.get("summary") or None,
        description=op.get("description") or None,
        deprecated=op.get("deprecated") is True,
        method=method.upper(),
        path=path,
        **{field: getattr(parameters, field) for field in BUCKET_FIELDS},
        parameters=sort_by_required(parameters.parameters),
        imports=imports,
        errors=errors,
        results=results,
        response_header=response_header,
    )
