"""Response extraction: results, errors and the response header."""

import re

from openapi_params.parser.base import OperationError, OperationResponse
from openapi_params.parser.refs import get_ref
from openapi_params.parser.request_body import get_content
from openapi_params.parser.schema import build_model, copy_fields

_STATUS_CODE = re.compile(r"^\d+$")


def get_response_code(value: str | int) -> int | None:
    """'default' counts as 200; anything that is not a status code is ignored."""
    if value == "default":
        return 200
    text = str(value)
    if _STATUS_CODE.match(text):
        return int(text)
    return None


def get_operation_response(document: dict, response: dict, code: int) -> OperationResponse:
    schema = None
    if "content" in response:
        content = get_content(document, response.get("content") or {})
        if content is not None:
            schema = content.schema
    elif "schema" in response:
        schema = response["schema"]

    if schema is not None:
        model = build_model(document, schema)
        return OperationResponse(
            code=code,
            **copy_fields(model, "name", "description"),
            description=response.get("description"),
        )

    # Only plain string headers are supported by the generated clients.
    headers = response.get("headers") or {}
    for name in headers:
        return OperationResponse(
            location="header",
            name=name,
            code=code,
            type="string",
            base="string",
            description=response.get("description"),
        )

    return OperationResponse(code=code, description=response.get("description"))


def get_operation_responses(document: dict, responses: dict) -> list[OperationResponse]:
    operation_responses = []
    for raw_code, response_or_ref in responses.items():
        code = get_response_code(raw_code)
        if code is None:
            continue
        response = get_ref(document, response_or_ref)
        operation_responses.append(get_operation_response(document, response, code))
    return sorted(operation_responses, key=lambda r: r.code)


def get_operation_results(responses: list[OperationResponse]) -> list[OperationResponse]:
    """Successful responses, deduplicated; a single void result if there are none."""
    results: list[OperationResponse] = []
    for response in responses:
        if 200 <= response.code < 300 and response.code != 204 and response not in results:
            results.append(response)
    if not results:
        results.append(OperationResponse(code=200, description="", type="void", base="void"))
    return results


def get_operation_errors(responses: list[OperationResponse]) -> list[OperationError]:
    return [
        OperationError(code=response.code, description=response.description)
        for response in responses
        if response.code >= 300 and response.description
    ]


def get_operation_response_header(results: list[OperationResponse]) -> str | None:
    for result in results:
        if result.location == "header":
            return result.name
    return None
