"""OpenAPI 3 request bodies and media-type content maps."""

from typing import NamedTuple

from openapi_params.config import BASIC_MEDIA_TYPES, JSON_MEDIA_TYPE, REQUEST_BODY_PROP
from openapi_params.parser.base import OperationParameter
from openapi_params.parser.naming import sanitize_name
from openapi_params.parser.schema import build_model, copy_fields


class Content(NamedTuple):
    media_type: str
    schema: dict


def base_media_type(media_type: str) -> str:
    """'application/json; charset=utf-8' -> 'application/json'"""
    return media_type.split(";", 1)[0].strip().lower()


def is_json_media_type(media_type: str | None) -> bool:
    """Only a bare 'application/json' body is eligible for explosion."""
    return media_type == JSON_MEDIA_TYPE


def get_content(document: dict, content: dict) -> Content | None:
    """Pick the media type a generated client will send or expect.

    Basic media types win over exotic ones; entries without a schema are
    skipped.
    """
    with_schema = [mt for mt, entry in content.items() if isinstance(entry, dict) and entry.get("schema") is not None]
    for media_type in with_schema:
        if base_media_type(media_type) in BASIC_MEDIA_TYPES:
            return Content(media_type, content[media_type]["schema"])
    if with_schema:
        return Content(with_schema[0], content[with_schema[0]]["schema"])
    return None


def get_operation_request_body(document: dict, body: dict) -> OperationParameter:
    """Normalize a resolved requestBody into one parameter for the whole body."""
    prop = body.get("x-body-name") or REQUEST_BODY_PROP
    fields = {}
    media_type = None

    content = get_content(document, body.get("content") or {})
    if content is not None:
        media_type = content.media_type
        model = build_model(document, content.schema)
        fields = copy_fields(model, "name", "description", "is_required", "is_nullable", "deprecated")

    return OperationParameter(
        location="body",
        prop=prop,
        name=sanitize_name(prop),
        description=body.get("description"),
        is_required=body.get("required") is True,
        is_nullable=body.get("nullable") is True,
        media_type=media_type,
        **fields,
    )
