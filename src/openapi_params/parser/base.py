"""Canonical data models for normalized API operations.

Both dialect parsers (Swagger 2.0 and OpenAPI 3.x) convert their input
into these models for the downstream code emitter.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict


class EnumValue(BaseModel):
    """A single member of an enum type."""

    name: str
    value: Any
    type: str  # string / number / ...
    description: str | None = None


class Model(BaseModel):
    """Resolved, flattened view of a schema node.

    Properties of an object model are Models themselves, so the same
    shape describes both a schema and one of its fields.
    """

    name: str = ""
    export: str = "primitive"  # primitive / reference / array / dictionary / enum / object
    type: str = "any"
    base: str = "any"
    template: str | None = None
    link: "Model | None" = None
    description: str | None = None
    deprecated: bool = False
    is_definition: bool = False
    is_read_only: bool = False
    is_required: bool = False
    is_nullable: bool = False
    format: str | None = None
    maximum: float | None = None
    exclusive_maximum: bool | float | None = None
    minimum: float | None = None
    exclusive_minimum: bool | float | None = None
    multiple_of: float | None = None
    max_length: int | None = None
    min_length: int | None = None
    max_items: int | None = None
    min_items: int | None = None
    unique_items: bool | None = None
    max_properties: int | None = None
    min_properties: int | None = None
    pattern: str | None = None
    default: Any = None
    imports: list[str] = []
    enum: list[EnumValue] = []
    enums: list[EnumValue] = []
    properties: list["Model"] = []


class OperationParameter(Model):
    """A parameter bound to a generated call site."""

    location: str  # path / query / header / form / cookie / body
    prop: str  # original key in the document
    media_type: str | None = None  # only set on exploded request-body fields


class OperationParameters(BaseModel):
    """Parameters of one operation, bucketed by location."""

    imports: list[str] = []
    parameters: list[OperationParameter] = []
    parameters_path: list[OperationParameter] = []
    parameters_query: list[OperationParameter] = []
    parameters_form: list[OperationParameter] = []
    parameters_cookie: list[OperationParameter] = []
    parameters_header: list[OperationParameter] = []
    parameters_body: OperationParameter | None = None
    parameters_body_expanded: list[OperationParameter] = []


class OperationResponse(Model):
    """A response (or response header) an operation can produce."""

    location: str = "response"  # response / header
    code: int


class OperationError(BaseModel):
    code: int
    description: str


class Operation(OperationParameters):
    """Final record for one method on one path."""

    model_config = ConfigDict(frozen=True)

    service: str
    name: str
    summary: str | None = None
    description: str | None = None
    deprecated: bool = False
    method: str  # GET / POST / PUT / DELETE / PATCH / ...
    path: str  # /pets/{petId}
    errors: list[OperationError] = []
    results: list[OperationResponse] = []
    response_header: str | None = None


class Service(BaseModel):
    """Operations grouped under one tag."""

    name: str
    operations: list[Operation] = []
    imports: list[str] = []
