from openapi_params.config import ParserSettings
from openapi_params.parser.base import OperationParameters
from openapi_params.parser.swagger import get_operation, get_operation_parameter, get_operation_parameters

DOC = {
    "swagger": "2.0",
    "parameters": {
        "ApiVersion": {"name": "api-version", "in": "query", "required": True, "type": "string"},
    },
    "definitions": {
        "Filter": {
            "type": "object",
            "properties": {"status": {"type": "string"}, "limit": {"type": "integer"}},
        },
        "Empty": {"type": "object"},
        "Pet": {"type": "object", "properties": {"id": {"type": "integer"}}},
    },
}


class TestGetOperationParameter:
    def test_inline_type(self):
        p = get_operation_parameter(DOC, {"name": "petId", "in": "path", "required": True, "type": "integer"})
        assert p.location == "path"
        assert p.prop == "petId"
        assert p.name == "pet_id"
        assert p.type == "number"
        assert p.is_required is True

    def test_form_data_maps_to_form(self):
        p = get_operation_parameter(DOC, {"name": "file", "in": "formData", "type": "file"})
        assert p.location == "form"
        assert p.type == "binary"

    def test_body_schema_reference(self):
        p = get_operation_parameter(DOC, {"name": "body", "in": "body", "schema": {"$ref": "#/definitions/Pet"}})
        assert p.location == "body"
        assert p.export == "reference"
        assert p.imports == ["Pet"]


class TestGetOperationParameters:
    def test_buckets_by_location(self):
        result = get_operation_parameters(
            DOC,
            [
                {"name": "petId", "in": "path", "required": True, "type": "integer"},
                {"name": "X-Trace", "in": "header", "type": "string"},
                {"name": "limit", "in": "query", "type": "integer"},
                {"name": "file", "in": "formData", "type": "file"},
                {"name": "pet", "in": "body", "schema": {"$ref": "#/definitions/Pet"}},
            ],
        )
        assert [p.name for p in result.parameters_path] == ["pet_id"]
        assert [p.name for p in result.parameters_header] == ["x_trace"]
        assert [p.name for p in result.parameters_query] == ["limit"]
        assert [p.name for p in result.parameters_form] == ["file"]
        assert result.parameters_body.name == "pet"
        assert [p.name for p in result.parameters] == ["pet_id", "x_trace", "limit", "file", "pet"]
        assert result.imports == ["Pet"]
        assert result.parameters_body_expanded == []

    def test_version_marker_is_excluded(self):
        result = get_operation_parameters(
            DOC,
            [{"$ref": "#/parameters/ApiVersion"}, {"name": "limit", "in": "query", "type": "integer"}],
        )
        assert [p.prop for p in result.parameters] == ["limit"]
        assert [p.prop for p in result.parameters_query] == ["limit"]

    def test_custom_version_marker(self):
        settings = ParserSettings(version_marker="v")
        result = get_operation_parameters(
            DOC,
            [{"name": "v", "in": "header", "type": "string"}, {"name": "api-version", "in": "query", "type": "string"}],
            settings=settings,
        )
        assert [p.prop for p in result.parameters] == ["api-version"]

    def test_query_schema_reference_is_expanded(self):
        result = get_operation_parameters(
            DOC, [{"name": "filter", "in": "query", "schema": {"$ref": "#/definitions/Filter"}}]
        )
        assert [p.name for p in result.parameters_query] == ["status", "limit"]
        assert all(p.location == "query" for p in result.parameters)
        assert all(p.media_type is None and p.is_definition is False for p in result.parameters)

    def test_form_schema_reference_is_expanded(self):
        result = get_operation_parameters(
            DOC, [{"name": "filter", "in": "formData", "schema": {"$ref": "#/definitions/Filter"}}]
        )
        assert [p.name for p in result.parameters_form] == ["status", "limit"]
        assert result.parameters_query == []

    def test_reference_without_properties_keeps_single_parameter(self):
        declaration = {"name": "filter", "in": "query", "schema": {"$ref": "#/definitions/Empty"}}
        result = get_operation_parameters(DOC, [declaration])
        assert len(result.parameters_query) == 1
        assert result.parameters_query[0] == get_operation_parameter(DOC, declaration)

    def test_expansion_can_be_disabled(self):
        result = get_operation_parameters(
            DOC,
            [{"name": "filter", "in": "query", "schema": {"$ref": "#/definitions/Filter"}}],
            settings=ParserSettings(expand_parameters=False),
        )
        assert [p.name for p in result.parameters_query] == ["filter"]

    def test_no_deduplication(self):
        result = get_operation_parameters(
            DOC,
            [{"name": "id", "in": "path", "type": "string"}, {"name": "id", "in": "query", "type": "string"}],
        )
        assert [p.name for p in result.parameters] == ["id", "id"]

    def test_last_body_declaration_wins(self):
        result = get_operation_parameters(
            DOC,
            [
                {"name": "first", "in": "body", "schema": {"type": "string"}},
                {"name": "second", "in": "body", "schema": {"type": "string"}},
            ],
        )
        assert result.parameters_body.name == "second"


class TestGetOperation:
    def test_inherits_path_parameters_and_sorts(self):
        path_params = get_operation_parameters(DOC, [{"name": "petId", "in": "path", "required": True, "type": "integer"}])
        op = {
            "operationId": "updatePet",
            "parameters": [
                {"name": "dryRun", "in": "query", "type": "boolean"},
                {"name": "pet", "in": "body", "required": True, "schema": {"$ref": "#/definitions/Pet"}},
            ],
            "responses": {"200": {"description": "ok", "schema": {"$ref": "#/definitions/Pet"}}},
        }
        operation = get_operation(DOC, "/pets/{petId}", "put", "pets", op, path_params)

        assert operation.method == "PUT"
        assert operation.name == "update_pet"
        assert operation.service == "Pets"
        assert [p.name for p in operation.parameters] == ["pet_id", "pet", "dry_run"]
        assert operation.parameters_body.name == "pet"
        assert operation.parameters_body_expanded == []
        assert operation.results[0].type == "Pet"
        assert "Pet" in operation.imports

    def test_without_operation_parameters(self):
        operation = get_operation(DOC, "/pets", "get", "pets", {}, OperationParameters())
        assert operation.parameters == []
        assert operation.parameters_body is None
        assert operation.results == []
