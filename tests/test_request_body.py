from openapi_params.parser.request_body import get_content, get_operation_request_body, is_json_media_type

DOC = {"components": {"schemas": {"Pet": {"type": "object", "properties": {"id": {"type": "integer"}}}}}}

PET = {"$ref": "#/components/schemas/Pet"}


class TestGetContent:
    def test_prefers_basic_media_types(self):
        content = get_content(DOC, {"application/xml": {"schema": {"type": "string"}}, "application/json": {"schema": PET}})
        assert content.media_type == "application/json"
        assert content.schema == PET

    def test_falls_back_to_first_media_type_with_schema(self):
        content = get_content(
            DOC,
            {
                "image/png": {},
                "application/octet-stream": {"schema": {"type": "string", "format": "binary"}},
            },
        )
        assert content.media_type == "application/octet-stream"

    def test_no_schema_anywhere(self):
        assert get_content(DOC, {"application/json": {}}) is None
        assert get_content(DOC, {}) is None


class TestIsJsonMediaType:
    def test_only_plain_application_json(self):
        assert is_json_media_type("application/json")
        assert not is_json_media_type("application/json; charset=utf-8")
        assert not is_json_media_type("Application/JSON")
        assert not is_json_media_type("application/json-patch+json")
        assert not is_json_media_type("multipart/form-data")
        assert not is_json_media_type(None)


class TestGetOperationRequestBody:
    def test_reference_schema(self):
        body = get_operation_request_body(
            DOC, {"required": True, "description": "The pet", "content": {"application/json": {"schema": PET}}}
        )
        assert body.location == "body"
        assert body.prop == "requestBody"
        assert body.name == "request_body"
        assert body.type == "Pet"
        assert body.export == "reference"
        assert body.imports == ["Pet"]
        assert body.is_required is True
        assert body.description == "The pet"
        assert body.media_type == "application/json"

    def test_custom_body_name(self):
        body = get_operation_request_body(DOC, {"x-body-name": "payload", "content": {"text/plain": {"schema": {"type": "string"}}}})
        assert body.prop == "payload"
        assert body.name == "payload"
        assert body.type == "string"
        assert body.is_required is False

    def test_without_content(self):
        body = get_operation_request_body(DOC, {})
        assert body.type == "any"
        assert body.media_type is None
