import json

import pytest
import yaml

from notion_specs.config import Settings
from notion_specs.core.errors import InvalidSpecError
from notion_specs.core.types import (
    DisplayProperties,
    EndpointMetadata,
    EndpointSpec,
    EndpointSpecResponse,
)
from notion_specs.notion.users import ERROR_RESPONSE, USER_ENDPOINTS
from notion_specs.openapi import dump_document, from_openapi, parse_openapi, to_openapi

SETTINGS = Settings(api_base_url="https://example.test/v1", api_version="2099-01-01")


class TestToOpenApi:
    def test_document_header(self):
        doc = to_openapi(USER_ENDPOINTS, SETTINGS)
        assert doc["openapi"] == "3.0.3"
        assert doc["info"]["version"] == "2099-01-01"
        assert doc["servers"] == [{"url": "https://example.test/v1"}]
        assert "api_key" in doc["components"]["securitySchemes"]

    def test_paths_and_operations(self):
        doc = to_openapi(USER_ENDPOINTS, SETTINGS)
        assert list(doc["paths"]) == ["/users/{userId}", "/users", "/users/me"]
        op = doc["paths"]["/users/{userId}"]["get"]
        assert op["operationId"] == "getUser"
        assert op["security"] == [{"api_key": []}]
        assert op["x-display-properties"]["title"] == "Get user info for user id ${parameters.userId}"
        assert op["parameters"][0]["in"] == "path"
        assert "requestBody" not in op

    def test_responses(self):
        doc = to_openapi(USER_ENDPOINTS, SETTINGS)
        responses = doc["paths"]["/users"]["get"]["responses"]
        ok = responses["200"]
        assert ok["content"]["application/json"]["schema"]["title"] == "ListUsersResponse"
        assert ok["x-variants"] == [
            {"success": True, "name": "Success", "description": "Typical success response"}
        ]
        assert "content" not in responses["default"]
        assert responses["default"]["description"] == "Error response"

    def test_multiple_variants_use_one_of(self):
        spec = EndpointSpec(
            path="/things",
            method="POST",
            metadata=EndpointMetadata(
                name="createThing",
                description="",
                display_properties=DisplayProperties(title="Create"),
            ),
            request={"type": "object"},
            responses={
                "200": [
                    EndpointSpecResponse(success=True, name="Page", response_schema={"title": "Page"}),
                    EndpointSpecResponse(success=True, name="Database", response_schema={"title": "Database"}),
                ],
                "default": [ERROR_RESPONSE],
            },
        )
        doc = to_openapi([spec], SETTINGS)
        op = doc["paths"]["/things"]["post"]
        assert op["requestBody"]["content"]["application/json"]["schema"] == {"type": "object"}
        schema = op["responses"]["200"]["content"]["application/json"]["schema"]
        assert [s["title"] for s in schema["oneOf"]] == ["Page", "Database"]

        assert from_openapi(doc) == [spec]


class TestParseOpenApi:
    @pytest.mark.parametrize("fmt", ["yaml", "json"])
    def test_roundtrip_through_file(self, tmp_path, fmt):
        path = tmp_path / f"notion.{fmt}"
        path.write_text(dump_document(to_openapi(USER_ENDPOINTS, SETTINGS), fmt), encoding="utf-8")

        specs = parse_openapi(path)
        assert specs == list(USER_ENDPOINTS)

    def test_json_dump_is_json(self):
        text = dump_document(to_openapi(USER_ENDPOINTS, SETTINGS), "json")
        assert json.loads(text)["paths"]["/users/me"]["get"]["operationId"] == "getBotInfo"

    def test_foreign_document_without_extensions(self, tmp_path):
        path = tmp_path / "petstore.yaml"
        path.write_text(
            yaml.safe_dump(
                {
                    "openapi": "3.0.0",
                    "paths": {
                        "/pets/{petId}": {
                            "parameters": [],
                            "get": {
                                "operationId": "showPetById",
                                "summary": "Info for a specific pet",
                                "parameters": [
                                    {"name": "petId", "in": "path", "required": True, "schema": {"type": "string"}}
                                ],
                                "responses": {
                                    200: {
                                        "description": "Expected response",
                                        "content": {"application/json": {"schema": {"type": "object"}}},
                                    },
                                    "default": {"description": "unexpected error"},
                                },
                            },
                        }
                    },
                },
                sort_keys=False,
            ),
            encoding="utf-8",
        )
        [spec] = parse_openapi(path)
        assert spec.name == "showPetById"
        assert spec.metadata.display_properties.title == "Info for a specific pet"
        assert spec.responses["200"][0].success is True
        assert spec.responses["200"][0].response_schema == {"type": "object"}
        assert spec.responses["default"][0].name == "Error"
        assert spec.responses["default"][0].success is False

    def test_path_item_parameters_are_merged(self):
        doc = {
            "paths": {
                "/pets/{petId}": {
                    "parameters": [
                        {"name": "petId", "in": "path", "required": True, "schema": {"type": "string"}},
                        {"name": "verbose", "in": "query", "schema": {"type": "boolean"}},
                    ],
                    "get": {
                        "operationId": "showPetById",
                        "responses": {"200": {"description": "ok"}},
                    },
                    "delete": {
                        "operationId": "deletePet",
                        "parameters": [
                            {"name": "verbose", "in": "query", "required": True, "schema": {"type": "boolean"}},
                            {"name": "reason", "in": "query", "schema": {"type": "string"}},
                        ],
                        "responses": {"204": {"description": "deleted"}},
                    },
                }
            }
        }
        show, delete = from_openapi(doc)

        assert [p.name for p in show.parameters] == ["petId", "verbose"]
        assert show.parameter("petId").required is True

        assert [p.name for p in delete.parameters] == ["petId", "verbose", "reason"]
        assert delete.parameter("verbose").required is True

    @pytest.mark.parametrize(
        "doc",
        [
            {"paths": None},
            {"paths": ["/x"]},
            {"paths": {"/x": None}},
            {"paths": {"/x": {"get": "not an operation"}}},
            {"paths": {"/x": {"parameters": ["bad"], "get": {"operationId": "getX", "responses": {}}}}},
            ["not", "a", "mapping"],
        ],
    )
    def test_malformed_structure(self, doc):
        with pytest.raises(InvalidSpecError):
            from_openapi(doc)

    def test_missing_paths(self, tmp_path):
        path = tmp_path / "doc.yaml"
        path.write_text("openapi: 3.0.0\n", encoding="utf-8")
        with pytest.raises(InvalidSpecError, match="paths"):
            parse_openapi(path)

    def test_missing_operation_id(self):
        doc = {"paths": {"/x": {"get": {"responses": {"200": {"description": "ok"}}}}}}
        with pytest.raises(InvalidSpecError, match="operationId"):
            from_openapi(doc)

    def test_invalid_operation_wrapped(self):
        doc = {"paths": {"/x/{id}": {"get": {"operationId": "getX", "responses": {"200": {"description": "ok"}}}}}}
        with pytest.raises(InvalidSpecError, match="GET /x/\\{id\\}"):
            from_openapi(doc)

    def test_not_yaml(self, tmp_path):
        path = tmp_path / "broken.yaml"
        path.write_text("key: [unclosed\n", encoding="utf-8")
        with pytest.raises(InvalidSpecError):
            parse_openapi(path)
