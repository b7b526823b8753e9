"""OpenAPI 3.0 rendering and parsing of endpoint specs.

Specs are rendered into an OpenAPI document for documentation tooling.
Details OpenAPI has no field for (display title, several response
variants per status) are kept under ``x-`` extensions, so documents
written here parse back into equal specs.
"""

import json
import logging
from collections.abc import Iterable
from pathlib import Path

import yaml
from pydantic import ValidationError

from notion_specs.config import Settings, get_settings
from notion_specs.core.errors import InvalidSpecError
from notion_specs.core.types import HTTP_METHODS, EndpointSpec

logger = logging.getLogger(__name__)

OPENAPI_VERSION = "3.0.3"
JSON_CONTENT = "application/json"


def to_openapi(specs: Iterable[EndpointSpec], settings: Settings | None = None) -> dict:
    """Render endpoint specs as an OpenAPI document."""
    settings = settings or get_settings()
    paths: dict[str, dict] = {}

    for spec in specs:
        paths.setdefault(spec.path, {})[spec.method.lower()] = _render_operation(spec)

    logger.info("Rendered %d paths into OpenAPI %s", len(paths), OPENAPI_VERSION)
    return {
        "openapi": OPENAPI_VERSION,
        "info": {"title": "Notion API", "version": settings.api_version},
        "servers": [{"url": settings.api_base_url}],
        "paths": paths,
        "components": {
            "securitySchemes": {
                "api_key": {"type": "http", "scheme": "bearer"},
            },
        },
    }


def dump_document(doc: dict, fmt: str = "yaml") -> str:
    if fmt == "json":
        return json.dumps(doc, indent=2, ensure_ascii=False) + "\n"
    return yaml.safe_dump(doc, sort_keys=False, allow_unicode=True)


def parse_openapi(file_path: Path) -> list[EndpointSpec]:
    """Parse an OpenAPI file (YAML or JSON) into a list of EndpointSpec."""
    text = file_path.read_text(encoding="utf-8")
    try:
        doc = yaml.safe_load(text)
    except yaml.YAMLError as e:
        raise InvalidSpecError(f"{file_path}: not a YAML/JSON document: {e}") from e
    return from_openapi(doc)


def from_openapi(doc: dict) -> list[EndpointSpec]:
    if not isinstance(doc, dict) or not isinstance(doc.get("paths"), dict):
        raise InvalidSpecError("document has no 'paths' section")

    specs = []
    for path, methods in doc["paths"].items():
        if not isinstance(methods, dict):
            raise InvalidSpecError(f"path item {path} is not a mapping")
        shared_params = methods.get("parameters") or []
        for method, operation in methods.items():
            if method.upper() not in HTTP_METHODS:
                continue
            if not isinstance(operation, dict):
                raise InvalidSpecError(f"{method.upper()} {path}: operation is not a mapping")
            try:
                specs.append(_parse_operation(path, method, operation, shared_params))
            except ValidationError as e:
                raise InvalidSpecError(f"{method.upper()} {path}: {e}") from e
    return specs


def _render_operation(spec: EndpointSpec) -> dict:
    document = spec.to_document()
    metadata = document["metadata"]

    operation = {
        "operationId": metadata["name"],
        "description": metadata["description"],
        "tags": metadata["tags"],
        "x-display-properties": metadata["displayProperties"],
    }
    if metadata["externalDocs"] is not None:
        operation["externalDocs"] = metadata["externalDocs"]
    if document["security"]:
        operation["security"] = [document["security"]]
    operation["parameters"] = document["parameters"]
    if document["request"]:
        operation["requestBody"] = {"content": {JSON_CONTENT: {"schema": document["request"]}}}
    operation["responses"] = {
        code: _render_response(variants) for code, variants in document["responses"].items()
    }
    return operation


def _render_response(variants: list[dict]) -> dict:
    rendered = {
        "description": variants[0]["description"],
        "x-variants": [
            {"success": v["success"], "name": v["name"], "description": v["description"]}
            for v in variants
        ],
    }
    schemas = [v["schema"] for v in variants]
    if any(schemas):
        schema = schemas[0] if len(schemas) == 1 else {"oneOf": schemas}
        rendered["content"] = {JSON_CONTENT: {"schema": schema}}
    return rendered


def _parse_operation(path: str, method: str, operation: dict, shared_params: list[dict]) -> EndpointSpec:
    name = operation.get("operationId")
    if not name:
        raise InvalidSpecError(f"{method.upper()} {path}: operation has no operationId")

    display = operation.get("x-display-properties") or {"title": operation.get("summary", name)}
    security: dict[str, list[str]] = {}
    for requirement in operation.get("security", []):
        security.update(requirement)

    return EndpointSpec.model_validate(
        {
            "path": path,
            "method": method,
            "metadata": {
                "name": name,
                "description": operation.get("description", ""),
                "displayProperties": display,
                "externalDocs": operation.get("externalDocs"),
                "tags": operation.get("tags", []),
            },
            "security": security,
            "parameters": _merge_parameters(shared_params, operation.get("parameters", [])),
            "request": _parse_request_body(operation.get("requestBody")),
            "responses": {
                str(code): _parse_response(str(code), resp)
                for code, resp in operation.get("responses", {}).items()
            },
        }
    )


def _merge_parameters(shared: list[dict], own: list[dict]) -> list[dict]:
    """Path-item parameters first; an operation parameter with the same
    (name, in) replaces the shared one in place."""
    merged: dict[tuple, dict] = {}
    for p in [*shared, *(own or [])]:
        if not isinstance(p, dict):
            raise InvalidSpecError(f"parameter is not a mapping: {p!r}")
        merged[(p.get("name"), p.get("in"))] = p
    return list(merged.values())


def _parse_request_body(body: dict | None) -> dict:
    if not body:
        return {}
    content = body.get("content", {})
    if JSON_CONTENT in content:
        return content[JSON_CONTENT].get("schema", {})
    # Fallback: first available schema
    for ct_data in content.values():
        return ct_data.get("schema", {})
    return {}


def _parse_response(code: str, resp: dict) -> list[dict]:
    schema = resp.get("content", {}).get(JSON_CONTENT, {}).get("schema", {})
    variants = resp.get("x-variants")

    if not variants:
        success = code.startswith("2")
        return [
            {
                "success": success,
                "name": "Success" if success else "Error",
                "description": resp.get("description", ""),
                "schema": schema,
            }
        ]

    if len(variants) == 1:
        schemas = [schema]
    elif schema:
        schemas = schema.get("oneOf", [])
        if len(schemas) != len(variants):
            raise InvalidSpecError(
                f"response {code}: {len(variants)} variants but {len(schemas)} schemas"
            )
    else:
        schemas = [{} for _ in variants]

    return [{**variant, "schema": s} for variant, s in zip(variants, schemas)]
