"""Data models for declarative endpoint specs.

An endpoint spec is an inert record: path template, HTTP verb, metadata,
parameters and the response variants each status code may produce.
Dispatchers and documentation generators consume these records.
"""

import re
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from notion_specs.core.frozen import FrozenDict, FrozenMapping, FrozenScopes

HTTP_METHODS = ("GET", "POST", "PUT", "DELETE", "PATCH")

_PATH_PARAM_RE = re.compile(r"\{([^{}]+)\}")
_TITLE_REF_RE = re.compile(r"\$\{parameters\.([A-Za-z0-9_]+)\}")


class _SpecModel(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True, validate_default=True)


class ExternalDocs(_SpecModel):
    description: str
    url: str


class DisplayProperties(_SpecModel):
    title: str  # may reference ${parameters.<name>}


class EndpointMetadata(_SpecModel):
    """Naming and documentation attached to an endpoint."""

    name: str = Field(min_length=1)
    description: str
    display_properties: DisplayProperties = Field(alias="displayProperties")
    external_docs: ExternalDocs | None = Field(default=None, alias="externalDocs")
    tags: tuple[str, ...] = ()


class EndpointParameter(_SpecModel):
    """A single parameter (path, query or header)."""

    name: str
    location: Literal["path", "query", "header", "cookie"] = Field(alias="in")
    description: str = ""
    param_schema: FrozenMapping = Field(default={}, alias="schema")
    required: bool = False


class EndpointSpecResponse(_SpecModel):
    """One possible response shape for a status code."""

    success: bool
    name: str
    description: str = ""
    response_schema: FrozenMapping = Field(default={}, alias="schema")


class EndpointSpec(_SpecModel):
    """A single REST operation."""

    path: str = Field(min_length=1)  # /users/{userId}
    method: str  # GET / POST / PUT / DELETE / PATCH
    metadata: EndpointMetadata
    security: FrozenScopes = {}
    parameters: tuple[EndpointParameter, ...] = ()
    request: FrozenMapping = {}
    responses: dict[str, tuple[EndpointSpecResponse, ...]]

    @field_validator("method")
    @classmethod
    def _check_method(cls, value: str) -> str:
        value = value.upper()
        if value not in HTTP_METHODS:
            raise ValueError(f"unsupported HTTP method: {value}")
        return value

    @field_validator("responses", mode="before")
    @classmethod
    def _stringify_status_codes(cls, value):
        if isinstance(value, dict):
            return {str(code): variants for code, variants in value.items()}
        return value

    @field_validator("responses")
    @classmethod
    def _check_responses(cls, value: dict) -> FrozenDict:
        for code, variants in value.items():
            if not variants:
                raise ValueError(f"response {code} has no variants")
        return FrozenDict(value)

    @model_validator(mode="after")
    def _check_path_params(self) -> "EndpointSpec":
        declared = {p.name for p in self.parameters if p.location == "path" and p.required}
        missing = [name for name in self.path_params() if name not in declared]
        if missing:
            raise ValueError(
                f"{self.method} {self.path}: no required path parameter for {', '.join(missing)}"
            )
        return self

    @property
    def name(self) -> str:
        return self.metadata.name

    def path_params(self) -> list[str]:
        """Placeholder names in the path template, in order."""
        return _PATH_PARAM_RE.findall(self.path)

    def parameter(self, name: str) -> EndpointParameter | None:
        for p in self.parameters:
            if p.name == name:
                return p
        return None

    def display_title(self, parameters: dict | None = None) -> str:
        """Render the display title, substituting ${parameters.x} references.

        References without a supplied value are left as written.
        """
        parameters = parameters or {}

        def _sub(match: re.Match) -> str:
            key = match.group(1)
            if key in parameters:
                return str(parameters[key])
            return match.group(0)

        return _TITLE_REF_RE.sub(_sub, self.metadata.display_properties.title)

    def to_document(self) -> dict:
        """Structural document form, using the wire field names."""
        return self.model_dump(by_alias=True, mode="json")
