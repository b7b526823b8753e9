"""Notion user endpoints: user lookup, user listing and bot identity."""

from notion_specs.core.schemas import (
    make_array_schema,
    make_boolean_schema,
    make_nullable,
    make_object_schema,
    make_string_schema,
)
from notion_specs.core.types import (
    DisplayProperties,
    EndpointMetadata,
    EndpointParameter,
    EndpointSpec,
    EndpointSpecResponse,
    ExternalDocs,
)
from notion_specs.notion.primitives import USER_SCHEMA, VERSION_HEADER_PARAM, YOUR_BOT_SCHEMA

ERROR_RESPONSE = EndpointSpecResponse(
    success=False,
    name="Error",
    description="Error response",
    response_schema={},
)

LIST_RESULT_TYPES = (
    "user",
    "block",
    "page",
    "database",
    "property_item",
    "page_or_database",
)


def _success(schema: dict) -> EndpointSpecResponse:
    return EndpointSpecResponse(
        success=True,
        name="Success",
        description="Typical success response",
        response_schema=schema,
    )


GET_USER = EndpointSpec(
    path="/users/{userId}",
    method="GET",
    metadata=EndpointMetadata(
        name="getUser",
        description="Get a user's information",
        display_properties=DisplayProperties(
            title="Get user info for user id ${parameters.userId}",
        ),
        external_docs=ExternalDocs(
            description="API method documentation",
            url="https://developers.notion.com/reference/get-user",
        ),
        tags=["users"],
    ),
    security={"api_key": []},
    parameters=[
        EndpointParameter(
            name="userId",
            location="path",
            description="ID of the user you would like info about",
            param_schema={"type": "string"},
            required=True,
        ),
        VERSION_HEADER_PARAM,
    ],
    request={},
    responses={
        "200": [_success(USER_SCHEMA)],
        "default": [ERROR_RESPONSE],
    },
)

LIST_USERS = EndpointSpec(
    path="/users",
    method="GET",
    metadata=EndpointMetadata(
        name="listUsers",
        description=(
            "Returns a paginated list of Users for the workspace. "
            "The response may contain fewer than page_size of results."
        ),
        display_properties=DisplayProperties(title="List users"),
        external_docs=ExternalDocs(
            description="API method documentation",
            url="https://developers.notion.com/reference/get-users",
        ),
        tags=["users"],
    ),
    security={"api_key": []},
    parameters=[
        VERSION_HEADER_PARAM,
        EndpointParameter(
            name="start_cursor",
            location="query",
            description=(
                "The cursor to start from. If not provided, the default is to "
                "start from the beginning of the list."
            ),
            param_schema={"type": "string"},
            required=False,
        ),
        EndpointParameter(
            name="page_size",
            location="query",
            description="The number of results to return. The maximum is 100.",
            param_schema={"type": "integer"},
            required=False,
        ),
    ],
    request={},
    responses={
        "200": [
            _success(
                make_object_schema(
                    "ListUsersResponse",
                    required_properties={
                        "results": make_array_schema("Users", USER_SCHEMA),
                        "has_more": make_boolean_schema(
                            "Has more", "Whether there are more results"
                        ),
                    },
                    optional_properties={
                        "next_cursor": make_nullable(
                            make_string_schema(
                                "Next cursor", "Use this to get the next page of results"
                            )
                        ),
                        "type": make_string_schema(
                            "Type", "The type of items in the results", enum=LIST_RESULT_TYPES
                        ),
                        "object": make_string_schema(
                            "Object", "The object type, always list", enum=["list"]
                        ),
                    },
                )
            )
        ],
        "default": [ERROR_RESPONSE],
    },
)

GET_BOT_INFO = EndpointSpec(
    path="/users/me",
    method="GET",
    metadata=EndpointMetadata(
        name="getBotInfo",
        description="Get's the bots info",
        display_properties=DisplayProperties(title="Get the bot's info"),
        external_docs=ExternalDocs(
            description="API method documentation",
            url="https://developers.notion.com/reference/get-users",
        ),
        tags=["users"],
    ),
    security={"api_key": []},
    parameters=[VERSION_HEADER_PARAM],
    request={},
    responses={
        "200": [_success(YOUR_BOT_SCHEMA)],
        "default": [ERROR_RESPONSE],
    },
)

USER_ENDPOINTS = (GET_USER, LIST_USERS, GET_BOT_INFO)
