"""Schemas and parameters shared by the Notion endpoint specs."""

from notion_specs.config import DEFAULT_API_VERSION
from notion_specs.core.frozen import freeze
from notion_specs.core.schemas import (
    make_boolean_schema,
    make_nullable,
    make_object_schema,
    make_one_of,
    make_string_schema,
)
from notion_specs.core.types import EndpointParameter

VERSION_HEADER_PARAM = EndpointParameter(
    name="Notion-Version",
    location="header",
    description="The Notion API version to use for this request",
    param_schema={"type": "string", "default": DEFAULT_API_VERSION},
    required=True,
)

_USER_COMMON = {
    "object": make_string_schema("Object", "Always user", enum=["user"]),
    "id": make_string_schema("ID", "Unique identifier for this user", fmt="uuid"),
}

_USER_OPTIONAL = {
    "name": make_nullable(make_string_schema("Name", "User's name, as displayed in Notion")),
    "avatar_url": make_nullable(make_string_schema("Avatar URL", "Chosen avatar image")),
}

PERSON_USER_SCHEMA = freeze(make_object_schema(
    "PersonUser",
    required_properties={
        **_USER_COMMON,
        "type": make_string_schema("Type", "Type of the user", enum=["person"]),
    },
    optional_properties={
        **_USER_OPTIONAL,
        "person": make_object_schema(
            "Person",
            optional_properties={
                "email": make_string_schema("Email", "Email address of the person"),
            },
        ),
    },
))

_WORKSPACE_OWNER_SCHEMA = make_object_schema(
    "WorkspaceOwner",
    required_properties={
        "type": make_string_schema("Type", "Owner type", enum=["workspace"]),
        "workspace": make_boolean_schema("Workspace", "Always true for workspace-owned bots"),
    },
)

_USER_OWNER_SCHEMA = make_object_schema(
    "UserOwner",
    required_properties={
        "type": make_string_schema("Type", "Owner type", enum=["user"]),
        "user": make_object_schema(
            "OwnerUser",
            required_properties={"object": _USER_COMMON["object"], "id": _USER_COMMON["id"]},
        ),
    },
)

_BOT_OWNER_SCHEMA = make_one_of(
    "BotOwner", [_WORKSPACE_OWNER_SCHEMA, _USER_OWNER_SCHEMA], "Who owns the integration"
)

BOT_USER_SCHEMA = freeze(make_object_schema(
    "BotUser",
    required_properties={
        **_USER_COMMON,
        "type": make_string_schema("Type", "Type of the user", enum=["bot"]),
    },
    optional_properties={
        **_USER_OPTIONAL,
        "bot": make_object_schema(
            "Bot",
            optional_properties={
                "owner": _BOT_OWNER_SCHEMA,
                "workspace_name": make_nullable(
                    make_string_schema("Workspace name", "Workspace the bot belongs to")
                ),
            },
        ),
    },
))

USER_SCHEMA = freeze(make_one_of("User", [PERSON_USER_SCHEMA, BOT_USER_SCHEMA]))

YOUR_BOT_SCHEMA = freeze(make_object_schema(
    "YourBot",
    required_properties={
        **_USER_COMMON,
        "type": make_string_schema("Type", "Type of the user", enum=["bot"]),
        "bot": make_object_schema(
            "Bot",
            required_properties={"owner": _BOT_OWNER_SCHEMA},
            optional_properties={
                "workspace_name": make_nullable(
                    make_string_schema("Workspace name", "Workspace the bot belongs to")
                ),
            },
        ),
    },
    optional_properties=_USER_OPTIONAL,
))
