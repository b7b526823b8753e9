"""Process-wide registry of every Notion endpoint spec."""

from functools import lru_cache

from notion_specs.core.registry import EndpointRegistry
from notion_specs.notion.users import USER_ENDPOINTS

ALL_ENDPOINTS = (*USER_ENDPOINTS,)


@lru_cache
def get_registry() -> EndpointRegistry:
    """Build the registry once; callers share and only read it."""
    return EndpointRegistry(ALL_ENDPOINTS)
