"""Lookup table of endpoint specs, keyed by metadata name."""

import logging
from collections.abc import Iterable, Iterator

from notion_specs.core.errors import DuplicateEndpointError, EndpointNotFoundError
from notion_specs.core.types import EndpointSpec

logger = logging.getLogger(__name__)


class EndpointRegistry:
    """Holds endpoint specs in registration order."""

    def __init__(self, specs: Iterable[EndpointSpec] = ()):
        self._by_name: dict[str, EndpointSpec] = {}
        self._by_route: dict[tuple[str, str], EndpointSpec] = {}
        for spec in specs:
            self.register(spec)

    def register(self, spec: EndpointSpec) -> None:
        route = (spec.method, spec.path)
        if spec.name in self._by_name:
            raise DuplicateEndpointError(spec.name)
        if route in self._by_route:
            raise DuplicateEndpointError(f"{spec.method} {spec.path}")

        self._by_name[spec.name] = spec
        self._by_route[route] = spec
        logger.debug("Registered endpoint %s (%s %s)", spec.name, spec.method, spec.path)

    def get(self, name: str) -> EndpointSpec:
        try:
            return self._by_name[name]
        except KeyError:
            raise EndpointNotFoundError(name) from None

    def find(self, method: str, path: str) -> EndpointSpec:
        """Look up by HTTP verb and path template, e.g. ("get", "/users/{userId}")."""
        try:
            return self._by_route[(method.upper(), path)]
        except KeyError:
            raise EndpointNotFoundError(f"{method.upper()} {path}") from None

    def by_tag(self, tag: str) -> list[EndpointSpec]:
        return [spec for spec in self if tag in spec.metadata.tags]

    def names(self) -> list[str]:
        return list(self._by_name)

    def __contains__(self, name: object) -> bool:
        return name in self._by_name

    def __iter__(self) -> Iterator[EndpointSpec]:
        return iter(self._by_name.values())

    def __len__(self) -> int:
        return len(self._by_name)
