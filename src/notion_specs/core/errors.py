"""Errors raised while registering, looking up or loading endpoint specs."""


class SpecError(Exception):
    """Base exception for endpoint spec operations."""

    pass


class DuplicateEndpointError(SpecError):
    """Raised when a name or method/path pair is registered twice."""

    def __init__(self, key: str):
        self.key = key
        super().__init__(f"Endpoint already registered: {key}")


class EndpointNotFoundError(SpecError):
    """Raised when no registered endpoint matches a lookup."""

    def __init__(self, key: str):
        self.key = key
        super().__init__(f"Endpoint not found: {key}")


class InvalidSpecError(SpecError):
    """Raised when a document cannot be turned into endpoint specs."""

    pass
