"""
Domain exceptions.

Validation failures are plain ValueError subclasses so callers that only
know about ValueError keep working; the API layer maps each class to an
HTTP status.
"""


class DomainError(ValueError):
    """Base class for marketplace rule violations."""


class NotFoundError(LookupError):
    """Requested row does not exist (or is not visible to the caller)."""

    def __init__(self, entity: str, entity_id: str):
        self.entity = entity
        self.entity_id = entity_id
        super().__init__(f"{entity} not found: {entity_id}")


class PermissionDeniedError(DomainError):
    """Caller does not own the row it is trying to change."""


class InvalidStateTransition(DomainError):
    """Status change not allowed from the current status."""

    def __init__(self, entity: str, current: str, action: str):
        self.entity = entity
        self.current = current
        self.action = action
        super().__init__(f"Cannot {action} {entity} in status '{current}'")


class ConflictError(DomainError):
    """Row already exists (duplicate review, duplicate save, ...)."""


class AuthenticationError(Exception):
    """Missing or invalid session."""
