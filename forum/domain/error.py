"""Domain layer errors."""

from enum import Enum


class DomainError(Exception):
    """Base domain error."""

    pass


class ValidationErrorKind(str, Enum):
    """Why a payload failed validation."""

    MISSING_PROPERTY = "missing_property"
    INVALID_TYPE = "invalid_type"


class ValidationError(DomainError):
    """Raised when a payload is missing a property or has a mistyped one."""

    def __init__(self, entity: str, kind: ValidationErrorKind):
        self.entity = entity
        self.kind = kind
        super().__init__(f"{entity}.{kind.name}")


class NotFoundError(DomainError):
    """Raised when a requested resource is not found.

    ``scope`` names the parent the resource was looked up in, for example
    ``"thread thread-123"`` when a comment is verified inside a thread.
    """

    def __init__(self, resource: str, identifier: str, scope: str | None = None):
        self.resource = resource
        self.identifier = identifier
        self.scope = scope
        if scope:
            super().__init__(f"{resource} not found in {scope}: {identifier}")
        else:
            super().__init__(f"{resource} not found: {identifier}")


class ForbiddenError(DomainError):
    """Raised when a user attempts to modify content they don't own."""

    def __init__(self, resource: str, resource_id: str, user_id: str):
        self.resource = resource
        self.resource_id = resource_id
        self.user_id = user_id
        super().__init__(
            f"User {user_id} is not authorized to modify {resource} {resource_id}"
        )
