"""Base models for all domain entities."""

from collections.abc import Mapping
from typing import Annotated, Any, ClassVar, Self

from pydantic import BaseModel, ConfigDict, StringConstraints
from pydantic import ValidationError as PydanticValidationError

from forum.domain.error import ValidationError, ValidationErrorKind

# A required text property; an empty string counts as absent
RequiredText = Annotated[str, StringConstraints(min_length=1)]

# Pydantic error types that mean "the property was not given"
_ABSENCE_ERRORS = frozenset({"missing", "string_too_short"})


class DomainModel(BaseModel):
    """Base class for all domain models.

    Provides common configuration for immutability and custom types.
    """

    model_config = ConfigDict(
        frozen=True,  # All domain models are immutable
        arbitrary_types_allowed=True,  # Allow custom value objects
    )


class PayloadModel(DomainModel):
    """Domain model built from an untrusted attribute bag.

    Payloads come from database rows and request bodies. Validation is strict:
    a value of the wrong type is rejected instead of coerced, so ``"123"`` is
    not a datetime and ``0`` is not a boolean.

    A property set to ``None`` is treated as absent, and so is an empty
    ``RequiredText``. A ``False`` flag is present.
    """

    model_config = ConfigDict(strict=True)

    entity_name: ClassVar[str] = "PAYLOAD"

    @classmethod
    def create(cls, payload: Mapping[str, Any], **extra: Any) -> Self:
        """Validate a raw payload and build the model.

        A missing property is reported before any type mismatch, so a payload
        that is both incomplete and mistyped fails with MISSING_PROPERTY.

        Args:
            payload: Raw attributes (row mapping, request body)
            **extra: Additional attributes that override the payload

        Returns:
            The validated model

        Raises:
            ValidationError: If a property is missing or has the wrong type
        """
        data = {
            key: value
            for key, value in {**payload, **extra}.items()
            if value is not None
        }
        try:
            return cls.model_validate(data)
        except PydanticValidationError as e:
            error_types = {error["type"] for error in e.errors()}
            kind = (
                ValidationErrorKind.MISSING_PROPERTY
                if error_types & _ABSENCE_ERRORS
                else ValidationErrorKind.INVALID_TYPE
            )
            raise ValidationError(cls.entity_name, kind) from e
