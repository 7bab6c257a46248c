"""Domain exception hierarchy for people_model.

All domain-specific exceptions inherit from PeopleModelError.
Precondition failures are also ValueErrors and state failures are also
RuntimeErrors, so callers that only know the builtin types still catch them.
"""

from typing import Any


class PeopleModelError(Exception):
    """Base exception for all people_model errors.

    Includes an error_code and extra context for callers that need to
    report failures in a structured way.
    """

    error_code: str = "PEOPLE_MODEL_ERROR"

    def __init__(
        self,
        message: str,
        *,
        error_code: str | None = None,
        context: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        if error_code:
            self.error_code = error_code
        self.context = context or {}

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to a dictionary."""
        return {
            "error": self.error_code,
            "message": self.message,
            "context": self.context,
        }


# =============================================================================
# Argument Errors
# =============================================================================


class InvalidArgumentError(PeopleModelError, ValueError):
    """Raised when a required value is missing or violates a precondition."""

    error_code = "INVALID_ARGUMENT"


class NameFormatError(InvalidArgumentError):
    """Raised when free text cannot be parsed into a first and last name."""

    error_code = "INVALID_NAME_FORMAT"

    def __init__(self, text: str | None) -> None:
        super().__init__(
            f"First and last name are required; was [{text}]",
            context={"text": text},
        )
        self.text = text


class InvalidDateError(InvalidArgumentError):
    """Raised when a birth date or date of death breaks the timeline."""

    error_code = "INVALID_DATE"


# =============================================================================
# State Errors
# =============================================================================


class InvalidStateError(PeopleModelError, RuntimeError):
    """Raised when reading a feature that was never initialized."""

    error_code = "INVALID_STATE"


def require(value: Any, message: str) -> Any:
    """Return value, raising InvalidArgumentError when it is None."""
    if value is None:
        raise InvalidArgumentError(message)
    return value
