"""Package error classes.

Provider adapters and configuration checks raise AddressValidatorError.
The validation orchestrator never lets one escape to its caller; it turns
them into unverifiable results instead.
"""

from __future__ import annotations

from typing import Any

from pydantic_core import PydanticCustomError

# Package identifier for error context
PACKAGE_NAME = "address_validator"


class AddressValidatorError(PydanticCustomError):
    """Custom exception for address_validator built on PydanticCustomError.

    The error type is a short machine-readable category (``provider_request``,
    ``provider_denied``, ``config_error``, ...) and the message is the
    human-readable text surfaced in ``ValidationResult.reason``.
    """

    @classmethod
    def create(
        cls,
        error_type: str,
        message: str,
        context: dict[str, Any] | None = None,
    ) -> AddressValidatorError:
        """Build an error tagged with the package name.

        Args:
            error_type: Category of the error.
            message: Error message.
            context: Additional context merged into the error context.

        Returns:
            AddressValidatorError instance.
        """
        return cls(error_type, message, {"package": PACKAGE_NAME, **(context or {})})

    @classmethod
    def from_exception(
        cls,
        error: Exception,
        error_type: str = "provider_error",
        context: dict[str, Any] | None = None,
    ) -> AddressValidatorError:
        """Wrap an arbitrary exception, passing AddressValidatorError through unchanged.

        Args:
            error: The exception to wrap.
            error_type: Category used when the error has to be converted.
            context: Additional context to include in the error.

        Returns:
            AddressValidatorError carrying the original message.
        """
        if isinstance(error, AddressValidatorError):
            return error
        return cls.create(error_type, str(error), context)

    @property
    def error_type(self) -> str:
        """Category of the error (alias of ``type``)."""
        return self.type
