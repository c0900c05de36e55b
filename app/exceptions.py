from typing import Any, Mapping, Optional


class CookbookError(Exception):
    """Base class for errors that map onto an HTTP response.

    Attributes:
        message: human-readable message, returned to the client as ``error``
        details: optional mapping with extra context (field errors, validation info)
        code: optional machine-readable error code
        http_status: suggested HTTP status code for handlers
    """

    http_status = 500
    default_message = "Internal error"
    default_code: Optional[str] = None

    def __init__(
        self,
        message: Optional[str] = None,
        details: Optional[Mapping[str, Any]] = None,
        code: Optional[str] = None,
    ):
        self.message = message or self.default_message
        super().__init__(self.message)
        self.details = details
        self.code = code or self.default_code

    def to_dict(self) -> dict:
        payload: dict[str, Any] = {"error": self.message}
        if self.code:
            payload["code"] = self.code
        if self.details:
            payload["details"] = self.details
        return payload

    def __str__(self) -> str:
        return self.message


class ServiceValidationError(CookbookError):
    """Raised when a required field is missing or blank. http_status is 400."""

    http_status = 400
    default_message = "Invalid input"
    default_code = "VALIDATION_ERROR"


class InvalidIdentifierError(ServiceValidationError):
    """Raised when a path id cannot identify any recipe. http_status is 400."""

    default_message = "Invalid recipe id"
    default_code = "INVALID_ID"


class NotFoundError(CookbookError):
    """Raised when no stored recipe matches an id. http_status is 404."""

    http_status = 404
    default_message = "Recipe not found"
    default_code = "NOT_FOUND"


class StoreError(CookbookError):
    """Raised when the document store cannot complete an operation.

    The driver error is chained as ``__cause__`` and logged; only ``message``
    reaches the client. http_status is 500.
    """

    http_status = 500
    default_message = "Database error"
    default_code = "STORE_ERROR"


class ConfigurationError(CookbookError):
    """Raised at startup when required settings are missing."""

    default_message = "Invalid configuration"
    default_code = "CONFIGURATION_ERROR"
