from typing import Any, Mapping, Optional


class ServiceValidationError(Exception):
    """Raised when input data is invalid or a precondition for a service call is not met.

    Attributes:
        message: human-readable message
        details: optional mapping with extra context (field errors, validation info)
        code: optional machine-readable error code
        http_status: suggested HTTP status code for handlers (400)
    """

    http_status = 400

    def __init__(self, message: str = "Invalid input", details: Optional[Mapping[str, Any]] = None, code: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.details = details
        self.code = code

    def to_dict(self) -> dict:
        payload: dict[str, Any] = {"message": self.message}
        if self.code:
            payload["code"] = self.code
        if self.details:
            payload["details"] = self.details
        return payload

    def __str__(self) -> str:
        return self.message


class NotFoundError(ServiceValidationError):
    """Raised when a requested resource was not found. http_status is 404."""

    http_status = 404

    def __init__(self, message: str = "Not found", details: Optional[Mapping[str, Any]] = None, code: Optional[str] = None):
        super().__init__(message, details, code)


class ForbiddenError(ServiceValidationError):
    """Raised when a resource belongs to another user. http_status is 403."""

    http_status = 403

    def __init__(self, message: str = "Access denied", details: Optional[Mapping[str, Any]] = None, code: Optional[str] = None):
        super().__init__(message, details, code)


# ---------------------------------------------------------------------------
# Client-side errors raised by the meal-plan gateway
# ---------------------------------------------------------------------------


class GatewayError(Exception):
    """Base class for failures talking to the meal-plan API.

    Attributes:
        message: human-readable message
        status_code: HTTP status returned by the API, None for transport failures
        details: decoded error body, when the API sent one
    """

    def __init__(self, message: str = "Meal plan API call failed", status_code: Optional[int] = None, details: Optional[Mapping[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.details = details

    def __str__(self) -> str:
        if self.status_code is not None:
            return f"{self.message} (HTTP {self.status_code})"
        return self.message


class NetworkError(GatewayError):
    """The API could not be reached (connection refused, timeout, ...)."""


class ServerError(GatewayError):
    """The API answered with a 4xx/5xx status other than a validation failure."""


class GatewayValidationError(GatewayError):
    """The API rejected a payload as malformed (HTTP 400/422)."""


class WorkflowStateError(Exception):
    """Raised when a planner workflow action is called in a state that does not allow it."""
