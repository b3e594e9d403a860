"""
LINE Bot Client - Exceptions

This module contains all custom exceptions used by the client.
"""

from typing import Any, Dict, List, Mapping, Optional, Type


class LineBotError(Exception):
    """
    Base exception for all LINE Bot client errors.

    Attributes:
        message: Human-readable error message
        code: Error code if available
    """

    def __init__(self, message: str, code: Optional[str] = None) -> None:
        self.message = message
        self.code = code
        super().__init__(self.message)

    def __str__(self) -> str:
        if self.code:
            return f"[{self.code}] {self.message}"
        return self.message

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(message='{self.message}', code='{self.code}')"


class ConfigurationError(LineBotError):
    """
    Raised when a client cannot be constructed.

    This occurs when the channel access token is missing or empty.
    """

    def __init__(self, message: str = "no channel access token") -> None:
        super().__init__(message)


class InvalidArgumentError(LineBotError):
    """
    Raised when an argument cannot be sent as given.

    No request is made when this is raised.
    """

    def __init__(self, message: str) -> None:
        super().__init__(message)


class RequestValidationError(LineBotError):
    """
    Raised when local validation of request arguments fails.

    Attributes:
        messages: Validation failure messages, in check order
    """

    def __init__(self, messages: List[str]) -> None:
        super().__init__("; ".join(messages), code="VALIDATION_ERROR")
        self.messages = list(messages)


class LineBotConnectionError(LineBotError):
    """Raised when the client cannot reach the API."""

    def __init__(self, message: str = "Request failed") -> None:
        super().__init__(message, code="CONNECTION_ERROR")


class LineBotTimeoutError(LineBotError):
    """Raised when a request times out."""

    def __init__(self, message: str = "Request timed out") -> None:
        super().__init__(message, code="TIMEOUT")


class ApiError(LineBotError):
    """
    Raised when the API returns a non-2xx response.

    Attributes:
        status_code: HTTP status code
        body: Parsed JSON error body, or the raw text if it was not JSON
        headers: Response headers (case-insensitive)
        details: ``details`` list of a LINE error body, if any
    """

    def __init__(
        self,
        status_code: int,
        body: Any = None,
        headers: Optional[Mapping[str, str]] = None,
    ) -> None:
        self.status_code = status_code
        self.body = body
        self.headers = headers if headers is not None else {}
        self.details: List[Dict[str, Any]] = []

        if isinstance(body, dict):
            message = body.get("message") or str(body)
            self.details = body.get("details") or []
        else:
            message = body or f"HTTP {status_code}"

        super().__init__(f"HTTP {status_code}: {message}", code=str(status_code))

    @property
    def request_id(self) -> Optional[str]:
        """Value of the ``x-line-request-id`` response header."""
        return self.headers.get("x-line-request-id")

    def __str__(self) -> str:
        base = self.message
        if self.request_id:
            return f"{base} (Request ID: {self.request_id})"
        return base


class BadRequestError(ApiError):
    """Raised on 400 Bad Request."""


class AuthenticationError(ApiError):
    """
    Raised on 401 Unauthorized.

    The channel access token is invalid, expired or revoked.
    """


class PermissionDeniedError(ApiError):
    """
    Raised on 403 Forbidden.

    The channel plan or the token's scope does not allow the operation.
    """


class NotFoundError(ApiError):
    """Raised on 404 Not Found."""


class ConflictError(ApiError):
    """
    Raised on 409 Conflict.

    For requests sent with a retry key this means an earlier request with the
    same key was already accepted.
    """

    @property
    def accepted_request_id(self) -> Optional[str]:
        """Request ID of the request that was accepted first."""
        return self.headers.get("x-line-accepted-request-id")


class RateLimitError(ApiError):
    """Raised on 429 Too Many Requests."""


class ServerError(ApiError):
    """
    Raised on 5xx responses.

    These errors are typically transient; retrying is left to the caller.
    """


class SignatureValidationFailed(LineBotError):
    """Raised when a webhook signature does not match its body."""

    def __init__(self, message: str = "Invalid signature", signature: Optional[str] = None) -> None:
        super().__init__(message, code="INVALID_SIGNATURE")
        self.signature = signature


class WebhookParseError(LineBotError):
    """Raised when a webhook body is not a valid JSON object."""

    def __init__(self, message: str = "Failed to parse webhook body", raw_body: Optional[str] = None) -> None:
        super().__init__(message, code="PARSE_ERROR")
        self.raw_body = raw_body


_STATUS_ERRORS: Dict[int, Type[ApiError]] = {
    400: BadRequestError,
    401: AuthenticationError,
    403: PermissionDeniedError,
    404: NotFoundError,
    409: ConflictError,
    429: RateLimitError,
}


def error_for_status(
    status_code: int,
    body: Any = None,
    headers: Optional[Mapping[str, str]] = None,
) -> ApiError:
    """Build the ``ApiError`` subclass matching ``status_code``."""
    if status_code >= 500:
        return ServerError(status_code, body, headers)
    error_class = _STATUS_ERRORS.get(status_code, ApiError)
    return error_class(status_code, body, headers)
