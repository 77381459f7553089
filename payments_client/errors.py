"""
Errors raised by the payments_client transport layer.

Resources never catch or translate these; they reach the caller as raised.
"""

from typing import Any, Dict, Optional


class PaymentsError(Exception):
    """Base class for every error raised by payments_client."""


class ConfigurationError(PaymentsError):
    """Required configuration (such as the API key) is missing."""


class APIConnectionError(PaymentsError):
    """The request never produced an HTTP response (DNS, connect, timeout...)."""


class DeserializationError(PaymentsError):
    """The response body was not JSON or did not match the expected model."""

    def __init__(self, message: str, body: Optional[str] = None):
        super().__init__(message)
        self.body = body


class APIError(PaymentsError):
    """
    Non-2xx response from the API.

    The structured error body ({"error": {...}}) is unpacked into attributes
    when present; the raw body is always kept.
    """

    def __init__(
        self,
        message: str,
        http_status: int,
        error_type: Optional[str] = None,
        code: Optional[str] = None,
        param: Optional[str] = None,
        body: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message)
        self.message = message
        self.http_status = http_status
        self.error_type = error_type
        self.code = code
        self.param = param
        self.body = body

    def __str__(self) -> str:
        return f"{self.http_status} {self.error_type or 'api_error'}: {self.message}"


class InvalidRequestError(APIError):
    pass


class AuthenticationError(APIError):
    pass


class PermissionDeniedError(APIError):
    pass


class RateLimitError(APIError):
    pass


_STATUS_ERRORS = {
    400: InvalidRequestError,
    401: AuthenticationError,
    403: PermissionDeniedError,
    404: InvalidRequestError,
    429: RateLimitError,
}


def api_error_from_response(http_status: int, body: Any, text: str = "") -> APIError:
    """
    Build the APIError subclass matching http_status from a decoded error body.
    """
    details: Dict[str, Any] = {}
    if isinstance(body, dict) and isinstance(body.get("error"), dict):
        details = body["error"]

    message = details.get("message") or text or f"HTTP {http_status}"
    error_cls = _STATUS_ERRORS.get(http_status, APIError)
    return error_cls(
        message,
        http_status=http_status,
        error_type=details.get("type"),
        code=details.get("code"),
        param=details.get("param"),
        body=body if isinstance(body, dict) else None,
    )
