"""Exceptions raised by the Resonance REST API client.

Network-level failures other than timeouts are not wrapped: the
underlying :class:`httpx.TransportError` reaches the caller unchanged.
"""

UNKNOWN_ERROR_CODE = "UNKNOWN_ERROR"


class ResonanceError(Exception):
    """Base class for all errors raised by the SDK."""


class ResonanceAPIError(ResonanceError):
    """Raised when the API answers with a non-2xx status.

    Attributes:
        status_code: HTTP status code of the response.
        code: Application error code from the error body, or
            ``UNKNOWN_ERROR`` when the body carries none.
        message: Human-readable error message.
    """

    def __init__(self, status_code: int, code: str, message: str):
        super().__init__(message)
        self.status_code = status_code
        self.code = code
        self.message = message

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(status_code={self.status_code!r}, "
            f"code={self.code!r}, message={self.message!r})"
        )


class AuthenticationError(ResonanceAPIError):
    """Raised when a nonce, verify or wallet login request is rejected."""


class RequestTimeoutError(ResonanceError):
    """Raised when a request does not complete within its deadline."""

    def __init__(self, timeout_ms: int):
        super().__init__(f"Request timeout after {timeout_ms}ms")
        self.timeout_ms = timeout_ms


class MalformedTokenError(ResonanceError, ValueError):
    """Raised when a JWT cannot be split, decoded or parsed into claims."""
