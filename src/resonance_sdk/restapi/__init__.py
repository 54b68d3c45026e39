"""Resonance REST API client package.

Provides a lightweight async HTTP client for the Resonance REST API that
returns decoded, envelope-free response bodies. Typed wrappers per
resource live in :mod:`resonance_sdk.resources`.

Exports:
    HTTPClient: HTTP client with bearer authentication and error mapping.
    types: Module containing Pydantic models for API requests and responses.
    DEFAULT_TIMEOUT_MS: Default request deadline in milliseconds.
    ResonanceError and subclasses: Errors raised by the client.
"""

from . import types
from .client import DEFAULT_TIMEOUT_MS, HTTPClient
from .errors import (
    AuthenticationError,
    MalformedTokenError,
    RequestTimeoutError,
    ResonanceAPIError,
    ResonanceError,
)

__all__ = [
    "DEFAULT_TIMEOUT_MS",
    "AuthenticationError",
    "HTTPClient",
    "MalformedTokenError",
    "RequestTimeoutError",
    "ResonanceAPIError",
    "ResonanceError",
    "types",
]
