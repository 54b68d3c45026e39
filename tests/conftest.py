"""Shared fixtures for the Resonance SDK tests."""

import base64
import json
from collections.abc import Callable
from unittest.mock import MagicMock

import pytest

from resonance_sdk.restapi import client


def _make_jwt(payload: dict, header: dict | None = None) -> str:
    """Build a minimal unsigned JWT string from a payload dict."""
    header = header or {"alg": "HS256", "typ": "JWT"}
    h = base64.urlsafe_b64encode(json.dumps(header).encode()).rstrip(b"=").decode()
    p = base64.urlsafe_b64encode(json.dumps(payload).encode()).rstrip(b"=").decode()
    return f"{h}.{p}.fakesignature"


@pytest.fixture
def make_jwt() -> Callable[..., str]:
    """Factory for unsigned JWTs."""
    return _make_jwt


@pytest.fixture
def make_session_token() -> Callable[..., str]:
    """Factory for session tokens expiring at ``exp``."""

    def factory(
        exp: int,
        address: str = "0xA11CE",
        role: str = "delegator",
    ) -> str:
        return _make_jwt(
            {
                "address": address,
                "role": role,
                "exp": exp,
                "iat": exp - 3600,
                "iss": "resonance",
            },
        )

    return factory


@pytest.fixture
def mock_client() -> MagicMock:
    """Mock HTTPClient; its async methods are AsyncMocks with no return values."""
    return MagicMock(spec=client.HTTPClient)
