"""Resonance SDK entry point.

Wires one shared HTTP client into the authentication service and the
per-resource wrappers.

Example:
    ```python
    from resonance_sdk import ResonanceSDK, SDKConfig

    async with ResonanceSDK(SDKConfig(api_url="https://api.resonance.network")) as sdk:
        stats = await sdk.global_stats.get_stats()
        validator = await sdk.validators.get("0x1234...")
    ```
"""

from types import TracebackType

import httpx
import structlog

from .auth import AuthService, MemorySessionStore, SessionStore
from .config import SDKConfig, configure_logging
from .resources import (
    DelegatorsAPI,
    GlobalAPI,
    ReferralsAPI,
    SlashingAPI,
    ValidatorsAPI,
)
from .restapi import HTTPClient

logger = structlog.get_logger(__name__)


class ResonanceSDK:
    """Client for the Resonance staking network API.

    Attributes:
        auth: Wallet authentication and session queries.
        validators: Validator endpoints.
        delegators: Delegator endpoints.
        referrals: Referral code endpoints.
        global_stats: Network statistics, APR and leaderboards.
        slashing: Slashing events.
    """

    def __init__(
        self,
        config: SDKConfig,
        session_store: SessionStore | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        """Build the SDK from validated config.

        Args:
            config: SDK configuration.
            session_store: Where session tokens are kept (default: in memory
                for the lifetime of this SDK). Pass a
                :class:`~resonance_sdk.auth.NullSessionStore` in contexts
                that must not hold tokens.
            transport: Optional httpx transport for the shared HTTP client.
        """
        if config.log_level:
            configure_logging(config.log_level, config.log_format)

        self.client = HTTPClient(
            base_url=config.api_url,
            timeout_ms=config.timeout_ms,
            headers=config.headers,
            max_get_attempts=config.max_get_attempts,
            transport=transport,
        )
        logger.debug("Created shared HTTP client", base_url=self.client.base_url)

        self.auth = AuthService(self.client, session_store or MemorySessionStore())
        self.validators = ValidatorsAPI(self.client)
        self.delegators = DelegatorsAPI(self.client)
        self.referrals = ReferralsAPI(self.client)
        self.global_stats = GlobalAPI(self.client)
        self.slashing = SlashingAPI(self.client)

    async def __aenter__(self) -> "ResonanceSDK":
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        """Close the shared HTTP client."""
        await self.client.aclose()

    def set_auth_token(self, token: str | None) -> None:
        """Set the bearer token for API requests, or clear it with None."""
        self.client.set_auth_token(token)

    def set_header(self, key: str, value: str) -> None:
        """Set a custom header for API requests."""
        self.client.set_header(key, value)

    def get_auth_token(self) -> str | None:
        """Return the session token from the session store."""
        return self.auth.get_token()

    def is_authenticated(self) -> bool:
        """Whether the stored session token exists and has not expired."""
        return self.auth.is_authenticated()

    def logout(self) -> None:
        """Clear the stored session token and the bearer header."""
        self.auth.logout()
