"""Wallet authentication and session queries.

Obtains session tokens from the API (nonce/verify or signed-message
login), keeps them in a :class:`SessionStore` and answers session
questions from the token's claims. Session queries re-read the wall
clock every time; nothing about the session is cached.
"""

import secrets
import time
from typing import Any

import structlog

from ..restapi.client import HTTPClient
from ..restapi.errors import AuthenticationError, MalformedTokenError, ResonanceAPIError
from ..restapi.types import AuthResponse, NonceResponse, Role, VerifyResponse
from . import claims
from .session import SessionStore
from .signers import WalletSigner

logger = structlog.get_logger(__name__)

NONCE_PATH = "/eth/v1/auth/nonce"
VERIFY_PATH = "/eth/v1/auth/verify"
LOGIN_PATH = "/auth/login"

LOGIN_MESSAGE_TEMPLATE = """Sign this message to login to Resonance Dashboard

Address: {address}
Role: {role}
Nonce: {nonce}
Timestamp: {timestamp}

This will not trigger any blockchain transaction or cost gas fees."""

# Upper bound (exclusive) of the random login nonce.
NONCE_RANGE = 1_000_000


def build_login_message(address: str, role: Role, nonce: int, timestamp: int) -> str:
    """Build the human-readable message a wallet signs to log in."""
    return LOGIN_MESSAGE_TEMPLATE.format(
        address=address,
        role=role,
        nonce=nonce,
        timestamp=timestamp,
    )


class AuthService:
    """Wallet authentication against the Resonance API.

    Tokens obtained through :meth:`verify` or :meth:`connect_wallet` are
    written to the session store and applied as the bearer token of the
    HTTP client.
    """

    def __init__(self, http: HTTPClient, store: SessionStore):
        self._http = http
        self._store = store

    async def _submit(self, path: str, body: dict[str, Any], failure: str) -> Any:
        """POST to an auth endpoint, reporting rejections as AuthenticationError."""
        try:
            return await self._http.submit_json(path, body)
        except ResonanceAPIError as exc:
            logger.warning(
                "Authentication request rejected",
                path=path,
                status_code=exc.status_code,
                error_code=exc.code,
            )
            raise AuthenticationError(
                exc.status_code,
                exc.code,
                f"{failure}: {exc.message}",
            ) from exc

    def _store_token(self, token: str) -> None:
        self._store.put(token)
        self._http.set_auth_token(token)

    async def get_nonce(self, address: str) -> NonceResponse:
        """Request a login nonce and the message to sign for ``address``.

        Raises:
            AuthenticationError: If the API rejects the request.
        """
        data = await self._submit(
            NONCE_PATH,
            {"address": address},
            "Failed to get nonce",
        )
        return NonceResponse.model_validate(data)

    async def verify(self, address: str, signature: str, role: Role) -> VerifyResponse:
        """Exchange a signed nonce message for a session token.

        The token is stored in the session store.

        Raises:
            AuthenticationError: If the API rejects the signature.
        """
        data = await self._submit(
            VERIFY_PATH,
            {"address": address, "signature": signature, "role": role},
            "Authentication failed",
        )
        result = VerifyResponse.model_validate(data)
        self._store_token(result.token)
        logger.info("Wallet verified", address=address, role=role)
        return result

    async def connect_wallet(
        self,
        signer: WalletSigner,
        role: Role = "delegator",
    ) -> AuthResponse:
        """Log in by signing a one-time message with the wallet.

        Builds the login message from the signer's address, ``role``, a
        random nonce and the current Unix time, has the signer sign it,
        and submits the signature to the login endpoint. No blockchain
        transaction is involved.

        Args:
            signer: Wallet signing capability supplied by the caller.
            role: Role to log in as (default: "delegator").

        Returns:
            The login result, including the session token and its expiry.

        Raises:
            AuthenticationError: If the API rejects the login.
        """
        address = signer.address
        timestamp = int(time.time())
        nonce = secrets.randbelow(NONCE_RANGE)
        message = build_login_message(address, role, nonce, timestamp)

        signature = signer.sign_message(message)

        data = await self._submit(
            LOGIN_PATH,
            {
                "address": address,
                "message": message,
                "signature": signature,
                "role": role,
                "timestamp": timestamp,
                "nonce": nonce,
            },
            "Authentication failed",
        )
        result = AuthResponse.model_validate(data)
        self._store_token(result.token)
        logger.info("Wallet connected", address=address, role=role)
        return result

    def get_token(self) -> str | None:
        """Return the stored session token, if any."""
        return self._store.get()

    def parse_token(self, token: str) -> claims.JWTClaims:
        """Decode the claims of ``token`` without verifying its signature.

        Raises:
            MalformedTokenError: If the token cannot be decoded.
        """
        return claims.decode_claims(token)

    def _stored_claims(self) -> claims.JWTClaims | None:
        """Claims of the stored token; None if absent or malformed."""
        token = self.get_token()
        if not token:
            return None
        try:
            return claims.decode_claims(token)
        except MalformedTokenError as exc:
            logger.debug("Stored token is malformed", reason=str(exc))
            return None

    def is_authenticated(self) -> bool:
        """Whether a stored token exists and has not expired.

        A hint for the UI only: the signature is not verified.
        """
        token_claims = self._stored_claims()
        if token_claims is None:
            return False
        return not claims.is_expired(token_claims, time.time())

    def is_token_expiring_soon(self) -> bool:
        """Whether the session should be renewed.

        True when fewer than five minutes remain, and also when there is
        no usable token at all.
        """
        token_claims = self._stored_claims()
        if token_claims is None:
            return True
        return claims.is_expiring_soon(token_claims, time.time())

    def get_user_info(self) -> claims.UserInfo | None:
        """Address and role from the stored token.

        None when the token is missing, cannot be decoded, or lacks either
        claim.
        """
        token_claims = self._stored_claims()
        if token_claims is None:
            return None
        if token_claims.address is None or token_claims.role is None:
            return None
        return claims.UserInfo(address=token_claims.address, role=token_claims.role)

    def logout(self) -> None:
        """Forget the stored token and stop sending it."""
        self._store.clear()
        self._http.set_auth_token(None)
        logger.info("Logged out")
