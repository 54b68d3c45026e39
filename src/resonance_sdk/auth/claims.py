"""JWT claims decoding.

Claims are read from the token payload without verifying the signature.
They are suitable for UI decisions (showing a login prompt, refreshing a
session) only; the API re-validates the token on every request.
"""

import base64
import binascii
import json
from dataclasses import dataclass

import pydantic

from ..restapi.errors import MalformedTokenError

# Seconds before expiry at which a token counts as expiring soon.
EXPIRY_WARNING_SECONDS = 5 * 60


class JWTClaims(pydantic.BaseModel):
    """Claims carried by a Resonance session token.

    Only ``exp`` is required. It is a NumericDate and may carry a fraction
    of a second. Identity claims are read as they are, without checking
    them against the known roles.
    """

    address: str | None = None
    role: str | None = None
    exp: float
    iat: float | None = None
    iss: str | None = None


@dataclass(frozen=True)
class UserInfo:
    """The user a session token was issued to."""

    address: str
    role: str


def decode_claims(token: str) -> JWTClaims:
    """Decode the payload of a JWT into :class:`JWTClaims`.

    Splits the token into its three segments, base64url-decodes the
    payload and parses it as JSON. The signature is NOT verified.

    Args:
        token: The raw JWT string (header.payload.signature).

    Returns:
        The decoded claims.

    Raises:
        MalformedTokenError: If the token does not have three segments, or
            the payload is not valid base64 or JSON, or lacks ``exp``.
    """
    parts = token.split(".")
    if len(parts) != 3:  # noqa: PLR2004
        msg = f"Token has {len(parts)} segments, expected 3"
        raise MalformedTokenError(msg)

    # JWT base64url encoding omits padding; restore it
    payload_b64 = parts[1]
    padding = 4 - len(payload_b64) % 4
    if padding != 4:  # noqa: PLR2004
        payload_b64 += "=" * padding

    try:
        raw = base64.b64decode(payload_b64, altchars=b"-_", validate=True)
        payload = json.loads(raw)
    except (binascii.Error, ValueError) as exc:
        msg = "Failed to decode JWT payload"
        raise MalformedTokenError(msg) from exc

    try:
        return JWTClaims.model_validate(payload)
    except pydantic.ValidationError as exc:
        msg = "JWT payload is not a valid claims object"
        raise MalformedTokenError(msg) from exc


def is_expired(claims: JWTClaims, now: float) -> bool:
    """Whether the token's ``exp`` is at or before ``now`` (Unix seconds)."""
    return claims.exp <= now


def is_expiring_soon(claims: JWTClaims, now: float) -> bool:
    """Whether fewer than five minutes remain before ``exp``."""
    return claims.exp - now < EXPIRY_WARNING_SECONDS
