"""Wallet authentication and session handling.

Exports:
    AuthService: Nonce/verify and signed-message login, session queries.
    SessionStore, MemorySessionStore, NullSessionStore: Token storage.
    WalletSigner, EthAccountSigner: Message signing capabilities.
    JWTClaims, UserInfo, decode_claims: Unverified token claims.
"""

from .claims import JWTClaims, UserInfo, decode_claims
from .service import AuthService, build_login_message
from .session import MemorySessionStore, NullSessionStore, SessionStore
from .signers import EthAccountSigner, WalletSigner

__all__ = [
    "AuthService",
    "EthAccountSigner",
    "JWTClaims",
    "MemorySessionStore",
    "NullSessionStore",
    "SessionStore",
    "UserInfo",
    "WalletSigner",
    "build_login_message",
    "decode_claims",
]
