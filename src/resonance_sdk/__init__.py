"""Resonance SDK.

Typed async client for the Resonance staking network REST API: validators,
delegators, referrals, slashing, global network statistics and
wallet-based authentication.
"""

from .config import SDKConfig, configure_logging
from .sdk import ResonanceSDK

__version__ = "0.1.0"

__all__ = [
    "ResonanceSDK",
    "SDKConfig",
    "configure_logging",
]
