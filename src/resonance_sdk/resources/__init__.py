"""Resource wrappers for the Resonance API.

Each module maps one business concept to its endpoints on the shared
:class:`~resonance_sdk.restapi.HTTPClient` and returns Pydantic models.
"""

from .delegators import DelegatorsAPI
from .global_stats import GlobalAPI
from .referrals import ReferralsAPI
from .slashing import SlashingAPI
from .validators import ValidatorsAPI

__all__ = [
    "DelegatorsAPI",
    "GlobalAPI",
    "ReferralsAPI",
    "SlashingAPI",
    "ValidatorsAPI",
]
