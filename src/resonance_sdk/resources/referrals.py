"""Referral code endpoints of the Resonance API.

Creating, applying, deleting and unlinking referrals require a session
token (see :meth:`resonance_sdk.sdk.ResonanceSDK.set_auth_token`).
"""

from ..restapi import types
from ..restapi.client import HTTPClient

BASE_PATH = "/eth/v1/referrals"


class ReferralsAPI:
    """Validator referral codes and the delegators they bring in."""

    def __init__(self, client: HTTPClient):
        self._client = client

    async def validate(self, referral_code: str) -> types.ReferralValidation:
        """Check whether ``referral_code`` exists and can still be used."""
        data = await self._client.fetch_json(
            f"{BASE_PATH}/validate",
            {"code": referral_code},
        )
        return types.ReferralValidation.model_validate(data)

    async def create(
        self,
        request: types.ReferralCreateRequest,
    ) -> types.ValidatorReferral:
        """Create a referral code for a validator.

        Unset optional fields of ``request`` are left out of the body.
        """
        data = await self._client.submit_json(
            BASE_PATH,
            request.model_dump(exclude_none=True),
        )
        return types.ValidatorReferral.model_validate(data)

    async def apply(self, request: types.ReferralApplyRequest) -> types.MessageResponse:
        """Link a delegator to the validator owning the referral code."""
        data = await self._client.submit_json(
            f"{BASE_PATH}/apply",
            request.model_dump(),
        )
        return types.MessageResponse.model_validate(data)

    async def delete(self, referral_code: str) -> types.MessageResponse:
        data = await self._client.remove_resource(f"{BASE_PATH}/{referral_code}")
        return types.MessageResponse.model_validate(data or {})

    async def unlink(self, delegator_address: str) -> types.MessageResponse:
        """Remove the referral link of a delegator."""
        data = await self._client.remove_resource(
            f"{BASE_PATH}/unlink/{delegator_address}",
        )
        return types.MessageResponse.model_validate(data or {})

    async def get_delegator_referral(
        self,
        delegator_address: str,
    ) -> types.DelegatorReferral:
        data = await self._client.fetch_json(
            f"{BASE_PATH}/delegators/{delegator_address}",
        )
        return types.DelegatorReferral.model_validate(data)

    async def get_validator_referral(
        self,
        validator_address: str,
    ) -> types.ValidatorReferral:
        data = await self._client.fetch_json(
            f"{BASE_PATH}/validators/{validator_address}",
        )
        return types.ValidatorReferral.model_validate(data)
