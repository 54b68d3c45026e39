"""Delegator endpoints of the Resonance API."""

from ..restapi import types
from ..restapi.client import HTTPClient

BASE_PATH = "/eth/v1/delegators"


class DelegatorsAPI:
    """Read access to delegators, their stakes, rewards and withdrawals."""

    def __init__(self, client: HTTPClient):
        self._client = client

    async def get_all(self) -> types.DelegatorList:
        data = await self._client.fetch_json(BASE_PATH)
        return types.DelegatorList.model_validate(data)

    async def get(self, address: str) -> types.DelegatorDetail:
        """Fetch details of the delegator at ``address``."""
        data = await self._client.fetch_json(f"{BASE_PATH}/{address}")
        return types.DelegatorDetail.model_validate(data)

    async def get_stakes(self, address: str) -> types.DelegatorStakes:
        """Fetch the delegator's stake per validator."""
        data = await self._client.fetch_json(f"{BASE_PATH}/{address}/stakes")
        return types.DelegatorStakes.model_validate(data)

    async def get_rewards(
        self,
        address: str,
        limit: int | None = None,
        offset: int | None = None,
    ) -> types.DelegatorRewards:
        """Fetch reward history of a delegator, one page at a time."""
        params = {"limit": limit, "offset": offset}
        data = await self._client.fetch_json(f"{BASE_PATH}/{address}/rewards", params)
        return types.DelegatorRewards.model_validate(data)

    async def get_withdrawals(
        self,
        address: str,
        limit: int | None = None,
        offset: int | None = None,
    ) -> types.DelegatorWithdrawals:
        params = {"limit": limit, "offset": offset}
        data = await self._client.fetch_json(
            f"{BASE_PATH}/{address}/withdrawals",
            params,
        )
        return types.DelegatorWithdrawals.model_validate(data)

    async def get_unbonding(self, address: str) -> types.DelegatorUnbonding:
        data = await self._client.fetch_json(f"{BASE_PATH}/{address}/unbonding")
        return types.DelegatorUnbonding.model_validate(data)

    async def get_validators(self, address: str) -> types.DelegatorValidators:
        """Fetch the validators the delegator currently stakes with."""
        data = await self._client.fetch_json(f"{BASE_PATH}/{address}/validators")
        return types.DelegatorValidators.model_validate(data)
