"""Validator endpoints of the Resonance API."""

from ..restapi import types
from ..restapi.client import HTTPClient

BASE_PATH = "/eth/v1/validators"


class ValidatorsAPI:
    """Read access to validators, their stake, rewards and history."""

    def __init__(self, client: HTTPClient):
        self._client = client

    async def get_all(self) -> types.ValidatorList:
        """Fetch the validator list summary."""
        data = await self._client.fetch_json(BASE_PATH)
        return types.ValidatorList.model_validate(data)

    async def get(self, address: str) -> types.ValidatorDetail:
        """Fetch details of the validator at ``address``."""
        data = await self._client.fetch_json(f"{BASE_PATH}/{address}")
        return types.ValidatorDetail.model_validate(data)

    async def get_delegators(self, address: str) -> types.ValidatorDelegators:
        data = await self._client.fetch_json(f"{BASE_PATH}/{address}/delegators")
        return types.ValidatorDelegators.model_validate(data)

    async def get_stake_breakdown(self, address: str) -> types.ValidatorStakeBreakdown:
        data = await self._client.fetch_json(f"{BASE_PATH}/{address}/stake")
        return types.ValidatorStakeBreakdown.model_validate(data)

    async def get_epoch(self, address: str, epoch: int) -> types.ValidatorEpoch:
        """Fetch reward and stake figures of one epoch."""
        data = await self._client.fetch_json(f"{BASE_PATH}/{address}/epochs/{epoch}")
        return types.ValidatorEpoch.model_validate(data)

    async def get_history(
        self,
        address: str,
        from_epoch: int | None = None,
        to_epoch: int | None = None,
    ) -> types.ValidatorHistory:
        """Fetch per-epoch history of a validator.

        Args:
            address: Validator address.
            from_epoch: Optional first epoch of the range.
            to_epoch: Optional last epoch of the range.
        """
        params = {"from_epoch": from_epoch, "to_epoch": to_epoch}
        data = await self._client.fetch_json(f"{BASE_PATH}/{address}/history", params)
        return types.ValidatorHistory.model_validate(data)

    async def get_withdrawals(
        self,
        address: str,
        limit: int | None = None,
        offset: int | None = None,
    ) -> types.ValidatorWithdrawals:
        """Fetch reward withdrawals of a validator, one page at a time."""
        params = {"limit": limit, "offset": offset}
        data = await self._client.fetch_json(
            f"{BASE_PATH}/{address}/withdrawals",
            params,
        )
        return types.ValidatorWithdrawals.model_validate(data)

    async def get_metrics(self, address: str) -> types.ValidatorMetrics:
        data = await self._client.fetch_json(f"{BASE_PATH}/{address}/metrics")
        return types.ValidatorMetrics.model_validate(data)

    async def get_slashing(self, address: str) -> list[types.SlashingEvent]:
        """Fetch slashing events of a validator."""
        data = await self._client.fetch_json(f"{BASE_PATH}/{address}/slashing")
        events = []
        for event_data in data or []:
            events.append(types.SlashingEvent.model_validate(event_data))
        return events

    async def get_apr(self, address: str) -> types.ValidatorAPR:
        data = await self._client.fetch_json(f"{BASE_PATH}/{address}/apr")
        return types.ValidatorAPR.model_validate(data)
