"""Slashing event endpoints of the Resonance API."""

from ..restapi import types
from ..restapi.client import HTTPClient


class SlashingAPI:
    """Slashing events across the network."""

    def __init__(self, client: HTTPClient):
        self._client = client

    async def get_events(
        self,
        validator_address: str | None = None,
        limit: int | None = None,
        offset: int | None = None,
    ) -> list[types.SlashingEvent]:
        """Fetch slashing events, newest first.

        Args:
            validator_address: Optional filter on a single validator.
            limit: Optional page size.
            offset: Optional offset for pagination.

        Returns:
            List of validated SlashingEvent objects.
        """
        params = {
            "validator_address": validator_address or None,
            "limit": limit,
            "offset": offset,
        }
        data = await self._client.fetch_json("/eth/v1/slashing/events", params)

        events = []
        for event_data in data or []:
            events.append(types.SlashingEvent.model_validate(event_data))
        return events
