"""Network-wide statistics, APR and leaderboard endpoints."""

from ..restapi import types
from ..restapi.client import HTTPClient


class GlobalAPI:
    """Global network statistics, APR figures and leaderboards."""

    def __init__(self, client: HTTPClient):
        self._client = client

    async def get_stats(self) -> types.GlobalNetwork:
        """Fetch global network statistics."""
        data = await self._client.fetch_json("/eth/v1/global")
        return types.GlobalNetwork.model_validate(data)

    async def get_network_apr(self) -> types.NetworkAPR:
        data = await self._client.fetch_json("/eth/v1/network/apr")
        return types.NetworkAPR.model_validate(data)

    async def get_network_apr_from_global(self) -> types.NetworkAPR:
        """Same figure as :meth:`get_network_apr`, served under /global."""
        data = await self._client.fetch_json("/eth/v1/global/network_apr")
        return types.NetworkAPR.model_validate(data)

    async def get_network_apr_breakdown(self) -> types.NetworkAPRBreakdown:
        data = await self._client.fetch_json("/eth/v1/network/apr/breakdown")
        return types.NetworkAPRBreakdown.model_validate(data)

    async def get_leaderboard_delegators(
        self,
        limit: int | None = None,
        offset: int | None = None,
    ) -> list[types.LeaderboardDelegator]:
        """Fetch delegators ranked by stake.

        Args:
            limit: Optional page size (server default if omitted).
            offset: Optional offset for pagination.
        """
        data = await self._client.fetch_json(
            "/eth/v1/leaderboard/delegators",
            {"limit": limit, "offset": offset},
        )
        entries = []
        for entry_data in data or []:
            entries.append(types.LeaderboardDelegator.model_validate(entry_data))
        return entries

    async def get_leaderboard_validators(
        self,
        limit: int | None = None,
        offset: int | None = None,
    ) -> list[types.LeaderboardValidator]:
        """Fetch validators ranked by APR and stake."""
        data = await self._client.fetch_json(
            "/eth/v1/leaderboard/validators",
            {"limit": limit, "offset": offset},
        )
        entries = []
        for entry_data in data or []:
            entries.append(types.LeaderboardValidator.model_validate(entry_data))
        return entries
