"""Tests for the validators resource wrapper."""

from unittest.mock import MagicMock

import pytest

from resonance_sdk.resources import validators
from resonance_sdk.restapi import types

ADDRESS = "0xVAL1"


@pytest.fixture
def api(mock_client: MagicMock) -> validators.ValidatorsAPI:
    return validators.ValidatorsAPI(mock_client)


async def test_get_all(api, mock_client):
    mock_client.fetch_json.return_value = {"address": "0xVAL1", "count": 12}

    result = await api.get_all()

    mock_client.fetch_json.assert_awaited_once_with("/eth/v1/validators")
    assert result == types.ValidatorList(address="0xVAL1", count=12)


async def test_get_returns_detail(api, mock_client):
    mock_client.fetch_json.return_value = {
        "validator_address": ADDRESS,
        "name": "Node One",
        "commission_rate": 0.05,
        "status": "active",
        "total_stake": "1000000000000000000",
        "total_delegators": 3,
    }

    result = await api.get(ADDRESS)

    mock_client.fetch_json.assert_awaited_once_with(f"/eth/v1/validators/{ADDRESS}")
    assert result.name == "Node One"
    assert result.commission_rate == 0.05
    assert result.total_stake == "1000000000000000000"
    assert result.missed_blocks == 0


async def test_get_keeps_unknown_fields(api, mock_client):
    mock_client.fetch_json.return_value = {
        "validator_address": ADDRESS,
        "moniker": "n1",
    }

    result = await api.get(ADDRESS)

    assert result.model_extra == {"moniker": "n1"}


@pytest.mark.parametrize(
    ("method", "suffix", "model"),
    [
        ("get_delegators", "delegators", types.ValidatorDelegators),
        ("get_stake_breakdown", "stake", types.ValidatorStakeBreakdown),
        ("get_metrics", "metrics", types.ValidatorMetrics),
        ("get_apr", "apr", types.ValidatorAPR),
    ],
)
async def test_address_endpoints(api, mock_client, method, suffix, model):
    mock_client.fetch_json.return_value = {"validator_address": ADDRESS}

    result = await getattr(api, method)(ADDRESS)

    mock_client.fetch_json.assert_awaited_once_with(
        f"/eth/v1/validators/{ADDRESS}/{suffix}",
    )
    assert isinstance(result, model)
    assert result.validator_address == ADDRESS


async def test_get_epoch(api, mock_client):
    mock_client.fetch_json.return_value = {
        "validator_address": ADDRESS,
        "epoch": 42,
        "reward": {"reward_gross": "100", "commission_rate": 0.1},
        "unclaimed": {"delegators": [{"delegator_address": "0xD1", "stake": "5"}]},
    }

    result = await api.get_epoch(ADDRESS, 42)

    mock_client.fetch_json.assert_awaited_once_with(
        f"/eth/v1/validators/{ADDRESS}/epochs/42",
    )
    assert result.reward.reward_gross == "100"
    assert result.stakes.total_stake_validator == "0"
    assert result.unclaimed.delegators[0].delegator_address == "0xD1"


async def test_get_history_passes_epoch_range(api, mock_client):
    mock_client.fetch_json.return_value = {
        "validator_address": ADDRESS,
        "from_epoch": 1,
        "to_epoch": 2,
        "history": [{"epoch": 1, "reward": "10"}, {"epoch": 2, "reward": "11"}],
    }

    result = await api.get_history(ADDRESS, from_epoch=1, to_epoch=2)

    mock_client.fetch_json.assert_awaited_once_with(
        f"/eth/v1/validators/{ADDRESS}/history",
        {"from_epoch": 1, "to_epoch": 2},
    )
    assert [item.epoch for item in result.history] == [1, 2]


async def test_get_history_without_range_sends_none_values(api, mock_client):
    """Unset bounds are passed as None, which the client leaves out of the query."""
    mock_client.fetch_json.return_value = {}

    await api.get_history(ADDRESS)

    mock_client.fetch_json.assert_awaited_once_with(
        f"/eth/v1/validators/{ADDRESS}/history",
        {"from_epoch": None, "to_epoch": None},
    )


async def test_get_withdrawals_paginates(api, mock_client):
    mock_client.fetch_json.return_value = {
        "validator_address": ADDRESS,
        "total_withdrawn": "7",
        "withdrawals": [
            {"tx_hash": "0xT", "amount": "7", "timestamp": 1, "block_num": 9},
        ],
    }

    result = await api.get_withdrawals(ADDRESS, limit=10, offset=20)

    mock_client.fetch_json.assert_awaited_once_with(
        f"/eth/v1/validators/{ADDRESS}/withdrawals",
        {"limit": 10, "offset": 20},
    )
    assert result.withdrawals[0].block_num == 9


async def test_get_slashing_returns_list(api, mock_client):
    mock_client.fetch_json.return_value = [
        {"validator_address": ADDRESS, "reason": "double_sign", "block_height": 5},
        {"validator_address": ADDRESS, "reason": "downtime", "jailed_until": 99},
    ]

    result = await api.get_slashing(ADDRESS)

    mock_client.fetch_json.assert_awaited_once_with(
        f"/eth/v1/validators/{ADDRESS}/slashing",
    )
    assert [event.reason for event in result] == ["double_sign", "downtime"]
    assert result[1].jailed_until == 99


async def test_errors_propagate(api, mock_client):
    mock_client.fetch_json.side_effect = RuntimeError("boom")

    with pytest.raises(RuntimeError, match="boom"):
        await api.get(ADDRESS)
