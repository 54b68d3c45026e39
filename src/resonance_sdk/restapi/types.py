"""API types for the Resonance REST API.

Pydantic models representing the structure of data returned by the
Resonance API with minimal processing. Every field has a default and
unknown fields are kept, so a response with missing or additional keys
still loads. Token amounts are decimal strings as sent by the API.
"""

from collections.abc import Mapping
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

from .errors import UNKNOWN_ERROR_CODE

Role = Literal["validator", "delegator"]

# Query parameter values; None means "leave the parameter out".
QueryValue = str | int | float | bool | None
QueryParams = Mapping[str, QueryValue]


class APIModel(BaseModel):
    """Base for response models: lenient about missing and extra fields."""

    model_config = ConfigDict(extra="allow")


# ---------------------------------------------------------------------------
# Envelope and errors
# ---------------------------------------------------------------------------


class APIErrorDetail(BaseModel):
    """The ``error`` object of a failed response."""

    code: str = UNKNOWN_ERROR_CODE
    message: str | None = None


class APIErrorBody(BaseModel):
    """Error body: ``{"error": {"code": ..., "message": ...}}``."""

    error: APIErrorDetail


# ---------------------------------------------------------------------------
# Validators
# ---------------------------------------------------------------------------


class ValidatorList(APIModel):
    """Summary returned by the validator list endpoint."""

    address: str = ""
    count: int = 0


class ValidatorDetail(APIModel):
    """Validator details."""

    validator_address: str = ""
    name: str = ""
    description: str = ""
    commission_rate: float = 0.0
    status: str = ""
    self_stake: str = "0"
    delegators_stake: str = "0"
    total_stake: str = "0"
    uptime: str = ""
    missed_blocks: int = 0
    signed_blocks: int = 0
    total_delegators: int = 0
    withdrawn_rewards_total: str = "0"


class EpochReward(APIModel):
    reward_gross: str = "0"
    commission_rate: float = 0.0
    commission_fee: str = "0"
    delegator_pool: str = "0"


class EpochStakes(APIModel):
    self_stake: str = "0"
    delegators_stake: str = "0"
    total_stake_validator: str = "0"


class EpochDistribution(APIModel):
    self_reward_from_pool: str = "0"
    validator_total_reward: str = "0"
    delegators_total_reward: str = "0"


class UnclaimedDelegator(APIModel):
    delegator_address: str = ""
    stake: str = "0"
    reward: str = "0"
    unclaimed_reward: str = "0"


class EpochUnclaimed(APIModel):
    unclaimed_validator_reward: str = "0"
    unclaimed_delegators_reward_total: str = "0"
    delegators: list[UnclaimedDelegator] = []


class ValidatorEpoch(APIModel):
    """Reward, stake and distribution figures of one validator epoch."""

    validator_address: str = ""
    epoch: int = 0
    reward: EpochReward = Field(default_factory=EpochReward)
    stakes: EpochStakes = Field(default_factory=EpochStakes)
    distribution: EpochDistribution = Field(default_factory=EpochDistribution)
    unclaimed: EpochUnclaimed = Field(default_factory=EpochUnclaimed)


class DelegatorStakeInfo(APIModel):
    delegator_address: str = ""
    stake: str = "0"
    percentage: str = ""


class ValidatorDelegators(APIModel):
    validator_address: str = ""
    total_delegators: int = 0
    delegators: list[DelegatorStakeInfo] = []


class ValidatorStakeBreakdown(APIModel):
    validator_address: str = ""
    self_stake: str = "0"
    delegators_stake: str = "0"
    total_stake: str = "0"
    self_stake_percent: str = ""


class ValidatorHistoryItem(APIModel):
    epoch: int = 0
    reward: str = "0"
    total_stake: str = "0"
    uptime: str = ""
    missed_blocks: int = 0


class ValidatorHistory(APIModel):
    """Per-epoch history of a validator over an epoch range."""

    validator_address: str = ""
    from_epoch: int = 0
    to_epoch: int = 0
    history: list[ValidatorHistoryItem] = []


class Withdrawal(APIModel):
    """A single reward withdrawal transaction."""

    tx_hash: str = ""
    amount: str = "0"
    timestamp: int = 0
    block_num: int = 0


class ValidatorWithdrawals(APIModel):
    validator_address: str = ""
    total_withdrawn: str = "0"
    withdrawals: list[Withdrawal] = []


class ValidatorMetrics(APIModel):
    validator_address: str = ""
    uptime: float = 0.0
    missed_blocks: int = 0
    signed_blocks: int = 0
    total_blocks: int = 0
    apr: float = 0.0
    total_stake: str = "0"
    total_delegators: int = 0


class ValidatorAPR(APIModel):
    validator_address: str = ""
    apr_decimal: float = 0.0
    apr_percent: str = ""


# ---------------------------------------------------------------------------
# Delegators
# ---------------------------------------------------------------------------


class ActiveValidator(APIModel):
    validator_address: str = ""
    stake: str = "0"


class UnbondingInfo(APIModel):
    amount: str = "0"
    unbonding_start: int = 0
    unbonding_end: int = 0


class DelegatorList(APIModel):
    """Summary returned by the delegator list endpoint."""

    address: str = ""
    count: int = 0


class DelegatorDetail(APIModel):
    """Delegator details, including an in-progress unbonding if any."""

    delegator_address: str = ""
    total_stake: str = "0"
    active_validators: list[ActiveValidator] = []
    total_rewards: str = "0"
    withdrawn_rewards_total: str = "0"
    unbonding: UnbondingInfo | None = None


class DelegatorValidatorStake(APIModel):
    validator_address: str = ""
    stake: str = "0"
    percentage: str = ""


class DelegatorStakes(APIModel):
    delegator_address: str = ""
    total_stake: str = "0"
    stakes: list[DelegatorValidatorStake] = []


class DelegatorReward(APIModel):
    validator_address: str = ""
    epoch: int = 0
    amount: str = "0"
    timestamp: int = 0


class DelegatorRewards(APIModel):
    delegator_address: str = ""
    total_rewards: str = "0"
    rewards: list[DelegatorReward] = []


class DelegatorWithdrawals(APIModel):
    delegator_address: str = ""
    total_withdrawn: str = "0"
    withdrawals: list[Withdrawal] = []


class DelegatorUnbonding(APIModel):
    delegator_address: str = ""
    has_unbonding: bool = False
    unbonding: UnbondingInfo | None = None


class DelegatorValidators(APIModel):
    delegator_address: str = ""
    total_validators: int = 0
    validators: list[ActiveValidator] = []


# ---------------------------------------------------------------------------
# Referrals
# ---------------------------------------------------------------------------


class ReferralCreateRequest(BaseModel):
    """Body of a referral code creation request."""

    validator_address: str
    max_quota: int | None = None
    expires_in_days: int | None = None


class ReferralApplyRequest(BaseModel):
    """Body of a request applying a referral code to a delegator."""

    referral_code: str
    delegator_address: str


class ReferralValidation(APIModel):
    is_valid: bool = False
    referral_code: str | None = None
    message: str | None = None


class DelegatorReferral(APIModel):
    delegator_address: str = ""
    referred_by_validator: str = ""
    referral_code_used: str = ""


class ValidatorReferral(APIModel):
    validator_address: str = ""
    referral_code: str = ""
    delegators: list[str] = []
    total_referred: int = 0


class MessageResponse(APIModel):
    """Plain acknowledgement returned by mutating referral endpoints."""

    message: str = ""


# ---------------------------------------------------------------------------
# Slashing
# ---------------------------------------------------------------------------


class SlashingEvent(APIModel):
    validator_address: str = ""
    reason: str = ""
    block_height: int = 0
    penalty_amount: str = "0"
    jailed_until: int | None = None
    timestamp: int = 0


# ---------------------------------------------------------------------------
# Global network statistics
# ---------------------------------------------------------------------------


class TopDelegatorRank(APIModel):
    rank: int = 0
    address: str = ""
    total_stake: str = "0"


class GlobalNetwork(APIModel):
    """Network-wide staking statistics."""

    total_network_stake: str = "0"
    total_validators: int = 0
    total_delegators: int = 0
    epoch: int = 0
    block_height: int = 0
    jailed_validators: int = 0
    ranking_top_delegators: list[TopDelegatorRank] = []


class NetworkAPR(APIModel):
    network_apr: float = 0.0


class NetworkAPRBreakdown(APIModel):
    reward_per_block: str = "0"
    reward_per_epoch: str = "0"
    reward_per_year: str = "0"
    epochs_per_day: float = 0.0
    effective_inflation: float = 0.0


class LeaderboardDelegator(APIModel):
    rank: int = 0
    address: str = ""
    stake: str = "0"


class LeaderboardValidator(APIModel):
    rank: int = 0
    address: str = ""
    apr_decimal: float = 0.0
    total_stake: str = "0"
    self_stake: str = "0"


# ---------------------------------------------------------------------------
# Authentication
# ---------------------------------------------------------------------------


class NonceResponse(APIModel):
    nonce: str | int = ""
    message: str = ""


class VerifyResponse(APIModel):
    token: str


class AuthResponse(APIModel):
    """Result of a wallet login."""

    token: str
    address: str = ""
    role: str = ""
    expires_at: int = 0
