"""Pydantic models for the referral network."""

from dataclasses import dataclass
from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field

from referral_network.types import NetworkTier, PaymentType


class NetworkNode(BaseModel):
    """Person in the recruiter tree.

    Nodes are frozen: every structural change produces a new tree value
    that replaces the previous one.
    """

    model_config = ConfigDict(frozen=True)

    id: str = Field(..., min_length=1, description="Unique node identifier")
    name: str = Field(..., description="Display label")
    tier: NetworkTier = Field(..., description="Tier assigned at insertion time")
    value: Decimal = Field(
        default=Decimal("0"),
        description="Revenue attributed to this node (expected to be >= 0)",
    )
    image: str | None = Field(default=None, description="Optional profile image URI")
    children: tuple["NetworkNode", ...] = Field(
        default=(), description="Direct recruits in insertion order"
    )


NetworkNode.model_rebuild()


class CommissionBreakdown(BaseModel):
    """Payout breakdown for a single node.

    Derived on every query, never stored.
    """

    model_config = ConfigDict(frozen=True)

    pool: Decimal = Field(..., description="Commission pool (10% of node value)")
    my_earnings: Decimal = Field(..., description="Node holder's share of the pool")
    role: str = Field(..., description="Role label derived from tier")
    percentage_of_pool: int = Field(..., ge=0, le=100, description="Share of the pool, %")
    effective_percentage: Decimal = Field(
        ..., description="Earnings as a percentage of the node value"
    )


class NetworkSummary(BaseModel):
    """Aggregate counts and values per tier."""

    total_nodes: int = Field(..., ge=1)
    total_value: Decimal
    nodes_per_tier: dict[NetworkTier, int]
    value_per_tier: dict[NetworkTier, Decimal]


class SplitScenario(BaseModel):
    """Hypothetical pool split with user-chosen percentages."""

    deal_value: Decimal
    pool_percent: Decimal
    pool: Decimal
    closer_percent: Decimal = Field(..., ge=0, le=100)
    tier1_percent: Decimal = Field(..., ge=0, le=100)
    tier2_percent: Decimal = Field(..., ge=0, le=100)
    closer_earnings: Decimal
    tier1_earnings: Decimal
    tier2_earnings: Decimal
    total_percent: Decimal
    is_valid: bool = Field(..., description="Whether the split percentages sum to 100")


class ProjectionPoint(BaseModel):
    """Cumulative earnings of both payment models at a given month."""

    month: int = Field(..., ge=1)
    label: str
    one_time: Decimal
    recurring: Decimal


class DealComparison(BaseModel):
    """One-time versus recurring commission comparison."""

    one_time_commission: Decimal
    recurring_monthly_commission: Decimal
    lifetime_value: Decimal
    retention_months: int = Field(..., ge=0)
    recommended_model: PaymentType
    advantage: Decimal = Field(..., ge=0, description="Absolute gap between the two models")
    projection: list[ProjectionPoint] = Field(default_factory=list)


@dataclass
class TreeResult:
    """Result of a structural tree operation."""

    success: bool
    tree: NetworkNode
    node: NetworkNode | None = None
    error_message: str | None = None
