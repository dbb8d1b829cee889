"""
Commission policy constants for the referral network.

Contains the fixed pool policy and the per-tier commission table.
"""

from decimal import Decimal
from typing import NamedTuple

from referral_network.types import NetworkTier


class CommissionShare(NamedTuple):
    """Fixed share of the commission pool for one tier."""

    tier: NetworkTier
    share_percent: int  # Share of the pool, whole percent
    role: str  # Label shown next to the payout


# Share of a deal's value set aside for the network
POOL_PERCENT = Decimal("10")

# Company policy: 70/20/10 split of the pool, not user-tunable
COMMISSION_TABLE: dict[NetworkTier, CommissionShare] = {
    NetworkTier.ME: CommissionShare(
        tier=NetworkTier.ME,
        share_percent=70,
        role="Closer (You)",
    ),
    NetworkTier.TIER1: CommissionShare(
        tier=NetworkTier.TIER1,
        share_percent=20,
        role="Direct Upline (You)",
    ),
    NetworkTier.TIER2: CommissionShare(
        tier=NetworkTier.TIER2,
        share_percent=10,
        role="2nd Tier Upline (You)",
    ),
}

ROOT_NODE_ID = "root"
ROOT_NODE_NAME = "You"

# Defaults for the hypothetical split calculator
DEFAULT_SPLIT_PERCENTS: tuple[int, int, int] = (70, 20, 10)

# Projection charts always cover at least a year
MIN_PROJECTION_MONTHS = 12


def get_commission_share(tier: NetworkTier) -> CommissionShare:
    """
    Get the fixed commission share for a tier.

    Args:
        tier: Node tier

    Returns:
        CommissionShare with share percent and role label

    Example:
        >>> get_commission_share(NetworkTier.TIER1).share_percent
        20
    """
    return COMMISSION_TABLE[tier]


def total_share_percent() -> int:
    """Sum of all tier shares (always 100)."""
    return sum(share.share_percent for share in COMMISSION_TABLE.values())
