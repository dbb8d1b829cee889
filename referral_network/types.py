"""
Type definitions for the referral network.

Tier enums plus the TypedDict shapes for the serialized tree and the
chart payloads handed to the display layer.
"""

from enum import Enum
from typing import TypedDict


class NetworkTier(str, Enum):
    """Position of a person in the recruiter tree."""

    ME = "ME"
    TIER1 = "TIER1"
    TIER2 = "TIER2"


class PaymentType(str, Enum):
    """Payment models compared by the deal structure calculator."""

    ONE_TIME = "ONE_TIME"
    RECURRING = "RECURRING"


class _NetworkNodeDictBase(TypedDict):
    id: str
    name: str
    tier: str
    value: str
    children: list["NetworkNodeDict"]


class NetworkNodeDict(_NetworkNodeDictBase, total=False):
    """
    Serialized network node.

    Attributes:
        id: Unique node identifier
        name: Display label
        tier: ME, TIER1 or TIER2
        value: Attributed revenue as a decimal string
        image: Optional profile image reference
        children: Serialized direct recruits
    """
    image: str


class SplitPayoutDict(TypedDict):
    """
    One slice of a split scenario payout.

    Attributes:
        name: Role label
        value: Earnings for this role
    """
    name: str
    value: str
