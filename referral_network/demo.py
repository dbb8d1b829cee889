"""Demo network used to seed a fresh dashboard session."""

from decimal import Decimal

from referral_network.constants import ROOT_NODE_ID, ROOT_NODE_NAME
from referral_network.core.models import NetworkNode, NetworkTier


DEFAULT_NETWORK = NetworkNode(
    id=ROOT_NODE_ID,
    name=ROOT_NODE_NAME,
    tier=NetworkTier.ME,
    value=Decimal("12450"),
    children=(
        NetworkNode(
            id="c1",
            name="John Doe",
            tier=NetworkTier.TIER1,
            value=Decimal("4500"),
            children=(
                NetworkNode(
                    id="c1-1",
                    name="Alice Smith",
                    tier=NetworkTier.TIER2,
                    value=Decimal("1200"),
                ),
                NetworkNode(
                    id="c1-2",
                    name="Bob Jones",
                    tier=NetworkTier.TIER2,
                    value=Decimal("800"),
                ),
            ),
        ),
        NetworkNode(
            id="c2",
            name="Sarah Lee",
            tier=NetworkTier.TIER1,
            value=Decimal("3200"),
            children=(
                NetworkNode(
                    id="c2-1",
                    name="Mike Brown",
                    tier=NetworkTier.TIER2,
                    value=Decimal("1500"),
                ),
            ),
        ),
        NetworkNode(
            id="c3",
            name="David Kim",
            tier=NetworkTier.TIER1,
            value=Decimal("2100"),
        ),
    ),
)
