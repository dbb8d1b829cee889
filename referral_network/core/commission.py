"""
Commission split calculator for network nodes.

Pure business logic: a node's payout depends only on its tier and
value. No state is kept between calls.
"""

from decimal import Decimal

from loguru import logger

from referral_network.constants import POOL_PERCENT, get_commission_share
from referral_network.core.models import CommissionBreakdown, NetworkNode
from referral_network.core.tree import iter_nodes


class CommissionEngine:
    """
    Computes the payout breakdown for a node in the recruiter tree.

    A fixed 10% of the node's value forms the pool, which is split
    70/20/10 between the closer, the direct upline and the second-tier
    upline according to the node's tier.
    """

    def calculate_pool(self, value: Decimal) -> Decimal:
        """
        Calculate the commission pool for a deal value.

        Formula: value * POOL_PERCENT / 100

        Args:
            value: Deal value attributed to a node

        Returns:
            Pool amount

        Example:
            >>> engine = CommissionEngine()
            >>> engine.calculate_pool(Decimal("12450"))
            Decimal('1245')
        """
        return value * POOL_PERCENT / 100

    def calculate_share(self, pool: Decimal, share_percent: int) -> Decimal:
        """
        Calculate a share of the pool.

        Formula: pool * share_percent / 100

        Args:
            pool: Pool amount
            share_percent: Share of the pool as whole percent

        Returns:
            Earnings for the share
        """
        return pool * share_percent / 100

    def calculate_effective_percentage(
        self, earnings: Decimal, value: Decimal
    ) -> Decimal:
        """
        Express earnings as a percentage of the deal value.

        Returns 0 for a zero deal value instead of dividing by zero.

        Args:
            earnings: Node holder's earnings
            value: Deal value attributed to the node

        Returns:
            Effective percentage of the deal value

        Example:
            >>> engine = CommissionEngine()
            >>> engine.calculate_effective_percentage(Decimal("90"), Decimal("4500"))
            Decimal('2.00')
        """
        if value == 0:
            return Decimal("0")
        return earnings / value * 100

    def compute_commission(self, node: NetworkNode) -> CommissionBreakdown:
        """
        Compute the payout breakdown for a node.

        Args:
            node: Network node

        Returns:
            CommissionBreakdown with pool, earnings, role and percentages

        Example:
            >>> from referral_network.demo import DEFAULT_NETWORK
            >>> engine = CommissionEngine()
            >>> engine.compute_commission(DEFAULT_NETWORK).my_earnings
            Decimal('871.5')
        """
        share = get_commission_share(node.tier)
        pool = self.calculate_pool(node.value)
        my_earnings = self.calculate_share(pool, share.share_percent)

        breakdown = CommissionBreakdown(
            pool=pool,
            my_earnings=my_earnings,
            role=share.role,
            percentage_of_pool=share.share_percent,
            effective_percentage=self.calculate_effective_percentage(
                my_earnings, node.value
            ),
        )

        logger.debug(
            "Commission computed",
            extra={
                "node_id": node.id,
                "tier": node.tier.value,
                "pool": str(breakdown.pool),
                "my_earnings": str(breakdown.my_earnings),
            },
        )

        return breakdown

    def compute_all(self, tree: NetworkNode) -> dict[str, CommissionBreakdown]:
        """
        Compute breakdowns for every node in a tree.

        Args:
            tree: Tree root

        Returns:
            Breakdowns keyed by node id, in depth-first order
        """
        return {node.id: self.compute_commission(node) for node in iter_nodes(tree)}
