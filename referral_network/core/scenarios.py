"""
What-if calculators for deal planning.

These tools let an agent model hypothetical deals. The split
percentages here are user-tunable and independent of the fixed
commission table used for nodes in the network.
"""

from decimal import Decimal

from referral_network.constants import (
    DEFAULT_SPLIT_PERCENTS,
    MIN_PROJECTION_MONTHS,
    POOL_PERCENT,
)
from referral_network.core.models import (
    DealComparison,
    PaymentType,
    ProjectionPoint,
    SplitScenario,
)
from referral_network.types import SplitPayoutDict


class NetworkSplitCalculator:
    """
    Distributes the fixed 10% pool of a deal using custom split percentages.

    The split should sum to 100; a different total is reported through
    SplitScenario.is_valid rather than rejected.
    """

    def calculate(
        self,
        deal_value: Decimal,
        closer_percent: Decimal | int = DEFAULT_SPLIT_PERCENTS[0],
        tier1_percent: Decimal | int = DEFAULT_SPLIT_PERCENTS[1],
        tier2_percent: Decimal | int = DEFAULT_SPLIT_PERCENTS[2],
    ) -> SplitScenario:
        """
        Calculate the payout of each role for a hypothetical deal.

        Args:
            deal_value: Total deal value
            closer_percent: Closer's share of the pool (0-100)
            tier1_percent: Direct upline's share of the pool (0-100)
            tier2_percent: Second-tier upline's share of the pool (0-100)

        Returns:
            SplitScenario with pool, per-role earnings and validity

        Raises:
            ValidationError: If any percentage is outside 0-100

        Example:
            >>> calc = NetworkSplitCalculator()
            >>> calc.calculate(Decimal("10000")).closer_earnings
            Decimal('700')
        """
        closer, tier1, tier2 = (
            Decimal(closer_percent), Decimal(tier1_percent), Decimal(tier2_percent)
        )
        pool = deal_value * POOL_PERCENT / 100
        total = closer + tier1 + tier2

        return SplitScenario(
            deal_value=deal_value,
            pool_percent=POOL_PERCENT,
            pool=pool,
            closer_percent=closer,
            tier1_percent=tier1,
            tier2_percent=tier2,
            closer_earnings=pool * closer / 100,
            tier1_earnings=pool * tier1 / 100,
            tier2_earnings=pool * tier2 / 100,
            total_percent=total,
            is_valid=total == 100,
        )

    def payout_rows(self, scenario: SplitScenario) -> list[SplitPayoutDict]:
        """Get (role, earnings) rows for charting a scenario."""
        return [
            {"name": "Closer (You)", "value": str(scenario.closer_earnings)},
            {"name": "Direct Upline", "value": str(scenario.tier1_earnings)},
            {"name": "2nd Tier", "value": str(scenario.tier2_earnings)},
        ]


class DealStructureCalculator:
    """Compares a one-time commission against a recurring one."""

    def calculate_one_time_commission(
        self, deal_value: Decimal, rate_percent: Decimal
    ) -> Decimal:
        """
        Calculate a one-time commission.

        Formula: deal_value * rate_percent / 100

        Example:
            >>> DealStructureCalculator().calculate_one_time_commission(
            ...     Decimal("5000"), Decimal("10")
            ... )
            Decimal('500')
        """
        if deal_value <= 0 or rate_percent < 0:
            return Decimal("0")
        return deal_value * rate_percent / 100

    def calculate_recurring_commission(
        self, monthly_value: Decimal, rate_percent: Decimal
    ) -> Decimal:
        """Calculate the monthly commission on a recurring deal."""
        if monthly_value <= 0 or rate_percent < 0:
            return Decimal("0")
        return monthly_value * rate_percent / 100

    def calculate_lifetime_value(
        self, monthly_commission: Decimal, retention_months: int
    ) -> Decimal:
        """Total recurring commission over the client's retention period."""
        if retention_months <= 0:
            return Decimal("0")
        return monthly_commission * retention_months

    def build_projection(
        self,
        one_time_commission: Decimal,
        monthly_commission: Decimal,
        retention_months: int,
    ) -> list[ProjectionPoint]:
        """
        Build month-by-month cumulative earnings for both models.

        The series covers max(retention_months, 12) months. Recurring
        earnings stop growing once the retention period ends.

        Args:
            one_time_commission: One-time commission amount
            monthly_commission: Recurring commission per month
            retention_months: Months the client is retained

        Returns:
            One ProjectionPoint per month
        """
        retention = max(retention_months, 0)
        months = max(retention, MIN_PROJECTION_MONTHS)
        return [
            ProjectionPoint(
                month=month,
                label=f"Month {month}",
                one_time=one_time_commission,
                recurring=monthly_commission * min(month, retention),
            )
            for month in range(1, months + 1)
        ]

    def compare(
        self,
        one_time_value: Decimal,
        one_time_rate: Decimal,
        recurring_value: Decimal,
        recurring_rate: Decimal,
        retention_months: int,
    ) -> DealComparison:
        """
        Compare a one-time deal against a recurring one.

        Args:
            one_time_value: One-time deal value
            one_time_rate: Commission rate on the one-time deal, %
            recurring_value: Monthly value of the recurring deal
            recurring_rate: Commission rate on the recurring deal, %
            retention_months: Expected retention of the recurring client

        Returns:
            DealComparison with both commissions, recommendation and projection
        """
        one_time = self.calculate_one_time_commission(one_time_value, one_time_rate)
        monthly = self.calculate_recurring_commission(recurring_value, recurring_rate)
        lifetime = self.calculate_lifetime_value(monthly, retention_months)

        recommended = (
            PaymentType.RECURRING if lifetime > one_time else PaymentType.ONE_TIME
        )

        return DealComparison(
            one_time_commission=one_time,
            recurring_monthly_commission=monthly,
            lifetime_value=lifetime,
            retention_months=max(retention_months, 0),
            recommended_model=recommended,
            advantage=abs(lifetime - one_time),
            projection=self.build_projection(one_time, monthly, retention_months),
        )
