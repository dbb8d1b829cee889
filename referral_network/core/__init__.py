"""
Core network functionality.

Recruiter tree operations, the commission split engine,
invariant validation and what-if deal calculators.
"""

from referral_network.core.models import (
    CommissionBreakdown,
    DealComparison,
    NetworkNode,
    NetworkSummary,
    NetworkTier,
    PaymentType,
    ProjectionPoint,
    SplitScenario,
    TreeResult,
)
from referral_network.core.tree import (
    add_recruit,
    build_recruit,
    classify_tier,
    create_network,
    find_node,
    find_parent,
    insert_under,
    iter_nodes,
    node_depth,
    require_node,
    summarize_network,
    update_node,
)
from referral_network.core.commission import CommissionEngine
from referral_network.core.validation import (
    ensure_valid_tree,
    validate_new_node,
    validate_tree,
)
from referral_network.core.scenarios import (
    DealStructureCalculator,
    NetworkSplitCalculator,
)

__all__ = [
    "CommissionEngine",
    "NetworkSplitCalculator",
    "DealStructureCalculator",
    "NetworkNode",
    "NetworkTier",
    "PaymentType",
    "CommissionBreakdown",
    "NetworkSummary",
    "SplitScenario",
    "ProjectionPoint",
    "DealComparison",
    "TreeResult",
    "classify_tier",
    "create_network",
    "find_node",
    "find_parent",
    "require_node",
    "node_depth",
    "iter_nodes",
    "insert_under",
    "update_node",
    "build_recruit",
    "add_recruit",
    "summarize_network",
    "validate_tree",
    "ensure_valid_tree",
    "validate_new_node",
]
