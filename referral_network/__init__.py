"""
Referral Network Commission Model.

Recruiter tree and commission split calculations for referral agents.

Example:
    >>> from referral_network import CommissionEngine, DEFAULT_NETWORK, add_recruit
    >>>
    >>> engine = CommissionEngine()
    >>> result = add_recruit(DEFAULT_NETWORK, "c1", "Jane Roe", 500)
    >>> result.node.tier
    <NetworkTier.TIER2: 'TIER2'>
    >>> engine.compute_commission(result.node).my_earnings
    Decimal('5')
"""

from referral_network.constants import (
    COMMISSION_TABLE,
    POOL_PERCENT,
    ROOT_NODE_ID,
    CommissionShare,
    get_commission_share,
)
from referral_network.core import (
    CommissionBreakdown,
    CommissionEngine,
    DealComparison,
    DealStructureCalculator,
    NetworkNode,
    NetworkSplitCalculator,
    NetworkSummary,
    NetworkTier,
    PaymentType,
    ProjectionPoint,
    SplitScenario,
    TreeResult,
    add_recruit,
    build_recruit,
    classify_tier,
    create_network,
    ensure_valid_tree,
    find_node,
    find_parent,
    insert_under,
    iter_nodes,
    node_depth,
    require_node,
    summarize_network,
    update_node,
    validate_new_node,
    validate_tree,
)
from referral_network.demo import DEFAULT_NETWORK
from referral_network.exceptions import (
    NetworkError,
    NetworkValidationError,
    NodeNotFoundError,
)
from referral_network.utils import (
    generate_node_id,
    tree_from_dict,
    tree_from_json,
    tree_to_dict,
    tree_to_json,
)


__version__ = "1.0.0"
__all__ = [
    # Core
    "CommissionEngine",
    "NetworkSplitCalculator",
    "DealStructureCalculator",
    # Models
    "NetworkNode",
    "NetworkTier",
    "PaymentType",
    "CommissionBreakdown",
    "NetworkSummary",
    "SplitScenario",
    "ProjectionPoint",
    "DealComparison",
    "TreeResult",
    # Tree operations
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
    # Validation
    "validate_tree",
    "ensure_valid_tree",
    "validate_new_node",
    # Constants
    "COMMISSION_TABLE",
    "CommissionShare",
    "DEFAULT_NETWORK",
    "POOL_PERCENT",
    "ROOT_NODE_ID",
    "get_commission_share",
    # Exceptions
    "NetworkError",
    "NetworkValidationError",
    "NodeNotFoundError",
    # Utils
    "generate_node_id",
    "tree_to_dict",
    "tree_from_dict",
    "tree_to_json",
    "tree_from_json",
]
