"""
Strict validation of network invariants.

Tree operations accept duplicate ids and negative values. These
checks are opt-in for callers that want to reject them.
"""

from collections import Counter

from referral_network.core.models import NetworkNode, NetworkTier
from referral_network.core.tree import classify_tier, find_node, iter_nodes
from referral_network.exceptions import NetworkValidationError


def validate_tree(tree: NetworkNode) -> list[str]:
    """
    Collect every invariant violation in a tree.

    Checks:
    - the root has tier ME
    - every other node has the tier its parent classifies to
    - ids are unique
    - values are non-negative

    Args:
        tree: Tree root

    Returns:
        Violation messages, empty if the tree is valid
    """
    violations: list[str] = []

    if tree.tier != NetworkTier.ME:
        violations.append(
            f"Root node '{tree.id}' must have tier ME, got {tree.tier.value}"
        )

    for parent in iter_nodes(tree):
        expected = classify_tier(parent.tier)
        for child in parent.children:
            if child.tier != expected:
                violations.append(
                    f"Node '{child.id}' under '{parent.id}' must have tier "
                    f"{expected.value}, got {child.tier.value}"
                )

    counts = Counter(node.id for node in iter_nodes(tree))
    for node_id, count in counts.items():
        if count > 1:
            violations.append(f"Duplicate node id '{node_id}' ({count} nodes)")

    for node in iter_nodes(tree):
        if node.value < 0:
            violations.append(f"Node '{node.id}' has negative value {node.value}")

    return violations


def ensure_valid_tree(tree: NetworkNode) -> None:
    """Raise NetworkValidationError if the tree breaks any invariant."""
    violations = validate_tree(tree)
    if violations:
        raise NetworkValidationError(violations)


def validate_new_node(tree: NetworkNode, node: NetworkNode) -> list[str]:
    """
    Check a pending recruit before insertion.

    Args:
        tree: Tree the node will be inserted into
        node: Pending recruit, with any children it carries

    Returns:
        Violation messages, empty if the node can be inserted
    """
    violations: list[str] = []

    for candidate in iter_nodes(node):
        if find_node(tree, candidate.id) is not None:
            violations.append(f"Node id '{candidate.id}' already exists")
        if candidate.value < 0:
            violations.append(
                f"Node '{candidate.id}' has negative value {candidate.value}"
            )

    return violations
