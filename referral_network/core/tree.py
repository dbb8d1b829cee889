"""
Recruiter tree operations.

The tree is an immutable value owned by the caller. Lookups are
depth-first; mutations rebuild the path from the root to the changed
node and share every other subtree with the previous tree. Callers
must treat the tree they passed in as stale once a mutation succeeds.
"""

from collections.abc import Iterator
from decimal import Decimal

from loguru import logger

from referral_network.constants import ROOT_NODE_ID, ROOT_NODE_NAME
from referral_network.core.models import (
    NetworkNode,
    NetworkSummary,
    NetworkTier,
    TreeResult,
)
from referral_network.exceptions import NodeNotFoundError
from referral_network.utils.ids import DEFAULT_NODE_ID_LENGTH, generate_node_id

# Fields an external collaborator may change on an existing node
UPDATABLE_FIELDS = frozenset({"name", "value", "image"})


def classify_tier(parent_tier: NetworkTier) -> NetworkTier:
    """
    Get the tier of a recruit added under a parent of the given tier.

    Only the root produces TIER1 recruits. Everything deeper is TIER2:
    there is no TIER3, so recruits of a TIER2 node stay TIER2.

    Args:
        parent_tier: Tier of the parent node

    Returns:
        Tier for the new child

    Example:
        >>> classify_tier(NetworkTier.ME)
        <NetworkTier.TIER1: 'TIER1'>
    """
    if parent_tier == NetworkTier.ME:
        return NetworkTier.TIER1
    return NetworkTier.TIER2


def create_network(
    root_id: str = ROOT_NODE_ID,
    root_name: str = ROOT_NODE_NAME,
    value: Decimal = Decimal("0"),
) -> NetworkNode:
    """Create a tree holding only the account holder."""
    return NetworkNode(id=root_id, name=root_name, tier=NetworkTier.ME, value=value)


def iter_nodes(tree: NetworkNode) -> Iterator[NetworkNode]:
    """Yield every node depth-first, parents before children."""
    stack = [tree]
    while stack:
        node = stack.pop()
        yield node
        stack.extend(reversed(node.children))


def _find_path(tree: NetworkNode, node_id: str) -> list[NetworkNode] | None:
    """Get nodes from the root down to node_id, or None if absent."""
    stack: list[tuple[NetworkNode, tuple[NetworkNode, ...]]] = [(tree, (tree,))]
    while stack:
        node, path = stack.pop()
        if node.id == node_id:
            return list(path)
        for child in reversed(node.children):
            stack.append((child, path + (child,)))
    return None


def _replace_along_path(
    path: list[NetworkNode], replacement: NetworkNode
) -> NetworkNode:
    """Rebuild the ancestors of path[-1] around its replacement."""
    current = replacement
    for ancestor, original in zip(reversed(path[:-1]), reversed(path[1:])):
        children = tuple(
            current if child is original else child
            for child in ancestor.children
        )
        current = ancestor.model_copy(update={"children": children})
    return current


def _assign_tiers(node: NetworkNode, tier: NetworkTier) -> NetworkNode:
    """Copy a subtree with tiers reclassified top-down from tier."""
    child_tier = classify_tier(tier)
    children = tuple(_assign_tiers(child, child_tier) for child in node.children)
    return node.model_copy(update={"tier": tier, "children": children})


def find_node(tree: NetworkNode, node_id: str) -> NetworkNode | None:
    """
    Find a node by id.

    Args:
        tree: Tree root
        node_id: Node id to look up

    Returns:
        Matching node or None
    """
    for node in iter_nodes(tree):
        if node.id == node_id:
            return node
    return None


def require_node(tree: NetworkNode, node_id: str) -> NetworkNode:
    """Find a node by id, raising NodeNotFoundError when absent."""
    node = find_node(tree, node_id)
    if node is None:
        raise NodeNotFoundError(node_id)
    return node


def find_parent(tree: NetworkNode, node_id: str) -> NetworkNode | None:
    """Get the parent of node_id; None for the root or an unknown id."""
    path = _find_path(tree, node_id)
    if path is None or len(path) < 2:
        return None
    return path[-2]


def node_depth(tree: NetworkNode, node_id: str) -> int | None:
    """Get the distance from the root to node_id (root is 0)."""
    path = _find_path(tree, node_id)
    if path is None:
        return None
    return len(path) - 1


def insert_under(
    tree: NetworkNode, parent_id: str, new_node: NetworkNode
) -> TreeResult:
    """
    Append a recruit to the children of parent_id.

    The recruit's tier is reassigned from the parent's tier, and so are
    the tiers of any recruits it already carries. Sibling subtrees of
    the rebuilt path are reused as-is.

    Args:
        tree: Current tree root
        parent_id: Id of the node recruiting
        new_node: Node to append

    Returns:
        TreeResult with the replacement tree, or the unchanged tree and
        an error message when parent_id is not in the tree
    """
    path = _find_path(tree, parent_id)
    if path is None:
        logger.warning(
            "Insert target not found",
            extra={"parent_id": parent_id, "node_id": new_node.id},
        )
        return TreeResult(
            success=False,
            tree=tree,
            error_message=f"Parent node '{parent_id}' not found",
        )

    parent = path[-1]
    child = _assign_tiers(new_node, classify_tier(parent.tier))
    updated_parent = parent.model_copy(
        update={"children": (*parent.children, child)}
    )
    new_tree = _replace_along_path(path, updated_parent)

    logger.info(
        "Recruit added to network",
        extra={
            "parent_id": parent_id,
            "node_id": child.id,
            "tier": child.tier.value,
        },
    )

    return TreeResult(success=True, tree=new_tree, node=child)


def update_node(tree: NetworkNode, node_id: str, **changes) -> TreeResult:
    """
    Replace display or value fields of an existing node.

    Only name, value and image may change; id, tier and children are
    fixed once a node is in the tree.

    Args:
        tree: Current tree root
        node_id: Id of the node to update
        **changes: New field values

    Returns:
        TreeResult with the replacement tree and updated node

    Raises:
        ValueError: If a field other than name, value or image is given
    """
    forbidden = set(changes) - UPDATABLE_FIELDS
    if forbidden:
        raise ValueError(
            f"Cannot update fields: {', '.join(sorted(forbidden))}"
        )

    path = _find_path(tree, node_id)
    if path is None:
        logger.warning("Update target not found", extra={"node_id": node_id})
        return TreeResult(
            success=False,
            tree=tree,
            error_message=f"Node '{node_id}' not found",
        )

    # Validate through the model so values get coerced like on creation
    updated = NetworkNode.model_validate(
        {**path[-1].model_dump(exclude={"children"}), **changes}
    ).model_copy(update={"children": path[-1].children})
    new_tree = _replace_along_path(path, updated)

    logger.debug(
        "Network node updated",
        extra={"node_id": node_id, "fields": sorted(changes)},
    )

    return TreeResult(success=True, tree=new_tree, node=updated)


def build_recruit(
    name: str,
    projected_value: Decimal | int | str = Decimal("0"),
    id_length: int = DEFAULT_NODE_ID_LENGTH,
    node_id: str | None = None,
) -> NetworkNode:
    """
    Create a recruit ready for insertion.

    The tier is provisional; insert_under assigns the real one.

    Args:
        name: Recruit name
        projected_value: Projected monthly value
        id_length: Length of the generated id
        node_id: Explicit id instead of a generated one

    Returns:
        New childless node
    """
    return NetworkNode(
        id=node_id or generate_node_id(id_length),
        name=name,
        tier=NetworkTier.TIER2,
        value=projected_value,
    )


def add_recruit(
    tree: NetworkNode,
    parent_id: str,
    name: str,
    projected_value: Decimal | int | str = Decimal("0"),
    id_length: int = DEFAULT_NODE_ID_LENGTH,
) -> TreeResult:
    """Build a recruit from a name and projected value and insert it."""
    recruit = build_recruit(name, projected_value, id_length=id_length)
    return insert_under(tree, parent_id, recruit)


def summarize_network(tree: NetworkNode) -> NetworkSummary:
    """Count nodes and total attributed value per tier."""
    nodes_per_tier = {tier: 0 for tier in NetworkTier}
    value_per_tier = {tier: Decimal("0") for tier in NetworkTier}

    for node in iter_nodes(tree):
        nodes_per_tier[node.tier] += 1
        value_per_tier[node.tier] += node.value

    return NetworkSummary(
        total_nodes=sum(nodes_per_tier.values()),
        total_value=sum(value_per_tier.values(), Decimal("0")),
        nodes_per_tier=nodes_per_tier,
        value_per_tier=value_per_tier,
    )
