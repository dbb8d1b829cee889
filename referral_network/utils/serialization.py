"""
Tree serialization.

Converts a network tree to and from the recursive
``{id, name, tier, value, image?, children}`` shape used by
display and persistence layers. Values travel as decimal strings.
"""

import json

from pydantic import ValidationError

from referral_network.core.models import NetworkNode
from referral_network.exceptions import NetworkValidationError
from referral_network.types import NetworkNodeDict


def tree_to_dict(tree: NetworkNode) -> NetworkNodeDict:
    """
    Serialize a tree into nested dictionaries.

    Args:
        tree: Tree root

    Returns:
        Nested dict; ``image`` is omitted when the node has none
    """
    data: NetworkNodeDict = {
        "id": tree.id,
        "name": tree.name,
        "tier": tree.tier.value,
        "value": str(tree.value),
        "children": [tree_to_dict(child) for child in tree.children],
    }
    if tree.image is not None:
        data["image"] = tree.image
    return data


def tree_from_dict(data: dict) -> NetworkNode:
    """
    Build a tree from nested dictionaries.

    Nodes are taken as given: tiers are not reclassified.

    Args:
        data: Serialized tree

    Returns:
        Tree root

    Raises:
        NetworkValidationError: If the payload does not describe a tree
    """
    try:
        return NetworkNode.model_validate(data)
    except ValidationError as e:
        raise NetworkValidationError(
            [
                f"{'.'.join(str(loc) for loc in err['loc'])}: {err['msg']}"
                for err in e.errors()
            ]
        ) from e


def tree_to_json(tree: NetworkNode, indent: int | None = None) -> str:
    """Serialize a tree to a JSON string."""
    return json.dumps(tree_to_dict(tree), indent=indent, ensure_ascii=False)


def tree_from_json(payload: str) -> NetworkNode:
    """
    Build a tree from a JSON string.

    Raises:
        NetworkValidationError: If the payload is not valid JSON or not a tree
    """
    try:
        data = json.loads(payload)
    except json.JSONDecodeError as e:
        raise NetworkValidationError([f"Invalid JSON: {e.msg}"]) from e
    if not isinstance(data, dict):
        raise NetworkValidationError(["Tree payload must be a JSON object"])
    return tree_from_dict(data)
