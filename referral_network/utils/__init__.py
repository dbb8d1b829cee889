"""
Utility functions for the referral network.

Node id generation and tree serialization.
"""

from referral_network.utils.ids import generate_node_id
from referral_network.utils.serialization import (
    tree_from_dict,
    tree_from_json,
    tree_to_dict,
    tree_to_json,
)

__all__ = [
    "generate_node_id",
    "tree_to_dict",
    "tree_from_dict",
    "tree_to_json",
    "tree_from_json",
]
