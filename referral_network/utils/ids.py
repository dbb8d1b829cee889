"""Identifier generation for new network nodes."""

import secrets
import string

NODE_ID_ALPHABET = string.ascii_lowercase + string.digits
DEFAULT_NODE_ID_LENGTH = 9


def generate_node_id(length: int = DEFAULT_NODE_ID_LENGTH) -> str:
    """
    Generate a random lowercase alphanumeric node id.

    Args:
        length: Number of characters (1-32)

    Returns:
        Random identifier

    Raises:
        ValueError: If length is outside 1-32
    """
    if not 1 <= length <= 32:
        raise ValueError(f"Node id length must be between 1 and 32, got {length}")
    return "".join(secrets.choice(NODE_ID_ALPHABET) for _ in range(length))
