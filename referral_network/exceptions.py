"""
Exception types for the referral network.

Not-found conditions on tree mutation are reported through TreeResult;
only explicit lookups and strict validation raise.
"""


class NetworkError(Exception):
    """Base class for referral network errors."""
    pass


class NetworkValidationError(NetworkError, ValueError):
    """Raised when a tree or pending node breaks a network invariant."""

    def __init__(self, violations: list[str]) -> None:
        self.violations = list(violations)
        super().__init__("; ".join(self.violations) or "Invalid network")


class NodeNotFoundError(NetworkError, LookupError):
    """Raised when a required node id is absent from the tree."""

    def __init__(self, node_id: str) -> None:
        self.node_id = node_id
        super().__init__(f"Node '{node_id}' not found")
