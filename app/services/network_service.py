"""
Network service.

Owns the current recruiter tree for a dashboard session and swaps it
for the new tree value after every successful mutation.
"""

from decimal import Decimal, InvalidOperation

from loguru import logger

from app.config.settings import Settings, settings as default_settings
from referral_network import (
    DEFAULT_NETWORK,
    CommissionBreakdown,
    CommissionEngine,
    NetworkNode,
    NetworkSummary,
    NetworkValidationError,
    TreeResult,
    build_recruit,
    create_network,
    ensure_valid_tree,
    find_node,
    insert_under,
    summarize_network,
    tree_from_dict,
    tree_to_dict,
    update_node,
    validate_new_node,
)
from referral_network.types import NetworkNodeDict


class NetworkService:
    """Manages the recruiter tree of one session."""

    def __init__(
        self,
        config: Settings | None = None,
        tree: NetworkNode | None = None,
    ) -> None:
        """
        Initialize network service.

        Args:
            config: Application settings (global settings if None)
            tree: Initial tree (demo network or bare root from settings if None)
        """
        self.config = config or default_settings
        self.engine = CommissionEngine()
        self._version = 0

        if tree is None:
            if self.config.seed_demo_network:
                tree = DEFAULT_NETWORK
            else:
                tree = create_network(
                    self.config.root_node_id, self.config.root_node_name
                )
        self._tree = tree

    @property
    def tree(self) -> NetworkNode:
        """Current tree value."""
        return self._tree

    @property
    def version(self) -> int:
        """Number of tree replacements so far."""
        return self._version

    def _replace_tree(self, tree: NetworkNode) -> None:
        self._tree = tree
        self._version += 1
        logger.debug("Network tree replaced", extra={"version": self._version})

    def _apply(self, result: TreeResult) -> TreeResult:
        if result.success:
            self._replace_tree(result.tree)
        return result

    @staticmethod
    def _parse_value(node_label: str, value: Decimal | int | str) -> Decimal:
        """Convert a user-supplied value, rejecting non-numeric input."""
        violations = [f"Node '{node_label}' has non-numeric value {value!r}"]
        try:
            amount = Decimal(str(value))
        except InvalidOperation as e:
            raise NetworkValidationError(violations) from e
        if not amount.is_finite():
            raise NetworkValidationError(violations)
        return amount

    def find(self, node_id: str) -> NetworkNode | None:
        """Find a node in the current tree."""
        return find_node(self._tree, node_id)

    def add_recruit(
        self,
        parent_id: str,
        name: str,
        projected_value: Decimal | int | str = Decimal("0"),
    ) -> TreeResult:
        """
        Recruit a new agent under parent_id.

        Args:
            parent_id: Id of the recruiting node
            name: Recruit name
            projected_value: Projected monthly value

        Returns:
            TreeResult; the current tree is replaced only on success

        Raises:
            NetworkValidationError: If projected_value is not numeric, or
                in strict mode if the recruit has a negative value or an id
                already in the tree
        """
        amount = self._parse_value(name, projected_value)
        recruit = build_recruit(
            name, amount, id_length=self.config.node_id_length
        )

        if self.config.strict_validation:
            violations = validate_new_node(self._tree, recruit)
            if violations:
                logger.warning(
                    "Recruit rejected by strict validation",
                    extra={"parent_id": parent_id, "violations": violations},
                )
                raise NetworkValidationError(violations)

        return self._apply(insert_under(self._tree, parent_id, recruit))

    def set_node_value(
        self, node_id: str, value: Decimal | int | str
    ) -> TreeResult:
        """
        Set the attributed value of a node.

        Raises:
            NetworkValidationError: If value is not numeric, or in strict
                mode if it is negative
        """
        amount = self._parse_value(node_id, value)
        if self.config.strict_validation and amount < 0:
            raise NetworkValidationError(
                [f"Node '{node_id}' has negative value {amount}"]
            )
        return self._apply(update_node(self._tree, node_id, value=amount))

    def set_profile_image(self, image: str | None) -> TreeResult:
        """Set the account holder's profile image on the root node."""
        return self._apply(update_node(self._tree, self._tree.id, image=image))

    def commission_for(self, node_id: str) -> CommissionBreakdown | None:
        """
        Get the payout breakdown for a node.

        Returns:
            CommissionBreakdown, or None if node_id is not in the tree
        """
        node = self.find(node_id)
        if node is None:
            logger.debug("Commission requested for unknown node", extra={"node_id": node_id})
            return None
        return self.engine.compute_commission(node)

    def network_summary(self) -> NetworkSummary:
        """Get node counts and total value per tier."""
        return summarize_network(self._tree)

    def export_tree(self) -> NetworkNodeDict:
        """Serialize the current tree."""
        return tree_to_dict(self._tree)

    def load_tree(self, data: dict) -> NetworkNode:
        """
        Replace the current tree with a serialized one.

        Args:
            data: Serialized tree

        Returns:
            Loaded tree

        Raises:
            NetworkValidationError: If the payload is malformed, or in
                strict mode if the tree breaks an invariant
        """
        tree = tree_from_dict(data)
        if self.config.strict_validation:
            ensure_valid_tree(tree)

        self._replace_tree(tree)
        logger.info(
            "Network tree loaded",
            extra={"root_id": tree.id, "version": self._version},
        )
        return tree
