"""
Unit tests for recruiter tree operations.

Tests cover:
- Tier classification
- Depth-first lookup
- Copy-on-write insertion and structural sharing
- Not-found insertion results
- Tier invariants after sequences of insertions
"""

from decimal import Decimal

import pytest

from referral_network import (
    NetworkNode,
    NetworkTier,
    NodeNotFoundError,
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
    validate_tree,
)


def _node(node_id: str, value: int = 0) -> NetworkNode:
    return NetworkNode(id=node_id, name=f"Agent {node_id}", tier=NetworkTier.TIER2, value=value)


class TestClassifyTier:
    """Test tier assignment for new recruits."""

    @pytest.mark.parametrize(
        "parent_tier, expected",
        [
            (NetworkTier.ME, NetworkTier.TIER1),
            (NetworkTier.TIER1, NetworkTier.TIER2),
            (NetworkTier.TIER2, NetworkTier.TIER2),
        ],
    )
    def test_classification(self, parent_tier, expected):
        """Test every parent tier maps to the next tier down, flattening at TIER2."""
        assert classify_tier(parent_tier) == expected


class TestFindNode:
    """Test depth-first lookup."""

    def test_find_root(self, sample_tree):
        """Test root is found by its id."""
        assert find_node(sample_tree, "root") is sample_tree

    def test_find_nested(self, sample_tree):
        """Test a TIER2 node is found."""
        node = find_node(sample_tree, "c2-1")
        assert node is not None
        assert node.name == "Mike Brown"
        assert node.tier == NetworkTier.TIER2

    def test_find_missing(self, sample_tree):
        """Test unknown id returns None."""
        assert find_node(sample_tree, "does-not-exist") is None

    def test_require_missing_raises(self, sample_tree):
        """Test require_node raises for unknown id."""
        with pytest.raises(NodeNotFoundError) as exc_info:
            require_node(sample_tree, "nope")
        assert exc_info.value.node_id == "nope"

    def test_iter_nodes_preorder(self, sample_tree):
        """Test traversal visits parents before children, left to right."""
        ids = [node.id for node in iter_nodes(sample_tree)]
        assert ids == ["root", "c1", "c1-1", "c1-2", "c2", "c2-1", "c3"]

    def test_find_parent(self, sample_tree):
        """Test parent lookup."""
        assert find_parent(sample_tree, "c1-2").id == "c1"
        assert find_parent(sample_tree, "c3").id == "root"
        assert find_parent(sample_tree, "root") is None
        assert find_parent(sample_tree, "missing") is None

    def test_node_depth(self, sample_tree):
        """Test depth from root."""
        assert node_depth(sample_tree, "root") == 0
        assert node_depth(sample_tree, "c2") == 1
        assert node_depth(sample_tree, "c2-1") == 2
        assert node_depth(sample_tree, "missing") is None


class TestInsertUnder:
    """Test copy-on-write insertion."""

    def test_insert_under_root_is_tier1(self, sample_tree):
        """Test recruit added under the root becomes TIER1."""
        result = insert_under(sample_tree, "root", NetworkNode(
            id="x", name="New", tier=NetworkTier.TIER2, value=0
        ))

        assert result.success is True
        assert result.error_message is None
        found = find_node(result.tree, "x")
        assert found is not None
        assert found.tier == NetworkTier.TIER1
        assert found == result.node

    def test_insert_under_tier1_is_tier2(self, sample_tree):
        """Test recruit added under a TIER1 node becomes TIER2."""
        result = insert_under(sample_tree, "c1", NetworkNode(
            id="y", name="New2", tier=NetworkTier.TIER1, value=500
        ))

        assert result.success is True
        found = find_node(result.tree, "y")
        assert found.tier == NetworkTier.TIER2
        assert found.value == Decimal("500")

    def test_insert_under_tier2_stays_tier2(self, sample_tree):
        """Test recruit of a TIER2 node is flattened to TIER2."""
        result = insert_under(sample_tree, "c1-1", _node("deep"))

        assert result.success is True
        assert find_node(result.tree, "deep").tier == NetworkTier.TIER2
        assert node_depth(result.tree, "deep") == 3

    def test_insert_appends_after_existing_children(self, sample_tree):
        """Test new child goes last and existing order is kept."""
        result = insert_under(sample_tree, "c1", _node("c1-3"))

        children = find_node(result.tree, "c1").children
        assert [child.id for child in children] == ["c1-1", "c1-2", "c1-3"]

    def test_insert_missing_parent(self, sample_tree):
        """Test unknown parent leaves the tree unchanged and reports failure."""
        result = insert_under(sample_tree, "does-not-exist", _node("z"))

        assert result.success is False
        assert result.tree is sample_tree
        assert result.node is None
        assert "does-not-exist" in result.error_message
        assert find_node(result.tree, "z") is None

    def test_original_tree_untouched(self, sample_tree):
        """Test insertion does not modify the previous tree value."""
        before = sample_tree.model_dump()
        insert_under(sample_tree, "c2", _node("new"))

        assert sample_tree.model_dump() == before
        assert find_node(sample_tree, "new") is None

    def test_sibling_subtrees_shared(self, sample_tree):
        """Test subtrees off the insertion path are reused by reference."""
        result = insert_under(sample_tree, "c1", _node("c1-3"))

        assert result.tree is not sample_tree
        assert find_node(result.tree, "c1") is not find_node(sample_tree, "c1")
        assert find_node(result.tree, "c2") is find_node(sample_tree, "c2")
        assert find_node(result.tree, "c3") is find_node(sample_tree, "c3")
        assert find_node(result.tree, "c1-1") is find_node(sample_tree, "c1-1")

    def test_duplicate_id_accepted(self, sample_tree):
        """Test duplicate ids are not rejected by plain insertion."""
        result = insert_under(sample_tree, "c3", _node("c1"))

        assert result.success is True
        assert len([n for n in iter_nodes(result.tree) if n.id == "c1"]) == 2

    def test_negative_value_accepted(self, sample_tree):
        """Test negative values are not rejected by plain insertion."""
        result = insert_under(sample_tree, "root", _node("neg", value=-100))

        assert result.success is True
        assert find_node(result.tree, "neg").value == Decimal("-100")

    def test_invariants_after_many_insertions(self, bare_tree):
        """Test tier invariants hold after a sequence of insertions."""
        tree = bare_tree
        parents = ["root", "a", "root", "b", "a1", "a", "b1"]
        names = ["a", "a1", "b", "b1", "a11", "a2", "b11"]
        for parent_id, node_id in zip(parents, names):
            tree = insert_under(tree, parent_id, _node(node_id)).tree

        me_nodes = [n for n in iter_nodes(tree) if n.tier == NetworkTier.ME]
        assert me_nodes == [tree]

        for node in iter_nodes(tree):
            parent = find_parent(tree, node.id)
            if node.tier == NetworkTier.TIER1:
                assert parent is tree
            elif node.tier == NetworkTier.TIER2:
                assert parent is not None and parent is not tree

    def test_carried_recruits_reclassified(self, sample_tree):
        """Test tiers inside an inserted subtree follow the new parent."""
        subtree = NetworkNode(
            id="x", name="X", tier=NetworkTier.TIER2,
            children=(
                NetworkNode(id="x1", name="X1", tier=NetworkTier.TIER1),
                NetworkNode(
                    id="x2", name="X2", tier=NetworkTier.ME,
                    children=(NetworkNode(id="x21", name="X21", tier=NetworkTier.ME),),
                ),
            ),
        )

        result = insert_under(sample_tree, "root", subtree)

        assert result.success is True
        assert validate_tree(result.tree) == []
        assert find_node(result.tree, "x").tier == NetworkTier.TIER1
        assert find_node(result.tree, "x1").tier == NetworkTier.TIER2
        assert find_node(result.tree, "x2").tier == NetworkTier.TIER2
        assert find_node(result.tree, "x21").tier == NetworkTier.TIER2
        assert [n for n in iter_nodes(result.tree) if n.tier == NetworkTier.ME] == [result.tree]
        assert result.node.children[1].children[0].tier == NetworkTier.TIER2


class TestRecruits:
    """Test recruit construction helpers."""

    def test_build_recruit_generates_id(self):
        """Test generated id has the requested length and alphabet."""
        recruit = build_recruit("Sarah Connor", 250, id_length=12)

        assert len(recruit.id) == 12
        assert recruit.id.isalnum() and recruit.id.lower() == recruit.id
        assert recruit.value == Decimal("250")
        assert recruit.children == ()

    def test_build_recruit_explicit_id(self):
        """Test explicit id is kept."""
        assert build_recruit("A", node_id="fixed").id == "fixed"

    def test_build_recruit_default_value(self):
        """Test projected value defaults to zero."""
        assert build_recruit("A").value == Decimal("0")

    def test_add_recruit(self, sample_tree):
        """Test add_recruit builds and inserts in one step."""
        result = add_recruit(sample_tree, "c3", "Jane Roe", "750.50")

        assert result.success is True
        assert result.node.tier == NetworkTier.TIER2
        assert result.node.value == Decimal("750.50")
        assert find_parent(result.tree, result.node.id).id == "c3"

    def test_create_network(self):
        """Test bare network holds only an ME root."""
        tree = create_network("me", "Alex Morgan")

        assert tree.id == "me"
        assert tree.tier == NetworkTier.ME
        assert tree.children == ()
        assert tree.value == Decimal("0")


class TestUpdateNode:
    """Test field updates on existing nodes."""

    def test_update_value(self, sample_tree):
        """Test value update keeps children and tier."""
        result = update_node(sample_tree, "c1", value=Decimal("9999"))

        updated = find_node(result.tree, "c1")
        assert result.success is True
        assert updated.value == Decimal("9999")
        assert updated.tier == NetworkTier.TIER1
        assert updated.children == find_node(sample_tree, "c1").children

    def test_update_root_image(self, sample_tree):
        """Test image update on the root."""
        result = update_node(sample_tree, "root", image="data:image/png;base64,AAA")

        assert result.tree.image == "data:image/png;base64,AAA"
        assert sample_tree.image is None

    def test_update_missing(self, sample_tree):
        """Test unknown id reports failure and keeps the tree."""
        result = update_node(sample_tree, "missing", name="X")

        assert result.success is False
        assert result.tree is sample_tree

    @pytest.mark.parametrize("field", ["id", "tier", "children"])
    def test_update_fixed_fields_rejected(self, sample_tree, field):
        """Test structural fields cannot be updated."""
        with pytest.raises(ValueError):
            update_node(sample_tree, "c1", **{field: "x"})


class TestSummarizeNetwork:
    """Test per-tier aggregates."""

    def test_demo_summary(self, sample_tree):
        """Test counts and totals for the demo network."""
        summary = summarize_network(sample_tree)

        assert summary.total_nodes == 7
        assert summary.nodes_per_tier == {
            NetworkTier.ME: 1,
            NetworkTier.TIER1: 3,
            NetworkTier.TIER2: 3,
        }
        assert summary.value_per_tier[NetworkTier.ME] == Decimal("12450")
        assert summary.value_per_tier[NetworkTier.TIER1] == Decimal("9800")
        assert summary.value_per_tier[NetworkTier.TIER2] == Decimal("3500")
        assert summary.total_value == Decimal("25750")
