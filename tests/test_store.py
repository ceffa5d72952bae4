"""
Tests for the RuleStore backends.

Every backend must agree on get/put/absence semantics; the tree backends
additionally keep keys ordered, and the red-black tree stays balanced.
"""

import math

import pytest

from word_replacer.errors import UsageError
from word_replacer.store import (
    BSTRuleStore,
    HashRuleStore,
    RBTRuleStore,
    create_store,
)


class TestFactory:
    @pytest.mark.parametrize(
        "name,cls",
        [("bst", BSTRuleStore), ("rbt", RBTRuleStore), ("hash", HashRuleStore)],
    )
    def test_known_backends(self, name, cls):
        s = create_store(name)
        assert type(s) is cls
        assert s.name == name

    @pytest.mark.parametrize("name", ["BST", "Hash", "tree", "", " rbt"])
    def test_unknown_backend_rejected(self, name):
        with pytest.raises(UsageError) as exc:
            create_store(name)
        assert str(exc.value) == f"Error: Invalid data structure '{name}' received."


class TestGetPut:
    """Shared contract, run against every backend via the store fixture."""

    def test_missing_key_is_none(self, store):
        assert store.get("cat") is None
        assert "cat" not in store
        assert len(store) == 0

    def test_put_then_get(self, store):
        store.put("cat", "dog")
        assert store.get("cat") == "dog"
        assert "cat" in store
        assert len(store) == 1

    def test_overwrite_replaces_edge(self, store):
        store.put("cat", "dog")
        store.put("cat", "cow")
        assert store.get("cat") == "cow"
        assert len(store) == 1

    def test_keys_are_case_sensitive(self, store):
        store.put("Cat", "Dog")
        assert store.get("cat") is None
        assert store.get("Cat") == "Dog"

    def test_values_are_not_keys(self, store):
        store.put("cat", "dog")
        assert store.get("dog") is None
        assert "dog" not in store

    def test_items_cover_all_entries(self, store):
        pairs = {"m": "a", "c": "b", "x": "y", "a": "z", "q": "r"}
        for k, v in pairs.items():
            store.put(k, v)
        assert dict(store.items()) == pairs

    def test_non_string_membership(self, store):
        store.put("a", "b")
        assert 1 not in store


class TestTrees:
    @pytest.mark.parametrize("cls", [BSTRuleStore, RBTRuleStore])
    def test_items_in_key_order(self, cls):
        s = cls()
        for k in ["delta", "alpha", "echo", "charlie", "bravo"]:
            s.put(k, k.upper())
        assert [k for k, _ in s.items()] == ["alpha", "bravo", "charlie", "delta", "echo"]

    def test_bst_degenerates_on_sorted_input(self):
        s = BSTRuleStore()
        keys = [f"k{i:05d}" for i in range(2000)]
        for k in keys:
            s.put(k, "v")
        # Iterative insert/lookup: no RecursionError on a 2000-deep chain.
        assert s.height() == 2000
        assert s.get(keys[-1]) == "v"

    def test_rbt_stays_balanced_on_sorted_input(self):
        s = RBTRuleStore()
        n = 2000
        for i in range(n):
            s.put(f"k{i:05d}", "v")
        assert len(s) == n
        assert s.height() <= 2 * math.log2(n + 1)

    def test_rbt_color_invariants(self):
        s = RBTRuleStore()
        for i in [50, 20, 80, 10, 30, 70, 90, 25, 27, 26, 5, 1, 2, 3, 4]:
            s.put(f"{i:03d}", "v")

        root = s._root
        assert root is not None and not root.red

        def black_height(node):
            if node is None:
                return 1
            if node.red:
                for child in (node.left, node.right):
                    assert child is None or not child.red
            left = black_height(node.left)
            right = black_height(node.right)
            assert left == right
            return left + (0 if node.red else 1)

        black_height(root)

    def test_empty_tree_height(self):
        assert RBTRuleStore().height() == 0
        assert list(BSTRuleStore().items()) == []
