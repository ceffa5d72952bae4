"""
Tests for insertion-time cycle detection.
"""

import pytest

from word_replacer.cycle_guard import check_rule, would_create_cycle
from word_replacer.errors import CycleError


def _load(store, pairs):
    for k, v in pairs:
        store.put(k, v)


class TestWouldCreateCycle:
    def test_empty_store_no_cycle(self, store):
        assert would_create_cycle(store, "a", "b") is False

    def test_self_loop(self, store):
        assert would_create_cycle(store, "a", "a") is True

    def test_two_cycle(self, store):
        _load(store, [("a", "b")])
        assert would_create_cycle(store, "b", "a") is True

    def test_long_cycle(self, store):
        _load(store, [("a", "b"), ("b", "c"), ("c", "d"), ("d", "e")])
        assert would_create_cycle(store, "e", "a") is True
        assert would_create_cycle(store, "e", "c") is True

    def test_extending_a_chain_is_fine(self, store):
        _load(store, [("a", "b"), ("b", "c")])
        assert would_create_cycle(store, "c", "d") is False
        assert would_create_cycle(store, "x", "a") is False

    def test_joining_trees_is_fine(self, store):
        _load(store, [("a", "t"), ("b", "t")])
        assert would_create_cycle(store, "c", "a") is False
        assert would_create_cycle(store, "t", "u") is False

    def test_case_sensitive(self, store):
        _load(store, [("a", "B")])
        assert would_create_cycle(store, "b", "a") is False


class TestCheckRule:
    def test_raises_with_pair(self, store):
        store.put("a", "b")
        with pytest.raises(CycleError) as exc:
            check_rule(store, "b", "a")
        assert exc.value.key == "b"
        assert exc.value.value == "a"
        assert str(exc.value) == "Cycle detected when trying to add replacement rule: b -> a"

    def test_rejection_does_not_mutate(self, store):
        store.put("a", "b")
        with pytest.raises(CycleError):
            check_rule(store, "b", "a")
        assert dict(store.items()) == {"a": "b"}

    def test_ok_returns_none(self, store):
        assert check_rule(store, "a", "b") is None
        # check_rule never writes
        assert len(store) == 0
