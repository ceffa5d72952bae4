"""
Cycle detection at rule-insertion time.

Every token has at most one outgoing edge, so the replacement graph is a set
of chains. Adding key -> value closes a cycle exactly when key is already
reachable from value; checking that is a walk down a single chain.
"""

from __future__ import annotations

from .errors import CycleError
from .store import RuleStore


def would_create_cycle(store: RuleStore, key: str, value: str) -> bool:
    """
    Return True if inserting key -> value would make key reachable from itself.

    Walks the chain starting at value. A self-loop (key == value) is caught on
    the first step. The walk terminates because the store is acyclic before
    the insertion.
    """
    current: str | None = value
    while current is not None:
        if current == key:
            return True
        current = store.get(current)
    return False


def check_rule(store: RuleStore, key: str, value: str) -> None:
    """
    Raise CycleError if key -> value may not be inserted.

    Never mutates the store.
    """
    if would_create_cycle(store, key, value):
        raise CycleError(key, value)
