"""
Rule resolution with path compression.

This is the "find" half of union-find over the replacement graph: follow a
token's chain to its terminal, then point every node on that chain directly
at the terminal so later lookups take one hop.

resolve() mutates the store while looking like a read. It needs exclusive
access to the store for the duration of the call; the engine is
single-threaded, so nothing here locks.
"""

from __future__ import annotations

from typing import Tuple

from .store import RuleStore


def find_terminal(store: RuleStore, token: str) -> Tuple[str, int]:
    """
    Follow edges from token to the first token with no outgoing edge.

    Returns:
        (terminal, hops) where hops is the number of edges traversed.
        A token that is not a key resolves to itself with 0 hops.

    Does not mutate the store.
    """
    current = token
    hops = 0
    nxt = store.get(current)
    while nxt is not None:
        current = nxt
        hops += 1
        nxt = store.get(current)
    return current, hops


def compress_path(store: RuleStore, token: str, terminal: str) -> int:
    """
    Rewrite every edge on token's chain to point straight at terminal.

    Advances along the *old* target of each rewritten node so the original
    chain is unwound. Stops at the first node already pointing at terminal
    (or at terminal itself).

    Returns:
        Number of edges rewritten.
    """
    rewritten = 0
    current = token
    target = store.get(current)
    while target is not None and target != terminal:
        store.put(current, terminal)
        rewritten += 1
        current = target
        target = store.get(current)
    return rewritten


def resolve(store: RuleStore, token: str) -> str:
    """Return token's terminal replacement, compressing the path on the way."""
    terminal, _ = find_terminal(store, token)
    compress_path(store, token, terminal)
    return terminal


class Resolver:
    """
    Stateful resolver bound to one store.

    Keeps running counters so callers can report how much work compression
    saved; counters never influence results.
    """

    def __init__(self, store: RuleStore) -> None:
        self.store = store
        self.lookups = 0
        self.hops = 0
        self.compressions = 0

    def resolve(self, token: str) -> str:
        terminal, hops = find_terminal(self.store, token)
        self.lookups += 1
        self.hops += hops
        self.compressions += compress_path(self.store, token, terminal)
        return terminal
