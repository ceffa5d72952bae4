# word_replacer/store.py
"""
RuleStore backends.

A rule store maps a token to its immediate replacement token. The resolution
engine only needs get/put/absence semantics over strings; which backend holds
the edges never changes a result.

Backends (selected by name, see create_store):

    hash  -> HashRuleStore  (dict-backed hash table)
    bst   -> BSTRuleStore   (unbalanced binary search tree)
    rbt   -> RBTRuleStore   (red-black tree, insert-only rebalancing)

No backend supports deletion: rules are never removed during a run.
"""

from __future__ import annotations

from typing import Dict, Iterator, Optional, Protocol, Tuple

from .config import BACKENDS
from .errors import UsageError


class RuleStore(Protocol):
    """Structural interface every backend satisfies."""

    def get(self, key: str) -> Optional[str]: ...

    def put(self, key: str, value: str) -> None: ...

    def __contains__(self, key: object) -> bool: ...

    def __len__(self) -> int: ...

    def items(self) -> Iterator[Tuple[str, str]]: ...


# ---------------------------------------------------------------------------
# Hash table
# ---------------------------------------------------------------------------


class HashRuleStore:
    """Rule store over a plain dict."""

    name = "hash"

    def __init__(self) -> None:
        self._table: Dict[str, str] = {}

    def get(self, key: str) -> Optional[str]:
        return self._table.get(key)

    def put(self, key: str, value: str) -> None:
        self._table[key] = value

    def __contains__(self, key: object) -> bool:
        return key in self._table

    def __len__(self) -> int:
        return len(self._table)

    def items(self) -> Iterator[Tuple[str, str]]:
        return iter(list(self._table.items()))


# ---------------------------------------------------------------------------
# Binary search trees
# ---------------------------------------------------------------------------


class _Node:
    __slots__ = ("key", "value", "left", "right", "parent", "red")

    def __init__(self, key: str, value: str, parent: Optional["_Node"] = None) -> None:
        self.key = key
        self.value = value
        self.left: Optional[_Node] = None
        self.right: Optional[_Node] = None
        self.parent = parent
        # Only meaningful for the red-black backend; new nodes start red.
        self.red = True


class BSTRuleStore:
    """
    Unbalanced binary search tree keyed by token.

    Insert and lookup are iterative so that rule files sorted by key (which
    degrade this tree into a linked list) cannot exhaust the recursion limit.
    """

    name = "bst"

    def __init__(self) -> None:
        self._root: Optional[_Node] = None
        self._size = 0

    def _find(self, key: str) -> Optional[_Node]:
        node = self._root
        while node is not None:
            if key == node.key:
                return node
            node = node.left if key < node.key else node.right
        return None

    def get(self, key: str) -> Optional[str]:
        node = self._find(key)
        return None if node is None else node.value

    def put(self, key: str, value: str) -> None:
        parent: Optional[_Node] = None
        node = self._root
        while node is not None:
            if key == node.key:
                node.value = value
                return
            parent = node
            node = node.left if key < node.key else node.right

        created = _Node(key, value, parent)
        if parent is None:
            self._root = created
        elif key < parent.key:
            parent.left = created
        else:
            parent.right = created
        self._size += 1
        self._after_insert(created)

    def _after_insert(self, node: _Node) -> None:
        """Rebalancing hook; a plain BST does nothing."""

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and self._find(key) is not None

    def __len__(self) -> int:
        return self._size

    def items(self) -> Iterator[Tuple[str, str]]:
        """In-order traversal, i.e. ascending key order."""
        stack: list[_Node] = []
        node = self._root
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.left
            node = stack.pop()
            yield node.key, node.value
            node = node.right

    def height(self) -> int:
        """Number of nodes on the longest root-to-leaf path (0 when empty)."""
        if self._root is None:
            return 0
        best = 0
        stack = [(self._root, 1)]
        while stack:
            node, depth = stack.pop()
            best = max(best, depth)
            if node.left is not None:
                stack.append((node.left, depth + 1))
            if node.right is not None:
                stack.append((node.right, depth + 1))
        return best


class RBTRuleStore(BSTRuleStore):
    """
    Red-black tree keyed by token.

    Invariants after every put:
    - the root is black
    - a red node never has a red child
    - every root-to-leaf path crosses the same number of black nodes
    """

    name = "rbt"

    def _rotate_left(self, x: _Node) -> None:
        y = x.right
        assert y is not None
        x.right = y.left
        if y.left is not None:
            y.left.parent = x
        y.parent = x.parent
        if x.parent is None:
            self._root = y
        elif x is x.parent.left:
            x.parent.left = y
        else:
            x.parent.right = y
        y.left = x
        x.parent = y

    def _rotate_right(self, x: _Node) -> None:
        y = x.left
        assert y is not None
        x.left = y.right
        if y.right is not None:
            y.right.parent = x
        y.parent = x.parent
        if x.parent is None:
            self._root = y
        elif x is x.parent.right:
            x.parent.right = y
        else:
            x.parent.left = y
        y.right = x
        x.parent = y

    def _after_insert(self, node: _Node) -> None:
        z = node
        while z.parent is not None and z.parent.red:
            parent = z.parent
            grand = parent.parent
            # A red parent is never the root, so the grandparent exists.
            assert grand is not None
            if parent is grand.left:
                uncle = grand.right
                if uncle is not None and uncle.red:
                    parent.red = False
                    uncle.red = False
                    grand.red = True
                    z = grand
                    continue
                if z is parent.right:
                    z = parent
                    self._rotate_left(z)
                    parent = z.parent
                parent.red = False
                grand.red = True
                self._rotate_right(grand)
            else:
                uncle = grand.left
                if uncle is not None and uncle.red:
                    parent.red = False
                    uncle.red = False
                    grand.red = True
                    z = grand
                    continue
                if z is parent.left:
                    z = parent
                    self._rotate_right(z)
                    parent = z.parent
                parent.red = False
                grand.red = True
                self._rotate_left(grand)
        assert self._root is not None
        self._root.red = False


# ---------------------------------------------------------------------------
# Factory
# ---------------------------------------------------------------------------

_BACKEND_TYPES = {
    "bst": BSTRuleStore,
    "rbt": RBTRuleStore,
    "hash": HashRuleStore,
}


def create_store(backend: str) -> RuleStore:
    """
    Build an empty rule store for a backend selector.

    Raises:
        UsageError: if backend is not one of BACKENDS (exact, case-sensitive).
    """
    if backend not in BACKENDS:
        raise UsageError(f"Error: Invalid data structure '{backend}' received.")
    return _BACKEND_TYPES[backend]()
