"""
ReplacementEngine - the rule-resolution engine behind the CLI.

Bundles a RuleStore with cycle checking on insert, path-compressing
resolution, and the line rewriter:

    engine = ReplacementEngine(create_store("rbt"))
    engine.load_rules(read_lines("rules.txt"))
    for out in engine.rewrite_lines(read_lines("input.txt")):
        ...

The CLI loads every rule before rewriting any text. add_rule() also works
after resolution has compressed paths: redefining a key first restores every
stored edge to its declared target, so no compressed shortcut outlives the
edge it skipped.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any, Dict, Iterable, Iterator, List

from .cycle_guard import check_rule
from .resolver import Resolver
from .rewriter import rewrite_line
from .rules import parse_rule_line
from .store import RuleStore


@dataclass
class EngineStats:
    rules_loaded: int = 0
    rules_redefined: int = 0
    lines_skipped: int = 0
    lines_rewritten: int = 0
    words_seen: int = 0
    words_replaced: int = 0
    path_compressions: int = 0

    def as_dict(self) -> Dict[str, int]:
        return asdict(self)


@dataclass
class LoadReport:
    loaded: int
    # 1-based line numbers of lines that were not "KEY -> VALUE"
    skipped: List[int]


class ReplacementEngine:
    """Global word substitution over one rule set."""

    def __init__(self, store: RuleStore) -> None:
        self.store = store
        self.resolver = Resolver(store)
        self.stats = EngineStats()
        # Edges exactly as declared, before any compression.
        self._declared: Dict[str, str] = {}
        self._compressed = False

    # -------------------------------------------------------------------------
    # Rule ingestion
    # -------------------------------------------------------------------------

    def add_rule(self, key: str, value: str) -> bool:
        """
        Insert key -> value after checking it cannot close a cycle.

        Returns:
            True if key was new, False for a redefinition or a repeat of
            the declared rule.

        Raises:
            CycleError: the rule is rejected and the store is left unchanged.
        """
        previous = self._declared.get(key)
        if previous == value:
            return False
        if previous is not None and self._compressed:
            self._restore_declared()

        check_rule(self.store, key, value)
        self.store.put(key, value)
        self._declared[key] = value
        if previous is None:
            self.stats.rules_loaded += 1
            return True
        self.stats.rules_redefined += 1
        return False

    def load_rules(self, lines: Iterable[str]) -> LoadReport:
        """
        Parse and insert every well-formed rule line, in order.

        Malformed lines are skipped. The first cycle aborts loading by
        propagating CycleError.
        """
        loaded = 0
        skipped: List[int] = []
        for lineno, line in enumerate(lines, start=1):
            rule = parse_rule_line(line)
            if rule is None:
                skipped.append(lineno)
                continue
            if self.add_rule(rule.key, rule.value):
                loaded += 1
        self.stats.lines_skipped += len(skipped)
        return LoadReport(loaded=loaded, skipped=skipped)

    def _restore_declared(self) -> None:
        # Compression only ever rewrites existing keys, so overwriting every
        # declared key brings the store back to the declared graph.
        for key, value in self._declared.items():
            self.store.put(key, value)
        self._compressed = False

    def declared_rules(self) -> Dict[str, str]:
        return dict(self._declared)

    # -------------------------------------------------------------------------
    # Resolution / rewriting
    # -------------------------------------------------------------------------

    def resolve(self, token: str) -> str:
        before = self.resolver.compressions
        terminal = self.resolver.resolve(token)
        if self.resolver.compressions != before:
            self._compressed = True
        self.stats.path_compressions = self.resolver.compressions
        return terminal

    def _resolve_word(self, word: str) -> str:
        replacement = self.resolve(word)
        self.stats.words_seen += 1
        if replacement != word:
            self.stats.words_replaced += 1
        return replacement

    def rewrite_line(self, line: str) -> str:
        out = rewrite_line(line, self._resolve_word)
        self.stats.lines_rewritten += 1
        return out

    def rewrite_lines(self, lines: Iterable[str]) -> Iterator[str]:
        for line in lines:
            yield self.rewrite_line(line)

    def summary(self) -> Dict[str, Any]:
        data: Dict[str, Any] = self.stats.as_dict()
        data["rules_in_store"] = len(self.store)
        return data
