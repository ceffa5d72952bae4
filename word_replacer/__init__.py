# word_replacer/__init__.py
"""
word_replacer public API surface.

    - Stores: RuleStore, HashRuleStore, BSTRuleStore, RBTRuleStore, create_store
    - Cycle guard: would_create_cycle, check_rule
    - Resolver: resolve, find_terminal, compress_path, Resolver
    - Rewriter: split_runs, rewrite_line, rewrite_lines
    - Rules: Rule, parse_rule_line, read_lines
    - Engine: ReplacementEngine
    - Errors: WordReplacerError, UsageError, FileAccessError, ReadError, CycleError
"""

from __future__ import annotations

from .cycle_guard import check_rule, would_create_cycle
from .engine import EngineStats, LoadReport, ReplacementEngine
from .errors import (
    CycleError,
    FileAccessError,
    ReadError,
    UsageError,
    WordReplacerError,
)
from .resolver import Resolver, compress_path, find_terminal, resolve
from .rewriter import rewrite_line, rewrite_lines, split_runs
from .rules import Rule, parse_rule_line, read_lines
from .store import (
    BSTRuleStore,
    HashRuleStore,
    RBTRuleStore,
    RuleStore,
    create_store,
)

__version__ = "1.0.0"

__all__ = [
    "BSTRuleStore",
    "CycleError",
    "EngineStats",
    "FileAccessError",
    "HashRuleStore",
    "LoadReport",
    "RBTRuleStore",
    "ReadError",
    "ReplacementEngine",
    "Resolver",
    "Rule",
    "RuleStore",
    "UsageError",
    "WordReplacerError",
    "check_rule",
    "compress_path",
    "create_store",
    "find_terminal",
    "parse_rule_line",
    "read_lines",
    "resolve",
    "rewrite_line",
    "rewrite_lines",
    "split_runs",
    "would_create_cycle",
]
