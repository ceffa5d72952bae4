"""
Static configuration and environment feature flags.

Flags are read once at import time, the same way the trace/bytecode flags
are elsewhere in this codebase: a flag is on only when its variable is
exactly "1".
"""

from __future__ import annotations

import os

# Backend selectors accepted on the command line (case-sensitive).
BACKENDS: tuple[str, ...] = ("bst", "rbt", "hash")

# Literal separator between KEY and VALUE in a rule line.
RULE_DELIMITER = " -> "

SCHEMA_TAG = "word-replacer-run.v1"
SCHEMA_DOC = "docs/schemas/word-replacer-run.v1.json"

USAGE = "Usage: word-replacer <input text file> <word replacements file> <bst|rbt|hash>"

# Emit each rewritten line immediately instead of buffering the whole text.
STREAM_OUTPUT_ENABLED = os.environ.get("WORD_REPLACER_STREAM", "0") == "1"

# Same as passing --verbose.
VERBOSE_ENABLED = os.environ.get("WORD_REPLACER_VERBOSE", "0") == "1"
