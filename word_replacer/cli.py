from __future__ import annotations

"""
word-replacer CLI

Global, rule-driven word substitution over a text file:

    python -m word_replacer.cli <input text file> <word replacements file> <bst|rbt|hash>

This module is the only place that turns a WordReplacerError into a stderr
diagnostic and an exit status. Every helper below raises; main() returns.

Contract:
  - success: the rewritten text on stdout (one line per input line) followed
    by one extra newline; exit 0
  - any failure: one diagnostic line on stderr, nothing on stdout; exit 1
  - --json: the same run emitted as a word-replacer-run.v1 document
"""

import argparse
import datetime
import hashlib
import json
import sys
from typing import Any, Dict, List, Optional, TextIO

from word_replacer.config import (
    SCHEMA_DOC,
    SCHEMA_TAG,
    STREAM_OUTPUT_ENABLED,
    USAGE,
    VERBOSE_ENABLED,
)
from word_replacer.engine import ReplacementEngine
from word_replacer.errors import UsageError, WordReplacerError
from word_replacer.rules import ensure_readable, read_lines
from word_replacer.store import create_store


class _ArgumentParser(argparse.ArgumentParser):
    """argparse that raises UsageError instead of exiting with status 2."""

    def error(self, message: str) -> None:  # type: ignore[override]
        raise UsageError(USAGE)


def _utc_now_z() -> str:
    now = datetime.datetime.now(datetime.timezone.utc)
    return now.isoformat(timespec="seconds").replace("+00:00", "Z")


def _inputs_hash(backend: str, rules: Dict[str, str], text: List[str]) -> str:
    payload = json.dumps(
        {"backend": backend, "rules": rules, "input": text},
        sort_keys=True,
        separators=(",", ":"),
        ensure_ascii=False,
    )
    return hashlib.sha256(payload.encode("utf-8")).hexdigest()


def _log(msg: str) -> None:
    print(f"word-replacer: {msg}", file=sys.stderr)


def _build_parser() -> argparse.ArgumentParser:
    ap = _ArgumentParser(
        prog="word-replacer",
        allow_abbrev=False,
        description="Replace every word of a text file by its fully resolved replacement rule.",
    )
    ap.add_argument(
        "args",
        nargs="*",
        metavar="ARG",
        help="<input text file> <word replacements file> <bst|rbt|hash>",
    )
    ap.add_argument("--json", action="store_true", help="Emit a word-replacer-run.v1 JSON report.")
    ap.add_argument("--pretty", action="store_true", help="Pretty-print JSON output.")
    ap.add_argument("--schema", action="store_true", help="Print schema tag + schema doc path and exit.")
    ap.add_argument("--verbose", action="store_true", help="Report rule loading and counters on stderr.")
    return ap


# Flags recognized anywhere on the command line. Every other token, including
# ones that start with "-", is a positional path or backend name.
_FLAGS = frozenset({"-h", "--help", "--json", "--pretty", "--schema", "--verbose"})


def _parse(ap: argparse.ArgumentParser, argv: List[str]) -> argparse.Namespace:
    flags = [tok for tok in argv if tok in _FLAGS]
    positional = [tok for tok in argv if tok not in _FLAGS]
    args = ap.parse_args(flags)
    args.args = positional
    return args


def _verify_arguments(positional: List[str]) -> None:
    """Argument count, then each file, in the order the diagnostics are reported."""
    if len(positional) != 3:
        raise UsageError(USAGE)
    input_file, rules_file, _ = positional
    ensure_readable(input_file)
    ensure_readable(rules_file)


def _emit_json(payload: Dict[str, Any], pretty: bool, out: TextIO) -> None:
    if pretty:
        out.write(json.dumps(payload, ensure_ascii=False, indent=2) + "\n")
    else:
        out.write(json.dumps(payload, ensure_ascii=False) + "\n")


def run(args: argparse.Namespace, out: TextIO) -> None:
    """Execute one replacement run; raises WordReplacerError on any fatal condition."""
    _verify_arguments(args.args)
    input_file, rules_file, backend = args.args
    verbose = bool(args.verbose) or VERBOSE_ENABLED

    engine = ReplacementEngine(create_store(backend))
    if verbose:
        _log(f"backend: {backend}")

    report = engine.load_rules(read_lines(rules_file))
    if verbose:
        _log(f"rules loaded: {report.loaded} from '{rules_file}'")
        for lineno in report.skipped:
            _log(f"skipped malformed rule line {lineno}")

    if args.json:
        text = list(read_lines(input_file))
        declared = engine.declared_rules()
        output = list(engine.rewrite_lines(text))
        payload: Dict[str, Any] = {
            "schema": SCHEMA_TAG,
            "schema_doc": SCHEMA_DOC,
            "backend": backend,
            "input_file": input_file,
            "rules_file": rules_file,
            "output": output,
            "ok": True,
            "skipped_rule_lines": report.skipped,
            "stats": engine.summary(),
            "meta": {
                "tool": "word_replacer.cli",
                "generated_at": _utc_now_z(),
                "determinism": {
                    "inputs_hash": _inputs_hash(backend, declared, text),
                },
            },
        }
        _emit_json(payload, pretty=bool(args.pretty), out=out)
    elif STREAM_OUTPUT_ENABLED:
        for line in engine.rewrite_lines(read_lines(input_file)):
            out.write(line + "\n")
        out.write("\n")
    else:
        # Buffer everything so a read failure part way leaves stdout empty.
        chunks = [line + "\n" for line in engine.rewrite_lines(read_lines(input_file))]
        out.write("".join(chunks) + "\n")

    if verbose:
        for name, value in engine.summary().items():
            _log(f"{name}: {value}")


def main(argv: Optional[List[str]] = None) -> int:
    ap = _build_parser()
    try:
        args = _parse(ap, sys.argv[1:] if argv is None else list(argv))
        if args.schema:
            print(f"{SCHEMA_TAG} {SCHEMA_DOC}")
            return 0
        run(args, out=sys.stdout)
    except WordReplacerError as e:
        print(str(e), file=sys.stderr)
        return e.exit_code
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
