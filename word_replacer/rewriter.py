"""
Tokenizer / rewriter.

A line is a sequence of maximal runs: letter runs ("words") alternate with
runs of everything else (digits, punctuation, whitespace, symbols). Words are
replaced by their resolved token; every other character is copied verbatim.
Matching is case-sensitive and nothing is case-normalized.
"""

from __future__ import annotations

from itertools import groupby
from typing import Callable, Iterable, Iterator, Tuple

Resolve = Callable[[str], str]


def is_word_char(ch: str) -> bool:
    """Letter test used for tokenizing (str.isalpha)."""
    return ch.isalpha()


def split_runs(line: str) -> Iterator[Tuple[bool, str]]:
    """
    Yield (is_word, run) pairs covering line exactly, in order.

    Concatenating the runs gives back the original line; a trailing word
    with no boundary after it is yielded like any other run.
    """
    for is_word, chars in groupby(line, key=is_word_char):
        yield is_word, "".join(chars)


def rewrite_line(line: str, resolve: Resolve) -> str:
    """Replace every word in line by resolve(word); keep everything else."""
    return "".join(resolve(run) if is_word else run for is_word, run in split_runs(line))


def rewrite_lines(lines: Iterable[str], resolve: Resolve) -> Iterator[str]:
    """Rewrite lines one at a time, lazily."""
    for line in lines:
        yield rewrite_line(line, resolve)
