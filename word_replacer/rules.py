"""
Rule-file and input-file reading.

Both files are read line by line with universal newlines, so "\n", "\r\n"
and "\r" all end a line and the terminator is never part of the yielded
text. Bytes that are not valid UTF-8 decode to U+FFFD and never stop a run.
OS-level failures become FileAccessError (on open) or ReadError (after
open); nothing here exits the process.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, List, Optional

from .config import RULE_DELIMITER
from .errors import FileAccessError, ReadError


@dataclass(frozen=True)
class Rule:
    """One directed edge: key is replaced by value."""

    key: str
    value: str

    def __str__(self) -> str:
        return f"{self.key}{RULE_DELIMITER}{self.value}"


def split_fields(line: str, delimiter: str = RULE_DELIMITER) -> List[str]:
    """
    Split on delimiter and drop trailing empty fields.

    "a -> b -> " therefore gives ["a", "b"], while "a -> " gives ["a"] and
    an empty line gives [].
    """
    fields = line.split(delimiter)
    while fields and fields[-1] == "":
        fields.pop()
    return fields


def parse_rule_line(line: str) -> Optional[Rule]:
    """Parse "KEY -> VALUE"; return None for any line that is not exactly two fields."""
    fields = split_fields(line)
    if len(fields) != 2:
        return None
    return Rule(fields[0], fields[1])


# ---------------------------------------------------------------------------
# File access
# ---------------------------------------------------------------------------


def ensure_readable(path: str) -> None:
    """Open and close path, raising FileAccessError if that fails."""
    try:
        with open(path, "r", encoding="utf-8", errors="replace"):
            pass
    except OSError as e:
        raise FileAccessError(path) from e


def read_lines(path: str) -> Iterator[str]:
    """
    Yield the lines of path without their terminators.

    Raises:
        FileAccessError: path cannot be opened.
        ReadError: the OS reports a failure part way through the file.
    """
    try:
        fh = open(path, "r", encoding="utf-8", errors="replace")
    except OSError as e:
        raise FileAccessError(path) from e

    with fh:
        while True:
            try:
                line = fh.readline()
            except OSError as e:
                raise ReadError(path) from e
            if not line:
                return
            yield line[:-1] if line.endswith("\n") else line
