"""
Error taxonomy for the word replacer.

Library code raises these; only the CLI boundary (word_replacer.cli.main)
turns them into a stderr message and an exit status. str(err) is the exact
diagnostic line printed to stderr.
"""

from __future__ import annotations


class WordReplacerError(Exception):
    """Base class for every fatal word replacer condition."""

    exit_code: int = 1


class UsageError(WordReplacerError):
    """Wrong argument count or an invalid backend selector."""
    pass


class FileAccessError(WordReplacerError):
    """A named input or rule file could not be opened."""

    def __init__(self, filename: str) -> None:
        self.filename = filename
        super().__init__(f"Error: Cannot open file '{filename}' for input.")


class ReadError(WordReplacerError):
    """Reading failed after the file was opened successfully."""

    def __init__(self, filename: str) -> None:
        self.filename = filename
        super().__init__(f"Error: An I/O error occurred reading '{filename}'.")


class CycleError(WordReplacerError):
    """A rule would close a cycle in the replacement graph."""

    def __init__(self, key: str, value: str) -> None:
        self.key = key
        self.value = value
        super().__init__(
            f"Cycle detected when trying to add replacement rule: {key} -> {value}"
        )
