"""
Pytest configuration for word_replacer tests.

Provides:
- Hypothesis profiles (select with HYPOTHESIS_PROFILE, default "default")
- Shared fixtures: every backend, and a helper that writes rule/input files
"""

import os

import pytest

from word_replacer.config import BACKENDS
from word_replacer.store import create_store

try:
    from hypothesis import settings

    settings.register_profile(
        "default",
        print_blob=True,  # Print reproduction blob on failure
        derandomize=False,
    )

    # CI: fewer examples, no deadline (shared runners are slow)
    settings.register_profile(
        "ci",
        print_blob=True,
        derandomize=False,
        deadline=None,
        max_examples=50,
    )

    settings.load_profile(os.environ.get("HYPOTHESIS_PROFILE", "default"))

except ImportError:
    pass  # hypothesis not installed, skip configuration


@pytest.fixture(params=BACKENDS)
def backend(request):
    return request.param


@pytest.fixture
def store(backend):
    return create_store(backend)


@pytest.fixture
def write_files(tmp_path):
    """Write (input text, rules text) into tmp_path and return their paths as str."""

    def _write(text: str, rules: str):
        input_path = tmp_path / "input.txt"
        rules_path = tmp_path / "rules.txt"
        input_path.write_text(text, encoding="utf-8")
        rules_path.write_text(rules, encoding="utf-8")
        return str(input_path), str(rules_path)

    return _write
