"""Pytest configuration and shared fixtures."""

import os

import pytest
from hypothesis import Verbosity, settings

# Configure Hypothesis profiles
settings.register_profile("ci", max_examples=200, deadline=None)
settings.register_profile("dev", max_examples=50, deadline=None)
settings.register_profile("debug", max_examples=10, verbosity=Verbosity.verbose)

# Load profile from environment or default to "dev"
profile = os.environ.get("HYPOTHESIS_PROFILE", "dev")
settings.load_profile(profile)


@pytest.fixture
def clean_env(monkeypatch):
    """Remove linecalc settings from the environment."""
    monkeypatch.delenv("LINECALC_PROMPT", raising=False)
    monkeypatch.delenv("LINECALC_LOG_LEVEL", raising=False)
    return monkeypatch


@pytest.fixture
def scripted_input():
    """Build a readline-style callable that returns the given lines, then EOF."""

    def make(*lines: str):
        remaining = list(lines)

        def read() -> str:
            return remaining.pop(0) if remaining else ""

        return read

    return make


@pytest.fixture
def sample_expressions():
    """Provide valid expressions with their left-to-right results."""
    return [
        ("5", 5),
        ("007", 7),
        ("2 + 3 * 4", 20),
        ("10 - 3 * 2", 14),
        ("1 + 2 * 3 / 4 - 5", -3),
        ("7 - 10 / 3", -1),
        ("100/10/3", 3),
        ("  8   *   0  ", 0),
    ]
