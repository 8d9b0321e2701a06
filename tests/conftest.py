"""Pytest configuration for the intexpr test suite.

Hypothesis profiles:
- dev: local runs, 200 examples
- ci: 50 derandomized examples, selected when CI=true

HYPOTHESIS_PROFILE overrides the detection.

Tests marked with @pytest.mark.fuzz (tests/fuzz/) are skipped unless the
run selects them: pytest -m fuzz
"""

import os

import pytest
from hypothesis import settings

settings.register_profile("dev", max_examples=200)
settings.register_profile("ci", max_examples=50, derandomize=True, print_blob=True)


def _detect_profile() -> str:
    explicit = os.environ.get("HYPOTHESIS_PROFILE")
    if explicit in ("dev", "ci"):
        return explicit
    return "ci" if os.environ.get("CI") == "true" else "dev"


settings.load_profile(_detect_profile())


def pytest_configure(config: pytest.Config) -> None:
    """Register the 'fuzz' marker."""
    config.addinivalue_line(
        "markers",
        "fuzz: depth exhaustion tests (skipped unless run with -m fuzz)",
    )


def pytest_collection_modifyitems(
    config: pytest.Config, items: list[pytest.Item]
) -> None:
    """Skip fuzz-marked tests unless the marker expression selects them."""
    if "fuzz" in str(config.getoption("-m", default="")):
        return

    skip_fuzz = pytest.mark.skip(reason="Fuzzing test - run with: pytest -m fuzz")
    for item in items:
        if "fuzz" in item.keywords:
            item.add_marker(skip_fuzz)
