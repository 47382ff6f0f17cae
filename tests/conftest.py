"""Pytest configuration and shared fixtures for the domtree test suite.

This module registers markers and Hypothesis profiles used across the suite.
"""

import os

import pytest
from hypothesis import Phase, Verbosity, settings

from domtree.ast import Body, Div, Para, Text

# Register custom Hypothesis profiles
settings.register_profile("ci", max_examples=100, verbosity=Verbosity.verbose)
settings.register_profile("dev", max_examples=20)
settings.register_profile(
    "debug", max_examples=10, verbosity=Verbosity.verbose, phases=[Phase.explicit, Phase.reuse, Phase.generate]
)

# Load profile from environment or use default
settings.load_profile(os.getenv("HYPOTHESIS_PROFILE", "dev"))


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests - fast, isolated component tests")
    config.addinivalue_line("markers", "integration: Integration tests - component interaction tests")


@pytest.fixture
def simple_document() -> Body:
    """Provide a small well-formed document.

    Returns
    -------
    Body
        Body > Div > Para > Text

    """
    return Body([Div([Para([Text("hello")])])])
