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
def calculator():
    """Provide a fresh Calculator instance."""
    from calculator import Calculator

    return Calculator()


@pytest.fixture
def calculator_with_memory():
    """Provide a Calculator with 42 in memory and a last result of 7."""
    from calculator import Calculator

    calc = Calculator()
    calc.memory_store(42.0)
    calc.add(3, 4)
    return calc


@pytest.fixture
def near_zero_divisors():
    """Divisors that must be treated as zero under the default epsilon."""
    return [0, 0.0, -0.0, 1e-10, -1e-10, 5e-10, 9.99e-10, 1e-300]
