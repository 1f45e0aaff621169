"""
Property-based tests for arithmetic operations using Hypothesis.

These tests verify mathematical properties that should hold for all inputs,
not just specific examples.
"""

import contextlib
import math

import pytest
from hypothesis import example, given
from hypothesis import strategies as st

from calculator import (
    DivisionByZeroError,
    OverflowError,
    add,
    divide,
    multiply,
    subtract,
)

finite_floats = st.floats(allow_nan=False, allow_infinity=False)

safe_floats = st.floats(
    min_value=-1e100,
    max_value=1e100,
    allow_nan=False,
    allow_infinity=False,
)

small_floats = st.floats(
    min_value=-1e10,
    max_value=1e10,
    allow_nan=False,
    allow_infinity=False,
)

near_zero_floats = st.floats(
    min_value=-1e-9,
    max_value=1e-9,
    exclude_min=True,
    exclude_max=True,
)

non_zero_floats = small_floats.filter(lambda x: abs(x) >= 1e-9)


@pytest.mark.property
class TestAddProperties:
    """Property-based tests for addition."""

    @given(a=finite_floats, b=finite_floats)
    @example(a=1.7e308, b=1.7e308)
    def test_matches_float_addition_or_overflows(self, a: float, b: float):
        """add(a, b) == a + b, or OverflowError when that is infinite."""
        if math.isinf(a + b):
            with pytest.raises(OverflowError):
                add(a, b)
        else:
            assert add(a, b) == a + b

    @given(a=safe_floats, b=safe_floats)
    def test_commutativity(self, a: float, b: float):
        """add(a, b) == add(b, a)"""
        assert add(a, b) == add(b, a)

    @given(a=safe_floats)
    def test_identity(self, a: float):
        """add(a, 0) == a"""
        assert add(a, 0) == a

    @given(a=finite_floats, b=finite_floats)
    def test_result_is_finite(self, a: float, b: float):
        """A returned sum is never infinite."""
        with contextlib.suppress(OverflowError):
            assert math.isfinite(add(a, b))


@pytest.mark.property
class TestSubtractProperties:
    """Property-based tests for subtraction."""

    @given(a=finite_floats, b=finite_floats)
    def test_matches_float_subtraction_or_overflows(self, a: float, b: float):
        if math.isinf(a - b):
            with pytest.raises(OverflowError):
                subtract(a, b)
        else:
            assert subtract(a, b) == a - b

    @given(a=safe_floats, b=safe_floats)
    def test_anti_commutativity(self, a: float, b: float):
        """subtract(a, b) == -subtract(b, a)"""
        assert subtract(a, b) == -subtract(b, a)

    @given(a=safe_floats)
    def test_self_inverse(self, a: float):
        """subtract(a, a) == 0"""
        assert subtract(a, a) == 0


@pytest.mark.property
class TestMultiplyProperties:
    """Property-based tests for multiplication."""

    @given(a=finite_floats, b=finite_floats)
    def test_matches_float_multiplication_or_overflows(self, a: float, b: float):
        if math.isinf(a * b):
            with pytest.raises(OverflowError):
                multiply(a, b)
        else:
            assert multiply(a, b) == a * b

    @given(a=small_floats, b=small_floats)
    def test_commutativity(self, a: float, b: float):
        """multiply(a, b) == multiply(b, a)"""
        assert multiply(a, b) == multiply(b, a)

    @given(a=safe_floats)
    def test_identity(self, a: float):
        """multiply(a, 1) == a"""
        assert multiply(a, 1) == a


@pytest.mark.property
class TestDivideProperties:
    """Property-based tests for division."""

    @given(a=finite_floats, b=near_zero_floats)
    @example(a=1.0, b=0.0)
    @example(a=1.0, b=1e-10)
    def test_near_zero_divisor_raises(self, a: float, b: float):
        """Any divisor with abs(b) < 1e-9 is rejected."""
        with pytest.raises(DivisionByZeroError):
            divide(a, b)

    @given(a=safe_floats, b=non_zero_floats)
    def test_matches_float_division(self, a: float, b: float):
        """divide(a, b) == a / b outside the tolerance."""
        assert divide(a, b) == a / b

    @given(a=safe_floats)
    def test_identity(self, a: float):
        """divide(a, 1) == a"""
        assert divide(a, 1) == a

    @given(a=non_zero_floats)
    def test_self_division(self, a: float):
        """divide(a, a) == 1"""
        assert divide(a, a) == 1
