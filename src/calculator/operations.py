"""Core arithmetic operations with overflow protection."""

import math

from calculator.exceptions import DivisionByZeroError, OverflowError
from calculator.math_utils import DEFAULT_EPSILON, is_zero, to_float


def add(a: float, b: float) -> float:
    """
    Add two numbers with overflow protection.

    Properties:
        - Commutative: add(a, b) == add(b, a)
        - Identity: add(a, 0) == a

    Args:
        a: First operand
        b: Second operand

    Returns:
        Sum of a and b

    Raises:
        OverflowError: If the sum is infinite
    """
    a, b = to_float(a, "addition"), to_float(b, "addition")
    result = a + b

    if math.isinf(result):
        raise OverflowError("addition", a, b)

    return result


def subtract(a: float, b: float) -> float:
    """
    Subtract b from a with overflow protection.

    Properties:
        - Anti-commutative: subtract(a, b) == -subtract(b, a)
        - Self-inverse: subtract(a, a) == 0

    Raises:
        OverflowError: If the difference is infinite
    """
    a, b = to_float(a, "subtraction"), to_float(b, "subtraction")
    result = a - b

    if math.isinf(result):
        raise OverflowError("subtraction", a, b)

    return result


def multiply(a: float, b: float) -> float:
    """
    Multiply two numbers with overflow protection.

    Raises:
        OverflowError: If the product is infinite
    """
    a, b = to_float(a, "multiplication"), to_float(b, "multiplication")
    result = a * b

    if math.isinf(result):
        raise OverflowError("multiplication", a, b)

    return result


def divide(a: float, b: float, epsilon: float = DEFAULT_EPSILON) -> float:
    """
    Divide a by b, rejecting divisors within epsilon of zero.

    The quotient is not checked for overflow: a huge dividend over a tiny
    divisor that is still outside epsilon may return infinity.

    Args:
        a: Dividend
        b: Divisor
        epsilon: Tolerance under which b counts as zero

    Returns:
        Quotient of a and b

    Raises:
        DivisionByZeroError: If abs(b) < epsilon
        OverflowError: If an operand is an integer too large for a float
    """
    a, b = to_float(a, "division"), to_float(b, "division")

    if is_zero(b, epsilon):
        raise DivisionByZeroError(a)

    return a / b
