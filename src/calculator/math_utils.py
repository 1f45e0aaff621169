"""Stateless floating-point helpers: comparison, factorial, power, angles, domain checks."""

import builtins
import math

from calculator.exceptions import InvalidArgumentError, OverflowError

DEFAULT_EPSILON = 1e-9

# 171! exceeds the largest finite double
MAX_FACTORIAL_ARGUMENT = 170


def to_float(value: float, operation: str) -> float:
    """
    Convert a number to float.

    Args:
        value: The number to convert
        operation: Operation name reported if the conversion overflows

    Returns:
        value as a float

    Raises:
        OverflowError: If value is an integer too large for a float
    """
    try:
        return float(value)
    except builtins.OverflowError as e:
        raise OverflowError(operation, value) from e


def is_zero(value: float, epsilon: float = DEFAULT_EPSILON) -> bool:
    """Return True if ``abs(value)`` is below ``epsilon``."""
    return abs(value) < epsilon


def are_equal(a: float, b: float, epsilon: float = DEFAULT_EPSILON) -> bool:
    """Return True if ``a`` and ``b`` differ by less than ``epsilon``."""
    return abs(a - b) < epsilon


def factorial(n: int) -> float:
    """
    Compute n! as a float.

    The product is accumulated left to right in floating point so that
    results up to 170! stay representable.

    Args:
        n: Non-negative integer

    Returns:
        n factorial

    Raises:
        InvalidArgumentError: If n is negative
        OverflowError: If n! would not fit in a float
    """
    if n < 0:
        raise InvalidArgumentError(n, "Factorial undefined for negative numbers")

    if n > MAX_FACTORIAL_ARGUMENT:
        raise OverflowError("factorial", n)

    if n <= 1:
        return 1.0

    result = 1.0
    for i in range(2, n + 1):
        result *= i

    return result


def power(base: float, exponent: int) -> float:
    """
    Raise base to an integer exponent using binary exponentiation.

    Properties:
        - Zero exponent: power(a, 0) == 1
        - Reciprocal: power(a, -n) == 1 / power(a, n) (for a != 0)

    Args:
        base: The base number
        exponent: Integer exponent, may be negative

    Returns:
        base raised to exponent, or infinity when that exceeds the float range

    Raises:
        InvalidArgumentError: If base is zero and exponent is negative
        OverflowError: If base is an integer too large for a float
    """
    base = to_float(base, "exponentiation")

    if exponent == 0:
        return 1.0

    if exponent < 0:
        if is_zero(base):
            raise InvalidArgumentError(
                (base, exponent), "Cannot raise zero to negative power"
            )
        return 1.0 / power(base, -exponent)

    result = 1.0
    current_power = base

    while exponent > 0:
        if exponent & 1:
            result *= current_power
        current_power *= current_power
        exponent >>= 1

    return result


def degree_to_radian(degrees: float) -> float:
    return degrees * math.pi / 180.0


def radian_to_degree(radians: float) -> float:
    return radians * 180.0 / math.pi


def is_finite(value: float) -> bool:
    """Return True unless value is infinite or NaN."""
    return math.isfinite(value)


def is_valid_for_log(value: float) -> bool:
    """Return True if value is a strictly positive finite number."""
    return value > 0.0 and math.isfinite(value)


def is_valid_for_sqrt(value: float) -> bool:
    """Return True if value is a non-negative finite number."""
    return value >= 0.0 and math.isfinite(value)
