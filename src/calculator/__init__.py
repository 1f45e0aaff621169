"""
Basic calculator with a memory register and floating-point math helpers.

The package provides:
- Calculator, a stateful four-operation calculator with one memory slot
- Checked arithmetic functions that raise instead of returning infinity
- Math utilities for comparison, factorial, power and angle conversion
"""

from calculator.config import CalculatorConfig
from calculator.core import Calculator
from calculator.exceptions import (
    CalculatorError,
    DivisionByZeroError,
    InvalidArgumentError,
    OverflowError,
)
from calculator.math_utils import (
    DEFAULT_EPSILON,
    are_equal,
    degree_to_radian,
    factorial,
    is_finite,
    is_valid_for_log,
    is_valid_for_sqrt,
    is_zero,
    power,
    radian_to_degree,
)
from calculator.operations import add, divide, multiply, subtract

__all__ = [
    "DEFAULT_EPSILON",
    "Calculator",
    "CalculatorConfig",
    "CalculatorError",
    "DivisionByZeroError",
    "InvalidArgumentError",
    "OverflowError",
    "add",
    "are_equal",
    "degree_to_radian",
    "divide",
    "factorial",
    "is_finite",
    "is_valid_for_log",
    "is_valid_for_sqrt",
    "is_zero",
    "multiply",
    "power",
    "radian_to_degree",
    "subtract",
]

__version__ = "0.1.0"
