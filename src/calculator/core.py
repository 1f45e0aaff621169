"""Calculator class providing stateful arithmetic with a memory register."""

from __future__ import annotations

from functools import partial
from typing import TYPE_CHECKING

from calculator.exceptions import InvalidArgumentError
from calculator.math_utils import DEFAULT_EPSILON, is_valid_for_log, to_float
from calculator.operations import add, divide, multiply, subtract

if TYPE_CHECKING:
    from collections.abc import Callable


class Calculator:
    """
    A calculator that remembers its last result and one memory value.

    The last result follows every successful arithmetic call. Memory is
    separate and only changes through the memory_* methods, so clear()
    leaves it alone. A call that raises changes nothing.

    Example:
        >>> calc = Calculator()
        >>> calc.add(2, 3)
        5.0
        >>> calc.memory_store(calc.get_last_result())
        >>> calc.clear()
        >>> calc.get_last_result(), calc.memory_recall()
        (0.0, 5.0)
    """

    def __init__(self, epsilon: float = DEFAULT_EPSILON) -> None:
        """
        Initialize an empty calculator.

        Args:
            epsilon: Tolerance under which a divisor counts as zero

        Raises:
            InvalidArgumentError: If epsilon is not a positive finite number
        """
        if not is_valid_for_log(epsilon):
            raise InvalidArgumentError(epsilon, "epsilon must be a positive finite number")
        self._epsilon = float(epsilon)
        self._memory = 0.0
        self._last_result = 0.0

    @property
    def epsilon(self) -> float:
        """Division-by-zero tolerance."""
        return self._epsilon

    @property
    def memory(self) -> float:
        """Value held in the memory register."""
        return self._memory

    @property
    def last_result(self) -> float:
        """Result of the most recent successful arithmetic operation."""
        return self._last_result

    def _apply(self, operation: Callable[[float, float], float], a: float, b: float) -> float:
        """Run a binary operation and record its result."""
        result = operation(a, b)
        self._last_result = result
        return result

    def add(self, a: float, b: float) -> float:
        """Return a + b."""
        return self._apply(add, a, b)

    def subtract(self, a: float, b: float) -> float:
        """Return a - b."""
        return self._apply(subtract, a, b)

    def multiply(self, a: float, b: float) -> float:
        """Return a * b."""
        return self._apply(multiply, a, b)

    def divide(self, a: float, b: float) -> float:
        """Divide a by b using this calculator's epsilon for the zero check."""
        return self._apply(partial(divide, epsilon=self._epsilon), a, b)

    def memory_store(self, value: float) -> None:
        """
        Overwrite the memory register.

        Raises:
            OverflowError: If value is an integer too large for a float
        """
        self._memory = to_float(value, "memory store")

    def memory_recall(self) -> float:
        """Return the value held in memory."""
        return self._memory

    def memory_clear(self) -> None:
        """Reset memory to zero."""
        self._memory = 0.0

    def clear(self) -> None:
        """Reset the last result to zero. Memory is kept."""
        self._last_result = 0.0

    def get_last_result(self) -> float:
        """Return the result of the most recent successful operation."""
        return self._last_result

    def __repr__(self) -> str:
        return f"Calculator(last_result={self._last_result}, memory={self._memory})"
