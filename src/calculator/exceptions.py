"""Custom exceptions for the calculator module."""

from typing import Any


class CalculatorError(Exception):
    """Base exception for all calculator errors."""

    def __init__(self, message: str, value: Any = None) -> None:
        self.message = message
        self.value = value
        super().__init__(self.message)

    def __str__(self) -> str:
        if self.value is not None:
            return f"{self.message}: {self.value}"
        return self.message


class DivisionByZeroError(CalculatorError):
    """Raised when the divisor is zero within tolerance."""

    def __init__(self, numerator: float) -> None:
        super().__init__("Division by zero", numerator)
        self.numerator = numerator


class OverflowError(CalculatorError):
    """Raised when a result does not fit in a finite float."""

    def __init__(self, operation: str, *operands: float) -> None:
        super().__init__(f"Overflow in {operation}", operands)
        self.operation = operation
        self.operands = operands


class InvalidArgumentError(CalculatorError):
    """Raised when an argument is outside a function's domain."""

    def __init__(self, value: Any, reason: str = "invalid argument") -> None:
        super().__init__(reason, value)
        self.reason = reason
