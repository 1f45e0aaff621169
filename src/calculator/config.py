"""Runtime configuration for the calculator command loop."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, replace
from typing import TYPE_CHECKING

from calculator.exceptions import InvalidArgumentError
from calculator.math_utils import DEFAULT_EPSILON, is_valid_for_log

if TYPE_CHECKING:
    from collections.abc import Mapping

EPSILON_ENV = "CALCULATOR_EPSILON"
LOG_LEVEL_ENV = "CALCULATOR_LOG_LEVEL"


@dataclass(frozen=True)
class CalculatorConfig:
    """Settings for a calculator session."""

    epsilon: float = DEFAULT_EPSILON
    log_level: str = "WARNING"

    def __post_init__(self) -> None:
        if not is_valid_for_log(self.epsilon):
            raise InvalidArgumentError(
                self.epsilon, "epsilon must be a positive finite number"
            )
        if not isinstance(logging.getLevelName(self.log_level.upper()), int):
            raise InvalidArgumentError(self.log_level, "unknown log level")

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> CalculatorConfig:
        """
        Build a config from environment variables.

        Reads CALCULATOR_EPSILON and CALCULATOR_LOG_LEVEL; unset variables
        keep their defaults.

        Raises:
            InvalidArgumentError: If a variable holds an unusable value
        """
        env = os.environ if environ is None else environ
        config = cls()

        raw_epsilon = env.get(EPSILON_ENV)
        if raw_epsilon:
            try:
                epsilon = float(raw_epsilon)
            except ValueError as e:
                raise InvalidArgumentError(raw_epsilon, f"{EPSILON_ENV} is not a number") from e
            config = config.override(epsilon=epsilon)

        raw_level = env.get(LOG_LEVEL_ENV)
        if raw_level:
            config = config.override(log_level=raw_level)

        return config

    def override(
        self, epsilon: float | None = None, log_level: str | None = None
    ) -> CalculatorConfig:
        """Return a copy with the given non-None fields replaced."""
        changes: dict[str, object] = {}
        if epsilon is not None:
            changes["epsilon"] = epsilon
        if log_level is not None:
            changes["log_level"] = log_level
        return replace(self, **changes)
