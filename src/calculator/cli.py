"""Interactive menu loop for the calculator."""

from __future__ import annotations

import argparse
import logging
from typing import TYPE_CHECKING

from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.prompt import FloatPrompt, IntPrompt

from calculator.config import CalculatorConfig
from calculator.core import Calculator
from calculator.exceptions import CalculatorError

if TYPE_CHECKING:
    from collections.abc import Sequence
    from typing import TextIO

log = logging.getLogger(__name__)

MENU = "1. Add\n2. Subtract\n3. Multiply\n4. Divide\n5. Exit"
EXIT_CHOICE = 5

# menu choice -> Calculator method name
OPERATIONS = {
    1: "add",
    2: "subtract",
    3: "multiply",
    4: "divide",
}

CHOICES = [str(n) for n in (*OPERATIONS, EXIT_CHOICE)]


def configure_logging(level: str) -> None:
    """Send the package's log records to stderr through rich."""
    logger = logging.getLogger("calculator")
    logger.setLevel(level.upper())
    if not any(isinstance(h, RichHandler) for h in logger.handlers):
        logger.addHandler(RichHandler(console=Console(stderr=True), show_path=False))


def run(calculator: Calculator, console: Console, stream: TextIO | None = None) -> None:
    """
    Run the menu loop until the user picks Exit.

    Operation errors are printed and the loop carries on.

    Args:
        calculator: Calculator receiving the operations
        console: Console used for prompts and output
        stream: Input to read from instead of stdin
    """
    console.print(MENU)

    while True:
        choice = IntPrompt.ask(
            "Enter choice", choices=CHOICES, show_choices=False, console=console, stream=stream
        )
        if choice == EXIT_CHOICE:
            log.debug("exit requested")
            return

        a = FloatPrompt.ask("Enter number 1", console=console, stream=stream)
        b = FloatPrompt.ask("Enter number 2", console=console, stream=stream)

        name = OPERATIONS[choice]
        log.debug("dispatching %s(%r, %r)", name, a, b)
        try:
            result = getattr(calculator, name)(a, b)
        except CalculatorError as e:
            log.warning("%s failed: %s", name, e)
            console.print(f"[red]Error:[/red] {escape(str(e))}")
        else:
            console.print(f"Result: {result:g}")
        console.print()


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="calculator",
        description="Add, subtract, multiply and divide from an interactive menu.",
    )
    parser.add_argument(
        "--epsilon",
        type=float,
        default=None,
        help="tolerance under which a divisor counts as zero (default: 1e-9)",
    )
    parser.add_argument(
        "--log-level",
        default=None,
        help="logging level, e.g. DEBUG or WARNING (default: WARNING)",
    )
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Entry point for the ``calculator`` command."""
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        config = CalculatorConfig.from_env().override(
            epsilon=args.epsilon, log_level=args.log_level
        )
    except CalculatorError as e:
        parser.error(str(e))

    configure_logging(config.log_level)
    log.debug("starting with %s", config)

    console = Console()
    try:
        run(Calculator(epsilon=config.epsilon), console)
    except (EOFError, KeyboardInterrupt):
        console.print()
    return 0
