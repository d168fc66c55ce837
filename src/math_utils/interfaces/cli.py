"""CLI interface implementation using Typer."""

from typing import Annotated

import typer
from rich.console import Console

from math_utils.core import MathUtils
from math_utils.models.io import OperationResult, WelcomeMessage

from .base import BaseInterface

# Force terminal mode even in non-TTY environments
console = Console(force_terminal=True, force_interactive=False)

OperandA = Annotated[int, typer.Argument(help="First operand.")]
OperandB = Annotated[int, typer.Argument(help="Second operand.")]
JsonOutput = Annotated[
    bool,
    typer.Option(
        "--json",
        help="Print the result as JSON instead of a bare number.",
    ),
]


class CLIInterface(BaseInterface):
    """Command Line Interface implementation."""

    def __init__(self, math_utils: MathUtils | None = None) -> None:
        """Initialize the CLI interface."""
        super().__init__()
        self.math_utils = math_utils or MathUtils()
        self.app = typer.Typer(
            name="math-utils",
            help="Integer multiplication and truncating division.",
            add_completion=False,
        )
        self._setup_commands()

    @property
    def name(self) -> str:
        """Get the interface name.

        Returns:
            str: The interface name

        """
        return "CLI"

    def _setup_commands(self) -> None:
        """Set up CLI commands."""
        self.app.command(name="welcome")(self.welcome)
        self.app.command(name="multiply")(self.multiply)
        self.app.command(name="divide")(self.divide)

        # Show welcome when no command is specified
        self.app.callback(invoke_without_command=True)(self._main_callback)

    def _main_callback(self, ctx: typer.Context) -> None:
        """Run when no subcommand is provided."""
        if ctx.invoked_subcommand is None:
            self.welcome()
            raise typer.Exit(0)

    def welcome(self) -> None:
        """Display welcome message."""
        msg = WelcomeMessage()
        console.print(msg.message)
        console.print(msg.hint)
        console.file.flush()

    def multiply(
        self,
        a: OperandA,
        b: OperandB,
        json_output: JsonOutput = False,
    ) -> None:
        """Multiply two integers."""
        self.logger.debug("Multiplying operands", extra={"a": a, "b": b})
        result = OperationResult(
            operation="multiply",
            a=a,
            b=b,
            result=self.math_utils.multiply(a, b),
        )
        self._emit(result, json_output=json_output)

    def divide(
        self,
        a: OperandA,
        b: OperandB,
        json_output: JsonOutput = False,
    ) -> None:
        """Divide two integers, truncating toward zero. Dividing by zero yields 0."""
        self.logger.debug("Dividing operands", extra={"a": a, "b": b})
        result = OperationResult(
            operation="divide",
            a=a,
            b=b,
            result=self.math_utils.divide(a, b),
            zero_division=b == 0,
        )
        self._emit(result, json_output=json_output)

    def _emit(self, result: OperationResult, *, json_output: bool) -> None:
        """Print an operation result in the requested format."""
        if json_output:
            console.print_json(data=result.model_dump())
            console.file.flush()
            return

        if result.zero_division:
            console.print("[yellow]Division by zero: returning 0.[/yellow]")
        console.print(str(result.result), highlight=False)
        console.file.flush()

    def run(self) -> None:
        """Run the CLI interface."""
        self.app()
