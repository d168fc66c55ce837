"""Tests for CLI interface implementation."""

import logging
from unittest.mock import MagicMock, patch

import pytest
import typer
from typer.testing import CliRunner

from math_utils.core import MathUtils
from math_utils.interfaces.base import BaseInterface
from math_utils.interfaces.cli import CLIInterface

runner = CliRunner()


class TestCLIInterface:
    """Test CLI interface functionality."""

    def test_cli_interface_inherits_base(self) -> None:
        """Test that CLIInterface inherits from BaseInterface."""
        assert issubclass(CLIInterface, BaseInterface)

    def test_cli_interface_has_name(self) -> None:
        """Test that CLIInterface has correct name."""
        cli = CLIInterface()
        assert cli.name == "CLI"

    def test_cli_interface_has_typer_app(self) -> None:
        """Test that CLIInterface has Typer app."""
        cli = CLIInterface()
        assert isinstance(cli.app, typer.Typer)

    def test_cli_uses_injected_math_utils(self) -> None:
        """A provided MathUtils instance is used for calculations."""
        math_utils = MathUtils()
        cli = CLIInterface(math_utils=math_utils)
        assert cli.math_utils is math_utils

    def test_cli_welcome_command(self) -> None:
        """Test CLI welcome command functionality."""
        cli = CLIInterface()

        with patch("math_utils.interfaces.cli.console") as mock_console:
            cli.welcome()

            assert mock_console.print.call_count == 2
            first_call = mock_console.print.call_args_list[0][0]
            assert "Welcome to Math Utils!" in str(first_call)
            second_call = mock_console.print.call_args_list[1][0]
            assert "Type --help for more information" in str(second_call)

    def test_cli_run_method(self) -> None:
        """Test CLI run method executes typer app."""
        cli = CLIInterface()
        cli.app = MagicMock()

        cli.run()

        cli.app.assert_called_once()

    def test_cli_multiply_prints_product(self) -> None:
        """The multiply command prints the product."""
        cli = CLIInterface()

        with patch("math_utils.interfaces.cli.console") as mock_console:
            cli.multiply(-2, 5)

            mock_console.print.assert_called_once_with("-10", highlight=False)
            mock_console.file.flush.assert_called_once()

    def test_cli_divide_prints_truncated_quotient(self) -> None:
        """The divide command prints the quotient rounded toward zero."""
        cli = CLIInterface()

        with patch("math_utils.interfaces.cli.console") as mock_console:
            cli.divide(-7, 2)

            mock_console.print.assert_called_once_with("-3", highlight=False)

    def test_cli_divide_by_zero_warns_and_prints_zero(self) -> None:
        """Dividing by zero prints a warning followed by the sentinel."""
        cli = CLIInterface()

        with patch("math_utils.interfaces.cli.console") as mock_console:
            cli.divide(5, 0)

            assert mock_console.print.call_count == 2
            warning = mock_console.print.call_args_list[0][0][0]
            assert "Division by zero" in warning
            mock_console.print.assert_called_with("0", highlight=False)

    def test_cli_json_output(self) -> None:
        """The --json flag prints the full operation result."""
        cli = CLIInterface()

        with patch("math_utils.interfaces.cli.console") as mock_console:
            cli.divide(5, 0, json_output=True)

            mock_console.print_json.assert_called_once_with(
                data={
                    "operation": "divide",
                    "a": 5,
                    "b": 0,
                    "result": 0,
                    "zero_division": True,
                },
            )
            mock_console.print.assert_not_called()


class TestCLIInvocation:
    """Exercise the Typer app end to end."""

    def test_no_command_shows_welcome(self) -> None:
        """Running without a subcommand shows the welcome banner."""
        result = runner.invoke(CLIInterface().app, [])

        assert result.exit_code == 0
        assert "Welcome to Math Utils!" in result.output

    def test_multiply_command(self) -> None:
        """The multiply subcommand parses operands and prints the product."""
        result = runner.invoke(CLIInterface().app, ["multiply", "3", "4"])

        assert result.exit_code == 0
        assert result.output == "12\n"

    def test_divide_command(self) -> None:
        """The divide subcommand prints the quotient."""
        result = runner.invoke(CLIInterface().app, ["divide", "9", "3"])

        assert result.exit_code == 0
        assert result.output == "3\n"

    def test_divide_by_zero_command_prints_sentinel(self) -> None:
        """Dividing by zero on the command line exits cleanly and prints 0 last."""
        result = runner.invoke(CLIInterface().app, ["divide", "--", "5", "0"])

        assert result.exit_code == 0
        assert result.output.splitlines()[-1] == "0"

    def test_commands_log_operands_at_debug_level(
        self,
        caplog: pytest.LogCaptureFixture,
    ) -> None:
        """Operand logging stays below the default INFO threshold."""
        with caplog.at_level(logging.DEBUG, logger="math_utils"):
            runner.invoke(CLIInterface().app, ["multiply", "3", "4"])

        records = [
            r for r in caplog.records if r.getMessage() == "Multiplying operands"
        ]
        assert len(records) == 1
        assert records[0].levelno == logging.DEBUG

    def test_negative_operands_after_separator(self) -> None:
        """Negative operands are accepted after the option separator."""
        cli = CLIInterface()

        with patch("math_utils.interfaces.cli.console") as mock_console:
            result = runner.invoke(cli.app, ["multiply", "--", "-2", "5"])

        assert result.exit_code == 0
        mock_console.print.assert_called_once_with("-10", highlight=False)

    @pytest.mark.parametrize("args", [["multiply", "x", "4"], ["divide", "1.5", "2"]])
    def test_non_integer_operands_are_usage_errors(self, args: list[str]) -> None:
        """Operands that do not parse as integers exit with a usage error."""
        result = runner.invoke(CLIInterface().app, args)

        assert result.exit_code == 2
