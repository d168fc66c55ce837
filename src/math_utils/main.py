"""Entry point for the Math Utils command line application."""

from math_utils.interfaces.cli import CLIInterface
from math_utils.utils.logger import configure_logging


def main() -> None:
    """Configure logging and run the CLI."""
    configure_logging()
    CLIInterface().run()


if __name__ == "__main__":
    main()
