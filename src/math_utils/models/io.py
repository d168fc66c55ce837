"""Input/output models for the Math Utils interfaces."""

from typing import Literal

from pydantic import BaseModel, Field


class WelcomeMessage(BaseModel):
    """Banner shown when the CLI runs without a subcommand."""

    message: str = Field(default="Welcome to Math Utils!")
    hint: str = Field(default="Type --help for more information")


class OperationResult(BaseModel):
    """Outcome of a single arithmetic operation."""

    operation: Literal["multiply", "divide"]
    a: int
    b: int
    result: int
    zero_division: bool = Field(
        default=False,
        description="True when divide returned the sentinel for a zero divisor.",
    )
