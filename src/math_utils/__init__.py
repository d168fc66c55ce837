"""Integer arithmetic helpers with a zero-division sentinel."""

from math_utils.core import MathUtils, OperandTypeError, divide, multiply

__all__ = ["MathUtils", "OperandTypeError", "divide", "multiply"]
