"""Core arithmetic operations for the Math Utils application."""

from __future__ import annotations

from math_utils.base import BaseComponent


class OperandTypeError(TypeError):
    """Raised when an operand is not a plain integer."""

    def __init__(self, name: str, value: object) -> None:
        """Initialise the error with the offending operand's name and value."""
        message = (
            f"Operand '{name}' must be an int, got {type(value).__name__}: {value!r}"
        )
        super().__init__(message)
        self.operand = name
        self.value = value


def _require_int(name: str, value: object) -> int:
    """Return ``value`` unchanged if it is an int, rejecting bools."""
    if isinstance(value, bool) or not isinstance(value, int):
        raise OperandTypeError(name, value)
    return value


class MathUtils(BaseComponent):
    """Stateless holder of integer multiplication and division.

    Python integers are arbitrary precision, so neither operation can overflow.
    """

    def multiply(self, a: int, b: int) -> int:
        """Return the product of two integers.

        Raises:
            OperandTypeError: If either operand is not an int.

        """
        a = _require_int("a", a)
        b = _require_int("b", b)
        return a * b

    def divide(self, a: int, b: int) -> int:
        """Return ``a / b`` truncated toward zero, or ``0`` when ``b`` is zero.

        Division by zero is not an error: the sentinel ``0`` is returned and
        the event is logged at debug level.

        Raises:
            OperandTypeError: If either operand is not an int.

        """
        a = _require_int("a", a)
        b = _require_int("b", b)
        if b == 0:
            self.logger.debug(
                "Division by zero, returning sentinel",
                extra={"a": a, "b": b},
            )
            return 0

        # Floor division rounds toward negative infinity; truncate instead.
        quotient = abs(a) // abs(b)
        return -quotient if (a < 0) != (b < 0) else quotient


_default = MathUtils()


def multiply(a: int, b: int) -> int:
    """Multiply using the shared ``MathUtils`` instance."""
    return _default.multiply(a, b)


def divide(a: int, b: int) -> int:
    """Divide using the shared ``MathUtils`` instance."""
    return _default.divide(a, b)
