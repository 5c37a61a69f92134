"""Error taxonomy for the arbitrary-precision arithmetic core.

Every failure is raised synchronously to the caller.  Each class also
derives from the closest built-in exception so callers that only know
about ``ValueError`` or ``ZeroDivisionError`` still catch them.
"""
from __future__ import annotations


class BigNumError(Exception):
    """Base class for every error raised by the arithmetic core."""


# ---------------------------------------------------------------------------
# Invalid arguments
# ---------------------------------------------------------------------------

class InvalidArgument(BigNumError, ValueError):
    """Malformed input: bad radix, bad capacity, bad digit value."""


class InvalidNumber(InvalidArgument):
    """A numeral that cannot be read in the declared radix."""

    def __init__(self, numeral: str, radix: int, reason: str = "") -> None:
        self.numeral = numeral
        self.radix = radix
        detail = f": {reason}" if reason else ""
        super().__init__(f"Invalid numeral {numeral!r} in base {radix}{detail}")


class IndexOutOfRange(InvalidArgument, IndexError):
    """Digit buffer access outside ``[0, length)``."""

    def __init__(self, index: int, length: int) -> None:
        self.index = index
        self.length = length
        super().__init__(f"Index {index} out of range for length {length}")


# ---------------------------------------------------------------------------
# Arithmetic errors
# ---------------------------------------------------------------------------

class BaseMismatch(BigNumError, ValueError):
    """Operands of a binary operation are declared in different radices."""

    def __init__(self, left: int, right: int) -> None:
        self.left = left
        self.right = right
        super().__init__(f"Operands coded in different bases: {left} and {right}")


class DivisionByZero(BigNumError, ZeroDivisionError):
    """Divisor (or modulus) is zero."""

    def __init__(self) -> None:
        super().__init__("division by zero")


class DomainError(BigNumError, ArithmeticError):
    """Operand outside the domain on which an operation is defined."""


class InvalidExponent(DomainError):
    """Negative exponent."""

    def __init__(self, exponent: str) -> None:
        self.exponent = exponent
        super().__init__(f"Invalid exponent {exponent}: negative value")


class ResourceExhausted(BigNumError, MemoryError):
    """Digit storage could not grow."""

    def __init__(self, requested: int) -> None:
        self.requested = requested
        super().__init__(f"Cannot grow digit storage to {requested} slots")
