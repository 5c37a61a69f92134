"""Signed arbitrary-precision integers over a radix between 2 and 16.

A ``BigNum`` is a sign, a ``DigitBuffer`` of digits stored least
significant first, and the radix those digits are written in.  Every
BigNum is kept normalized: no most-significant zero digits, and zero is
always a single ``0`` digit with a PLUS sign.

Arithmetic lives in ``arithmetic.py``; this module covers construction,
normalization, comparison and conversion to text.
"""
from __future__ import annotations

from enum import Enum

from digit_buffer import DigitBuffer
from errors import BaseMismatch, InvalidArgument, InvalidNumber

MIN_RADIX = 2
MAX_RADIX = 16
DECIMAL = 10

DIGIT_ALPHABET = "0123456789ABCDEF"
INVALID_DIGIT = -1

_DIGIT_VALUES = {ch: value for value, ch in enumerate(DIGIT_ALPHABET)}


def digit_value(ch: str) -> int:
    """Value of a digit character, or ``INVALID_DIGIT`` if it has none."""
    return _DIGIT_VALUES.get(ch, INVALID_DIGIT)


def check_radix(radix: int) -> int:
    if not isinstance(radix, int) or not MIN_RADIX <= radix <= MAX_RADIX:
        raise InvalidArgument(
            f"Radix must be an integer in [{MIN_RADIX}, {MAX_RADIX}], got {radix!r}"
        )
    return radix


class Sign(Enum):
    PLUS = 1
    MINUS = -1

    def __mul__(self, other: Sign) -> Sign:
        return Sign(self.value * other.value)

    def __neg__(self) -> Sign:
        return Sign(-self.value)


# ---------------------------------------------------------------------------
# Numeral parsing
# ---------------------------------------------------------------------------

def _read_numeral(
    text: str, radix: int, max_digits: int | None = None,
) -> tuple[Sign, DigitBuffer]:
    check_radix(radix)
    if not isinstance(text, str) or not text:
        raise InvalidNumber(str(text), radix, "empty numeral")

    sign = Sign.PLUS
    body = text
    if body[0] in "+-":
        sign = Sign.MINUS if body[0] == "-" else Sign.PLUS
        body = body[1:]
    if not body:
        raise InvalidNumber(text, radix, "no digits")

    digits = DigitBuffer(max_capacity=max_digits)
    digits.reserve(len(body))
    for ch in body:
        value = digit_value(ch)
        if value == INVALID_DIGIT or value >= radix:
            raise InvalidNumber(text, radix, f"digit {ch!r} not valid")
        digits.append(value)

    # Read most significant first; store least significant first.
    digits.reverse()
    return sign, digits


# ---------------------------------------------------------------------------
# BigNum
# ---------------------------------------------------------------------------

class BigNum:
    """Signed integer as (sign, digits least-significant first, radix)."""

    def __init__(
        self,
        sign: Sign = Sign.PLUS,
        digits: DigitBuffer | None = None,
        radix: int = DECIMAL,
    ) -> None:
        check_radix(radix)
        if digits is None:
            digits = DigitBuffer([0])
        if digits.is_empty():
            raise InvalidArgument("A BigNum needs at least one digit")
        for d in digits:
            if d >= radix:
                raise InvalidArgument(f"Digit {d} is not valid in base {radix}")
        self.sign = sign
        self.digits = digits
        self.radix = radix
        self.normalize()

    # -- constructors -------------------------------------------------------

    @classmethod
    def parse(cls, text: str, radix: int, max_digits: int | None = None) -> BigNum:
        """Read a signed numeral such as ``"-1F"`` written in ``radix``.

        With ``max_digits`` set, the value may never grow past that many
        digits; arithmetic results inherit the limit from their first
        operand.
        """
        sign, digits = _read_numeral(text, radix, max_digits)
        return cls(sign, digits, radix)

    @classmethod
    def from_int(cls, value: int) -> BigNum:
        """Decimal BigNum holding a native integer."""
        if not isinstance(value, int) or isinstance(value, bool):
            raise InvalidArgument(f"Expected an int, got {value!r}")
        return cls.parse(str(value), DECIMAL)

    @classmethod
    def zero(cls, radix: int = DECIMAL, max_digits: int | None = None) -> BigNum:
        return cls(Sign.PLUS, DigitBuffer([0], max_capacity=max_digits), radix)

    @classmethod
    def one(cls, radix: int = DECIMAL, max_digits: int | None = None) -> BigNum:
        return cls(Sign.PLUS, DigitBuffer([1], max_capacity=max_digits), radix)

    def assign(self, text: str, radix: int) -> BigNum:
        """Replace this value by a freshly parsed numeral.

        The digit limit is kept. The instance is left untouched when the
        numeral is rejected.
        """
        sign, digits = _read_numeral(text, radix, self.max_digits)
        self.sign = sign
        self.digits = digits
        self.radix = radix
        self.normalize()
        return self

    def copy(self) -> BigNum:
        clone = BigNum.__new__(BigNum)
        clone.sign = self.sign
        clone.digits = self.digits.copy()
        clone.radix = self.radix
        return clone

    def clear(self) -> None:
        """Reset to canonical zero, keeping the radix."""
        self.sign = Sign.PLUS
        self.digits.clear()
        self.digits.append(0)

    # -- normalization ------------------------------------------------------

    def normalize(self) -> BigNum:
        """Drop leading zero digits and give zero a PLUS sign."""
        if self.digits.is_empty():
            self.digits.append(0)
        self.digits.trim()
        if len(self.digits) == 1 and self.digits[0] == 0:
            self.sign = Sign.PLUS
        return self

    # -- queries ------------------------------------------------------------

    def is_zero(self) -> bool:
        return len(self.digits) == 1 and self.digits[0] == 0

    def is_negative(self) -> bool:
        return self.sign is Sign.MINUS

    @property
    def max_digits(self) -> int | None:
        return self.digits.max_capacity

    def __len__(self) -> int:
        return len(self.digits)

    # -- text ---------------------------------------------------------------

    def to_text(self) -> str:
        prefix = "-" if self.sign is Sign.MINUS else ""
        body = "".join(DIGIT_ALPHABET[d] for d in reversed(self.digits.to_list()))
        return prefix + body

    def __str__(self) -> str:
        return self.to_text()

    def __repr__(self) -> str:
        return f"BigNum({self.to_text()!r}, radix={self.radix})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, BigNum):
            return NotImplemented
        return (
            self.radix == other.radix
            and self.sign is other.sign
            and self.digits == other.digits
        )

    __hash__ = None  # type: ignore[assignment]


# ---------------------------------------------------------------------------
# Comparison
# ---------------------------------------------------------------------------

def compare_digits(x: DigitBuffer, y: DigitBuffer) -> int:
    """Order two trimmed magnitudes: longer is larger, then digit by digit."""
    if len(x) != len(y):
        return 1 if len(x) > len(y) else -1
    for i in range(len(x) - 1, -1, -1):
        if x[i] != y[i]:
            return 1 if x[i] > y[i] else -1
    return 0


def compare_magnitude(a: BigNum, b: BigNum) -> int:
    """Compare ``|a|`` with ``|b|``; returns -1, 0 or 1."""
    if a.radix != b.radix:
        raise BaseMismatch(a.radix, b.radix)
    return compare_digits(a.digits, b.digits)


def compare(a: BigNum, b: BigNum) -> int:
    """Compare signed values; returns -1, 0 or 1."""
    if a.radix != b.radix:
        raise BaseMismatch(a.radix, b.radix)
    if a.sign is not b.sign:
        return 1 if a.sign is Sign.PLUS else -1
    return compare_digits(a.digits, b.digits) * a.sign.value
