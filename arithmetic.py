"""Schoolbook arithmetic over ``BigNum`` values.

Every binary operation has the shape ``op(a, b) -> a``:

* ``a`` is consumed.  Its sign and digits are replaced by the result and
  the same object is returned.  Copy it first if the original value is
  still needed.
* ``b`` is read only and is never modified, not even for a moment.
* The result keeps the digit limit of ``a`` (``BigNum.max_digits``).  A
  result that would not fit raises ``ResourceExhausted``.

All preconditions (matching radix, zero divisor, negative operands) are
checked before ``a`` is touched, and the result is only stored once it
fits, so a call that raises leaves both operands as they were.
"""
from __future__ import annotations

from bignum import (
    DECIMAL,
    BigNum,
    Sign,
    check_radix,
    compare_digits,
)
from digit_buffer import DigitBuffer
from errors import BaseMismatch, DivisionByZero, DomainError, InvalidExponent


def _require_same_radix(a: BigNum, b: BigNum) -> None:
    if a.radix != b.radix:
        raise BaseMismatch(a.radix, b.radix)


def _bounded(digits: DigitBuffer, limit: int | None) -> DigitBuffer:
    """Trimmed ``digits`` in a fresh buffer holding at most ``limit`` digits."""
    digits.trim()
    return DigitBuffer(digits, max_capacity=limit)


# ---------------------------------------------------------------------------
# Magnitude primitives
# ---------------------------------------------------------------------------

def _add_into(target: DigitBuffer, addend: DigitBuffer, radix: int) -> None:
    """``target += addend`` on magnitudes, ripple carry."""
    width = max(len(target), len(addend))
    target.resize(width)
    carry = 0
    for i in range(width):
        total = carry + target[i] + (addend[i] if i < len(addend) else 0)
        target[i] = total % radix
        carry = total // radix
    if carry:
        target.append(carry)
    target.trim()


def _subtract_into(minuend: DigitBuffer, subtrahend: DigitBuffer, radix: int) -> None:
    """``minuend -= subtrahend`` on magnitudes; requires minuend >= subtrahend."""
    borrow = 0
    for i in range(len(minuend)):
        diff = minuend[i] - borrow - (subtrahend[i] if i < len(subtrahend) else 0)
        if diff < 0:
            diff += radix
            borrow = 1
        else:
            borrow = 0
        minuend[i] = diff
    minuend.trim()


def _signed_sum(
    sign_a: Sign,
    mag_a: DigitBuffer,
    sign_b: Sign,
    mag_b: DigitBuffer,
    radix: int,
) -> tuple[Sign, DigitBuffer]:
    """Sum of two explicit (sign, magnitude) pairs as a fresh pair."""
    if sign_a is sign_b:
        total = mag_a.copy()
        _add_into(total, mag_b, radix)
        return sign_a, total

    order = compare_digits(mag_a, mag_b)
    if order == 0:
        return Sign.PLUS, DigitBuffer([0])
    if order > 0:
        diff = mag_a.copy()
        _subtract_into(diff, mag_b, radix)
        return sign_a, diff
    diff = mag_b.copy()
    _subtract_into(diff, mag_a, radix)
    return sign_b, diff


# ---------------------------------------------------------------------------
# Addition / subtraction
# ---------------------------------------------------------------------------

def add(a: BigNum, b: BigNum) -> BigNum:
    """``a = a + b``."""
    _require_same_radix(a, b)
    sign, total = _signed_sum(a.sign, a.digits, b.sign, b.digits, a.radix)
    a.digits = _bounded(total, a.max_digits)
    a.sign = sign
    return a.normalize()


def subtract(a: BigNum, b: BigNum) -> BigNum:
    """``a = a - b``, computed as ``a + (-b)``."""
    _require_same_radix(a, b)
    sign, diff = _signed_sum(a.sign, a.digits, -b.sign, b.digits, a.radix)
    a.digits = _bounded(diff, a.max_digits)
    a.sign = sign
    return a.normalize()


# ---------------------------------------------------------------------------
# Multiplication
# ---------------------------------------------------------------------------

def multiply(a: BigNum, b: BigNum) -> BigNum:
    """``a = a * b`` by adding shifted copies of ``a``.

    For each digit ``d`` of ``b`` (least significant first) the running row
    is added ``d`` times, then the row is shifted up by one digit.
    """
    _require_same_radix(a, b)
    row = a.digits.copy()
    # Stops with ResourceExhausted as soon as the partial product outgrows
    # the limit.
    product = DigitBuffer([0], max_capacity=a.max_digits)
    for i, d in enumerate(b.digits):
        if i:
            row.shift_up(1)
        for _ in range(d):
            _add_into(product, row, a.radix)
    a.digits = product
    a.sign = a.sign * b.sign
    return a.normalize()


# ---------------------------------------------------------------------------
# Division / modulo
# ---------------------------------------------------------------------------

def _long_divide(digits: DigitBuffer, divisor: DigitBuffer, radix: int) -> DigitBuffer:
    """Turn ``digits`` into the quotient in place; return the remainder.

    Works most significant digit first.  Each dividend digit is moved into
    the running remainder (``row``) and its slot is then counted up once per
    subtraction of the divisor.
    """
    row = DigitBuffer([0])
    for i in range(len(digits) - 1, -1, -1):
        row.shift_up(1)
        row[0] = digits[i]
        digits[i] = 0
        while compare_digits(row, divisor) >= 0:
            _subtract_into(row, divisor, radix)
            digits[i] += 1
    return row


def divide_with_remainder(a: BigNum, b: BigNum) -> tuple[BigNum, BigNum]:
    """``a = a / b`` truncated toward zero; also return the remainder.

    The remainder is a new BigNum carrying the dividend's original sign,
    so ``quotient * b + remainder`` equals the original ``a``.
    """
    _require_same_radix(a, b)
    if b.is_zero():
        raise DivisionByZero()

    # The quotient is built in a copy, so ``b`` may be ``a`` itself.
    quotient = a.digits.copy()
    remainder_digits = _long_divide(quotient, b.digits, a.radix)
    remainder = BigNum(a.sign, _bounded(remainder_digits, a.max_digits), a.radix)

    a.digits = _bounded(quotient, a.max_digits)
    a.sign = a.sign * b.sign
    a.normalize()
    return a, remainder


def divide(a: BigNum, b: BigNum) -> BigNum:
    """``a = a / b`` truncated toward zero."""
    quotient, _ = divide_with_remainder(a, b)
    return quotient


def modulo(a: BigNum, b: BigNum) -> BigNum:
    """``a = a - b * floor(a / b)`` for non-negative operands only."""
    _require_same_radix(a, b)
    if b.is_zero():
        raise DivisionByZero()
    if a.is_negative() or b.is_negative():
        raise DomainError("Modulo for negative numbers is not defined")

    scaled = divide(a.copy(), b)
    multiply(scaled, b)
    return subtract(a, scaled)


# ---------------------------------------------------------------------------
# Exponentiation
# ---------------------------------------------------------------------------

def exponentiate(a: BigNum, b: BigNum) -> BigNum:
    """``a = a ** b`` by square-and-multiply over the bits of ``b``.

    Every intermediate power keeps the digit limit of ``a``, so an
    oversized result is refused as soon as a partial power outgrows it.
    """
    _require_same_radix(a, b)
    if b.is_negative():
        raise InvalidExponent(b.to_text())

    if b.is_zero():
        a.sign = Sign.PLUS
        a.digits = DigitBuffer([1], max_capacity=a.max_digits)
        return a

    exponent = BigNum(Sign.PLUS, DigitBuffer(b.digits), b.radix)
    bits = convert_radix(exponent, 2).digits
    result = a.copy()
    # The leading bit is always 1 and is covered by starting from ``a``.
    for i in range(len(bits) - 2, -1, -1):
        multiply(result, result.copy())
        if bits[i] == 1:
            multiply(result, a)

    a.sign = result.sign
    a.digits = result.digits
    return a.normalize()


# ---------------------------------------------------------------------------
# Base conversion
# ---------------------------------------------------------------------------

def _to_decimal(value: BigNum) -> BigNum:
    """Magnitude of ``value`` as a decimal BigNum: sum of digit * radix**i."""
    result = BigNum.zero(DECIMAL)
    place = BigNum.one(DECIMAL)
    step = BigNum.from_int(value.radix)
    for i, d in enumerate(value.digits):
        if i:
            multiply(place, step)
        if d:
            term = multiply(BigNum.from_int(d), place)
            add(result, term)
    return result


def convert_radix(a: BigNum, target: int) -> BigNum:
    """Re-express ``a`` in radix ``target``, pivoting through decimal.

    The decimal pivot is not limited; the digits in ``target`` are, so a
    value too long for ``a.max_digits`` in the new radix raises
    ``ResourceExhausted`` and ``a`` keeps its old radix and digits.
    """
    check_radix(target)
    if target == a.radix:
        return a

    decimal = _to_decimal(a)
    if target == DECIMAL:
        a.digits = _bounded(decimal.digits, a.max_digits)
        a.radix = DECIMAL
        return a.normalize()

    divisor = BigNum.from_int(target)
    digits = DigitBuffer(max_capacity=a.max_digits)
    while not decimal.is_zero():
        decimal, remainder = divide_with_remainder(decimal, divisor)
        digits.append(int(remainder.to_text()))
    if digits.is_empty():
        digits.append(0)

    a.digits = digits
    a.radix = target
    return a.normalize()
