"""Arithmetic laws as data.

Each law is a named predicate over BigNum operands that must hold for
every value in a given radix.  The verifier (see verification.py) walks
these sets and searches for counterexamples; the test suite reuses the
same predicates.

Predicates never mutate their operands: every arithmetic call works on
copies, since the arithmetic functions consume their first argument.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, Iterator

from arithmetic import (
    add,
    convert_radix,
    divide,
    divide_with_remainder,
    exponentiate,
    modulo,
    multiply,
    subtract,
)
from bignum import MAX_RADIX, MIN_RADIX, BigNum, Sign, compare, compare_magnitude


# ---------------------------------------------------------------------------
# Core primitives
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class Law:
    """A single verifiable property of the arithmetic."""

    name: str
    description: str
    arity: int
    predicate: Callable[..., bool]

    def check(self, *operands: BigNum) -> bool:
        """Evaluate the predicate on the given operands."""
        return self.predicate(*operands)


@dataclass
class LawSet:
    """An ordered collection of laws for one operation."""

    name: str
    laws: list[Law] = field(default_factory=list)

    def add(self, law: Law) -> None:
        self.laws.append(law)

    def __iter__(self) -> Iterator[Law]:
        return iter(self.laws)

    def __len__(self) -> int:
        return len(self.laws)


# ---------------------------------------------------------------------------
# Pure helpers over copies
# ---------------------------------------------------------------------------

def _plus(a: BigNum, b: BigNum) -> BigNum:
    return add(a.copy(), b)


def _minus(a: BigNum, b: BigNum) -> BigNum:
    return subtract(a.copy(), b)


def _times(a: BigNum, b: BigNum) -> BigNum:
    return multiply(a.copy(), b)


def _magnitude(a: BigNum) -> BigNum:
    m = a.copy()
    m.sign = Sign.PLUS
    return m


def _negated(a: BigNum) -> BigNum:
    n = a.copy()
    n.sign = -n.sign
    return n.normalize()


# ---------------------------------------------------------------------------
# Law set builders
# ---------------------------------------------------------------------------

def text_laws(radix: int) -> LawSet:
    laws = LawSet(name="text")
    laws.add(Law(
        "round_trip",
        "parse(to_text(a)) == a",
        1,
        lambda a: BigNum.parse(a.to_text(), radix) == a,
    ))
    laws.add(Law(
        "canonical_zero",
        "zero renders as '0' without sign",
        1,
        lambda a: _minus(a, a).to_text() == "0",
    ))
    return laws


def comparison_laws(radix: int) -> LawSet:
    laws = LawSet(name="comparison")
    laws.add(Law(
        "antisymmetry",
        "compare(a, b) == -compare(b, a)",
        2,
        lambda a, b: compare(a, b) == -compare(b, a),
    ))
    laws.add(Law(
        "reflexivity",
        "compare(a, a) == 0",
        1,
        lambda a: compare(a, a.copy()) == 0,
    ))
    laws.add(Law(
        "magnitude_ignores_sign",
        "compare_magnitude(a, b) == compare_magnitude(-a, b)",
        2,
        lambda a, b: compare_magnitude(a, b) == compare_magnitude(_negated(a), b),
    ))
    return laws


def addition_laws(radix: int) -> LawSet:
    zero = BigNum.zero(radix)
    laws = LawSet(name="addition")
    laws.add(Law(
        "identity",
        "a + 0 == a",
        1,
        lambda a: _plus(a, zero) == a,
    ))
    laws.add(Law(
        "commutativity",
        "a + b == b + a",
        2,
        lambda a, b: _plus(a, b) == _plus(b, a),
    ))
    laws.add(Law(
        "inverse",
        "(a + b) - b == a",
        2,
        lambda a, b: subtract(_plus(a, b), b) == a,
    ))
    laws.add(Law(
        "associativity",
        "(a + b) + c == a + (b + c)",
        3,
        lambda a, b, c: add(_plus(a, b), c) == _plus(a, _plus(b, c)),
    ))
    return laws


def subtraction_laws(radix: int) -> LawSet:
    zero = BigNum.zero(radix)
    laws = LawSet(name="subtraction")
    laws.add(Law(
        "identity",
        "a - 0 == a",
        1,
        lambda a: _minus(a, zero) == a,
    ))
    laws.add(Law(
        "self_inverse",
        "a - a == 0",
        1,
        lambda a: _minus(a, a).is_zero(),
    ))
    laws.add(Law(
        "antisymmetry",
        "a - b == -(b - a)",
        2,
        lambda a, b: _minus(a, b) == _negated(_minus(b, a)),
    ))
    return laws


def multiplication_laws(radix: int) -> LawSet:
    zero = BigNum.zero(radix)
    one = BigNum.one(radix)
    laws = LawSet(name="multiplication")
    laws.add(Law(
        "commutativity",
        "a * b == b * a",
        2,
        lambda a, b: _times(a, b) == _times(b, a),
    ))
    laws.add(Law(
        "identity",
        "a * 1 == a",
        1,
        lambda a: _times(a, one) == a,
    ))
    laws.add(Law(
        "zero",
        "a * 0 == 0",
        1,
        lambda a: _times(a, zero).is_zero(),
    ))
    laws.add(Law(
        "distributivity",
        "a * (b + c) == a * b + a * c",
        3,
        lambda a, b, c: _times(a, _plus(b, c)) == add(_times(a, b), _times(a, c)),
    ))
    return laws


def _division_identity(a: BigNum, b: BigNum) -> bool:
    x, y = _magnitude(a), _magnitude(b)
    rebuilt = add(multiply(divide(x.copy(), y), y), modulo(x.copy(), y))
    return rebuilt == x


def _quotient_remainder(a: BigNum, b: BigNum) -> bool:
    quotient, remainder = divide_with_remainder(a.copy(), b)
    return add(multiply(quotient, b), remainder) == a and (
        compare_magnitude(remainder, b) < 0
    )


def division_laws(radix: int) -> LawSet:
    one = BigNum.one(radix)
    laws = LawSet(name="division")
    laws.add(Law(
        "identity",
        "a / 1 == a",
        1,
        lambda a: divide(a.copy(), one) == a,
    ))
    laws.add(Law(
        "self",
        "a / a == 1 for a != 0",
        1,
        lambda a: divide(a.copy(), a) == one,
    ))
    laws.add(Law(
        "division_modulo_identity",
        "|a| / |b| * |b| + |a| % |b| == |a| for b != 0",
        2,
        _division_identity,
    ))
    laws.add(Law(
        "quotient_remainder",
        "q * b + r == a and |r| < |b| for b != 0",
        2,
        _quotient_remainder,
    ))
    return laws


def exponentiation_laws(radix: int) -> LawSet:
    zero = BigNum.zero(radix)
    one = BigNum.one(radix)
    two = convert_radix(BigNum.from_int(2), radix)
    laws = LawSet(name="exponentiation")
    laws.add(Law(
        "zero_exponent",
        "a ** 0 == 1",
        1,
        lambda a: exponentiate(a.copy(), zero) == one,
    ))
    laws.add(Law(
        "unit_exponent",
        "a ** 1 == a",
        1,
        lambda a: exponentiate(a.copy(), one) == a,
    ))
    laws.add(Law(
        "square",
        "a ** 2 == a * a",
        1,
        lambda a: exponentiate(a.copy(), two) == _times(a, a),
    ))
    return laws


def conversion_laws(radix: int) -> LawSet:
    laws = LawSet(name="conversion")
    for other in (MIN_RADIX, 7, 10, MAX_RADIX):
        if other == radix:
            continue
        laws.add(Law(
            f"round_trip_via_{other}",
            f"convert(convert(a, {other}), {radix}) == a",
            1,
            lambda a, other=other: convert_radix(convert_radix(a.copy(), other), radix) == a,
        ))
    return laws


def all_laws(radix: int) -> list[LawSet]:
    """Every law set for values written in ``radix``."""
    return [
        text_laws(radix),
        comparison_laws(radix),
        addition_laws(radix),
        subtraction_laws(radix),
        multiplication_laws(radix),
        division_laws(radix),
        exponentiation_laws(radix),
        conversion_laws(radix),
    ]
