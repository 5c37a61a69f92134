"""Whitebox tests for the arithmetic operations.

Every binary operation consumes its first operand and leaves the second
untouched, so most tests also check what happened to both arguments.
"""
from __future__ import annotations

import pytest

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
from bignum import BigNum, Sign, compare, compare_magnitude
from digit_buffer import DigitBuffer
from errors import (
    BaseMismatch,
    DivisionByZero,
    DomainError,
    InvalidArgument,
    InvalidExponent,
    ResourceExhausted,
)


# ---------------------------------------------------------------------------
# Addition / subtraction
# ---------------------------------------------------------------------------

class TestAdd:

    @pytest.mark.parametrize("a,b,expected", [
        ("0", "0", "0"),
        ("999", "1", "1000"),
        ("5", "-3", "2"),
        ("-5", "3", "-2"),
        ("3", "-5", "-2"),
        ("-3", "-5", "-8"),
        ("7", "-7", "0"),
        ("-7", "7", "0"),
        ("12345678901234567890", "98765432109876543210", "111111111011111111100"),
    ])
    def test_decimal(self, num, a, b, expected):
        assert add(num(a), num(b)).to_text() == expected

    def test_returns_first_operand(self, num):
        a, b = num("1"), num("2")
        assert add(a, b) is a
        assert a.to_text() == "3"
        assert b.to_text() == "2"

    def test_binary_carry_chain(self, num):
        assert add(num("1111", 2), num("1", 2)).to_text() == "10000"

    def test_hex(self, num):
        assert add(num("FF", 16), num("1", 16)).to_text() == "100"

    def test_self_aliasing(self, num):
        a = num("-45", 8)
        assert add(a, a).to_text() == "-112"

    def test_zero_result_is_positive(self, num):
        result = add(num("-15"), num("15"))
        assert result.sign is Sign.PLUS

    def test_base_mismatch_leaves_operands(self, num):
        a, b = num("11", 2), num("11", 3)
        with pytest.raises(BaseMismatch):
            add(a, b)
        assert a.to_text() == "11" and a.radix == 2
        assert b.to_text() == "11" and b.radix == 3


class TestSubtract:

    @pytest.mark.parametrize("a,b,expected", [
        ("5", "3", "2"),
        ("3", "5", "-2"),
        ("-5", "-3", "-2"),
        ("-3", "-5", "2"),
        ("5", "-3", "8"),
        ("-5", "3", "-8"),
        ("1000", "1", "999"),
        ("0", "42", "-42"),
    ])
    def test_decimal(self, num, a, b, expected):
        assert subtract(num(a), num(b)).to_text() == expected

    def test_subtrahend_sign_untouched(self, num):
        a, b = num("10"), num("-4")
        subtract(a, b)
        assert a.to_text() == "14"
        assert b.to_text() == "-4"
        assert b.sign is Sign.MINUS

    def test_self_aliasing(self, num):
        a = num("-ABC", 13)
        assert subtract(a, a).to_text() == "0"

    def test_base_nine_scenario(self, num):
        negative = convert_radix(num("-125"), 9)
        assert negative.to_text() == "-148"
        assert add(num("123", 9), negative).to_text() == "-25"


# ---------------------------------------------------------------------------
# Multiplication
# ---------------------------------------------------------------------------

class TestMultiply:

    @pytest.mark.parametrize("a,b,expected", [
        ("0", "123", "0"),
        ("123", "0", "0"),
        ("1", "-9", "-9"),
        ("-12", "12", "-144"),
        ("-12", "-12", "144"),
        ("999", "999", "998001"),
        ("123456789", "987654321", "121932631112635269"),
    ])
    def test_decimal(self, num, a, b, expected):
        assert multiply(num(a), num(b)).to_text() == expected

    def test_negative_times_zero_is_positive_zero(self, num):
        result = multiply(num("-5"), num("0"))
        assert result.to_text() == "0"
        assert result.sign is Sign.PLUS

    def test_hex(self, num):
        assert multiply(num("FF", 16), num("FF", 16)).to_text() == "FE01"

    def test_binary(self, num):
        assert multiply(num("101", 2), num("11", 2)).to_text() == "1111"

    def test_self_aliasing(self, num):
        a = num("-25")
        assert multiply(a, a).to_text() == "625"

    def test_right_operand_untouched(self, num):
        a, b = num("7"), num("-6")
        multiply(a, b)
        assert b.to_text() == "-6"


# ---------------------------------------------------------------------------
# Division / modulo
# ---------------------------------------------------------------------------

class TestDivide:

    @pytest.mark.parametrize("a,b,quotient,remainder", [
        ("7", "2", "3", "1"),
        ("-7", "2", "-3", "-1"),
        ("7", "-2", "-3", "1"),
        ("-7", "-2", "3", "-1"),
        ("6", "3", "2", "0"),
        ("2", "7", "0", "2"),
        ("0", "5", "0", "0"),
        ("1000000", "7", "142857", "1"),
    ])
    def test_truncates_toward_zero(self, num, a, b, quotient, remainder):
        q, r = divide_with_remainder(num(a), num(b))
        assert q.to_text() == quotient
        assert r.to_text() == remainder

    def test_divide_returns_quotient_in_place(self, num):
        a, b = num("100"), num("7")
        assert divide(a, b) is a
        assert a.to_text() == "14"
        assert b.to_text() == "7"

    def test_hex(self, num):
        assert divide(num("FE01", 16), num("FF", 16)).to_text() == "FF"

    def test_self_aliasing(self, num):
        a = num("-77", 8)
        assert divide(a, a).to_text() == "1"

    def test_division_by_zero_leaves_operands(self, num):
        a, b = num("-12"), num("0")
        with pytest.raises(DivisionByZero):
            divide(a, b)
        assert a.to_text() == "-12"
        assert b.to_text() == "0"

    def test_division_by_zero_is_zero_division_error(self, num):
        with pytest.raises(ZeroDivisionError):
            divide(num("1"), num("-0"))


class TestModulo:

    @pytest.mark.parametrize("a,b,expected", [
        ("17", "5", "2"),
        ("15", "5", "0"),
        ("3", "5", "3"),
        ("0", "5", "0"),
        ("123456789", "1000", "789"),
    ])
    def test_decimal(self, num, a, b, expected):
        assert modulo(num(a), num(b)).to_text() == expected

    def test_hex(self, num):
        assert modulo(num("FF", 16), num("10", 16)).to_text() == "F"

    def test_right_operand_untouched(self, num):
        a, b = num("17"), num("5")
        modulo(a, b)
        assert b.to_text() == "5"

    def test_self_aliasing(self, num):
        a = num("9")
        assert modulo(a, a).to_text() == "0"

    @pytest.mark.parametrize("a,b", [("-7", "2"), ("7", "-2"), ("-7", "-2")])
    def test_negative_operands_rejected(self, num, a, b):
        left, right = num(a), num(b)
        with pytest.raises(DomainError):
            modulo(left, right)
        assert left.to_text() == a
        assert right.to_text() == b

    def test_zero_divisor_checked_before_sign(self, num):
        with pytest.raises(DivisionByZero):
            modulo(num("-7"), num("0"))


# ---------------------------------------------------------------------------
# Exponentiation
# ---------------------------------------------------------------------------

class TestExponentiate:

    @pytest.mark.parametrize("a,b,expected", [
        ("3", "10", "59049"),
        ("2", "1", "2"),
        ("-2", "3", "-8"),
        ("-2", "4", "16"),
        ("0", "5", "0"),
        ("1", "1000", "1"),
        ("10", "20", "100000000000000000000"),
    ])
    def test_decimal(self, num, a, b, expected):
        assert exponentiate(num(a), num(b)).to_text() == expected

    @pytest.mark.parametrize("base", ["0", "7", "-7", "123456"])
    def test_zero_exponent_gives_one(self, num, base):
        result = exponentiate(num(base), num("0"))
        assert result.to_text() == "1"
        assert result.sign is Sign.PLUS

    def test_binary(self, num):
        assert exponentiate(num("10", 2), num("1010", 2)).to_text() == "10000000000"

    def test_hex(self, num):
        assert exponentiate(num("F", 16), num("2", 16)).to_text() == "E1"

    def test_exponent_untouched(self, num):
        a, b = num("5", 7), num("13", 7)
        exponentiate(a, b)
        assert b.to_text() == "13"
        assert b.radix == 7

    def test_self_aliasing(self, num):
        a = num("3")
        assert exponentiate(a, a).to_text() == "27"

    def test_negative_exponent_rejected(self, num):
        a, b = num("2"), num("-1")
        with pytest.raises(InvalidExponent):
            exponentiate(a, b)
        assert a.to_text() == "2"

    def test_invalid_exponent_is_domain_error(self, num):
        with pytest.raises(DomainError):
            exponentiate(num("2"), num("-3"))


# ---------------------------------------------------------------------------
# Base conversion
# ---------------------------------------------------------------------------

class TestConvertRadix:

    @pytest.mark.parametrize("text,source,target,expected", [
        ("540263", 7, 12, "46332"),
        ("540263", 7, 10, "93782"),
        ("FF", 16, 2, "11111111"),
        ("11111111", 2, 16, "FF"),
        ("-255", 10, 16, "-FF"),
        ("0", 3, 11, "0"),
        ("-1", 2, 5, "-1"),
        ("17", 8, 10, "15"),
    ])
    def test_conversions(self, num, text, source, target, expected):
        result = convert_radix(num(text, source), target)
        assert result.radix == target
        assert result.to_text() == expected

    def test_same_radix_is_identity(self, num):
        a = num("-1A", 11)
        assert convert_radix(a, 11) is a
        assert a.to_text() == "-1A"

    def test_converts_in_place(self, num):
        a = num("10", 2)
        assert convert_radix(a, 3) is a
        assert a.to_text() == "2"

    @pytest.mark.parametrize("target", [1, 17, 0])
    def test_invalid_target(self, num, target):
        a = num("12")
        with pytest.raises(InvalidArgument):
            convert_radix(a, target)
        assert a.to_text() == "12"
        assert a.radix == 10


# ---------------------------------------------------------------------------
# Comparison of arithmetic results
# ---------------------------------------------------------------------------

class TestCompareResults:

    def test_hex_difference(self, num):
        diff = subtract(num("FB", 16), num("FB", 16))
        assert compare(diff, num("0", 16)) == 0

    def test_magnitude_of_negated_sum(self, num):
        total = add(num("-FB", 16), num("0", 16))
        assert compare(total, num("FB", 16)) == -1
        assert compare_magnitude(total, num("FB", 16)) == 0


# ---------------------------------------------------------------------------
# Digit limit
# ---------------------------------------------------------------------------

def limited(text: str, radix: int = 10, max_digits: int = 4) -> BigNum:
    return BigNum.parse(text, radix, max_digits=max_digits)


class TestDigitLimit:

    def test_parse_rejects_long_numeral(self):
        with pytest.raises(ResourceExhausted):
            limited("12345")

    def test_assign_keeps_limit(self):
        n = limited("1")
        with pytest.raises(ResourceExhausted):
            n.assign("FFFFF", 16)
        n.assign("FFFF", 16)
        assert n.max_digits == 4

    def test_multiply_result_keeps_limit(self, num):
        a = BigNum(Sign.PLUS, DigitBuffer([9, 9], max_capacity=4), 10)
        multiply(a, num("1"))
        assert a.to_text() == "99"
        assert a.max_digits == 4

    def test_multiply_past_limit(self, num):
        a, b = limited("99"), num("9999")
        with pytest.raises(ResourceExhausted):
            multiply(a, b)
        assert a.to_text() == "99"
        assert b.to_text() == "9999"

    def test_multiply_up_to_limit(self, num):
        assert multiply(limited("99"), num("99")).to_text() == "9801"

    def test_add_past_limit(self, num):
        a = limited("9999")
        with pytest.raises(ResourceExhausted):
            add(a, num("1"))
        assert a.to_text() == "9999"

    def test_subtract_keeps_limit(self, num):
        a = subtract(limited("100"), num("1"))
        assert a.to_text() == "99"
        assert a.max_digits == 4

    def test_subtract_past_limit(self, num):
        a = limited("5")
        with pytest.raises(ResourceExhausted):
            subtract(a, num("-99000"))
        assert a.to_text() == "5"

    def test_divide_results_keep_limit(self, num):
        q, r = divide_with_remainder(limited("1000"), num("7"))
        assert (q.to_text(), r.to_text()) == ("142", "6")
        assert q.max_digits == 4
        assert r.max_digits == 4

    def test_divide_by_long_divisor(self, num):
        q, r = divide_with_remainder(limited("1234"), num("123456789"))
        assert q.to_text() == "0"
        assert r.to_text() == "1234"

    def test_modulo_keeps_limit(self, num):
        assert modulo(limited("9999"), num("10")).max_digits == 4

    def test_exponentiate_past_limit(self, num):
        a, b = limited("2", max_digits=64), num("99999")
        with pytest.raises(ResourceExhausted):
            exponentiate(a, b)
        assert a.to_text() == "2"
        assert b.to_text() == "99999"

    def test_exponentiate_up_to_limit(self, num):
        result = exponentiate(limited("2", max_digits=5), num("16"))
        assert result.to_text() == "65536"
        assert result.max_digits == 5

    def test_huge_exponent_of_one(self, num):
        exponent = "1" + "0" * 30
        assert exponentiate(limited("1", max_digits=1), num(exponent)).to_text() == "1"

    def test_convert_to_binary_past_limit(self):
        a = limited("FFFF", 16, max_digits=8)
        with pytest.raises(ResourceExhausted):
            convert_radix(a, 2)
        assert a.to_text() == "FFFF"
        assert a.radix == 16

    def test_convert_to_decimal_past_limit(self):
        a = limited("FFFFF", 16, max_digits=5)
        with pytest.raises(ResourceExhausted):
            convert_radix(a, 10)
        assert a.radix == 16

    def test_convert_keeps_limit(self):
        a = convert_radix(limited("FF", 16, max_digits=8), 2)
        assert a.to_text() == "11111111"
        assert a.max_digits == 8
