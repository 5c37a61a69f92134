"""Request and response models for the HTTP calculator.

Numerals travel as text in their own radix, using the digit alphabet
``0-9A-F`` with an optional leading sign.  This module defines the data
models only -- no arithmetic.
"""
from __future__ import annotations

from enum import Enum
from typing import Any

from pydantic import BaseModel, Field, field_validator

from bignum import MAX_RADIX, MIN_RADIX

NUMERAL_PATTERN = r"^[+-]?[0-9A-F]+$"
MAX_NUMERAL_LENGTH = 4096


def _numeral_field(description: str) -> Any:
    return Field(
        ...,
        min_length=1,
        max_length=MAX_NUMERAL_LENGTH,
        pattern=NUMERAL_PATTERN,
        description=description,
    )


def _radix_field(description: str = "Radix in [2, 16]") -> Any:
    return Field(..., ge=MIN_RADIX, le=MAX_RADIX, description=description)


# ---------------------------------------------------------------------------
# Operators
# ---------------------------------------------------------------------------

class Operator(str, Enum):
    ADD = "+"
    SUBTRACT = "-"
    MULTIPLY = "*"
    DIVIDE = "/"
    EXPONENTIATE = "^"
    MODULO = "%"


# ---------------------------------------------------------------------------
# Requests
# ---------------------------------------------------------------------------

class OperationRequest(BaseModel):
    """``left <operator> right`` with both operands written in ``radix``."""

    operator: Operator
    radix: int = _radix_field()
    left: str = _numeral_field("Left operand, e.g. '-1F'")
    right: str = _numeral_field("Right operand")


class ConversionRequest(BaseModel):
    value: str = _numeral_field("Numeral written in from_radix")
    from_radix: int = _radix_field("Radix the value is written in")
    to_radix: int = _radix_field("Radix to convert to")


class ComparisonRequest(BaseModel):
    radix: int = _radix_field()
    left: str = _numeral_field("Left operand")
    right: str = _numeral_field("Right operand")


class BatchRequest(BaseModel):
    """A whole batch job as text, one record per line."""

    text: str = Field(..., max_length=1_000_000)

    @field_validator("text")
    @classmethod
    def text_not_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("Batch text must not be blank")
        return v


# ---------------------------------------------------------------------------
# Responses
# ---------------------------------------------------------------------------

class NumberResponse(BaseModel):
    value: str
    radix: int


class ComparisonResponse(BaseModel):
    ordering: int = Field(..., ge=-1, le=1)
    magnitude_ordering: int = Field(..., ge=-1, le=1)


class BatchResponse(BaseModel):
    output: str
    lines: int
    results: int
    errors: int


class ErrorResponse(BaseModel):
    detail: str
