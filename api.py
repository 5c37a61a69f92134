"""FastAPI REST endpoints for the arbitrary-precision calculator.

Routes
------
POST   /bignum/evaluate    Apply one binary operator to two numerals
POST   /bignum/convert     Re-express a numeral in another radix
POST   /bignum/compare     Signed and magnitude ordering of two numerals
POST   /bignum/batch       Run a whole batch job given as text

A numeral that cannot be read answers 422, division by zero and domain
errors answer 400, and a value past the digit limit answers 413.
"""
from __future__ import annotations

from fastapi import APIRouter, HTTPException

from arithmetic import convert_radix
from batch import BatchCalculator, BatchSettings, Operation, apply_operation
from bignum import BigNum, compare, compare_magnitude
from errors import DivisionByZero, DomainError, InvalidArgument, ResourceExhausted
from models import (
    BatchRequest,
    BatchResponse,
    ComparisonRequest,
    ComparisonResponse,
    ConversionRequest,
    ErrorResponse,
    NumberResponse,
    OperationRequest,
)

router = APIRouter(prefix="/bignum", tags=["bignum"])

# Batch settings are injected by the app factory (see app.py).
_settings: BatchSettings | None = None


def set_settings(settings: BatchSettings) -> None:
    """Inject the batch settings. Called once at app startup."""
    global _settings
    _settings = settings


def get_settings() -> BatchSettings:
    assert _settings is not None, "Settings not initialized"
    return _settings


# ---------------------------------------------------------------------------
# Error helpers
# ---------------------------------------------------------------------------

def _invalid_input(e: InvalidArgument) -> HTTPException:
    return HTTPException(status_code=422, detail=str(e))


def _arithmetic_error(e: Exception) -> HTTPException:
    return HTTPException(status_code=400, detail=str(e))


def _too_large(e: ResourceExhausted) -> HTTPException:
    return HTTPException(status_code=413, detail=str(e))


def _parse(text: str, radix: int) -> BigNum:
    return BigNum.parse(text, radix, get_settings().max_digits)


_TOO_LARGE = {413: {"model": ErrorResponse, "description": "Value exceeds the digit limit"}}
_ARITHMETIC = {400: {"model": ErrorResponse, "description": "Division by zero or domain error"}}


def _number(value: BigNum) -> NumberResponse:
    return NumberResponse(value=value.to_text(), radix=value.radix)


# ---------------------------------------------------------------------------
# Endpoints
# ---------------------------------------------------------------------------

@router.post(
    "/evaluate",
    response_model=NumberResponse,
    responses={**_ARITHMETIC, **_TOO_LARGE},
)
def evaluate(payload: OperationRequest) -> NumberResponse:
    """Compute ``left <operator> right`` in the request radix."""
    try:
        left = _parse(payload.left, payload.radix)
        right = _parse(payload.right, payload.radix)
        result = apply_operation(Operation(payload.operator.value), left, right)
    except InvalidArgument as e:
        raise _invalid_input(e) from e
    except (DivisionByZero, DomainError) as e:
        raise _arithmetic_error(e) from e
    except ResourceExhausted as e:
        raise _too_large(e) from e
    return _number(result)


@router.post("/convert", response_model=NumberResponse, responses=_TOO_LARGE)
def convert(payload: ConversionRequest) -> NumberResponse:
    """Re-express a numeral in ``to_radix``."""
    try:
        value = _parse(payload.value, payload.from_radix)
        return _number(convert_radix(value, payload.to_radix))
    except InvalidArgument as e:
        raise _invalid_input(e) from e
    except ResourceExhausted as e:
        raise _too_large(e) from e


@router.post("/compare", response_model=ComparisonResponse, responses=_TOO_LARGE)
def compare_numbers(payload: ComparisonRequest) -> ComparisonResponse:
    """Order two numerals written in the same radix."""
    try:
        left = _parse(payload.left, payload.radix)
        right = _parse(payload.right, payload.radix)
    except InvalidArgument as e:
        raise _invalid_input(e) from e
    except ResourceExhausted as e:
        raise _too_large(e) from e
    return ComparisonResponse(
        ordering=compare(left, right),
        magnitude_ordering=compare_magnitude(left, right),
    )


@router.post("/batch", response_model=BatchResponse)
def run_batch(payload: BatchRequest) -> BatchResponse:
    """Run a batch job and return its full output text.

    Values past the digit limit are reported in the output as
    ``NUMBER_TOO_LARGE`` instead of failing the request.
    """
    calculator = BatchCalculator(get_settings())
    output = calculator.run_text(payload.text)
    summary = calculator.summary
    return BatchResponse(
        output=output,
        lines=summary.lines,
        results=summary.results,
        errors=summary.errors,
    )
