"""Line-oriented batch calculator.

Reads a plain-text job made of blocks.  A block starts with a two-token
header and is followed by one numeral per line::

    + 16            operator and radix
    FF
    1               memory = FF + 1
    8 2             base change: from radix 8 to radix 2
    17              converted once

Every input line is echoed to the output, tagged ``[err: NAME]`` when it
was rejected.  When a block closes (next header or end of input) its
result, or the reason there is none, is written followed by a separator
line.  A bad line never aborts the run.

A block with neither operands nor errors reports ``INVALID_NUMBER_OF_ARG``
whenever it closes, including when the next header closes it.  An
operator header with a bad radix is ``INVALID_BASE``, not
``INVALID_OPERATOR``.

With ``BatchSettings.max_digits`` set, a numeral or result longer than
that many digits is rejected with ``NUMBER_TOO_LARGE``.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum, auto
from pathlib import Path
from typing import Callable, Iterable, Iterator

from arithmetic import add, convert_radix, divide, exponentiate, modulo, multiply, subtract
from bignum import MAX_RADIX, MIN_RADIX, BigNum
from errors import DivisionByZero, DomainError, InvalidArgument, ResourceExhausted

logger = logging.getLogger(__name__)

SEPARATOR = "-" * 62


class Operation(Enum):
    ADD = "+"
    SUBTRACT = "-"
    MULTIPLY = "*"
    DIVIDE = "/"
    EXPONENTIATE = "^"
    MODULO = "%"
    CHANGE_BASE = "base"


class ErrorFlag(Enum):
    INVALID_OPERATOR = auto()
    INVALID_BASE = auto()
    INVALID_NUMBER_OF_ARG = auto()
    INVALID_NUMBER = auto()
    DIVISION_BY_ZERO = auto()
    NUMBER_TOO_LARGE = auto()

    @property
    def tag(self) -> str:
        return f"[err: {self.name}] "


BINARY_OPERATIONS: dict[Operation, Callable[[BigNum, BigNum], BigNum]] = {
    Operation.ADD: add,
    Operation.SUBTRACT: subtract,
    Operation.MULTIPLY: multiply,
    Operation.DIVIDE: divide,
    Operation.EXPONENTIATE: exponentiate,
    Operation.MODULO: modulo,
}

_OPERATOR_SYMBOLS = {op.value: op for op in BINARY_OPERATIONS}


def operation_for(symbol: str) -> Operation | None:
    """Binary operation written as ``symbol``, if any."""
    return _OPERATOR_SYMBOLS.get(symbol)


def parse_radix(token: str) -> int | None:
    """Decimal radix token in [2, 16], or None."""
    if not (token.isascii() and token.isdigit()):
        return None
    radix = int(token)
    return radix if MIN_RADIX <= radix <= MAX_RADIX else None


def apply_operation(operation: Operation, left: BigNum, right: BigNum) -> BigNum:
    """Combine ``right`` into ``left`` with a binary operation."""
    return BINARY_OPERATIONS[operation](left, right)


# ---------------------------------------------------------------------------
# Settings and bookkeeping
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class BatchSettings:
    separator: str = SEPARATOR
    log_lines: bool = True
    # Most digits a value may have; None means unlimited.
    max_digits: int | None = None


@dataclass
class BatchSummary:
    lines: int = 0
    blocks: int = 0
    results: int = 0
    errors: int = 0

    def __str__(self) -> str:
        return (
            f"{self.lines} lines, {self.blocks} blocks, "
            f"{self.results} results, {self.errors} errors"
        )


@dataclass
class _Block:
    operation: Operation | None
    radix: int | None = None
    target: int | None = None
    memory: BigNum | None = None
    operands: int = 0
    ready: bool = False
    last_error: ErrorFlag | None = None


# ---------------------------------------------------------------------------
# The calculator
# ---------------------------------------------------------------------------

class BatchCalculator:
    """Drives the arithmetic core from a sequence of text lines."""

    def __init__(self, settings: BatchSettings | None = None) -> None:
        self.settings = settings or BatchSettings()
        self.summary = BatchSummary()

    # -- public entry points -----------------------------------------------

    def process(self, lines: Iterable[str]) -> Iterator[str]:
        """Yield output chunks for the given input lines."""
        self.summary = BatchSummary()
        block: _Block | None = None

        for raw in lines:
            tokens = raw.split()
            if not tokens:
                continue
            self.summary.lines += 1

            if len(tokens) == 2:
                if block is not None:
                    yield self._close(block)
                block, error = self._open_block(tokens)
                self.summary.blocks += 1
            elif len(tokens) == 1:
                error = self._take_operand(block, tokens[0])
            else:
                error = ErrorFlag.INVALID_NUMBER_OF_ARG

            if error is not None:
                self.summary.errors += 1
                if block is not None:
                    block.last_error = error
                logger.warning("Rejected line %r: %s", raw.rstrip("\n"), error.name)
            elif self.settings.log_lines:
                logger.debug("Processed line %r", raw.rstrip("\n"))

            yield self._echo(tokens, error)

        if block is not None:
            yield self._close(block)

        logger.info("Batch finished: %s", self.summary)

    def run_text(self, text: str) -> str:
        return "".join(self.process(text.splitlines()))

    def run_file(self, input_path: str | Path, output_path: str | Path) -> BatchSummary:
        """Process ``input_path`` and write the full output to ``output_path``."""
        with open(input_path, encoding="utf-8") as src, \
                open(output_path, "w", encoding="utf-8") as dst:
            for chunk in self.process(src):
                dst.write(chunk)
        return self.summary

    # -- line handling -------------------------------------------------------

    def _open_block(self, tokens: list[str]) -> tuple[_Block, ErrorFlag | None]:
        first, second = tokens

        operation = operation_for(first)
        if operation is not None:
            radix = parse_radix(second)
            if radix is None:
                return _Block(None), ErrorFlag.INVALID_BASE
            return _Block(operation, radix), None

        if first.isascii() and first.isdigit():
            source, target = parse_radix(first), parse_radix(second)
            if source is None or target is None:
                return _Block(None), ErrorFlag.INVALID_BASE
            return _Block(Operation.CHANGE_BASE, source, target), None

        return _Block(None), ErrorFlag.INVALID_OPERATOR

    def _take_operand(self, block: _Block | None, token: str) -> ErrorFlag | None:
        if block is None or block.operation is None:
            return ErrorFlag.INVALID_OPERATOR
        if block.operation is Operation.CHANGE_BASE and block.operands >= 1:
            return ErrorFlag.INVALID_NUMBER_OF_ARG

        try:
            number = BigNum.parse(token, block.radix, self.settings.max_digits)
            if block.operands == 0:
                if block.operation is Operation.CHANGE_BASE:
                    convert_radix(number, block.target)
            else:
                apply_operation(block.operation, block.memory, number)
        except InvalidArgument:
            return ErrorFlag.INVALID_NUMBER
        except DivisionByZero:
            return ErrorFlag.DIVISION_BY_ZERO
        except DomainError:
            return ErrorFlag.INVALID_NUMBER
        except ResourceExhausted:
            return ErrorFlag.NUMBER_TOO_LARGE

        if block.operands == 0:
            block.memory = number
        block.operands += 1
        block.ready = block.operands > 1 or block.operation is Operation.CHANGE_BASE
        return None

    # -- output --------------------------------------------------------------

    @staticmethod
    def _echo(tokens: list[str], error: ErrorFlag | None) -> str:
        line = "".join(f"{t} " for t in tokens)
        if error is not None:
            line += error.tag
        return line + "\n\n"

    def _close(self, block: _Block) -> str:
        separator = self.settings.separator
        if block.ready:
            self.summary.results += 1
            return f"{block.memory.to_text()}\n{separator}\n\n"

        if block.operands or block.last_error is None:
            flag = ErrorFlag.INVALID_NUMBER_OF_ARG
        else:
            flag = block.last_error
        self.summary.errors += 1
        return f"{flag.tag}\n\n{separator}\n\n"
