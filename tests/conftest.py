"""Shared fixtures for the bignum tests."""
from __future__ import annotations

from pathlib import Path
from typing import Callable

import pytest

from batch import BatchCalculator
from bignum import BigNum


@pytest.fixture
def num() -> Callable[..., BigNum]:
    """Shorthand parser: ``num("-1F", 16)``; radix defaults to decimal."""
    def _num(text: str, radix: int = 10) -> BigNum:
        return BigNum.parse(text, radix)
    return _num


@pytest.fixture
def calculator() -> BatchCalculator:
    return BatchCalculator()


@pytest.fixture
def job_file(tmp_path: Path) -> Callable[[str], Path]:
    """Write a batch job to a temporary file and return its path."""
    def _write(text: str, name: str = "jobs.txt") -> Path:
        path = tmp_path / name
        path.write_text(text, encoding="utf-8")
        return path
    return _write
