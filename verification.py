"""Law verifier.

Runs every law from ``laws.py`` against sampled operands in a given radix
and reports the first counterexample of each law.

Flow:
  1. Build edge-case operands (0, 1, -1, radix - 1, ...) for the radix.
  2. Fill up with seeded random operands.
  3. Check each law on every combination of the right arity.
  4. Collect a VerificationReport per law set; ``ensure`` raises on
     the first failing set.

Division by zero and domain errors raised inside a predicate are
expected for some inputs and do not count as violations.
"""
from __future__ import annotations

import itertools
import random
from dataclasses import dataclass, field

from bignum import DIGIT_ALPHABET, BigNum, check_radix
from errors import DivisionByZero, DomainError
from laws import Law, LawSet, all_laws


@dataclass
class VerificationResult:
    law_name: str
    passed: bool
    counterexample: tuple[str, ...] | None = None
    tests_run: int = 0

    def __str__(self) -> str:
        if self.passed:
            return f"{self.law_name}: holds on {self.tests_run} cases"
        operands = ", ".join(self.counterexample or ())
        return f"{self.law_name}: broken by ({operands}) at case {self.tests_run}"


@dataclass
class VerificationReport:
    """Every law of one set, checked in one radix."""

    set_name: str
    radix: int
    results: list[VerificationResult] = field(default_factory=list)

    @property
    def failures(self) -> list[VerificationResult]:
        return [r for r in self.results if not r.passed]

    @property
    def passed(self) -> bool:
        return not self.failures

    def summary(self) -> str:
        holding = len(self.results) - len(self.failures)
        header = (
            f"{self.set_name} laws in base {self.radix}: "
            f"{holding} of {len(self.results)} hold"
        )
        return "\n".join([header] + [f"  {r}" for r in self.results])


class VerificationError(Exception):
    """An arithmetic law has a counterexample."""

    def __init__(self, report: VerificationReport):
        self.report = report
        super().__init__(report.summary())


# ---------------------------------------------------------------------------
# Operand generation
# ---------------------------------------------------------------------------

def format_numeral(value: int, radix: int) -> str:
    """Write a native integer as a numeral in ``radix``."""
    check_radix(radix)
    if value == 0:
        return "0"
    sign = "-" if value < 0 else ""
    value = abs(value)
    out = []
    while value:
        value, d = divmod(value, radix)
        out.append(DIGIT_ALPHABET[d])
    return sign + "".join(reversed(out))


def edge_values(radix: int) -> list[int]:
    return [0, 1, -1, radix - 1, -radix, radix * radix + 1]


# ---------------------------------------------------------------------------
# The verifier
# ---------------------------------------------------------------------------

class Verifier:
    """Checks the law catalogue on edge-case and random operands."""

    DEFAULT_SAMPLES = 64
    DEFAULT_LIMIT = 5_000

    def __init__(
        self,
        samples: int = DEFAULT_SAMPLES,
        limit: int = DEFAULT_LIMIT,
        seed: int = 0,
    ) -> None:
        self.samples = samples
        self.limit = limit
        self.seed = seed

    def verify(self, radix: int) -> list[VerificationReport]:
        """Verify every law set for ``radix``."""
        check_radix(radix)
        return [self.verify_set(laws, radix) for laws in all_laws(radix)]

    def ensure(self, radix: int) -> None:
        """Raise VerificationError unless every law holds in ``radix``."""
        for report in self.verify(radix):
            if not report.passed:
                raise VerificationError(report)

    def verify_set(self, laws: LawSet, radix: int) -> VerificationReport:
        report = VerificationReport(set_name=laws.name, radix=radix)
        for law in laws:
            report.results.append(self.verify_law(law, radix))
        return report

    def verify_law(self, law: Law, radix: int) -> VerificationResult:
        tests_run = 0
        for combo in self._operand_tuples(radix, law.arity):
            operands = [BigNum.parse(text, radix) for text in combo]
            tests_run += 1
            try:
                if not law.check(*operands):
                    return VerificationResult(
                        law_name=law.name,
                        passed=False,
                        counterexample=combo,
                        tests_run=tests_run,
                    )
            except (DivisionByZero, DomainError):
                pass
        return VerificationResult(law_name=law.name, passed=True, tests_run=tests_run)

    def _operand_tuples(self, radix: int, arity: int) -> list[tuple[str, ...]]:
        """Edge-case combinations first, then seeded random fill."""
        edges = [format_numeral(v, radix) for v in edge_values(radix)]
        tuples = list(itertools.product(edges, repeat=arity))[: self.samples // 2]

        rng = random.Random(f"{self.seed}:{radix}:{arity}")
        while len(tuples) < self.samples:
            tuples.append(tuple(
                format_numeral(rng.randint(-self.limit, self.limit), radix)
                for _ in range(arity)
            ))
        return tuples
