"""Synthetic loan terms for demos, scenarios and benchmarks."""

import random
from decimal import Decimal
from typing import Iterator

from loan_scheduler.generators.base import BaseGenerator
from loan_scheduler.models import LoanKind, LoanTerms


class LoanTermsGenerator(BaseGenerator):
    """Generate realistic loan terms across common consumer loan kinds."""

    LOAN_KINDS = list(LoanKind)
    KIND_WEIGHTS = [0.30, 0.25, 0.20, 0.15, 0.10]

    # (principal range, annual rate % range, late fee range)
    PROFILES = {
        LoanKind.PERSONAL: ((20_000, 500_000), (10.5, 24.0), (300, 1_500)),
        LoanKind.CREDIT_CARD: ((5_000, 200_000), (30.0, 42.0), (500, 1_300)),
        LoanKind.VEHICLE: ((100_000, 1_500_000), (8.0, 14.0), (500, 2_500)),
        LoanKind.STUDENT: ((50_000, 1_000_000), (7.0, 12.0), (200, 1_000)),
        LoanKind.HOUSING: ((1_000_000, 10_000_000), (8.0, 10.5), (1_000, 5_000)),
    }

    # Credit cards and housing loans are the usual floating-rate products
    VARIABLE_RATE_PROBABILITY = {
        LoanKind.PERSONAL: 0.05,
        LoanKind.CREDIT_CARD: 0.60,
        LoanKind.VEHICLE: 0.20,
        LoanKind.STUDENT: 0.30,
        LoanKind.HOUSING: 0.70,
    }

    def generate(self, kind: LoanKind | None = None) -> LoanTerms:
        """Generate terms for one loan.

        Parameters
        ----------
        kind : LoanKind | None
            Loan kind; drawn from ``KIND_WEIGHTS`` when omitted.

        Returns
        -------
        LoanTerms
            Terms that pass ``LoanTerms.validate``.
        """
        if kind is None:
            kind = random.choices(self.LOAN_KINDS, weights=self.KIND_WEIGHTS, k=1)[0]

        (p_lo, p_hi), (r_lo, r_hi), (f_lo, f_hi) = self.PROFILES[kind]
        principal = Decimal(random.randint(p_lo // 100, p_hi // 100) * 100)
        variable_rate = random.random() < self.VARIABLE_RATE_PROBABILITY[kind]

        return LoanTerms(
            name=f"{self.fake.company()} {kind.value.replace('_', ' ').title()}",
            principal=principal,
            annual_rate=round(random.uniform(r_lo, r_hi), 2),
            days_until_due=random.randint(-10, 45),
            late_fee=Decimal(random.randint(f_lo // 50, f_hi // 50) * 50),
            credit_factor=round(random.uniform(0.05, 1.0), 2),
            variable_rate=variable_rate,
            inflation_sensitivity=round(random.uniform(0.1, 1.0), 2) if variable_rate else 0.0,
        )

    def generate_batch(self, count: int) -> Iterator[LoanTerms]:
        """Generate terms for ``count`` loans.

        Yields
        ------
        LoanTerms
            Generated loan terms.
        """
        for _ in range(count):
            yield self.generate()
