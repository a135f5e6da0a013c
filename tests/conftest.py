"""Pytest configuration and fixtures."""

from decimal import Decimal
from typing import Any, Callable

import pytest

from loan_scheduler.models import LoanTerms
from loan_scheduler.scheduler import AdaptiveScheduler


@pytest.fixture
def seed() -> int:
    """Fixed seed for reproducible tests."""
    return 42


@pytest.fixture
def make_terms() -> Callable[..., LoanTerms]:
    """Factory for loan terms with overridable defaults."""

    def _make(**overrides: Any) -> LoanTerms:
        fields: dict[str, Any] = {
            "name": "Test Loan",
            "principal": Decimal("1000"),
            "annual_rate": 10.0,
            "days_until_due": 20,
            "late_fee": Decimal("25"),
            "credit_factor": 0.3,
            "variable_rate": False,
            "inflation_sensitivity": 0.0,
        }
        fields.update(overrides)
        return LoanTerms(**fields)

    return _make


@pytest.fixture
def loan_a_terms() -> LoanTerms:
    """Short-dated loan with a meaningful late fee."""
    return LoanTerms(
        name="A",
        principal=Decimal("1000"),
        annual_rate=12.0,
        days_until_due=3,
        late_fee=Decimal("50"),
        credit_factor=0.2,
    )


@pytest.fixture
def loan_b_terms() -> LoanTerms:
    """Month-out loan with a small late fee."""
    return LoanTerms(
        name="B",
        principal=Decimal("500"),
        annual_rate=8.0,
        days_until_due=30,
        late_fee=Decimal("10"),
        credit_factor=0.1,
    )


@pytest.fixture
def scheduler() -> AdaptiveScheduler:
    """Fresh scheduler at 5% inflation."""
    return AdaptiveScheduler(inflation_rate=0.05)


@pytest.fixture
def ab_scheduler(
    scheduler: AdaptiveScheduler, loan_a_terms: LoanTerms, loan_b_terms: LoanTerms
) -> AdaptiveScheduler:
    """Scheduler holding loans A (id 1) and B (id 2)."""
    scheduler.add_terms(loan_a_terms)
    scheduler.add_terms(loan_b_terms)
    return scheduler
