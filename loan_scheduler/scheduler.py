"""Adaptive loan repayment scheduler."""

from __future__ import annotations

from dataclasses import replace
from decimal import Decimal

from loan_scheduler.allocator import PaymentAllocator
from loan_scheduler.config import SchedulerConfig
from loan_scheduler.index import PriorityIndex
from loan_scheduler.models import (
    AllocationResult,
    LoanTerms,
    OutcomeStatus,
    PriorityListing,
    TimeAdvanceResult,
)
from loan_scheduler.simulator import TimeSimulator
from loan_scheduler.store import LoanRegistry


class AdaptiveScheduler:
    """Prioritize loans and route payments to them.

    Owns one registry and the components that read or mutate it. Every
    operation runs to completion before returning; priorities are rebuilt
    from the current registry state on each query.

    Parameters
    ----------
    inflation_rate : float | None
        Process-wide inflation rate. Overrides ``config.inflation_rate``
        when given.
    config : SchedulerConfig | None
        Scheduler configuration. Defaults are used when omitted.
    """

    def __init__(
        self,
        inflation_rate: float | None = None,
        *,
        config: SchedulerConfig | None = None,
    ) -> None:
        self.config = config or SchedulerConfig()
        if inflation_rate is not None:
            self.config = replace(self.config, inflation_rate=inflation_rate)
        self.config.validate()

        self._inflation_rate = self.config.inflation_rate
        self.registry = LoanRegistry(settled_epsilon=self.config.settled_epsilon)
        self.index = PriorityIndex(self.registry, self._inflation_rate, self.config.weights)
        self.allocator = PaymentAllocator(self.registry, self.index)
        self.simulator = TimeSimulator(self.registry)

    @property
    def inflation_rate(self) -> float:
        """Inflation rate fixed at construction."""
        return self._inflation_rate

    def add_loan(
        self,
        name: str,
        principal: Decimal | int | float | str,
        annual_rate: float,
        days_until_due: int,
        late_fee: Decimal | int | float | str,
        credit_factor: float = 0.0,
        variable_rate: bool = False,
        inflation_sensitivity: float = 0.0,
    ) -> int:
        """Add a loan and return its id."""
        return self.add_terms(
            LoanTerms(
                name=name,
                principal=principal,
                annual_rate=annual_rate,
                days_until_due=days_until_due,
                late_fee=late_fee,
                credit_factor=credit_factor,
                variable_rate=variable_rate,
                inflation_sensitivity=inflation_sensitivity,
            )
        )

    def add_terms(self, terms: LoanTerms) -> int:
        return self.registry.add(terms)

    def list_priorities(self) -> PriorityListing:
        """Current loans ordered by priority.

        An empty registry is reported as ``EMPTY_REGISTRY``. A registry whose
        loans are all settled is ``OK`` with no active entries.
        """
        if self.registry.is_empty():
            return PriorityListing(status=OutcomeStatus.EMPTY_REGISTRY)
        return PriorityListing(status=OutcomeStatus.OK, entries=self.index.snapshot_all())

    def allocate_payment(self, amount: Decimal | int | float | str) -> AllocationResult:
        return self.allocator.allocate(amount)

    def advance_days(self, delta: int) -> TimeAdvanceResult:
        """Advance the clock and return the reordered listing."""
        status = self.simulator.advance(delta)
        return TimeAdvanceResult(status=status, delta=delta, listing=self.list_priorities())
