"""Repayment scenario: a generated portfolio paid down over several periods."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from decimal import Decimal

from loan_scheduler.config import SchedulerConfig
from loan_scheduler.generators import LoanTermsGenerator
from loan_scheduler.models import AllocationResult, OutcomeStatus, to_money
from loan_scheduler.scheduler import AdaptiveScheduler

logger = logging.getLogger(__name__)


@dataclass
class ScenarioReport:
    """What happened over a scenario run."""

    periods_run: int = 0
    allocations: list[AllocationResult] = field(default_factory=list)
    total_paid: Decimal = Decimal("0")
    total_leftover: Decimal = Decimal("0")
    settled_loans: int = 0
    outstanding_principal: Decimal = Decimal("0")


class RepaymentScenario:
    """Generate loans, then repeatedly pay a fixed budget and let time pass.

    Each period allocates ``budget_per_period`` and then advances the clock
    by ``days_per_period``. The run stops early once every loan is settled.
    """

    def __init__(
        self,
        num_loans: int = 10,
        budget_per_period: Decimal | int | float | str = 50_000,
        periods: int = 12,
        days_per_period: int = 30,
        seed: int | None = None,
        *,
        config: SchedulerConfig | None = None,
    ) -> None:
        """Initialize repayment scenario.

        Parameters
        ----------
        num_loans : int
            Number of loans to generate.
        budget_per_period : Decimal | int | float | str
            Cash allocated at the start of each period.
        periods : int
            Maximum number of periods to run.
        days_per_period : int
            Days advanced after each allocation.
        seed : int | None
            Random seed for reproducibility.
        config : SchedulerConfig | None
            Scheduler configuration.
        """
        self.num_loans = num_loans
        self.budget_per_period = to_money(budget_per_period)
        self.periods = periods
        self.days_per_period = days_per_period
        self.seed = seed

        self.scheduler = AdaptiveScheduler(config=config)
        self._loan_gen = LoanTermsGenerator(seed=seed)

    def generate(self) -> AdaptiveScheduler:
        """Populate the scheduler with generated loans."""
        logger.info("Generating %d loans (seed=%s)", self.num_loans, self.seed)
        for terms in self._loan_gen.generate_batch(self.num_loans):
            self.scheduler.add_terms(terms)
        return self.scheduler

    def run(self) -> ScenarioReport:
        """Run the repayment periods.

        Returns
        -------
        ScenarioReport
            Allocations made and the final state of the portfolio.
        """
        if self.scheduler.registry.is_empty():
            self.generate()

        report = ScenarioReport()
        for period in range(1, self.periods + 1):
            if not self.scheduler.registry.active_loans():
                logger.info("All loans settled after %d periods", report.periods_run)
                break

            result = self.scheduler.allocate_payment(self.budget_per_period)
            report.allocations.append(result)
            if result.status == OutcomeStatus.OK:
                report.total_paid += result.total_paid
                report.total_leftover += result.leftover

            self.scheduler.advance_days(self.days_per_period)
            report.periods_run = period

        summary = self.scheduler.registry.summary()
        report.settled_loans = summary["settled"]
        report.outstanding_principal = summary["outstanding_principal"]
        logger.info(
            "Scenario finished: periods=%d paid=%s settled=%d outstanding=%s",
            report.periods_run,
            report.total_paid,
            report.settled_loans,
            report.outstanding_principal,
        )
        return report
