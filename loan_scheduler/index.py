"""Priority ordering over the loans in a registry."""

from __future__ import annotations

import logging
from decimal import Decimal

from loan_scheduler.config import DEFAULT_WEIGHTS, ScoringWeights
from loan_scheduler.models import Loan, PriorityEntry
from loan_scheduler.scoring import PriorityScore, compute_priority
from loan_scheduler.store import LoanRegistry

logger = logging.getLogger(__name__)


class PriorityIndex:
    """Loan ids ordered by descending repayment priority.

    The index holds ids only and rescores the whole registry on every query,
    so it can never serve a stale view of a loan. Ties on equal scores are
    broken by ascending loan id.

    Parameters
    ----------
    registry : LoanRegistry
        Registry whose loans are ordered.
    inflation_rate : float
        Process-wide inflation rate passed to the scorer.
    weights : ScoringWeights
        Score coefficients.
    """

    def __init__(
        self,
        registry: LoanRegistry,
        inflation_rate: float,
        weights: ScoringWeights = DEFAULT_WEIGHTS,
    ) -> None:
        self.registry = registry
        self.inflation_rate = inflation_rate
        self.weights = weights
        self._order: list[int] = []
        self._scores: dict[int, PriorityScore] = {}

    @property
    def epsilon(self) -> Decimal:
        return self.registry.settled_epsilon

    def score(self, loan: Loan) -> PriorityScore:
        return compute_priority(loan, self.inflation_rate, weights=self.weights, epsilon=self.epsilon)

    def rebuild(self) -> list[int]:
        """Rescore every loan and return ids from highest to lowest priority."""
        self._scores = {loan.loan_id: self.score(loan) for loan in self.registry.records()}
        self._order = sorted(
            self._scores,
            key=lambda loan_id: (*self._scores[loan_id].rank_key(), loan_id),
        )
        logger.debug("Rebuilt priority index over %d loans", len(self._order))
        return list(self._order)

    def peek_top(self) -> Loan | None:
        """Return the highest-priority active loan, or ``None`` if none is left."""
        order = self.rebuild()
        if not order:
            return None
        top_id = order[0]
        if not self._scores[top_id].is_active:
            return None
        return self.registry.get(top_id)

    def snapshot_all(self) -> list[PriorityEntry]:
        """Every loan with its current score, highest priority first."""
        entries = []
        for loan_id in self.rebuild():
            loan = self.registry.get(loan_id)
            score = self._scores[loan_id]
            entries.append(
                PriorityEntry(
                    loan_id=loan_id,
                    name=loan.name,
                    score=score.value,
                    principal=loan.principal,
                    days_until_due=loan.days_until_due,
                    status=score.status,
                )
            )
        return entries
