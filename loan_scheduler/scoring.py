"""Priority scoring for outstanding loans.

The score blends five terms into a single float, higher meaning "repay
first":

- interest burden, from the annual rate and outstanding principal
- late-fee pressure relative to principal, scaled by urgency
- credit-standing impact
- urgency, a smooth (0, 1] decay over days until due
- an inflation adjustment for variable-rate loans

Loans due within ``short_term_days`` get a multiplicative boost. Settled
loans never get a numeric score; they carry ``LoanStatus.SETTLED`` and always
rank after every active loan.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from decimal import Decimal

from loan_scheduler.config import DEFAULT_WEIGHTS, SETTLED_EPSILON, ScoringWeights
from loan_scheduler.models import Loan, LoanStatus


@dataclass(frozen=True)
class PriorityScore:
    """Score of one loan together with its settlement status."""

    status: LoanStatus
    value: float | None = None

    @property
    def is_active(self) -> bool:
        return self.status == LoanStatus.ACTIVE

    def rank_key(self) -> tuple[int, float]:
        """Sort key placing active loans first, highest score first."""
        if not self.is_active:
            return (1, 0.0)
        return (0, -self.value)


SETTLED_SCORE = PriorityScore(status=LoanStatus.SETTLED)


def compute_urgency(days_until_due: int) -> float:
    """Urgency in (0, 1]; overdue loans saturate at 1.0."""
    if days_until_due <= 0:
        return 1.0
    return 1.0 / (1.0 + math.log1p(days_until_due))


def _clamp(value: float, lo: float, hi: float) -> float:
    return max(lo, min(value, hi))


def score_breakdown(
    loan: Loan,
    inflation_rate: float,
    weights: ScoringWeights = DEFAULT_WEIGHTS,
) -> dict[str, float]:
    """Compute the individual score terms for an active loan.

    Parameters
    ----------
    loan : Loan
        Loan to score. Its settlement status is not checked here.
    inflation_rate : float
        Process-wide inflation rate.
    weights : ScoringWeights
        Score coefficients.

    Returns
    -------
    dict[str, float]
        ``urgency``, ``interest_impact``, ``penalty_weight``,
        ``credit_impact``, ``inflation_adj``, ``boost`` and the final
        ``priority``.
    """
    principal = float(loan.principal)
    urgency = compute_urgency(loan.days_until_due)
    interest_impact = (loan.annual_rate / 100.0) * (principal / 1000.0)

    per_unit_penalty = _clamp(float(loan.late_fee) / max(1.0, principal), 0.0, weights.penalty_cap)
    penalty_weight = per_unit_penalty * weights.penalty_scale * urgency

    credit_impact = loan.credit_factor * 100.0

    inflation_adj = 0.0
    if loan.variable_rate:
        # Rising inflation lowers the priority of variable-rate loans
        inflation_adj = -inflation_rate * loan.inflation_sensitivity * (principal / 1000.0)

    priority = (
        interest_impact * weights.interest_weight
        + penalty_weight * weights.penalty_weight
        + credit_impact * weights.credit_weight
        + urgency * weights.urgency_weight
        + inflation_adj
    )

    boost = weights.short_term_boost if loan.days_until_due <= weights.short_term_days else 1.0

    return {
        "urgency": urgency,
        "interest_impact": interest_impact,
        "penalty_weight": penalty_weight,
        "credit_impact": credit_impact,
        "inflation_adj": inflation_adj,
        "boost": boost,
        "priority": priority * boost,
    }


def compute_priority(
    loan: Loan,
    inflation_rate: float,
    *,
    weights: ScoringWeights = DEFAULT_WEIGHTS,
    epsilon: Decimal = SETTLED_EPSILON,
) -> PriorityScore:
    """Score a loan for repayment priority.

    Pure and deterministic: the same loan state and inflation rate always
    produce the same score.

    Parameters
    ----------
    loan : Loan
        Loan to score.
    inflation_rate : float
        Process-wide inflation rate.
    weights : ScoringWeights
        Score coefficients.
    epsilon : Decimal
        Principal at or below which the loan counts as settled.

    Returns
    -------
    PriorityScore
        ``SETTLED`` with no value, or ``ACTIVE`` with the priority.
    """
    if loan.is_settled(epsilon):
        return SETTLED_SCORE
    return PriorityScore(
        status=LoanStatus.ACTIVE,
        value=score_breakdown(loan, inflation_rate, weights)["priority"],
    )
