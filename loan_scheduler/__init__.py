"""Adaptive loan repayment scheduler.

Common imports:
    from loan_scheduler import AdaptiveScheduler, LoanTerms
"""

from loan_scheduler.config import SchedulerConfig, ScoringWeights
from loan_scheduler.models import (
    AllocationResult,
    Loan,
    LoanStatus,
    LoanTerms,
    OutcomeStatus,
    PaymentEvent,
    PriorityEntry,
    PriorityListing,
    TimeAdvanceResult,
)
from loan_scheduler.scheduler import AdaptiveScheduler
from loan_scheduler.scoring import PriorityScore, compute_priority, compute_urgency

__version__ = "0.1.0"

__all__ = [
    "AdaptiveScheduler",
    "AllocationResult",
    "Loan",
    "LoanStatus",
    "LoanTerms",
    "OutcomeStatus",
    "PaymentEvent",
    "PriorityEntry",
    "PriorityListing",
    "PriorityScore",
    "SchedulerConfig",
    "ScoringWeights",
    "TimeAdvanceResult",
    "__version__",
    "compute_priority",
    "compute_urgency",
]
