"""Domain models for the loan repayment scheduler."""

from loan_scheduler.models.enums import LoanKind, LoanStatus, OutcomeStatus
from loan_scheduler.models.loan import Loan, LoanTerms, to_money
from loan_scheduler.models.results import (
    AllocationResult,
    PaymentEvent,
    PriorityEntry,
    PriorityListing,
    TimeAdvanceResult,
)

__all__ = [
    "AllocationResult",
    "Loan",
    "LoanKind",
    "LoanStatus",
    "LoanTerms",
    "OutcomeStatus",
    "PaymentEvent",
    "PriorityEntry",
    "PriorityListing",
    "TimeAdvanceResult",
    "to_money",
]
