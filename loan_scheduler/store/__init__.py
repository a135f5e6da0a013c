"""In-memory loan storage."""

from loan_scheduler.store.registry import LoanRegistry

__all__ = ["LoanRegistry"]
