"""Custom exception hierarchy for loan-scheduler.

Expected operational outcomes (empty registry, non-positive payment, zero-day
advance) are reported through :class:`loan_scheduler.models.OutcomeStatus`
and are never raised. The exceptions below signal invalid input or misuse.
"""


class LoanSchedulerError(Exception):
    """Base exception for all loan-scheduler errors."""


class LoanNotFoundError(LoanSchedulerError):
    """Raised when a referenced loan id does not exist in the registry."""


class InvalidLoanError(LoanSchedulerError):
    """Raised when loan terms or a principal update violate the data model."""


class ConfigurationError(LoanSchedulerError):
    """Raised when configuration is invalid or missing."""
