"""Synthetic loan generators."""

from loan_scheduler.generators.loan import LoanTermsGenerator

__all__ = ["LoanTermsGenerator"]
