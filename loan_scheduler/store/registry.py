"""In-memory loan registry, the single owner of loan records."""

import logging
from dataclasses import dataclass, field
from decimal import Decimal

from loan_scheduler.config import SETTLED_EPSILON
from loan_scheduler.exceptions import InvalidLoanError, LoanNotFoundError
from loan_scheduler.logging import log_fields
from loan_scheduler.models import Loan, LoanTerms

logger = logging.getLogger(__name__)


@dataclass
class LoanRegistry:
    """Authoritative mapping from loan id to loan record.

    Records are never removed. A repaid loan stays in the registry with a
    principal at or below ``settled_epsilon``.
    """

    settled_epsilon: Decimal = SETTLED_EPSILON
    loans: dict[int, Loan] = field(default_factory=dict)
    _next_id: int = field(init=False, default=1)

    def __post_init__(self) -> None:
        if self.loans:
            self._next_id = max(self.loans) + 1

    def add(self, terms: LoanTerms) -> int:
        """Add a loan to the registry.

        Parameters
        ----------
        terms : LoanTerms
            Terms of the new loan.

        Returns
        -------
        int
            Sequential id assigned to the loan.

        Raises
        ------
        InvalidLoanError
            If the terms fail validation.
        """
        terms.validate()

        loan_id = self._next_id
        self._next_id += 1
        self.loans[loan_id] = Loan.from_terms(loan_id, terms)

        logger.info(
            "Added loan %d (%s): principal=%s rate=%.2f%% due_in=%d",
            loan_id,
            terms.name,
            terms.principal,
            terms.annual_rate,
            terms.days_until_due,
            extra=log_fields(loan_id=loan_id, principal=terms.principal, days_until_due=terms.days_until_due),
        )
        return loan_id

    def get(self, loan_id: int) -> Loan:
        """Get a loan by id."""
        try:
            return self.loans[loan_id]
        except KeyError:
            raise LoanNotFoundError(f"Loan {loan_id} not found") from None

    def apply_principal(self, loan_id: int, new_principal: Decimal) -> None:
        """Overwrite the outstanding principal of a loan.

        Raises
        ------
        LoanNotFoundError
            If no loan has this id.
        InvalidLoanError
            If the new principal is negative.
        """
        loan = self.get(loan_id)
        if new_principal < 0:
            raise InvalidLoanError(f"Principal of loan {loan_id} cannot go negative: {new_principal}")
        loan.principal = new_principal

    def shift_due_dates(self, delta: int) -> None:
        """Move every due date ``delta`` days closer (negative pushes it out)."""
        for loan in self.loans.values():
            loan.days_until_due -= delta

    # Query methods
    def records(self) -> list[Loan]:
        """All loans in insertion order."""
        return list(self.loans.values())

    def active_loans(self) -> list[Loan]:
        return [loan for loan in self.loans.values() if not loan.is_settled(self.settled_epsilon)]

    def is_empty(self) -> bool:
        return not self.loans

    def outstanding_principal(self) -> Decimal:
        return sum((loan.principal for loan in self.loans.values()), Decimal("0"))

    def summary(self) -> dict[str, int | Decimal]:
        """Return counts and outstanding principal."""
        active = len(self.active_loans())
        return {
            "loans": len(self.loans),
            "active": active,
            "settled": len(self.loans) - active,
            "outstanding_principal": self.outstanding_principal(),
        }

    def __len__(self) -> int:
        return len(self.loans)

    def __contains__(self, loan_id: object) -> bool:
        return loan_id in self.loans
