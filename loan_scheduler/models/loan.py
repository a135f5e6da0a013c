"""Loan models for the repayment scheduler."""

import math
from dataclasses import dataclass
from decimal import Decimal

from loan_scheduler.exceptions import InvalidLoanError
from loan_scheduler.models.enums import LoanStatus


def to_money(value: Decimal | int | float | str) -> Decimal:
    """Convert a user supplied amount to ``Decimal``.

    Floats go through ``str`` so ``0.1`` becomes ``Decimal("0.1")``.
    """
    if isinstance(value, Decimal):
        return value
    if isinstance(value, bool):
        raise InvalidLoanError(f"Not a monetary amount: {value!r}")
    try:
        return Decimal(str(value))
    except ArithmeticError as exc:
        raise InvalidLoanError(f"Not a monetary amount: {value!r}") from exc


def _scoreable(amount: Decimal) -> bool:
    # Scores are computed in float; amounts beyond its range would score as inf or nan
    return amount.is_finite() and math.isfinite(float(amount))


@dataclass
class LoanTerms:
    """Terms of a loan as supplied when it is added to the registry."""

    name: str
    principal: Decimal
    annual_rate: float  # Percent, e.g. 12.0 for 12%
    days_until_due: int
    late_fee: Decimal
    credit_factor: float = 0.0  # 0-1 impact on credit standing
    variable_rate: bool = False
    inflation_sensitivity: float = 0.0  # 0-1, only read for variable-rate loans

    def __post_init__(self) -> None:
        self.principal = to_money(self.principal)
        self.late_fee = to_money(self.late_fee)

    def validate(self) -> None:
        """Check the terms against the loan data model.

        Raises
        ------
        InvalidLoanError
            If any field is outside its allowed range.
        """
        if not self.name or not self.name.strip():
            raise InvalidLoanError("Loan name must not be blank")
        if not _scoreable(self.principal) or self.principal < 0:
            raise InvalidLoanError(f"Principal must be a non-negative finite amount, got {self.principal}")
        if not _scoreable(self.late_fee) or self.late_fee < 0:
            raise InvalidLoanError(f"Late fee must be a non-negative finite amount, got {self.late_fee}")
        if not math.isfinite(self.annual_rate) or self.annual_rate < 0:
            raise InvalidLoanError(f"Annual rate must be non-negative, got {self.annual_rate}")
        if isinstance(self.days_until_due, bool) or not isinstance(self.days_until_due, int):
            raise InvalidLoanError(f"Days until due must be an integer, got {self.days_until_due!r}")
        if not 0.0 <= self.credit_factor <= 1.0:
            raise InvalidLoanError(f"Credit factor must be in [0, 1], got {self.credit_factor}")
        if not 0.0 <= self.inflation_sensitivity <= 1.0:
            raise InvalidLoanError(
                f"Inflation sensitivity must be in [0, 1], got {self.inflation_sensitivity}"
            )


@dataclass
class Loan:
    """Outstanding loan record owned by the registry.

    Only ``principal`` and ``days_until_due`` change after creation, and only
    through :class:`loan_scheduler.store.LoanRegistry`.
    """

    loan_id: int
    name: str
    principal: Decimal
    annual_rate: float
    days_until_due: int
    late_fee: Decimal
    credit_factor: float = 0.0
    variable_rate: bool = False
    inflation_sensitivity: float = 0.0

    @classmethod
    def from_terms(cls, loan_id: int, terms: LoanTerms) -> "Loan":
        """Build a record from validated terms."""
        return cls(
            loan_id=loan_id,
            name=terms.name,
            principal=terms.principal,
            annual_rate=terms.annual_rate,
            days_until_due=terms.days_until_due,
            late_fee=terms.late_fee,
            credit_factor=terms.credit_factor,
            variable_rate=terms.variable_rate,
            inflation_sensitivity=terms.inflation_sensitivity,
        )

    def is_settled(self, epsilon: Decimal) -> bool:
        return self.principal <= epsilon

    def status(self, epsilon: Decimal) -> LoanStatus:
        return LoanStatus.SETTLED if self.is_settled(epsilon) else LoanStatus.ACTIVE
