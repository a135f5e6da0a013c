"""Result records returned by scheduler operations."""

from dataclasses import dataclass, field
from decimal import Decimal

from loan_scheduler.models.enums import LoanStatus, OutcomeStatus


@dataclass(frozen=True)
class PriorityEntry:
    """One row of a priority listing.

    ``score`` is ``None`` for settled loans; they carry no numeric priority.
    """

    loan_id: int
    name: str
    score: float | None
    principal: Decimal
    days_until_due: int
    status: LoanStatus


@dataclass(frozen=True)
class PriorityListing:
    """Loans ordered from highest to lowest repayment priority."""

    status: OutcomeStatus
    entries: list[PriorityEntry] = field(default_factory=list)

    @property
    def active_entries(self) -> list[PriorityEntry]:
        return [e for e in self.entries if e.status == LoanStatus.ACTIVE]

    @property
    def all_settled(self) -> bool:
        """True when loans exist but none is outstanding."""
        return self.status == OutcomeStatus.OK and not self.active_entries


@dataclass(frozen=True)
class PaymentEvent:
    """Cash applied to a single loan during an allocation."""

    loan_id: int
    name: str
    amount: Decimal
    remaining_principal: Decimal


@dataclass(frozen=True)
class AllocationResult:
    """Outcome of distributing one payment across the registry."""

    status: OutcomeStatus
    requested: Decimal
    payments: list[PaymentEvent] = field(default_factory=list)
    leftover: Decimal = Decimal("0")

    @property
    def total_paid(self) -> Decimal:
        return sum((p.amount for p in self.payments), Decimal("0"))


@dataclass(frozen=True)
class TimeAdvanceResult:
    """Outcome of moving the simulated clock."""

    status: OutcomeStatus
    delta: int
    listing: PriorityListing
