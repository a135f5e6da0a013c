"""Greedy allocation of a payment across loans by priority."""

import logging
from decimal import Decimal

from loan_scheduler.index import PriorityIndex
from loan_scheduler.logging import log_fields
from loan_scheduler.models import AllocationResult, OutcomeStatus, PaymentEvent, to_money
from loan_scheduler.scoring import score_breakdown
from loan_scheduler.store import LoanRegistry

logger = logging.getLogger(__name__)


class PaymentAllocator:
    """Spend a payment on the highest-priority loan, one step at a time.

    After each step the paid loan is rescored, so a partial payment can
    demote it below another loan before the next step picks a target.
    """

    def __init__(self, registry: LoanRegistry, index: PriorityIndex) -> None:
        self.registry = registry
        self.index = index

    def allocate(self, amount: Decimal | int | float | str) -> AllocationResult:
        """Distribute ``amount`` over the registry.

        Parameters
        ----------
        amount : Decimal | int | float | str
            Cash available for repayment.

        Returns
        -------
        AllocationResult
            Payment events in the order they were applied and the unspent
            leftover. ``sum(payments) + leftover == requested`` always holds.
            With an empty registry or a non-positive amount the status says
            so and nothing is paid.
        """
        requested = to_money(amount)

        if self.registry.is_empty():
            logger.warning("No loans available for repayment", extra=log_fields(requested=requested))
            return AllocationResult(status=OutcomeStatus.EMPTY_REGISTRY, requested=requested, leftover=requested)

        if not requested.is_finite() or requested <= 0:
            logger.warning("Invalid payment amount: %s", requested, extra=log_fields(requested=requested))
            return AllocationResult(status=OutcomeStatus.INVALID_AMOUNT, requested=requested, leftover=requested)

        remaining = requested
        payments: list[PaymentEvent] = []

        while remaining > 0:
            loan = self.index.peek_top()
            if loan is None:
                break

            if logger.isEnabledFor(logging.DEBUG):
                logger.debug(
                    "Top loan %d score terms: %s",
                    loan.loan_id,
                    score_breakdown(loan, self.index.inflation_rate, self.index.weights),
                )

            pay = min(remaining, loan.principal)
            new_principal = loan.principal - pay
            self.registry.apply_principal(loan.loan_id, new_principal)
            remaining -= pay

            payments.append(
                PaymentEvent(
                    loan_id=loan.loan_id,
                    name=loan.name,
                    amount=pay,
                    remaining_principal=new_principal,
                )
            )
            logger.debug(
                "Paid %s to loan %d (%s), remaining principal %s",
                pay,
                loan.loan_id,
                loan.name,
                new_principal,
                extra=log_fields(loan_id=loan.loan_id, amount=pay, remaining_principal=new_principal),
            )

        result = AllocationResult(
            status=OutcomeStatus.OK,
            requested=requested,
            payments=payments,
            leftover=remaining,
        )
        logger.info(
            "Allocated %s across %d payments, leftover %s",
            result.total_paid,
            len(payments),
            remaining,
            extra=log_fields(
                requested=requested,
                paid=result.total_paid,
                leftover=remaining,
                paid_loan_ids=[p.loan_id for p in payments],
            ),
        )
        return result
