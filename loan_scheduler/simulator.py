"""Simulated passage of time for loan due dates."""

import logging

from loan_scheduler.logging import log_fields
from loan_scheduler.models import OutcomeStatus
from loan_scheduler.store import LoanRegistry

logger = logging.getLogger(__name__)


class TimeSimulator:
    """Advance every loan's due-date counter by the same number of days."""

    def __init__(self, registry: LoanRegistry) -> None:
        self.registry = registry

    def advance(self, delta: int) -> OutcomeStatus:
        """Move the clock ``delta`` days forward.

        A negative ``delta`` pushes due dates out. There is no floor on
        ``days_until_due``; overdue loans keep counting down.
        """
        if delta == 0:
            logger.warning("No days simulated")
            return OutcomeStatus.NO_OP_DELTA

        self.registry.shift_due_dates(delta)
        logger.info(
            "Simulated %d days across %d loans",
            delta,
            len(self.registry),
            extra=log_fields(delta=delta, loans=len(self.registry)),
        )
        return OutcomeStatus.OK
