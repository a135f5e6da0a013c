"""Console sink rendering scheduler results for the interactive menu."""

import json
from decimal import Decimal

from loan_scheduler.models import (
    AllocationResult,
    OutcomeStatus,
    PriorityListing,
    TimeAdvanceResult,
)
from loan_scheduler.sinks.serialization import to_dict

STATUS_MESSAGES = {
    OutcomeStatus.EMPTY_REGISTRY: "No loans available.",
    OutcomeStatus.INVALID_AMOUNT: "Invalid payment amount.",
    OutcomeStatus.NO_OP_DELTA: "No days simulated.",
}


class ConsoleSink:
    """Print listings, payments and status messages to stdout."""

    def __init__(self, format_type: str = "table", currency: str = "₹") -> None:
        """Initialize console sink.

        Parameters
        ----------
        format_type : str
            ``"table"`` for aligned human-readable output, ``"json"`` for one
            JSON document per result.
        currency : str
            Symbol printed before amounts in table mode.
        """
        self.format_type = format_type
        self.currency = currency
        self._counts: dict[str, int] = {}

    def money(self, amount: Decimal) -> str:
        return f"{self.currency}{amount:.2f}"

    def write_listing(self, listing: PriorityListing) -> None:
        """Print the priority table. Settled loans are not shown."""
        self._count("listing")
        if self.format_type == "json":
            self._print_json(listing)
            return

        if listing.status == OutcomeStatus.EMPTY_REGISTRY:
            print("\nNo loans to display.")
            return

        print("\n--- Current Loan Priorities ---")
        print(f"{'Loan Name':<22}{'Priority Score':<18}{'Principal':<15}{'Days Left':<12}")
        print("-" * 70)

        active = listing.active_entries
        for entry in active:
            print(
                f"{entry.name:<22}{entry.score:<18.2f}"
                f"{entry.principal:<15.2f}{entry.days_until_due:<12}"
            )

        if not active:
            print("All loans repaid or inactive.")

    def write_allocation(self, result: AllocationResult) -> None:
        """Print each payment step and any leftover cash."""
        self._count("allocation")
        if self.format_type == "json":
            self._print_json(result)
            return

        if result.status != OutcomeStatus.OK:
            self.write_status(result.status)
            return

        print(f"\nAllocating Payment of {self.money(result.requested)} ---")
        for payment in result.payments:
            print(
                f"Paid {self.money(payment.amount)} to {payment.name}"
                f" | Remaining Principal: {self.money(payment.remaining_principal)}"
            )
        if result.leftover > 0:
            print(f"Leftover cash: {self.money(result.leftover)}")

    def write_advance(self, result: TimeAdvanceResult) -> None:
        """Print the outcome of a time advance followed by the new listing."""
        self._count("advance")
        if self.format_type == "json":
            self._print_json(result)
            return

        if result.status != OutcomeStatus.OK:
            self.write_status(result.status)
            return

        print(f"\nSimulated {result.delta} days. Deadlines updated.")
        self.write_listing(result.listing)

    def write_status(self, status: OutcomeStatus) -> None:
        print(f"\n{STATUS_MESSAGES.get(status, status.value)}")

    def close(self) -> None:
        """Print how many results of each kind this session rendered."""
        if self.format_type == "json":
            print(json.dumps({"session": dict(self._counts)}))
            return

        print(f"\n{'='*40}")
        print("Session Summary")
        print("=" * 40)
        if not self._counts:
            print("  nothing rendered")
        for kind, count in self._counts.items():
            print(f"  {kind}: {count}")

    def _count(self, kind: str) -> None:
        self._counts[kind] = self._counts.get(kind, 0) + 1

    def _print_json(self, obj: object) -> None:
        print(json.dumps(to_dict(obj), ensure_ascii=False))
