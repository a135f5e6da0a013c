"""Interactive menu for the adaptive loan repayment scheduler.

Usage:
    python -m loan_scheduler
    python -m loan_scheduler --inflation-rate 0.06
    python -m loan_scheduler --demo 8 --seed 42
"""

import argparse
import logging
from typing import Callable

from loan_scheduler.config import SchedulerConfig
from loan_scheduler.exceptions import LoanSchedulerError
from loan_scheduler.generators import LoanTermsGenerator
from loan_scheduler.logging import setup_logging
from loan_scheduler.models import LoanTerms
from loan_scheduler.scheduler import AdaptiveScheduler
from loan_scheduler.sinks import ConsoleSink

logger = logging.getLogger(__name__)

MENU = """
========= MENU =========
1. Add a Loan
2. View Loan Priorities
3. Allocate Payment
4. Simulate Passing Days
5. Exit
========================"""

InputFn = Callable[[str], str]


def prompt_loan_terms(input_fn: InputFn, currency: str = "₹") -> LoanTerms:
    """Ask for the fields of a new loan.

    Raises
    ------
    ValueError
        If a numeric field cannot be parsed.
    """
    name = input_fn("Enter Loan Name: ").strip()
    principal = input_fn(f"Enter Principal Amount: {currency}").strip()
    rate = float(input_fn("Enter Annual Interest Rate (%): "))
    days = int(input_fn("Enter Days Until Due: "))
    fee = input_fn(f"Enter Late Fee ({currency}): ").strip()
    credit = float(input_fn("Enter Credit Impact Factor (0-1): "))
    variable = input_fn("Variable Rate (y/n)? ").strip().lower().startswith("y")
    sensitivity = 0.0
    if variable:
        sensitivity = float(input_fn("Enter Inflation Sensitivity (0-1): "))

    return LoanTerms(
        name=name,
        principal=principal,
        annual_rate=rate,
        days_until_due=days,
        late_fee=fee,
        credit_factor=credit,
        variable_rate=variable,
        inflation_sensitivity=sensitivity,
    )


def run_menu(
    scheduler: AdaptiveScheduler,
    sink: ConsoleSink,
    input_fn: InputFn = input,
) -> None:
    """Run the menu loop until the user exits or input ends.

    The sink is closed on the way out, so its session summary is printed
    after "Exit" and at end of input alike.
    """
    print("=== Adaptive Loan Repayment Scheduler ===")
    try:
        _menu_loop(scheduler, sink, input_fn)
    finally:
        sink.close()


def _menu_loop(scheduler: AdaptiveScheduler, sink: ConsoleSink, input_fn: InputFn) -> None:
    while True:
        print(MENU)
        try:
            choice = input_fn("Enter choice: ").strip()
        except EOFError:
            return

        try:
            if choice == "1":
                loan_id = scheduler.add_terms(prompt_loan_terms(input_fn, sink.currency))
                print(f"Loan added successfully! (id {loan_id})")
            elif choice == "2":
                sink.write_listing(scheduler.list_priorities())
            elif choice == "3":
                amount = input_fn(f"Enter total payment amount: {sink.currency}").strip()
                result = scheduler.allocate_payment(amount)
                sink.write_allocation(result)
                if result.payments:
                    sink.write_listing(scheduler.list_priorities())
            elif choice == "4":
                days = int(input_fn("Enter number of days to simulate: "))
                sink.write_advance(scheduler.advance_days(days))
            elif choice == "5":
                print("\n=== Exiting Adaptive Scheduler ===")
                return
            else:
                print("Invalid choice. Try again.")
        except EOFError:
            return
        except (LoanSchedulerError, ValueError) as exc:
            logger.debug("Rejected input: %s", exc)
            print(f"Error: {exc}")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="loan-scheduler",
        description="Prioritize loans and allocate payments interactively.",
    )
    parser.add_argument("--inflation-rate", type=float, default=None, help="Process-wide inflation rate (default 0.05)")
    parser.add_argument("--log-level", default=None, help="Log level (default from LOG_LEVEL)")
    parser.add_argument("--log-format", choices=["standard", "json"], default=None)
    parser.add_argument("--output", choices=["table", "json"], default="table", help="Result rendering")
    parser.add_argument("--demo", type=int, default=0, metavar="N", help="Preload N generated loans")
    parser.add_argument("--seed", type=int, default=None, help="Random seed for --demo")
    return parser


def main(argv: list[str] | None = None, input_fn: InputFn = input) -> int:
    args = build_parser().parse_args(argv)

    try:
        config = SchedulerConfig.from_env()
    except LoanSchedulerError as exc:
        print(f"Error: {exc}")
        return 2

    setup_logging(
        level=args.log_level or config.log_level,
        format_type=args.log_format or config.log_format,
    )

    try:
        scheduler = AdaptiveScheduler(args.inflation_rate, config=config)
    except LoanSchedulerError as exc:
        print(f"Error: {exc}")
        return 2

    if args.demo > 0:
        generator = LoanTermsGenerator(seed=args.seed if args.seed is not None else config.seed)
        for terms in generator.generate_batch(args.demo):
            scheduler.add_terms(terms)
        print(f"Loaded {args.demo} generated loans.")

    run_menu(scheduler, ConsoleSink(format_type=args.output), input_fn=input_fn)
    return 0
