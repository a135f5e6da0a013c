#!/usr/bin/env python3
"""Benchmark payment allocation over growing loan portfolios.

Every payment step rescores and resorts the whole registry, so a payment
that settles k loans costs O(k * n log n). This script measures how that
grows with the number of loans.

Usage:
    python scripts/benchmark.py
    python scripts/benchmark.py --sizes 10 100 1000
    python scripts/benchmark.py --seed 7
"""

import argparse
import logging
import sys
import time
from decimal import Decimal
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from loan_scheduler.generators import LoanTermsGenerator
from loan_scheduler.scheduler import AdaptiveScheduler

logging.basicConfig(
    level=logging.WARNING,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


def benchmark_size(num_loans: int, seed: int) -> None:
    """Time listing and a payment that settles roughly half the portfolio.

    Parameters
    ----------
    num_loans : int
        Number of generated loans.
    seed : int
        Random seed.
    """
    scheduler = AdaptiveScheduler()
    generator = LoanTermsGenerator(seed=seed)
    for terms in generator.generate_batch(num_loans):
        scheduler.add_terms(terms)

    t0 = time.perf_counter()
    scheduler.list_priorities()
    t_list = time.perf_counter() - t0

    budget = scheduler.registry.outstanding_principal() / 2
    t0 = time.perf_counter()
    result = scheduler.allocate_payment(budget)
    t_alloc = time.perf_counter() - t0

    steps = len(result.payments)
    per_step = t_alloc / steps * 1000 if steps else 0.0
    print(
        f"  {num_loans:>6,} loans | listing {t_list * 1000:8.2f} ms"
        f" | allocate {t_alloc * 1000:9.2f} ms over {steps:>5,} steps ({per_step:.3f} ms/step)"
    )
    assert result.total_paid + result.leftover == Decimal(budget)


def main() -> None:
    parser = argparse.ArgumentParser(description="Benchmark loan allocation")
    parser.add_argument("--sizes", type=int, nargs="+", default=[10, 100, 500, 1000])
    parser.add_argument("--seed", type=int, default=42)
    args = parser.parse_args()

    print("=" * 80)
    print("Allocation benchmark (full index rebuild per payment step)")
    print("=" * 80)
    for size in args.sizes:
        benchmark_size(size, args.seed)


if __name__ == "__main__":
    main()
