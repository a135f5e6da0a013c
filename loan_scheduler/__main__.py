"""Entry point for ``python -m loan_scheduler``."""

import sys

from loan_scheduler.cli import main

if __name__ == "__main__":
    sys.exit(main())
