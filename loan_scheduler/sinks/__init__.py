"""Output sinks for scheduler results."""

from loan_scheduler.sinks.console import ConsoleSink

__all__ = ["ConsoleSink"]
