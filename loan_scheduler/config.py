"""Configuration management for loan-scheduler."""

import math
from dataclasses import dataclass, field
from decimal import Decimal, InvalidOperation

from loan_scheduler.exceptions import ConfigurationError

SETTLED_EPSILON = Decimal("0.000001")
DEFAULT_INFLATION_RATE = 0.05


@dataclass(frozen=True)
class ScoringWeights:
    """Coefficients of the priority score."""

    interest_weight: float = 1.5
    penalty_weight: float = 0.8
    credit_weight: float = 0.8
    urgency_weight: float = 5000.0
    penalty_scale: float = 10000.0
    penalty_cap: float = 5000.0
    short_term_days: int = 5
    short_term_boost: float = 1.25


DEFAULT_WEIGHTS = ScoringWeights()


@dataclass
class SchedulerConfig:
    """Main configuration for the adaptive scheduler."""

    inflation_rate: float = DEFAULT_INFLATION_RATE
    settled_epsilon: Decimal = SETTLED_EPSILON
    weights: ScoringWeights = field(default_factory=ScoringWeights)
    log_level: str = "INFO"
    log_format: str = "standard"
    seed: int | None = None

    def validate(self) -> None:
        """Check that the configuration can drive a scheduler.

        Raises
        ------
        ConfigurationError
            If the inflation rate is not finite, the epsilon is not
            positive, or the log format is unknown.
        """
        if not math.isfinite(self.inflation_rate):
            raise ConfigurationError(f"Inflation rate must be finite, got {self.inflation_rate}")
        if self.settled_epsilon <= 0:
            raise ConfigurationError(f"Settled epsilon must be positive, got {self.settled_epsilon}")
        if self.log_format not in ("standard", "json"):
            raise ConfigurationError(f"Unknown log format: {self.log_format}")

    @classmethod
    def from_env(cls) -> "SchedulerConfig":
        """Create config from environment variables."""
        import os

        try:
            inflation_rate = float(os.getenv("LOAN_INFLATION_RATE", str(DEFAULT_INFLATION_RATE)))
            settled_epsilon = Decimal(os.getenv("LOAN_SETTLED_EPSILON", str(SETTLED_EPSILON)))
            seed = int(os.getenv("SEED")) if os.getenv("SEED") else None
        except (ValueError, InvalidOperation) as exc:
            raise ConfigurationError(f"Invalid scheduler environment: {exc}") from exc

        config = cls(
            inflation_rate=inflation_rate,
            settled_epsilon=settled_epsilon,
            log_level=os.getenv("LOG_LEVEL", "INFO"),
            log_format=os.getenv("LOG_FORMAT", "standard"),
            seed=seed,
        )
        config.validate()
        return config
