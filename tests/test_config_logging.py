"""Tests for config and logging."""

import io
import json
import logging
import sys
from decimal import Decimal

import pytest

from loan_scheduler.config import (
    DEFAULT_WEIGHTS,
    SETTLED_EPSILON,
    SchedulerConfig,
    ScoringWeights,
)
from loan_scheduler.exceptions import ConfigurationError
from loan_scheduler.logging import JsonFormatter, log_fields, setup_logging
from loan_scheduler.models import LoanTerms
from loan_scheduler.scheduler import AdaptiveScheduler
from loan_scheduler.store import LoanRegistry

ENV_VARS = [
    "LOAN_INFLATION_RATE",
    "LOAN_SETTLED_EPSILON",
    "LOG_LEVEL",
    "LOG_FORMAT",
    "SEED",
]


@pytest.fixture
def clean_env(monkeypatch: pytest.MonkeyPatch) -> pytest.MonkeyPatch:
    """Remove scheduler environment variables for the test."""
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


class TestScoringWeights:
    """Tests for ScoringWeights."""

    def test_default_values(self) -> None:
        """Test default score coefficients."""
        weights = ScoringWeights()

        assert weights.interest_weight == 1.5
        assert weights.penalty_weight == 0.8
        assert weights.credit_weight == 0.8
        assert weights.urgency_weight == 5000.0
        assert weights.penalty_scale == 10000.0
        assert weights.penalty_cap == 5000.0
        assert weights.short_term_days == 5
        assert weights.short_term_boost == 1.25

    def test_module_default_matches(self) -> None:
        assert DEFAULT_WEIGHTS == ScoringWeights()

    def test_frozen(self) -> None:
        """Test weights cannot be changed after creation."""
        weights = ScoringWeights()
        with pytest.raises(AttributeError):
            weights.urgency_weight = 1.0  # type: ignore[misc]


class TestSchedulerConfig:
    """Tests for SchedulerConfig."""

    def test_default_values(self) -> None:
        """Test default configuration values."""
        config = SchedulerConfig()

        assert config.inflation_rate == 0.05
        assert config.settled_epsilon == SETTLED_EPSILON == Decimal("0.000001")
        assert config.weights == ScoringWeights()
        assert config.log_level == "INFO"
        assert config.log_format == "standard"
        assert config.seed is None

    def test_validate_accepts_defaults(self) -> None:
        SchedulerConfig().validate()

    def test_validate_rejects_nan_inflation(self) -> None:
        with pytest.raises(ConfigurationError, match="Inflation rate"):
            SchedulerConfig(inflation_rate=float("nan")).validate()

    def test_validate_rejects_infinite_inflation(self) -> None:
        with pytest.raises(ConfigurationError):
            SchedulerConfig(inflation_rate=float("inf")).validate()

    def test_negative_inflation_is_allowed(self) -> None:
        """Deflation is a valid economic state."""
        SchedulerConfig(inflation_rate=-0.02).validate()

    def test_validate_rejects_non_positive_epsilon(self) -> None:
        with pytest.raises(ConfigurationError, match="epsilon"):
            SchedulerConfig(settled_epsilon=Decimal("0")).validate()

    def test_validate_rejects_unknown_log_format(self) -> None:
        with pytest.raises(ConfigurationError, match="log format"):
            SchedulerConfig(log_format="xml").validate()

    def test_from_env_default(self, clean_env: pytest.MonkeyPatch) -> None:
        """Test creating config from environment with defaults."""
        config = SchedulerConfig.from_env()

        assert config.inflation_rate == 0.05
        assert config.settled_epsilon == Decimal("0.000001")
        assert config.log_level == "INFO"
        assert config.log_format == "standard"
        assert config.seed is None

    def test_from_env_custom(self, clean_env: pytest.MonkeyPatch) -> None:
        """Test creating config from custom environment variables."""
        clean_env.setenv("LOAN_INFLATION_RATE", "0.07")
        clean_env.setenv("LOAN_SETTLED_EPSILON", "0.01")
        clean_env.setenv("LOG_LEVEL", "DEBUG")
        clean_env.setenv("LOG_FORMAT", "json")
        clean_env.setenv("SEED", "12345")

        config = SchedulerConfig.from_env()

        assert config.inflation_rate == 0.07
        assert config.settled_epsilon == Decimal("0.01")
        assert config.log_level == "DEBUG"
        assert config.log_format == "json"
        assert config.seed == 12345

    def test_from_env_unparsable_rate(self, clean_env: pytest.MonkeyPatch) -> None:
        clean_env.setenv("LOAN_INFLATION_RATE", "five percent")

        with pytest.raises(ConfigurationError, match="Invalid scheduler environment"):
            SchedulerConfig.from_env()

    def test_from_env_unparsable_epsilon(self, clean_env: pytest.MonkeyPatch) -> None:
        clean_env.setenv("LOAN_SETTLED_EPSILON", "tiny")

        with pytest.raises(ConfigurationError):
            SchedulerConfig.from_env()

    def test_from_env_validates(self, clean_env: pytest.MonkeyPatch) -> None:
        clean_env.setenv("LOAN_SETTLED_EPSILON", "-1")

        with pytest.raises(ConfigurationError, match="epsilon"):
            SchedulerConfig.from_env()


class TestSetupLogging:
    """Tests for setup_logging function."""

    def test_setup_logging_default(self) -> None:
        """Test default logging setup."""
        setup_logging()

        logger = logging.getLogger("loan_scheduler")
        assert logger.level == logging.INFO

    def test_setup_logging_debug(self) -> None:
        setup_logging(level="DEBUG")

        assert logging.getLogger().level == logging.DEBUG

    def test_setup_logging_invalid_level(self) -> None:
        """Test logging with invalid level defaults to INFO."""
        setup_logging(level="INVALID")

        assert logging.getLogger().level == logging.INFO

    def test_setup_logging_json_format(self) -> None:
        setup_logging(format_type="json")

        logger = logging.getLogger()
        assert any(isinstance(h.formatter, JsonFormatter) for h in logger.handlers)

    def test_setup_logging_writes_to_stderr(self) -> None:
        """Log lines must not interleave with tables printed on stdout."""
        setup_logging()

        handler = logging.getLogger().handlers[0]
        assert isinstance(handler, logging.StreamHandler)
        assert handler.stream is sys.stderr

    def test_setup_logging_replaces_handlers(self) -> None:
        """Test that setup_logging replaces existing handlers."""
        logger = logging.getLogger()
        logger.addHandler(logging.StreamHandler())
        logger.addHandler(logging.StreamHandler())

        setup_logging()

        assert len(logger.handlers) == 1

    def test_faker_logger_quieted(self) -> None:
        setup_logging(level="DEBUG")

        assert logging.getLogger("faker").level == logging.WARNING


class TestJsonFormatter:
    """Tests for JsonFormatter."""

    def _record(self, **kwargs: object) -> logging.LogRecord:
        defaults: dict = {
            "name": "loan_scheduler.allocator",
            "level": logging.INFO,
            "pathname": "/path/to/allocator.py",
            "lineno": 42,
            "msg": "Allocated %s",
            "args": ("1200",),
            "exc_info": None,
        }
        defaults.update(kwargs)
        return logging.LogRecord(**defaults)

    def test_format_basic(self) -> None:
        data = json.loads(JsonFormatter().format(self._record()))

        assert data["level"] == "INFO"
        assert data["logger"] == "loan_scheduler.allocator"
        assert data["message"] == "Allocated 1200"
        assert "timestamp" in data

    def test_format_with_exception(self) -> None:
        try:
            raise ValueError("Test error")
        except ValueError:
            exc_info = sys.exc_info()

        record = self._record(level=logging.ERROR, msg="Error occurred", args=(), exc_info=exc_info)
        data = json.loads(JsonFormatter().format(record))

        assert data["level"] == "ERROR"
        assert "ValueError" in data["exception"]

    def test_format_with_extra(self) -> None:
        record = self._record()
        record.extra = {"loan_id": 3, "leftover": Decimal("0.50")}

        data = json.loads(JsonFormatter().format(record))

        assert data["loan_id"] == 3
        assert data["leftover"] == "0.50"


class TestStructuredFields:
    """Loan fields attached to log calls reach the JSON output."""

    def _json_lines(self, stream: io.StringIO) -> list[dict]:
        return [json.loads(line) for line in stream.getvalue().splitlines()]

    def test_log_fields(self) -> None:
        assert log_fields(loan_id=4, amount=Decimal("1")) == {"extra": {"loan_id": 4, "amount": Decimal("1")}}

    def test_standard_format_ignores_fields(self) -> None:
        stream = io.StringIO()
        setup_logging(stream=stream)

        logging.getLogger("loan_scheduler.test").info("plain", extra=log_fields(loan_id=1))

        assert stream.getvalue().rstrip().endswith("| loan_scheduler.test | plain")

    def test_registry_add_fields(self, loan_a_terms: LoanTerms) -> None:
        stream = io.StringIO()
        setup_logging(format_type="json", stream=stream)

        LoanRegistry().add(loan_a_terms)

        (line,) = [d for d in self._json_lines(stream) if d["logger"] == "loan_scheduler.store.registry"]
        assert line["loan_id"] == 1
        assert line["principal"] == "1000"
        assert line["days_until_due"] == 3

    def test_allocation_fields(self, ab_scheduler: AdaptiveScheduler) -> None:
        stream = io.StringIO()
        setup_logging(level="DEBUG", format_type="json", stream=stream)

        ab_scheduler.allocate_payment(1200)

        lines = [d for d in self._json_lines(stream) if d["logger"] == "loan_scheduler.allocator"]
        steps = [(d["loan_id"], d["amount"], d["remaining_principal"]) for d in lines if "amount" in d]
        assert steps == [(1, "1000", "0"), (2, "200", "300")]

        summary = lines[-1]
        assert summary["level"] == "INFO"
        assert summary["requested"] == "1200"
        assert summary["paid"] == "1200"
        assert summary["leftover"] == "0"
        assert summary["paid_loan_ids"] == [1, 2]

    def test_advance_fields(self, ab_scheduler: AdaptiveScheduler) -> None:
        stream = io.StringIO()
        setup_logging(format_type="json", stream=stream)

        ab_scheduler.advance_days(3)

        (line,) = [d for d in self._json_lines(stream) if d["logger"] == "loan_scheduler.simulator"]
        assert line["delta"] == 3
        assert line["loans"] == 2


class TestPackageInit:
    """Tests for loan_scheduler __init__.py."""

    def test_version_exported(self) -> None:
        from loan_scheduler import __version__

        assert isinstance(__version__, str)
