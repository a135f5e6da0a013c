"""Logging setup for the scheduler.

Log lines go to stderr so they never interleave with the tables the console
sink prints on stdout. Scheduler modules attach the loan ids and amounts a
line talks about through :func:`log_fields`; the JSON formatter lifts those
into top-level keys, the standard formatter ignores them.
"""

import json
import logging
import sys
from datetime import datetime, timezone
from typing import Any, TextIO

from loan_scheduler.sinks.serialization import serialize_value

STANDARD_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"

# Attribute name on the LogRecord carrying structured fields
FIELDS_ATTR = "extra"


def log_fields(**fields: Any) -> dict[str, dict[str, Any]]:
    """Build the ``extra`` mapping for a log call.

    Used as ``logger.info("...", extra=log_fields(loan_id=3, amount=paid))``.
    """
    return {FIELDS_ATTR: fields}


def setup_logging(
    level: str = "INFO",
    format_type: str = "standard",
    stream: TextIO | None = None,
) -> None:
    """Install a single stream handler on the root logger.

    Parameters
    ----------
    level : str
        Level name; unknown names fall back to INFO.
    format_type : str
        ``"standard"`` or ``"json"``.
    stream : TextIO, optional
        Destination, stderr when omitted.
    """
    log_level = getattr(logging, level.upper(), logging.INFO)

    if format_type == "json":
        formatter: logging.Formatter = JsonFormatter()
    else:
        formatter = logging.Formatter(fmt=STANDARD_FORMAT, datefmt="%Y-%m-%d %H:%M:%S")

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    handler = logging.StreamHandler(stream if stream is not None else sys.stderr)
    handler.setLevel(log_level)
    handler.setFormatter(formatter)
    root_logger.addHandler(handler)

    logging.getLogger("loan_scheduler").setLevel(log_level)

    # Faker logs locale loading at DEBUG
    logging.getLogger("faker").setLevel(logging.WARNING)


class JsonFormatter(logging.Formatter):
    """One JSON object per record, with loan fields as top-level keys.

    Decimal amounts are written as strings so no precision is lost.
    """

    def format(self, record: logging.LogRecord) -> str:
        log_data: dict[str, Any] = {
            "timestamp": datetime.fromtimestamp(record.created, timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        fields = getattr(record, FIELDS_ATTR, None)
        if fields:
            log_data.update(serialize_value(fields))

        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        return json.dumps(log_data, default=str)
