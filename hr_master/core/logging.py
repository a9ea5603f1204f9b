import logging
from contextvars import ContextVar
from datetime import datetime, timezone
from typing import Any, Dict, Optional

from pythonjsonlogger import jsonlogger

from hr_master.core.config import settings

LOG_FORMAT = "%(timestamp) %(level) %(name) %(message)"

# Noisy per-request or per-statement loggers
QUIET_LOGGERS = ("uvicorn.access", "sqlalchemy.engine")

# Set by CorrelationIdMiddleware for the duration of a request
request_id_var: ContextVar[str] = ContextVar("request_id", default="")


class CustomJsonFormatter(jsonlogger.JsonFormatter):
    """One JSON object per record, tagged with service, environment and request id."""

    def add_fields(self, log_record: Dict[str, Any], record: logging.LogRecord, message_dict: Dict[str, Any]) -> None:
        super(CustomJsonFormatter, self).add_fields(log_record, record, message_dict)

        log_record["timestamp"] = datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat()
        log_record["level"] = record.levelname
        log_record["service"] = settings.app_name
        log_record["environment"] = settings.environment

        request_id = request_id_var.get()
        if request_id:
            log_record["request_id"] = request_id


def setup_logging(level: Optional[str] = None) -> None:
    root = logging.getLogger()
    root.setLevel((level or settings.log_level).upper())

    # Re-importing the app (tests, reloader) must not add a second handler
    if any(isinstance(h.formatter, CustomJsonFormatter) for h in root.handlers):
        return

    handler = logging.StreamHandler()
    handler.setFormatter(CustomJsonFormatter(LOG_FORMAT))
    root.addHandler(handler)

    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)
