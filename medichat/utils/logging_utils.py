import json
import logging
from datetime import datetime, timezone
from typing import Optional

from medichat import settings
from medichat.utils.tracing import current_trace_id

LOGGER_NAME = "medichat"


class JsonFormatter(logging.Formatter):
    def format(self, record):  # type: ignore[override]
        payload = {
            "timestamp": datetime.now(timezone.utc).isoformat(timespec="seconds").replace("+00:00", "Z"),
            "level": record.levelname,
            "function": record.funcName,
            "message": record.getMessage(),
            "trace_id": current_trace_id() or None,
        }
        if record.exc_info:
            payload["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(payload, ensure_ascii=False, default=str)


def configure_logging(level: Optional[str] = None) -> logging.Logger:
    """Install the JSON stream handler on the medichat logger (idempotent)."""
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level or settings.log_level())
    if not any(isinstance(h.formatter, JsonFormatter) for h in logger.handlers):
        handler = logging.StreamHandler()
        handler.setFormatter(JsonFormatter())
        logger.addHandler(handler)
    return logger
