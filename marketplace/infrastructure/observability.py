"""Log Output — one JSON object per record, carrying marketplace correlation fields.

Invariants:
    - Every line has timestamp (UTC), level, logger and message
    - Only the fields in EXTRA_FIELDS are lifted from `extra=`; anything else
      passed by a caller stays out of the line
    - Non-JSON values (UUIDs, enums) are rendered with str()

Design Decisions:
    - log_format "json" for deployed containers, "text" for a local terminal
    - setup_logging is invoked from the FastAPI lifespan, never at import time
"""

import logging
import json
from datetime import datetime, timezone

EXTRA_FIELDS = (
    "idempotency_key", "entity_kind", "entity_id",
    "error_code", "operation", "path",
)


class JSONFormatter(logging.Formatter):
    """Renders a LogRecord as a single-line JSON object."""

    def format(self, record: logging.LogRecord) -> str:
        log = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        for key in EXTRA_FIELDS:
            val = record.__dict__.get(key)
            if val is not None:
                log[key] = val
        if record.exc_info:
            log["exception"] = self.formatException(record.exc_info)
        return json.dumps(log, ensure_ascii=False, default=str)


def setup_logging(level: str = "INFO", fmt: str = "json"):
    """Attach one stderr handler to the root logger at the given level."""
    handler = logging.StreamHandler()
    if fmt == "json":
        handler.setFormatter(JSONFormatter())
    else:
        handler.setFormatter(logging.Formatter(
            "%(asctime)s %(levelname)s %(name)s — %(message)s",
        ))
    logging.root.addHandler(handler)
    logging.root.setLevel(getattr(logging, level.upper(), logging.INFO))
