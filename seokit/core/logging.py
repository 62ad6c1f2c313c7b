"""Logging setup: one stdout handler on the root logger, human or JSON lines."""

import json
import logging
import sys
from datetime import datetime, timezone

from seokit.core.config import Settings, get_settings

HUMAN_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
HUMAN_DATEFMT = "%Y-%m-%d %H:%M:%S"

# Attributes passed through ``extra=`` that JSON output keeps as top-level keys
CONTEXT_FIELDS = ("artifact", "route")

_QUIET_LOGGERS = ("httpx", "httpcore", "uvicorn.access")


class JSONFormatter(logging.Formatter):
    """One JSON object per record, for log shippers in production."""

    def __init__(self, site_url: str = "", environment: str = ""):
        super().__init__()
        self.site_url = site_url
        self.environment = environment

    def format(self, record: logging.LogRecord) -> str:
        payload = {
            "timestamp": datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        if self.site_url:
            payload["site"] = self.site_url
        if self.environment:
            payload["env"] = self.environment
        for name in CONTEXT_FIELDS:
            value = getattr(record, name, None)
            if value is not None:
                payload[name] = value
        if record.exc_info and record.exc_info[1]:
            payload["exception"] = self.formatException(record.exc_info)
        return json.dumps(payload, ensure_ascii=False)


def setup_logging(settings: Settings | None = None) -> None:
    """Configure the root logger from LOG_LEVEL / LOG_JSON; safe to call again."""
    settings = settings or get_settings()
    level = logging.getLevelName(settings.log_level.upper())
    if not isinstance(level, int):
        level = logging.INFO

    if settings.log_json:
        formatter: logging.Formatter = JSONFormatter(settings.site_url, settings.app_env)
    else:
        formatter = logging.Formatter(HUMAN_FORMAT, datefmt=HUMAN_DATEFMT)

    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(level)
    handler.setFormatter(formatter)

    root = logging.getLogger()
    root.setLevel(level)
    root.handlers[:] = [handler]

    for name in _QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)
