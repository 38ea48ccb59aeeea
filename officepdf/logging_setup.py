"""Root logger configuration driven by OfficePdfConfig."""

from __future__ import annotations

import json
import logging
from datetime import datetime, timezone

from rich.logging import RichHandler

from officepdf.config.models import OfficePdfConfig

_LEVELS: dict[str, int] = {
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warn": logging.WARNING,
    "error": logging.ERROR,
}

# Set on handlers installed here so repeated setup replaces only our own
_MARKER = "_officepdf_handler"


class JsonLineFormatter(logging.Formatter):
    """One JSON object per record, for log shippers."""

    def format(self, record: logging.LogRecord) -> str:
        payload = {
            "time": datetime.fromtimestamp(record.created, timezone.utc).isoformat(),
            "level": record.levelname.lower(),
            "logger": record.name,
            "message": record.getMessage(),
        }
        if record.exc_info:
            payload["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(payload)


def setup_logging(config: OfficePdfConfig) -> logging.Handler:
    """Install a root handler matching config.log_format and set the level."""
    if config.log_format == "json":
        handler: logging.Handler = logging.StreamHandler()
        handler.setFormatter(JsonLineFormatter())
    else:
        handler = RichHandler(show_path=False, rich_tracebacks=True)
        handler.setFormatter(logging.Formatter("%(message)s"))

    root = logging.getLogger()
    for existing in list(root.handlers):
        if getattr(existing, _MARKER, False):
            root.removeHandler(existing)
    setattr(handler, _MARKER, True)
    root.addHandler(handler)
    root.setLevel(_LEVELS[config.log_level])
    return handler
