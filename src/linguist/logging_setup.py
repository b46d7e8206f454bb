"""Root logger setup for the ``linguist`` command-line tool.

Library modules only ever call ``logging.getLogger(__name__)``; handlers
are installed here, once, by the CLI.  Three output formats match the
``[logging] format`` setting:

- ``simple``  : ``LEVEL logger: message``
- ``detailed``: timestamp, level, logger, source line and message
- ``json``    : one JSON object per line for log aggregation
"""

from __future__ import annotations

import json
import logging
import sys
from datetime import UTC, datetime

from linguist.config import LoggingSettings

_FORMATS = {
    "simple": "%(levelname)s %(name)s: %(message)s",
    "detailed": "%(asctime)s %(levelname)-8s %(name)s:%(lineno)d %(message)s",
}


class JSONFormatter(logging.Formatter):
    """Render log records as single-line JSON objects.

    Output format::

        {"timestamp": "...", "level": "DEBUG", "logger": "linguist...", "message": "..."}
    """

    def format(self, record: logging.LogRecord) -> str:
        log_entry = {
            "timestamp": datetime.now(UTC).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        if record.levelno >= logging.WARNING:
            log_entry["location"] = {
                "file": record.pathname,
                "line": record.lineno,
                "function": record.funcName,
            }

        if record.exc_info:
            log_entry["exception"] = self.formatException(record.exc_info)

        return json.dumps(log_entry, default=str)


def configure_logging(settings: LoggingSettings, *, level: str | None = None) -> None:
    """Install a stderr handler on the root logger.

    Args:
        settings: The ``[logging]`` configuration section.
        level:    Optional override for ``settings.level`` (e.g. from
                  ``--log-level``).
    """
    handler = logging.StreamHandler(sys.stderr)
    if settings.format == "json":
        handler.setFormatter(JSONFormatter())
    else:
        handler.setFormatter(logging.Formatter(_FORMATS[settings.format]))

    logging.basicConfig(
        level=(level or settings.level).upper(),
        handlers=[handler],
        force=True,
    )
