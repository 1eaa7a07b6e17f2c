import json
import logging
import sys

PACKAGE_LOGGER = "flowlog_tagger"


class JsonLineFormatter(logging.Formatter):
    """Render each record as a single JSON object."""

    def format(self, record: logging.LogRecord) -> str:
        payload = {
            "ts": self.formatTime(record),
            "lvl": record.levelname,
            "mod": record.name,
            "msg": record.getMessage(),
        }
        if record.exc_info:
            payload["exc"] = self.formatException(record.exc_info)
        return json.dumps(payload)


def get_logger(name: str = __name__) -> logging.Logger:
    """Return a logger emitting JSON lines on stderr.

    The handler is installed once on the package logger; module loggers
    propagate to it, so repeated calls never duplicate output.
    """
    root = logging.getLogger(PACKAGE_LOGGER)
    if not root.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(JsonLineFormatter())
        root.addHandler(handler)
        root.setLevel(logging.INFO)
    return logging.getLogger(name)


def set_log_level(level: str | int) -> None:
    """Set the level of every ``flowlog_tagger`` logger."""
    if isinstance(level, str):
        resolved = logging.getLevelName(level.strip().upper())
        if not isinstance(resolved, int):
            raise ValueError(f"Unknown log level: {level!r}")
        level = resolved
    get_logger(PACKAGE_LOGGER).setLevel(level)
