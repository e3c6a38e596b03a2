"""
Logging setup for the API and the CLI.

Records may carry game context through ``extra``; the formatters below
surface it. JSON is meant for production, text for a terminal.
"""

import logging
import json
from datetime import datetime, timezone

# Context a record may carry via extra={...}
CONTEXT_FIELDS = ("session_id", "action_type", "error_code", "turn")

# Name of the root handler installed by setup_logging
HANDLER_NAME = "klondike"


def _context(record: logging.LogRecord) -> dict:
    return {
        key: record.__dict__[key]
        for key in CONTEXT_FIELDS
        if record.__dict__.get(key) is not None
    }


class JSONFormatter(logging.Formatter):
    """One JSON object per record."""

    def format(self, record: logging.LogRecord) -> str:
        entry = {
            "time": datetime.fromtimestamp(record.created, timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            **_context(record),
        }
        if record.exc_info:
            entry["exception"] = self.formatException(record.exc_info)
        return json.dumps(entry, default=str)


class TextFormatter(logging.Formatter):
    """Plain lines, with any game context appended as key=value."""

    def __init__(self):
        super().__init__("%(asctime)s %(levelname)-7s %(name)s: %(message)s")

    def format(self, record: logging.LogRecord) -> str:
        line = super().format(record)
        context = _context(record)
        if context:
            line += " " + " ".join(f"{k}={v}" for k, v in context.items())
        return line


def setup_logging(level: str = "INFO", fmt: str = "text") -> logging.Handler:
    """
    Install the root handler.

    Calling it again replaces the handler from the earlier call, so the
    CLI and the app module can both configure logging in one process.

    Args:
        level: Level name; unknown names fall back to INFO
        fmt: "json" or "text"

    Returns:
        The installed handler
    """
    root = logging.getLogger()
    for existing in list(root.handlers):
        if existing.get_name() == HANDLER_NAME:
            root.removeHandler(existing)

    handler = logging.StreamHandler()
    handler.set_name(HANDLER_NAME)
    handler.setFormatter(JSONFormatter() if fmt == "json" else TextFormatter())
    root.addHandler(handler)
    root.setLevel(getattr(logging, level.upper(), logging.INFO))
    return handler
