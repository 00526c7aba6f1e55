"""
Logging utilities.

Module loggers use the standard library; audit events (access rejections,
reorder batches, storage failures) go through StructuredLogger so that each
event is a single JSON line.
"""

import logging
import sys
from datetime import datetime, timezone
import json

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def configure_logging(level: str = "INFO") -> None:
    """
    Configure the root logger once for the application.

    Args:
        level: Logging level name (DEBUG, INFO, ...)
    """
    # basicConfig is a no-op when the root logger already has handlers
    logging.basicConfig(stream=sys.stdout, format=LOG_FORMAT)
    logging.getLogger().setLevel(getattr(logging, level, logging.INFO))


class StructuredLogger:
    """Structured JSON logger for audit events."""

    def __init__(self, name: str):
        """
        Initialize structured logger.

        Args:
            name: Logger name, also reported as the event source
        """
        self.logger = logging.getLogger(name)

    def _log_structured(self, level: int, event: str, **kwargs):
        """
        Log a structured event.

        Args:
            level: Logging level
            event: Event name
            **kwargs: Additional structured data
        """
        if self.logger.isEnabledFor(level):
            log_data = {
                "timestamp": datetime.now(timezone.utc).isoformat(),
                "level": logging.getLevelName(level),
                "event": event,
                "source": self.logger.name,
            }
            log_data.update(kwargs)

            self.logger.log(level, json.dumps(log_data, default=str))

    def debug(self, event: str, **kwargs):
        """Log debug event."""
        self._log_structured(logging.DEBUG, event, **kwargs)

    def info(self, event: str, **kwargs):
        """Log info event."""
        self._log_structured(logging.INFO, event, **kwargs)

    def warning(self, event: str, **kwargs):
        """Log warning event."""
        self._log_structured(logging.WARNING, event, **kwargs)

    def error(self, event: str, **kwargs):
        """Log error event."""
        self._log_structured(logging.ERROR, event, **kwargs)


def get_logger(name: str) -> StructuredLogger:
    """
    Get a structured logger.

    Args:
        name: Logger name

    Returns:
        StructuredLogger instance
    """
    return StructuredLogger(name)
