"""Structured logging utilities for SSML markup processing.

Records emitted through ``CorrelationLogger`` carry the component name and the
request correlation ID. Rejected markup is logged with its error offset, reason
code and a short preview of the offending input.
"""

import logging
from typing import Any, Dict, Optional

from .errors import MalformedMarkupError

PREVIEW_LENGTH = 80


class CorrelationLogger:
    """Logger that automatically includes correlation ID and component information."""

    def __init__(
        self,
        name: str,
        correlation_id: Optional[str] = None,
        component: Optional[str] = None
    ) -> None:
        """Initialize correlation logger.

        Args:
            name: Logger name (typically __name__)
            correlation_id: Optional correlation ID for request tracking
            component: Component name for structured logging
        """
        self.logger = logging.getLogger(name)
        self.correlation_id = correlation_id
        self.component = component or name.split('.')[-1]

    def _get_extra(self, extra: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        combined_extra = {
            "component": self.component,
            "correlation_id": self.correlation_id,
        }

        if extra:
            combined_extra.update(extra)

        return combined_extra

    def debug(self, message: str, extra: Optional[Dict[str, Any]] = None) -> None:
        """Log debug message with correlation info."""
        self.logger.debug(message, extra=self._get_extra(extra))

    def warning(self, message: str, extra: Optional[Dict[str, Any]] = None) -> None:
        """Log warning message with correlation info."""
        self.logger.warning(message, extra=self._get_extra(extra))

    def malformed(
        self,
        error: MalformedMarkupError,
        markup: str,
        extra: Optional[Dict[str, Any]] = None
    ) -> None:
        """Log rejected markup at WARNING with its offset, reason and a preview.

        The preview spans up to ``PREVIEW_LENGTH`` characters on each side of
        the error offset.
        """
        outcome = {
            "offset": error.offset,
            "reason": error.reason.name,
            "input_length": len(markup),
            "preview": markup[max(0, error.offset - PREVIEW_LENGTH):
                              error.offset + PREVIEW_LENGTH],
        }
        if extra:
            outcome.update(extra)
        self.warning("Malformed markup rejected", extra=outcome)


def get_logger(
    name: str,
    correlation_id: Optional[str] = None,
    component: Optional[str] = None
) -> CorrelationLogger:
    """Get a correlation-aware logger instance.

    Args:
        name: Logger name (typically __name__)
        correlation_id: Optional correlation ID for request tracking
        component: Component name for structured logging

    Returns:
        CorrelationLogger instance
    """
    return CorrelationLogger(name, correlation_id, component)
