"""
Observability module.

Provides structured logging, correlation ID tracking and request logging
middleware.
"""

from thumbnail_studio.observability.correlation import (
    clear_correlation_id,
    get_correlation_id,
    set_correlation_id,
)
from thumbnail_studio.observability.logger import configure_logging

__all__ = [
    "clear_correlation_id",
    "configure_logging",
    "get_correlation_id",
    "set_correlation_id",
]
