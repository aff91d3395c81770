"""
Utility functions for list-filter.

Logging:
- setup_logging(settings): Render list-filter events with structlog
- get_logger(name): Logger used by the library modules
"""

from list_filter.utils.logging import get_logger, setup_logging

__all__ = [
    "get_logger",
    "setup_logging",
]
