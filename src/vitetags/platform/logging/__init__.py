"""Logging facade exports.

Where: platform/logging/__init__.py
What: Re-export the shared logger, setup helper, and Rich console handler.
Why: Provide a single canonical import path for logging.
"""

from __future__ import annotations

from .config import DEFAULT_LOG_FILE, LOGGER_NAME, logger, setup_logger
from .handlers import AssetEventRichHandler

__all__ = [
    "AssetEventRichHandler",
    "DEFAULT_LOG_FILE",
    "LOGGER_NAME",
    "logger",
    "setup_logger",
]
