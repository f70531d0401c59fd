"""
Logging setup
- setup_logging(): configure the root logger once
- get_logger(): module logger
"""

import logging
import os
from typing import Optional

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'

_configured = False


def setup_logging(level: Optional[str] = None) -> None:
    """
    Configure stdlib logging for the app.

    Args:
        level: Level name, defaults to PAGER_LOG_LEVEL or INFO
    """
    global _configured
    if _configured:
        return

    level_name = (level or os.getenv("PAGER_LOG_LEVEL", "INFO")).upper()
    logging.basicConfig(
        level=getattr(logging, level_name, logging.INFO),
        format=LOG_FORMAT,
    )
    _configured = True


def get_logger(name: str) -> logging.Logger:
    """Return the logger for a module"""
    return logging.getLogger(name)
