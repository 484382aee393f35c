from __future__ import annotations

"""
Logging Configuration Model.

Defines the settings used to initialize the logging subsystem and the mapping
from level names to the numeric logging constants.
"""

import logging
from dataclasses import dataclass
from typing import Dict

_LEVEL_MAP: Dict[str, int] = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "WARN": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
}


@dataclass(frozen=True)
class LoggingConfig:
    """
    Immutable settings for the logging subsystem.

    Attributes:
        level: Minimum severity to emit.
        console: Whether to attach the stderr handler.
        console_fmt: Format of console records.
        datefmt: Timestamp format, used when console_fmt includes asctime.
    """
    level: str = "INFO"
    console: bool = True
    console_fmt: str = "%(levelname)s | %(message)s"
    datefmt: str = "%Y-%m-%d %H:%M:%S"
