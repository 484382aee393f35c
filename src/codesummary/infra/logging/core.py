from __future__ import annotations

"""
Logging Core.

Configures the root logger for command-line runs. Configuration is idempotent:
handlers installed here are tagged so a second call, from a test or a nested
entry point, replaces them instead of stacking duplicates.
"""

import logging
import sys
from typing import Optional, TextIO

from codesummary.infra.logging.config import _LEVEL_MAP, LoggingConfig

_CONFIGURED_FLAG_ATTR: str = "_codesummary_configured"
_HANDLER_TAG_ATTR: str = "_codesummary_handler"


class _StderrHandler(logging.StreamHandler):
    """Stream handler bound to whatever sys.stderr is at emit time."""

    def __init__(self) -> None:
        super().__init__()

    @property
    def stream(self) -> TextIO:
        return sys.stderr

    @stream.setter
    def stream(self, value: Optional[TextIO]) -> None:
        pass

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def configure_logging(cfg: LoggingConfig, *, force: bool = False) -> logging.Logger:
    """
    Configure the root logger from a LoggingConfig.

    The level is always applied. Handlers are only (re)installed on the
    first call or when force is True.

    Args:
        cfg: Logging settings.
        force: Reinstall handlers even if already configured.

    Returns:
        logging.Logger: The root logger.
    """
    root = logging.getLogger()
    level_int = _parse_level(cfg.level)
    root.setLevel(level_int)

    already_configured = bool(getattr(root, _CONFIGURED_FLAG_ATTR, False))
    if already_configured and not force:
        for h in root.handlers:
            if _is_our_handler(h):
                h.setLevel(level_int)
        return root

    _remove_our_handlers(root)

    if cfg.console:
        handler = _StderrHandler()
        handler.setLevel(level_int)
        handler.setFormatter(logging.Formatter(cfg.console_fmt, datefmt=cfg.datefmt))
        setattr(handler, _HANDLER_TAG_ATTR, True)
        root.addHandler(handler)

    setattr(root, _CONFIGURED_FLAG_ATTR, True)
    return root


def get_logger(name: str) -> logging.Logger:
    """Return the named logger (usually __name__)."""
    return logging.getLogger(name)

# -----------------------------------------------------------------------------
# PRIVATE HELPERS
# -----------------------------------------------------------------------------

def _parse_level(level: str) -> int:
    """Convert a level name to its numeric constant, defaulting to INFO."""
    if not level:
        return logging.INFO
    return _LEVEL_MAP.get(str(level).strip().upper(), logging.INFO)


def _is_our_handler(handler: logging.Handler) -> bool:
    return bool(getattr(handler, _HANDLER_TAG_ATTR, False))


def _remove_our_handlers(root: logging.Logger) -> None:
    for h in list(root.handlers):
        if _is_our_handler(h):
            root.removeHandler(h)
            h.close()
