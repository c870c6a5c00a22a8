"""Logging utilities for bwdelaunay.

Provides a consistent logger hierarchy and formatting without modifying the
process root logger. Library code should obtain loggers via get_logger().
"""
from __future__ import annotations

import logging
import sys
from typing import Optional, Union

_FORMAT = logging.Formatter('%(levelname)s %(name)s: %(message)s')
_ROOT_NAME = 'bwdelaunay'


def _ensure_package_root() -> logging.Logger:
    """Ensure the 'bwdelaunay' logger has a single stream handler and is
    isolated from the process root logger. Returns the 'bwdelaunay' logger.
    """
    pkg_root = logging.getLogger(_ROOT_NAME)
    # Only NullHandlers (added by package __init__) would swallow everything
    for h in list(pkg_root.handlers):
        if isinstance(h, logging.NullHandler):
            pkg_root.removeHandler(h)
    if not pkg_root.handlers:
        handler = logging.StreamHandler(stream=sys.stdout)
        handler.setFormatter(_FORMAT)
        pkg_root.addHandler(handler)
    pkg_root.propagate = False
    return pkg_root


def _to_level(level: Union[str, int, None], default: int = logging.INFO) -> int:
    if level is None:
        return default
    if isinstance(level, int):
        return level
    resolved = logging.getLevelName(str(level).upper())
    return resolved if isinstance(resolved, int) else default


def configure_logging(level: Union[str, int] = 'INFO', mute_external: bool = True) -> None:
    """Configure the 'bwdelaunay' logger family level and optional external noise suppression.

    This does NOT modify the process root logger.
    """
    pkg_root = _ensure_package_root()
    lvl = _to_level(level)
    pkg_root.setLevel(lvl)
    # matplotlib is chatty at DEBUG
    if mute_external and lvl <= logging.DEBUG:
        for noisy in ('matplotlib', 'matplotlib.font_manager', 'PIL'):
            logging.getLogger(noisy).setLevel(logging.INFO)


def get_logger(name: str, level: Optional[Union[str, int]] = None) -> logging.Logger:
    """Return a logger under the 'bwdelaunay' namespace.

    Unlike configure_logging() this never attaches handlers, so importing the
    library stays silent until the application opts in. Without an explicit
    level the logger keeps whatever level it already has (NOTSET for a new
    logger, i.e. inherit from the 'bwdelaunay' parent).
    """
    if name != _ROOT_NAME and not name.startswith(_ROOT_NAME + '.'):
        name = f'{_ROOT_NAME}.{name}'
    log = logging.getLogger(name)
    if level is not None:
        log.setLevel(_to_level(level))
    return log


__all__ = ['get_logger', 'configure_logging']
