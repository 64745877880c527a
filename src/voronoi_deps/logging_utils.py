"""Logging utilities for voronoi_deps.

All package code obtains loggers through get_logger(); configuration only
touches the 'voronoi_deps' logger family, never the process root logger.
"""
from __future__ import annotations

import logging
import sys
from typing import Optional, Union

_ROOT_NAME = 'voronoi_deps'
_FORMAT = logging.Formatter('%(levelname)s %(name)s: %(message)s')


def _ensure_package_root() -> logging.Logger:
    """Give the 'voronoi_deps' logger a single stdout handler and stop propagation."""
    root = logging.getLogger(_ROOT_NAME)
    has_stream = any(not isinstance(h, logging.NullHandler) for h in root.handlers)
    if not has_stream:
        for h in list(root.handlers):
            root.removeHandler(h)
        handler = logging.StreamHandler(stream=sys.stdout)
        handler.setFormatter(_FORMAT)
        root.addHandler(handler)
    root.propagate = False
    return root


def _to_level(level: Union[str, int, None], default: int = logging.INFO) -> int:
    if level is None:
        return default
    if isinstance(level, int):
        return level
    value = getattr(logging, str(level).upper(), None)
    return value if isinstance(value, int) else default


def configure_logging(level: Union[str, int] = 'INFO') -> None:
    """Route voronoi_deps logs to stdout at the given level."""
    root = _ensure_package_root()
    root.setLevel(_to_level(level))


def get_logger(name: str, level: Optional[Union[str, int]] = None) -> logging.Logger:
    """Return a logger in the 'voronoi_deps' namespace.

    Without configure_logging() the package stays silent (NullHandler from
    the package __init__); children inherit the package level by default.
    """
    if name != _ROOT_NAME and not name.startswith(_ROOT_NAME + '.'):
        name = f'{_ROOT_NAME}.{name}'
    log = logging.getLogger(name)
    log.setLevel(_to_level(level) if level is not None else logging.NOTSET)
    return log


__all__ = ['get_logger', 'configure_logging']
