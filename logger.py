"""Loguru setup: one stderr sink, module-bound loggers with a tag helper."""

from __future__ import annotations

import inspect
import sys

from loguru import logger as _root_logger

_LEVEL = "WARNING"
_CONFIGURED = False


def _stderr_sink(msg) -> None:
    r = msg.record
    module = r["extra"].get("module", r["name"])
    # stdout is reserved for route output
    sys.stderr.write(f"{r['time']:%H:%M:%S} | {r['level'].name: <7} | {module} | {r['message']}\n")


def _configure_logger(level: str | None = None) -> None:
    global _CONFIGURED, _LEVEL

    if level:
        _LEVEL = level.upper()
    _root_logger.remove()
    _root_logger.add(_stderr_sink, level=_LEVEL, catch=True)
    _CONFIGURED = True


def configure(level: str | None = None) -> None:
    """(Re)install the stderr sink at the given level."""
    _configure_logger(level)


def get_logger(name: str | None = None):
    """Return the loguru logger bound to the calling module's name.

    The returned logger also carries ``tag(label, msg, level="info")`` which
    prefixes the message with ``[label]``.
    """
    if not _CONFIGURED:
        _configure_logger()

    module_name = name
    frame = inspect.currentframe()
    if module_name is None and frame is not None and frame.f_back is not None:
        module = inspect.getmodule(frame.f_back)
        if module is not None and module.__name__ != "__main__":
            module_name = module.__name__

    bound = _root_logger.bind(module=module_name or "unknown")

    def _tag(label: str, msg: str = "", level: str = "info") -> None:
        getattr(bound, level, bound.info)(f"[{label}] {msg}")

    setattr(bound, "tag", _tag)
    return bound


__all__ = ["get_logger", "configure"]
