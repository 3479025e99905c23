"""
Injectable logger support for contract wrappers.

Wrappers accept any object exposing some of ``debug``, ``info``,
``warning`` (or ``warn``) and ``error``; a ``logging.Logger`` works as is.
Methods the object lacks become no-ops, so assigning ``None`` silences a
wrapper entirely.
"""

import logging
from typing import Any, Callable

LOG_METHODS = ("debug", "info", "warning", "error")

PACKAGE_LOGGER = logging.getLogger("ethereum_contracts")


def _noop(*args: Any, **kwargs: Any) -> None:
    pass


def _lookup(target: Any, name: str) -> Callable[..., None]:
    method = getattr(target, name, None)
    if not callable(method) and name == "warning":
        method = getattr(target, "warn", None)
    return method if callable(method) else _noop


class BoundLogger:
    """Logger facade bound to the methods of an arbitrary target."""

    def __init__(self, target: Any = None):
        self.target = target
        for name in LOG_METHODS:
            setattr(self, name, _lookup(target, name))

    def __repr__(self) -> str:
        return f"BoundLogger({self.target!r})"


class PrefixedLogger:
    """
    Logger that prepends a fixed prefix to every message of another logger.

    The parent is looked up on every call, so replacing the parent's logger
    takes effect immediately.
    """

    def __init__(self, parent: Callable[[], BoundLogger], prefix: str):
        self._parent = parent
        self._prefix = prefix

    def _log(self, name: str, msg: Any, *args: Any, **kwargs: Any) -> None:
        getattr(self._parent(), name)(f"{self._prefix}{msg}", *args, **kwargs)

    def debug(self, msg: Any, *args: Any, **kwargs: Any) -> None:
        self._log("debug", msg, *args, **kwargs)

    def info(self, msg: Any, *args: Any, **kwargs: Any) -> None:
        self._log("info", msg, *args, **kwargs)

    def warning(self, msg: Any, *args: Any, **kwargs: Any) -> None:
        self._log("warning", msg, *args, **kwargs)

    def error(self, msg: Any, *args: Any, **kwargs: Any) -> None:
        self._log("error", msg, *args, **kwargs)


def bind_logger(target: Any = PACKAGE_LOGGER) -> BoundLogger:
    """
    Bind a logger facade to ``target``.

    Args:
        target: Object with logging methods, or ``None`` for a silent logger

    Returns:
        The bound facade
    """
    if isinstance(target, BoundLogger):
        return target
    return BoundLogger(target)
