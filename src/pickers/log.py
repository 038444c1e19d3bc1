"""Structured one-line logging helpers.

Every event is written as ``event k=v k=v`` so picker activity stays easy to
grep in the log file, e.g. ``engine.filter screen=countries query=fr count=1``.
Values are shortened: long strings are truncated and long lists collapse to
their length.
"""

from __future__ import annotations

import contextvars
import logging
import time
from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path
from typing import Any


__all__ = [
    "bind_log_context",
    "get_log_context",
    "log_debug",
    "log_error",
    "log_exception",
    "log_info",
    "log_warning",
    "set_log_context",
    "timed",
]


_CTX: contextvars.ContextVar[dict[str, Any] | None] = contextvars.ContextVar(
    "pickers_log_ctx",
    default=None,
)

_TRUNCATE_AT = 120
_MAX_LIST_ITEMS = 4

# Fields listed here are printed first, in this order; everything else follows alphabetically.
_KEY_ORDER = (
    "run_id",
    "op",
    "screen",
    "status",
    "duration_ms",
    "page",
    "page_count",
    "position",
    "query",
    "label",
    "code",
    "count",
    "visible",
)
_KEY_PRIORITY: dict[str, int] = {key: rank for rank, key in enumerate(_KEY_ORDER)}
_KEY_PRIORITY.update({"error": 90, "exc": 91})


def _merge(base: dict[str, Any] | None, fields: dict[str, Any]) -> dict[str, Any]:
    merged = dict(base or {})
    merged.update({k: v for k, v in fields.items() if v is not None})
    return merged


@contextmanager
def bind_log_context(**fields: Any) -> Iterator[None]:
    """Attach fields to every event logged inside the ``with`` block."""
    token = _CTX.set(_merge(_CTX.get(), fields))
    try:
        yield
    finally:
        _CTX.reset(token)


def set_log_context(**fields: Any) -> None:
    """Attach fields to every later event in this context, without automatic reset."""
    _CTX.set(_merge(_CTX.get(), fields))


def get_log_context() -> dict[str, Any]:
    """Return a copy of the currently bound fields."""
    return dict(_CTX.get() or {})


def _shorten(text: str) -> str:
    if len(text) <= _TRUNCATE_AT:
        return text
    return text[: _TRUNCATE_AT - 3] + "..."


def _fmt_value(value: Any) -> str:
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (int, float)):
        return str(value)
    if isinstance(value, str):
        # Quote empty and spaced strings so a query like "" or "new z" stays readable.
        if not value or " " in value:
            return _shorten(repr(value))
        return _shorten(value)
    if isinstance(value, Path):
        return _shorten(str(value))
    if isinstance(value, (list, tuple, set)):
        seq = list(value)
        if len(seq) > _MAX_LIST_ITEMS:
            return f"[len={len(seq)}]"
        return "[" + ",".join(_fmt_value(v) for v in seq) + "]"
    if isinstance(value, dict):
        return f"{{len={len(value)}}}"
    return _shorten(repr(value))


def _format_event(event: str, fields: dict[str, Any]) -> str:
    merged = _merge(_CTX.get(), fields)
    ordered = sorted(merged.items(), key=lambda kv: (_KEY_PRIORITY.get(kv[0], 50), kv[0]))
    return " ".join([event, *(f"{k}={_fmt_value(v)}" for k, v in ordered)])


def _log(logger: logging.Logger, level: int, event: str, **fields: Any) -> None:
    if logger.isEnabledFor(level):
        logger.log(level, _format_event(event, fields))


def log_debug(logger: logging.Logger, event: str, **fields: Any) -> None:
    _log(logger, logging.DEBUG, event, **fields)


def log_info(logger: logging.Logger, event: str, **fields: Any) -> None:
    _log(logger, logging.INFO, event, **fields)


def log_warning(logger: logging.Logger, event: str, **fields: Any) -> None:
    _log(logger, logging.WARNING, event, **fields)


def log_error(logger: logging.Logger, event: str, **fields: Any) -> None:
    _log(logger, logging.ERROR, event, **fields)


def log_exception(logger: logging.Logger, event: str, **fields: Any) -> None:
    if logger.isEnabledFor(logging.ERROR):
        logger.exception(_format_event(event, fields))


@contextmanager
def timed(
    logger: logging.Logger,
    op: str,
    *,
    level: int = logging.DEBUG,
    **fields: Any,
) -> Iterator[None]:
    """Log ``<op>.ok`` or ``<op>.error`` with the elapsed milliseconds."""
    start = time.perf_counter()
    try:
        yield
    except Exception as exc:
        elapsed = int((time.perf_counter() - start) * 1000.0)
        _log(logger, logging.ERROR, f"{op}.error", duration_ms=elapsed, exc=type(exc).__name__, **fields)
        raise
    elapsed = int((time.perf_counter() - start) * 1000.0)
    _log(logger, level, f"{op}.ok", duration_ms=elapsed, **fields)
