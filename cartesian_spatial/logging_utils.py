"""DEBUG level call tracing for the geometry engine modules."""

from __future__ import annotations

import inspect
import logging
import reprlib
from functools import wraps
from typing import Any, Callable, Iterable, MutableMapping, Optional, Sequence, Set, TypeVar, cast

import numpy as np

F = TypeVar("F", bound=Callable[..., Any])

_repr = reprlib.Repr()
_repr.maxother = 120
_repr.maxlist = 8
_repr.maxtuple = 8

_MAX_ITEMS = 6


def _fmt(value: float) -> str:
    return f"{value:.6g}"


def describe(value: Any) -> str:
    """Return a short, log friendly rendering of ``value``.

    Points, segments and rectangles are rendered by their ordinates so that
    traces of long clipping runs stay readable.
    """

    if hasattr(value, "point1") and hasattr(value, "point2"):
        return f"seg[{describe(value.point1)}->{describe(value.point2)}]"
    if all(hasattr(value, name) for name in ("west", "north", "east", "south")):
        return f"mbr[w={_fmt(value.west)} n={_fmt(value.north)} e={_fmt(value.east)} s={_fmt(value.south)}]"
    if hasattr(value, "lon") and hasattr(value, "lat"):
        return f"({_fmt(value.lon)}, {_fmt(value.lat)})"
    if isinstance(value, np.ndarray):
        return f"ndarray(shape={tuple(value.shape)}, dtype={value.dtype})"
    if isinstance(value, (list, tuple)):
        items = [describe(item) for item in value[:_MAX_ITEMS]]
        if len(value) > _MAX_ITEMS:
            items.append(f"... +{len(value) - _MAX_ITEMS}")
        body = ", ".join(items)
        return f"({body})" if isinstance(value, tuple) else f"[{body}]"
    return _repr.repr(value)


def _format_arguments(args: Sequence[Any], kwargs: MutableMapping[str, Any]) -> str:
    parts = [describe(arg) for arg in args]
    parts.extend(f"{key}={describe(val)}" for key, val in kwargs.items())
    return ", ".join(parts) if parts else "no-args"


def debug_log_call(logger: logging.Logger, *, name: Optional[str] = None) -> Callable[[F], F]:
    """Return a decorator logging entry, exit and exceptions at DEBUG level."""

    def decorator(func: F) -> F:
        if getattr(func, "_debug_logging_wrapped", False):
            return func

        qualname = name or func.__qualname__

        @wraps(func)
        def wrapper(*args: Any, **kwargs: Any):
            if not logger.isEnabledFor(logging.DEBUG):
                return func(*args, **kwargs)
            logger.debug("%s(%s)", qualname, _format_arguments(args, kwargs))
            try:
                result = func(*args, **kwargs)
            except Exception:
                logger.debug("%s raised", qualname, exc_info=True)
                raise
            logger.debug("%s -> %s", qualname, describe(result))
            return result

        setattr(wrapper, "_debug_logging_wrapped", True)
        return cast(F, wrapper)

    return decorator


def apply_debug_logging(
    namespace: MutableMapping[str, Any],
    *,
    logger: Optional[logging.Logger] = None,
    skip: Optional[Iterable[str]] = None,
) -> None:
    """Wrap the public module level functions defined in ``namespace``."""

    module_name = namespace.get("__name__")
    logger = logger or logging.getLogger(module_name if isinstance(module_name, str) else __name__)
    skip_set: Set[str] = set(skip or [])

    for attr, value in list(namespace.items()):
        if attr.startswith("_") or attr in skip_set:
            continue
        if inspect.isfunction(value) and value.__module__ == module_name:
            namespace[attr] = debug_log_call(logger, name=attr)(value)


__all__ = ["apply_debug_logging", "debug_log_call", "describe"]
