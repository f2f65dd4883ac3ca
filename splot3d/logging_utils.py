from __future__ import annotations

import inspect
import logging
import reprlib
from functools import wraps
from typing import Any, Callable, Iterable, MutableMapping, Optional, Sequence, Set, TypeVar, cast

import numpy as np

F = TypeVar("F", bound=Callable[..., Any])

_repr = reprlib.Repr()
_repr.maxother = 160
_repr.maxlist = 6
_repr.maxtuple = 6
_repr.maxdict = 6
_repr.maxstring = 80


def _safe_repr(value: Any, *, max_length: int = 300) -> str:
    if isinstance(value, np.ndarray):
        if value.size == 0:
            return f"ndarray(shape={tuple(value.shape)}, dtype={value.dtype})"
        return (
            f"ndarray(shape={tuple(value.shape)}, dtype={value.dtype}, "
            f"min={float(value.min()):.6g}, max={float(value.max()):.6g})"
        )
    if isinstance(value, (list, tuple)) and len(value) > 3 and not isinstance(value[0], (int, float)):
        # long primitive/group lists are only worth a count
        return f"{type(value).__name__}(len={len(value)})"
    rendered = _repr.repr(value)
    if len(rendered) > max_length:
        return rendered[:max_length] + "... (truncated)"
    return rendered


def _format_arguments(args: Sequence[Any], kwargs: MutableMapping[str, Any]) -> str:
    parts = [_safe_repr(arg) for arg in args]
    parts.extend(f"{key}={_safe_repr(value)}" for key, value in kwargs.items())
    return ", ".join(parts) if parts else "no-args"


def debug_log_call(
    logger: logging.Logger, *, name: Optional[str] = None, log_result: bool = True
) -> Callable[[F], F]:
    """Return a decorator that emits DEBUG logs on entry and exit of the call."""

    def decorator(func: F) -> F:
        if getattr(func, "_debug_logging_wrapped", False):
            return func

        qualname = name or getattr(func, "__qualname__", func.__name__)

        @wraps(func)
        def wrapper(*args: Any, **kwargs: Any):
            if not logger.isEnabledFor(logging.DEBUG):
                return func(*args, **kwargs)
            logger.debug("Entering %s (%s)", qualname, _format_arguments(args, kwargs))
            try:
                result = func(*args, **kwargs)
            except Exception:
                logger.exception("Exception in %s", qualname)
                raise
            if log_result:
                logger.debug("Exiting %s -> %s", qualname, _safe_repr(result))
            else:
                logger.debug("Exiting %s", qualname)
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
    """Wrap the public and private functions defined in a module with DEBUG tracing.

    Classes and imported callables are left untouched.
    """

    module_name = namespace.get("__name__")
    logger = logger or logging.getLogger(module_name or __name__)
    skip_set: Set[str] = set(skip or ())

    for attr_name, value in list(namespace.items()):
        if attr_name in skip_set:
            continue
        if inspect.isfunction(value) and value.__module__ == module_name:
            namespace[attr_name] = debug_log_call(logger, name=attr_name)(value)
