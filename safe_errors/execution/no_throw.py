"""Run callables without letting exceptions escape.

``try``/``except`` blocks at every call site are noisy and leak scope. These
helpers return either the action's result or a ``NormalizedError``, so the
caller branches on the value instead.
"""

import inspect
from collections.abc import Awaitable, Callable, Coroutine
from typing import Any, ParamSpec, TypeVar, overload

from safe_errors.errors.guards import is_promise
from safe_errors.errors.models import NormalizedError
from safe_errors.errors.normalizer import to_normalized_error

T = TypeVar("T")
P = ParamSpec("P")


async def _settle(awaitable: Awaitable[T]) -> T | NormalizedError:
    try:
        return await awaitable
    except Exception as exc:
        return to_normalized_error(exc)


def _capture(result: Any) -> Any:
    if not is_promise(result):
        return result
    if inspect.isawaitable(result):
        return _settle(result)
    return result.catch(to_normalized_error)


@overload
def no_throw(
    action: Callable[[], Awaitable[T]],
) -> Coroutine[Any, Any, T | NormalizedError]: ...


@overload
def no_throw(action: Callable[[], T]) -> T | NormalizedError: ...


def no_throw(action: Callable[[], Any]) -> Any:
    """Perform an action without raising.

    Args:
        action: Zero-argument callable to invoke once.

    Returns:
        The action's result, or a ``NormalizedError`` if it raised. When the
        action returns an awaitable, a coroutine that resolves to the
        eventual value or to a ``NormalizedError`` is returned instead.
    """
    try:
        return _capture(action())
    except Exception as exc:
        return to_normalized_error(exc)


@overload
def no_throw_call(
    func: Callable[P, Awaitable[T]], *args: P.args, **kwargs: P.kwargs
) -> Coroutine[Any, Any, T | NormalizedError]: ...


@overload
def no_throw_call(
    func: Callable[P, T], *args: P.args, **kwargs: P.kwargs
) -> T | NormalizedError: ...


def no_throw_call(func: Callable[..., Any], *args: Any, **kwargs: Any) -> Any:
    """Like ``no_throw`` but passes arguments through to ``func``."""
    return no_throw(lambda: func(*args, **kwargs))
