"""Structural type guards for values that were raised or returned."""

import inspect
from collections.abc import Mapping

MISSING = object()
"""Marker for a field that is absent on the inspected value."""

_PRIMITIVES = (str, bytes, bytearray, int, float, complex, bool)


def get_field(value: object, name: str) -> object:
    """Read a field from a mapping key or an attribute, or return MISSING.

    Never raises: properties or ``__getattr__`` hooks that fail are treated
    as an absent field.
    """
    try:
        if isinstance(value, Mapping):
            return value.get(name, MISSING)
        return getattr(value, name, MISSING)
    except Exception:
        return MISSING


def _get_attribute(value: object, name: str) -> object:
    """Attribute-only lookup; mapping keys never count as methods."""
    try:
        return getattr(value, name, MISSING)
    except Exception:
        return MISSING


def is_composite(value: object) -> bool:
    """True for non-None values that are not primitives or callables."""
    if value is None or isinstance(value, _PRIMITIVES):
        return False
    return not callable(value)


def is_error(value: object) -> bool:
    """Check whether a value is an error, nominally or by shape.

    Exceptions always qualify. Any other composite value qualifies when it
    carries text ``message`` and ``stack`` fields, so error payloads that
    crossed a process boundary as plain dicts are still recognized.
    """
    if isinstance(value, BaseException):
        return True
    if not is_composite(value):
        return False
    return isinstance(get_field(value, "message"), str) and isinstance(
        get_field(value, "stack"), str
    )


def is_normalized_error(value: object) -> bool:
    """Check whether a value is shaped like a ``NormalizedError``."""
    return (
        is_error(value)
        and get_field(value, "original_value") is not MISSING
        and get_field(value, "stack") not in (MISSING, None)
    )


def is_promise(value: object) -> bool:
    """Check whether a call result is a deferred value.

    Awaitables (coroutines, futures, tasks) and thenable objects exposing
    callable ``then`` and ``catch`` members both count.
    """
    if not is_composite(value):
        return False
    if inspect.isawaitable(value):
        return True
    return callable(_get_attribute(value, "then")) and callable(
        _get_attribute(value, "catch")
    )
