import dataclasses
import json

from pydantic import BaseModel

from safe_errors.errors.guards import is_composite, is_error
from safe_errors.errors.models import NormalizedError

UNEXPECTED_PREFIX = "Unexpected value thrown: "
NON_STRINGIFIABLE = "non-stringifiable object"


def _jsonable(value: object) -> object:
    """``json.dumps`` fallback for values it cannot encode natively."""
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return dataclasses.asdict(value)
    if isinstance(value, BaseModel):
        return value.model_dump(mode="json")
    if isinstance(value, (set, frozenset)):
        return list(value)
    if hasattr(value, "__dict__"):
        return vars(value)
    raise TypeError(f"Object of type {type(value).__name__} is not JSON serializable")


def _describe(value: object) -> str:
    if is_composite(value):
        return json.dumps(value, separators=(",", ":"), default=_jsonable)
    return str(value)


def to_normalized_error(value: object) -> NormalizedError:
    """Convert any raised value into a ``NormalizedError``. Never raises."""
    if is_error(value):
        return NormalizedError(value)
    try:
        return NormalizedError(Exception(UNEXPECTED_PREFIX + _describe(value)), value)
    except Exception:
        return NormalizedError(Exception(UNEXPECTED_PREFIX + NON_STRINGIFIABLE), value)
