"""Structured error logging with an injectable writer."""

import traceback
from collections.abc import Mapping
from datetime import datetime, timezone

from safe_errors.config.settings import Settings
from safe_errors.logging.base import BaseErrorWriter
from safe_errors.logging.factory import ErrorWriterFactory
from safe_errors.logging.logger import Log
from safe_errors.logging.models import (
    NO_NAME,
    NO_STACK,
    ErrorDetails,
    ErrorRecord,
)

_default_writer: BaseErrorWriter | None = None
_default_context: str | None = None


def get_default_writer() -> BaseErrorWriter:
    """Return the process-wide writer, building it from settings on first use."""
    global _default_writer
    if _default_writer is None:
        _default_writer = ErrorWriterFactory.create(Settings())
    return _default_writer


def set_default_writer(writer: BaseErrorWriter | None) -> None:
    """Replace the process-wide writer; ``None`` resets it to the settings default."""
    global _default_writer
    _default_writer = writer


def set_default_context(context: str | None) -> None:
    global _default_context
    _default_context = context


def _details(exc: BaseException) -> ErrorDetails:
    stack = None
    if exc.__traceback__ is not None:
        stack = "".join(traceback.format_exception(exc)).rstrip("\n")
    return ErrorDetails(
        name=type(exc).__name__ or NO_NAME,
        message=str(exc),
        stack=stack or NO_STACK,
    )


def build_record(
    error: object,
    context: str,
    extra_info: Mapping[str, object] | None = None,
) -> ErrorRecord:
    """Build the structured record for an error without emitting it."""
    exc = error if isinstance(error, BaseException) else Exception(str(error))
    return ErrorRecord(
        timestamp=datetime.now(timezone.utc).isoformat(),
        context=context,
        error=_details(exc),
        extra_info=dict(extra_info or {}),
    )


def log_error(
    error: object,
    context: str | None = "General context",
    extra_info: Mapping[str, object] | None = None,
    *,
    writer: BaseErrorWriter | None = None,
) -> None:
    """Emit one structured record describing ``error``. Never raises.

    Args:
        error: Any value. Exceptions are used as-is, anything else is
            wrapped in a generic ``Exception`` built from its string form.
        context: Label for the call site or operation. ``None`` uses the
            configured default context.
        extra_info: Additional diagnostic key/value pairs, recorded verbatim.
        writer: Sink for the record. Defaults to the process-wide writer.
    """
    try:
        if context is None:
            context = _default_context or Settings().default_context
        record = build_record(error, context, extra_info)
        (writer or get_default_writer()).write(record)
    except Exception as exc:
        Log.warning(f"Failed to write error record for context '{context}': {exc}")
