"""Error normalization, safe execution and structured error logging."""

from safe_errors.config.settings import Settings
from safe_errors.errors.guards import is_error, is_normalized_error, is_promise
from safe_errors.errors.models import HttpError, NormalizedError
from safe_errors.errors.normalizer import to_normalized_error
from safe_errors.execution.no_throw import no_throw, no_throw_call
from safe_errors.logging.base import BaseErrorWriter
from safe_errors.logging.error_logger import (
    log_error,
    set_default_context,
    set_default_writer,
)
from safe_errors.logging.logger import Log
from safe_errors.logging.models import ErrorDetails, ErrorRecord
from safe_errors.logging.writers import LogErrorWriter, StreamErrorWriter


def configure(settings: Settings | None = None) -> None:
    """Configure logging from settings and reset the default error writer."""
    settings = settings or Settings()
    Log.configure(settings.log_level, settings.log_stream)
    set_default_writer(None)
    set_default_context(settings.default_context)


__all__ = [
    "BaseErrorWriter",
    "ErrorDetails",
    "ErrorRecord",
    "HttpError",
    "Log",
    "LogErrorWriter",
    "NormalizedError",
    "Settings",
    "StreamErrorWriter",
    "configure",
    "is_error",
    "is_normalized_error",
    "is_promise",
    "log_error",
    "no_throw",
    "no_throw_call",
    "set_default_context",
    "set_default_writer",
    "to_normalized_error",
]
