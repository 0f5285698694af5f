import json
import sys
from typing import TextIO

from safe_errors.logging.base import BaseErrorWriter
from safe_errors.logging.logger import Log
from safe_errors.logging.models import ErrorRecord


def encode_record(record: ErrorRecord) -> str:
    """Render a record as a single JSON line; falls back to ``repr``."""
    payload = record.to_dict()
    try:
        return json.dumps(payload, default=str, ensure_ascii=False)
    except (TypeError, ValueError):
        return repr(payload)


class LogErrorWriter(BaseErrorWriter):
    """Sends records through the package logger at ERROR level."""

    def write(self, record: ErrorRecord) -> None:
        Log.error(encode_record(record), error_record=record.to_dict())


class StreamErrorWriter(BaseErrorWriter):
    """Writes records as JSON lines to a text stream."""

    def __init__(self, stream: TextIO | None = None) -> None:
        self._stream = stream

    def write(self, record: ErrorRecord) -> None:
        stream = self._stream if self._stream is not None else sys.stderr
        stream.write(encode_record(record) + "\n")
        stream.flush()
