import traceback

from safe_errors.errors.guards import MISSING, get_field


def _message_of(error: object) -> str:
    if isinstance(error, BaseException):
        try:
            return str(error)
        except Exception:
            return type(error).__name__
    message = get_field(error, "message")
    return message if isinstance(message, str) else ""


def _stack_of(error: object) -> str | None:
    stack = get_field(error, "stack")
    if isinstance(stack, str):
        return stack
    if isinstance(error, BaseException) and error.__traceback__ is not None:
        return "".join(traceback.format_exception(error)).rstrip("\n")
    return None


def _header_of(error: object) -> str:
    if isinstance(error, BaseException):
        return "".join(traceback.format_exception_only(error)).strip()
    return type(error).__name__


class NormalizedError(Exception):
    """Uniform wrapper around any value that was raised.

    ``stack`` is the original trace, or the message when none is available.
    With no trace and an empty message it falls back to the error header,
    so it is never empty.
    ``original_value`` is the raw value that was raised, or the wrapped error
    itself when it was already error-like.
    """

    name = "NormalizedError"

    def __init__(self, error: object, original_value: object = MISSING) -> None:
        message = _message_of(error)
        super().__init__(message)
        self.message = message
        self.stack: str = _stack_of(error) or message or _header_of(error)
        self.original_value = error if original_value is MISSING else original_value
        if isinstance(error, BaseException):
            self.__cause__ = error

    def __str__(self) -> str:
        return self.message

    def to_dict(self) -> dict[str, str]:
        return {"name": self.name, "message": self.message, "stack": self.stack}


class HttpError(Exception):
    """Failure tagged with an HTTP status code."""

    def __init__(self, status: int, message: str) -> None:
        super().__init__(message)
        self.status = status
        self.message = message

    def __str__(self) -> str:
        return self.message
