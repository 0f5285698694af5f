from dataclasses import dataclass, field

NO_NAME = "No name available"
NO_MESSAGE = "No message available"
NO_STACK = "No stack trace available"


@dataclass(frozen=True)
class ErrorDetails:
    """Serializable summary of a single error."""

    name: str = NO_NAME
    message: str = NO_MESSAGE
    stack: str = NO_STACK


@dataclass(frozen=True)
class ErrorRecord:
    """One structured error log entry."""

    timestamp: str
    context: str
    error: ErrorDetails
    extra_info: dict[str, object] = field(default_factory=dict)

    def to_dict(self) -> dict[str, object]:
        return {
            "timestamp": self.timestamp,
            "context": self.context,
            "error": {
                "name": self.error.name,
                "message": self.error.message,
                "stack": self.error.stack,
            },
            "extraInfo": self.extra_info,
        }
