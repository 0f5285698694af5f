from abc import ABC, abstractmethod

from safe_errors.logging.models import ErrorRecord


class BaseErrorWriter(ABC):
    """Contract for sinks that receive structured error records."""

    @abstractmethod
    def write(self, record: ErrorRecord) -> None:
        """Emit one record to the diagnostic output."""
