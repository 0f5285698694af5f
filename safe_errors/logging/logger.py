import logging
import sys


class Log:
    """Centralized logging with structured format."""

    _logger: logging.Logger = logging.getLogger("safe_errors")

    STREAMS = {"stderr": lambda: sys.stderr, "stdout": lambda: sys.stdout}

    @classmethod
    def configure(cls, log_level: str, stream: str = "stderr") -> None:
        """Configure the logger level and attach a single stream handler."""
        resolve = cls.STREAMS.get(stream.lower())
        if resolve is None:
            raise ValueError(
                f"Unknown log stream '{stream}'. Choose from: {list(cls.STREAMS)}"
            )
        cls._logger.setLevel(log_level.upper())
        for handler in list(cls._logger.handlers):
            cls._logger.removeHandler(handler)
        handler = logging.StreamHandler(resolve())
        handler.setFormatter(
            logging.Formatter("%(asctime)s [%(levelname)s] %(message)s")
        )
        cls._logger.addHandler(handler)

    @classmethod
    def error(cls, message: str, **kwargs: object) -> None:
        """Log an error message."""
        cls._logger.error(message, extra=kwargs)

    @classmethod
    def warning(cls, message: str, **kwargs: object) -> None:
        """Log a warning message."""
        cls._logger.warning(message, extra=kwargs)
