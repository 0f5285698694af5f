from safe_errors.config.settings import Settings
from safe_errors.logging.base import BaseErrorWriter
from safe_errors.logging.writers import LogErrorWriter, StreamErrorWriter


class ErrorWriterFactory:
    """Creates the correct error writer based on settings."""

    WRITERS: dict[str, type[BaseErrorWriter]] = {
        "log": LogErrorWriter,
        "stream": StreamErrorWriter,
    }

    @classmethod
    def create(cls, settings: Settings) -> BaseErrorWriter:
        name = settings.error_writer.lower()
        writer_cls = cls.WRITERS.get(name)
        if writer_cls is None:
            raise ValueError(
                f"Unknown error writer '{name}'. Choose from: {list(cls.WRITERS)}"
            )
        return writer_cls()
