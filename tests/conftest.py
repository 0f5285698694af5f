from collections.abc import Generator

import pytest

from safe_errors.logging.error_logger import set_default_context, set_default_writer


@pytest.fixture(autouse=True)
def reset_error_logger() -> Generator[None, None, None]:
    """Keep the process-wide writer and context from leaking between tests."""
    set_default_writer(None)
    set_default_context(None)
    yield
    set_default_writer(None)
    set_default_context(None)
