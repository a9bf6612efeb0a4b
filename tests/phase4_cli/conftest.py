"""Fixtures for CLI tests."""

import pytest

from subsearch.utils.logger import disable_logging, logger


@pytest.fixture(autouse=True)
def reset_logging():
    """Drop the sinks a CLI invocation installs on the runner's streams."""
    yield
    logger.remove()
    disable_logging()
