import logging

import pytest


@pytest.fixture
def clean_logger():
    """Give a test the strutil logger without handlers, restoring it afterwards."""
    logger = logging.getLogger("strutil")
    saved = (logger.handlers[:], logger.level, logger.propagate)
    logger.handlers.clear()
    yield logger
    logger.handlers[:] = saved[0]
    logger.setLevel(saved[1])
    logger.propagate = saved[2]
