from __future__ import annotations

import logging
from collections.abc import Iterator

import pytest

from circular import CircularVec
from circular.logging import PACKAGE_LOGGER_NAME, shutdown_circular_logging


@pytest.fixture
def numbers() -> CircularVec[int]:
    return CircularVec([50, 60, 70, 80])


@pytest.fixture
def package_logger() -> Iterator[logging.Logger]:
    logger = logging.getLogger(PACKAGE_LOGGER_NAME)
    original_handlers = list(logger.handlers)
    original_level = logger.level
    original_propagate = logger.propagate
    try:
        logger.handlers.clear()
        logger.setLevel(logging.NOTSET)
        yield logger
    finally:
        shutdown_circular_logging()
        logger.handlers.clear()
        logger.handlers.extend(original_handlers)
        logger.setLevel(original_level)
        logger.propagate = original_propagate
