"""Shared pytest fixtures."""

import logging

import pytest


@pytest.fixture(autouse=True)
def reset_engine_logger():
    """Remove handlers installed by setup_logging so tests stay independent."""
    yield
    logger = logging.getLogger("pine_engine")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.setLevel(logging.NOTSET)
