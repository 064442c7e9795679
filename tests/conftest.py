"""Shared pytest fixtures."""

import logging
from collections.abc import Generator

import pytest


@pytest.fixture(autouse=True)
def reset_package_logger() -> Generator[None, None, None]:
    """Drop handlers added by configure_logging so tests stay independent."""
    yield
    logger = logging.getLogger("listing_enhancer")
    logger.handlers.clear()
    logger.setLevel(logging.NOTSET)
    logger.propagate = True
