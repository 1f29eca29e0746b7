import logging

import pytest

from py_raymath import Settings
from py_raymath.logger import logger

logger.setLevel(logging.DEBUG)


@pytest.fixture(autouse=True)
def restore_settings():
    """Every test starts and ends with the default storage cutoff."""
    Settings.restore_defaults()
    yield
    Settings.restore_defaults()
