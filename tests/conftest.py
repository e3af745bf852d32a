import sys

import pytest
from loguru import logger


@pytest.fixture
def reset_logger():
    yield
    logger.remove()
    logger.add(sys.stderr)
