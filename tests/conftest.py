import logging
import random

import pytest

from ethermaker.core.application import LOGGER_NAME, Application


@pytest.fixture(autouse=True)
def fresh_application():
    Application.reset()
    yield
    Application.reset()

    logger = logging.getLogger(LOGGER_NAME)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)
    logger.propagate = True


@pytest.fixture
def app() -> Application:
    return Application.current()


@pytest.fixture
def rng() -> random.Random:
    return random.Random(0x5EED)
