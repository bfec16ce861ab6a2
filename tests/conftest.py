import logging

import pytest


@pytest.fixture(autouse=True)
def reset_package_logger():
    # main() attaches a stderr handler; drop it so captured streams are not reused
    yield
    logger = logging.getLogger("shift_calendar")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    logger.propagate = True
    logger.setLevel(logging.NOTSET)
