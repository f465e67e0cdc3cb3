import logging

import pytest


@pytest.fixture(autouse=True)
def reset_rectscan_loggers():
    """Drop stream handlers bound to a previous test's captured stderr."""
    yield
    for name, logger in list(logging.Logger.manager.loggerDict.items()):
        if name.startswith("rectscan.") and isinstance(logger, logging.Logger):
            logger.handlers.clear()
