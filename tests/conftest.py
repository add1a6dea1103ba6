"""
Shared fixtures.
"""

import logging

import pytest

from elastic_tabs import logging_config


@pytest.fixture(autouse=True)
def restore_package_logger():
    """Undo any setup_logging() a test performs."""
    logger = logging.getLogger(logging_config.LOGGER_NAME)
    handlers = list(logger.handlers)
    level = logger.level
    propagate = logger.propagate
    configured = logging_config._logger
    yield
    for handler in logger.handlers:
        if handler not in handlers:
            handler.close()
    logger.handlers[:] = handlers
    logger.setLevel(level)
    logger.propagate = propagate
    logging_config._logger = configured
