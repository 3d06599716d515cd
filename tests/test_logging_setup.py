"""Tests for logging configuration."""
import logging

import pytest

from config.settings import Settings
from src.logging_setup import LOGGER_NAME, configure_logging
from src.models.account import Account
from src.models.bank import Bank


@pytest.fixture(autouse=True)
def reset_logger():
    """Leave the package logger as it was found."""
    logger = logging.getLogger(LOGGER_NAME)
    level = logger.level
    handlers = logger.handlers[:]
    yield
    for handler in logger.handlers[:]:
        logger.removeHandler(handler)
        handler.close()
    for handler in handlers:
        logger.addHandler(handler)
    logger.setLevel(level)


def test_configure_logging_stream_handler():
    """Without a log file, output goes to a stream handler."""
    logger = configure_logging(Settings(log_level='DEBUG'))

    assert logger.name == LOGGER_NAME
    assert logger.level == logging.DEBUG
    assert len(logger.handlers) == 1
    assert type(logger.handlers[0]) is logging.StreamHandler


def test_configure_logging_twice_does_not_duplicate_handlers():
    """Reconfiguring replaces the previous handler."""
    configure_logging(Settings())
    logger = configure_logging(Settings(log_level='WARNING'))

    assert len(logger.handlers) == 1
    assert logger.level == logging.WARNING


def test_configure_logging_to_file(tmp_path):
    """Transfers are written to the configured log file."""
    log_file = tmp_path / 'bank.log'
    logger = configure_logging(Settings(log_level='INFO', log_file=str(log_file)))

    bank = Bank('Banco del Estado')
    bank.transfer(Account('John Doe', '300'), Account('Andrés Guzmán', '1000.12345'), '150')
    logger.handlers[0].flush()

    content = log_file.read_text(encoding='utf-8')
    assert ':INFO:src.models.bank: Transferred 150 from John Doe to Andrés Guzmán' in content
