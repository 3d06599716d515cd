"""Logging configuration for the bank accounts core."""

import logging

from config.settings import Settings

LOGGER_NAME = 'src'


def configure_logging(settings: Settings) -> logging.Logger:
    """
    Attach a handler to the package logger using the configured settings.

    Any handler installed by an earlier call is replaced, so calling this
    more than once never duplicates output.

    Args:
        settings: The settings providing level, format and optional log file

    Returns:
        The configured package logger
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(settings.log_level)

    for handler in logger.handlers[:]:
        logger.removeHandler(handler)
        handler.close()

    if settings.log_file:
        handler = logging.FileHandler(filename=settings.log_file, encoding='utf-8', mode='a')
    else:
        handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(settings.log_format))
    logger.addHandler(handler)
    return logger
