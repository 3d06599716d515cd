"""Configuration management for the bank accounts core."""
import logging
import os
from dataclasses import dataclass

from dotenv import find_dotenv, load_dotenv


@dataclass
class Settings:
    """Configuration settings for the bank accounts core.

    Values default to what the library uses when nothing is configured and
    can be overridden through environment variables or a .env file.
    """

    # Logging
    log_level: str = 'INFO'
    log_file: str | None = None
    log_format: str = '%(asctime)s:%(levelname)s:%(name)s: %(message)s'

    @classmethod
    def load(cls) -> 'Settings':
        """Load settings from environment variables.

        A .env file in the working directory is read first; variables
        already set in the environment take precedence.

        Returns:
            Settings: A Settings instance with values from environment variables.

        Raises:
            ValueError: If BANK_LOG_LEVEL is not a known logging level.
        """
        load_dotenv(find_dotenv(usecwd=True))

        log_level = (os.getenv('BANK_LOG_LEVEL') or cls.log_level).upper()
        if not isinstance(logging.getLevelName(log_level), int):
            raise ValueError(f"Unknown log level: {log_level}")

        return cls(
            log_level=log_level,
            log_file=os.getenv('BANK_LOG_FILE') or None,
        )
