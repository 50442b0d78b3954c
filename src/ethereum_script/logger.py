"""
Custom Logging Module
^^^^^^^^^^^^^^^^^^^^^
Provides a setup_logger function to configure logging using logger.cfg.
"""
import configparser
import logging
import logging.config
import os
from typing import Optional


def setup_logger(name: str, level: Optional[str] = None) -> logging.Logger:
    """
    Set up a logger with the provided name using the 'logger.cfg' file
    shipped with this package. `level`, when given, overrides the level of
    the returned logger.
    """
    config = configparser.ConfigParser()
    config.read(
        os.path.join(os.path.dirname(os.path.abspath(__file__)), "logger.cfg")
    )
    logging.config.fileConfig(config, disable_existing_loggers=False)

    logger = logging.getLogger(name)
    if level is not None:
        logger.setLevel(level.upper())

    return logger
