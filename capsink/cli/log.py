import logging
from capsink.cli.conf import Configuration
from capsink.utils.constants import CAPSINK_NAME

CLI_LOGGER_NAME = f"{CAPSINK_NAME}.cli"


def configure_logging(conf: Configuration) -> logging.Logger:
    """Apply `conf.logging` and return the CLI logger.

    The level is set on the `capsink` logger only, other libraries keep
    whatever level the root logger has. Every root handler gets the configured
    format, a stderr handler is installed if there is none."""
    formatter = logging.Formatter(
        fmt=conf.logging.format,
        datefmt=conf.logging.datefmt)
    root_logger = logging.getLogger()
    if not root_logger.handlers:
        root_logger.addHandler(logging.StreamHandler())
    for handler in root_logger.handlers:
        handler.setFormatter(formatter)
    logging.getLogger(CAPSINK_NAME).setLevel(conf.logging.level.upper())
    return logging.getLogger(CLI_LOGGER_NAME)
