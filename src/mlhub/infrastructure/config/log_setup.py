"""Process-wide logging setup."""
import logging

from mlhub.infrastructure.config.config_loader import LoggingConfig


def configure_logging(config: LoggingConfig) -> None:
    """Configure the root logger from ``config``.

    Safe to call more than once; later calls replace earlier handlers.
    """
    logging.basicConfig(
        level=config.numeric_level,
        format=config.format,
        force=True,
    )
