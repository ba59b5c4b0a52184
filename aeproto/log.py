"""
AEPROTO Logging Setup
"""

import logging

from .config import Config, ConfigError


LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"

# Logger that receives one record per decoded header
DECODE_LOGGER = "aeproto.packet.format"


def setup_logging(config: Config) -> None:
    """
    Configure root logging from config.

    Raises:
        ConfigError: If the config is invalid or the log file cannot be opened
    """
    config.validate()

    handlers = [logging.StreamHandler()]
    if config.logging.file:
        try:
            handlers.append(logging.FileHandler(config.logging.file))
        except OSError as e:
            raise ConfigError(f"Cannot open log file {config.logging.file}: {e}") from e

    logging.basicConfig(
        level=getattr(logging, config.logging.level),
        format=LOG_FORMAT,
        handlers=handlers,
        force=True,
    )

    decode_logger = logging.getLogger(DECODE_LOGGER)
    if config.logging.decode_events:
        decode_logger.setLevel(logging.NOTSET)
    else:
        decode_logger.setLevel(logging.WARNING)
