import logging
import sys

from environs import Env

from .log_filters import TruncatingFilter

URL_LOGGERS = ("httpx", "rrl_profile.infrastructure.api.clients")
URL_LOG_LENGTH = 105


def setup_logging(env: Env) -> None:
    """Set up logging configuration."""
    if logging.root.handlers:  # Check if logging is already configured
        return

    log_level_str = env.str("LOGGING_LEVEL", "INFO").upper()

    # DEBUG flag overrides log level when set to True
    debug_mode = env.bool("DEBUG", default=False)
    if debug_mode:
        log_level_str = "DEBUG"

    numeric_level = getattr(logging, log_level_str, None)
    if not isinstance(numeric_level, int):
        raise ValueError(f"Invalid log level: {log_level_str}")

    logging.basicConfig(
        level=numeric_level,
        format="[%(asctime)s] [%(levelname)s] [%(name)s] %(message)s",
        stream=sys.stdout,
    )

    # Elevation request URLs carry up to a full batch of coordinates
    for name in URL_LOGGERS:
        url_logger = logging.getLogger(name)
        url_logger.setLevel(numeric_level)
        url_logger.addFilter(TruncatingFilter(max_length=URL_LOG_LENGTH))

    # Our client already logs each request and response
    logging.getLogger("httpx").propagate = False
    logging.getLogger("httpcore").setLevel(numeric_level)


def get_logger(name: str) -> logging.Logger:
    """Get a logger instance."""
    return logging.getLogger(name)
