import logging
import os
from typing import Optional

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(*, level: Optional[str] = None) -> None:
    """Configure root logging once; level falls back to LOG_LEVEL, then INFO."""

    if level is None:
        level = os.getenv("LOG_LEVEL", "INFO")
    level = level.upper()

    root_logger = logging.getLogger()
    if not root_logger.handlers:
        logging.basicConfig(level=level, format=LOG_FORMAT)
    root_logger.setLevel(level)
