"""Root logger setup for the console entry point."""
import logging
from typing import Optional

from people_lab.core.config import get_settings

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logging(level: Optional[str] = None) -> None:
    """
    Configure the root logger once.
    
    Args:
        level: Level name (e.g. "DEBUG"). Defaults to LOG_LEVEL from settings.
    """
    log_level = getattr(logging, (level or get_settings().log_level).upper(), logging.INFO)
    # Avoid adding duplicate handlers if setup_logging is called multiple times
    if not logging.getLogger().handlers:
        logging.basicConfig(level=log_level, format=LOG_FORMAT)
    else:
        logging.getLogger().setLevel(log_level)
