"""Logging configuration for the backend."""
import logging
import sys
from typing import Optional
from shopstream.core.config import settings


def setup_logging(level: Optional[str] = None) -> None:
    """
    Configure application logging.
    
    Args:
        level: Log level name (defaults to settings.log_level)
    """
    level_name = (level or settings.log_level).upper()
    logging.basicConfig(
        level=getattr(logging, level_name, logging.INFO),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=[
            logging.StreamHandler(sys.stdout)
        ]
    )
    # Webhooks arrive on every publish; the access log duplicates our own lines
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)


logger = logging.getLogger("shopstream")
