# bsx_utils/logging_setup.py
import logging
from typing import Literal, Optional

Level = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"


def resolve_level(configured: Optional[str], *, quiet: bool = False, verbose: bool = False) -> str:
    """--verbose beats --quiet beats the [logging] level from config."""
    if verbose:
        return "DEBUG"
    if quiet:
        return "WARNING"
    level = str(configured or "INFO").upper()
    return level if isinstance(logging.getLevelName(level), int) else "INFO"


def setup_logging(level: Level = "INFO") -> None:
    numeric = getattr(logging, str(level).upper(), logging.INFO)
    logging.basicConfig(level=numeric, format=LOG_FORMAT)
    # basicConfig is a no-op once handlers exist
    logging.getLogger().setLevel(numeric)
