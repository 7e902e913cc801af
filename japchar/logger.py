import logging
import sys
from typing import Optional

from japchar import LOG_LEVEL


def resolve_level(name: str) -> Optional[int]:
    """Return the numeric logging level for *name*, or None if it is unknown."""
    level = logging.getLevelName(str(name).upper())
    return level if isinstance(level, int) else None


logger = logging.getLogger("japchar")
logger.propagate = False

level = resolve_level(LOG_LEVEL)
logger.setLevel(level if level is not None else logging.INFO)

if not logger.handlers:
    stdout_handler = logging.StreamHandler(sys.stdout)
    stderr_handler = logging.StreamHandler(sys.stderr)

    stdout_handler.setLevel(logging.DEBUG)    # everything below WARNING
    stdout_handler.addFilter(lambda record: record.levelno < logging.WARNING)
    stderr_handler.setLevel(logging.WARNING)  # WARNING and above

    formatter = logging.Formatter("%(asctime)s - %(levelname)s - %(message)s")
    stdout_handler.setFormatter(formatter)
    stderr_handler.setFormatter(formatter)

    logger.addHandler(stdout_handler)
    logger.addHandler(stderr_handler)

if level is None:
    logger.warning(f"⚠️ Unknown JAPCHAR_LOG_LEVEL '{LOG_LEVEL}', using INFO")
