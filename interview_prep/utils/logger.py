# interview_prep/utils/logger.py
import logging
import sys
from interview_prep.utils.config import settings


def resolve_level(name: str) -> int:
    """Maps a level name such as 'debug' or 'WARNING' to its number; unknown names give INFO."""
    level = logging.getLevelName(str(name).strip().upper())
    return level if isinstance(level, int) else logging.INFO


logger = logging.getLogger("interview_prep")
logger.setLevel(resolve_level(settings.log_level))

# uvicorn --reload imports this module again; start from a clean handler list.
if logger.hasHandlers():
    logger.handlers.clear()

handler = logging.StreamHandler(sys.stdout)
handler.setFormatter(logging.Formatter('%(asctime)s - %(name)s - %(levelname)s - %(message)s'))
logger.addHandler(handler)

# Handled here only; the root logger would print everything a second time.
logger.propagate = False
