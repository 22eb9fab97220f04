import logging
import sys

from config import get_log_level

# Application-wide logger; modules use logger.getChild(__name__) or this instance directly.
logger = logging.getLogger("practice_exam")

# Unknown level names fall back to INFO
log_level = getattr(logging, get_log_level(), None)
if not isinstance(log_level, int):
    log_level = logging.INFO
logger.setLevel(log_level)

# Streamlit re-imports on hot reload, so drop any handler left from a previous run
if logger.hasHandlers():
    logger.handlers.clear()

handler = logging.StreamHandler(sys.stdout)
handler.setFormatter(logging.Formatter('%(asctime)s - %(name)s - %(levelname)s - %(message)s'))
logger.addHandler(handler)

# Keep messages out of the root logger to avoid double printing
logger.propagate = False
