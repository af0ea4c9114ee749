import os
import sys

from loguru import logger

from join_gate.config import (
    LOG_FILE_NAME,
    LOG_FILE_PATH,
    LOG_LEVEL,
    LOG_RETENTION,
    LOG_ROTATION,
)

log_path = os.path.join(LOG_FILE_PATH, LOG_FILE_NAME)

# console and file both follow LOG_LEVEL
logger.remove()
logger.add(sys.stderr, level=LOG_LEVEL)
logger.add(
    log_path,
    level=LOG_LEVEL,
    rotation=LOG_ROTATION,
    retention=LOG_RETENTION,
    compression="zip",
)
logger.debug(f"Logging to {log_path} at level {LOG_LEVEL}")
