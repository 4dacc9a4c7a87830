import sys
from loguru import logger

# =========================
# Logging (loguru)
# =========================
LOG_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {level:<7} | {name}:{function} | {message}"

def configure_logging(level="INFO", sink=None):
    level = str(level).upper()
    # check the level before dropping the current sinks
    try:
        logger.level(level)
    except ValueError:
        raise ValueError(f"Unknown log level: {level!r}") from None
    # drop loguru's default handler, then add one sink with our format
    logger.remove()
    logger.add(sink if sink is not None else sys.stderr, format=LOG_FORMAT, level=level)
    return logger
