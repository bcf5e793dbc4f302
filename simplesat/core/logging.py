import logging
import os
import sys
from typing import Optional, Union

LOG_LEVEL_ENV = "SIMPLESAT_LOG_LEVEL"
LOG_FORMAT = "%(asctime)s %(levelname)-7s [%(name)s] %(message)s"

def resolve_level(level: Union[int, str, None] = None) -> int:
    """Numeric level for ``level``, falling back to $SIMPLESAT_LOG_LEVEL, then WARNING."""
    if isinstance(level, int):
        return level
    name = (level or os.getenv(LOG_LEVEL_ENV) or "WARNING").upper()
    value = logging.getLevelName(name)
    return value if isinstance(value, int) else logging.WARNING

def get_logger(name: str, level: Optional[Union[int, str]] = None) -> logging.Logger:
    """
    Logger writing to stderr. Loggers below ``simplesat`` share the package
    logger's handler, so only that one gets a handler of its own.
    """
    logger = logging.getLogger(name)
    logger.setLevel(resolve_level(level))

    root_name = name.split(".", 1)[0]
    if root_name != "simplesat" or name == "simplesat":
        if not logger.handlers:
            handler = logging.StreamHandler(sys.stderr)
            handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt="%H:%M:%S"))
            logger.addHandler(handler)
        logger.propagate = False
    return logger

def set_level(level: Union[int, str]) -> None:
    """Changes the level of every simplesat logger created so far."""
    value = resolve_level(level)
    for name, existing in logging.Logger.manager.loggerDict.items():
        if (name == "simplesat" or name.startswith("simplesat.")) and isinstance(existing, logging.Logger):
            existing.setLevel(value)

# Package logger; module loggers propagate to it
logger = get_logger("simplesat")
