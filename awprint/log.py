"""
Awprint logging setup.

Modules log through ``logging.getLogger(__name__)``; degraded rendering paths
(members that can not be reflected, failed ``to_dict()`` conversions, unreadable
files) are reported at DEBUG level. setup_logging() installs a colored stderr
handler, with the level taken from AWPRINT_LOG_LEVEL unless given explicitly.
"""

# Standard library -----------------------------------------------------------------------------------------------------
import logging
import os
import sys

# Third-party ----------------------------------------------------------------------------------------------------------
from yachalk import chalk

LOG_FORMAT = "[%(levelname)s] %(message)s"
DEBUG_LOG_FORMAT = "[%(levelname)s] [%(name)s:%(lineno)d] %(message)s"

ENV_LOG_LEVEL = "AWPRINT_LOG_LEVEL"


# Classes --------------------------------------------------------------------------------------------------------------

class ChalkFormatter(logging.Formatter):
    """Formatter that colors log records by severity."""

    def format(self, record: logging.LogRecord) -> str:
        message = super().format(record)
        if record.levelno >= logging.CRITICAL:
            return chalk.red_bright(message)
        if record.levelno >= logging.ERROR:
            return chalk.red(message)
        if record.levelno >= logging.WARNING:
            return chalk.yellow(message)
        if record.levelno >= logging.INFO:
            return chalk.green(message)
        return chalk.gray(message)


# Methods --------------------------------------------------------------------------------------------------------------

def resolve_env_log_level() -> int | None:
    """
    Return the logging level named by AWPRINT_LOG_LEVEL, None if unset or invalid.

    Accepts level names ("DEBUG", "warning") and numbers ("10").
    """
    value = os.environ.get(ENV_LOG_LEVEL, "").strip().upper()
    if not value:
        return None
    if value.isdigit():
        return int(value)
    level = logging.getLevelName(value)
    return level if isinstance(level, int) else None


def setup_logging(level: int | None = None) -> logging.Logger:
    """
    Configure the 'awprint' logger with a colored stderr handler.

    Args:
        level: Logging level; AWPRINT_LOG_LEVEL or WARNING when None.

    Returns:
        The configured 'awprint' logger.
    """
    if level is None:
        level = resolve_env_log_level() or logging.WARNING

    logger = logging.getLogger("awprint")
    logger.setLevel(level)
    for handler in logger.handlers[:]:
        logger.removeHandler(handler)

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(ChalkFormatter(LOG_FORMAT if level >= logging.INFO else DEBUG_LOG_FORMAT))
    logger.addHandler(handler)
    logger.propagate = False
    return logger
