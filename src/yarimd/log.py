"""
Logging setup using Loguru.

The library modules log through ``loguru.logger`` directly; this module only
decides where those records go and how much of them is shown. Call
``setup_logging()`` once from the entry point.

Verbosity levels:
    0 = warnings and errors only (default for the CLI)
    1 = per-stage substitutions (-v)
    2 = everything, including stages that found nothing (-vv)
"""

import sys

from loguru import logger


LOG_FORMAT = (
    "<green>{time:HH:mm:ss}</green> │ "
    "<level>{level: <7}</level> │ "
    "<cyan>{function: <24}</cyan> ║ "
    "<level>{message}</level>"
)

VERBOSITY_LEVELS = {0: "WARNING", 1: "INFO"}


def level_for(verbosity: int) -> str:
    """Map a -v count to a loguru level name."""
    if verbosity < 0:
        return "ERROR"
    return VERBOSITY_LEVELS.get(verbosity, "DEBUG")


def setup_logging(verbosity: int = 0, level: str | None = None) -> int:
    """
    Replace loguru's default handler with a single stderr sink.

    Args:
        verbosity: -v count from the command line
        level: explicit level name; wins over verbosity when given

    Returns:
        The handler id, so callers can remove it again.
    """
    logger.remove()
    return logger.add(sys.stderr, format=LOG_FORMAT, level=level or level_for(verbosity))
