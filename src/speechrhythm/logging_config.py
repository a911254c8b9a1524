"""
Logging Configuration
Sets up the package logger for the simulator and its command-line runner.

Normal runs log one short line per event. Debug runs (``--verbose``) also
report where in the model each line came from, which helps when tracing a
single unit through the sync and entrainment passes.
"""
import logging
import sys
from typing import Optional

LOGGER_NAME = "speechrhythm"

BRIEF_FORMAT = '%(asctime)s - %(levelname)s - %(message)s'
DEBUG_FORMAT = '%(asctime)s - %(name)s:%(funcName)s:%(lineno)d - %(levelname)s - %(message)s'


def make_formatter(level: int) -> logging.Formatter:
    """Brief format for INFO and above, source location for DEBUG."""
    fmt = DEBUG_FORMAT if level <= logging.DEBUG else BRIEF_FORMAT
    return logging.Formatter(fmt, datefmt='%H:%M:%S')


def setup_logging(level: int = logging.INFO, log_file: Optional[str] = None) -> logging.Logger:
    """
    Configures the logger for the 'speechrhythm' namespace.

    Args:
        level: Logging level (e.g. logging.DEBUG, logging.INFO)
        log_file: Optional path to save logs to a file. The file always gets
            the detailed format, whatever the console level.

    Returns:
        The configured package logger.
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)

    # Repeated setup (tests, repeated CLI calls) must not stack handlers
    for handler in list(logger.handlers):
        handler.close()
        logger.removeHandler(handler)

    # Results are printed to stdout, so the log goes to stderr
    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(level)
    console_handler.setFormatter(make_formatter(level))
    logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file, mode='w', encoding='utf-8')
        file_handler.setLevel(level)
        file_handler.setFormatter(make_formatter(logging.DEBUG))
        logger.addHandler(file_handler)

    logger.debug(f"Logging initialized at level {logging.getLevelName(level)}.")
    return logger
