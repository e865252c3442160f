import logging
import sys


PACKAGE_LOGGER = "leaderboard_sort"
CONSOLE_HANDLER = "leaderboard_sort.console"


def setup_logging(level: str = "WARNING") -> logging.Logger:
    """Install the console handler on the package logger, replacing any earlier one.

    The handler is rebuilt on every call so it writes to the current
    sys.stderr; test runners and embedding apps swap it between invocations.
    """
    logger = logging.getLogger(PACKAGE_LOGGER)

    log_level = logging.getLevelName(level.upper())
    if not isinstance(log_level, int):
        log_level = logging.WARNING
    logger.setLevel(log_level)

    for handler in list(logger.handlers):
        if handler.get_name() == CONSOLE_HANDLER:
            logger.removeHandler(handler)

    formatter = logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )

    # stderr keeps stdout clean for the rendered table
    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.set_name(CONSOLE_HANDLER)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    return logger
