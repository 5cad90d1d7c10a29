import logging
import sys
import traceback

from colorlog import ColoredFormatter

LOGGER_NAME = "multicloud_echo"


def setup_logger(debug_mode=False):
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(logging.DEBUG if debug_mode else logging.INFO)

    # Create colored formatter
    formatter = ColoredFormatter(
        "%(log_color)s[%(levelname)s] %(message)s",
        log_colors={
            "DEBUG":    "cyan",
            "INFO":     "green",
            "WARNING":  "yellow",
            "ERROR":    "red",
            "CRITICAL": "red,bg_white",
        }
    )

    if not logger.handlers:
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    for handler in logger.handlers:
        handler.setLevel(logging.DEBUG if debug_mode else logging.INFO)

    return logger


def print_stack_trace():
    """
    Log the current stack trace if debug mode is enabled.
    """
    if logger.isEnabledFor(logging.DEBUG):
        logger.error(traceback.format_exc())


def configure_logger(mode: str = ""):
    """
    Re-setup the logger from a settings mode string ("DEBUG" enables debug).
    """
    global logger
    debug_mode = mode.upper() == "DEBUG"
    logger = setup_logger(debug_mode=debug_mode)
    if debug_mode:
        logger.debug("Debug mode is active.")
    return logger


# Logger defaults to INFO unless reconfigured later.
logger = setup_logger(debug_mode=False)
