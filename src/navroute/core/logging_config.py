import logging
import sys


def setup_logging(verbose: bool = False):
    """
    Configure logging for the navroute package.

    Logs go to stderr with level and module name so that decoded
    coordinates on stdout stay pipeable; verbose switches to DEBUG.
    """
    logger = logging.getLogger("navroute")
    logger.setLevel(logging.DEBUG if verbose else logging.INFO)

    # Replace handlers from an earlier call; they may hold a stale stream
    for handler in list(logger.handlers):
        logger.removeHandler(handler)

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter("%(levelname)s %(name)s: %(message)s"))
    logger.addHandler(handler)

    # Reduce HTTP connection noise in logs
    logging.getLogger("urllib3").setLevel(logging.WARNING)

    return logger
