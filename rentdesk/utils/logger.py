import logging

from rentdesk.config import LOG_LEVEL

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(level: str = LOG_LEVEL) -> logging.Logger:
    """
    Configure the ``rentdesk`` logger hierarchy.

    Modules log through ``logging.getLogger(__name__)``; this only attaches a
    console handler to the package root so their records get printed.
    Calling it more than once does not add duplicate handlers.
    """
    logger = logging.getLogger("rentdesk")
    logger.setLevel(level)

    if logger.handlers:
        return logger

    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT))
    logger.addHandler(handler)
    logger.propagate = False

    logger.debug("Logging initialized at level %s", level)
    return logger
