import logging
import sys

from leetpatch.config import ParserSettings

PACKAGE_LOGGER = "leetpatch"
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

_HANDLER_ATTR = "_leetpatch_handler"


def setup_logging(
    level: int | None = None,
    settings: ParserSettings | None = None,
) -> logging.Logger:
    """
    Attach a stream handler to the `leetpatch` logger.

    The level comes from `level`, else from `settings.log_level`, else INFO.
    Propagation is disabled so records are not printed twice when the
    application also configures the root logger. Calling this again only
    updates the level.
    """

    if level is None:
        level = settings.log_level_value if settings is not None else logging.INFO

    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(level)
    logger.propagate = False

    if not any(getattr(h, _HANDLER_ATTR, False) for h in logger.handlers):
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        setattr(handler, _HANDLER_ATTR, True)
        logger.addHandler(handler)

    return logger


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)
