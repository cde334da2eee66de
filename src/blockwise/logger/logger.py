"""Package loggers for blockwise.

``logger`` carries warnings and errors and starts at ``WARNING``; its level is
then set from :class:`blockwise.core.config.Settings`. ``trace_logger`` is a
child that always passes ``DEBUG`` records up to the package handler, so call
summaries appear whenever tracing is switched on, whatever the package level.
"""

import logging
import sys

__all__ = ["logger", "trace_logger", "resolve_level", "setup_logger"]

DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
HANDLER_NAME = "blockwise.stdout"


def resolve_level(level: str) -> int:
    """Translate a level name such as ``"debug"`` into its numeric value.

    Raises:
        ValueError: If ``level`` is not a registered logging level name.
    """
    value = logging.getLevelName(level.upper())
    if not isinstance(value, int):
        raise ValueError(f"Unknown log level '{level}'.")
    return value


def setup_logger(
    name: str = "blockwise",
    level: str = "WARNING",
    format_string: str | None = None,
) -> logging.Logger:
    """
    Configure and return a logger writing to stdout.

    The handler is attached once; later calls return the same logger untouched.

    Args:
        name: Logger name
        level: Log level name (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        format_string: Custom format string

    Returns:
        Configured logger instance
    """
    numeric_level = resolve_level(level)
    logger = logging.getLogger(name)

    if not any(h.get_name() == HANDLER_NAME for h in logger.handlers):
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(
            logging.Formatter(
                fmt=format_string or DEFAULT_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"
            )
        )
        handler.set_name(HANDLER_NAME)
        logger.addHandler(handler)
        logger.setLevel(numeric_level)
        logger.propagate = False

    return logger


logger = setup_logger()

trace_logger = logger.getChild("trace")
trace_logger.setLevel(logging.DEBUG)
