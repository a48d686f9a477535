"""
repofetch logging utilities.

Library modules log through child loggers of ``repofetch`` and never attach
handlers themselves; applications (the CLI included) call
:func:`configure_logging` once.
"""

import logging

_package_logger = logging.getLogger("repofetch")

_DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

_configured_handler: logging.Handler | None = None


def configure_logging(
    level: int = logging.WARNING,
    handler: logging.Handler | None = None,
    format_string: str | None = None,
) -> logging.Handler:
    """
    Configure repofetch logging.

    Calling it again replaces the handler attached by the previous call, so
    each record is emitted once.

    Args:
        level: Log level for all repofetch loggers (default: WARNING)
        handler: Custom handler to use (default: StreamHandler to stderr)
        format_string: Custom format string (default: timestamp, logger name, level)

    Returns:
        The handler that was attached, so callers can detach it again.
    """
    global _configured_handler

    if handler is None:
        handler = logging.StreamHandler()

    handler.setFormatter(logging.Formatter(format_string or _DEFAULT_FORMAT))

    if _configured_handler is not None:
        _package_logger.removeHandler(_configured_handler)
    _package_logger.setLevel(level)
    _package_logger.addHandler(handler)
    _configured_handler = handler
    return handler


def get_logger(name: str | None = None) -> logging.Logger:
    """
    Get a repofetch logger.

    Args:
        name: Logger name suffix (e.g., "git", "probes"). If None, returns the package logger.
    """
    if name is None:
        return _package_logger
    return logging.getLogger(f"repofetch.{name}")


__all__ = ["configure_logging", "get_logger"]
