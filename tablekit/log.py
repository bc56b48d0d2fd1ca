"""Logging configuration for tablekit.

tablekit is imported by host applications, so setup only touches the
``tablekit`` logger tree. Handlers on the root logger are left alone.
"""

import logging
import logging.handlers
import sys
from pathlib import Path

import colorlog

PACKAGE_LOGGER = "tablekit"

DATE_FORMAT = "%m-%d %H:%M:%S"
PLAIN_FORMAT = (
    "%(asctime)s %(levelname)8s %(message)s (%(name)s@%(filename)s:%(lineno)d)"
)
COLOR_FORMAT = (
    "%(asctime)s %(log_color)s%(levelname)8s%(reset)s %(message)s "
    "\033[90m(%(name)s@%(filename)s:%(lineno)d)\033[0m"
)

LOG_COLORS = {
    "DEBUG": "cyan",
    "INFO": "green",
    "WARNING": "yellow",
    "ERROR": "red",
    "CRITICAL": "red,bg_white",
}

# Marks handlers installed by setup_logging so a second call replaces them.
_OWNED = "_tablekit_handler"

logging.getLogger(PACKAGE_LOGGER).addHandler(logging.NullHandler())


def resolve_level(level: int | str) -> int:
    """Turn a level name such as ``"debug"`` into its number; unknown is INFO."""
    if isinstance(level, int):
        return level
    resolved = logging.getLevelName(level.upper())
    return resolved if isinstance(resolved, int) else logging.INFO


def setup_logging(
    level: int | str = logging.INFO,
    format_string: str | None = None,
    use_colors: bool = True,
    enable_file_logging: bool = False,
    log_dir: Path | None = None,
    is_test_env: bool = False,
) -> logging.Logger:
    """Attach console and optional file handlers to the ``tablekit`` logger.

    Args:
        level: Logging level, either numeric or a name such as "DEBUG"
        format_string: Custom format string for console messages
        use_colors: Whether to use colored output for console
        enable_file_logging: Whether to also write logs to a file
        log_dir: Directory for log files (defaults to ./logs or ./logs/test)
        is_test_env: Whether this is a test environment

    Returns:
        The configured package logger
    """
    package_logger = logging.getLogger(PACKAGE_LOGGER)
    for handler in list(package_logger.handlers):
        if getattr(handler, _OWNED, False):
            package_logger.removeHandler(handler)
            handler.close()

    handlers = [_console_handler(format_string, use_colors)]
    if enable_file_logging:
        if log_dir is None:
            log_dir = Path("logs") / "test" if is_test_env else Path("logs")
        log_dir.mkdir(parents=True, exist_ok=True)
        handlers.append(_file_handler(log_dir, is_test_env))

    for handler in handlers:
        setattr(handler, _OWNED, True)
        package_logger.addHandler(handler)

    package_logger.setLevel(resolve_level(level))
    package_logger.propagate = False
    return package_logger


def _console_handler(format_string: str | None, use_colors: bool) -> logging.Handler:
    handler = logging.StreamHandler(sys.stdout)
    if use_colors:
        handler.setFormatter(
            colorlog.ColoredFormatter(
                format_string or COLOR_FORMAT,
                datefmt=DATE_FORMAT,
                log_colors=LOG_COLORS,
            )
        )
    else:
        handler.setFormatter(
            logging.Formatter(format_string or PLAIN_FORMAT, datefmt=DATE_FORMAT)
        )
    return handler


def _file_handler(log_dir: Path, is_test_env: bool) -> logging.Handler:
    """Test runs overwrite ``test.log``; other runs rotate ``tablekit.log``."""
    handler: logging.Handler
    if is_test_env:
        handler = logging.FileHandler(log_dir / "test.log", mode="w")
    else:
        handler = logging.handlers.RotatingFileHandler(
            log_dir / "tablekit.log",
            maxBytes=5 * 1024 * 1024,
            backupCount=4,
            encoding="utf-8",
        )
    handler.setFormatter(logging.Formatter(PLAIN_FORMAT, datefmt=DATE_FORMAT))
    return handler


def get_logger(name: str) -> logging.Logger:
    """Get a logger; pass ``__name__`` so it lands under ``tablekit``."""
    return logging.getLogger(name)


def setup_production_logging(level: int | str = logging.INFO) -> logging.Logger:
    """Console plus a rotating log file."""
    return setup_logging(level=level, enable_file_logging=True)


def setup_test_logging(level: int | str = logging.DEBUG) -> logging.Logger:
    """Console plus a ``test.log`` rewritten on every run."""
    return setup_logging(level=level, enable_file_logging=True, is_test_env=True)
