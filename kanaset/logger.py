import logging
import sys

logger = logging.getLogger("kanaset")
logger.addHandler(logging.NullHandler())

_console_handlers = []


def configure_logging(level: int = logging.INFO) -> logging.Logger:
    """Send kanaset log records to the console: INFO to stdout, WARNING and
    above to stderr. Calling it again only updates the level."""
    logger.setLevel(level)
    if _console_handlers:
        return logger

    stdout_handler = logging.StreamHandler(sys.stdout)
    stderr_handler = logging.StreamHandler(sys.stderr)

    stdout_handler.setLevel(logging.DEBUG)    # everything below WARNING
    stdout_handler.addFilter(lambda record: record.levelno < logging.WARNING)
    stderr_handler.setLevel(logging.WARNING)  # WARNING and above

    formatter = logging.Formatter("%(asctime)s - %(levelname)s - %(message)s")
    stdout_handler.setFormatter(formatter)
    stderr_handler.setFormatter(formatter)

    logger.addHandler(stdout_handler)
    logger.addHandler(stderr_handler)
    _console_handlers.extend([stdout_handler, stderr_handler])
    return logger
