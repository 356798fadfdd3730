"""Logging configuration for the todo CLI.

Everything goes to stderr. While the alternate screen is active those lines
are hidden behind the UI, so the default level only lets real problems
(failed saves) through.
"""
import logging
import sys

LOG_FORMAT = "%(asctime)s.%(msecs)03d %(levelname)s %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def level_for_verbosity(verbose: int) -> int:
    if verbose >= 2:
        return logging.DEBUG
    if verbose == 1:
        return logging.INFO
    return logging.WARNING


def setup_logging(level: int = logging.WARNING) -> None:
    """Install a single stderr handler on the root logger.

    Call this once, before the first log line.
    """
    root = logging.getLogger()
    root.setLevel(level)

    # Remove any pre-existing handlers to avoid duplicates.
    for h in list(root.handlers):
        root.removeHandler(h)

    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT))
    root.addHandler(handler)

    # asyncio selector lines drown out -vv output
    logging.getLogger("asyncio").setLevel(max(level, logging.INFO))
