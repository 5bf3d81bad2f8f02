# logger_utils.py - logging setup and timing helper

import logging
import time

from rich.console import Console
from rich.logging import RichHandler

LOG_FORMAT = "%(name)s | %(message)s"


def configure_logging(level="WARNING", console=None) -> None:
    """
    Route the package loggers through Rich.
    Library modules only call logging.getLogger(__name__); the entry point
    calls this once. Records go to stderr (or `console`), never stdout.
    """
    if isinstance(level, str):
        level = level.upper()
    logging.basicConfig(
        level=level,
        format=LOG_FORMAT,
        datefmt="[%X]",
        handlers=[RichHandler(console=console or Console(stderr=True), show_path=False, markup=False)],
        force=True,
    )


def time_block(label, logger=None):
    """
    Measure a code block:
        with time_block("build trie"):
            do_some_work()
    The elapsed time is logged at DEBUG level.
    """
    return _Timer(label, logger or logging.getLogger("freq_autocompleter.timing"))


class _Timer:
    """Context manager used internally to measure time for a code block."""

    def __init__(self, label, logger):
        self.label = label
        self.logger = logger
        self.elapsed = 0.0
        self.start = time.perf_counter()

    def __enter__(self):
        self.start = time.perf_counter()
        return self

    def __exit__(self, exc_type, exc, tb):
        self.elapsed = time.perf_counter() - self.start
        self.logger.debug("%s done in %.3fs", self.label, self.elapsed)
        return False
