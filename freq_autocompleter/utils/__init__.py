# freq_autocompleter/utils/__init__.py
# config, logging and word-list I/O helpers

from .config_manager import Config, ConfigError
from .logger_utils import configure_logging, time_block
from .word_io import read_words, save_lines, split_words

__all__ = [
    "Config",
    "ConfigError",
    "configure_logging",
    "time_block",
    "read_words",
    "save_lines",
    "split_words",
]
