"""
freq_autocompleter - rank word completions for a prefix by corpus frequency.
"""

from .core import Autocompleter, FrequencyTable, Trie, complete

__all__ = ["Autocompleter", "FrequencyTable", "Trie", "complete"]

__version__ = "0.1.0"
