"""
freq_autocompleter.core

Contains:
 - Trie / TrieNode: 26-ary prefix tree with per-word frequencies
 - FrequencyTable: distinct word counts in first-seen order
 - Autocompleter: frequency-ranked completions per query prefix
"""

from .trie import Trie, TrieNode, TrieError, InvalidKeyError
from .frequency_table import FrequencyTable, FrequencyEntry
from .autocompleter import Autocompleter, QueryMatch, build_trie, complete

__all__ = [
    "Trie",
    "TrieNode",
    "TrieError",
    "InvalidKeyError",
    "FrequencyTable",
    "FrequencyEntry",
    "Autocompleter",
    "QueryMatch",
    "build_trie",
    "complete",
]
