# autocompleter.py
"""
Autocompleter - ranks completions for a prefix by corpus frequency.

Pipeline:
 words -> FrequencyTable -> Trie (one insert per distinct word)
 per query p:
  - p itself counts if it is a complete word
  - every word under sub_trie(p) counts as p + suffix
  - probability = frequency / total over all of the above
  - sorted by probability (desc), ties by word (asc), top `max_results`

Result lines look like "ca,cat,0.6666667,car,0.33333334,": the leading "p,"
marker appears only when p is not itself a word.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List, Sequence, Tuple, Union
import logging

import numpy as np

from .frequency_table import FrequencyTable
from .trie import InvalidKeyError, Trie

logger = logging.getLogger(__name__)

# np.float32 in "single" mode, plain float in "double" mode
Probability = Union[float, np.floating]

DEFAULT_MAX_RESULTS = 5
FLOAT_FORMATS = ("single", "double")


def probability(frequency: int, total: int, float_format: str = "single") -> Probability:
    """frequency / total, in single precision unless float_format == 'double'."""
    if total <= 0:
        raise ZeroDivisionError("total frequency must be positive")
    if float_format == "single":
        return np.float32(frequency) / np.float32(total)
    return frequency / total


def format_probability(value: Probability) -> str:
    # np.float32 str() is the shortest repr that round-trips in single precision
    if isinstance(value, np.floating):
        return str(value)
    return repr(float(value))


@dataclass(frozen=True)
class QueryMatch:
    word: str
    frequency: int
    probability: Probability

    def __str__(self) -> str:
        return f"{self.word},{format_probability(self.probability)}"


def build_trie(table: FrequencyTable) -> Trie:
    """Fresh trie with one insert per distinct word; bad words are skipped."""
    trie = Trie()
    for entry in table:
        try:
            trie.insert(entry.word, entry.frequency)
        except InvalidKeyError as e:
            logger.warning("skipping word %r: %s", entry.word, e)
    return trie


class Autocompleter:
    """
    Frequency-ranked prefix completion over a fixed corpus.
    Public API:
      - rank(prefix) -> all QueryMatch, best first
      - suggest(prefix) -> top max_results
      - complete_one(prefix) -> formatted result line
      - complete(queries) -> one line per query, in order
    The trie is built once and only read afterwards.
    """

    def __init__(
        self,
        words: Iterable[str],
        max_results: int = DEFAULT_MAX_RESULTS,
        float_format: str = "single",
    ) -> None:
        if max_results < 0:
            raise ValueError(f"max_results must be >= 0, got {max_results}")
        if float_format not in FLOAT_FORMATS:
            raise ValueError(f"float_format must be one of {FLOAT_FORMATS}, got {float_format!r}")
        self.max_results = max_results
        self.float_format = float_format
        self.table = FrequencyTable.from_words(words)
        self.trie = build_trie(self.table)
        logger.info("autocompleter ready: %d distinct words", len(self.table))

    # ranking ---------------------------------------------------------
    def _collect(self, prefix: str) -> List[Tuple[str, int]]:
        found = []
        own = self.trie.frequency_of(prefix)
        if own > 0:
            found.append((prefix, own))
        sub = self.trie.sub_trie(prefix)
        if sub is not None:
            # the view root (the prefix itself) is never part of its own enumeration
            for suffix in sub.enumerate_words():
                found.append((prefix + suffix, sub.frequency_of(suffix)))
        return found

    def rank(self, prefix: str) -> List[QueryMatch]:
        found = self._collect(prefix)
        total = sum(freq for _, freq in found)
        if total == 0:
            return []
        matches = [
            QueryMatch(word, freq, probability(freq, total, self.float_format))
            for word, freq in found
        ]
        matches.sort(key=lambda m: (-m.probability, m.word))
        return matches

    def suggest(self, prefix: str) -> List[QueryMatch]:
        return self.rank(prefix)[: self.max_results]

    # formatting ---------------------------------------------------------
    def complete_one(self, prefix: str) -> str:
        try:
            top = self.suggest(prefix)
            is_word = self.trie.contains(prefix)
        except InvalidKeyError as e:
            logger.warning("query %r has no completions: %s", prefix, e)
            return f"{prefix},"
        head = "" if is_word else f"{prefix},"
        return head + "".join(f"{m}," for m in top)

    def complete(self, queries: Iterable[str]) -> List[str]:
        return [self.complete_one(q) for q in queries]


def complete(
    words: Sequence[str],
    queries: Sequence[str],
    max_results: int = DEFAULT_MAX_RESULTS,
    float_format: str = "single",
) -> List[str]:
    """Build from `words`, answer every query; one formatted line per query."""
    return Autocompleter(words, max_results=max_results, float_format=float_format).complete(queries)
