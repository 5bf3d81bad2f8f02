# frequency_table.py
# Counts distinct words in a corpus, keeping first-seen order.

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Iterator, List, Union
import logging

from ..utils.word_io import save_lines

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FrequencyEntry:
    word: str
    frequency: int

    def __str__(self) -> str:
        return f"{self.word},{self.frequency}"


class FrequencyTable:
    """
    Immutable word -> occurrence count table.
    Build with FrequencyTable.from_words(); entries keep the order in which
    each word was first seen (Counter preserves insertion order).
    """

    def __init__(self, counts: Counter) -> None:
        self._counts = counts

    @classmethod
    def from_words(cls, words: Iterable[str]) -> FrequencyTable:
        counts: Counter = Counter()
        for w in words:
            counts[w] += 1
        logger.debug("frequency table: %d distinct of %d words", len(counts), sum(counts.values()))
        return cls(counts)

    def entries(self) -> List[FrequencyEntry]:
        return [FrequencyEntry(w, c) for w, c in self._counts.items()]

    def sorted_entries(self) -> List[FrequencyEntry]:
        """Alphabetical order, used when writing a standalone dictionary."""
        return sorted(self.entries(), key=lambda e: e.word)

    def frequency(self, word: str) -> int:
        return self._counts.get(word, 0)

    def total(self) -> int:
        return sum(self._counts.values())

    def save(self, path: Union[str, Path]) -> None:
        """Write the alphabetical dictionary, one `word,freq` per line."""
        save_lines(self.sorted_entries(), path)
        logger.info("saved dictionary (%d words) to %s", len(self), path)

    def __iter__(self) -> Iterator[FrequencyEntry]:
        return iter(self.entries())

    def __len__(self) -> int:
        return len(self._counts)

    def __contains__(self, word: str) -> bool:
        return word in self._counts
