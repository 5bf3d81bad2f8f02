# trie.py
# 26-ary prefix tree over lowercase keys, used by the Autocompleter.
# Each complete word carries the frequency it was inserted with.
# Sub-tries are read-only views over the same nodes, nothing gets copied.

from __future__ import annotations

import weakref
from collections import deque
from typing import Iterator, List, Optional

ALPHABET_SIZE = 26
_BASE = ord("a")


class TrieError(ValueError):
    """Base error for trie operations."""


class InvalidKeyError(TrieError):
    """Raised when a key holds characters outside 'a'-'z' (or is empty on insert)."""


def _slot(ch: str) -> int:
    idx = ord(ch) - _BASE
    if not 0 <= idx < ALPHABET_SIZE:
        raise InvalidKeyError(f"unsupported character {ch!r}")
    return idx


class TrieNode:
    """
    One character position in the key space.
    char: letter on the edge into this node ('' for the root)
    children: fixed 26 slots, index = letter - 'a'
    is_word: a complete key ends here
    freq: stored frequency (only meaningful when is_word)
    parent: weak back-reference, used only to spell words upwards
    """

    __slots__ = ("char", "children", "is_word", "freq", "_parent", "__weakref__")

    def __init__(self, char: str = "", parent: Optional[TrieNode] = None) -> None:
        self.char = char
        self.children: List[Optional[TrieNode]] = [None] * ALPHABET_SIZE
        self.is_word = False
        self.freq = 0
        self._parent = weakref.ref(parent) if parent is not None else None

    @property
    def parent(self) -> Optional[TrieNode]:
        return self._parent() if self._parent is not None else None

    @property
    def frequency(self) -> int:
        return self.freq if self.is_word else 0

    def child(self, ch: str) -> Optional[TrieNode]:
        return self.children[_slot(ch)]

    def add_child(self, ch: str) -> TrieNode:
        """Return the child for `ch`, creating it on first use."""
        idx = _slot(ch)
        node = self.children[idx]
        if node is None:
            node = TrieNode(ch, self)
            self.children[idx] = node
        return node

    def iter_children(self) -> Iterator[TrieNode]:
        """Existing children in alphabetical order."""
        return (c for c in self.children if c is not None)

    def spell(self, stop: Optional[TrieNode] = None) -> str:
        """Rebuild the text from `stop` (exclusive) down to this node via parent links."""
        chars = []
        node: Optional[TrieNode] = self
        while node is not None and node is not stop:
            chars.append(node.char)
            node = node.parent
        return "".join(reversed(chars))


class Trie:
    """
    Prefix tree storing words with frequencies.
     - insert once per word (write-once, no deletes or updates)
     - exact lookups: contains / frequency_of
     - sub_trie(prefix): read-only view rooted at the prefix node
     - enumerate_words(): every word below the root, with the root's own
       word (if any) excluded
    """

    def __init__(self) -> None:
        self._root = TrieNode()
        self._readonly = False

    @classmethod
    def _view(cls, node: TrieNode) -> Trie:
        view = cls.__new__(cls)
        view._root = node
        view._readonly = True
        return view

    @property
    def is_view(self) -> bool:
        return self._readonly

    # insertion -----------------------------------------------------
    def insert(self, key: str, frequency: int = 1) -> bool:
        """
        Insert `key` with its frequency.
        Returns False (and changes nothing) if key is already a complete word.
        """
        if self._readonly:
            raise TrieError("sub-trie views are read-only")
        if not key:
            raise InvalidKeyError("cannot insert an empty key")
        if frequency < 1:
            raise ValueError(f"frequency must be >= 1, got {frequency}")
        # validate everything before creating any nodes
        for ch in key:
            _slot(ch)
        if self.contains(key):
            return False

        node = self._root
        for ch in key:
            node = node.add_child(ch)
        node.is_word = True
        node.freq = frequency
        return True

    # lookups ---------------------------------------------------------
    def _find(self, key: str) -> Optional[TrieNode]:
        node: Optional[TrieNode] = self._root
        for ch in key:
            node = node.child(ch)
            if node is None:
                return None
        return node

    def contains(self, key: str) -> bool:
        """True iff key's path exists and ends on a word (the root never counts)."""
        node = self._find(key)
        return node is not None and node is not self._root and node.is_word

    def __contains__(self, key: str) -> bool:
        return self.contains(key)

    def frequency_of(self, key: str) -> int:
        """Stored frequency of key, 0 when it is not a complete word here."""
        node = self._find(key)
        if node is None or node is self._root:
            return 0
        return node.frequency

    def sub_trie(self, prefix: str) -> Optional[Trie]:
        """View rooted at the node for `prefix`, or None if the path is missing."""
        node = self._find(prefix)
        if node is None:
            return None
        return Trie._view(node)

    # traversal ---------------------------------------------------------
    def enumerate_words(self) -> List[str]:
        """
        All words below the root, alphabetically.
        Iterative DFS; each word is spelled by following parent links back
        up to this trie's root, so for a view the prefix is stripped.
        """
        root = self._root
        words: List[str] = []
        stack = list(reversed(list(root.iter_children())))
        while stack:
            node = stack.pop()
            if node.is_word:
                words.append(node.spell(stop=root))
            stack.extend(reversed(list(node.iter_children())))
        return words

    def __iter__(self) -> Iterator[str]:
        return iter(self.enumerate_words())

    def __len__(self) -> int:
        return len(self.enumerate_words())

    def node_count(self) -> int:
        """Nodes reachable from the root, root included."""
        count = 0
        stack = [self._root]
        while stack:
            node = stack.pop()
            count += 1
            stack.extend(node.iter_children())
        return count

    # convenience/debugging -----------------------------------------------------
    def breadth_first_trace(self) -> str:
        """Node characters level by level (for inspection only)."""
        out = []
        queue = deque([self._root])
        while queue:
            node = queue.popleft()
            out.append(node.char)
            queue.extend(node.iter_children())
        return "".join(out)

    def depth_first_trace(self) -> str:
        """
        Node characters in stack DFS order, reversed.
        Children are pushed a..z, so the walk itself runs z..a.
        """
        out = []
        stack = [self._root]
        while stack:
            node = stack.pop()
            out.append(node.char)
            stack.extend(node.iter_children())
        return "".join(out)[::-1]
