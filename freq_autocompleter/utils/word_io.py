# word_io.py - reading delimited word lists and writing result lines

import re
from pathlib import Path
from typing import Iterable, List, Union

PathLike = Union[str, Path]

# same delimiters the word lists use: space, comma, newline
_delim_re = re.compile(r"[ ,\n]")


def split_words(text: str) -> List[str]:
    """Split on space/comma/newline, trim and lowercase, drop empties."""
    if not text:
        return []
    out = []
    for tok in _delim_re.split(text):
        tok = tok.strip().lower()
        if tok:
            out.append(tok)
    return out


def read_words(path: PathLike) -> List[str]:
    with open(path, "r", encoding="utf-8") as f:
        return split_words(f.read())


def save_lines(items: Iterable[object], path: PathLike) -> None:
    """Write str(item) per line."""
    with open(path, "w", encoding="utf-8") as f:
        for item in items:
            f.write(f"{item}\n")
