from __future__ import annotations

import re
from collections import Counter
from typing import Iterable, Iterator

WORD_PATTERN = re.compile(r"[A-Za-z']+")


def iter_words(text: str) -> Iterator[str]:
    """Yield lowercased letter/apostrophe runs, skipping a bare apostrophe."""
    for match in WORD_PATTERN.finditer(text):
        word = match.group()
        if word == "'":
            continue
        yield word.lower()


def count_words(texts: Iterable[str]) -> Counter[str]:
    """Count word occurrences across all texts."""
    table: Counter[str] = Counter()
    for text in texts:
        table.update(iter_words(text))
    return table
