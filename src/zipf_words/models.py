from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path


@dataclass(slots=True, frozen=True)
class WordOccurrence:
    """A lowercase word and the number of times it was seen."""

    word: str
    count: int


@dataclass(slots=True)
class CollectionResult:
    """Texts read from the files matching a glob pattern."""

    texts: list[str]
    paths: list[Path]
    found: bool


@dataclass(slots=True, frozen=True)
class ZipfReport:
    """Ranked word counts for a corpus plus the top-N selection."""

    ranked: list[WordOccurrence]
    selection: list[WordOccurrence]
    file_count: int
    total_tokens: int
