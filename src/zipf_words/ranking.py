from __future__ import annotations

import csv
import logging
from pathlib import Path
from typing import List, Mapping, Sequence

from .models import WordOccurrence

LOGGER = logging.getLogger(__name__)


def rank_words(table: Mapping[str, int]) -> List[WordOccurrence]:
    """Sort the frequency table by descending count, then by word."""
    ranked = [WordOccurrence(word=word, count=count) for word, count in table.items()]
    ranked.sort(key=lambda item: (-item.count, item.word))
    return ranked


def select_top(ranked: Sequence[WordOccurrence], top_count: int) -> List[WordOccurrence]:
    """Return the first ``top_count`` entries, clamped to the ranked length."""
    if top_count < 0:
        raise ValueError(f"top_count must not be negative, got {top_count}")
    if top_count > len(ranked):
        LOGGER.info(
            "Requested top %d words but only %d distinct words were found.",
            top_count,
            len(ranked),
        )
    return list(ranked[:top_count])


def write_frequency_table(ranked: Sequence[WordOccurrence], path: str | Path) -> Path:
    """Write the full ranked list as a TSV with rank, word and count columns."""
    dest = Path(path)
    dest.parent.mkdir(parents=True, exist_ok=True)
    with dest.open("w", encoding="utf-8", newline="") as handle:
        writer = csv.DictWriter(
            handle, fieldnames=["rank", "word", "count"], delimiter="\t"
        )
        writer.writeheader()
        for rank, item in enumerate(ranked, start=1):
            writer.writerow({"rank": rank, "word": item.word, "count": item.count})
    LOGGER.info("Wrote %d ranked words to %s", len(ranked), dest)
    return dest
