from __future__ import annotations

import logging
import time
from typing import Iterable

from .collector import collect_files
from .config import ZipfConfig
from .models import ZipfReport
from .ranking import rank_words, select_top, write_frequency_table
from .rendering import render_bar_chart, write_graph
from .tokenization import count_words

LOGGER = logging.getLogger(__name__)


class NoFilesFoundError(RuntimeError):
    """Raised when the configured pattern matched no files."""


def build_report(texts: Iterable[str], top_count: int, file_count: int = 0) -> ZipfReport:
    """Tokenize, count and rank the texts, then take the top-N selection."""
    table = count_words(texts)
    ranked = rank_words(table)
    return ZipfReport(
        ranked=ranked,
        selection=select_top(ranked, top_count),
        file_count=file_count,
        total_tokens=sum(table.values()),
    )


def run(config: ZipfConfig) -> ZipfReport:
    """Collect the corpus, rank its words and write the configured outputs."""
    started = time.perf_counter()
    collection = collect_files(config.files_path, config.file_pattern)
    if not collection.found:
        raise NoFilesFoundError(
            f"No files matched {config.file_pattern!r} under {config.files_path}."
        )

    report = build_report(
        collection.texts, config.top_count, file_count=len(collection.paths)
    )
    LOGGER.info(
        "Read all the books in %.3fs: %d files, %d words, %d distinct.",
        time.perf_counter() - started,
        report.file_count,
        report.total_tokens,
        len(report.ranked),
    )

    if not config.no_graph:
        image = render_bar_chart(report.selection, title=config.chart_title)
        write_graph(image, config.graph_path)

    if config.table_path:
        write_frequency_table(report.ranked, config.table_path)

    return report
