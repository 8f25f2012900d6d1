"""
zipf_words package exports convenience helpers for library consumers.
"""

from __future__ import annotations

from .collector import PatternError, collect_files
from .config import ZipfConfig, config_from_dict, config_from_yaml, load_config
from .models import WordOccurrence, ZipfReport
from .pipeline import NoFilesFoundError, build_report, run
from .ranking import rank_words, select_top
from .rendering import EmptySelectionError, RenderError, render_bar_chart
from .tokenization import count_words, iter_words

__all__ = [
    "ZipfConfig",
    "config_from_dict",
    "config_from_yaml",
    "load_config",
    "WordOccurrence",
    "ZipfReport",
    "PatternError",
    "NoFilesFoundError",
    "RenderError",
    "EmptySelectionError",
    "collect_files",
    "count_words",
    "iter_words",
    "rank_words",
    "select_top",
    "render_bar_chart",
    "build_report",
    "run",
]

__version__ = "0.1.0"
