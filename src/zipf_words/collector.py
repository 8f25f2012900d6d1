from __future__ import annotations

import glob
import logging
from pathlib import Path
from typing import List

from .models import CollectionResult

LOGGER = logging.getLogger(__name__)


class PatternError(ValueError):
    """Raised when a file glob pattern is malformed."""


def validate_pattern(pattern: str) -> None:
    """Reject patterns with unterminated or empty character classes."""
    idx = 0
    while idx < len(pattern):
        if pattern[idx] != "[":
            idx += 1
            continue
        start = idx
        idx += 1
        if idx < len(pattern) and pattern[idx] in "!^":
            idx += 1
        if idx < len(pattern) and pattern[idx] == "]":
            raise PatternError(
                f"Empty character class at offset {start} in pattern {pattern!r}"
            )
        close = pattern.find("]", idx)
        if close == -1:
            raise PatternError(
                f"Unterminated character class at offset {start} in pattern {pattern!r}"
            )
        idx = close + 1


def find_files(files_path: str | Path, file_pattern: str) -> List[Path]:
    """Expand ``file_pattern`` under ``files_path`` in lexicographic order."""
    validate_pattern(file_pattern)
    # Only the pattern carries wildcards; the base directory is taken literally.
    search = str(Path(glob.escape(str(files_path))) / file_pattern)
    LOGGER.info("Looking for files with: %s", search)
    return sorted(Path(p) for p in glob.glob(search))


def read_texts(paths: List[Path]) -> List[str]:
    """Read each path as text, leaving an empty string for unreadable files."""
    texts: List[str] = []
    for path in paths:
        try:
            texts.append(path.read_text(encoding="utf-8", errors="replace"))
        except OSError as exc:
            LOGGER.warning("There was an error reading %s (%s). Moving on.", path, exc)
            texts.append("")
    return texts


def collect_files(files_path: str | Path, file_pattern: str) -> CollectionResult:
    """
    Glob ``file_pattern`` under ``files_path`` and read every match.

    ``found`` is False when nothing matched; the caller decides whether that is
    fatal. A malformed pattern raises :class:`PatternError`.
    """
    paths = find_files(files_path, file_pattern)
    LOGGER.info("Reading in files: %s", [str(p) for p in paths])
    if not paths:
        return CollectionResult(texts=[], paths=[], found=False)
    return CollectionResult(texts=read_texts(paths), paths=paths, found=True)
