from __future__ import annotations

from pathlib import Path

SCENARIO_TEXTS = {
    "first.txt": "The cat sat. The cat ran.",
    "second.txt": "A cat and a dog.",
}


def write_corpus(root: Path, files: dict[str, str] | None = None) -> Path:
    """Create a directory of text files for collector and CLI tests."""
    root.mkdir(parents=True, exist_ok=True)
    for name, text in (files or SCENARIO_TEXTS).items():
        (root / name).write_text(text, encoding="utf-8")
    return root
