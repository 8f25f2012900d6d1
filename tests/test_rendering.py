from pathlib import Path
from typing import Any

import pytest
from matplotlib.figure import Figure

from zipf_words import rendering
from zipf_words.models import WordOccurrence
from zipf_words.rendering import (
    EmptySelectionError,
    RenderError,
    format_occurrences,
    render_bar_chart,
    write_graph,
)

PNG_SIGNATURE = b"\x89PNG\r\n\x1a\n"

SELECTION = [
    WordOccurrence("cat", 3),
    WordOccurrence("a", 2),
    WordOccurrence("the", 2),
]


def test_render_bar_chart_returns_png_bytes():
    image = render_bar_chart(SELECTION)
    assert image.startswith(PNG_SIGNATURE)


def test_render_bar_chart_uses_labels_and_axis_range(monkeypatch: pytest.MonkeyPatch):
    closed: list[Any] = []
    real_close = rendering.plt.close

    def record_close(fig: Any) -> None:
        closed.append(fig)
        real_close(fig)

    monkeypatch.setattr(rendering.plt, "close", record_close)
    render_bar_chart(SELECTION, title="Top words")

    (fig,) = closed
    ax = fig.axes[0]
    assert ax.get_ylim() == (0.0, 3.0)
    assert [label.get_text() for label in ax.get_xticklabels()] == ["cat", "a", "the"]
    assert ax.get_title() == "Top words"
    assert [bar.get_height() for bar in ax.patches] == [3, 2, 2]


def test_render_bar_chart_rejects_empty_selection():
    with pytest.raises(EmptySelectionError):
        render_bar_chart([])


def test_render_bar_chart_wraps_library_failures(monkeypatch: pytest.MonkeyPatch):
    def broken_savefig(self: Figure, *args: Any, **kwargs: Any) -> None:
        raise ValueError("unsupported format")

    monkeypatch.setattr(Figure, "savefig", broken_savefig)
    with pytest.raises(RenderError, match="unsupported format"):
        render_bar_chart(SELECTION)


def test_write_graph_persists_bytes(tmp_path: Path):
    dest = write_graph(PNG_SIGNATURE, tmp_path / "zipf.png")
    assert dest.read_bytes() == PNG_SIGNATURE


def test_write_graph_propagates_os_errors(tmp_path: Path):
    with pytest.raises(OSError):
        write_graph(PNG_SIGNATURE, tmp_path / "missing" / "zipf.png")


def test_format_occurrences_uses_double_tabs():
    assert format_occurrences(SELECTION) == ["cat\t\t3", "a\t\t2", "the\t\t2"]
