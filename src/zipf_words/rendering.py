from __future__ import annotations

import io
import logging
from pathlib import Path
from typing import List, Sequence

import matplotlib

matplotlib.use("Agg")

import matplotlib.pyplot as plt

from .models import WordOccurrence

LOGGER = logging.getLogger(__name__)

DPI = 100
HEIGHT_PX = 1024
MIN_WIDTH_PX = 1024
BAR_WIDTH_PX = 80
BAR_GAP_PX = 20
TOP_PADDING_PX = 40


class RenderError(RuntimeError):
    """Raised when the bar chart cannot be produced."""


class EmptySelectionError(RenderError):
    """Raised when there is nothing to chart."""


def render_bar_chart(
    selection: Sequence[WordOccurrence], title: str = "Words by occurrence"
) -> bytes:
    """
    Render the selection as a PNG bar chart and return the encoded bytes.

    The value axis spans ``[0, selection[0].count]``; the selection must already
    be ranked in descending order.
    """
    if not selection:
        raise EmptySelectionError("Cannot chart an empty word selection.")

    labels = [item.word for item in selection]
    values = [item.count for item in selection]
    width_px = max(MIN_WIDTH_PX, len(selection) * (BAR_WIDTH_PX + BAR_GAP_PX))
    fig, ax = plt.subplots(figsize=(width_px / DPI, HEIGHT_PX / DPI), dpi=DPI)
    try:
        positions = range(len(values))
        # Bars sit one unit apart, so the fraction matches the pixel ratio.
        ax.bar(positions, values, width=BAR_WIDTH_PX / (BAR_WIDTH_PX + BAR_GAP_PX))
        ax.set_xticks(list(positions))
        ax.set_xticklabels(labels, rotation=45, ha="right")
        ax.set_ylim(0, selection[0].count)
        ax.set_title(title, pad=TOP_PADDING_PX)
        fig.tight_layout()
        buffer = io.BytesIO()
        fig.savefig(buffer, format="png")
    except Exception as exc:
        raise RenderError(f"Failed to render chart: {exc}") from exc
    finally:
        plt.close(fig)
    LOGGER.debug("Rendered chart with %d bars (%d bytes).", len(values), buffer.tell())
    return buffer.getvalue()


def write_graph(image: bytes, path: str | Path) -> Path:
    """Persist an encoded chart image."""
    dest = Path(path)
    dest.write_bytes(image)
    LOGGER.info("Wrote graph to %s", dest)
    return dest


def format_occurrences(selection: Sequence[WordOccurrence]) -> List[str]:
    """Format ranked entries as ``word<TAB><TAB>count`` lines."""
    return [f"{item.word}\t\t{item.count}" for item in selection]
