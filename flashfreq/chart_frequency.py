"""
Frequency bar chart for FlashFreq.

One bar per ``ChartPoint`` (at most 20, already filtered and limited by
the view projector).  Bars are labelled with the truncated value on the
x axis and annotated with their percentage share.
"""

from typing import Sequence

import numpy as np
from matplotlib.figure import Figure

from .constants import (
    CHART_PALETTE, EXPORT_TEXT_COLOR,
)
from .data_model import ChartPoint


def render_frequency_bar(
    fig: Figure,
    points: Sequence[ChartPoint],
    *,
    column: str = "",
    for_export: bool = False,
) -> None:
    """Render a frequency bar chart on *fig*.

    Parameters
    ----------
    fig : matplotlib.figure.Figure
        Figure to draw on (will be cleared).
    points : sequence of ChartPoint
        Bars in display order.
    column : str
        Column name used in the title.
    for_export : bool
        If ``True``, use light-theme colours.
    """
    fig.clf()
    pal = CHART_PALETTE
    ax = fig.add_subplot(111)

    if not points:
        ax.text(0.5, 0.5, 'No values to display',
                transform=ax.transAxes, ha='center', va='center')
        ax.set_xticks([])
        ax.set_yticks([])
        return

    x = np.arange(len(points))
    counts = np.array([p.count for p in points])

    ax.bar(
        x, counts, width=0.7,
        color=pal['bar_export'] if for_export else pal['bar'],
        edgecolor=pal['bar_edge'], linewidth=0.5,
        zorder=3,
    )

    # ── Percentage annotations ───────────────────────────────────────
    text_color = EXPORT_TEXT_COLOR if for_export else pal['annotation']
    for xi, point in zip(x, points):
        ax.text(
            xi, point.count, f"{point.percentage:.1f}%",
            ha='center', va='bottom', fontsize=6,
            color=text_color,
        )

    # ── Labels ───────────────────────────────────────────────────────
    ax.set_xticks(x)
    ax.set_xticklabels(
        [p.label for p in points], rotation=45, ha='right', fontsize=7,
    )
    ax.set_ylabel("Count", fontsize=8)
    ax.set_ylim(0, counts.max() * 1.12)
    title = "Value Distribution"
    if column:
        title += f" — {column}"
    ax.set_title(title, fontsize=10, fontweight='bold')
    ax.grid(axis='y', linewidth=0.4, alpha=0.5, zorder=0)

    fig.tight_layout(pad=1.5)
