"""
Export utilities for FlashFreq.

Two kinds of export:

- Frequency tables as CSV text (``Value,Count,Percentage``), built from
  whatever entries are currently visible (search + top-N applied).
  Fields go through ``csv.writer`` so values containing commas, quotes
  or newlines read back unchanged with any standard CSV reader.
- Charts as PNG, with automatic light-theme switching (dark GUI theme →
  white-background export) and clipboard copy.  ``try/finally``
  guarantees the GUI theme is restored.
"""

import csv
import io
import os
from typing import Sequence

from matplotlib.figure import Figure

from .constants import (
    CLIPBOARD_DPI, CSV_EXTENSION, DARK_COLORS, EXPORT_DPI, EXPORT_HEADER,
    EXPORT_SUFFIX, EXPORT_WIDTH_INCHES, PLOT_STYLE_LIGHT,
)
from .data_model import FrequencyEntry


# ── Frequency table export ───────────────────────────────────────────────

def format_percentage(percentage: float) -> str:
    """Two-decimal percentage string, e.g. ``"33.33%"``."""
    return f"{percentage:.2f}%"


def format_number(value: float) -> str:
    """Shortest exact rendering of *value*; integral values lose the ``.0``.

    ``123456789.0`` gives ``"123456789"`` and ``0.1`` gives ``"0.1"``.
    """
    text = repr(float(value))
    if text.endswith(".0"):
        text = text[:-2]
    return text


def frequency_csv_text(entries: Sequence[FrequencyEntry]) -> str:
    """Render *entries* as CSV text with a ``Value,Count,Percentage`` header.

    Percentages are rounded only here, at the presentation boundary.
    """
    buf = io.StringIO()
    writer = csv.writer(buf, lineterminator='\n')
    writer.writerow(EXPORT_HEADER)
    for entry in entries:
        writer.writerow([
            entry.value,
            str(entry.count),
            format_percentage(entry.percentage),
        ])
    return buf.getvalue()


def _safe_name(name: str) -> str:
    return "".join(
        c if c.isalnum() or c in '-_ .' else '_'
        for c in name
    ).strip()


def export_filename(source_name: str, column: str) -> str:
    """Suggested export name: ``<file stem>_<column>_frequency.csv``."""
    stem = os.path.basename(source_name)
    if stem.lower().endswith(CSV_EXTENSION):
        stem = stem[:-len(CSV_EXTENSION)]
    return f"{_safe_name(stem)}_{_safe_name(column)}{EXPORT_SUFFIX}"


def write_frequency_csv(
    filepath: str,
    entries: Sequence[FrequencyEntry],
) -> str:
    """Write ``frequency_csv_text(entries)`` to *filepath* (UTF-8).

    Returns the path written.
    """
    with open(filepath, 'w', encoding='utf-8', newline='') as fh:
        fh.write(frequency_csv_text(entries))
    return filepath


# ── Chart export ─────────────────────────────────────────────────────────

def _save_figure_state(fig: Figure) -> dict:
    """Save current figure/axes colours for later restoration.

    Captures every property that ``_apply_light_theme`` modifies.
    """
    state = {
        'fig_facecolor': fig.get_facecolor(),
        'axes_states': [],
    }
    for ax in fig.get_axes():
        ax_state = {
            'facecolor': ax.get_facecolor(),
            'title_color': ax.title.get_color(),
            'xlabel_color': ax.xaxis.label.get_color(),
            'ylabel_color': ax.yaxis.label.get_color(),
            'spine_colors': {
                spine: ax.spines[spine].get_edgecolor()
                for spine in ax.spines
            },
            'tick_label_colors_x': [
                t.get_color() for t in ax.get_xticklabels()
            ],
            'tick_label_colors_y': [
                t.get_color() for t in ax.get_yticklabels()
            ],
            'xtick_mark_color': None,
            'ytick_mark_color': None,
            'grid_colors_y': [
                line.get_color() for line in ax.get_ygridlines()
            ],
            # Bar value annotations
            'text_colors': [t.get_color() for t in ax.texts],
        }

        xticks = ax.xaxis.get_major_ticks()
        if xticks:
            ax_state['xtick_mark_color'] = xticks[0].tick1line.get_color()
        yticks = ax.yaxis.get_major_ticks()
        if yticks:
            ax_state['ytick_mark_color'] = yticks[0].tick1line.get_color()

        state['axes_states'].append(ax_state)
    return state


def _apply_light_theme(fig: Figure) -> None:
    """Apply light (white background) theme to figure for export."""
    light = PLOT_STYLE_LIGHT
    fig.set_facecolor(light['figure.facecolor'])

    _dark_fg_set = frozenset((
        DARK_COLORS['fg'], DARK_COLORS['fg_dim'], DARK_COLORS['fg_bright'],
    ))

    for ax in fig.get_axes():
        ax.set_facecolor(light['axes.facecolor'])
        ax.title.set_color(light['text.color'])
        ax.xaxis.label.set_color(light['axes.labelcolor'])
        ax.yaxis.label.set_color(light['axes.labelcolor'])

        for spine in ax.spines.values():
            spine.set_edgecolor(light['axes.edgecolor'])

        ax.tick_params(
            axis='x',
            colors=light['xtick.color'],
            labelcolor=light['xtick.color'],
        )
        ax.tick_params(
            axis='y',
            colors=light['ytick.color'],
            labelcolor=light['ytick.color'],
        )

        for line in ax.get_ygridlines():
            line.set_color(light['grid.color'])

        # Only convert dark-theme foreground colours
        for text in ax.texts:
            if text.get_color() in _dark_fg_set:
                text.set_color(light['text.color'])


def _restore_figure_state(fig: Figure, state: dict) -> None:
    """Restore colours captured by ``_save_figure_state``."""
    fig.set_facecolor(state['fig_facecolor'])

    for ax, ax_state in zip(fig.get_axes(), state['axes_states']):
        ax.set_facecolor(ax_state['facecolor'])
        ax.title.set_color(ax_state['title_color'])
        ax.xaxis.label.set_color(ax_state['xlabel_color'])
        ax.yaxis.label.set_color(ax_state['ylabel_color'])

        for spine_name, color in ax_state['spine_colors'].items():
            ax.spines[spine_name].set_edgecolor(color)

        # tick_params sets both mark and label colours, so labels are
        # re-set afterwards
        if ax_state['xtick_mark_color'] is not None:
            ax.tick_params(axis='x', colors=ax_state['xtick_mark_color'])
        if ax_state['ytick_mark_color'] is not None:
            ax.tick_params(axis='y', colors=ax_state['ytick_mark_color'])

        for label, color in zip(
            ax.get_xticklabels(), ax_state['tick_label_colors_x']
        ):
            label.set_color(color)
        for label, color in zip(
            ax.get_yticklabels(), ax_state['tick_label_colors_y']
        ):
            label.set_color(color)

        for line, color in zip(
            ax.get_ygridlines(), ax_state['grid_colors_y']
        ):
            line.set_color(color)

        for text, color in zip(ax.texts, ax_state['text_colors']):
            text.set_color(color)


def export_png(
    fig: Figure,
    filepath: str,
    *,
    dpi: int = EXPORT_DPI,
    width_inches: float = EXPORT_WIDTH_INCHES,
) -> None:
    """Export figure as PNG with light theme.

    Theme is switched to light (white background) for the export and
    restored afterwards, even on error.

    Parameters
    ----------
    fig : matplotlib.figure.Figure
    filepath : str
        Output file path (should end with ``.png``).
    dpi : int
        Export resolution.
    width_inches : float
        Figure width in inches; height scales proportionally.
    """
    state = _save_figure_state(fig)
    current_w = fig.get_figwidth()
    current_h = fig.get_figheight()
    try:
        scale = width_inches / current_w if current_w > 0 else 1.0
        fig.set_size_inches(width_inches, current_h * scale)

        _apply_light_theme(fig)
        fig.savefig(
            filepath,
            dpi=dpi,
            bbox_inches='tight',
            facecolor=fig.get_facecolor(),
            edgecolor='none',
            pad_inches=0.1,
        )
    finally:
        fig.set_size_inches(current_w, current_h)
        _restore_figure_state(fig, state)


def copy_to_clipboard(fig: Figure, dpi: int = CLIPBOARD_DPI) -> bool:
    """Copy figure to system clipboard as PNG image.

    Returns ``True`` on success, ``False`` if clipboard is unavailable.
    """
    try:
        from PySide6.QtWidgets import QApplication
        from PySide6.QtGui import QImage
    except ImportError:
        return False

    buf = io.BytesIO()
    state = _save_figure_state(fig)
    try:
        _apply_light_theme(fig)
        fig.savefig(
            buf, format='png', dpi=dpi,
            bbox_inches='tight',
            facecolor=fig.get_facecolor(),
            edgecolor='none',
        )
    finally:
        _restore_figure_state(fig, state)

    buf.seek(0)
    img = QImage()
    img.loadFromData(buf.read())

    clipboard = QApplication.clipboard()
    if clipboard is not None:
        clipboard.setImage(img)
        return True
    return False
