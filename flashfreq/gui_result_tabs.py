"""
Result tabs widget (right side) for FlashFreq.

Four tabs: Data Preview (first rows of the file), Overview (stat cards
and the most common values), Data Table (the full filtered frequency
list) and Bar Chart (matplotlib canvas with export buttons).
"""

import os

from PySide6.QtWidgets import (
    QTabWidget, QWidget, QVBoxLayout, QHBoxLayout, QGridLayout, QFrame,
    QPushButton, QFileDialog, QMessageBox, QLabel, QTableWidget,
    QTableWidgetItem, QHeaderView, QAbstractItemView,
)
from PySide6.QtCore import Qt
from PySide6.QtGui import QColor

import matplotlib
matplotlib.use('QtAgg')
from matplotlib.figure import Figure
from matplotlib.backends.backend_qtagg import (
    FigureCanvasQTAgg as FigureCanvas,
    NavigationToolbar2QT as NavigationToolbar,
)

from .constants import DARK_COLORS, PLOT_STYLE_DARK, PREVIEW_ROWS
from .theme import apply_plot_style, get_stat_card_stylesheet
from .data_model import TabularModel
from .export import (
    export_png, copy_to_clipboard, format_number, format_percentage,
)
from .session import AnalysisSession
from .view_projector import top_values
from .chart_frequency import render_frequency_bar


def _make_table() -> QTableWidget:
    table = QTableWidget()
    table.setAlternatingRowColors(True)
    table.setEditTriggers(QAbstractItemView.EditTrigger.NoEditTriggers)
    table.verticalHeader().setVisible(False)
    return table


def _item(text: str, align_right: bool = False) -> QTableWidgetItem:
    item = QTableWidgetItem(text)
    if align_right:
        item.setTextAlignment(
            Qt.AlignmentFlag.AlignRight | Qt.AlignmentFlag.AlignVCenter
        )
    return item


class _StatCard(QFrame):
    """Small tile showing one number with a caption."""

    def __init__(self, caption: str, parent=None):
        super().__init__(parent)
        self.setObjectName("statCard")
        layout = QVBoxLayout(self)
        layout.setContentsMargins(10, 8, 10, 8)
        self._value = QLabel("–")
        self._value.setObjectName("statValue")
        self._value.setTextInteractionFlags(
            Qt.TextInteractionFlag.TextSelectableByMouse
        )
        self._caption = QLabel(caption)
        self._caption.setObjectName("statCaption")
        layout.addWidget(self._value)
        layout.addWidget(self._caption)

    def set_value(self, text: str) -> None:
        self._value.setText(text)
        self._value.setToolTip(text)


class _ChartTab(QWidget):
    """Chart tab with figure canvas, toolbar, and export buttons."""

    def __init__(self, figsize=(8, 5), parent=None):
        super().__init__(parent)
        layout = QVBoxLayout(self)
        layout.setContentsMargins(4, 4, 4, 4)
        layout.setSpacing(4)

        # ── Toolbar row ──────────────────────────────────────────────
        toolbar_row = QHBoxLayout()
        toolbar_row.setSpacing(4)

        self._fig = Figure(figsize=figsize)
        self._fig.set_facecolor(DARK_COLORS['bg_alt'])
        self._canvas = FigureCanvas(self._fig)
        self._toolbar = NavigationToolbar(self._canvas, self)

        toolbar_row.addWidget(self._toolbar)
        toolbar_row.addStretch()

        self._btn_copy = QPushButton("Copy to Clipboard")
        self._btn_copy.setFixedHeight(28)
        self._btn_copy.setStyleSheet("font-size: 11px; padding: 2px 8px;")
        self._btn_copy.clicked.connect(lambda *_: self._on_copy())
        toolbar_row.addWidget(self._btn_copy)

        self._btn_export = QPushButton("Export PNG...")
        self._btn_export.setFixedHeight(28)
        self._btn_export.setStyleSheet("font-size: 11px; padding: 2px 8px;")
        self._btn_export.clicked.connect(lambda *_: self.export_dialog())
        toolbar_row.addWidget(self._btn_export)

        layout.addLayout(toolbar_row)

        # ── Canvas ───────────────────────────────────────────────────
        layout.addWidget(self._canvas, 1)

    @property
    def fig(self) -> Figure:
        return self._fig

    def refresh(self):
        """Redraw the canvas after figure changes."""
        self._canvas.draw_idle()

    def _on_copy(self):
        if copy_to_clipboard(self._fig):
            self.window().statusBar().showMessage(
                "Chart copied to clipboard", 3000
            )
        else:
            QMessageBox.warning(self, "Copy Failed",
                                "Could not copy chart to clipboard.")

    def export_dialog(self):
        path, _ = QFileDialog.getSaveFileName(
            self, "Export Chart as PNG",
            "", "PNG Files (*.png);;All Files (*)",
        )
        if not path:
            return
        if not path.lower().endswith('.png'):
            path += '.png'
        try:
            export_png(self._fig, path)
            self.window().statusBar().showMessage(
                f"Exported to {os.path.basename(path)}", 3000
            )
        except (OSError, ValueError) as exc:
            QMessageBox.critical(
                self, "Export Error", f"Failed to export: {exc}"
            )


class ResultTabsWidget(QTabWidget):
    """Tabbed container for the preview, overview, table and chart."""

    def __init__(self, parent=None):
        super().__init__(parent)

        self._tab_preview = self._build_preview_tab()
        self._tab_overview = self._build_overview_tab()
        self._tab_table = self._build_table_tab()
        self._tab_chart = _ChartTab(figsize=(8, 5))

        self.addTab(self._tab_preview, "Data Preview")
        self.addTab(self._tab_overview, "Overview")
        self.addTab(self._tab_table, "Data Table")
        self.addTab(self._tab_chart, "Bar Chart")

        apply_plot_style(PLOT_STYLE_DARK)
        self.clear_analysis()

    # ── Tab construction ─────────────────────────────────────────────

    def _build_preview_tab(self) -> QWidget:
        tab = QWidget()
        layout = QVBoxLayout(tab)
        self._preview_table = _make_table()
        self._lbl_preview = QLabel("")
        self._lbl_preview.setStyleSheet(
            f"color: {DARK_COLORS['fg_dim']}; font-size: 11px;"
        )
        layout.addWidget(self._preview_table, 1)
        layout.addWidget(self._lbl_preview)
        return tab

    def _build_overview_tab(self) -> QWidget:
        tab = QWidget()
        tab.setStyleSheet(get_stat_card_stylesheet())
        layout = QVBoxLayout(tab)

        grid = QGridLayout()
        grid.setSpacing(8)
        captions = [
            ('total', "Total Values"),
            ('unique', "Unique Values"),
            ('empty', "Empty Values"),
            ('uniqueness', "Uniqueness"),
            ('most', "Most Common"),
            ('least', "Least Common"),
            ('type', "Column Type"),
        ]
        self._cards = {}
        for i, (key, caption) in enumerate(captions):
            card = _StatCard(caption)
            grid.addWidget(card, i // 4, i % 4)
            self._cards[key] = card
        layout.addLayout(grid)

        # Numeric statistics row, hidden for categorical columns
        self._numeric_row = QWidget()
        numeric_grid = QGridLayout(self._numeric_row)
        numeric_grid.setContentsMargins(0, 0, 0, 0)
        numeric_grid.setSpacing(8)
        for i, (key, caption) in enumerate(
            [('min', "Min"), ('max', "Max"), ('mean', "Mean"), ('median', "Median")]
        ):
            card = _StatCard(caption)
            numeric_grid.addWidget(card, 0, i)
            self._cards[key] = card
        layout.addWidget(self._numeric_row)

        lbl_top = QLabel("Most Common Values")
        lbl_top.setStyleSheet(f"color: {DARK_COLORS['accent']}; font-weight: bold;")
        layout.addWidget(lbl_top)
        self._top_table = _make_table()
        self._top_table.setColumnCount(4)
        self._top_table.setHorizontalHeaderLabels(["#", "Value", "Count", "Share"])
        self._top_table.horizontalHeader().setSectionResizeMode(
            1, QHeaderView.ResizeMode.Stretch
        )
        layout.addWidget(self._top_table, 1)
        return tab

    def _build_table_tab(self) -> QWidget:
        tab = QWidget()
        layout = QVBoxLayout(tab)
        self._freq_table = _make_table()
        self._freq_table.setColumnCount(4)
        self._freq_table.setHorizontalHeaderLabels(
            ["Rank", "Value", "Count", "Percentage"]
        )
        self._freq_table.horizontalHeader().setSectionResizeMode(
            1, QHeaderView.ResizeMode.Stretch
        )
        self._lbl_table = QLabel("")
        self._lbl_table.setStyleSheet(
            f"color: {DARK_COLORS['fg_dim']}; font-size: 11px;"
        )
        layout.addWidget(self._freq_table, 1)
        layout.addWidget(self._lbl_table)
        return tab

    # ── Public API ───────────────────────────────────────────────────

    @property
    def chart_tab(self) -> _ChartTab:
        return self._tab_chart

    def show_table(self, table: TabularModel) -> None:
        """Fill the Data Preview tab; ``None`` clears it."""
        if table is None:
            self._preview_table.clear()
            self._preview_table.setRowCount(0)
            self._preview_table.setColumnCount(0)
            self._lbl_preview.setText("")
            return

        preview = table.preview(PREVIEW_ROWS)
        self._preview_table.clear()
        self._preview_table.setColumnCount(table.n_columns)
        self._preview_table.setHorizontalHeaderLabels(
            [f"{h}\n#{i + 1}" for i, h in enumerate(table.headers)]
        )
        self._preview_table.setRowCount(len(preview))
        dim = DARK_COLORS['fg_dim']
        for r, row in enumerate(preview):
            for c, cell in enumerate(row):
                item = _item(cell if cell else "empty")
                if not cell:
                    item.setForeground(QColor(dim))
                self._preview_table.setItem(r, c, item)

        if table.n_rows > PREVIEW_ROWS:
            self._lbl_preview.setText(
                f"Showing first {PREVIEW_ROWS} of {table.n_rows:,} rows"
            )
        else:
            self._lbl_preview.setText(f"{table.n_rows:,} rows")

    def show_analysis(self, session: AnalysisSession) -> None:
        """Re-render overview, table and chart from *session*."""
        summary = session.summary
        if summary is None:
            self.clear_analysis()
            return

        visible = session.visible_entries()

        # ── Overview cards ───────────────────────────────────────────
        self._cards['total'].set_value(f"{summary.total_values:,}")
        self._cards['unique'].set_value(f"{summary.unique_values:,}")
        self._cards['empty'].set_value(f"{summary.empty_values:,}")
        self._cards['uniqueness'].set_value(f"{summary.uniqueness:.1f}%")
        self._cards['most'].set_value(summary.most_common or "–")
        self._cards['least'].set_value(summary.least_common or "–")
        self._cards['type'].set_value(
            "Numeric" if summary.is_numeric else "Categorical"
        )

        stats = summary.numeric_stats
        self._numeric_row.setVisible(stats is not None)
        if stats is not None:
            self._cards['min'].set_value(format_number(stats.min))
            self._cards['max'].set_value(format_number(stats.max))
            self._cards['mean'].set_value(f"{stats.mean:.2f}")
            self._cards['median'].set_value(f"{stats.median:.2f}")

        top = top_values(visible)
        self._top_table.setRowCount(len(top))
        for r, entry in enumerate(top):
            self._top_table.setItem(r, 0, _item(str(r + 1)))
            self._top_table.setItem(r, 1, _item(entry.value))
            self._top_table.setItem(r, 2, _item(f"{entry.count:,}", True))
            self._top_table.setItem(
                r, 3, _item(f"{entry.percentage:.1f}%", True)
            )

        # ── Frequency table ──────────────────────────────────────────
        self._freq_table.setRowCount(len(visible))
        for r, entry in enumerate(visible):
            self._freq_table.setItem(r, 0, _item(str(r + 1)))
            self._freq_table.setItem(r, 1, _item(entry.value))
            self._freq_table.setItem(r, 2, _item(f"{entry.count:,}", True))
            self._freq_table.setItem(
                r, 3, _item(format_percentage(entry.percentage), True)
            )
        self._lbl_table.setText(
            f"Showing {len(visible)} of {len(summary.entries)} unique values"
        )

        # ── Chart ────────────────────────────────────────────────────
        apply_plot_style(PLOT_STYLE_DARK)
        render_frequency_bar(
            self._tab_chart.fig, session.visible_chart_points(),
            column=summary.column, for_export=False,
        )
        self._tab_chart.refresh()

    def clear_analysis(self) -> None:
        """Blank the overview, table and chart tabs."""
        for card in self._cards.values():
            card.set_value("–")
        self._numeric_row.setVisible(False)
        self._top_table.setRowCount(0)
        self._freq_table.setRowCount(0)
        self._lbl_table.setText("Select a column to analyze")
        render_frequency_bar(self._tab_chart.fig, ())
        self._tab_chart.refresh()
