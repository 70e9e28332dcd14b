"""
Control panel (left side) for FlashFreq.

File input, column selection, search box, top-N choice and the Export
Analysis button.  Loading goes through the shared ``AnalysisSession``;
the panel only reports what happened through its signals.
"""

import os

from PySide6.QtWidgets import (
    QWidget, QVBoxLayout, QHBoxLayout, QGroupBox, QLabel, QPushButton,
    QLineEdit, QComboBox, QFileDialog, QMessageBox,
)
from PySide6.QtCore import Signal

from .constants import DARK_COLORS, TOP_N_OPTIONS
from .errors import FlashFreqError
from .session import AnalysisSession


class ControlPanel(QWidget):
    """Left-side panel with file, column and view controls."""

    # Signals
    table_loaded = Signal(object)       # emits TabularModel, or None on failure
    column_selected = Signal(int)
    view_changed = Signal()
    export_requested = Signal()

    def __init__(self, session: AnalysisSession, parent=None):
        super().__init__(parent)
        self._session = session
        self._setup_ui()
        self._connect_signals()

    # ── UI setup ─────────────────────────────────────────────────────

    def _setup_ui(self):
        layout = QVBoxLayout(self)
        layout.setContentsMargins(6, 6, 6, 6)
        layout.setSpacing(8)

        # ── Group 1: Data File ───────────────────────────────────────
        grp_file = QGroupBox("Data File")
        file_layout = QVBoxLayout(grp_file)
        file_layout.setSpacing(4)

        btn_row = QHBoxLayout()
        self._btn_open = QPushButton("Open CSV...")
        self._btn_open.setToolTip("Choose a CSV file (up to ~50 MB recommended)")
        self._btn_example = QPushButton("Load Example")
        btn_row.addWidget(self._btn_open)
        btn_row.addWidget(self._btn_example)
        file_layout.addLayout(btn_row)

        self._lbl_file_name = QLabel("No file loaded")
        self._lbl_file_name.setStyleSheet("font-weight: bold;")
        self._lbl_file_name.setWordWrap(True)
        file_layout.addWidget(self._lbl_file_name)

        self._lbl_file_status = QLabel("")
        self._lbl_file_status.setStyleSheet(
            f"color: {DARK_COLORS['fg_dim']}; font-size: 11px;"
        )
        self._lbl_file_status.setWordWrap(True)
        file_layout.addWidget(self._lbl_file_status)

        layout.addWidget(grp_file)

        # ── Group 2: Column ──────────────────────────────────────────
        grp_column = QGroupBox("Column")
        column_layout = QVBoxLayout(grp_column)
        self._cmb_column = QComboBox()
        self._cmb_column.setPlaceholderText("Select a column to analyze")
        self._cmb_column.setEnabled(False)
        column_layout.addWidget(self._cmb_column)
        layout.addWidget(grp_column)

        # ── Group 3: View ────────────────────────────────────────────
        grp_view = QGroupBox("View")
        view_layout = QVBoxLayout(grp_view)
        self._edt_search = QLineEdit()
        self._edt_search.setPlaceholderText("Search values...")
        self._edt_search.setClearButtonEnabled(True)
        view_layout.addWidget(self._edt_search)

        self._cmb_top_n = QComboBox()
        for value, label in TOP_N_OPTIONS:
            self._cmb_top_n.addItem(label, value)
        view_layout.addWidget(self._cmb_top_n)
        layout.addWidget(grp_view)

        # ── Export ───────────────────────────────────────────────────
        self._btn_export = QPushButton("Export Analysis...")
        self._btn_export.setEnabled(False)
        layout.addWidget(self._btn_export)

        layout.addStretch()

    # ── Signal connections ───────────────────────────────────────────

    def _connect_signals(self):
        self._btn_open.clicked.connect(lambda *_: self.browse_file())
        self._btn_example.clicked.connect(lambda *_: self.load_example())
        self._cmb_column.currentIndexChanged.connect(self._on_column_changed)
        self._edt_search.textChanged.connect(self._on_search_changed)
        self._cmb_top_n.currentIndexChanged.connect(self._on_top_n_changed)
        self._btn_export.clicked.connect(
            lambda *_: self.export_requested.emit()
        )

    # ── Slot implementations ─────────────────────────────────────────

    def browse_file(self):
        path, _ = QFileDialog.getOpenFileName(
            self, "Open CSV File",
            "", "CSV Files (*.csv);;All Files (*)",
        )
        if path:
            self.load_path(path)

    def load_example(self):
        """Generate and load the example dataset."""
        from .example_data import generate_example_csv
        import tempfile

        example_dir = os.path.join(tempfile.gettempdir(), 'flashfreq_example')
        self.load_path(generate_example_csv(example_dir))

    def load_path(self, path: str):
        """Load *path* into the session and refresh the controls."""
        try:
            table = self._session.load_file(path)
        except FlashFreqError as exc:
            self._lbl_file_name.setText("No file loaded")
            self._lbl_file_status.setText(f"Error: {exc}")
            self._lbl_file_status.setStyleSheet(
                f"color: {DARK_COLORS['red']}; font-size: 11px;"
            )
            self._reset_column_combo([])
            self._btn_export.setEnabled(False)
            QMessageBox.critical(self, "Error Loading CSV", str(exc))
            self.table_loaded.emit(None)
            return

        self._lbl_file_name.setText(self._session.file_name)
        self._lbl_file_status.setText(
            f"{table.n_rows:,} rows × {table.n_columns} columns"
        )
        self._lbl_file_status.setStyleSheet(
            f"color: {DARK_COLORS['green']}; font-size: 11px;"
        )
        self._reset_column_combo(table.headers)
        self._btn_export.setEnabled(False)
        self.table_loaded.emit(table)

    def _reset_column_combo(self, headers):
        self._cmb_column.blockSignals(True)
        self._cmb_column.clear()
        for i, header in enumerate(headers):
            self._cmb_column.addItem(f"{header}  (Col {i + 1})", i)
        self._cmb_column.setCurrentIndex(-1)
        self._cmb_column.setEnabled(bool(headers))
        self._cmb_column.blockSignals(False)

        self._edt_search.blockSignals(True)
        self._edt_search.clear()
        self._edt_search.blockSignals(False)

    def _on_column_changed(self, combo_index):
        if combo_index < 0:
            return
        # Session resets the search term on a new column
        self._edt_search.blockSignals(True)
        self._edt_search.clear()
        self._edt_search.blockSignals(False)
        self.column_selected.emit(self._cmb_column.itemData(combo_index))

    def _on_search_changed(self, text):
        self._session.set_search_term(text)
        self.view_changed.emit()

    def _on_top_n_changed(self, combo_index):
        self._session.set_top_n(self._cmb_top_n.itemData(combo_index))
        self.view_changed.emit()

    # ── Public API ───────────────────────────────────────────────────

    def set_export_enabled(self, enabled: bool) -> None:
        self._btn_export.setEnabled(enabled)
