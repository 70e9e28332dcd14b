"""
Main window for FlashFreq.

Hosts the ControlPanel (left) and ResultTabsWidget (right) in a
horizontal splitter, with a menu bar and status bar.  The window owns
the ``AnalysisSession``; every control event updates the session and
re-renders the result tabs from it.
"""

import os

from PySide6.QtWidgets import (
    QMainWindow, QWidget, QVBoxLayout, QSplitter, QScrollArea,
    QFileDialog, QMessageBox,
)
from PySide6.QtGui import QAction
from PySide6.QtCore import Qt

from . import APP_NAME, APP_VERSION
from .errors import InvalidColumnError
from .export import write_frequency_csv
from .gui_control_panel import ControlPanel
from .gui_result_tabs import ResultTabsWidget
from .session import AnalysisSession


class ExplorerMainWindow(QMainWindow):
    """Main window for FlashFreq."""

    def __init__(self):
        super().__init__()
        self._session = AnalysisSession()

        self.setWindowTitle(f"{APP_NAME} v{APP_VERSION}")
        self.setMinimumSize(1100, 720)

        self._setup_ui()
        self._setup_menu()
        self._connect_signals()

        self.statusBar().showMessage("Ready — open a CSV file to begin")

    # ── UI setup ─────────────────────────────────────────────────────

    def _setup_ui(self):
        central = QWidget()
        self.setCentralWidget(central)
        main_layout = QVBoxLayout(central)
        main_layout.setContentsMargins(4, 4, 4, 4)
        main_layout.setSpacing(4)

        splitter = QSplitter(Qt.Orientation.Horizontal)

        self._control_panel = ControlPanel(self._session)
        scroll = QScrollArea()
        scroll.setWidget(self._control_panel)
        scroll.setWidgetResizable(True)
        scroll.setMinimumWidth(280)
        scroll.setMaximumWidth(420)

        self._result_tabs = ResultTabsWidget()

        splitter.addWidget(scroll)
        splitter.addWidget(self._result_tabs)
        splitter.setStretchFactor(0, 0)
        splitter.setStretchFactor(1, 1)
        splitter.setSizes([320, 780])

        main_layout.addWidget(splitter)

    def _setup_menu(self):
        menubar = self.menuBar()

        # ── File menu ────────────────────────────────────────────────
        file_menu = menubar.addMenu("File")

        act_open = QAction("Open CSV...", self)
        act_open.setShortcut("Ctrl+O")
        act_open.triggered.connect(
            lambda *_: self._control_panel.browse_file()
        )
        file_menu.addAction(act_open)

        act_example = QAction("Load Example Dataset", self)
        act_example.triggered.connect(
            lambda *_: self._control_panel.load_example()
        )
        file_menu.addAction(act_example)

        file_menu.addSeparator()

        act_export = QAction("Export Analysis...", self)
        act_export.triggered.connect(lambda *_: self._export_analysis())
        file_menu.addAction(act_export)

        act_export_chart = QAction("Export Chart...", self)
        act_export_chart.triggered.connect(
            lambda *_: self._result_tabs.chart_tab.export_dialog()
        )
        file_menu.addAction(act_export_chart)

        file_menu.addSeparator()

        act_exit = QAction("Exit", self)
        act_exit.triggered.connect(self.close)
        file_menu.addAction(act_exit)

        # ── Help menu ────────────────────────────────────────────────
        help_menu = menubar.addMenu("Help")

        act_about = QAction("About", self)
        act_about.triggered.connect(lambda *_: self._show_about())
        help_menu.addAction(act_about)

    def _connect_signals(self):
        self._control_panel.table_loaded.connect(self._on_table_loaded)
        self._control_panel.column_selected.connect(self._on_column_selected)
        self._control_panel.view_changed.connect(self._on_view_changed)
        self._control_panel.export_requested.connect(
            lambda *_: self._export_analysis()
        )

    # ── Slots ────────────────────────────────────────────────────────

    def open_path(self, path: str):
        """Load *path* as if it had been chosen in the file dialog."""
        self._control_panel.load_path(path)

    def _on_table_loaded(self, table):
        """Slot: a file was loaded, or a load failed (``None``)."""
        self._result_tabs.show_table(table)
        self._result_tabs.clear_analysis()
        self._control_panel.set_export_enabled(False)
        if table is None:
            self.statusBar().showMessage("Load failed — previous data cleared")
            return
        self._result_tabs.setCurrentIndex(0)
        self.statusBar().showMessage(
            f"Loaded {table.n_rows:,} rows with {table.n_columns} columns",
            5000,
        )

    def _on_column_selected(self, column_index: int):
        """Slot: column combo changed — analyse the new column."""
        try:
            summary = self._session.select_column(column_index)
        except InvalidColumnError as exc:
            self._result_tabs.clear_analysis()
            self._control_panel.set_export_enabled(False)
            QMessageBox.warning(self, "Invalid Column", str(exc))
            return
        self._result_tabs.show_analysis(self._session)
        self._result_tabs.setCurrentIndex(1)
        self._control_panel.set_export_enabled(self._session.has_analysis)
        self.statusBar().showMessage(
            f"Analysed '{summary.column}': {summary.unique_values:,} "
            f"unique values", 5000,
        )

    def _on_view_changed(self):
        """Slot: search term or top-N changed — re-render the views."""
        if self._session.summary is None:
            return
        self._result_tabs.show_analysis(self._session)

    def _export_analysis(self):
        """Save the visible frequency entries as CSV."""
        if not self._session.has_analysis:
            QMessageBox.warning(
                self, "Nothing to Export",
                "Select a column to analyze before exporting.",
            )
            return

        path, _ = QFileDialog.getSaveFileName(
            self, "Export Frequency Analysis",
            self._session.export_filename(),
            "CSV Files (*.csv);;All Files (*)",
        )
        if not path:
            return
        try:
            write_frequency_csv(path, self._session.visible_entries())
        except OSError as exc:
            QMessageBox.critical(
                self, "Export Error", f"Failed to export: {exc}"
            )
            return
        self.statusBar().showMessage(
            f"Frequency analysis saved as {os.path.basename(path)}", 5000
        )

    def _show_about(self):
        QMessageBox.about(
            self,
            f"About {APP_NAME}",
            f"<h3>{APP_NAME} v{APP_VERSION}</h3>"
            f"<p>Load a CSV file, pick a column and explore its value "
            f"distribution: frequency counts, percentages and, for "
            f"numeric columns, min / max / mean / median.</p>"
            f"<p>Search and top-N filters apply to the table, the bar "
            f"chart and the CSV export alike.</p>",
        )
