"""
Analysis session for FlashFreq.

``AnalysisSession`` is the single owner of everything that changes while
the application runs: the loaded table, the selected column, the column
summary and the view settings (search term, top-N).  Each event —
file loaded, column chosen, search typed — replaces fields of the
session; derived views are recomputed from scratch on every request.

On a failed load or an invalid column the stale analysis is cleared
before the error propagates, so the GUI never shows results that no
longer match the input.
"""

import os
from typing import Optional, Tuple

from .column_summary import summarize
from .constants import TOP_N_ALL
from .csv_parser import check_file_type, load_csv_file, parse_csv_text
from .data_model import ChartPoint, ColumnSummary, FrequencyEntry, TabularModel
from .errors import FlashFreqError, InvalidColumnError
from .export import export_filename, frequency_csv_text
from .view_projector import TopN, chart_points, project_view, validate_top_n


class AnalysisSession:
    """Mutable state of one FlashFreq window."""

    def __init__(self):
        self.file_name: str = ""
        self.table: Optional[TabularModel] = None
        self.selected_column: Optional[int] = None
        self.summary: Optional[ColumnSummary] = None
        self.search_term: str = ""
        self.top_n: TopN = TOP_N_ALL

    # ── Loading ──────────────────────────────────────────────────────

    def load_text(self, text: str, file_name: str = "") -> TabularModel:
        """Parse *text* and make it the current table.

        Selection, summary and search term are reset; the top-N choice
        is kept.  On error every piece of state is cleared and the
        exception is re-raised.
        """
        try:
            table = parse_csv_text(text)
        except FlashFreqError:
            self.clear()
            raise
        self._replace_table(table, file_name)
        return table

    def load_file(self, filepath: str) -> TabularModel:
        """Check, read and parse *filepath*; see ``load_text``."""
        try:
            check_file_type(filepath)
            table = load_csv_file(filepath)
        except FlashFreqError:
            self.clear()
            raise
        self._replace_table(table, os.path.basename(filepath))
        return table

    def _replace_table(self, table: TabularModel, file_name: str) -> None:
        self.table = table
        self.file_name = file_name
        self.selected_column = None
        self.summary = None
        self.search_term = ""

    def clear(self) -> None:
        """Forget the table and every result derived from it."""
        self.file_name = ""
        self.table = None
        self.selected_column = None
        self.summary = None
        self.search_term = ""

    # ── Column selection ─────────────────────────────────────────────

    def select_column(self, column_index: int) -> ColumnSummary:
        """Analyse *column_index* and make it the current column.

        The search term is reset.  Raises ``InvalidColumnError`` (after
        clearing the previous summary) when no table is loaded or the
        index is out of range.
        """
        self.search_term = ""
        if self.table is None:
            self.selected_column = None
            self.summary = None
            raise InvalidColumnError("No table is loaded.")
        try:
            summary = summarize(self.table, column_index)
        except InvalidColumnError:
            self.selected_column = None
            self.summary = None
            raise
        self.selected_column = column_index
        self.summary = summary
        return summary

    def select_column_by_name(self, name: str) -> ColumnSummary:
        """Select the first column whose header equals *name*."""
        headers = self.table.headers if self.table is not None else ()
        if name not in headers:
            self.selected_column = None
            self.summary = None
            raise InvalidColumnError(f"Unknown column: {name!r}")
        return self.select_column(headers.index(name))

    # ── View settings ────────────────────────────────────────────────

    def set_search_term(self, term: str) -> None:
        self.search_term = term

    def set_top_n(self, n: TopN) -> None:
        """Set the top-N limit; raises ``ValueError`` for bad values."""
        self.top_n = validate_top_n(n)

    # ── Derived views ────────────────────────────────────────────────

    @property
    def has_analysis(self) -> bool:
        return self.summary is not None and len(self.summary.entries) > 0

    def all_entries(self) -> Tuple[FrequencyEntry, ...]:
        if self.summary is None:
            return ()
        return self.summary.entries

    def visible_entries(self) -> Tuple[FrequencyEntry, ...]:
        """Entries after the search filter and the top-N limit."""
        return project_view(self.all_entries(), self.search_term, self.top_n)

    def visible_chart_points(self) -> Tuple[ChartPoint, ...]:
        return chart_points(self.visible_entries())

    def export_text(self) -> str:
        """CSV text of the visible entries."""
        return frequency_csv_text(self.visible_entries())

    def export_filename(self) -> str:
        """Suggested file name for ``export_text``."""
        column = self.summary.column if self.summary is not None else ""
        return export_filename(self.file_name, column)
