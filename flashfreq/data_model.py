"""
Data model for FlashFreq.

Immutable dataclasses for the parsed table and everything derived from
it.  The ``TabularModel`` is built once by ``csv_parser`` and never
mutated; frequency entries, summaries and chart points are pure
projections that can always be regenerated from the table plus a column
index.

Cells are kept as raw strings.  Rows may be shorter than the header —
a missing cell reads as ``""``, never as an error.
"""

from dataclasses import dataclass
from typing import Optional, Tuple


@dataclass(frozen=True)
class TabularModel:
    """A parsed CSV file: header row plus data rows.

    Parameters
    ----------
    headers : tuple of str
        Column names in file order.  Not required to be unique.
    rows : tuple of tuple of str
        Data records in file order, cells aligned positionally to
        ``headers``.
    """
    headers: Tuple[str, ...]
    rows: Tuple[Tuple[str, ...], ...]

    @property
    def n_rows(self) -> int:
        return len(self.rows)

    @property
    def n_columns(self) -> int:
        return len(self.headers)

    def cell(self, row_index: int, column_index: int) -> str:
        """Return one cell, or ``""`` when the row is too short."""
        row = self.rows[row_index]
        if 0 <= column_index < len(row):
            return row[column_index]
        return ""

    def preview(self, n_rows: int) -> Tuple[Tuple[str, ...], ...]:
        """First *n_rows* rows, each padded or cut to the header width."""
        width = self.n_columns
        return tuple(
            tuple(row[:width]) + ("",) * (width - len(row))
            for row in self.rows[:n_rows]
        )


@dataclass(frozen=True)
class FrequencyEntry:
    """One distinct display value of a column.

    ``percentage`` is the raw share ``count / total * 100``; rounding
    happens only when the value is displayed or exported.
    """
    value: str
    count: int
    percentage: float


@dataclass(frozen=True)
class NumericStats:
    """Descriptive statistics of the numeric cells of a column.

    ``mean`` and ``median`` are rounded to two decimal places;
    ``min`` and ``max`` are the plain extrema.
    """
    min: float
    max: float
    mean: float
    median: float


@dataclass(frozen=True)
class ColumnSummary:
    """Complete analysis of one column.

    Parameters
    ----------
    column : str
        Header name of the analysed column.
    column_index : int
        0-based position of the column.
    total_values : int
        Number of data rows (empty cells included).
    unique_values : int
        Number of distinct display values (the empty sentinel counts).
    empty_values : int
        Cells that were empty or whitespace-only.
    most_common, least_common : str
        Display value of the first / last frequency entry, ``""`` when
        the table has no rows.
    is_numeric : bool
        Classification result.
    numeric_stats : NumericStats or None
        Present only for numeric columns with at least one coercible
        value.
    entries : tuple of FrequencyEntry
        Frequency distribution ordered by descending count.
    """
    column: str
    column_index: int
    total_values: int
    unique_values: int
    empty_values: int
    most_common: str
    least_common: str
    is_numeric: bool
    numeric_stats: Optional[NumericStats]
    entries: Tuple[FrequencyEntry, ...]

    @property
    def uniqueness(self) -> float:
        """Distinct values as a percentage of all values."""
        if self.total_values == 0:
            return 0.0
        return self.unique_values / self.total_values * 100


@dataclass(frozen=True)
class ChartPoint:
    """One bar of the frequency chart."""
    label: str
    full_label: str
    count: int
    percentage: float
