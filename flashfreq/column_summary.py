"""
Column summary builder for FlashFreq.

Combines the frequency analyzer, the numeric classifier and the
statistics calculator into one ``ColumnSummary``.  The summary is a pure
function of ``(TabularModel, column_index)``: calling ``summarize``
twice on the same input gives equal results.
"""

from typing import List, Tuple

from .classifier import is_numeric_column, parse_number
from .data_model import ColumnSummary, TabularModel
from .descriptive_stats import compute_stats
from .errors import InvalidColumnError
from .frequency import analyze_frequencies


def column_values(model: TabularModel, column_index: int) -> Tuple[str, ...]:
    """Extract one column from every row; short rows give ``""``."""
    _check_column_index(model, column_index)
    return tuple(
        row[column_index] if column_index < len(row) else ""
        for row in model.rows
    )


def _check_column_index(model: TabularModel, column_index: int) -> None:
    if not 0 <= column_index < model.n_columns:
        raise InvalidColumnError(
            f"Column index {column_index} is out of range for a table "
            f"with {model.n_columns} columns."
        )


def summarize(model: TabularModel, column_index: int) -> ColumnSummary:
    """Analyse one column of *model*.

    Raises
    ------
    InvalidColumnError
        If *column_index* is not a valid position in ``model.headers``.
    """
    values = column_values(model, column_index)
    non_empty: List[str] = [v.strip() for v in values if v.strip()]

    entries = analyze_frequencies(values)
    is_numeric = is_numeric_column(non_empty)

    numeric_stats = None
    if is_numeric:
        # Deliberate policy: a column can be classified numeric while
        # still holding a few non-numeric cells.  Those cells are left
        # out of the statistics only; they still appear in the
        # frequency table.
        numbers = [
            number for number in (parse_number(v) for v in non_empty)
            if number is not None
        ]
        numeric_stats = compute_stats(numbers)

    return ColumnSummary(
        column=model.headers[column_index],
        column_index=column_index,
        total_values=len(values),
        unique_values=len(entries),
        empty_values=len(values) - len(non_empty),
        most_common=entries[0].value if entries else "",
        least_common=entries[-1].value if entries else "",
        is_numeric=is_numeric,
        numeric_stats=numeric_stats,
        entries=entries,
    )
