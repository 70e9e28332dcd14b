"""
Frequency analyzer for FlashFreq.

Counts how often each display value occurs in a column.  Cells are
trimmed; blank cells are grouped under ``EMPTY_SENTINEL``.  Entries are
ordered by descending count, and values with equal counts keep the
order in which they were first seen (``sorted`` is stable).
"""

from collections import Counter
from typing import Sequence, Tuple

from .constants import EMPTY_SENTINEL
from .data_model import FrequencyEntry


def display_value(cell: str) -> str:
    """Normalise one cell to the string used for grouping."""
    return cell.strip() or EMPTY_SENTINEL


def analyze_frequencies(values: Sequence[str]) -> Tuple[FrequencyEntry, ...]:
    """Build the frequency distribution of a column.

    Parameters
    ----------
    values : sequence of str
        Every cell of the column, blanks included.

    Returns
    -------
    tuple of FrequencyEntry
        One entry per distinct display value.  ``percentage`` uses the
        full number of values (blanks included) as denominator and is
        not rounded.  An empty column yields an empty tuple.
    """
    total = len(values)
    if total == 0:
        return ()

    # Counter preserves first-insertion order of its keys
    counts = Counter(display_value(cell) for cell in values)
    ordered = sorted(counts.items(), key=lambda item: -item[1])

    return tuple(
        FrequencyEntry(value=value, count=count, percentage=count / total * 100)
        for value, count in ordered
    )
