"""
Presentation views over a frequency distribution.

Every function takes a sequence of ``FrequencyEntry`` and returns a new
tuple; the input is never modified.  ``project_view`` fixes the order
of operations: search filter first, top-N limit second.
"""

from typing import Sequence, Tuple, Union

from .constants import (
    CHART_LABEL_ELLIPSIS, CHART_LABEL_MAX_CHARS, CHART_MAX_POINTS,
    TOP_N_ALL, TOP_VALUES_PREVIEW,
)
from .data_model import ChartPoint, FrequencyEntry

TopN = Union[int, str]


def filter_by_search(
    entries: Sequence[FrequencyEntry],
    term: str,
) -> Tuple[FrequencyEntry, ...]:
    """Keep entries whose value contains *term*, ignoring case.

    An empty *term* keeps every entry.
    """
    if not term:
        return tuple(entries)
    needle = term.casefold()
    return tuple(e for e in entries if needle in e.value.casefold())


def validate_top_n(n: TopN) -> TopN:
    """Return *n* if it is ``"all"`` or a non-negative int.

    Numeric strings such as ``"25"`` (the form a combo box hands over)
    are converted to int.

    Raises
    ------
    ValueError
        For negative numbers or any other value.
    """
    if n == TOP_N_ALL:
        return n
    if isinstance(n, bool):
        raise ValueError(f"Invalid top-N value: {n!r}")
    if isinstance(n, str):
        try:
            n = int(n)
        except ValueError:
            raise ValueError(f"Invalid top-N value: {n!r}") from None
    if not isinstance(n, int) or n < 0:
        raise ValueError(f"Invalid top-N value: {n!r}")
    return n


def limit_top_n(
    entries: Sequence[FrequencyEntry],
    n: TopN,
) -> Tuple[FrequencyEntry, ...]:
    """First *n* entries, or all of them when *n* is ``"all"``."""
    n = validate_top_n(n)
    if n == TOP_N_ALL:
        return tuple(entries)
    return tuple(entries[:n])


def project_view(
    entries: Sequence[FrequencyEntry],
    term: str = "",
    top_n: TopN = TOP_N_ALL,
) -> Tuple[FrequencyEntry, ...]:
    """Search-filter *entries*, then limit the result to *top_n*."""
    return limit_top_n(filter_by_search(entries, term), top_n)


def truncate_label(
    label: str,
    max_chars: int = CHART_LABEL_MAX_CHARS,
) -> str:
    """Cut *label* to *max_chars* characters plus an ellipsis."""
    if len(label) > max_chars:
        return label[:max_chars] + CHART_LABEL_ELLIPSIS
    return label


def chart_points(
    entries: Sequence[FrequencyEntry],
) -> Tuple[ChartPoint, ...]:
    """Map the first ``CHART_MAX_POINTS`` entries to bar-chart points."""
    return tuple(
        ChartPoint(
            label=truncate_label(e.value),
            full_label=e.value,
            count=e.count,
            percentage=e.percentage,
        )
        for e in entries[:CHART_MAX_POINTS]
    )


def top_values(
    entries: Sequence[FrequencyEntry],
    n: int = TOP_VALUES_PREVIEW,
) -> Tuple[FrequencyEntry, ...]:
    """The "most common values" preview shown on the overview tab."""
    return tuple(entries[:n])
