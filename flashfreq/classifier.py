"""
Numeric / categorical column classifier for FlashFreq.

A column is treated as numeric when more than 80% of its non-empty
values parse as finite real numbers.  The threshold is strict: exactly
80% is *not* numeric.  A column with no non-empty values is never
numeric.
"""

import math
from typing import Iterable, Optional

from .constants import NUMERIC_THRESHOLD


def parse_number(text: str) -> Optional[float]:
    """Parse *text* as a finite real number.

    Surrounding whitespace is ignored.  Accepted syntax is an ASCII
    decimal or scientific literal (``"12"``, ``"-3.5"``, ``".5"``,
    ``"1e3"``).  Returns ``None`` for everything else, including
    ``nan``, ``inf`` and ``Infinity`` spellings, Python's underscore
    digit grouping (``"1_000"``), non-ASCII digits (Arabic-Indic, fullwidth)
    and hex literals such as ``"0x10"``.
    """
    s = text.strip()
    if not s or not s.isascii() or '_' in s:
        return None
    try:
        value = float(s)
    except ValueError:
        return None
    if not math.isfinite(value):
        return None
    return value


def is_numeric_column(values: Iterable[str]) -> bool:
    """Classify a column from its non-empty, trimmed values.

    Parameters
    ----------
    values : iterable of str
        The column's non-empty values.  Blank strings passed anyway are
        ignored.

    Returns
    -------
    bool
        ``True`` iff the share of numeric values is strictly greater
        than ``NUMERIC_THRESHOLD``.
    """
    n_non_empty = 0
    n_numeric = 0
    for value in values:
        if not value.strip():
            continue
        n_non_empty += 1
        if parse_number(value) is not None:
            n_numeric += 1

    if n_non_empty == 0:
        return False
    return n_numeric / n_non_empty > NUMERIC_THRESHOLD
