"""
Descriptive statistics for numeric columns.

Computes min, max, mean and median with numpy.  Mean and median are
rounded to ``STATS_DECIMALS`` places using ROUND_HALF_UP applied to the
shortest decimal representation of the float, so the rounding matches
what the number looks like when printed:

>>> round_half_up(1.005)
1.01
>>> round_half_up(2.345)
2.35
>>> round_half_up(-2.345)
-2.35

Python's built-in ``round`` gives ``1.0`` for ``1.005`` because it works
on the binary value, which sits just below the halfway point.
"""

from decimal import ROUND_HALF_UP, Decimal
from typing import Optional, Sequence

import numpy as np

from .constants import STATS_DECIMALS
from .data_model import NumericStats


def round_half_up(value: float, places: int = STATS_DECIMALS) -> float:
    """Round *value* to *places* decimals, halves away from zero."""
    quantum = Decimal(1).scaleb(-places)
    return float(Decimal(repr(float(value))).quantize(quantum, rounding=ROUND_HALF_UP))


def compute_stats(values: Sequence[float]) -> Optional[NumericStats]:
    """Compute ``NumericStats`` for *values*.

    Returns ``None`` when *values* is empty.  The caller's sequence is
    never reordered; ``np.median`` works on its own sorted copy and
    averages the two central elements for even-length input.
    """
    if len(values) == 0:
        return None

    arr = np.asarray(values, dtype=float)
    return NumericStats(
        min=float(np.min(arr)),
        max=float(np.max(arr)),
        mean=round_half_up(float(np.mean(arr))),
        median=round_half_up(float(np.median(arr))),
    )
