"""Pearson product-moment correlation over two aligned sequences.

The coefficient is computed from the accumulated sums

.. math::

   r = \\frac{n\\sum xy - \\sum x \\sum y}
            {\\sqrt{(n\\sum x^2 - (\\sum x)^2)(n\\sum y^2 - (\\sum y)^2)}}

Degenerate inputs (no samples, zero variance, mismatched lengths) yield
``0.0`` instead of ``NaN`` or an exception.  The result is not clamped.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Sequence

import numpy as np


@dataclass(frozen=True)
class PearsonSums:
    """Running sums needed for the single-pass Pearson formula."""

    n: int
    sum_x: float
    sum_y: float
    sum_x2: float
    sum_y2: float
    sum_xy: float

    @property
    def numerator(self) -> float:
        return self.n * self.sum_xy - self.sum_x * self.sum_y

    @property
    def denominator(self) -> float:
        var_x = self.n * self.sum_x2 - self.sum_x * self.sum_x
        var_y = self.n * self.sum_y2 - self.sum_y * self.sum_y
        # Rounding can leave a tiny negative variance for constant series.
        if var_x <= 0 or var_y <= 0:
            return 0.0
        return math.sqrt(var_x * var_y)


def accumulate_sums(xs: Sequence[float], ys: Sequence[float]) -> PearsonSums:
    """Return the sums over the paired values of ``xs`` and ``ys``."""

    x = np.asarray(xs, dtype=float).reshape(-1)
    y = np.asarray(ys, dtype=float).reshape(-1)
    if x.shape != y.shape:
        raise ValueError("xs and ys must have the same length")
    return PearsonSums(
        n=int(x.size),
        sum_x=float(np.sum(x)),
        sum_y=float(np.sum(y)),
        sum_x2=float(np.sum(x * x)),
        sum_y2=float(np.sum(y * y)),
        sum_xy=float(np.sum(x * y)),
    )


def pearson_r(xs: Sequence[float], ys: Sequence[float]) -> float:
    """Return the Pearson correlation coefficient of ``xs`` and ``ys``.

    ``0.0`` is returned when the sequences are empty, differ in length, or
    when either one has zero variance.
    """

    if len(xs) != len(ys) or len(xs) == 0:
        return 0.0
    x = np.asarray(xs, dtype=float).reshape(-1)
    y = np.asarray(ys, dtype=float).reshape(-1)
    # A constant series has zero variance even when rounding in the sums says otherwise.
    if x.min() == x.max() or y.min() == y.max():
        return 0.0
    sums = accumulate_sums(x, y)
    den = sums.denominator
    if den == 0:
        return 0.0
    return float(sums.numerator / den)
