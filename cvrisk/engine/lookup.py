"""Clamp-then-lookup tables.

Two table shapes cover every bucket-and-table score:

- ``RiskTable``: an integer point total mapped to a published outcome.
- ``RiskChart``: an ESC-style colour chart keyed by sex, smoking status,
  age band, systolic band and cholesterol band.

Keys outside a table's domain are clamped to its first or last entry,
never extrapolated.
"""
from __future__ import annotations

from typing import Sequence

import numpy as np

from ..exceptions import LookupMiss
from .binning import Bins, MISSING


class RiskTable:
    """Outcome per integer point total, starting at ``first_point``."""

    def __init__(self, first_point: int, values: Sequence[float]):
        if not len(values):
            raise LookupMiss("Risk table is empty")
        self.first_point = int(first_point)
        self.values = np.asarray(values, dtype=float)

    @property
    def last_point(self) -> int:
        return self.first_point + len(self.values) - 1

    def clamp(self, points) -> np.ndarray:
        points = np.asarray(points, dtype=float)
        if np.isnan(points).any():
            raise LookupMiss("Point totals must not be missing")
        return np.clip(np.rint(points), self.first_point, self.last_point).astype(int)

    def lookup(self, points) -> np.ndarray:
        """Outcome for each point total after clamping to the table domain."""
        return self.values[self.clamp(points) - self.first_point]


class RiskChart:
    """ESC risk chart.

    Rows run from the oldest age band down to the youngest and, inside each
    age band, from the highest systolic band down to the lowest. Columns are
    four blocks (female non-smoker, female smoker, male non-smoker, male
    smoker), each with the cholesterol bands in ascending order.
    """

    def __init__(self, grid: Sequence[Sequence[float]], age_bins: Bins, sbp_bins: Bins, chol_bins: Bins):
        self.grid = np.asarray(grid, dtype=float)
        self.age_bins = age_bins
        self.sbp_bins = sbp_bins
        self.chol_bins = chol_bins

        expected = (age_bins.n_bins * sbp_bins.n_bins, 4 * chol_bins.n_bins)
        if self.grid.shape != expected:
            raise LookupMiss(f"Chart shape {self.grid.shape} does not match bins {expected}")

    def cell(self, male, smoker, age, sbp, chol):
        """Row and column of each record's chart cell."""
        a = self.age_bins.index(age)
        s = self.sbp_bins.index(sbp)
        c = self.chol_bins.index(chol)
        if (a == MISSING).any() or (s == MISSING).any() or (c == MISSING).any():
            raise LookupMiss("Chart keys must not be missing")

        n_age, n_sbp, n_chol = self.age_bins.n_bins, self.sbp_bins.n_bins, self.chol_bins.n_bins
        a = np.clip(a, 0, n_age - 1)
        s = np.clip(s, 0, n_sbp - 1)
        c = np.clip(c, 0, n_chol - 1)

        block = 2 * np.asarray(male, dtype=int) + np.asarray(smoker, dtype=int)
        row = (n_age - 1 - a) * n_sbp + (n_sbp - 1 - s)
        col = block * n_chol + c
        return row, col

    def lookup(self, male, smoker, age, sbp, chol) -> np.ndarray:
        row, col = self.cell(male, smoker, age, sbp, chol)
        return self.grid[row, col]
