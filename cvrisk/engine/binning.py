"""Binning of continuous predictors into ordinal bands.

Published charts differ in which side of a cut point is inclusive: SCORE2
puts 160 mmHg in the top systolic band (``>= 160``) while SCORE 2016 only
starts its top band above 170 (``> 170``). ``Bins`` therefore carries its
sidedness explicitly.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence, Tuple

import numpy as np

from ..exceptions import LookupMiss


MISSING = -1


@dataclass(frozen=True)
class Bins:
    """Ordered cut points partitioning the real line.

    ``edges`` of length n define n + 1 bands; the first and last are open.

    Attributes:
        edges: Strictly increasing cut points
        closed: "left" for ``[a, b)`` bands, "right" for ``(a, b]`` bands
    """

    edges: Tuple[float, ...]
    closed: str = "left"

    def __post_init__(self):
        if self.closed not in ("left", "right"):
            raise ValueError(f"closed must be 'left' or 'right', got {self.closed!r}")
        if any(b <= a for a, b in zip(self.edges, self.edges[1:])):
            raise LookupMiss(f"Bin edges must be strictly increasing: {self.edges}")

    @property
    def n_bins(self) -> int:
        return len(self.edges) + 1

    def index(self, values) -> np.ndarray:
        """Map values to 0-based band indices; missing values map to ``MISSING``."""
        values = np.asarray(values, dtype=float)
        side = "right" if self.closed == "left" else "left"
        idx = np.searchsorted(np.asarray(self.edges, dtype=float), values, side=side)
        return np.where(np.isnan(values), MISSING, idx).astype(int)


class PointTable:
    """Points awarded per band of one predictor."""

    def __init__(self, bins: Bins, points: Sequence[float]):
        if len(points) != bins.n_bins:
            raise LookupMiss(
                f"{len(points)} point values for {bins.n_bins} bins ({bins.edges})"
            )
        self.bins = bins
        self.points = np.asarray(points, dtype=float)

    def __call__(self, values) -> np.ndarray:
        """Points for each value; missing values score 0."""
        idx = self.bins.index(values)
        return np.where(idx == MISSING, 0.0, self.points[np.clip(idx, 0, None)])


def flag_points(values, points: float) -> np.ndarray:
    """Points for a 0/1 indicator; missing values score 0."""
    values = np.asarray(values, dtype=float)
    return np.where(values == 1, float(points), 0.0)
