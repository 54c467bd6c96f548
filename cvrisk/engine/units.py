"""Cholesterol unit conversion."""
from __future__ import annotations

import numpy as np


# 1 mg/dL cholesterol = 0.0259 mmol/L
MGDL_TO_MMOL = 0.0259

# Laboratory precision of converted values (193 mg/dL -> 5.00 mmol/L)
MMOL_DIGITS = 2


def to_mmol(values, mmol: bool) -> np.ndarray:
    """Return cholesterol values in mmol/L.

    Args:
        values: Cholesterol values
        mmol: True if ``values`` are already in mmol/L, False for mg/dL

    Returns:
        Array of values in mmol/L, rounded to ``MMOL_DIGITS`` when converted
    """
    values = np.asarray(values, dtype=float)
    return values if mmol else np.round(values * MGDL_TO_MMOL, MMOL_DIGITS)


def to_mgdl(values, mmol: bool) -> np.ndarray:
    """Return cholesterol values in mg/dL (inverse of :func:`to_mmol`)."""
    values = np.asarray(values, dtype=float)
    return values / MGDL_TO_MMOL if mmol else values
