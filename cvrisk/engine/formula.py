"""Closed-form survival models shared by the formula-based scores."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Iterable, Optional, Tuple

import numpy as np

from ..config import CONFIG


@dataclass(frozen=True)
class CoefficientSet:
    """Regression coefficients for one sex (and ethnicity) group.

    Attributes:
        coefficients: Term name -> coefficient
        baseline_survival: S0 at the model's time horizon
        mean: Group mean of the linear predictor (0 when the predictors are
            already centred)
        calibration: Region -> (scale1, scale2) for recalibrated models
    """

    coefficients: Dict[str, float]
    baseline_survival: float
    mean: float = 0.0
    calibration: Dict[str, Tuple[float, float]] = field(default_factory=dict)

    def __getitem__(self, term: str) -> float:
        return self.coefficients.get(term, 0.0)


def linear_predictor(coefs: CoefficientSet, terms: Dict[str, np.ndarray]) -> np.ndarray:
    """Weighted sum of model terms.

    Missing term values contribute zero.
    """
    total = None
    for name, values in terms.items():
        contribution = np.nan_to_num(np.asarray(values, dtype=float) * coefs[name], nan=0.0)
        total = contribution if total is None else total + contribution
    return total


def survival_risk(lp, baseline_survival, mean=0.0) -> np.ndarray:
    """Event probability ``1 - S0 ** exp(lp - mean)`` as a fraction."""
    return 1.0 - np.power(baseline_survival, np.exp(np.asarray(lp, dtype=float) - mean))


def recalibrate(risk, scale1, scale2) -> np.ndarray:
    """Regional recalibration used by SCORE2 and SCORE2-OP.

    ``1 - exp(-exp(scale1 + scale2 * ln(-ln(1 - risk))))``
    """
    risk = np.asarray(risk, dtype=float)
    return 1.0 - np.exp(-np.exp(scale1 + scale2 * np.log(-np.log(1.0 - risk))))


def finalise(risk_fraction, clamp: Optional[Tuple[float, float]] = None, digits: Optional[int] = None) -> np.ndarray:
    """Convert a fraction to a rounded percentage, clamped to ``clamp``."""
    digits = CONFIG.round_digits if digits is None else digits
    percent = np.round(np.asarray(risk_fraction, dtype=float) * 100.0, digits)
    if clamp is not None:
        percent = np.clip(percent, clamp[0], clamp[1])
    return percent


def select_by_group(groups: np.ndarray, values: Dict[object, np.ndarray]) -> np.ndarray:
    """Pick, row by row, the array computed for each row's group."""
    out = np.full(len(groups), np.nan)
    for key, arr in values.items():
        mask = groups == key
        out[mask] = np.asarray(arr, dtype=float)[mask]
    return out


def safe_log(values: Iterable) -> np.ndarray:
    """Natural log; missing values stay missing and are dropped by
    :func:`linear_predictor`."""
    values = np.asarray(values, dtype=float)
    with np.errstate(divide="ignore", invalid="ignore"):
        return np.log(values)
