"""Shared machinery of the risk scores: validation, units, binning,
table lookup and survival formulas."""

from .binning import Bins, PointTable, flag_points
from .formula import CoefficientSet, finalise, linear_predictor, recalibrate, survival_risk
from .lookup import RiskChart, RiskTable
from .units import MGDL_TO_MMOL, to_mgdl, to_mmol
from .validation import Field, validate_inputs

__all__ = [
    "Bins",
    "PointTable",
    "flag_points",
    "CoefficientSet",
    "finalise",
    "linear_predictor",
    "recalibrate",
    "survival_risk",
    "RiskChart",
    "RiskTable",
    "MGDL_TO_MMOL",
    "to_mgdl",
    "to_mmol",
    "Field",
    "validate_inputs",
]
