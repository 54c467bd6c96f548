"""
PROCAM (Prospective Cardiovascular Muenster) scores.

PROCAM 2002:
    10-year risk (%) of an acute coronary event in men aged 35-65, from an
    integer point total covering age, LDL, HDL, triglycerides, systolic blood
    pressure, smoking, diabetes and family history of myocardial infarction.

PROCAM 2007:
    Finer-grained points without an age term. The point total is read
    against per-age category limits for men and women, giving one of five
    10-year risk categories.

All continuous inputs are rounded to whole numbers before scoring; lipids
are in mg/dL.

References:
    Assmann G, Cullen P, Schulte H. Circulation. 2002;105(3):310-315.
    Assmann G, Schulte H, Cullen P, Seedorf U. Eur J Clin Invest.
    2007;37(12):925-932.
"""
from __future__ import annotations

import logging

import numpy as np
import pandas as pd

from ..data import procam as tables
from ..engine.binning import PointTable, flag_points
from ..engine.lookup import RiskTable
from ..engine.validation import SEXES, binary, numeric, sex_field, validate_flag
from .base import RiskScore

logger = logging.getLogger(__name__)

CONTINUOUS = ("age", "ldl", "hdl", "triglycerides", "sbp")


def _round_inputs(data):
    rounded = dict(data)
    for name in CONTINUOUS:
        if name in rounded:
            rounded[name] = np.round(rounded[name])
    return rounded


class Procam2002(RiskScore):
    """PROCAM 2002 points score for men."""

    name = "procam_2002"
    full_name = "PROCAM score (2002)"
    reference = "Assmann G, Cullen P, Schulte H. Circulation. 2002;105(3):310-315."
    outcome = "10-year risk of an acute coronary event (%)"

    def __init__(self):
        self.schema = (
            numeric("age", required=False, valid_range=(35, 65)),
            numeric("ldl", required=False),
            numeric("hdl", required=False),
            numeric("triglycerides", required=False),
            binary("smoker", required=False),
            binary("diabetic", required=False),
            binary("fam_mi", required=False),
            numeric("sbp", required=False),
        )
        self.points = {name: PointTable(bins, pts) for name, (bins, pts) in tables.POINTS_2002.items()}
        self.risk_table = RiskTable(*tables.RISK_2002)
        self.output_range = (float(self.risk_table.values.min()), float(self.risk_table.values.max()))

    def score_points(self, data) -> np.ndarray:
        total = sum(table(data[name]) for name, table in self.points.items())
        for name, pts in tables.FLAG_POINTS_2002.items():
            total = total + flag_points(data[name], pts)
        return total

    def compute_batch(self, age, ldl, hdl, triglycerides, smoker, diabetic, fam_mi, sbp) -> np.ndarray:
        """Calculate the 10-year risk for each record.

        Returns:
            Array of 10-year risks (%); point totals outside 20-60 are
            clamped to the table
        """
        data = self.validate(age=age, ldl=ldl, hdl=hdl, triglycerides=triglycerides,
                             smoker=smoker, diabetic=diabetic, fam_mi=fam_mi, sbp=sbp)
        return self.risk_table.lookup(self.score_points(_round_inputs(data)))


class Procam2007(RiskScore):
    """PROCAM 2007 points score with per-age risk categories."""

    name = "procam_2007"
    full_name = "PROCAM score (2007)"
    reference = "Assmann G, Schulte H, Cullen P, Seedorf U. Eur J Clin Invest. 2007;37(12):925-932."
    outcome = "10-year risk category of myocardial infarction or stroke"
    output_range = tables.CATEGORIES_2007

    def __init__(self):
        self.schema = (
            sex_field(),
            numeric("age", valid_range=(20, 75)),
            numeric("ldl", required=False),
            numeric("hdl", required=False),
            numeric("triglycerides", required=False),
            binary("smoker", required=False),
            binary("diabetic", required=False),
            binary("fam_mi", required=False),
            numeric("sbp", required=False),
        )
        self.points = {name: PointTable(bins, pts) for name, (bins, pts) in tables.POINTS_2007.items()}
        self.ages = {sex: np.array(sorted(tables.BREAKS_2007[sex])) for sex in SEXES}

    def score_points(self, data) -> np.ndarray:
        total = sum(table(data[name]) for name, table in self.points.items())
        for name, pts in tables.FLAG_POINTS_2007.items():
            total = total + flag_points(data[name], pts)
        for sex, pts in tables.DIABETIC_POINTS_2007.items():
            total = total + np.where(data["sex"] == sex, flag_points(data["diabetic"], pts), 0.0)
        return np.clip(total, 0, tables.MAX_SCORE_2007)

    def category_index(self, sex: str, age: float, points: float) -> int:
        ages = self.ages[sex]
        # nearest tabulated age at or below the patient's age
        row = ages[max(np.searchsorted(ages, age, side="right") - 1, 0)]
        return int(np.searchsorted(tables.BREAKS_2007[sex][row], points, side="right"))

    def compute_batch(self, sex, age, ldl, hdl, triglycerides, smoker, diabetic, fam_mi, sbp,
                      return_points: bool = False):
        """Assign each record a 10-year risk category.

        Returns:
            Array of category labels, or a DataFrame with columns 'points'
            and 'risk' when ``return_points`` is True
        """
        return_points = validate_flag("return_points", return_points, self.name)
        data = self.validate(sex=sex, age=age, ldl=ldl, hdl=hdl, triglycerides=triglycerides,
                             smoker=smoker, diabetic=diabetic, fam_mi=fam_mi, sbp=sbp)
        data = _round_inputs(data)
        points = self.score_points(data)

        labels = np.array(
            [tables.CATEGORIES_2007[self.category_index(s, a, p)] for s, a, p in zip(data["sex"], data["age"], points)],
            dtype=object,
        )
        logger.debug("%s: assigned %d risk categories", self.name, len(labels))
        if return_points:
            return pd.DataFrame({"points": points, "risk": labels})
        return labels


def procam_2002(age, ldl, hdl, triglycerides, smoker, diabetic, fam_mi, sbp) -> np.ndarray:
    return Procam2002().compute_batch(age, ldl, hdl, triglycerides, smoker, diabetic, fam_mi, sbp)


def procam_2007(sex, age, ldl, hdl, triglycerides, smoker, diabetic, fam_mi, sbp, return_points: bool = False):
    return Procam2007().compute_batch(sex, age, ldl, hdl, triglycerides, smoker, diabetic, fam_mi, sbp,
                                      return_points=return_points)
