"""
Framingham risk scores.

General cardiovascular disease (CVD), D'Agostino 2008:
    10-year risk (%) of coronary death, myocardial infarction, coronary
    insufficiency, angina, stroke, TIA, intermittent claudication or heart
    failure. Available as the sex-specific Cox model and as the points chart,
    which also yields the heart (vascular) age.

Coronary heart disease (CHD), Wilson 1998:
    10-year risk (%) of CHD using risk factor categories. The blood pressure
    category is the higher of the systolic and diastolic categories. The
    points chart is available for the total cholesterol and the LDL model,
    the Cox model for total cholesterol.

Cholesterol is expected in mg/dL unless ``mmol=True``.
"""
from __future__ import annotations

from typing import Dict

import numpy as np
import pandas as pd

from ..data import framingham as tables
from ..engine.binning import MISSING, Bins, PointTable, flag_points
from ..engine.formula import finalise, linear_predictor, safe_log, select_by_group, survival_risk
from ..engine.lookup import RiskTable
from ..engine.units import to_mgdl
from ..engine.validation import SEXES, binary, numeric, sex_field, validate_choice, validate_flag, validate_inputs
from .base import RiskScore

AGE_RANGE = (30, 74)
FORMULA_CLAMP = (1.0, 30.0)

# Blood pressure category index 0..4 (optimal .. stage 2+)
BP_CATEGORY_BINS = Bins((1, 2, 3, 4))


def treatment_split(values: np.ndarray, bp_med: np.ndarray):
    """Split a blood pressure term into its (untreated, treated) parts.

    The inactive part is 0 (``log(1)``); both parts are 0 when treatment
    status is missing.
    """
    return np.where(bp_med == 0, values, 0.0), np.where(bp_med == 1, values, 0.0)


# =============================================================================
# GENERAL CVD
# =============================================================================

def _cvd_schema():
    return (
        sex_field(),
        numeric("age", valid_range=AGE_RANGE),
        numeric("totchol", required=False),
        numeric("hdl", required=False),
        numeric("sbp", required=False),
        binary("bp_med", required=False),
        binary("smoker", required=False),
        binary("diabetic", required=False),
    )


class FraminghamCVD(RiskScore):
    """D'Agostino 2008 general CVD Cox model."""

    name = "framingham_cvd"
    full_name = "Framingham general cardiovascular disease risk"
    reference = "D'Agostino RB Sr, et al. Circulation. 2008;117(6):743-753."
    outcome = "10-year risk of cardiovascular disease (%)"
    output_range = FORMULA_CLAMP

    def __init__(self):
        self.schema = _cvd_schema()

    def compute_batch(self, sex, age, totchol, hdl, sbp, bp_med, smoker, diabetic, mmol: bool = False) -> np.ndarray:
        mmol = validate_flag("mmol", mmol, self.name)
        data = self.validate(sex=sex, age=age, totchol=totchol, hdl=hdl, sbp=sbp,
                             bp_med=bp_med, smoker=smoker, diabetic=diabetic)

        untreated, treated = treatment_split(safe_log(data["sbp"]), data["bp_med"])
        terms = {
            "ln_age": safe_log(data["age"]),
            "ln_totchol": safe_log(to_mgdl(data["totchol"], mmol)),
            "ln_hdl": safe_log(to_mgdl(data["hdl"], mmol)),
            "ln_untreated_sbp": untreated,
            "ln_treated_sbp": treated,
            "smoker": data["smoker"],
            "diabetic": data["diabetic"],
        }
        by_sex = {}
        for group, coefs in tables.CVD_COEFFICIENTS.items():
            by_sex[group] = survival_risk(linear_predictor(coefs, terms), coefs.baseline_survival, coefs.mean)
        return finalise(select_by_group(data["sex"], by_sex), clamp=FORMULA_CLAMP)


class FraminghamCVDTable(RiskScore):
    """D'Agostino 2008 points chart with optional heart age."""

    name = "framingham_cvd_table"
    full_name = "Framingham general cardiovascular disease risk (points)"
    reference = "D'Agostino RB Sr, et al. Circulation. 2008;117(6):743-753."
    outcome = "10-year risk of cardiovascular disease (%)"
    output_range = (0.0, 30.0)

    def __init__(self):
        self.schema = _cvd_schema()
        self.points = {
            sex: {
                "age": PointTable(tables.CVD_AGE_BINS, pts["age"]),
                "hdl": PointTable(tables.CVD_HDL_BINS, pts["hdl"]),
                "totchol": PointTable(tables.CVD_TOTCHOL_BINS, pts["totchol"]),
                "sbp_untreated": PointTable(tables.CVD_SBP_BINS[sex], pts["sbp_untreated"]),
                "sbp_treated": PointTable(tables.CVD_SBP_BINS[sex], pts["sbp_treated"]),
            }
            for sex, pts in tables.CVD_POINTS.items()
        }
        self.risk_tables = {sex: RiskTable(*tables.CVD_RISK[sex]) for sex in SEXES}
        self.heart_age_tables = {sex: RiskTable(*tables.HEART_AGE[sex]) for sex in SEXES}

    def score_points(self, sex: str, data: Dict[str, np.ndarray], totchol: np.ndarray, hdl: np.ndarray) -> np.ndarray:
        point_tables = self.points[sex]
        untreated, _ = treatment_split(point_tables["sbp_untreated"](data["sbp"]), data["bp_med"])
        _, treated = treatment_split(point_tables["sbp_treated"](data["sbp"]), data["bp_med"])
        return (
            point_tables["age"](data["age"])
            + point_tables["hdl"](hdl)
            + point_tables["totchol"](totchol)
            + untreated
            + treated
            + flag_points(data["smoker"], tables.CVD_POINTS[sex]["smoker"])
            + flag_points(data["diabetic"], tables.CVD_POINTS[sex]["diabetic"])
        )

    def compute_batch(self, sex, age, totchol, hdl, sbp, bp_med, smoker, diabetic,
                      heart_age: bool = False, mmol: bool = False):
        """Score each record with the points chart.

        Returns:
            Array of 10-year risks (%), or a DataFrame with columns 'risk'
            and 'heart_age' when ``heart_age`` is True
        """
        heart_age = validate_flag("heart_age", heart_age, self.name)
        mmol = validate_flag("mmol", mmol, self.name)
        data = self.validate(sex=sex, age=age, totchol=totchol, hdl=hdl, sbp=sbp,
                             bp_med=bp_med, smoker=smoker, diabetic=diabetic)
        totchol = to_mgdl(data["totchol"], mmol)
        hdl = to_mgdl(data["hdl"], mmol)

        points = {sex: self.score_points(sex, data, totchol, hdl) for sex in SEXES}
        risk = select_by_group(data["sex"], {sex: self.risk_tables[sex].lookup(pts) for sex, pts in points.items()})
        if not heart_age:
            return risk

        ages = select_by_group(data["sex"], {sex: self.heart_age_tables[sex].lookup(pts) for sex, pts in points.items()})
        return pd.DataFrame({"risk": risk, "heart_age": ages})


# =============================================================================
# CORONARY HEART DISEASE
# =============================================================================

def bp_category(sbp: np.ndarray, dbp: np.ndarray) -> np.ndarray:
    """Joint blood pressure category 0..4, NaN when both readings are missing."""
    category = np.maximum(tables.CHD_SBP_BINS.index(sbp), tables.CHD_DBP_BINS.index(dbp))
    return np.where(category == MISSING, np.nan, category)


def _chd_schema(chol_metric: str = "tc"):
    return (
        sex_field(),
        numeric("age", valid_range=AGE_RANGE),
        numeric("ldl" if chol_metric == "ldl" else "totchol", required=False),
        numeric("hdl", required=False),
        numeric("sbp", required=False),
        numeric("dbp", required=False),
        binary("smoker", required=False),
        binary("diabetic", required=False),
    )


class FraminghamCHD(RiskScore):
    """Wilson 1998 categorical Cox model (total cholesterol)."""

    name = "framingham_chd"
    full_name = "Framingham coronary heart disease risk"
    reference = "Wilson PW, et al. Circulation. 1998;97(18):1837-1847."
    outcome = "10-year risk of coronary heart disease (%)"
    output_range = (0.0, 100.0)

    def __init__(self):
        self.schema = _chd_schema()
        self.categories = {
            sex: {
                "totchol": PointTable(tables.CHD_TOTCHOL_BINS, coefs["totchol"]),
                "hdl": PointTable(tables.CHD_HDL_BINS, coefs["hdl"]),
                "bp": PointTable(BP_CATEGORY_BINS, coefs["bp"]),
            }
            for sex, coefs in tables.CHD_TC_CATEGORY_COEFFICIENTS.items()
        }

    def compute_batch(self, sex, age, totchol, hdl, sbp, dbp, smoker, diabetic, mmol: bool = False) -> np.ndarray:
        mmol = validate_flag("mmol", mmol, self.name)
        data = self.validate(sex=sex, age=age, totchol=totchol, hdl=hdl, sbp=sbp, dbp=dbp,
                             smoker=smoker, diabetic=diabetic)
        totchol = to_mgdl(data["totchol"], mmol)
        hdl = to_mgdl(data["hdl"], mmol)
        bp = bp_category(data["sbp"], data["dbp"])

        terms = {
            "age": data["age"],
            "age_squared": data["age"] ** 2,
            "diabetic": data["diabetic"],
            "smoker": data["smoker"],
        }
        by_sex = {}
        for group, coefs in tables.CHD_TC_COEFFICIENTS.items():
            effects = self.categories[group]
            lp = linear_predictor(coefs, terms) + effects["totchol"](totchol) + effects["hdl"](hdl) + effects["bp"](bp)
            by_sex[group] = survival_risk(lp, coefs.baseline_survival, coefs.mean)
        return finalise(select_by_group(data["sex"], by_sex))


class FraminghamCHDTable(RiskScore):
    """Wilson 1998 points chart for the total cholesterol or LDL model."""

    name = "framingham_chd_table"
    full_name = "Framingham coronary heart disease risk (points)"
    reference = "Wilson PW, et al. Circulation. 1998;97(18):1837-1847."
    outcome = "10-year risk of coronary heart disease (%)"
    output_range = (1.0, 56.0)
    metrics = ("tc", "ldl")

    def __init__(self):
        self.schema = _chd_schema()
        chol_keys = {
            "tc": (tables.CHD_TOTCHOL_BINS, "totchol", "hdl_tc"),
            "ldl": (tables.CHD_LDL_BINS, "ldl", "hdl_ldl"),
        }
        self.points = {
            (sex, metric): {
                "age": PointTable(tables.CHD_AGE_BINS, pts["age"]),
                "chol": PointTable(chol_bins, pts[chol_key]),
                "hdl": PointTable(tables.CHD_HDL_BINS, pts[hdl_key]),
                "bp": PointTable(BP_CATEGORY_BINS, pts["bp"]),
            }
            for sex, pts in tables.CHD_POINTS.items()
            for metric, (chol_bins, chol_key, hdl_key) in chol_keys.items()
        }
        self.risk_tables = {key: RiskTable(*table) for key, table in tables.CHD_RISK.items()}

    def compute_batch(self, sex, age, totchol, hdl, sbp, dbp, smoker, diabetic,
                      ldl=None, chol_metric: str = "tc", mmol: bool = False) -> np.ndarray:
        chol_metric = validate_choice("chol_metric", chol_metric, self.metrics, self.name)
        mmol = validate_flag("mmol", mmol, self.name)
        data = validate_inputs(
            _chd_schema(chol_metric),
            dict(sex=sex, age=age, totchol=totchol, ldl=ldl, hdl=hdl, sbp=sbp, dbp=dbp, smoker=smoker, diabetic=diabetic),
            self.name,
        )
        chol = to_mgdl(data["ldl"] if chol_metric == "ldl" else data["totchol"], mmol)
        hdl = to_mgdl(data["hdl"], mmol)
        bp = bp_category(data["sbp"], data["dbp"])

        risk = {}
        for sex, pts in tables.CHD_POINTS.items():
            point_tables = self.points[(sex, chol_metric)]
            points = (
                point_tables["age"](data["age"])
                + point_tables["chol"](chol)
                + point_tables["hdl"](hdl)
                + point_tables["bp"](bp)
                + flag_points(data["smoker"], pts["smoker"])
                + flag_points(data["diabetic"], pts["diabetic"])
            )
            risk[sex] = self.risk_tables[(sex, chol_metric)].lookup(points)
        return select_by_group(data["sex"], risk)


def framingham_cvd(sex, age, totchol, hdl, sbp, bp_med, smoker, diabetic, mmol: bool = False) -> np.ndarray:
    return FraminghamCVD().compute_batch(sex, age, totchol, hdl, sbp, bp_med, smoker, diabetic, mmol=mmol)


def framingham_cvd_table(sex, age, totchol, hdl, sbp, bp_med, smoker, diabetic,
                         heart_age: bool = False, mmol: bool = False):
    return FraminghamCVDTable().compute_batch(sex, age, totchol, hdl, sbp, bp_med, smoker, diabetic,
                                              heart_age=heart_age, mmol=mmol)


def framingham_chd(sex, age, totchol, hdl, sbp, dbp, smoker, diabetic, mmol: bool = False) -> np.ndarray:
    return FraminghamCHD().compute_batch(sex, age, totchol, hdl, sbp, dbp, smoker, diabetic, mmol=mmol)


def framingham_chd_table(sex, age, totchol, hdl, sbp, dbp, smoker, diabetic,
                         ldl=None, chol_metric: str = "tc", mmol: bool = False) -> np.ndarray:
    return FraminghamCHDTable().compute_batch(sex, age, totchol, hdl, sbp, dbp, smoker, diabetic,
                                              ldl=ldl, chol_metric=chol_metric, mmol=mmol)
