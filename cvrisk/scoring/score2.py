"""
SCORE2 and SCORE2-OP (ESC 2021).

10-year risk (%) of fatal and non-fatal cardiovascular events in apparently
healthy people aged 40-69 (SCORE2) and 70 and over (SCORE2-OP), for four
European risk regions. Each score comes as the printed chart (cholesterol
band = non-HDL cholesterol) and as the underlying recalibrated Cox model.

References:
    SCORE2 working group and ESC Cardiovascular risk collaboration. SCORE2
    risk prediction algorithms. Eur Heart J. 2021;42(25):2439-2454.
    SCORE2-OP working group and ESC Cardiovascular risk collaboration.
    SCORE2-OP risk prediction algorithms. Eur Heart J. 2021;42(25):2455-2467.
"""
from __future__ import annotations

import logging
from typing import Dict, Optional, Tuple

import numpy as np

from ..config import CONFIG, REGIONS
from ..data import esc_charts, esc_coefficients
from ..engine.binning import Bins
from ..engine.formula import CoefficientSet, finalise, linear_predictor, recalibrate, select_by_group, survival_risk
from ..engine.lookup import RiskChart
from ..engine.units import MMOL_DIGITS, to_mmol
from ..engine.validation import binary, numeric, sex_field, validate_choice, validate_flag
from .base import RiskScore
from .esc_score import ChartScore

logger = logging.getLogger(__name__)

SCORE2_OUTCOME = "10-year risk of fatal and non-fatal cardiovascular events (%)"

# Systolic bands <120, 120-139, 140-159, >=160; non-HDL <4, 4-<5, 5-<6, >=6
SCORE2_SBP_BINS = Bins((120, 140, 160))
SCORE2_NONHDL_BINS = Bins((4, 5, 6))


def select_region(risk: Optional[str], score: str) -> str:
    """Validate an ESC risk region, falling back to the configured default."""
    region = CONFIG.default_region if risk is None else risk
    return validate_choice("risk", region, REGIONS, score)


# =============================================================================
# CHARTS
# =============================================================================

class Score2Table(ChartScore):
    """SCORE2 chart, ages 40-69."""

    name = "score2_table"
    full_name = "ESC SCORE2 (chart)"
    reference = "SCORE2 working group. Eur Heart J. 2021;42(25):2439-2454."
    outcome = SCORE2_OUTCOME
    age_range = (40, 69)
    charts = {
        region: RiskChart(
            esc_charts.SCORE2[region],
            age_bins=Bins((45, 50, 55, 60, 65)),
            sbp_bins=SCORE2_SBP_BINS,
            chol_bins=SCORE2_NONHDL_BINS,
        )
        for region in REGIONS
    }

    def __init__(self):
        super().__init__()
        self.schema = self.schema + (numeric("hdl", required=False),)

    def select_chart(self, risk: Optional[str]) -> RiskChart:
        return self.charts[select_region(risk, self.name)]

    def compute_batch(self, sex, age, totchol, sbp, smoker, hdl=None, risk: Optional[str] = None, mmol: bool = True) -> np.ndarray:
        """Look up the chart risk for each record.

        The chart is indexed by non-HDL cholesterol. Records without HDL are
        placed by total cholesterol instead, which overestimates their band.

        Cholesterol is read in mmol/L unless ``mmol=False``, the unit of the
        printed ESC charts; callers with mg/dL values must pass the flag.

        Returns:
            Array of 10-year risks (%)
        """
        mmol = validate_flag("mmol", mmol, self.name)
        chart = self.select_chart(risk)
        data = self.validate(sex=sex, age=age, totchol=totchol, sbp=sbp, smoker=smoker, hdl=hdl)

        totchol = to_mmol(data["totchol"], mmol)
        hdl = to_mmol(data["hdl"], mmol)
        no_hdl = np.isnan(hdl)
        if no_hdl.any():
            logger.debug("%s: %d record(s) without HDL binned by total cholesterol", self.name, int(no_hdl.sum()))
        chol = np.round(np.where(no_hdl, totchol, totchol - hdl), MMOL_DIGITS)
        return self.lookup(chart, data, chol)


class Score2OPTable(Score2Table):
    """SCORE2-OP chart, ages 70 and over."""

    name = "score2_op_table"
    full_name = "ESC SCORE2-OP (chart)"
    reference = "SCORE2-OP working group. Eur Heart J. 2021;42(25):2455-2467."
    age_range = (70, float("inf"))
    charts = {
        region: RiskChart(
            esc_charts.SCORE2_OP[region],
            age_bins=Bins((75, 80, 85)),
            sbp_bins=SCORE2_SBP_BINS,
            chol_bins=SCORE2_NONHDL_BINS,
        )
        for region in REGIONS
    }


# =============================================================================
# FORMULAS
# =============================================================================

class Score2(RiskScore):
    """SCORE2 Cox model with regional recalibration.

    Predictors are centred and scaled, and every risk factor interacts with
    age. The uncalibrated risk ``1 - S0 ** exp(lp - mean)`` is then mapped
    onto the chosen region with ``recalibrate``.
    """

    name = "score2"
    full_name = "ESC SCORE2"
    reference = "SCORE2 working group. Eur Heart J. 2021;42(25):2439-2454."
    outcome = SCORE2_OUTCOME
    output_range = (0.0, 100.0)
    age_range: Tuple[float, float] = (40, 69)
    coefficients: Dict[str, CoefficientSet] = esc_coefficients.SCORE2
    centring: Dict[str, Tuple[float, float]] = esc_coefficients.SCORE2_CENTRING

    def __init__(self):
        self.schema = (
            sex_field(),
            numeric("age", valid_range=self.age_range),
            numeric("totchol", required=False),
            numeric("hdl", required=False),
            numeric("sbp", required=False),
            binary("smoker", required=False),
            binary("diabetic", required=False),
        )

    def _centre(self, name: str, values: np.ndarray) -> np.ndarray:
        centre, scale = self.centring[name]
        return (values - centre) / scale

    def terms(self, data: Dict[str, np.ndarray], totchol: np.ndarray, hdl: np.ndarray) -> Dict[str, np.ndarray]:
        age = self._centre("age", data["age"])
        sbp = self._centre("sbp", data["sbp"])
        tchol = self._centre("tchol", totchol)
        hdl = self._centre("hdl", hdl)
        return {
            "age": age,
            "smoker": data["smoker"],
            "sbp": sbp,
            "diabetic": data["diabetic"],
            "tchol": tchol,
            "hdl": hdl,
            "smoker_age": data["smoker"] * age,
            "sbp_age": sbp * age,
            "tchol_age": tchol * age,
            "hdl_age": hdl * age,
            "diabetic_age": data["diabetic"] * age,
        }

    def compute_batch(self, sex, age, totchol, hdl, sbp, smoker, diabetic, risk: Optional[str] = None, mmol: bool = True) -> np.ndarray:
        """Calculate the recalibrated 10-year risk for each record.

        Args:
            sex: "male" or "female"
            age: Age in years
            totchol: Total cholesterol (mmol/L, or mg/dL with ``mmol=False``)
            hdl: HDL cholesterol, same unit as ``totchol``
            sbp: Systolic blood pressure (mmHg)
            smoker: 1 if current smoker
            diabetic: 1 if diabetic
            risk: Risk region; defaults to ``CONFIG.default_region``
            mmol: True (the default) for mmol/L, False for mg/dL

        Returns:
            Array of 10-year risks (%), rounded to ``CONFIG.round_digits``
        """
        mmol = validate_flag("mmol", mmol, self.name)
        region = select_region(risk, self.name)
        data = self.validate(sex=sex, age=age, totchol=totchol, hdl=hdl, sbp=sbp, smoker=smoker, diabetic=diabetic)
        terms = self.terms(data, to_mmol(data["totchol"], mmol), to_mmol(data["hdl"], mmol))

        by_sex = {}
        for group, coefs in self.coefficients.items():
            uncalibrated = survival_risk(linear_predictor(coefs, terms), coefs.baseline_survival, coefs.mean)
            by_sex[group] = recalibrate(uncalibrated, *coefs.calibration[region])
        return finalise(select_by_group(data["sex"], by_sex))


class Score2OP(Score2):
    """SCORE2-OP competing-risk model for people aged 70 and over."""

    name = "score2_op"
    full_name = "ESC SCORE2-OP"
    reference = "SCORE2-OP working group. Eur Heart J. 2021;42(25):2455-2467."
    age_range = (70, float("inf"))
    coefficients = esc_coefficients.SCORE2_OP
    centring = esc_coefficients.SCORE2_OP_CENTRING


def score2_table(sex, age, totchol, sbp, smoker, hdl=None, risk: Optional[str] = None, mmol: bool = True) -> np.ndarray:
    return Score2Table().compute_batch(sex, age, totchol, sbp, smoker, hdl=hdl, risk=risk, mmol=mmol)


def score2_op_table(sex, age, totchol, sbp, smoker, hdl=None, risk: Optional[str] = None, mmol: bool = True) -> np.ndarray:
    return Score2OPTable().compute_batch(sex, age, totchol, sbp, smoker, hdl=hdl, risk=risk, mmol=mmol)


def score2(sex, age, totchol, hdl, sbp, smoker, diabetic, risk: Optional[str] = None, mmol: bool = True) -> np.ndarray:
    return Score2().compute_batch(sex, age, totchol, hdl, sbp, smoker, diabetic, risk=risk, mmol=mmol)


def score2_op(sex, age, totchol, hdl, sbp, smoker, diabetic, risk: Optional[str] = None, mmol: bool = True) -> np.ndarray:
    return Score2OP().compute_batch(sex, age, totchol, hdl, sbp, smoker, diabetic, risk=risk, mmol=mmol)
