"""
ESC chart-based scores: SCORE 2016, SCORE Germany 2016 and SCORE for older
persons (SCORE OP).

All three estimate the 10-year risk (%) of fatal cardiovascular disease from
a printed colour chart. The chart cell is selected by sex, smoking status,
age band, systolic band and cholesterol band; values outside the printed
range fall into the nearest band.

Cholesterol defaults to mmol/L, the unit printed on the charts; pass
``mmol=False`` for mg/dL.

References:
    Piepoli MF, et al. 2016 European Guidelines on cardiovascular disease
    prevention in clinical practice. Eur Heart J. 2016;37(29):2315-2381.
    Keil U, et al. Eur J Cardiovasc Prev Rehabil. 2005;12(5):452-459.
    Cooney MT, et al. Cardiovascular risk estimation in older persons:
    SCORE O.P. Eur J Prev Cardiol. 2016;23(10):1093-1103.
"""
from __future__ import annotations

from typing import Dict, Optional, Tuple

import numpy as np

from ..config import CONFIG
from ..data import esc_charts
from ..engine.binning import Bins
from ..engine.lookup import RiskChart
from ..engine.units import to_mmol
from ..engine.validation import binary, numeric, sex_field, validate_choice, validate_flag
from .base import RiskScore


# Systolic bands <=130, (130,150], (150,170], >170
SCORE_2016_SBP_BINS = Bins((130, 150, 170), closed="right")
SCORE_2016_CHOL_BINS = Bins((4.5, 5.5, 6.5, 7.5))


class ChartScore(RiskScore):
    """Base class of the ESC chart scores.

    ``charts`` maps each risk region to its RiskChart. Scores with a single
    chart use the key ``None``.
    """

    outcome = "10-year risk of fatal cardiovascular disease (%)"
    charts: Dict[Optional[str], RiskChart] = {}
    age_range: Tuple[float, float] = (40, 65)

    def __init__(self):
        self.schema = (
            sex_field(),
            numeric("age", valid_range=self.age_range),
            numeric("totchol"),
            numeric("sbp"),
            binary("smoker"),
        )

    @property
    def output_range(self) -> Tuple[float, float]:
        grids = [chart.grid for chart in self.charts.values()]
        return float(min(g.min() for g in grids)), float(max(g.max() for g in grids))

    def regions(self):
        return tuple(region for region in self.charts if region is not None)

    def select_chart(self, risk: Optional[str]) -> RiskChart:
        if None in self.charts:
            return self.charts[None]
        region = CONFIG.default_region if risk is None else risk
        region = validate_choice("risk", region, self.regions(), self.name)
        return self.charts[region]

    def lookup(self, chart: RiskChart, data: Dict[str, np.ndarray], chol: np.ndarray) -> np.ndarray:
        return chart.lookup(
            male=data["sex"] == "male",
            smoker=data["smoker"] == 1,
            age=data["age"],
            sbp=data["sbp"],
            chol=chol,
        )

    def compute_batch(self, sex, age, totchol, sbp, smoker, risk: Optional[str] = None, mmol: bool = True) -> np.ndarray:
        """Look up the chart risk for each record.

        Args:
            sex: "male" or "female"
            age: Age in years
            totchol: Total cholesterol (mmol/L, or mg/dL with ``mmol=False``)
            sbp: Systolic blood pressure (mmHg)
            smoker: 1 if current smoker
            risk: Risk region; defaults to ``CONFIG.default_region``
            mmol: True (the default) for mmol/L, False for mg/dL

        Returns:
            Array of 10-year risks (%)
        """
        mmol = validate_flag("mmol", mmol, self.name)
        chart = self.select_chart(risk)
        data = self.validate(sex=sex, age=age, totchol=totchol, sbp=sbp, smoker=smoker)
        return self.lookup(chart, data, to_mmol(data["totchol"], mmol))


class Score2016Table(ChartScore):
    """SCORE 2016 chart for low and high risk countries."""

    name = "score_2016_table"
    full_name = "ESC SCORE 2016"
    reference = "Piepoli MF, et al. Eur Heart J. 2016;37(29):2315-2381."
    age_range = (40, 65)
    charts = {
        region: RiskChart(
            esc_charts.SCORE_2016[region],
            age_bins=Bins((45, 52.5, 57.5, 62.5)),
            sbp_bins=SCORE_2016_SBP_BINS,
            chol_bins=SCORE_2016_CHOL_BINS,
        )
        for region in ("low", "high")
    }


class ScoreGer2016Table(ChartScore):
    """German recalibration of the SCORE 2016 chart."""

    name = "score_ger_2016_table"
    full_name = "ESC SCORE Germany 2016"
    reference = "Keil U, et al. Eur J Cardiovasc Prev Rehabil. 2005;12(5):452-459."
    age_range = (40, 65)
    charts = {
        None: RiskChart(
            esc_charts.SCORE_GER_2016,
            age_bins=Bins((45, 50, 55, 60, 65)),
            sbp_bins=SCORE_2016_SBP_BINS,
            chol_bins=SCORE_2016_CHOL_BINS,
        )
    }

    def compute_batch(self, sex, age, totchol, sbp, smoker, mmol: bool = True) -> np.ndarray:
        return super().compute_batch(sex, age, totchol, sbp, smoker, risk=None, mmol=mmol)


class ScoreOPTable(ChartScore):
    """SCORE chart for older persons (65-80 years)."""

    name = "score_op_table"
    full_name = "ESC SCORE O.P."
    reference = "Cooney MT, et al. Eur J Prev Cardiol. 2016;23(10):1093-1103."
    age_range = (65, 80)
    charts = {
        region: RiskChart(
            esc_charts.SCORE_OP[region],
            age_bins=Bins((67.5, 72.5)),
            sbp_bins=SCORE_2016_SBP_BINS,
            chol_bins=SCORE_2016_CHOL_BINS,
        )
        for region in ("low", "high")
    }


def score_2016_table(sex, age, totchol, sbp, smoker, risk: Optional[str] = None, mmol: bool = True) -> np.ndarray:
    return Score2016Table().compute_batch(sex, age, totchol, sbp, smoker, risk=risk, mmol=mmol)


def score_ger_2016_table(sex, age, totchol, sbp, smoker, mmol: bool = True) -> np.ndarray:
    return ScoreGer2016Table().compute_batch(sex, age, totchol, sbp, smoker, mmol=mmol)


def score_op_table(sex, age, totchol, sbp, smoker, risk: Optional[str] = None, mmol: bool = True) -> np.ndarray:
    return ScoreOPTable().compute_batch(sex, age, totchol, sbp, smoker, risk=risk, mmol=mmol)
