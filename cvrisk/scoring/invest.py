"""
INVEST risk score for hypertensive patients with stable coronary artery
disease.

Integer points for age, ethnicity, BMI, heart rate, systolic blood pressure,
prior MI, heart failure, prior stroke, smoking, diabetes, peripheral artery
disease and chronic kidney disease. Totals above 12 share the top row of the
risk table.

Reference:
    Bavry AA, et al. Simple integer risk score to determine prognosis of
    patients with hypertension and chronic stable coronary artery disease.
    J Am Heart Assoc. 2013;2(4):e000205.
"""
from __future__ import annotations

import numpy as np

from ..data.secondary_prevention import INVEST_FLAG_POINTS, INVEST_POINTS, INVEST_RISK, INVEST_WHITE_POINTS
from ..engine.binning import PointTable, flag_points
from ..engine.lookup import RiskTable
from ..engine.validation import binary, category, numeric
from .base import RiskScore

ETHNICITIES = ("white", "non_white")


class Invest(RiskScore):
    """INVEST integer score."""

    name = "invest"
    full_name = "INVEST risk score"
    reference = "Bavry AA, et al. J Am Heart Assoc. 2013;2(4):e000205."
    outcome = "Risk of death, non-fatal MI or non-fatal stroke (%)"

    def __init__(self):
        self.schema = (
            numeric("age", required=False),
            category("ethnicity", ETHNICITIES, required=False, aliases={"nw": "non_white", "nonwhite": "non_white"}),
            numeric("bmi", required=False),
            numeric("hr", required=False),
            numeric("sbp", required=False),
        ) + tuple(binary(name, required=False) for name in INVEST_FLAG_POINTS)
        self.points = {name: PointTable(bins, pts) for name, (bins, pts) in INVEST_POINTS.items()}
        self.risk_table = RiskTable(*INVEST_RISK)
        self.output_range = (float(self.risk_table.values.min()), float(self.risk_table.values.max()))

    def compute_batch(self, age, ethnicity, bmi, hr, sbp, mi, chf, stroke, smoker, diabetic, pad, ckd) -> np.ndarray:
        """Calculate the risk for each record.

        Args:
            ethnicity: "white" or "non_white" ("nw")
            hr: Resting heart rate (beats/min)

        Returns:
            Array of risks (%)
        """
        data = self.validate(age=age, ethnicity=ethnicity, bmi=bmi, hr=hr, sbp=sbp, mi=mi, chf=chf,
                             stroke=stroke, smoker=smoker, diabetic=diabetic, pad=pad, ckd=ckd)
        points = np.where(data["ethnicity"] == "white", float(INVEST_WHITE_POINTS), 0.0)
        for name, table in self.points.items():
            points = points + table(data[name])
        for name, pts in INVEST_FLAG_POINTS.items():
            points = points + flag_points(data[name], pts)
        return self.risk_table.lookup(points)


def invest(age, ethnicity, bmi, hr, sbp, mi, chf, stroke, smoker, diabetic, pad, ckd) -> np.ndarray:
    return Invest().compute_batch(age, ethnicity, bmi, hr, sbp, mi, chf, stroke, smoker, diabetic, pad, ckd)
