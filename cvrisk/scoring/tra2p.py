"""
TRA 2°P-TIMI 50 risk score for patients with prior myocardial infarction.

One point each for heart failure, arterial hypertension, age >= 75 years,
diabetes, prior stroke, prior bypass surgery, other vascular surgery,
eGFR < 60 mL/min/1.73m², current smoking and peripheral artery disease. The
point total maps to the 3-year risk (%) of cardiovascular death, MI or
ischaemic stroke; 7 or more points share the top row.

Reference:
    Bohula EA, et al. Atherothrombotic risk stratification and the efficacy
    and safety of vorapaxar in patients with stable ischemic heart disease
    and previous myocardial infarction. Circulation. 2016;134(4):304-313.
"""
from __future__ import annotations

import numpy as np

from ..data.secondary_prevention import TRA2P_AGE_CUTOFF, TRA2P_EGFR_CUTOFF, TRA2P_INDICATORS, TRA2P_RISK
from ..engine.binning import Bins, PointTable, flag_points
from ..engine.lookup import RiskTable
from ..engine.validation import binary, numeric
from .base import RiskScore


class Tra2p(RiskScore):
    """TRA2P integer score."""

    name = "tra2p"
    full_name = "TRA 2°P-TIMI 50 risk score"
    reference = "Bohula EA, et al. Circulation. 2016;134(4):304-313."
    outcome = "3-year risk of cardiovascular death, MI or ischaemic stroke (%)"

    def __init__(self):
        self.schema = (numeric("age", required=False), numeric("egfr", required=False)) + tuple(
            binary(name, required=False) for name in TRA2P_INDICATORS
        )
        self.age_points = PointTable(Bins((TRA2P_AGE_CUTOFF,)), (0, 1))
        self.egfr_points = PointTable(Bins((TRA2P_EGFR_CUTOFF,)), (1, 0))
        self.risk_table = RiskTable(*TRA2P_RISK)
        self.output_range = (float(self.risk_table.values.min()), float(self.risk_table.values.max()))

    def compute_batch(self, age, chf, ah, diabetic, stroke, bypass_surg, other_surg, egfr, smoker, pad=None) -> np.ndarray:
        """Calculate the 3-year risk for each record.

        Args:
            age: Age in years
            chf: 1 if congestive heart failure
            ah: 1 if arterial hypertension
            diabetic: 1 if diabetic
            stroke: 1 if prior stroke
            bypass_surg: 1 if prior coronary bypass surgery
            other_surg: 1 if other prior vascular surgery
            egfr: Estimated glomerular filtration rate (mL/min/1.73m²)
            smoker: 1 if current smoker
            pad: 1 if peripheral artery disease

        Returns:
            Array of 3-year risks (%)
        """
        data = self.validate(age=age, chf=chf, ah=ah, diabetic=diabetic, stroke=stroke, bypass_surg=bypass_surg,
                             other_surg=other_surg, egfr=egfr, smoker=smoker, pad=pad)
        points = self.age_points(data["age"]) + self.egfr_points(data["egfr"])
        for name in TRA2P_INDICATORS:
            points = points + flag_points(data[name], 1)
        return self.risk_table.lookup(points)


def tra2p(age, chf, ah, diabetic, stroke, bypass_surg, other_surg, egfr, smoker, pad=None) -> np.ndarray:
    return Tra2p().compute_batch(age, chf, ah, diabetic, stroke, bypass_surg, other_surg, egfr, smoker, pad=pad)
