"""
ACC/AHA 2013 pooled cohort equations.

10-year risk (%) of a first hard atherosclerotic cardiovascular event
(coronary death, non-fatal myocardial infarction, fatal or non-fatal stroke)
for white and African-American men and women aged 40-79.

Reference:
    Goff DC Jr, et al. 2013 ACC/AHA guideline on the assessment of
    cardiovascular risk. J Am Coll Cardiol. 2014;63(25 Pt B):2935-2959.
"""
from __future__ import annotations

import numpy as np

from ..data.ascvd import POOLED_COHORT, RISK_RANGE
from ..engine.formula import finalise, linear_predictor, safe_log, survival_risk
from ..engine.units import to_mgdl
from ..engine.validation import binary, category, numeric, sex_field, validate_flag
from .base import RiskScore
from .framingham import treatment_split

ETHNICITIES = ("white", "aa")


class AscvdAccAha(RiskScore):
    """Pooled cohort equations, clamped to the published range of 1-30%."""

    name = "ascvd_acc_aha"
    full_name = "ACC/AHA pooled cohort equations"
    reference = "Goff DC Jr, et al. J Am Coll Cardiol. 2014;63(25 Pt B):2935-2959."
    outcome = "10-year risk of atherosclerotic cardiovascular disease (%)"
    output_range = RISK_RANGE

    def __init__(self):
        self.schema = (
            category("ethnicity", ETHNICITIES, aliases={"african_american": "aa"}),
            sex_field(),
            numeric("age", valid_range=(40, 79)),
            numeric("totchol", required=False),
            numeric("hdl", required=False),
            numeric("sbp", required=False),
            binary("bp_med", required=False),
            binary("smoker", required=False),
            binary("diabetic", required=False),
        )

    def compute_batch(self, ethnicity, sex, age, totchol, hdl, sbp, bp_med, smoker, diabetic, mmol: bool = False) -> np.ndarray:
        """Calculate the 10-year ASCVD risk for each record.

        Args:
            ethnicity: "white" or "aa" (African American)
            sex: "male" or "female"
            age: Age in years
            totchol: Total cholesterol (mg/dL, or mmol/L with ``mmol=True``)
            hdl: HDL cholesterol, same unit as ``totchol``
            sbp: Systolic blood pressure (mmHg)
            bp_med: 1 if on antihypertensive treatment
            smoker: 1 if current smoker
            diabetic: 1 if diabetic

        Returns:
            Array of 10-year risks (%)
        """
        mmol = validate_flag("mmol", mmol, self.name)
        data = self.validate(ethnicity=ethnicity, sex=sex, age=age, totchol=totchol, hdl=hdl, sbp=sbp,
                             bp_med=bp_med, smoker=smoker, diabetic=diabetic)

        ln_age = safe_log(data["age"])
        ln_totchol = safe_log(to_mgdl(data["totchol"], mmol))
        ln_hdl = safe_log(to_mgdl(data["hdl"], mmol))
        ln_untreated, ln_treated = treatment_split(safe_log(data["sbp"]), data["bp_med"])
        terms = {
            "ln_age": ln_age,
            "ln_age_squared": ln_age ** 2,
            "ln_totchol": ln_totchol,
            "ln_age_ln_totchol": ln_age * ln_totchol,
            "ln_hdl": ln_hdl,
            "ln_age_ln_hdl": ln_age * ln_hdl,
            "ln_treated_sbp": ln_treated,
            "ln_age_ln_treated_sbp": ln_age * ln_treated,
            "ln_untreated_sbp": ln_untreated,
            "ln_age_ln_untreated_sbp": ln_age * ln_untreated,
            "smoker": data["smoker"],
            "ln_age_smoker": ln_age * data["smoker"],
            "diabetic": data["diabetic"],
        }

        risk = np.full(len(ln_age), np.nan)
        for (group_ethnicity, group_sex), coefs in POOLED_COHORT.items():
            mask = (data["ethnicity"] == group_ethnicity) & (data["sex"] == group_sex)
            if mask.any():
                lp = linear_predictor(coefs, terms)
                risk[mask] = survival_risk(lp, coefs.baseline_survival, coefs.mean)[mask]
        return finalise(risk, clamp=RISK_RANGE)


def ascvd_acc_aha(ethnicity, sex, age, totchol, hdl, sbp, bp_med, smoker, diabetic, mmol: bool = False) -> np.ndarray:
    return AscvdAccAha().compute_batch(ethnicity, sex, age, totchol, hdl, sbp, bp_med, smoker, diabetic, mmol=mmol)
