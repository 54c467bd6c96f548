"""ACC/AHA 2013 pooled cohort equations.

Reference:
    Goff DC Jr, et al. 2013 ACC/AHA guideline on the assessment of
    cardiovascular risk. J Am Coll Cardiol. 2014;63(25 Pt B):2935-2959,
    Table A.
"""
from ..engine.formula import CoefficientSet


POOLED_COHORT = {
    ("white", "female"): CoefficientSet(
        coefficients={
            "ln_age": -29.799,
            "ln_age_squared": 4.884,
            "ln_totchol": 13.540,
            "ln_age_ln_totchol": -3.114,
            "ln_hdl": -13.578,
            "ln_age_ln_hdl": 3.149,
            "ln_treated_sbp": 2.019,
            "ln_untreated_sbp": 1.957,
            "smoker": 7.574,
            "ln_age_smoker": -1.665,
            "diabetic": 0.661,
        },
        baseline_survival=0.9665,
        mean=-29.18,
    ),
    ("aa", "female"): CoefficientSet(
        coefficients={
            "ln_age": 17.114,
            "ln_totchol": 0.940,
            "ln_hdl": -18.920,
            "ln_age_ln_hdl": 4.475,
            "ln_treated_sbp": 29.291,
            "ln_age_ln_treated_sbp": -6.432,
            "ln_untreated_sbp": 27.820,
            "ln_age_ln_untreated_sbp": -6.087,
            "smoker": 0.691,
            "diabetic": 0.874,
        },
        baseline_survival=0.9533,
        mean=86.61,
    ),
    ("white", "male"): CoefficientSet(
        coefficients={
            "ln_age": 12.344,
            "ln_totchol": 11.853,
            "ln_age_ln_totchol": -2.664,
            "ln_hdl": -7.990,
            "ln_age_ln_hdl": 1.769,
            "ln_treated_sbp": 1.797,
            "ln_untreated_sbp": 1.764,
            "smoker": 7.837,
            "ln_age_smoker": -1.795,
            "diabetic": 0.658,
        },
        baseline_survival=0.9144,
        mean=61.18,
    ),
    ("aa", "male"): CoefficientSet(
        coefficients={
            "ln_age": 2.469,
            "ln_totchol": 0.302,
            "ln_hdl": -0.307,
            "ln_treated_sbp": 1.916,
            "ln_untreated_sbp": 1.809,
            "smoker": 0.549,
            "diabetic": 0.645,
        },
        baseline_survival=0.8954,
        mean=19.54,
    ),
}

# Published valid output range (%)
RISK_RANGE = (1.0, 30.0)
