"""Framingham Heart Study reference data.

General cardiovascular disease (CVD) score:
    D'Agostino RB Sr, et al. General cardiovascular risk profile for use in
    primary care: the Framingham Heart Study. Circulation.
    2008;117(6):743-753.

Coronary heart disease (CHD) score:
    Wilson PW, et al. Prediction of coronary heart disease using risk factor
    categories. Circulation. 1998;97(18):1837-1847.

Cholesterol values are in mg/dL, blood pressure in mmHg.
"""
from ..engine.binning import Bins
from ..engine.formula import CoefficientSet


# =============================================================================
# GENERAL CVD (D'AGOSTINO 2008)
# =============================================================================

CVD_COEFFICIENTS = {
    "female": CoefficientSet(
        coefficients={
            "ln_age": 2.32888,
            "ln_totchol": 1.20904,
            "ln_hdl": -0.70833,
            "ln_untreated_sbp": 2.76157,
            "ln_treated_sbp": 2.82263,
            "smoker": 0.52873,
            "diabetic": 0.69154,
        },
        baseline_survival=0.95012,
        mean=26.1931,
    ),
    "male": CoefficientSet(
        coefficients={
            "ln_age": 3.06117,
            "ln_totchol": 1.12370,
            "ln_hdl": -0.93263,
            "ln_untreated_sbp": 1.93303,
            "ln_treated_sbp": 1.99881,
            "smoker": 0.65451,
            "diabetic": 0.57367,
        },
        baseline_survival=0.88936,
        mean=23.9802,
    ),
}

CVD_AGE_BINS = Bins((35, 40, 45, 50, 55, 60, 65, 70, 75))
CVD_HDL_BINS = Bins((35, 45, 50, 60))
CVD_TOTCHOL_BINS = Bins((160, 200, 240, 280))
CVD_SBP_BINS = {
    "female": Bins((120, 130, 140, 150, 160)),
    "male": Bins((120, 130, 140, 160)),
}

CVD_POINTS = {
    "female": {
        "age": (0, 2, 4, 5, 7, 8, 9, 10, 11, 12),
        "hdl": (2, 1, 0, -1, -2),
        "totchol": (0, 1, 3, 4, 5),
        "sbp_untreated": (-3, 0, 1, 2, 4, 5),
        "sbp_treated": (-1, 2, 3, 5, 6, 7),
        "smoker": 3,
        "diabetic": 4,
    },
    "male": {
        "age": (0, 2, 5, 6, 8, 10, 11, 12, 14, 15),
        "hdl": (2, 1, 0, -1, -2),
        "totchol": (0, 1, 2, 3, 4),
        "sbp_untreated": (-2, 0, 1, 2, 3),
        "sbp_treated": (0, 2, 3, 4, 5),
        "smoker": 4,
        "diabetic": 3,
    },
}

# 10-year CVD risk (%) by point total; (first point, risks)
CVD_RISK = {
    "female": (-2, (0, 1, 1.2, 1.5, 1.7, 2.0, 2.4, 2.8, 3.3, 3.9, 4.5, 5.3, 6.3, 7.3,
                    8.6, 10.0, 11.7, 13.7, 15.9, 18.5, 21.5, 24.8, 28.5, 30)),
    "male": (-3, (0, 1.1, 1.4, 1.6, 1.9, 2.3, 2.8, 3.3, 3.9, 4.7, 5.6, 6.7, 7.9, 9.4,
                  11.2, 13.2, 15.6, 18.4, 21.6, 25.3, 29.4, 30)),
}

# Heart (vascular) age in years by point total; (first point, ages)
HEART_AGE = {
    "female": (0, (30, 31, 34, 36, 39, 42, 45, 48, 51, 55, 59, 64, 68, 73, 79, 80)),
    "male": (-1, (29, 30, 32, 34, 36, 38, 40, 42, 45, 48, 51, 54, 57, 60, 64, 68, 72, 76, 80)),
}


# =============================================================================
# CORONARY HEART DISEASE (WILSON 1998)
# =============================================================================

CHD_AGE_BINS = Bins((35, 40, 45, 50, 55, 60, 65, 70))
CHD_TOTCHOL_BINS = Bins((160, 200, 240, 280))
CHD_LDL_BINS = Bins((100, 130, 160, 190))
CHD_HDL_BINS = Bins((35, 45, 50, 60))

# Blood pressure category is the higher of the systolic and diastolic
# categories: optimal, normal, high normal, stage 1, stage 2+
CHD_SBP_BINS = Bins((120, 130, 140, 160))
CHD_DBP_BINS = Bins((80, 85, 90, 100))

CHD_POINTS = {
    "female": {
        "age": (-9, -4, 0, 3, 6, 7, 8, 8, 8),
        "totchol": (-2, 0, 1, 1, 3),
        "ldl": (-2, 0, 0, 2, 2),
        "hdl_tc": (5, 2, 1, 0, -3),
        "hdl_ldl": (5, 2, 1, 0, -2),
        "bp": (-3, 0, 0, 2, 3),
        "smoker": 2,
        "diabetic": 4,
    },
    "male": {
        "age": (-1, 0, 1, 2, 3, 4, 5, 6, 7),
        "totchol": (-3, 0, 1, 2, 3),
        "ldl": (-3, 0, 0, 1, 2),
        "hdl_tc": (2, 1, 0, 0, -2),
        "hdl_ldl": (2, 1, 0, 0, -1),
        "bp": (0, 0, 1, 2, 3),
        "smoker": 2,
        "diabetic": 2,
    },
}

# 10-year CHD risk (%) by point total; (first point, risks)
CHD_RISK = {
    ("female", "tc"): (-2, (1, 2, 2, 2, 3, 3, 4, 4, 5, 6, 7, 8, 10, 11, 13, 15, 18, 20, 24, 27)),
    ("male", "tc"): (-1, (2, 3, 3, 4, 5, 7, 8, 10, 13, 16, 20, 25, 31, 37, 45, 53)),
    ("female", "ldl"): (-2, (1, 2, 2, 2, 3, 3, 4, 5, 6, 7, 8, 9, 11, 13, 15, 17, 20, 24, 27, 32)),
    ("male", "ldl"): (-3, (1, 2, 2, 3, 4, 4, 6, 7, 9, 11, 14, 18, 22, 27, 33, 40, 47, 56)),
}

# Categorical Cox model with total cholesterol. Category terms are indexed
# like the bins above; reference categories carry 0.
CHD_TC_COEFFICIENTS = {
    "female": CoefficientSet(
        coefficients={
            "age": 0.33766,
            "age_squared": -0.00268,
            "diabetic": 0.59626,
            "smoker": 0.29246,
        },
        baseline_survival=0.96246,
        mean=9.92545,
    ),
    "male": CoefficientSet(
        coefficients={
            "age": 0.04826,
            "diabetic": 0.42839,
            "smoker": 0.52337,
        },
        baseline_survival=0.90015,
        mean=3.0975,
    ),
}

CHD_TC_CATEGORY_COEFFICIENTS = {
    "female": {
        "totchol": (-0.26138, 0.0, 0.20771, 0.24385, 0.53513),
        "hdl": (0.84312, 0.37796, 0.19785, 0.0, -0.42951),
        "bp": (-0.53363, 0.0, -0.06773, 0.26288, 0.46573),
    },
    "male": {
        "totchol": (-0.65945, 0.0, 0.17692, 0.50539, 0.65713),
        "hdl": (0.49744, 0.24310, 0.0, -0.05107, -0.48660),
        "bp": (-0.00226, 0.0, 0.28320, 0.52168, 0.61859),
    },
}
