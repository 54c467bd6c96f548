"""Point tables of the secondary-prevention scores REACH, TRA2P and INVEST.

References:
    Wilson PWF, et al. An international model to predict recurrent
    cardiovascular disease. Am J Med. 2012;125(7):695-703.
    Bohula EA, et al. Atherothrombotic risk stratification and the efficacy
    and safety of vorapaxar in patients with stable ischemic heart disease
    and previous myocardial infarction. Circulation. 2016;134(4):304-313.
    Bavry AA, et al. Simple integer risk score to determine prognosis of
    patients with hypertension and chronic stable coronary artery disease.
    J Am Heart Assoc. 2013;2(4):e000205.
"""
from ..engine.binning import Bins


# =============================================================================
# REACH (20-month risk)
# =============================================================================

REACH_AGE_BINS = Bins(tuple(range(25, 90, 5)))
REACH_AGE_POINTS = tuple(range(14))
REACH_BMI_BINS = Bins((20,), closed="right")

REACH_POINTS = {
    "next_cv": {
        "male": 1,
        "bmi": (2, 0),
        "smoker": 2,
        "diabetic": 2,
        "vasc": (0, 2, 4, 6),
        "cv_event": 2,
        "chf": 3,
        "af": 2,
        "statin": -2,
        "ass": -1,
        "region_ee_or_me": 2,
    },
    "cv_death": {
        "male": 1,
        "bmi": (2, 0),
        "smoker": 1,
        "diabetic": 2,
        "vasc": (0, 1, 2, 3),
        "cv_event": 1,
        "chf": 4,
        "af": 2,
        "statin": -1,
        "ass": -1,
        "region_ee_or_me": 1,
    },
}

# 20-month risk (%) by point total; (first point, risks)
REACH_RISK = {
    "next_cv": (0, (0, 1, 1.2, 1.4, 1.6, 1.9, 2.2, 2.5, 3, 3.5, 4, 4.7, 5.4, 6.3, 7.3,
                    8.5, 9.8, 11, 13, 15, 17, 20, 23, 26, 30, 34, 38, 43, 48, 50)),
    "cv_death": (8, (0, 1.1, 1.4, 1.8, 2.3, 3, 3.8, 4.9, 6.2, 7.9, 10, 13, 16, 20, 25,
                     30, 37, 45, 50)),
}


# =============================================================================
# TRA2P (3-year risk of cardiovascular death, MI or ischaemic stroke)
# =============================================================================

TRA2P_INDICATORS = ("chf", "ah", "diabetic", "stroke", "bypass_surg", "other_surg", "smoker", "pad")
TRA2P_AGE_CUTOFF = 75
TRA2P_EGFR_CUTOFF = 60

TRA2P_RISK = (0, (3.5, 6.8, 9.9, 14.5, 21.8, 28.9, 45.3, 58.6))


# =============================================================================
# INVEST (risk of death, non-fatal MI or non-fatal stroke)
# =============================================================================

INVEST_POINTS = {
    "age": (Bins((65, 75)), (0, 2, 3)),
    "bmi": (Bins((20, 30)), (2, 1, 0)),
    "hr": (Bins((85,)), (0, 1)),
    "sbp": (Bins((110, 140)), (2, 0, 1)),
}
INVEST_FLAG_POINTS = {
    "mi": 1,
    "chf": 2,
    "stroke": 2,
    "smoker": 1,
    "diabetic": 2,
    "pad": 1,
    "ckd": 2,
}
INVEST_WHITE_POINTS = 2

INVEST_RISK = (0, (1, 1, 2, 2, 3, 5, 7, 11, 16, 20, 25, 30, 36))
