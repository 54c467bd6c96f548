"""PROCAM (Prospective Cardiovascular Muenster) reference data.

References:
    Assmann G, Cullen P, Schulte H. Simple scoring scheme for calculating the
    risk of acute coronary events based on the 10-year follow-up of the
    prospective cardiovascular Muenster (PROCAM) study. Circulation.
    2002;105(3):310-315.
    Assmann G, Schulte H, Cullen P, Seedorf U. Assessing risk of myocardial
    infarction and stroke: new data from the Prospective Cardiovascular
    Muenster (PROCAM) study. Eur J Clin Invest. 2007;37(12):925-932.

Lipids in mg/dL, blood pressure in mmHg. All inputs are rounded to whole
numbers before scoring.
"""
from ..engine.binning import Bins


# =============================================================================
# PROCAM 2002
# =============================================================================

POINTS_2002 = {
    "age": (Bins((40, 45, 50, 55, 60)), (0, 6, 11, 16, 21, 26)),
    "ldl": (Bins((100, 130, 160, 190)), (0, 5, 10, 14, 20)),
    "hdl": (Bins((35, 45, 55)), (11, 8, 5, 0)),
    "triglycerides": (Bins((100, 150, 200)), (0, 2, 3, 4)),
    "sbp": (Bins((120, 130, 140, 160)), (0, 2, 3, 5, 8)),
}
FLAG_POINTS_2002 = {"smoker": 8, "diabetic": 6, "fam_mi": 4}

# 10-year risk (%) of an acute coronary event for 20..60 points
RISK_2002 = (20, (1, 1.1, 1.2, 1.3, 1.4, 1.6, 1.7, 1.8, 1.9, 2.3, 2.4, 2.8, 2.9, 3.3,
                  3.5, 4.0, 4.2, 4.8, 5.1, 5.7, 6.1, 7.0, 7.4, 8.0, 8.8, 10.2, 10.5,
                  10.7, 12.8, 13.2, 15.5, 16.8, 17.5, 19.6, 21.7, 22.2, 23.8, 25.1,
                  28.0, 29.4, 30.0))


# =============================================================================
# PROCAM 2007
# =============================================================================

POINTS_2007 = {
    # one point per 5 mg/dL above 100, capped at 20
    "ldl": (Bins(tuple(range(100, 200, 5)), closed="right"), tuple(range(21))),
    # one point less per 2 mg/dL above 35, none above 55
    "hdl": (Bins(tuple(range(35, 57, 2)), closed="right"), tuple(range(11, -1, -1))),
    "triglycerides": (Bins((100, 150, 200)), (0, 2, 3, 4)),
    "sbp": (Bins(tuple(range(110, 190, 10))), tuple(range(9))),
}
FLAG_POINTS_2007 = {"smoker": 12, "fam_mi": 4}
DIABETIC_POINTS_2007 = {"male": 9, "female": 11}

CATEGORIES_2007 = ("0-4%", "5-9%", "10-19%", "20-29%", ">=30%")
MAX_SCORE_2007 = 81

# First point total of each category above "0-4%", by exact age. Ages below
# the first key share its row.
BREAKS_2007 = {
    "male": {
        20: (), 25: (67,), 26: (64,), 27: (61, 70), 28: (58, 68), 29: (56, 65),
        30: (54, 63), 31: (52, 61, 63), 32: (50, 59, 68), 33: (48, 57, 66),
        34: (46, 55, 64, 70), 35: (44, 53, 63, 68), 36: (42, 52, 61, 67),
        37: (41, 50, 59, 65), 38: (39, 49, 58, 64), 39: (38, 47, 56, 62),
        40: (36, 46, 55, 61), 41: (35, 44, 54, 59), 42: (34, 43, 52, 58),
        43: (32, 42, 51, 57), 44: (31, 40, 50, 56), 45: (30, 39, 49, 54),
        46: (29, 38, 47, 53), 47: (28, 37, 46, 52), 48: (27, 36, 45, 51),
        49: (26, 35, 44, 50), 50: (24, 34, 43, 49), 51: (24, 33, 42, 48),
        52: (23, 32, 41, 47), 53: (22, 31, 40, 46), 54: (21, 30, 39, 45),
        55: (20, 29, 38, 44), 56: (19, 28, 38, 43), 57: (18, 27, 37, 42),
        58: (17, 27, 36, 42), 59: (16, 26, 35, 41), 60: (16, 25, 34, 40),
        61: (15, 24, 34, 39), 62: (14, 23, 33, 39), 63: (13, 23, 32, 38),
        64: (13, 22, 31, 37), 65: (12, 21, 31, 36), 66: (11, 21, 30, 36),
        67: (11, 20, 29, 35), 68: (10, 19, 29, 34), 69: (9, 18, 28, 34),
        70: (9, 18, 27, 33), 71: (8, 17, 27, 32), 72: (7, 17, 26, 32),
        73: (7, 16, 25, 31), 74: (6, 15, 25, 30), 75: (5, 15, 24, 30),
    },
    "female": {
        20: (), 34: (70,), 35: (67,), 36: (65,), 37: (63, 71), 38: (60, 69),
        39: (58, 67), 40: (56, 65), 41: (54, 63), 42: (52, 61, 70),
        43: (50, 59, 68), 44: (49, 57, 66), 45: (47, 56, 65, 70),
        46: (45, 54, 63, 70), 47: (44, 52, 61, 67), 48: (42, 51, 60, 65),
        49: (40, 49, 58, 63), 50: (39, 48, 57, 62), 51: (37, 46, 55, 61),
        52: (36, 45, 54, 59), 53: (35, 43, 52, 58), 54: (33, 42, 51, 56),
        55: (32, 41, 50, 55), 56: (31, 40, 48, 54), 57: (29, 38, 47, 52),
        58: (28, 37, 46, 51), 59: (27, 36, 45, 50), 60: (26, 35, 43, 49),
        61: (25, 33, 42, 48), 62: (24, 32, 41, 47), 63: (22, 31, 40, 46),
        64: (21, 30, 39, 44), 65: (20, 29, 38, 43), 66: (19, 28, 37, 42),
        67: (18, 27, 36, 41), 68: (17, 26, 35, 40), 69: (16, 25, 34, 39),
        70: (15, 24, 33, 38), 71: (14, 23, 32, 37), 72: (13, 22, 31, 36),
        73: (13, 21, 30, 36), 74: (12, 20, 29, 35), 75: (11, 20, 28, 34),
    },
}
