"""SCORE2 and SCORE2-OP model coefficients and regional recalibration.

References:
    SCORE2 working group and ESC Cardiovascular risk collaboration.
    Eur Heart J. 2021;42(25):2439-2454, Supplementary Table 8.
    SCORE2-OP working group and ESC Cardiovascular risk collaboration.
    Eur Heart J. 2021;42(25):2455-2467, Supplementary Tables 7 and 8.
"""
from ..engine.formula import CoefficientSet


SCORE2 = {
    "male": CoefficientSet(
        coefficients={
            "age": 0.3742,
            "smoker": 0.6012,
            "sbp": 0.2777,
            "diabetic": 0.6457,
            "tchol": 0.1458,
            "hdl": -0.2698,
            "smoker_age": -0.0755,
            "sbp_age": -0.0255,
            "tchol_age": -0.0281,
            "hdl_age": 0.0426,
            "diabetic_age": -0.0983,
        },
        baseline_survival=0.9605,
        calibration={
            "low": (-0.5699, 0.7476),
            "moderate": (-0.1565, 0.8009),
            "high": (0.3207, 0.9360),
            "very_high": (0.5836, 0.8294),
        },
    ),
    "female": CoefficientSet(
        coefficients={
            "age": 0.4648,
            "smoker": 0.7744,
            "sbp": 0.3131,
            "diabetic": 0.8096,
            "tchol": 0.1002,
            "hdl": -0.2606,
            "smoker_age": -0.1088,
            "sbp_age": -0.0277,
            "tchol_age": -0.0226,
            "hdl_age": 0.0613,
            "diabetic_age": -0.1272,
        },
        baseline_survival=0.9776,
        calibration={
            "low": (-0.7380, 0.7019),
            "moderate": (-0.3143, 0.7701),
            "high": (0.5710, 0.9369),
            "very_high": (0.9412, 0.8329),
        },
    ),
}


SCORE2_OP = {
    "male": CoefficientSet(
        coefficients={
            "age": 0.0634,
            "diabetic": 0.4245,
            "smoker": 0.3524,
            "sbp": 0.0094,
            "tchol": 0.0850,
            "hdl": -0.3564,
            "diabetic_age": -0.0174,
            "smoker_age": -0.0247,
            "sbp_age": -0.0005,
            "tchol_age": 0.0073,
            "hdl_age": 0.0091,
        },
        baseline_survival=0.7576,
        mean=0.0929,
        calibration={
            "low": (-0.34, 1.19),
            "moderate": (0.01, 1.25),
            "high": (0.08, 1.15),
            "very_high": (0.05, 0.70),
        },
    ),
    "female": CoefficientSet(
        coefficients={
            "age": 0.0789,
            "diabetic": 0.6010,
            "smoker": 0.4921,
            "sbp": 0.0102,
            "tchol": 0.0605,
            "hdl": -0.3040,
            "diabetic_age": -0.0107,
            "smoker_age": -0.0255,
            "sbp_age": -0.0004,
            "tchol_age": -0.0009,
            "hdl_age": 0.0154,
        },
        baseline_survival=0.8082,
        mean=0.229,
        calibration={
            "low": (-0.52, 1.01),
            "moderate": (-0.10, 1.10),
            "high": (0.38, 1.09),
            "very_high": (0.38, 0.69),
        },
    ),
}


# (centre, scale) of each transformed predictor
SCORE2_CENTRING = {
    "age": (60.0, 5.0),
    "sbp": (120.0, 20.0),
    "tchol": (6.0, 1.0),
    "hdl": (1.3, 0.5),
}

SCORE2_OP_CENTRING = {
    "age": (73.0, 1.0),
    "sbp": (150.0, 1.0),
    "tchol": (6.0, 1.0),
    "hdl": (1.4, 1.0),
}
