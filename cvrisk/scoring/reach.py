"""
REACH registry scores for patients with established atherothrombosis.

Two integer point scores estimate the 20-month risk (%) of
    - a next cardiovascular event (cardiovascular death, MI or stroke), and
    - cardiovascular death.

Points cover sex, age, BMI, smoking, diabetes, number of diseased vascular
beds, a recent cardiovascular event, heart failure, atrial fibrillation,
statin and aspirin therapy, and residence in Eastern Europe or the Middle
East. Missing predictors score 0 points.

Reference:
    Wilson PWF, et al. An international model to predict recurrent
    cardiovascular disease. Am J Med. 2012;125(7):695-703.
"""
from __future__ import annotations

import logging
from typing import Dict

import numpy as np
import pandas as pd

from ..data.secondary_prevention import (
    REACH_AGE_BINS,
    REACH_AGE_POINTS,
    REACH_BMI_BINS,
    REACH_POINTS,
    REACH_RISK,
)
from ..engine.binning import Bins, PointTable, flag_points
from ..engine.lookup import RiskTable
from ..engine.validation import SEXES, binary, category, numeric, validate_flag
from ..exceptions import InvalidInput
from .base import RiskScore

logger = logging.getLogger(__name__)

FLAGS = ("smoker", "diabetic", "cv_event", "chf", "af", "statin", "ass")
VASC_BINS = Bins((1, 2, 3))
RECENT_EVENT_DAYS = 365


class ReachScore(RiskScore):
    """REACH point score; ``outcome_key`` selects the point set and table."""

    outcome_key = "next_cv"
    reference = "Wilson PWF, et al. Am J Med. 2012;125(7):695-703."

    def __init__(self):
        self.schema = (
            category("sex", SEXES, required=False, aliases={"m": "male", "f": "female"}),
            numeric("age", required=False, valid_range=(45, 100)),
            numeric("bmi", required=False),
            binary("smoker", required=False),
            binary("diabetic", required=False),
            numeric("vasc", required=False),
            binary("cv_event", required=False),
            binary("chf", required=False),
            binary("af", required=False),
            binary("statin", required=False),
            binary("ass", required=False),
        )
        self.weights = REACH_POINTS[self.outcome_key]
        self.age_points = PointTable(REACH_AGE_BINS, REACH_AGE_POINTS)
        self.bmi_points = PointTable(REACH_BMI_BINS, self.weights["bmi"])
        self.vasc_points = PointTable(VASC_BINS, self.weights["vasc"])
        self.risk_table = RiskTable(*REACH_RISK[self.outcome_key])
        self.output_range = (float(self.risk_table.values.min()), float(self.risk_table.values.max()))

    def score_points(self, data: Dict[str, np.ndarray], region_ee_or_me: bool) -> np.ndarray:
        points = (
            np.where(data["sex"] == "male", float(self.weights["male"]), 0.0)
            + self.age_points(data["age"])
            + self.bmi_points(data["bmi"])
            + self.vasc_points(data["vasc"])
        )
        for name in FLAGS:
            points = points + flag_points(data[name], self.weights[name])
        if region_ee_or_me:
            points = points + self.weights["region_ee_or_me"]
        return points

    def compute_batch(self, sex, age, bmi, smoker, diabetic, vasc, cv_event, chf, af, statin, ass,
                      region_ee_or_me: bool = False) -> np.ndarray:
        """Calculate the 20-month risk for each record.

        Args:
            vasc: Number of symptomatic vascular beds (0-3)
            cv_event: 1 if a cardiovascular event occurred in the past year
            chf: 1 if congestive heart failure
            af: 1 if atrial fibrillation
            statin: 1 if on statin therapy
            ass: 1 if on aspirin (acetylsalicylic acid)
            region_ee_or_me: True for patients in Eastern Europe or the
                Middle East

        Returns:
            Array of 20-month risks (%)
        """
        region_ee_or_me = validate_flag("region_ee_or_me", region_ee_or_me, self.name)
        data = self.validate(sex=sex, age=age, bmi=bmi, smoker=smoker, diabetic=diabetic, vasc=vasc,
                             cv_event=cv_event, chf=chf, af=af, statin=statin, ass=ass)
        present = data["vasc"][~np.isnan(data["vasc"])]
        if not np.isin(present, (0, 1, 2, 3)).all():
            raise InvalidInput(f"{self.name}: vasc must be 0, 1, 2 or 3")

        return self.risk_table.lookup(self.score_points(data, region_ee_or_me))


class ReachNextCV(ReachScore):
    name = "reach_next_cv"
    full_name = "REACH score, next cardiovascular event"
    outcome = "20-month risk of cardiovascular death, MI or stroke (%)"
    outcome_key = "next_cv"


class ReachCVDeath(ReachScore):
    name = "reach_cv_death"
    full_name = "REACH score, cardiovascular death"
    outcome = "20-month risk of cardiovascular death (%)"
    outcome_key = "cv_death"


def derive_reach_history(cad, pad, stroke, mi, mi_date, visit_date) -> pd.DataFrame:
    """Derive the REACH inputs ``vasc`` and ``cv_event`` from patient history.

    Args:
        cad: 1 if coronary artery disease
        pad: 1 if peripheral artery disease
        stroke: 1 if prior stroke (cerebrovascular disease)
        mi: 1 if prior myocardial infarction
        mi_date: Date of the myocardial infarction
        visit_date: Date of the examination

    Returns:
        DataFrame with columns 'vasc' (number of diseased vascular beds,
        missing if any bed is unknown) and 'cv_event' (1 for an MI within
        365 days before the visit or any stroke)
    """
    history = pd.DataFrame({"cad": cad, "pad": pad, "stroke": stroke, "mi": mi,
                            "mi_date": mi_date, "visit_date": visit_date},
                           index=None if np.ndim(cad) else [0])
    for column in ("cad", "pad", "stroke", "mi"):
        history[column] = pd.to_numeric(history[column], errors="coerce")

    days = (pd.to_datetime(history["visit_date"], errors="coerce")
            - pd.to_datetime(history["mi_date"], errors="coerce")).dt.days
    recent_mi = (history["mi"] == 1) & days.between(0, RECENT_EVENT_DAYS)

    vasc = history[["cad", "pad", "stroke"]].sum(axis=1, min_count=3)
    cv_event = (recent_mi | (history["stroke"] == 1)).astype(float)
    cv_event = cv_event.mask(history["stroke"].isna() & ~recent_mi)

    logger.debug("Derived REACH history for %d patient(s)", len(history))
    return pd.DataFrame({"vasc": vasc, "cv_event": cv_event}).reset_index(drop=True)


def reach_next_cv(sex, age, bmi, smoker, diabetic, vasc, cv_event, chf, af, statin, ass,
                  region_ee_or_me: bool = False) -> np.ndarray:
    return ReachNextCV().compute_batch(sex, age, bmi, smoker, diabetic, vasc, cv_event, chf, af, statin, ass,
                                       region_ee_or_me=region_ee_or_me)


def reach_cv_death(sex, age, bmi, smoker, diabetic, vasc, cv_event, chf, af, statin, ass,
                   region_ee_or_me: bool = False) -> np.ndarray:
    return ReachCVDeath().compute_batch(sex, age, bmi, smoker, diabetic, vasc, cv_event, chf, af, statin, ass,
                                        region_ee_or_me=region_ee_or_me)
