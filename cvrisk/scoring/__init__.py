"""Cardiovascular risk scores.

Each score is a calculator class with ``compute``, ``compute_batch`` and
``get_info``, plus a module-level function of the same name that scores a
batch directly.
"""

from .ascvd import AscvdAccAha, ascvd_acc_aha
from .base import RiskScore, ScoreResult
from .dataframe import compute_from_dataframe
from .esc_score import (
    Score2016Table,
    ScoreGer2016Table,
    ScoreOPTable,
    score_2016_table,
    score_ger_2016_table,
    score_op_table,
)
from .framingham import (
    FraminghamCHD,
    FraminghamCHDTable,
    FraminghamCVD,
    FraminghamCVDTable,
    framingham_chd,
    framingham_chd_table,
    framingham_cvd,
    framingham_cvd_table,
)
from .invest import Invest, invest
from .procam import Procam2002, Procam2007, procam_2002, procam_2007
from .reach import ReachCVDeath, ReachNextCV, derive_reach_history, reach_cv_death, reach_next_cv
from .registry import get_score, list_scores
from .score2 import Score2, Score2OP, Score2OPTable, Score2Table, score2, score2_op, score2_op_table, score2_table
from .tra2p import Tra2p, tra2p

__all__ = [
    "RiskScore",
    "ScoreResult",
    "Score2",
    "Score2Table",
    "Score2OP",
    "Score2OPTable",
    "Score2016Table",
    "ScoreGer2016Table",
    "ScoreOPTable",
    "FraminghamCVD",
    "FraminghamCVDTable",
    "FraminghamCHD",
    "FraminghamCHDTable",
    "AscvdAccAha",
    "Procam2002",
    "Procam2007",
    "ReachNextCV",
    "ReachCVDeath",
    "Tra2p",
    "Invest",
    "score2",
    "score2_table",
    "score2_op",
    "score2_op_table",
    "score_2016_table",
    "score_ger_2016_table",
    "score_op_table",
    "framingham_cvd",
    "framingham_cvd_table",
    "framingham_chd",
    "framingham_chd_table",
    "ascvd_acc_aha",
    "procam_2002",
    "procam_2007",
    "reach_next_cv",
    "reach_cv_death",
    "derive_reach_history",
    "tra2p",
    "invest",
    "compute_from_dataframe",
    "get_score",
    "list_scores",
]
