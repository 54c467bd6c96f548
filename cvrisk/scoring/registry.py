"""Risk score registry."""
from __future__ import annotations

import logging
from typing import List

from .ascvd import AscvdAccAha
from .esc_score import Score2016Table, ScoreGer2016Table, ScoreOPTable
from .framingham import FraminghamCHD, FraminghamCHDTable, FraminghamCVD, FraminghamCVDTable
from .invest import Invest
from .procam import Procam2002, Procam2007
from .reach import ReachCVDeath, ReachNextCV
from .score2 import Score2, Score2OP, Score2OPTable, Score2Table
from .tra2p import Tra2p

logger = logging.getLogger(__name__)


# Global score registry
_SCORE_REGISTRY = {
    "score2": Score2,
    "score2_table": Score2Table,
    "score2_op": Score2OP,
    "score2_op_table": Score2OPTable,
    "score_2016_table": Score2016Table,
    "score_ger_2016_table": ScoreGer2016Table,
    "score_op_table": ScoreOPTable,
    "framingham_cvd": FraminghamCVD,
    "framingham_cvd_table": FraminghamCVDTable,
    "framingham_chd": FraminghamCHD,
    "framingham_chd_table": FraminghamCHDTable,
    "ascvd_acc_aha": AscvdAccAha,
    "procam_2002": Procam2002,
    "procam_2007": Procam2007,
    "reach_next_cv": ReachNextCV,
    "reach_cv_death": ReachCVDeath,
    "tra2p": Tra2p,
    "invest": Invest,
}


def get_score(name: str):
    """Get a risk score calculator by name.

    Args:
        name: Score name, see :func:`list_scores`

    Returns:
        Risk score calculator instance

    Raises:
        ValueError: If score name not recognized
    """
    name_lower = name.lower()

    if name_lower not in _SCORE_REGISTRY:
        raise ValueError(
            f"Unknown score: {name}. Available: {list(_SCORE_REGISTRY.keys())}"
        )

    logger.debug("Creating scorer %s", name_lower)
    return _SCORE_REGISTRY[name_lower]()


def list_scores() -> List[str]:
    """List available risk scores.

    Returns:
        List of score names
    """
    return list(_SCORE_REGISTRY.keys())
