"""cvrisk - Cardiovascular Risk Scores

This package computes published cardiovascular risk scores for single
patients or whole cohorts:

- **ESC**: SCORE2, SCORE2-OP (chart and formula), SCORE 2016, SCORE Germany
  2016, SCORE for older persons
- **Framingham**: general CVD (formula, points, heart age) and CHD
  (formula, points)
- **ACC/AHA**: pooled cohort equations
- **PROCAM**: 2002 and 2007
- **Secondary prevention**: REACH, TRA2P, INVEST

## Module Structure

- **engine**: Validation, unit conversion, binning, table lookup, formulas
- **data**: Published reference tables and coefficients
- **scoring**: Score calculators, registry and DataFrame adapter

## Quick Start

```python
from cvrisk import get_score, score2

# Vectorised
risk = score2(sex=["male", "female"], age=50, totchol=6.3, hdl=1.4,
              sbp=140, smoker=1, diabetic=0, risk="low")

# One patient
get_score("tra2p").compute(age=80, chf=0, ah=0, diabetic=0, stroke=0,
                           bypass_surg=0, other_surg=0, egfr=75, smoker=0, pad=0)

# A cohort
from cvrisk import compute_from_dataframe
scored = compute_from_dataframe(df, "ascvd_acc_aha")
```
"""

# Import configuration
from .config import CONFIG, ScoringConfig, validate_config

# Errors and warnings
from .exceptions import CVRiskError, InvalidInput, LookupMiss, MissingValueFallback, OutOfRangeWarning

# Scoring module exports
from .scoring import (
    ascvd_acc_aha,
    compute_from_dataframe,
    derive_reach_history,
    framingham_chd,
    framingham_chd_table,
    framingham_cvd,
    framingham_cvd_table,
    get_score,
    invest,
    list_scores,
    procam_2002,
    procam_2007,
    reach_cv_death,
    reach_next_cv,
    score2,
    score2_op,
    score2_op_table,
    score2_table,
    score_2016_table,
    score_ger_2016_table,
    score_op_table,
    tra2p,
)

__all__ = [
    # Config
    "CONFIG",
    "ScoringConfig",
    "validate_config",
    # Errors and warnings
    "CVRiskError",
    "InvalidInput",
    "LookupMiss",
    "MissingValueFallback",
    "OutOfRangeWarning",
    # Scores
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
    # Registry and batch scoring
    "get_score",
    "list_scores",
    "compute_from_dataframe",
]

# Version
__version__ = "0.1.0"
