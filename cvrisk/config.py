"""Global configuration for the risk scores.

Every setting can be overridden with an environment variable; the defaults
reproduce the published behaviour of each score.
"""
from __future__ import annotations
import os
from dataclasses import dataclass


REGIONS = ("low", "moderate", "high", "very_high")


def _env_flag(name: str, default: str) -> bool:
    return os.environ.get(name, default).strip().lower() not in ("0", "false", "no", "off", "")


@dataclass
class ScoringConfig:
    """Package-wide scoring parameters.

    Attributes:
        default_region: ESC risk region used when a caller passes none.
        round_digits: Decimal places kept on formula-based risks.
        warn_out_of_range: Emit OutOfRangeWarning for values outside a
            model's validated range.
        warn_missing: Emit MissingValueFallback when a missing value is
            replaced by a zero contribution.
    """

    default_region: str = os.environ.get("CVRISK_DEFAULT_REGION", "low")
    round_digits: int = int(os.environ.get("CVRISK_ROUND_DIGITS", "2"))
    warn_out_of_range: bool = _env_flag("CVRISK_WARN_OUT_OF_RANGE", "1")
    warn_missing: bool = _env_flag("CVRISK_WARN_MISSING", "1")


CONFIG = ScoringConfig()


def validate_config(cfg: ScoringConfig) -> None:
    """Validate configuration values and raise helpful errors.

    Args:
        cfg: ScoringConfig
    """
    region = cfg.default_region.strip().lower().replace(" ", "_")
    if region not in REGIONS:
        raise ValueError(
            f"CVRISK_DEFAULT_REGION must be one of {list(REGIONS)}, got {cfg.default_region!r}"
        )
    if cfg.round_digits < 0:
        raise ValueError("CVRISK_ROUND_DIGITS must be a non-negative integer")
