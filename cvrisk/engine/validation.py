"""Schema-driven input validation.

Each score declares its inputs once as a tuple of ``Field`` entries; the same
routine then broadcasts scalars against vectors, rejects invalid values with
``InvalidInput`` and reports out-of-range or missing values as warnings.
"""
from __future__ import annotations

import logging
import warnings
from dataclasses import dataclass, field
from typing import Any, Dict, Mapping, Optional, Sequence, Tuple

import numpy as np
import pandas as pd

from ..config import CONFIG
from ..exceptions import InvalidInput, MissingValueFallback, OutOfRangeWarning

logger = logging.getLogger(__name__)

SEXES = ("female", "male")


@dataclass(frozen=True)
class Field:
    """Declaration of one score input.

    Attributes:
        name: Parameter name
        kind: "numeric", "binary" (0/1) or "category"
        required: Missing values raise InvalidInput when True; otherwise
            they contribute nothing and raise MissingValueFallback
        choices: Allowed values of a category field
        aliases: Alternative spellings mapped onto ``choices``
        valid_range: Inclusive (low, high) range the model was validated on
    """

    name: str
    kind: str = "numeric"
    required: bool = True
    choices: Tuple[str, ...] = ()
    aliases: Mapping[str, str] = field(default_factory=dict)
    valid_range: Optional[Tuple[float, float]] = None


def numeric(name: str, required: bool = True, valid_range: Optional[Tuple[float, float]] = None) -> Field:
    return Field(name, "numeric", required=required, valid_range=valid_range)


def binary(name: str, required: bool = True) -> Field:
    return Field(name, "binary", required=required)


def category(name: str, choices: Sequence[str], required: bool = True, aliases: Optional[Mapping[str, str]] = None) -> Field:
    return Field(name, "category", required=required, choices=tuple(choices), aliases=dict(aliases or {}))


def sex_field() -> Field:
    return category("sex", SEXES, aliases={"m": "male", "f": "female"})


def _normalise_label(value) -> str:
    return str(value).strip().lower().replace(" ", "_")


def _is_scalar(value) -> bool:
    return value is None or np.ndim(value) == 0


def _common_length(inputs: Dict[str, Any], score: str) -> int:
    lengths = {name: len(np.atleast_1d(np.asarray(value, dtype=object)))
               for name, value in inputs.items() if not _is_scalar(value)}
    distinct = set(lengths.values())
    if len(distinct) > 1:
        raise InvalidInput(f"{score}: inputs have different lengths {lengths}")
    return distinct.pop() if distinct else 1


def _broadcast(value, n: int) -> np.ndarray:
    if value is None:
        return np.full(n, np.nan, dtype=object)
    if _is_scalar(value):
        return np.full(n, value, dtype=object)
    return np.asarray(value, dtype=object).ravel()


def _warn(message: str, category) -> None:
    enabled = CONFIG.warn_missing if category is MissingValueFallback else CONFIG.warn_out_of_range
    if enabled:
        warnings.warn(message, category, stacklevel=4)


def _to_float(spec: Field, raw: np.ndarray, score: str) -> np.ndarray:
    series = pd.Series(raw, dtype=object)
    if series.map(lambda v: isinstance(v, str)).any():
        raise InvalidInput(f"{score}: {spec.name} must be a valid numeric value")
    converted = pd.to_numeric(series, errors="coerce")
    if (converted.isna() & series.notna()).any():
        raise InvalidInput(f"{score}: {spec.name} must be a valid numeric value")
    return converted.to_numpy(dtype=float)


def _check_missing(spec: Field, missing: np.ndarray, score: str) -> None:
    if not missing.any():
        return
    if spec.required:
        raise InvalidInput(f"{score}: {spec.name} is required and must not be missing")
    _warn(
        f"{score}: {spec.name} contains missing values; they contribute nothing "
        "to the score, which can underestimate risk",
        MissingValueFallback,
    )


def _validate_field(spec: Field, raw: np.ndarray, score: str) -> np.ndarray:
    if spec.kind == "category":
        missing = pd.isna(raw)
        _check_missing(spec, missing, score)
        labels = np.array([None if m else _normalise_label(v) for v, m in zip(raw, missing)], dtype=object)
        labels = np.array([spec.aliases.get(v, v) for v in labels], dtype=object)
        bad = [v for v, m in zip(labels, missing) if not m and v not in spec.choices]
        if bad:
            raise InvalidInput(f"{score}: {spec.name} must be one of {list(spec.choices)}, got {sorted(set(bad))}")
        return labels

    values = _to_float(spec, raw, score)
    missing = np.isnan(values)
    _check_missing(spec, missing, score)

    if spec.kind == "binary":
        if not np.isin(values[~missing], (0.0, 1.0)).all():
            raise InvalidInput(f"{score}: {spec.name} must be either 0 (no) or 1 (yes)")
        return values

    if spec.valid_range is not None:
        low, high = spec.valid_range
        present = values[~missing]
        if ((present < low) | (present > high)).any():
            _warn(
                f"{score}: some {spec.name} values are outside the validated range "
                f"({low:g}-{high:g}); the estimate is less reliable",
                OutOfRangeWarning,
            )
    return values


def validate_inputs(schema: Sequence[Field], inputs: Dict[str, Any], score: str) -> Dict[str, np.ndarray]:
    """Validate and broadcast a score's inputs.

    Args:
        schema: Field declarations of the score
        inputs: Parameter name -> scalar or array-like
        score: Score name used in messages

    Returns:
        Parameter name -> 1-D array of equal length (float for numeric and
        binary fields, object for category fields)

    Raises:
        InvalidInput: If any value is invalid or a required value is missing
    """
    relevant = {spec.name: inputs.get(spec.name) for spec in schema}
    n = _common_length(relevant, score)
    validated = {spec.name: _validate_field(spec, _broadcast(relevant[spec.name], n), score) for spec in schema}
    logger.debug("%s: validated %d record(s)", score, n)
    return validated


def validate_choice(name: str, value, choices: Sequence[str], score: str, aliases: Optional[Mapping[str, str]] = None) -> str:
    """Validate a single selector value such as a risk region or model."""
    if value is None or not isinstance(value, str):
        raise InvalidInput(f"{score}: {name} must be one of {list(choices)}")
    label = _normalise_label(value)
    label = (aliases or {}).get(label, label)
    if label not in choices:
        raise InvalidInput(f"{score}: {name} must be one of {list(choices)}, got {value!r}")
    return label


def validate_flag(name: str, value, score: str) -> bool:
    """Validate a single logical option such as ``mmol``."""
    if not isinstance(value, (bool, np.bool_)):
        raise InvalidInput(f"{score}: {name} must be a single logical value")
    return bool(value)
