"""Common interface of all risk scores."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Optional, Sequence, Union

import numpy as np
import pandas as pd

from ..engine.validation import Field, validate_inputs
from ..exceptions import InvalidInput


@dataclass
class ScoreResult:
    """Result of scoring a single patient."""

    score: str
    risk: Union[float, str]
    points: Optional[float] = None
    heart_age: Optional[float] = None

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary, leaving out outputs the score does not produce."""
        result = {"score": self.score, "risk": self.risk}
        if self.points is not None:
            result["points"] = self.points
        if self.heart_age is not None:
            result["heart_age"] = self.heart_age
        return result


def _plain(value):
    if isinstance(value, (np.floating, np.integer)):
        return float(value)
    return value


class RiskScore:
    """Base class of the score calculators.

    Subclasses declare their inputs in ``schema`` and implement
    ``compute_batch``, which accepts scalars or equal-length vectors and
    returns one risk per record.
    """

    name: str = ""
    full_name: str = ""
    reference: str = ""
    outcome: str = ""
    output_range: Optional[tuple] = None
    schema: Sequence[Field] = ()

    def validate(self, **inputs) -> Dict[str, np.ndarray]:
        return validate_inputs(self.schema, inputs, self.name)

    def compute_batch(self, **inputs):
        raise NotImplementedError

    def compute(self, **inputs) -> Dict[str, Any]:
        """Score a single patient.

        Returns:
            Dictionary with 'score', 'risk' and, where the score provides
            them, 'points' or 'heart_age'
        """
        result = self.compute_batch(**inputs)
        if len(result) != 1:
            raise InvalidInput(f"{self.name}: compute() scores one patient, use compute_batch() for {len(result)}")

        if isinstance(result, pd.DataFrame):
            row = {key: _plain(value) for key, value in result.iloc[0].items()}
            return ScoreResult(score=self.name, **row).to_dict()
        return ScoreResult(score=self.name, risk=_plain(result[0])).to_dict()

    def get_info(self) -> Dict[str, Any]:
        """Get score information."""
        return {
            "name": self.name,
            "full_name": self.full_name,
            "outcome": self.outcome,
            "reference": self.reference,
            "variables": [spec.name for spec in self.schema],
            "output_range": self.output_range,
        }
