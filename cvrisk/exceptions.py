"""Error and warning taxonomy shared by every risk score."""
from __future__ import annotations


class CVRiskError(Exception):
    """Base class for errors raised by cvrisk."""


class InvalidInput(CVRiskError, ValueError):
    """A categorical value is outside its allowed set, a value has the wrong
    type, or a required field is missing.

    Raised before any computation; no partial result is returned.
    """


class LookupMiss(CVRiskError, AssertionError):
    """A bin key has no table row after clamping.

    Indicates a transcription defect in a reference table, not bad input.
    """


class OutOfRangeWarning(UserWarning):
    """A numeric predictor lies outside the model's validated range."""


class MissingValueFallback(UserWarning):
    """A missing predictor was replaced by a zero contribution."""
