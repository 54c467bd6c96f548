"""Tests for package configuration."""
import pytest

from cvrisk.config import CONFIG, ScoringConfig, validate_config
from cvrisk.engine.formula import finalise


class TestScoringConfig:
    """Tests for ScoringConfig and validate_config."""

    def test_defaults_are_valid(self):
        validate_config(ScoringConfig())

    def test_unknown_region(self):
        with pytest.raises(ValueError, match="CVRISK_DEFAULT_REGION"):
            validate_config(ScoringConfig(default_region="medium"))

    def test_region_spelling(self):
        validate_config(ScoringConfig(default_region="Very High"))

    def test_negative_digits(self):
        with pytest.raises(ValueError, match="CVRISK_ROUND_DIGITS"):
            validate_config(ScoringConfig(round_digits=-1))

    def test_round_digits(self, scoring_config):
        scoring_config.round_digits = 1
        assert finalise([0.123456])[0] == 12.3
        assert CONFIG.round_digits == 1

    def test_explicit_digits_win(self, scoring_config):
        scoring_config.round_digits = 0
        assert finalise([0.123456], digits=3)[0] == 12.346
