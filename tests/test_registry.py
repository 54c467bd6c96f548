"""Tests for the score registry and the single-patient interface."""
import pytest

import cvrisk
from cvrisk.scoring.base import RiskScore
from cvrisk.scoring.registry import get_score, list_scores


class TestRegistry:
    """Tests for score lookup by name."""

    def test_all_scores_registered(self):
        scores = list_scores()
        assert len(scores) == 18
        for name in ("score2", "score2_op_table", "framingham_chd_table", "ascvd_acc_aha", "procam_2007",
                     "reach_cv_death", "tra2p", "invest"):
            assert name in scores

    def test_lookup_is_case_insensitive(self):
        scorer = get_score("SCORE2")
        assert scorer.name == "score2"

    def test_unknown_score(self):
        with pytest.raises(ValueError, match="Unknown score"):
            get_score("qrisk3")

    @pytest.mark.parametrize("name", list_scores())
    def test_registered_name_matches_scorer(self, name):
        scorer = get_score(name)
        assert isinstance(scorer, RiskScore)
        assert scorer.name == name

    @pytest.mark.parametrize("name", list_scores())
    def test_get_info(self, name):
        info = get_score(name).get_info()
        assert info["name"] == name
        assert info["full_name"]
        assert info["reference"]
        assert info["variables"]

    def test_package_exports(self):
        assert cvrisk.get_score is get_score
        assert callable(cvrisk.score2)
        assert callable(cvrisk.compute_from_dataframe)


class TestSinglePatient:
    """Tests for RiskScore.compute."""

    def test_tra2p(self, custom_assertions):
        result = get_score("tra2p").compute(age=80, chf=0, ah=0, diabetic=0, stroke=0, bypass_surg=0,
                                            other_surg=0, egfr=75, smoker=0, pad=0)
        custom_assertions.assert_valid_result(result, "tra2p")
        assert result == {"score": "tra2p", "risk": 6.8}

    def test_points_are_reported(self):
        result = get_score("procam_2007").compute(sex="female", age=44, ldl=89, hdl=61, triglycerides=156, smoker=0,
                                                  diabetic=1, fam_mi=1, sbp=121, return_points=True)
        assert result == {"score": "procam_2007", "risk": "0-4%", "points": 20.0}

    def test_output_range_covers_result(self, reach_patient, custom_assertions):
        scorer = get_score("reach_next_cv")
        result = scorer.compute(**reach_patient)
        custom_assertions.assert_within([result["risk"]], *scorer.output_range)
