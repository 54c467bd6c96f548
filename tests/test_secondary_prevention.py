"""Tests for the secondary prevention scores REACH, TRA2P and INVEST."""
import numpy as np
import pandas as pd
import pytest

from cvrisk.exceptions import InvalidInput, MissingValueFallback
from cvrisk.scoring.invest import Invest, invest
from cvrisk.scoring.reach import ReachNextCV, derive_reach_history, reach_cv_death, reach_next_cv
from cvrisk.scoring.tra2p import tra2p


def _reach_baseline(**overrides):
    """REACH inputs that all score zero points."""
    patient = dict(sex="female", age=20, bmi=25, smoker=0, diabetic=0, vasc=0, cv_event=0,
                   chf=0, af=0, statin=0, ass=0)
    patient.update(overrides)
    return patient


class TestReach:
    """Tests for the REACH next-event and cardiovascular-death scores."""

    def test_next_cv_paper_example(self, reach_patient):
        assert reach_next_cv(**reach_patient)[0] == 11

    def test_cv_death_paper_example(self, reach_patient):
        assert reach_cv_death(**reach_patient)[0] == 6.2

    def test_region_adjustment(self, reach_patient):
        elsewhere = dict(reach_patient, region_ee_or_me=False)
        # 17 -> 15 points and 16 -> 15 points
        assert reach_next_cv(**elsewhere)[0] == 8.5
        assert reach_cv_death(**elsewhere)[0] == 4.9

    def test_vascular_beds_and_sex(self):
        points = ReachNextCV().score_points(
            ReachNextCV().validate(**_reach_baseline(sex="male", vasc=3)), region_ee_or_me=False
        )
        assert points[0] == 7
        assert reach_next_cv(**_reach_baseline(sex="male", vasc=3))[0] == 2.5

    def test_total_clamped_to_table(self):
        low = reach_next_cv(**_reach_baseline(statin=1, ass=1))
        assert low[0] == 0
        high = reach_cv_death(**_reach_baseline(age=90, bmi=18, sex="male", smoker=1, diabetic=1, vasc=3,
                                                cv_event=1, chf=1, af=1))
        assert high[0] == 50

    def test_missing_values_score_zero(self):
        with pytest.warns(MissingValueFallback):
            risk = reach_next_cv(sex="male", age=None, bmi=None, smoker=None, diabetic=None, vasc=3,
                                 cv_event=None, chf=None, af=None, statin=None, ass=None)
        assert risk[0] == 2.5

    def test_invalid_vascular_bed_count(self):
        with pytest.raises(InvalidInput, match="vasc"):
            reach_next_cv(**_reach_baseline(vasc=4))

    def test_region_must_be_logical(self):
        with pytest.raises(InvalidInput, match="region_ee_or_me"):
            reach_next_cv(**_reach_baseline(), region_ee_or_me="yes")


class TestReachHistory:
    """Tests for deriving vascular beds and recent events."""

    def test_vascular_beds(self):
        history = derive_reach_history(
            cad=[1, 1, 0, 1],
            pad=[1, 0, 0, None],
            stroke=[1, 0, 0, 0],
            mi=[0, 0, 0, 0],
            mi_date=[None] * 4,
            visit_date=["2020-06-01"] * 4,
        )
        assert history["vasc"].tolist()[:3] == [3, 1, 0]
        assert np.isnan(history["vasc"].iloc[3])

    def test_recent_event(self):
        history = derive_reach_history(
            cad=[1, 1, 1, 1],
            pad=[0, 0, 0, 0],
            stroke=[0, 0, 1, 0],
            mi=[1, 1, 0, 0],
            mi_date=["2020-01-15", "2018-01-15", None, None],
            visit_date=["2020-06-01"] * 4,
        )
        assert history["cv_event"].tolist() == [1, 0, 1, 0]

    def test_scalar_inputs(self):
        history = derive_reach_history(cad=1, pad=0, stroke=0, mi=1, mi_date="2021-03-01", visit_date="2021-09-01")
        assert isinstance(history, pd.DataFrame)
        assert history.loc[0, "vasc"] == 1
        assert history.loc[0, "cv_event"] == 1


class TestTra2p:
    """Tests for the TRA 2°P-TIMI 50 score."""

    def test_paper_example(self):
        # chf, hypertension, diabetes, other surgery and eGFR < 60: 5 points
        risk = tra2p(age=65, chf=1, ah=1, diabetic=1, stroke=0, bypass_surg=0, other_surg=1, egfr=59,
                     smoker=0, pad=0)
        assert risk[0] == 28.9

    def test_age_only(self):
        with pytest.warns(MissingValueFallback):
            risk = tra2p(age=80, chf=None, ah=None, diabetic=None, stroke=None, bypass_surg=None,
                         other_surg=None, egfr=None, smoker=None)
        assert risk[0] == 6.8

    def test_no_risk_factors(self):
        risk = tra2p(age=60, chf=0, ah=0, diabetic=0, stroke=0, bypass_surg=0, other_surg=0, egfr=90,
                     smoker=0, pad=0)
        assert risk[0] == 3.5

    def test_peripheral_artery_disease_adds_a_point(self):
        common = dict(age=60, chf=1, ah=1, diabetic=0, stroke=0, bypass_surg=0, other_surg=0, egfr=90, smoker=0)
        assert tra2p(**common, pad=0)[0] == 9.9
        assert tra2p(**common, pad=1)[0] == 14.5

    def test_seven_or_more_points(self, custom_assertions):
        risk = tra2p(age=[80, 80], chf=1, ah=1, diabetic=1, stroke=1, bypass_surg=1, other_surg=[0, 1],
                     egfr=30, smoker=[0, 1], pad=1)
        custom_assertions.assert_risks(risk, [58.6, 58.6])


class TestInvest:
    """Tests for the INVEST score."""

    def test_paper_example(self, invest_patients, custom_assertions):
        custom_assertions.assert_risks(invest(**invest_patients), [16, 36, 36])

    def test_compute_single_patient(self, invest_patients, custom_assertions):
        first = {name: values[0] for name, values in invest_patients.items()}
        result = Invest().compute(**first)
        custom_assertions.assert_valid_result(result, "invest")
        assert result["risk"] == 16.0

    def test_compute_rejects_batches(self, invest_patients):
        with pytest.raises(InvalidInput, match="compute_batch"):
            Invest().compute(**invest_patients)

    def test_unknown_ethnicity(self, invest_patients):
        patients = dict(invest_patients, ethnicity=["white", "martian", "nw"])
        with pytest.raises(InvalidInput, match="ethnicity"):
            invest(**patients)
