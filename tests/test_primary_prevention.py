"""Tests for the Framingham, ACC/AHA and PROCAM scores."""
import numpy as np
import pandas as pd
import pytest

from cvrisk.exceptions import InvalidInput, MissingValueFallback
from cvrisk.scoring.ascvd import AscvdAccAha, ascvd_acc_aha
from cvrisk.scoring.framingham import (
    FraminghamCHDTable,
    FraminghamCVDTable,
    bp_category,
    framingham_chd,
    framingham_chd_table,
    framingham_cvd,
    framingham_cvd_table,
)
from cvrisk.scoring.procam import Procam2007, procam_2002, procam_2007


@pytest.fixture
def framingham_cvd_patient():
    """D'Agostino 2008 example: 61 year old female smoker."""
    return dict(sex="female", age=61, totchol=180, hdl=47, sbp=124, bp_med=0, smoker=1, diabetic=0)


@pytest.fixture
def framingham_chd_patient():
    """Wilson 1998 example: 55 year old male smoker."""
    return dict(sex="male", age=55, totchol=250, hdl=39, sbp=146, dbp=88, smoker=1, diabetic=0)


@pytest.fixture
def procam_patients():
    """PROCAM paper examples."""
    return dict(
        age=[44, 59],
        ldl=[89, 188],
        hdl=[61, 35],
        sbp=[121, 160],
        triglycerides=[156, 98],
        smoker=[0, 1],
        diabetic=[1, 0],
        fam_mi=[1, 1],
    )


class TestFraminghamCVD:
    """Tests for the general cardiovascular disease score."""

    def test_formula_paper_example(self, framingham_cvd_patient):
        assert framingham_cvd(**framingham_cvd_patient)[0] == pytest.approx(10.48)

    def test_table_paper_example(self, framingham_cvd_patient):
        assert framingham_cvd_table(**framingham_cvd_patient)[0] == 10

    def test_heart_age(self, framingham_cvd_patient):
        result = framingham_cvd_table(**framingham_cvd_patient, heart_age=True)
        assert isinstance(result, pd.DataFrame)
        assert list(result.columns) == ["risk", "heart_age"]
        assert result.loc[0, "risk"] == 10
        assert result.loc[0, "heart_age"] == 73

    def test_compute_returns_heart_age(self, framingham_cvd_patient, custom_assertions):
        result = FraminghamCVDTable().compute(**framingham_cvd_patient, heart_age=True)
        custom_assertions.assert_valid_result(result, "framingham_cvd_table")
        assert result["heart_age"] == 73.0

    def test_formula_clamped_to_published_range(self, custom_assertions):
        risk = framingham_cvd(
            sex=["female", "male"],
            age=[30, 74],
            totchol=[150, 320],
            hdl=[70, 30],
            sbp=[110, 190],
            bp_med=[0, 1],
            smoker=[0, 1],
            diabetic=[0, 1],
        )
        custom_assertions.assert_risks(risk, [1.0, 30.0])

    def test_mmol_input(self, framingham_cvd_patient):
        mmol = dict(framingham_cvd_patient, totchol=180 * 0.0259, hdl=47 * 0.0259)
        assert framingham_cvd(**mmol, mmol=True)[0] == pytest.approx(framingham_cvd(**framingham_cvd_patient)[0], abs=0.01)

    def test_treatment_raises_risk(self, framingham_cvd_patient):
        treated = dict(framingham_cvd_patient, bp_med=1)
        assert framingham_cvd(**treated)[0] > framingham_cvd(**framingham_cvd_patient)[0]
        assert framingham_cvd_table(**treated)[0] > framingham_cvd_table(**framingham_cvd_patient)[0]


class TestFraminghamCHD:
    """Tests for the coronary heart disease score."""

    def test_formula_paper_example(self, framingham_chd_patient):
        assert framingham_chd(**framingham_chd_patient)[0] == pytest.approx(33.36)

    def test_table_paper_example(self, framingham_chd_patient):
        assert framingham_chd_table(**framingham_chd_patient)[0] == 31

    def test_ldl_model(self, framingham_chd_patient):
        patient = dict(framingham_chd_patient, totchol=None)
        assert framingham_chd_table(**patient, ldl=150, chol_metric="ldl")[0] == 22

    def test_point_tables_reused_across_calls(self, framingham_chd_patient):
        scorer = FraminghamCHDTable()
        assert set(scorer.points) == {(sex, metric) for sex in ("female", "male") for metric in ("tc", "ldl")}
        ldl_points = scorer.points[("male", "ldl")]["chol"]
        patient = dict(framingham_chd_patient, totchol=None)
        assert scorer.compute_batch(**patient, ldl=150, chol_metric="ldl")[0] == 22
        assert scorer.compute_batch(**framingham_chd_patient)[0] == 31
        assert scorer.points[("male", "ldl")]["chol"] is ldl_points

    def test_unknown_cholesterol_model(self, framingham_chd_patient):
        with pytest.raises(InvalidInput, match="chol_metric"):
            framingham_chd_table(**framingham_chd_patient, chol_metric="nonhdl")

    def test_bp_category_takes_higher_reading(self):
        np.testing.assert_array_equal(bp_category(np.array([118.0]), np.array([101.0])), [4])
        np.testing.assert_array_equal(bp_category(np.array([146.0]), np.array([88.0])), [3])
        np.testing.assert_array_equal(bp_category(np.array([np.nan]), np.array([88.0])), [2])
        assert np.isnan(bp_category(np.array([np.nan]), np.array([np.nan]))[0])

    def test_missing_age_is_an_error(self, framingham_chd_patient):
        with pytest.raises(InvalidInput, match="age"):
            framingham_chd(**dict(framingham_chd_patient, age=None))


class TestAscvdAccAha:
    """Tests for the pooled cohort equations."""

    def test_paper_example(self, primary_prevention_cohort, custom_assertions):
        cohort = primary_prevention_cohort
        risk = ascvd_acc_aha(
            ethnicity=["white", "aa", "white", "aa"],
            sex=["female", "female", "male", "male"],
            age=cohort["age"],
            totchol=cohort["totchol"],
            hdl=cohort["hdl"],
            sbp=cohort["sbp"],
            bp_med=cohort["bp_med"],
            smoker=cohort["smoker"],
            diabetic=cohort["diabetic"],
        )
        custom_assertions.assert_risks(risk, [2.05, 3.03, 5.38, 6.07])

    def test_white_male_within_range(self, custom_assertions):
        risk = ascvd_acc_aha(ethnicity="white", sex="male", age=55, totchol=213, hdl=50, sbp=120,
                             bp_med=0, smoker=0, diabetic=0)
        assert risk[0] == pytest.approx(5.38)
        custom_assertions.assert_within(risk, 1, 30)

    def test_upper_clamp(self):
        risk = ascvd_acc_aha(ethnicity="aa", sex="male", age=79, totchol=300, hdl=30, sbp=200,
                             bp_med=1, smoker=1, diabetic=1)
        assert risk[0] == 30.0

    def test_unknown_ethnicity(self):
        with pytest.raises(InvalidInput, match="ethnicity"):
            ascvd_acc_aha(ethnicity="asian", sex="male", age=55, totchol=213, hdl=50, sbp=120,
                          bp_med=0, smoker=0, diabetic=0)

    def test_invalid_row_fails_whole_batch(self):
        with pytest.raises(InvalidInput):
            ascvd_acc_aha(ethnicity=["white", "white"], sex=["male", "x"], age=55, totchol=213, hdl=50,
                          sbp=120, bp_med=0, smoker=0, diabetic=0)

    def test_missing_treatment_status_warns(self):
        with pytest.warns(MissingValueFallback):
            AscvdAccAha().compute_batch(ethnicity="white", sex="male", age=55, totchol=213, hdl=50, sbp=120,
                                        bp_med=None, smoker=0, diabetic=0)


class TestProcam:
    """Tests for PROCAM 2002 and 2007."""

    def test_2002_paper_example(self, procam_patients, custom_assertions):
        custom_assertions.assert_risks(procam_2002(**procam_patients), [1.1, 30])

    def test_2002_rounds_inputs(self):
        common = dict(ldl=150, hdl=40, triglycerides=120, smoker=1, diabetic=0, fam_mi=0, sbp=125)
        np.testing.assert_array_equal(procam_2002(age=[39.4, 39.6], **common), [2.4, 4.2])

    def test_2007_paper_example(self, procam_patients):
        labels = procam_2007(sex=["female", "male"], **procam_patients)
        assert list(labels) == ["0-4%", ">=30%"]

    def test_2007_points(self, procam_patients):
        result = procam_2007(sex=["female", "male"], **procam_patients, return_points=True)
        assert list(result.columns) == ["points", "risk"]
        assert list(result["points"]) == [20, 51]

    def test_2007_diabetes_points_by_sex(self):
        common = dict(age=50, ldl=130, hdl=45, triglycerides=120, smoker=0, diabetic=1, fam_mi=0, sbp=130,
                      return_points=True)
        women = procam_2007(sex="female", **common)
        men = procam_2007(sex="male", **common)
        assert women.loc[0, "points"] - men.loc[0, "points"] == 2

    def test_2007_age_outside_table(self):
        scorer = Procam2007()
        assert scorer.category_index("female", 18, 60) == 0
        assert scorer.category_index("male", 80, 30) == 4

    def test_2007_requires_sex(self, procam_patients):
        with pytest.raises(InvalidInput, match="sex"):
            procam_2007(sex=[None, "male"], **procam_patients)
