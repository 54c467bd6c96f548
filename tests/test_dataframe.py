"""Tests for scoring whole DataFrames."""
import numpy as np
import pandas as pd
import pytest

from cvrisk.exceptions import InvalidInput
from cvrisk.scoring.dataframe import compute_from_dataframe


class TestComputeFromDataframe:
    """Tests for compute_from_dataframe."""

    def test_adds_risk_column(self, primary_prevention_cohort, custom_assertions):
        result = compute_from_dataframe(primary_prevention_cohort, "ascvd_acc_aha")
        assert "ascvd_acc_aha_risk" in result.columns
        custom_assertions.assert_risks(result["ascvd_acc_aha_risk"], [5.38, 2.05, 6.07, 3.03])
        assert list(result["patient_id"]) == [101, 102, 103, 104]

    def test_input_not_modified(self, primary_prevention_cohort):
        original = primary_prevention_cohort.copy()
        compute_from_dataframe(primary_prevention_cohort, "ascvd_acc_aha")
        pd.testing.assert_frame_equal(primary_prevention_cohort, original)

    def test_column_mapping(self, primary_prevention_cohort):
        renamed = primary_prevention_cohort.rename(columns={"totchol": "chol_total", "sbp": "systolic"})
        result = compute_from_dataframe(renamed, "ascvd_acc_aha", columns={"totchol": "chol_total", "sbp": "systolic"})
        expected = compute_from_dataframe(primary_prevention_cohort, "ascvd_acc_aha")
        np.testing.assert_array_equal(result["ascvd_acc_aha_risk"], expected["ascvd_acc_aha_risk"])

    def test_output_column(self, primary_prevention_cohort):
        result = compute_from_dataframe(primary_prevention_cohort, "framingham_cvd", output_column="fram")
        assert "fram" in result.columns
        assert "framingham_cvd_risk" not in result.columns

    def test_options_pass_through(self, primary_prevention_cohort):
        mmol = primary_prevention_cohort.assign(totchol=213 * 0.0259, hdl=50 * 0.0259)
        result = compute_from_dataframe(mmol, "ascvd_acc_aha", mmol=True)
        expected = compute_from_dataframe(primary_prevention_cohort, "ascvd_acc_aha")
        np.testing.assert_array_almost_equal(result["ascvd_acc_aha_risk"], expected["ascvd_acc_aha_risk"], decimal=1)

    def test_two_column_result(self, primary_prevention_cohort):
        result = compute_from_dataframe(primary_prevention_cohort, "framingham_cvd_table", heart_age=True)
        assert "framingham_cvd_table_risk" in result.columns
        assert "framingham_cvd_table_heart_age" in result.columns

    def test_esc_chart_with_region(self):
        df = pd.DataFrame({
            "sex": ["male", "male"],
            "age": [60, 40],
            "totchol": [4.3, 6.1],
            "hdl": [0.9, 1.7],
            "sbp": [120, 180],
            "smoker": [0, 1],
        })
        result = compute_from_dataframe(df, "score2_table", risk="moderate")
        assert list(result["score2_table_risk"]) == [7, 9]

    def test_missing_required_column(self, primary_prevention_cohort):
        with pytest.raises(InvalidInput, match="age"):
            compute_from_dataframe(primary_prevention_cohort.drop(columns="age"), "ascvd_acc_aha")

    def test_unknown_score(self, primary_prevention_cohort):
        with pytest.raises(ValueError, match="Unknown score"):
            compute_from_dataframe(primary_prevention_cohort, "not_a_score")
