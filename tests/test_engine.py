"""Tests for the shared scoring engine: binning, lookup, units, formulas and
input validation."""
import warnings

import numpy as np
import pytest

from cvrisk.engine.binning import MISSING, Bins, PointTable, flag_points
from cvrisk.engine.formula import (
    CoefficientSet,
    finalise,
    linear_predictor,
    recalibrate,
    select_by_group,
    survival_risk,
)
from cvrisk.engine.lookup import RiskChart, RiskTable
from cvrisk.engine.units import MGDL_TO_MMOL, to_mgdl, to_mmol
from cvrisk.engine.validation import (
    binary,
    category,
    numeric,
    sex_field,
    validate_choice,
    validate_flag,
    validate_inputs,
)
from cvrisk.exceptions import InvalidInput, LookupMiss, MissingValueFallback, OutOfRangeWarning
from cvrisk.scoring.esc_score import SCORE_2016_CHOL_BINS
from cvrisk.scoring.score2 import SCORE2_NONHDL_BINS, Score2OPTable


class TestBins:
    """Tests for band indexing."""

    def test_left_closed_edges(self):
        bins = Bins((120, 140, 160))
        assert list(bins.index([119.9, 120, 139, 140, 160, 250])) == [0, 1, 1, 2, 3, 3]

    def test_right_closed_edges(self):
        bins = Bins((130, 150, 170), closed="right")
        assert list(bins.index([130, 130.1, 170, 170.5])) == [0, 1, 2, 3]

    def test_missing_maps_to_sentinel(self):
        bins = Bins((1, 2))
        assert list(bins.index([np.nan, 1.5])) == [MISSING, 1]

    def test_every_value_lands_in_a_band(self):
        bins = Bins((45, 52.5, 57.5, 62.5))
        values = np.random.default_rng(0).uniform(-1000, 1000, 500)
        idx = bins.index(values)
        assert idx.min() >= 0
        assert idx.max() <= bins.n_bins - 1

    def test_unsorted_edges_rejected(self):
        with pytest.raises(LookupMiss):
            Bins((5, 4, 6))

    def test_invalid_side_rejected(self):
        with pytest.raises(ValueError):
            Bins((1, 2), closed="both")


class TestPoints:
    """Tests for point tables and indicator points."""

    def test_point_table(self):
        table = PointTable(Bins((65, 75)), (0, 2, 3))
        np.testing.assert_array_equal(table([50, 65, 74.9, 75, np.nan]), [0, 2, 2, 3, 0])

    def test_length_mismatch(self):
        with pytest.raises(LookupMiss):
            PointTable(Bins((65, 75)), (0, 2))

    def test_flag_points(self):
        np.testing.assert_array_equal(flag_points([1, 0, np.nan], 4), [4, 0, 0])


class TestLookup:
    """Tests for clamp-then-lookup tables."""

    def test_risk_table_clamps(self):
        table = RiskTable(0, (3.5, 6.8, 9.9))
        np.testing.assert_array_equal(table.lookup([-2, 0, 1, 2, 10]), [3.5, 3.5, 6.8, 9.9, 9.9])

    def test_risk_table_offset(self):
        table = RiskTable(-2, (1, 2, 3, 4))
        assert table.last_point == 1
        np.testing.assert_array_equal(table.lookup([-2, 1]), [1, 4])

    def test_risk_table_missing_total(self):
        with pytest.raises(LookupMiss):
            RiskTable(0, (1, 2)).lookup([np.nan])

    def test_empty_risk_table(self):
        with pytest.raises(LookupMiss):
            RiskTable(0, ())

    def test_chart_cell(self):
        grid = np.arange(32).reshape(4, 8)
        chart = RiskChart(grid, Bins((50,)), Bins((140,)), Bins((5,)))
        # old, low SBP, high cholesterol, male non-smoker
        row, col = chart.cell(male=[True], smoker=[False], age=[60], sbp=[120], chol=[6])
        assert (row[0], col[0]) == (1, 5)
        assert chart.lookup([True], [False], [60], [120], [6])[0] == 13

    def test_chart_clamps_extreme_values(self):
        grid = np.arange(32).reshape(4, 8)
        chart = RiskChart(grid, Bins((50,)), Bins((140,)), Bins((5,)))
        assert chart.lookup([False], [True], [120], [300], [15])[0] == chart.lookup([False], [True], [51], [141], [5])[0]

    def test_chart_shape_mismatch(self):
        with pytest.raises(LookupMiss):
            RiskChart(np.zeros((3, 8)), Bins((50,)), Bins((140,)), Bins((5,)))

    def test_chart_missing_key(self):
        chart = RiskChart(np.zeros((4, 8)), Bins((50,)), Bins((140,)), Bins((5,)))
        with pytest.raises(LookupMiss):
            chart.lookup([True], [False], [np.nan], [120], [6])


class TestUnits:
    """Tests for cholesterol unit conversion."""

    def test_to_mmol(self):
        assert to_mmol(100, mmol=False) == pytest.approx(100 * MGDL_TO_MMOL)
        assert to_mmol(5.0, mmol=True) == 5.0

    def test_to_mgdl(self):
        assert to_mgdl(5.18, mmol=True) == pytest.approx(200, abs=0.01)
        assert to_mgdl(200, mmol=False) == 200

    def test_rounds_to_laboratory_precision(self):
        assert to_mmol([193], mmol=False)[0] == 5.0
        assert to_mmol([232, 39], mmol=False).tolist() == [6.01, 1.01]

    @pytest.mark.parametrize("bins", [SCORE_2016_CHOL_BINS, SCORE2_NONHDL_BINS, Score2OPTable.charts["low"].chol_bins])
    def test_same_band_in_both_units(self, bins):
        mgdl = bins.index(to_mmol([193], mmol=False))
        mmol = bins.index(to_mmol([5.0], mmol=True))
        assert mgdl[0] == mmol[0]


class TestFormula:
    """Tests for the survival model helpers."""

    def test_linear_predictor_ignores_missing(self):
        coefs = CoefficientSet({"a": 2.0, "b": 3.0}, baseline_survival=0.9)
        lp = linear_predictor(coefs, {"a": np.array([1.0, np.nan]), "b": np.array([1.0, 1.0])})
        np.testing.assert_array_almost_equal(lp, [5.0, 3.0])

    def test_unknown_term_has_no_weight(self):
        coefs = CoefficientSet({"a": 2.0}, baseline_survival=0.9)
        assert coefs["age_squared"] == 0.0

    def test_survival_risk(self):
        assert survival_risk(0.0, 0.9)[()] == pytest.approx(0.1)
        assert survival_risk(1.5, 0.9, mean=1.5)[()] == pytest.approx(0.1)

    def test_identity_recalibration(self):
        risk = np.array([0.01, 0.2, 0.5])
        np.testing.assert_array_almost_equal(recalibrate(risk, 0.0, 1.0), risk)

    def test_finalise_rounds_and_clamps(self):
        np.testing.assert_array_equal(finalise([0.001234, 0.123456, 0.5], clamp=(1, 30)), [1.0, 12.35, 30.0])

    def test_select_by_group(self):
        groups = np.array(["male", "female", "male"], dtype=object)
        picked = select_by_group(groups, {"male": np.array([1, 2, 3]), "female": np.array([10, 20, 30])})
        np.testing.assert_array_equal(picked, [1, 20, 3])


class TestValidation:
    """Tests for schema-driven input validation."""

    schema = (
        sex_field(),
        numeric("age", valid_range=(40, 69)),
        numeric("hdl", required=False),
        binary("smoker"),
    )

    def test_broadcasts_scalars(self):
        data = validate_inputs(self.schema, dict(sex="m", age=[50, 60], hdl=1.2, smoker=0), "test")
        assert list(data["sex"]) == ["male", "male"]
        assert data["age"].dtype == float
        assert len(data["hdl"]) == 2

    def test_normalises_labels(self):
        data = validate_inputs(self.schema, dict(sex=" Female ", age=50, hdl=1.2, smoker=1), "test")
        assert data["sex"][0] == "female"

    def test_invalid_category(self):
        with pytest.raises(InvalidInput, match="sex"):
            validate_inputs(self.schema, dict(sex=["male", "other"], age=50, hdl=1.2, smoker=0), "test")

    def test_invalid_binary(self):
        with pytest.raises(InvalidInput, match="smoker"):
            validate_inputs(self.schema, dict(sex="male", age=50, hdl=1.2, smoker=2), "test")

    def test_string_in_numeric_field(self):
        with pytest.raises(InvalidInput, match="age"):
            validate_inputs(self.schema, dict(sex="male", age="fifty", hdl=1.2, smoker=0), "test")

    def test_required_missing(self):
        with pytest.raises(InvalidInput, match="required"):
            validate_inputs(self.schema, dict(sex="male", age=[50, None], hdl=1.2, smoker=0), "test")

    def test_length_mismatch(self):
        with pytest.raises(InvalidInput, match="different lengths"):
            validate_inputs(self.schema, dict(sex="male", age=[50, 60], hdl=[1.2, 1.3, 1.4], smoker=0), "test")

    def test_out_of_range_warns(self):
        with pytest.warns(OutOfRangeWarning):
            validate_inputs(self.schema, dict(sex="male", age=[35, 50], hdl=1.2, smoker=0), "test")

    def test_optional_missing_warns(self):
        with pytest.warns(MissingValueFallback):
            data = validate_inputs(self.schema, dict(sex="male", age=50, hdl=None, smoker=0), "test")
        assert np.isnan(data["hdl"][0])

    def test_warnings_can_be_disabled(self, scoring_config):
        scoring_config.warn_missing = False
        scoring_config.warn_out_of_range = False
        with warnings.catch_warnings():
            warnings.simplefilter("error")
            validate_inputs(self.schema, dict(sex="male", age=35, hdl=None, smoker=0), "test")

    def test_category_aliases(self):
        schema = (category("ethnicity", ("white", "aa"), aliases={"african_american": "aa"}),)
        data = validate_inputs(schema, dict(ethnicity=["African American", "white"]), "test")
        assert list(data["ethnicity"]) == ["aa", "white"]

    def test_validate_choice(self):
        assert validate_choice("risk", "Very High", ("low", "very_high"), "test") == "very_high"
        with pytest.raises(InvalidInput):
            validate_choice("risk", "extreme", ("low", "very_high"), "test")
        with pytest.raises(InvalidInput):
            validate_choice("risk", None, ("low",), "test")

    def test_validate_flag(self):
        assert validate_flag("mmol", True, "test") is True
        with pytest.raises(InvalidInput):
            validate_flag("mmol", "yes", "test")
