"""
Shared pytest fixtures and configuration for all tests.
"""

import pytest
import warnings
import numpy as np
import pandas as pd

from cvrisk.config import CONFIG


# Configure pytest to handle warnings properly
def pytest_configure(config):
    """Configure pytest with custom settings."""
    config.addinivalue_line("markers", "unit: fast tests of the shared engine")
    config.addinivalue_line("markers", "reference: published reference examples")
    config.addinivalue_line("markers", "integration: registry and DataFrame tests")

    # Suppress specific warnings
    warnings.filterwarnings('ignore', category=DeprecationWarning)
    warnings.filterwarnings('ignore', category=FutureWarning)
    warnings.filterwarnings('ignore', category=PendingDeprecationWarning)


# ============================================================================
# Patient fixtures
# ============================================================================

@pytest.fixture
def esc_patients():
    """Two patients with the inputs shared by the ESC chart scores."""
    return dict(
        sex=["male", "female"],
        age=[60, 50],
        totchol=[5.5, 5.5],
        sbp=[140, 140],
        smoker=[1, 0],
    )


@pytest.fixture
def reach_patient():
    """REACH paper example: secondary prevention patient from Eastern Europe."""
    return dict(
        sex="male",
        age=62,
        bmi=25,
        smoker=0,
        diabetic=1,
        vasc=1,
        cv_event=1,
        chf=1,
        af=0,
        statin=1,
        ass=1,
        region_ee_or_me=True,
    )


@pytest.fixture
def invest_patients():
    """Three patients from the INVEST paper."""
    return dict(
        age=[65, 69, 77],
        ethnicity=["white", "white", "nw"],
        bmi=[33, 25, 18],
        hr=[79, 85, 100],
        sbp=[120, 105, 144],
        mi=[1, 0, 1],
        chf=[0, 0, 1],
        stroke=[0, 1, 0],
        smoker=[1, 0, 0],
        diabetic=[0, 1, 1],
        pad=[0, 0, 0],
        ckd=[1, 0, 1],
    )


@pytest.fixture
def primary_prevention_cohort():
    """Small cohort with the columns used by the primary prevention scores."""
    return pd.DataFrame({
        'patient_id': [101, 102, 103, 104],
        'sex': ['male', 'female', 'male', 'female'],
        'ethnicity': ['white', 'white', 'aa', 'aa'],
        'age': [55, 55, 55, 55],
        'totchol': [213, 213, 213, 213],
        'hdl': [50, 50, 50, 50],
        'sbp': [120, 120, 120, 120],
        'bp_med': [0, 0, 0, 0],
        'smoker': [0, 0, 0, 0],
        'diabetic': [0, 0, 0, 0],
    })


# ============================================================================
# Configuration fixtures
# ============================================================================

@pytest.fixture
def scoring_config(monkeypatch):
    """Give a test its own copy of the global settings."""
    for field in ('default_region', 'round_digits', 'warn_out_of_range', 'warn_missing'):
        monkeypatch.setattr(CONFIG, field, getattr(CONFIG, field))
    return CONFIG


# ============================================================================
# Marks and parametrization helpers
# ============================================================================

def pytest_collection_modifyitems(config, items):
    """Add markers to tests based on their names."""
    for item in items:
        # Add integration marker to registry and DataFrame tests
        if 'registry' in item.nodeid or 'dataframe' in item.nodeid:
            item.add_marker(pytest.mark.integration)

        # Add unit marker to engine tests
        elif 'test_engine' in item.nodeid or 'test_config' in item.nodeid:
            item.add_marker(pytest.mark.unit)

        # Add reference marker to published examples
        if 'reference' in item.nodeid or 'paper' in item.nodeid:
            item.add_marker(pytest.mark.reference)


# ============================================================================
# Custom assertions
# ============================================================================

class CustomAssertions:
    """Custom assertion helpers for tests."""

    @staticmethod
    def assert_risks(actual, expected, decimals=2):
        """Assert a risk vector equals the expected values."""
        actual = np.asarray(actual, dtype=float)
        assert actual.shape == (len(expected),), f"Unexpected shape {actual.shape}"
        np.testing.assert_array_almost_equal(actual, expected, decimal=decimals)

    @staticmethod
    def assert_within(values, low, high):
        """Assert every value lies inside [low, high]."""
        values = np.asarray(values, dtype=float)
        assert np.all((values >= low) & (values <= high)), f"Values outside [{low}, {high}]: {values}"

    @staticmethod
    def assert_valid_result(result, score_name):
        """Assert a single-patient result dictionary is well formed."""
        assert result['score'] == score_name
        assert 'risk' in result
        assert not isinstance(result['risk'], np.generic)


@pytest.fixture
def custom_assertions():
    """Provide custom assertions helper."""
    return CustomAssertions()
