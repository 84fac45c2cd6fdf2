"""
Pytest configuration and shared fixtures for the timing calculator test suite.
"""

import copy
import sys
import tempfile
from pathlib import Path

import pytest
import yaml

# Ensure project root is on PYTHONPATH so 'i2c_timing' can be imported
PROJECT_ROOT = Path(__file__).resolve().parent.parent
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))


@pytest.fixture
def temp_yaml_file():
    """
    Fixture that provides a temporary YAML file.

    Yields:
        Path: Path to the temporary YAML file
    """
    with tempfile.NamedTemporaryFile(
        mode="w",
        suffix=".yaml",
        delete=False,
    ) as f:
        temp_path = Path(f.name)

    yield temp_path

    # Cleanup
    if temp_path.exists():
        temp_path.unlink()


STANDARD_CFG = {
    "freq": 100000,
    "freq_min": 80000,
    "freq_max": 120000,
    "hddat_min": 0,
    "vddat_max": 3450,
    "sudat_min": 250,
    "lscl_min": 4700,
    "hscl_min": 4000,
    "trise": 640,
    "tfall": 20,
    "dnf": 0,
}

FAST_CFG = {
    "freq": 400000,
    "freq_min": 320000,
    "freq_max": 480000,
    "hddat_min": 0,
    "vddat_max": 900,
    "sudat_min": 100,
    "lscl_min": 1300,
    "hscl_min": 600,
    "trise": 250,
    "tfall": 100,
    "dnf": 0,
}

FAST_PLUS_CFG = {
    "freq": 1000000,
    "freq_min": 800000,
    "freq_max": 1200000,
    "hddat_min": 0,
    "vddat_max": 450,
    "sudat_min": 50,
    "lscl_min": 500,
    "hscl_min": 260,
    "trise": 60,
    "tfall": 100,
    "dnf": 0,
}


@pytest.fixture
def valid_speed_table_dict():
    """
    Fixture providing a complete speed table dictionary matching the bundled one.
    """
    return {
        "speed_modes": {
            "standard": copy.deepcopy(STANDARD_CFG),
            "fast": copy.deepcopy(FAST_CFG),
            "fast_plus": copy.deepcopy(FAST_PLUS_CFG),
        }
    }


@pytest.fixture
def temp_speed_table_yaml_file(temp_yaml_file, valid_speed_table_dict):
    """
    Fixture that creates a temporary YAML file with a valid speed table.

    Args:
        temp_yaml_file: Path object for temporary file
        valid_speed_table_dict: Valid speed table dictionary

    Yields:
        Path: Path to the temporary YAML file with valid configuration
    """
    with open(temp_yaml_file, "w", encoding="utf-8") as f:
        yaml.dump(valid_speed_table_dict, f)

    yield temp_yaml_file


def pytest_configure(config):
    """
    Hook for initial pytest configuration.

    Used to add custom markers and configuration.
    """
    config.addinivalue_line(
        "markers",
        "slow: marks tests as slow (deselect with '-m \"not slow\"')",
    )
    config.addinivalue_line(
        "markers",
        "integration: marks tests as integration tests",
    )
    config.addinivalue_line("markers", "unit: marks tests as unit tests")
