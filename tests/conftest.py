"""
Pytest configuration and shared fixtures for bohrcalc tests.

This module provides:
- Scripted console input streams
- Sample configuration dictionaries and files
"""

import io
import json

import pytest
import yaml


@pytest.fixture
def console():
    """
    Factory fixture for scripted console streams.

    Returns a function taking input lines and returning ``(stream, out)``,
    where ``stream`` replays the lines and ``out`` collects printed text.
    """

    def _create(*lines):
        text = "".join(f"{line}\n" for line in lines)
        return io.StringIO(text), io.StringIO()

    return _create


@pytest.fixture
def sample_config_dict():
    """Create a sample configuration dictionary."""
    return {
        "calculator": {
            "rydberg_ev": 13.605693122994,
            "ev_to_joule": 1.602176634e-19,
            "significant_digits": 5,
        }
    }


@pytest.fixture
def temp_config_file(tmp_path, sample_config_dict):
    """Create a temporary YAML config file."""
    config_path = tmp_path / "bohrcalc.yaml"
    with open(config_path, "w") as f:
        yaml.dump(sample_config_dict, f)
    return config_path


@pytest.fixture
def temp_json_config_file(tmp_path, sample_config_dict):
    """Create a temporary JSON config file."""
    config_path = tmp_path / "bohrcalc.json"
    with open(config_path, "w") as f:
        json.dump(sample_config_dict, f)
    return config_path
