"""
Pytest configuration and shared fixtures for the blackbox test suite.
"""

import sys
import tempfile
from pathlib import Path

import pytest
import yaml

# Ensure project root is on PYTHONPATH so 'blackbox' can be imported
PROJECT_ROOT = Path(__file__).resolve().parent.parent
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from blackbox.core.board import Board, create_empty_board  # noqa: E402
from blackbox.utils.config_loader import clear_config_cache  # noqa: E402


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


BOARD_CFG = {"size": 8, "atoms": 4}

SIMULATION_CFG = {"step_limit_factor": 1}


@pytest.fixture
def valid_config_dict():
    """
    Fixture providing a complete valid configuration dictionary.
    """
    return {
        "board": dict(BOARD_CFG),
        "simulation": dict(SIMULATION_CFG),
    }


@pytest.fixture
def temp_config_yaml_file(temp_yaml_file, valid_config_dict):
    """
    Fixture that creates a temporary YAML file with valid configuration.

    Yields:
        Path: Path to the temporary YAML file with valid configuration
    """
    with open(temp_yaml_file, "w", encoding="utf-8") as f:
        yaml.dump(valid_config_dict, f)

    yield temp_yaml_file


@pytest.fixture
def empty_board():
    """Classic 8x8 board without atoms."""
    return create_empty_board()


@pytest.fixture
def sample_board():
    """8x8 board with a handful of atoms spread over the interior."""
    return Board.from_atoms([(2, 3), (5, 5), (7, 2), (3, 7)])


@pytest.fixture(autouse=True)
def _reset_config_cache():
    clear_config_cache()
    yield
    clear_config_cache()


def pytest_configure(config):
    """
    Hook for initial pytest configuration.

    Used to add custom markers and configuration.
    """
    config.addinivalue_line(
        "markers",
        "slow: marks tests as slow (deselect with '-m \"not slow\"')",
    )
    config.addinivalue_line("markers", "unit: marks tests as unit tests")
