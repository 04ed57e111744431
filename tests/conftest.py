"""
Pytest configuration and shared fixtures for the amida test suite.
"""

import sys
import tempfile
from pathlib import Path

import pytest

# Ensure project root is on PYTHONPATH so 'amida' can be imported
PROJECT_ROOT = Path(__file__).resolve().parent.parent
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from amida.core.board import AmidaBoard, EvaluationMode  # noqa: E402
from amida.utils.config_loader import clear_config_cache  # noqa: E402

SAMPLE_LANES = 4
SAMPLE_HEIGHT = 6
SAMPLE_RUNGS = [
    (1, 1, 2),
    (2, 3, 4),
    (4, 3, 4),
    (5, 1, 2),
    (6, 3, 4),
    (3, 2, 3),
    (6, 3, 4),
]

SAMPLE_TEXT = "4 6 7\n" + "".join(f"{h} {a} {b}\n" for h, a, b in SAMPLE_RUNGS)


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


@pytest.fixture(autouse=True)
def _fresh_config_cache():
    clear_config_cache()
    yield
    clear_config_cache()


@pytest.fixture
def sample_rungs():
    """Rung triples of the Kattis sample, in input order."""
    return list(SAMPLE_RUNGS)


@pytest.fixture
def sample_text():
    """Newline-terminated puzzle text for the Kattis sample."""
    return SAMPLE_TEXT


@pytest.fixture(params=[EvaluationMode.EAGER, EvaluationMode.LAZY], ids=["eager", "lazy"])
def mode(request):
    """Run a test once per evaluation mode."""
    return request.param


@pytest.fixture
def sample_board(mode):
    """The 4-lane sample board at query index 0."""
    return AmidaBoard(SAMPLE_LANES, SAMPLE_HEIGHT, SAMPLE_RUNGS, mode=mode)


@pytest.fixture
def full_sample_board(sample_board):
    """The sample board with every rung revealed."""
    sample_board.seek(len(SAMPLE_RUNGS))
    return sample_board


@pytest.fixture
def valid_config_dict():
    """
    Fixture providing a complete valid configuration dictionary.
    """
    return {
        "board": {"evaluation": "lazy", "check_invariants": False},
        "logging": {"level": "debug", "format": "%(name)s %(message)s"},
        "server": {"host": "0.0.0.0", "port": 4000},
    }


def pytest_configure(config):
    """
    Hook for initial pytest configuration.

    Used to add custom markers and configuration.
    """
    config.addinivalue_line(
        "markers",
        "integration: marks tests as integration tests",
    )
    config.addinivalue_line("markers", "unit: marks tests as unit tests")
