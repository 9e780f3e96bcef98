"""
Pytest configuration and shared fixtures for nn_infer tests.
"""

from pathlib import Path

import pytest

from nn_infer import registry as global_registry


def pytest_addoption(parser):
    """Add command line options for pytest."""
    parser.addoption(
        "--data-dir", action="store", default=None,
        help="Directory holding test-case files (default: tests/data)"
    )


@pytest.fixture(scope="session")
def data_dir(request) -> Path:
    """Directory with the *_demo.txt test-case files."""
    option = request.config.getoption("--data-dir")
    if option:
        return Path(option)
    return Path(__file__).parent / "data"


@pytest.fixture
def registry():
    return global_registry
