"""
Pytest configuration and shared fixtures for Vault buildpack tests.
"""

import logging

import pytest

# Import test fixtures to make them available to all tests
# ruff: noqa: F401
from tests.fixtures.directories import buildpack_dirs, configured_dirs
from tests.fixtures.releases import vault_release


def pytest_addoption(parser):
    """Add custom command line options."""
    parser.addoption(
        "--integration",
        action="store_true",
        default=False,
        help="run integration tests that require network access",
    )


def pytest_collection_modifyitems(config, items):
    """Skip integration tests unless --integration flag is provided."""
    if not config.getoption("--integration"):
        skip_integration = pytest.mark.skip(reason="need --integration option to run")
        for item in items:
            if "integration" in item.keywords:
                item.add_marker(skip_integration)


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers",
        "integration: marks tests as integration tests (requires --integration)",
    )


@pytest.fixture(autouse=True)
def reset_logging():
    """Undo logging.basicConfig(force=True) calls made by the CLI."""
    yield
    root = logging.getLogger()
    for handler in list(root.handlers):
        root.removeHandler(handler)
    root.setLevel(logging.WARNING)
