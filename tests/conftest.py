"""pytest configuration for keyescape tests."""

import pytest


def pytest_addoption(parser):
    """Add options to include the slow bulk tests."""
    parser.addoption(
        "--run-expensive", action="store_true", default=False, help="run expensive tests"
    )
    parser.addoption(
        "--run-only-expensive", action="store_true", default=False, help="run only expensive tests"
    )


def pytest_configure(config):
    """Register the expensive marker used by bulk throughput tests."""
    config.addinivalue_line("markers", "expensive: mark test as expensive to run")


def pytest_collection_modifyitems(config, items):
    """Skip expensive tests unless requested, or everything else with --run-only-expensive."""
    if config.getoption("--run-only-expensive"):
        skip = pytest.mark.skip(reason="only running expensive tests")
        selected = [item for item in items if "expensive" not in item.keywords]
    elif not config.getoption("--run-expensive"):
        skip = pytest.mark.skip(reason="need --run-expensive option to run")
        selected = [item for item in items if "expensive" in item.keywords]
    else:
        return

    for item in selected:
        item.add_marker(skip)
