"""
Pytest configuration shared by unit and integration tests.

Tests marked `extended` call the live Model Armor and DLP APIs and only run
with `--extended`.
"""

from typing import List

import pytest

_EXTENDED_FLAG = "extended"


def pytest_addoption(parser: pytest.Parser) -> None:
    parser.addoption(
        f"--{_EXTENDED_FLAG}",
        action="store_true",
        default=False,
        help="run tests against the live Model Armor API",
    )


def pytest_configure(config: pytest.Config) -> None:
    config.addinivalue_line(
        "markers", f"{_EXTENDED_FLAG}: test calls the live Model Armor API"
    )


def pytest_collection_modifyitems(
    config: pytest.Config, items: List[pytest.Item]
) -> None:
    """Skip `extended` tests unless `--extended` was given."""
    if config.getoption(f"--{_EXTENDED_FLAG}"):
        return
    skip = pytest.mark.skip(reason=f"need --{_EXTENDED_FLAG} option to run")
    for item in items:
        if _EXTENDED_FLAG in item.keywords:
            item.add_marker(skip)
