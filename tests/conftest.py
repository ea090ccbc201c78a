"""Global pytest fixtures and default marks for webtoolbox."""

from __future__ import annotations

from pathlib import Path

import pytest

from webtoolbox.adapters.datetime_formatters import (
    LocaleDatetimeFormatter,
    PatternDatetimeFormatter,
)
from webtoolbox.adapters.entropy import FixedEntropySource, SystemEntropySource
from webtoolbox.config import AppConfig
from webtoolbox.service_layer.toolbox import Toolbox

# pylint: disable=redefined-outer-name, unused-argument

TESTS_ROOT = Path(__file__).parent.resolve()

# Top-level test directory -> mark applied to every item collected under it.
DIRECTORY_MARKS = {
    "unit": "unit",
    "contract": "contract",
    "integration": "integration",
    "e2e": "e2e",
}


@pytest.hookimpl(tryfirst=True)
def pytest_collection_modifyitems(
    config: pytest.Config, items: list[pytest.Item]
) -> None:
    """Mark items by the top-level directory they live in."""
    for item in items:
        path = item.path.resolve()  # pytest>=8: pathlib.Path
        if TESTS_ROOT not in path.parents:
            continue
        top = path.relative_to(TESTS_ROOT).parts[0]
        if (mark := DIRECTORY_MARKS.get(top)) is None:
            continue
        if not any(marker.name == mark for marker in item.iter_markers()):
            item.add_marker(getattr(pytest.mark, mark))


@pytest.fixture
def app_config() -> AppConfig:
    """Settings with a known secret and the default patterns."""
    return AppConfig(
        locale="en_US",
        default_date_format="%Y-%m-%d",
        default_time_format="%H:%M",
        secret="test-secret",
    )


@pytest.fixture
def toolbox(app_config: AppConfig) -> Toolbox:
    """Toolbox using the pattern formatter and the system entropy source."""
    return Toolbox(
        app_config,
        formatter=PatternDatetimeFormatter(
            app_config.default_date_format, app_config.default_time_format
        ),
        entropy=SystemEntropySource(),
    )


@pytest.fixture
def locale_toolbox(app_config: AppConfig) -> Toolbox:
    """Toolbox using the Babel formatter for ``en_US``."""
    return Toolbox(
        app_config,
        formatter=LocaleDatetimeFormatter(app_config.locale),
        entropy=SystemEntropySource(),
    )


@pytest.fixture
def fixed_entropy() -> FixedEntropySource:
    """Entropy source returning ``0xab`` bytes."""
    return FixedEntropySource(b"\xab")
