"""Fixtures for end-to-end CLI tests.

Every test runs in an isolated filesystem with a pinned ``WEBTOOLBOX_*``
environment so results do not depend on the developer's shell.
"""

import pytest
from click.testing import CliRunner

# pylint: disable=redefined-outer-name

BASE_ENV = {
    "WEBTOOLBOX_LOCALE": "en_US",
    "WEBTOOLBOX_DATE_FORMAT": "%Y-%m-%d",
    "WEBTOOLBOX_TIME_FORMAT": "%H:%M",
    "WEBTOOLBOX_SECRET": "cli-secret",
    "WEBTOOLBOX_LOCALE_FORMATTING": "0",
    "WEBTOOLBOX_FLIGHT_RECORDER": "0",
    "WEBTOOLBOX_LOGGER_LEVELS": "",
}


@pytest.fixture
def runner():
    """Return a Click CliRunner with the pinned environment."""
    return CliRunner(env=BASE_ENV)


@pytest.fixture
def fs(runner):
    """Run the test inside runner.isolated_filesystem()."""
    with runner.isolated_filesystem():
        yield
