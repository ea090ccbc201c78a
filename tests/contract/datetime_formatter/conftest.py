"""Fixtures for DatetimeFormatter contract tests."""

from collections.abc import Iterable

import pytest

from webtoolbox.adapters.datetime_formatters import (
    LocaleDatetimeFormatter,
    PatternDatetimeFormatter,
)
from webtoolbox.interfaces.datetime_formatter import DatetimeFormatter


@pytest.fixture(params=["locale-en", "locale-fr", "pattern"])
def datetime_formatter(request: pytest.FixtureRequest) -> Iterable[DatetimeFormatter]:
    """Yield a formatter for the requested backend.

    Supported params:
      - `"locale-en"` → LocaleDatetimeFormatter("en_US")
      - `"locale-fr"` → LocaleDatetimeFormatter("fr_FR")
      - `"pattern"` → PatternDatetimeFormatter with the default patterns
    """
    match request.param:
        case "locale-en":
            yield LocaleDatetimeFormatter("en_US")
        case "locale-fr":
            yield LocaleDatetimeFormatter("fr_FR")
        case "pattern":
            yield PatternDatetimeFormatter("%Y-%m-%d", "%H:%M")
        case _:
            raise ValueError(f"unknown datetime formatter type: {request.param}")
