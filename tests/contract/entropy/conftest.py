"""Fixtures for EntropySource contract tests."""

from collections.abc import Iterable

import pytest

from webtoolbox.adapters.entropy import FixedEntropySource, SystemEntropySource
from webtoolbox.interfaces.entropy import EntropySource


@pytest.fixture(params=["system", "fixed"])
def entropy_source(request: pytest.FixtureRequest) -> Iterable[EntropySource]:
    """Yield a fresh EntropySource for the requested backend."""
    match request.param:
        case "system":
            yield SystemEntropySource()
        case "fixed":
            yield FixedEntropySource(b"\x5a\xa5")
        case _:
            raise ValueError(f"unknown entropy source type: {request.param}")
