"""Interface for default datetime formatting.

When a caller does not pass an explicit pattern, the toolbox hands the parsed
datetime to a `DatetimeFormatter`. Two kinds of provider exist: one that
renders locale-aware text and one that falls back to configured strftime
patterns. The provider is chosen once, at startup.
"""

import abc
from datetime import datetime

from webtoolbox.domain.value_objects import FormatKind

# pylint: disable=too-few-public-methods

__all__ = ["DatetimeFormatter", "FormatKind"]


class DatetimeFormatter(abc.ABC):
    """Contract for rendering a datetime without an explicit pattern."""

    @abc.abstractmethod
    def format(self, value: datetime, kind: FormatKind = FormatKind.DATETIME) -> str:
        """Render `value`.

        Args:
            value: The datetime to render.
            kind: Whether to render the date, the time, or both.

        Returns:
            The rendered text.

        Raises:
            FormatError: If the provider's resolved pattern is invalid.
        """

    @property
    @abc.abstractmethod
    def name(self) -> str:
        """Short identifier used in logs (e.g. ``"locale"``, ``"pattern"``)."""
