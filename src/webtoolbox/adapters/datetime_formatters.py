"""Datetime formatters used when no explicit pattern is given.

- `LocaleDatetimeFormatter` renders CLDR full dates and medium times through
  Babel for a configured locale, then capitalizes every word.
- `PatternDatetimeFormatter` renders the configured default strftime
  patterns; it is the fallback when locale formatting is unavailable.
"""

from __future__ import annotations

import re
from datetime import datetime

from babel import Locale
from babel.dates import format_date, format_time, get_datetime_format

from webtoolbox.domain.datetimes import capitalize_words, format_with_pattern
from webtoolbox.interfaces import datetime_formatter
from webtoolbox.interfaces.datetime_formatter import FormatKind

# pylint: disable=too-few-public-methods

DATE_STYLE = "full"
TIME_STYLE = "medium"
CLDR_LITERAL_PATTERN = re.compile(r"''|'((?:[^']|'')*)'")


def unquote_literals(pattern: str) -> str:
    """Resolve CLDR quoting in a pattern.

    ``'text'`` becomes ``text`` and ``''`` becomes a literal apostrophe, both
    on its own and inside quoted text.
    """

    def replace(match: re.Match[str]) -> str:
        quoted = match.group(1)
        return "'" if quoted is None else quoted.replace("''", "'")

    return CLDR_LITERAL_PATTERN.sub(replace, pattern)


def parse_locale(identifier: str) -> Locale:
    """Parse a POSIX or BCP 47 style locale id (``en_US``, ``en-US``, ``fr``).

    Raises:
        babel.UnknownLocaleError: If Babel has no data for the locale.
        ValueError: If the identifier is malformed.
    """
    return Locale.parse(identifier.replace("-", "_"))


class LocaleDatetimeFormatter(datetime_formatter.DatetimeFormatter):
    """Locale-aware formatter backed by Babel/CLDR data."""

    def __init__(self, locale: str) -> None:
        self._locale = parse_locale(locale)

    @property
    def name(self) -> str:
        return "locale"

    @property
    def locale(self) -> Locale:
        """The parsed Babel locale."""
        return self._locale

    def format(self, value: datetime, kind: FormatKind = FormatKind.DATETIME) -> str:
        match kind:
            case FormatKind.DATE:
                text = format_date(value, DATE_STYLE, locale=self._locale)
            case FormatKind.TIME:
                text = format_time(value, TIME_STYLE, locale=self._locale)
            case _:
                glue = get_datetime_format(DATE_STYLE, locale=self._locale)
                text = (
                    unquote_literals(glue)
                    .replace("{0}", format_time(value, TIME_STYLE, locale=self._locale))
                    .replace("{1}", format_date(value, DATE_STYLE, locale=self._locale))
                )
        return capitalize_words(text)


class PatternDatetimeFormatter(datetime_formatter.DatetimeFormatter):
    """Fallback formatter using configured strftime patterns."""

    def __init__(self, date_format: str, time_format: str) -> None:
        self._date_format = date_format
        self._time_format = time_format

    @property
    def name(self) -> str:
        return "pattern"

    def pattern_for(self, kind: FormatKind) -> str:
        """Return the strftime pattern used for `kind`."""
        match kind:
            case FormatKind.DATE:
                return self._date_format
            case FormatKind.TIME:
                return self._time_format
            case _:
                return f"{self._date_format} {self._time_format}"

    def format(self, value: datetime, kind: FormatKind = FormatKind.DATETIME) -> str:
        return format_with_pattern(value, self.pattern_for(kind))
