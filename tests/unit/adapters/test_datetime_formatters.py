"""Unit tests for the Babel-backed and pattern-backed datetime formatters."""

from datetime import datetime, timezone

import pytest
from babel import UnknownLocaleError

from webtoolbox.adapters import datetime_formatters
from webtoolbox.adapters.datetime_formatters import (
    LocaleDatetimeFormatter,
    PatternDatetimeFormatter,
    parse_locale,
    unquote_literals,
)
from webtoolbox.domain.errors import FormatError
from webtoolbox.interfaces.datetime_formatter import FormatKind

SUNDAY = datetime(2023, 1, 15, 10, 30, 0)


def assert_words_capitalized(text: str) -> None:
    """Assert no whitespace-separated word starts with a lower-case letter."""
    lowered = [word for word in text.split() if word[0].islower()]
    assert not lowered, f"lower-case words {lowered!r} in {text!r}"


# ============================================================================
#                           LocaleDatetimeFormatter
# ============================================================================


@pytest.mark.parametrize(
    "locale, expected",
    [
        ("en_US", "Sunday, January 15, 2023"),
        ("fr_FR", "Dimanche 15 Janvier 2023"),
        ("de_DE", "Sonntag, 15. Januar 2023"),
    ],
)
def test_locale_full_date(locale, expected):
    """DATE renders the CLDR full date with every word capitalized."""
    formatter = LocaleDatetimeFormatter(locale)
    assert formatter.format(SUNDAY, FormatKind.DATE) == expected


def test_locale_medium_time_en_us():
    """TIME renders the CLDR medium time."""
    text = LocaleDatetimeFormatter("en_US").format(SUNDAY, FormatKind.TIME)
    assert text.startswith("10:30:00")
    assert text.endswith("AM")


@pytest.mark.parametrize("locale", ["fr_FR", "de_DE"])
def test_locale_medium_time_24h(locale):
    """24-hour locales render HH:mm:ss."""
    assert LocaleDatetimeFormatter(locale).format(SUNDAY, FormatKind.TIME) == "10:30:00"


@pytest.mark.parametrize(
    "locale, date_part",
    [
        ("en_US", "Sunday, January 15, 2023"),
        ("fr_FR", "Dimanche 15 Janvier 2023"),
    ],
)
def test_locale_datetime_combines_date_and_time(locale, date_part):
    """DATETIME joins full date and medium time with the locale's glue."""
    text = LocaleDatetimeFormatter(locale).format(SUNDAY, FormatKind.DATETIME)
    assert date_part in text
    assert "10:30:00" in text
    assert "{0}" not in text
    assert "{1}" not in text
    assert "'" not in text
    assert_words_capitalized(text)


@pytest.mark.parametrize(
    "pattern, expected",
    [
        ("{1} 'at' {0}", "{1} at {0}"),
        ("{1} 'o''clock' {0}", "{1} o'clock {0}"),
        ("{1} '' {0}", "{1} ' {0}"),
        ("''", "'"),
        ("{1}, {0}", "{1}, {0}"),
    ],
)
def test_unquote_literals(pattern, expected):
    """Quoted text loses its quotes; doubled quotes become an apostrophe."""
    assert unquote_literals(pattern) == expected


def test_locale_datetime_keeps_escaped_apostrophe(monkeypatch):
    """A doubled quote in the locale's glue renders as an apostrophe."""
    monkeypatch.setattr(
        datetime_formatters,
        "get_datetime_format",
        lambda *args, **kwargs: "{1} 'at' {0} o''clock",
    )
    text = LocaleDatetimeFormatter("fr_FR").format(SUNDAY, FormatKind.DATETIME)
    assert text == "Dimanche 15 Janvier 2023 At 10:30:00 O'clock"


def test_locale_default_kind_is_datetime():
    """Omitting the kind renders date and time."""
    formatter = LocaleDatetimeFormatter("en_US")
    assert formatter.format(SUNDAY) == formatter.format(SUNDAY, FormatKind.DATETIME)


def test_locale_keeps_wall_clock_of_aware_values():
    """Aware values render in their own offset, not converted."""
    aware = SUNDAY.replace(tzinfo=timezone.utc)
    text = LocaleDatetimeFormatter("fr_FR").format(aware, FormatKind.TIME)
    assert text == "10:30:00"


def test_locale_accepts_bcp47_identifier():
    """Hyphenated identifiers are normalized."""
    assert str(LocaleDatetimeFormatter("en-US").locale) == "en_US"
    assert str(parse_locale("pt-BR")) == "pt_BR"


def test_locale_unknown_raises():
    """Locales without CLDR data are rejected at construction."""
    with pytest.raises(UnknownLocaleError):
        LocaleDatetimeFormatter("zz_ZZ")


def test_locale_name():
    """The formatter identifies itself as 'locale'."""
    assert LocaleDatetimeFormatter("en_US").name == "locale"


# ============================================================================
#                           PatternDatetimeFormatter
# ============================================================================


@pytest.mark.parametrize(
    "kind, expected",
    [
        (FormatKind.DATE, "15/01/2023"),
        (FormatKind.TIME, "10h30"),
        (FormatKind.DATETIME, "15/01/2023 10h30"),
    ],
)
def test_pattern_formatter_kinds(kind, expected):
    """Date, time, or both joined by a space."""
    formatter = PatternDatetimeFormatter("%d/%m/%Y", "%Hh%M")
    assert formatter.format(SUNDAY, kind) == expected


def test_pattern_for():
    """pattern_for exposes the resolved strftime pattern."""
    formatter = PatternDatetimeFormatter("%Y-%m-%d", "%H:%M")
    assert formatter.pattern_for(FormatKind.DATE) == "%Y-%m-%d"
    assert formatter.pattern_for(FormatKind.TIME) == "%H:%M"
    assert formatter.pattern_for(FormatKind.DATETIME) == "%Y-%m-%d %H:%M"


def test_pattern_formatter_does_not_capitalize():
    """The fallback renders strftime output verbatim."""
    formatter = PatternDatetimeFormatter("%A", "%p")
    assert formatter.format(SUNDAY, FormatKind.DATE) == "Sunday"
    assert formatter.format(SUNDAY.replace(hour=22), FormatKind.TIME) == "PM"


@pytest.mark.parametrize(
    "date_format, time_format, kind",
    [
        ("", "%H:%M", FormatKind.DATE),
        ("%Y-%m-%d", "%Q", FormatKind.TIME),
        ("%Y-%m-%d", "%Q", FormatKind.DATETIME),
    ],
)
def test_pattern_formatter_invalid_patterns(date_format, time_format, kind):
    """Empty or invalid configured patterns raise FormatError."""
    formatter = PatternDatetimeFormatter(date_format, time_format)
    with pytest.raises(FormatError):
        formatter.format(SUNDAY, kind)


def test_pattern_name():
    """The formatter identifies itself as 'pattern'."""
    assert PatternDatetimeFormatter("%Y", "%H").name == "pattern"
