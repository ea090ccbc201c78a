"""Datetime parsing and pattern formatting.

Parsing is delegated to python-dateutil, with a handful of relative keywords
(``now``, ``today``, ``tomorrow``, ``yesterday``) resolved against the current
local time. Patterns use `strftime` syntax and are checked against the
directives Python documents before anything is rendered, so an unknown
directive raises `FormatError` instead of leaking platform behavior.
"""

from __future__ import annotations

import re
from collections.abc import Callable
from datetime import date, datetime, timedelta

from dateutil import parser as dateutil_parser

from .errors import FormatError, ParseError

STRFTIME_DIRECTIVES = frozenset("aAwdbBmyYHIpMSfzZjUWcxXGuV%")
DIRECTIVE_PATTERN = re.compile(r"%(:z|.?)", re.DOTALL)
WORD_START_PATTERN = re.compile(r"(^|\s)(\S)")

_RELATIVE_DAYS = {"today": 0, "tomorrow": 1, "yesterday": -1}


def parse_datetime(
    raw: str | datetime | date,
    now: Callable[[], datetime] = datetime.now,
) -> datetime:
    """Parse `raw` into a `datetime`.

    Args:
        raw: A datetime string (ISO 8601 and the many shapes dateutil
            understands), one of the keywords ``now``/``today``/``tomorrow``/
            ``yesterday``, or a `date`/`datetime` instance.
        now: Clock used for the relative keywords; override in tests.

    Returns:
        datetime: The parsed value. Offsets present in the input are kept;
        inputs without one stay naive.

    Raises:
        ParseError: If `raw` is not a recognizable datetime.
    """
    if isinstance(raw, datetime):
        return raw
    if isinstance(raw, date):
        return datetime(raw.year, raw.month, raw.day)
    if not isinstance(raw, str):
        raise ParseError(raw)

    keyword = raw.strip().lower()
    if keyword == "now":
        return now()
    if keyword in _RELATIVE_DAYS:
        midnight = now().replace(hour=0, minute=0, second=0, microsecond=0)
        return midnight + timedelta(days=_RELATIVE_DAYS[keyword])

    try:
        return dateutil_parser.parse(raw)
    except (ValueError, OverflowError) as e:
        raise ParseError(raw) from e


def check_pattern(pattern: str) -> None:
    """Raise `FormatError` unless `pattern` is a usable strftime pattern.

    A pattern is usable when it is a non-empty string whose every ``%`` starts
    a documented directive (``%:z`` included).
    """
    if not isinstance(pattern, str) or not pattern:
        raise FormatError(str(pattern), "pattern is empty")
    for match in DIRECTIVE_PATTERN.finditer(pattern):
        directive = match.group(1)
        if not directive:
            raise FormatError(pattern, "dangling '%' at end of pattern")
        if directive != ":z" and directive not in STRFTIME_DIRECTIVES:
            raise FormatError(pattern, f"unknown directive '%{directive}'")


def format_with_pattern(value: datetime, pattern: str) -> str:
    """Render `value` with a strftime `pattern`.

    Raises:
        FormatError: If the pattern is empty, malformed, or rejected by the
            platform's strftime.
    """
    check_pattern(pattern)
    try:
        return value.strftime(_pad_years(value, pattern))
    except ValueError as e:
        raise FormatError(pattern, str(e)) from e


def _pad_years(value: datetime, pattern: str) -> str:
    """Replace %Y and %G with four-digit years.

    Some platforms render years below 1000 unpadded (``23`` for year 23).
    """

    def replace(match: re.Match[str]) -> str:
        match match.group(1):
            case "Y":
                return f"{value.year:04d}"
            case "G":
                return f"{value.isocalendar().year:04d}"
            case _:
                return match.group(0)

    return DIRECTIVE_PATTERN.sub(replace, pattern)


def parse_with_pattern(raw: str, pattern: str) -> datetime:
    """Parse `raw` with the strptime `pattern`.

    Raises:
        FormatError: If the pattern is empty or malformed.
        ParseError: If `raw` does not match the pattern.
    """
    check_pattern(pattern)
    try:
        return datetime.strptime(raw, pattern)
    except (TypeError, ValueError) as e:
        raise ParseError(raw) from e


def capitalize_words(text: str) -> str:
    """Upper-case the first character of every whitespace-separated word.

    Unlike `str.title`, the rest of each word is left untouched.
    """
    return WORD_START_PATTERN.sub(lambda m: m.group(1) + m.group(2).upper(), text)
