"""Best-effort sanitizers for untrusted input.

Every function here accepts any value and never raises; the worst case is an
empty string (or ``0`` for integers). All sanitizers except `esc_html` are
idempotent: ``sanitize_x(sanitize_x(v)) == sanitize_x(v)``.

String-shaped sanitizers coerce their input first: ``None`` becomes ``""``,
``True``/``False`` become ``"1"``/``""``, and other non-strings go through
``str()``.
"""

from __future__ import annotations

import math
import numbers
import re
from decimal import Decimal, InvalidOperation

from markupsafe import escape

from .value_objects import Connector, ComparisonOperator

KEY_DISALLOWED_PATTERN = re.compile(r"[^a-z0-9_*\-]")
EMAIL_DISALLOWED_PATTERN = re.compile(r"[^A-Za-z0-9!#$%&'*+\-=?^_`{|}~@.\[\]]")
URL_DISALLOWED_PATTERN = re.compile(r"[^A-Za-z0-9$\-_.+!*'(),{}|\\^~\[\]`<>#%\";/?:@&=]")

# A "<" followed by a non-whitespace character opens a tag that runs to the
# next ">" or to the end of the input.
TAG_PATTERN = re.compile(r"<(?=\S)[^>]*>?")

# Longest leading numeric prefix after ASCII whitespace.
NUMERIC_PREFIX_PATTERN = re.compile(
    r"[ \t\n\r\v\f]*([+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?)",
    re.ASCII,
)
INTEGER_PATTERN = re.compile(r"[+-]?\d+", re.ASCII)

_ASCII_LOWER = str.maketrans(
    "ABCDEFGHIJKLMNOPQRSTUVWXYZ", "abcdefghijklmnopqrstuvwxyz"
)


def _as_text(value: object) -> str:
    if value is None or value is False:
        return ""
    if value is True:
        return "1"
    if isinstance(value, str):
        return value
    if isinstance(value, (bytes, bytearray)):
        return bytes(value).decode("utf-8", errors="replace")
    return str(value)


def esc_html(value: object) -> str:
    """Escape ``& < > " '`` for safe embedding in HTML markup.

    Args:
        value: Text to escape. ``None`` yields an empty string.

    Returns:
        str: The escaped text (a plain ``str``, not ``Markup``).
    """
    return str(escape(_as_text(value)))


def sanitize_string(value: object) -> str:
    """Strip tags and encode quotes for generic string contexts.

    Rules, applied in order:
    1. NUL bytes are dropped.
    2. Tags are removed: a ``<`` followed by a non-whitespace character starts
       a tag that ends at the next ``>`` or at the end of the input. A ``<``
       followed by whitespace (``"a < b"``) is kept.
    3. ``"`` becomes ``&#34;`` and ``'`` becomes ``&#39;``.

    Ampersands are left alone so the result is stable under repetition.
    """
    text = _as_text(value).replace("\x00", "")
    text = TAG_PATTERN.sub("", text)
    return text.replace('"', "&#34;").replace("'", "&#39;")


def sanitize_key(value: object) -> str:
    """Lower-case (ASCII) and drop everything outside ``[a-z0-9_*-]``."""
    return KEY_DISALLOWED_PATTERN.sub("", _as_text(value).translate(_ASCII_LOWER))


def sanitize_operator(value: object) -> str:
    """Return `value` if it is a whitelisted comparison operator, else ``""``."""
    operator = ComparisonOperator.from_string(value)
    return operator.value if operator is not None else ""


def sanitize_condition(value: object) -> str:
    """Return `value` if it is ``AND`` or ``OR`` (exact case), else ``""``."""
    connector = Connector.from_string(value)
    return connector.value if connector is not None else ""


def _truncate_real(value: numbers.Real | Decimal) -> int:
    try:
        if isinstance(value, float) and not math.isfinite(value):
            return 0
        return math.trunc(value)
    except (ValueError, OverflowError, InvalidOperation):
        # NaN/inf Decimals
        return 0


def sanitize_int(value: object) -> int:
    """Coerce `value` to an int by truncation toward zero.

    - ints are returned unchanged, bools become 0/1 and None becomes 0;
    - floats, Decimals and Fractions are truncated; NaN and infinities give 0;
    - strings (and UTF-8 bytes) use their longest leading numeric prefix after
      ASCII whitespace, e.g. ``"42.9"`` -> 42, ``"12abc"`` -> 12,
      ``"1e3"`` -> 1000, ``"abc"`` -> 0;
    - anything else gives 0.
    """
    if isinstance(value, bool):
        return int(value)
    if isinstance(value, int):
        return value
    if isinstance(value, (numbers.Real, Decimal)):
        return _truncate_real(value)
    if isinstance(value, (bytes, bytearray)):
        value = bytes(value).decode("utf-8", errors="replace")
    if not isinstance(value, str):
        return 0

    if not (match := NUMERIC_PREFIX_PATTERN.match(value)):
        return 0
    number = match.group(1)
    if INTEGER_PATTERN.fullmatch(number):
        # int(str) is capped by sys.int_info.default_max_str_digits
        return int(Decimal(number))
    return _truncate_real(float(number))


def sanitize_email(value: object) -> str:
    """Remove characters that cannot appear in an email address.

    Keeps ASCII letters, digits and ``!#$%&'*+-=?^_`{|}~@.[]``. The result is
    not checked for structure; see `validate_email`.
    """
    return EMAIL_DISALLOWED_PATTERN.sub("", _as_text(value))


def sanitize_url(value: object) -> str:
    """Remove characters that cannot appear in a URL.

    Keeps ASCII letters, digits and ``$-_.+!*'(),{}|\\^~[]`<>#%";/?:@&=``.
    The result is not checked for structure; see `validate_url`.
    """
    return URL_DISALLOWED_PATTERN.sub("", _as_text(value))
