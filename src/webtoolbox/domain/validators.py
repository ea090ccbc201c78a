"""Validators: pure predicates that never raise.

`validate_string`, `validate_key` and `validate_int` define "valid" as
"already in sanitized form": the value survives its sanitizer unchanged.
Email and URL validation are structural checks independent of the
sanitizers.
"""

from __future__ import annotations

import ipaddress
import re
from urllib.parse import urlsplit

from email_validator import EmailNotValidError, validate_email as check_email

from .sanitizers import sanitize_int, sanitize_key, sanitize_string, sanitize_url

SCHEME_PATTERN = re.compile(r"[A-Za-z][A-Za-z0-9+.\-]*")
HOSTNAME_LABEL_PATTERN = re.compile(
    r"(?!-)[A-Za-z0-9_-]{1,63}(?<!-)", re.ASCII
)
HOSTLESS_SCHEMES = frozenset({"mailto", "news", "file"})


def validate_string(value: object) -> bool:
    """Return True if `value` is a str that `sanitize_string` leaves unchanged."""
    return isinstance(value, str) and sanitize_string(value) == value


def validate_key(value: object) -> bool:
    """Return True if `value` is a str that `sanitize_key` leaves unchanged."""
    return isinstance(value, str) and sanitize_key(value) == value


def validate_int(value: object) -> bool:
    """Return True if `value` is an int (not a bool) equal to its sanitized form.

    Numeric strings such as ``"42"`` are not valid ints.
    """
    return (
        isinstance(value, int)
        and not isinstance(value, bool)
        and sanitize_int(value) == value
    )


def validate_email(value: object) -> bool:
    """Return True if `value` is a structurally valid ASCII email address.

    No DNS or deliverability lookups are made.
    """
    if not isinstance(value, str) or not value:
        return False
    try:
        check_email(value, check_deliverability=False, allow_smtputf8=False)
    except EmailNotValidError:
        return False
    return True


def _valid_host(host: str) -> bool:
    if host.startswith("[") and host.endswith("]"):
        try:
            ipaddress.IPv6Address(host[1:-1])
        except ValueError:
            return False
        return True
    if len(host) > 253:
        return False
    labels = host.removesuffix(".").split(".")
    return all(HOSTNAME_LABEL_PATTERN.fullmatch(label) for label in labels)


def validate_url(value: object) -> bool:
    """Return True if `value` is a structurally valid absolute URL.

    Requirements:
    - a non-empty str with no characters outside the URL set (see
      `sanitize_url`);
    - a scheme matching ``[A-Za-z][A-Za-z0-9+.-]*``;
    - a valid host (DNS name, IPv4 or bracketed IPv6) unless the scheme is
      ``mailto``, ``news`` or ``file``;
    - a numeric port in range when one is given.
    """
    if not isinstance(value, str) or not value or sanitize_url(value) != value:
        return False
    try:
        parts = urlsplit(value)
        port = parts.port  # raises ValueError when out of range or non-numeric
    except ValueError:
        return False
    if not parts.scheme or not SCHEME_PATTERN.fullmatch(parts.scheme):
        return False

    if parts.scheme.lower() in HOSTLESS_SCHEMES:
        return bool(parts.netloc or parts.path)

    host = parts.netloc.rpartition("@")[2]
    if port is not None or host.endswith(":"):
        host = host.rsplit(":", 1)[0]
    if not host:
        return False
    return _valid_host(host)
