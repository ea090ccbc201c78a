"""Configuration for webtoolbox.

The toolbox reads four application settings (locale, default date and time
patterns, and the token secret) plus a switch for locale-aware formatting.
`AppConfig` holds them as an immutable value; `load_config` builds one from
``WEBTOOLBOX_*`` environment variables. Values are not validated here: an
empty secret only becomes an error when a token is generated without a key.
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass

LOCALE_ENV = "WEBTOOLBOX_LOCALE"  # pragma: no mutate
DATE_FORMAT_ENV = "WEBTOOLBOX_DATE_FORMAT"  # pragma: no mutate
TIME_FORMAT_ENV = "WEBTOOLBOX_TIME_FORMAT"  # pragma: no mutate
SECRET_ENV = "WEBTOOLBOX_SECRET"  # pragma: no mutate
LOCALE_FORMATTING_ENV = "WEBTOOLBOX_LOCALE_FORMATTING"  # pragma: no mutate

DEFAULT_LOCALE = "en_US"
DEFAULT_DATE_FORMAT = "%Y-%m-%d"
DEFAULT_TIME_FORMAT = "%H:%M"

FALSY_VALUES = frozenset({"0", "false", "no", "off"})

# Accessor keys as used by the web application's settings store.
_APP_KEYS = {
    "locale": "locale",
    "defaultDateFormat": "default_date_format",
    "defaultTimeFormat": "default_time_format",
    "secret": "secret",
}


@dataclass(frozen=True)
class AppConfig:
    """Application settings consumed by the toolbox."""

    locale: str = DEFAULT_LOCALE
    default_date_format: str = DEFAULT_DATE_FORMAT
    default_time_format: str = DEFAULT_TIME_FORMAT
    secret: str = ""
    locale_formatting: bool = True

    def get_app(self, key: str) -> str:
        """Return an application setting by key.

        Accepts both the settings-store keys (``locale``, ``defaultDateFormat``,
        ``defaultTimeFormat``, ``secret``) and the attribute names.

        Raises:
            KeyError: If `key` is not a known setting.
        """
        attribute = _APP_KEYS.get(key, key)
        if attribute not in _APP_KEYS.values():
            raise KeyError(key)
        return getattr(self, attribute)

    def __repr__(self) -> str:
        return (
            f"AppConfig(locale={self.locale!r}, "
            f"default_date_format={self.default_date_format!r}, "
            f"default_time_format={self.default_time_format!r}, "
            f"secret={'***' if self.secret else ''!r}, "
            f"locale_formatting={self.locale_formatting!r})"
        )


def _flag(value: str | None, default: bool) -> bool:
    if value is None or not value.strip():
        return default
    return value.strip().lower() not in FALSY_VALUES


def load_config(environ: Mapping[str, str] | None = None) -> AppConfig:
    """Build an `AppConfig` from environment variables.

    Args:
        environ: Mapping to read instead of `os.environ` (useful in tests).

    Returns:
        AppConfig: Settings with defaults filled in for unset variables.
    """
    env = os.environ if environ is None else environ
    return AppConfig(
        locale=env.get(LOCALE_ENV) or DEFAULT_LOCALE,
        default_date_format=env.get(DATE_FORMAT_ENV) or DEFAULT_DATE_FORMAT,
        default_time_format=env.get(TIME_FORMAT_ENV) or DEFAULT_TIME_FORMAT,
        secret=env.get(SECRET_ENV, ""),
        locale_formatting=_flag(env.get(LOCALE_FORMATTING_ENV), default=True),
    )
