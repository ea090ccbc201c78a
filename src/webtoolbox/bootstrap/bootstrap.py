"""Wire a `Toolbox` from configuration."""

from __future__ import annotations

import logging

from babel import UnknownLocaleError, localedata

from webtoolbox import config
from webtoolbox.adapters.datetime_formatters import (
    LocaleDatetimeFormatter,
    PatternDatetimeFormatter,
    parse_locale,
)
from webtoolbox.adapters.entropy import SystemEntropySource
from webtoolbox.interfaces.datetime_formatter import DatetimeFormatter
from webtoolbox.interfaces.entropy import EntropySource
from webtoolbox.service_layer.toolbox import Toolbox

logger = logging.getLogger(__name__)


def locale_formatting_available(locale: str) -> bool:
    """Return True if Babel has locale data for `locale`."""
    if not locale:
        return False
    try:
        parsed = parse_locale(locale)
    except (UnknownLocaleError, ValueError, TypeError):
        return False
    return localedata.exists(str(parsed))


def build_datetime_formatter(app_config: config.AppConfig) -> DatetimeFormatter:
    """Select the datetime formatter for `app_config`.

    Locale-aware formatting is used when it is enabled in the configuration
    and the configured locale is available; otherwise the configured default
    patterns are used.
    """
    if app_config.locale_formatting and locale_formatting_available(
        app_config.locale
    ):
        logger.debug("Using locale datetime formatter (%s)", app_config.locale)
        return LocaleDatetimeFormatter(app_config.locale)

    if app_config.locale_formatting:
        logger.warning(
            "Locale %r is not available; falling back to default date/time patterns",
            app_config.locale,
        )
    logger.debug(
        "Using pattern datetime formatter (%r, %r)",
        app_config.default_date_format,
        app_config.default_time_format,
    )
    return PatternDatetimeFormatter(
        app_config.default_date_format, app_config.default_time_format
    )


def build_toolbox(
    app_config: config.AppConfig,
    formatter: DatetimeFormatter | None = None,
    entropy: EntropySource | None = None,
) -> Toolbox:
    """Build a toolbox with injected dependencies.

    Args:
        app_config: Settings the toolbox is bound to.
        formatter: Override the formatter chosen by `build_datetime_formatter`.
        entropy: Override the system entropy source.
    """
    return Toolbox(
        app_config,
        formatter=formatter or build_datetime_formatter(app_config),
        entropy=entropy or SystemEntropySource(),
    )


def bootstrap() -> Toolbox:
    """Build a toolbox from ``WEBTOOLBOX_*`` environment variables."""
    return build_toolbox(config.load_config())
