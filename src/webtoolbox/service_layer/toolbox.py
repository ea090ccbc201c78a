"""The toolbox facade used by controllers and templates.

A `Toolbox` is bound once to an `AppConfig`, a `DatetimeFormatter` and an
`EntropySource`; after that every call is independent. The instance keeps no
mutable state, so a single toolbox can be shared across threads.
"""

from __future__ import annotations

import logging
from datetime import date, datetime

from webtoolbox.config import AppConfig
from webtoolbox.domain import datetimes, sanitizers, tokens, validators
from webtoolbox.domain.errors import (
    InvalidConfigurationError,
    ParseError,
    ToolboxError,
)
from webtoolbox.interfaces.datetime_formatter import DatetimeFormatter, FormatKind
from webtoolbox.interfaces.entropy import EntropySource

logger = logging.getLogger(__name__)

SALT_BYTES = 32


class Toolbox:
    """Sanitizers, validators, datetime formatting and HMAC tokens."""

    def __init__(
        self,
        config: AppConfig,
        formatter: DatetimeFormatter,
        entropy: EntropySource,
    ) -> None:
        self._config = config
        self._formatter = formatter
        self._entropy = entropy

    @property
    def config(self) -> AppConfig:
        """The configuration this toolbox is bound to."""
        return self._config

    @property
    def formatter(self) -> DatetimeFormatter:
        """The formatter used when no explicit pattern is given."""
        return self._formatter

    # --- Sanitizers ---

    @staticmethod
    def esc_html(value: object) -> str:
        """Escape HTML special characters."""
        return sanitizers.esc_html(value)

    @staticmethod
    def sanitize_string(value: object) -> str:
        """Strip tags, drop NUL bytes and encode quotes."""
        return sanitizers.sanitize_string(value)

    @staticmethod
    def sanitize_key(value: object) -> str:
        """Reduce `value` to a lower-case SQL key (``[a-z0-9_*-]``)."""
        return sanitizers.sanitize_key(value)

    @staticmethod
    def sanitize_operator(value: object) -> str:
        """Return a whitelisted comparison operator or ``""``."""
        return sanitizers.sanitize_operator(value)

    @staticmethod
    def sanitize_condition(value: object) -> str:
        """Return ``AND``/``OR`` or ``""``."""
        return sanitizers.sanitize_condition(value)

    @staticmethod
    def sanitize_int(value: object) -> int:
        """Truncate `value` to an int (non-numeric input gives 0)."""
        return sanitizers.sanitize_int(value)

    @staticmethod
    def sanitize_email(value: object) -> str:
        """Remove characters illegal in email addresses."""
        return sanitizers.sanitize_email(value)

    @staticmethod
    def sanitize_url(value: object) -> str:
        """Remove characters illegal in URLs."""
        return sanitizers.sanitize_url(value)

    # --- Validators ---

    @staticmethod
    def validate_string(value: object) -> bool:
        """Return True if `value` is already a sanitized string."""
        return validators.validate_string(value)

    @staticmethod
    def validate_key(value: object) -> bool:
        """Return True if `value` is already a sanitized key."""
        return validators.validate_key(value)

    @staticmethod
    def validate_int(value: object) -> bool:
        """Return True if `value` is an int."""
        return validators.validate_int(value)

    @staticmethod
    def validate_email(value: object) -> bool:
        """Return True if `value` is a structurally valid email address."""
        return validators.validate_email(value)

    @staticmethod
    def validate_url(value: object) -> bool:
        """Return True if `value` is a structurally valid absolute URL."""
        return validators.validate_url(value)

    def validate_datetime(self, value: object, format: str) -> bool:  # pylint: disable=redefined-builtin
        """Return True if reformatting `value` with `format` reproduces it exactly.

        `value` is read with `format` itself first, so day-first patterns such
        as ``%d/%m/%Y`` are not misread; text `format` cannot read is parsed
        like any other `format_datetime` input. This is a byte-for-byte
        comparison: a valid datetime written with different spacing or casing
        than `format` renders is rejected.
        """
        if not isinstance(value, str):
            return False
        try:
            parsed = datetimes.parse_with_pattern(value, format)
        except ParseError:
            parsed = None
        except ToolboxError:
            return False
        try:
            if parsed is None:
                return self.format_datetime(value, format=format) == value
            return datetimes.format_with_pattern(parsed, format) == value
        except ToolboxError:
            return False

    # --- Datetime formatting ---

    def format_datetime(
        self,
        raw: str | datetime | date,
        format: str | None = None,  # pylint: disable=redefined-builtin
        kind: str | FormatKind = FormatKind.DATETIME,
    ) -> str:
        """Parse `raw` and render it.

        Args:
            raw: Datetime string (or `date`/`datetime`) to render.
            format: strftime pattern. When given, it is used as-is and no
                locale logic applies.
            kind: ``"datetime"`` (default), ``"date"`` or ``"time"``; only used
                without an explicit `format`. Unknown kinds render as
                ``"datetime"``.

        Returns:
            str: The rendered datetime.

        Raises:
            ParseError: If `raw` is not a recognizable datetime.
            FormatError: If the explicit or resolved default pattern is invalid.
        """
        value = datetimes.parse_datetime(raw)
        if format is not None:
            return datetimes.format_with_pattern(value, format)
        return self._formatter.format(value, FormatKind.from_string(kind))

    # --- Tokens ---

    def generate_token(
        self,
        salt: str | None = None,
        key: str | None = None,
        algorithm: str = tokens.DEFAULT_ALGORITHM,
    ) -> str:
        """Return ``HMAC(key, salt)`` under `algorithm`, hex-encoded.

        Args:
            salt: Message to sign. When empty, 32 random bytes are drawn and
                hex-encoded.
            key: HMAC key. When empty, the configured secret is used.
            algorithm: hashlib digest name (default ``sha256``).

        Raises:
            InvalidConfigurationError: If no key is given and the configured
                secret is empty.
            RandomnessUnavailableError: If a salt is needed and the entropy
                source fails.
            UnsupportedAlgorithmError: If `algorithm` is not a supported digest.
        """
        tokens.resolve_algorithm(algorithm)
        if not key:
            key = self._config.secret
            if not key:
                raise InvalidConfigurationError("secret")
        if not salt:
            salt = self._entropy.token_bytes(SALT_BYTES).hex()
            logger.debug("Generated a random %d-byte token salt", SALT_BYTES)
        return tokens.hmac_token(salt, key, algorithm)

    @staticmethod
    def check_token(known: object, candidate: object) -> bool:
        """Return True if `candidate` equals `known`, compared in constant time."""
        return tokens.tokens_match(known, candidate)
