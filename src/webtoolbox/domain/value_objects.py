"""Value objects used across the domain layer.

The SQL-fragment whitelists live here as enums plus frozensets of their
values. They are process-wide constants and never change at runtime.
"""

from __future__ import annotations

from enum import Enum


class ComparisonOperator(Enum):
    """Comparison operators accepted in a WHERE fragment."""

    GT = ">"
    LT = "<"
    NE_ANSI = "<>"
    EQ = "="
    GE = ">="
    LE = "<="
    NULL_SAFE_EQ = "<=>"
    NE = "!="
    IS = "IS"
    IS_NULL = "IS NULL"
    IS_NOT = "IS NOT"
    IS_NOT_NULL = "IS NOT NULL"
    LIKE = "LIKE"
    NOT_LIKE = "NOT LIKE"

    @classmethod
    def from_string(cls, value: object) -> ComparisonOperator | None:
        """Return the operator spelled exactly as `value`, or None.

        Matching is exact and case-sensitive: ``"is"`` is not ``IS``.
        """
        if not isinstance(value, str):
            return None
        return _OPERATORS_BY_VALUE.get(value)


class Connector(Enum):
    """Boolean connectors accepted between WHERE conditions."""

    AND = "AND"
    OR = "OR"

    @classmethod
    def from_string(cls, value: object) -> Connector | None:
        """Return the connector spelled exactly as `value`, or None."""
        if not isinstance(value, str):
            return None
        return _CONNECTORS_BY_VALUE.get(value)


_OPERATORS_BY_VALUE = {member.value: member for member in ComparisonOperator}
_CONNECTORS_BY_VALUE = {member.value: member for member in Connector}

OPERATOR_WHITELIST: frozenset[str] = frozenset(_OPERATORS_BY_VALUE)
CONNECTOR_WHITELIST: frozenset[str] = frozenset(_CONNECTORS_BY_VALUE)


class FormatKind(Enum):
    """Which part of a datetime a locale or default format should render."""

    DATETIME = "datetime"
    DATE = "date"
    TIME = "time"

    @classmethod
    def from_string(cls, value: str | FormatKind | None) -> FormatKind:
        """Map a kind name to a member; anything unrecognized is DATETIME."""
        if isinstance(value, FormatKind):
            return value
        for member in cls:
            if member.value == value:
                return member
        return cls.DATETIME
