"""Success criteria for Squash responses.

A criterion is either a class of HTTP status (``2xx`` and friends) or a
literal status code. Raw criteria from configuration are only resolved when
a batch is dispatched, so an unusable value never fails construction.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from enum import Enum
from typing import Any

from squash_uploader.exceptions import ConfigurationError


class StatusClass(str, Enum):
    """Structural classes of HTTP responses."""

    INFORMATIONAL = "1xx"
    SUCCESS = "2xx"
    REDIRECTION = "3xx"
    CLIENT_ERROR = "4xx"
    SERVER_ERROR = "5xx"

    @property
    def leading_digit(self) -> int:
        return int(self.value[0])


_STATUS_CLASS_NAMES: dict[str, StatusClass] = {
    **{status_class.value: status_class for status_class in StatusClass},
    **{status_class.name.lower(): status_class for status_class in StatusClass},
}


@dataclass(frozen=True)
class StatusClassMatcher:
    """Accepts every response whose status falls in ``status_class``."""

    status_class: StatusClass

    def matches(self, status_code: int) -> bool:
        return status_code // 100 == self.status_class.leading_digit


@dataclass(frozen=True)
class LiteralCodeMatcher:
    """Accepts responses with exactly ``code`` as their status."""

    code: int

    def matches(self, status_code: int) -> bool:
        return status_code == self.code


SuccessMatcher = StatusClassMatcher | LiteralCodeMatcher


def to_matcher(value: Any) -> SuccessMatcher:
    """Resolve one configured success criterion.

    Args:
        value: A matcher, a ``StatusClass``, a status class name such as
            ``"2xx"`` or ``"success"``, an integer status code or a numeric
            string

    Returns:
        The matcher the value describes

    Raises:
        ConfigurationError: If the value is none of the above

    Example:
        >>> to_matcher("201")
        LiteralCodeMatcher(code=201)
        >>> to_matcher("2xx")
        StatusClassMatcher(status_class=<StatusClass.SUCCESS: '2xx'>)
    """
    match value:
        case StatusClassMatcher() | LiteralCodeMatcher():
            return value
        case StatusClass():
            return StatusClassMatcher(value)
        case bool():
            pass
        case int():
            return LiteralCodeMatcher(value)
        case str() if value.strip().isdecimal():
            return LiteralCodeMatcher(int(value.strip()))
        case str() if value.strip().lower() in _STATUS_CLASS_NAMES:
            return StatusClassMatcher(_STATUS_CLASS_NAMES[value.strip().lower()])

    raise ConfigurationError(f"Unknown success criterion: {value!r}", value=value)


def resolve_matchers(criteria: Iterable[Any]) -> tuple[SuccessMatcher, ...]:
    """Resolve every criterion, failing on the first unusable one."""
    return tuple(to_matcher(value) for value in criteria)


def is_success(matchers: Iterable[SuccessMatcher], status_code: int) -> bool:
    """Return True if any matcher accepts ``status_code``."""
    return any(matcher.matches(status_code) for matcher in matchers)
