# error_normalizer/parsers/base.py
import re
from dataclasses import dataclass, field
from typing import Iterable, Literal, Tuple

from error_normalizer.errors import ConfigError, DuplicateMatcherKey

Family = Literal["value", "list"]


@dataclass(frozen=True)
class PatternEntry:
    error_key: str
    pattern: re.Pattern[str]
    family: Family

    @property
    def captures_value(self) -> bool:
        return "val" in self.pattern.groupindex


@dataclass(frozen=True)
class ParseResult:
    """(key, original message, payload fragment) for a single message."""
    key: str
    message: str
    payload: dict = field(default_factory=dict)

    def __iter__(self):
        # allows `key, msg, payload = parser.parse(...)`
        return iter((self.key, self.message, self.payload))


def _compile(pattern) -> re.Pattern[str]:
    if isinstance(pattern, re.Pattern):
        return pattern
    if isinstance(pattern, str):
        try:
            return re.compile(pattern)
        except re.error as e:
            raise ConfigError(f"invalid matcher pattern {pattern!r}: {e}") from e
    raise ConfigError(f"matcher should be a regex, got {type(pattern).__name__}")


def _build_family(locale: str, family: Family, pairs: Iterable[Tuple[str, object]]) -> Tuple[PatternEntry, ...]:
    seen = set()
    entries = []
    for key, pattern in pairs:
        key = str(key)
        if key in seen:
            raise DuplicateMatcherKey(locale, family, key)
        seen.add(key)
        entries.append(PatternEntry(key, _compile(pattern), family))
    return tuple(entries)


class PatternMatcher:
    """
    Ordered per-locale set of message patterns, split into two families:
      - value matchers capture a single scalar ("must be greater than 17")
      - list matchers capture a ", " list or a " - " range
    Each pattern uses the named group `err` for the error phrase and
    optionally `val` for the payload.

    Built once and never mutated; duplicate keys fail here, before any parsing.

        RUSSIAN = PatternMatcher(
            "ru",
            value_matchers=[("must_be_filled", r"\\A(?P<err>должно быть заполненно)")],
            list_matchers=[("must_be_one_of", r"\\A(?P<err>должно быть одним из): (?P<val>.+)")],
        )
    """

    def __init__(self, locale: str, value_matchers=(), list_matchers=()):
        self.locale = str(locale)
        self.value_matchers = _build_family(self.locale, "value", value_matchers)
        self.list_matchers = _build_family(self.locale, "list", list_matchers)

    def __repr__(self):
        return (
            f"<PatternMatcher(locale={self.locale}, value={len(self.value_matchers)}, "
            f"list={len(self.list_matchers)})>"
        )
