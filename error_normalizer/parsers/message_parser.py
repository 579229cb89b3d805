# error_normalizer/parsers/message_parser.py
import logging
import re
from typing import Sequence

from error_normalizer.errors import NoLocaleParserFound
from .base import ParseResult, PatternEntry, PatternMatcher

log = logging.getLogger(__name__)

RANGE_SEPARATOR = " - "
LIST_SEPARATOR = ", "


class MessageParser:
    """
    Extract (key, message, payload) from a free-text validation message.

    Value matchers are tried first, then list matchers, each in registration
    order; the first pattern matching at the start of the message wins.
    Unrecognized text falls back to a slug of the whole message, so parsing
    never fails.
    """
    def __init__(self, matcher: PatternMatcher):
        self.matcher = matcher

    @property
    def locale(self) -> str:
        return self.matcher.locale

    def parse(self, message: str) -> ParseResult:
        for entry in self.matcher.value_matchers:
            m = entry.pattern.match(message)
            if m is None:
                continue
            log.debug("value matcher %s matched %r", entry.error_key, message)
            payload = {"value": m.group("val")} if entry.captures_value else {}
            return ParseResult(entry.error_key, message, payload)

        for entry in self.matcher.list_matchers:
            m = entry.pattern.match(message)
            if m is None:
                continue
            log.debug("list matcher %s matched %r", entry.error_key, message)
            payload = parse_list_payload(m.group("val")) if entry.captures_value else {}
            return ParseResult(entry.error_key, message, payload)

        log.debug("no matcher for %r (locale=%s), using slug", message, self.locale)
        return ParseResult(slugify(message), message, {})


# --- helpers ---

def slugify(msg: str) -> str:
    """
    Lowercase, spaces to underscores, drop everything outside [a-z0-9_].
    ASCII only: non-Latin letters are deleted, not transliterated.
    """
    return re.sub(r"[^a-z0-9_]", "", msg.lower().replace(" ", "_"))


def parse_list_payload(val: str | None) -> dict:
    """'18 - 24' -> {'range': [...]}, 'a, b, c' -> {'list': [...]}."""
    if val is None:
        return {}
    if RANGE_SEPARATOR in val:
        return {"range": val.split(RANGE_SEPARATOR)}
    return {"list": val.split(LIST_SEPARATOR)}


def pick_matcher(matchers: Sequence[PatternMatcher], locale: str, default_locale: str) -> PatternMatcher:
    """Matcher for `locale`, else the default locale's one (with a warning)."""
    for matcher in matchers:
        if matcher.locale == locale:
            return matcher

    log.warning("No message parser with %s found, falling back to %s", locale, default_locale)
    for matcher in matchers:
        if matcher.locale == default_locale:
            return matcher

    raise NoLocaleParserFound(locale, default_locale)
