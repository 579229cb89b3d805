from .base import PatternMatcher, PatternEntry, ParseResult
from .message_parser import MessageParser, pick_matcher, slugify, parse_list_payload
from .english import ENGLISH

__all__ = [
    "PatternMatcher",
    "PatternEntry",
    "ParseResult",
    "MessageParser",
    "pick_matcher",
    "slugify",
    "parse_list_payload",
    "ENGLISH",
]
