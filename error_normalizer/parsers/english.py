# error_normalizer/parsers/english.py
from .base import PatternMatcher

# dry-validation default English messages.
# First match wins; the \d+ captures keep "greater than" from
# matching "greater than or equal to ...".
ENGLISH = PatternMatcher(
    "en",
    value_matchers=[
        ("must_not_include", r"\A(?P<err>must not include) (?P<val>.+)"),
        ("must_be_equal_to", r"\A(?P<err>must be equal to) (?P<val>.+)"),
        ("must_not_be_equal_to", r"\A(?P<err>must not be equal to) (?P<val>.+)"),
        ("must_be_greater_than", r"\A(?P<err>must be greater than) (?P<val>\d+)"),
        ("must_be_greater_than_or_equal_to", r"\A(?P<err>must be greater than or equal to) (?P<val>\d+)"),
        ("must_include", r"\A(?P<err>must include) (?P<val>.+)"),
        ("must_be_less_than", r"\A(?P<err>must be less than) (?P<val>\d+)"),
        ("must_be_less_than_or_equal_to", r"\A(?P<err>must be less than or equal to) (?P<val>\d+)"),
        ("size_cannot_be_greater_than", r"\A(?P<err>size cannot be greater than) (?P<val>\d+)"),
        ("size_cannot_be_less_than", r"\A(?P<err>size cannot be less than) (?P<val>\d+)"),
        ("size_must_be", r"\A(?P<err>size must be) (?P<val>\d+)"),
        ("length_must_be", r"\A(?P<err>length must be) (?P<val>\d+)"),
    ],
    list_matchers=[
        ("must_not_be_one_of", r"\A(?P<err>must not be one of): (?P<val>.+)"),
        ("must_be_one_of", r"\A(?P<err>must be one of): (?P<val>.+)"),
        ("size_must_be_within", r"\A(?P<err>size must be within) (?P<val>.+)"),
        ("length_must_be_within", r"\A(?P<err>length must be within) (?P<val>.+)"),
    ],
)
