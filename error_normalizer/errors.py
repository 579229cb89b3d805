# error_normalizer/errors.py
"""Typed error taxonomy.

Configuration problems (bad options, duplicate matcher keys, missing locale
parsers) are raised at setup time. Input problems are raised while walking
the error tree. Unrecognized message text is never an error.
"""

__all__ = [
    "ErrorNormalizerError",
    "ConfigError",
    "DuplicateMatcherKey",
    "NoLocaleParserFound",
    "UnsupportedInputType",
    "format_error",
]


class ErrorNormalizerError(Exception):
    """Base class for all errors raised by error_normalizer."""
    pass


class ConfigError(ErrorNormalizerError):
    """Invalid normalizer configuration: unknown option, bad regex, etc."""
    pass


class DuplicateMatcherKey(ConfigError):
    """The same error key was registered twice in one matcher family."""

    def __init__(self, locale: str, family: str, key: str):
        super().__init__(f"{family} matcher '{key}' is already defined for locale '{locale}'")
        self.locale = locale
        self.family = family
        self.key = key


class NoLocaleParserFound(ConfigError):
    """Neither the active nor the default locale has a registered matcher."""

    def __init__(self, locale: str, default_locale: str):
        super().__init__(f"No message parser found for '{locale}' or default '{default_locale}'")
        self.locale = locale
        self.default_locale = default_locale


class UnsupportedInputType(ErrorNormalizerError, TypeError):
    """A value in the error tree is not a message list, mapping or record."""

    def __init__(self, value, path: str | None = None):
        where = f" at '{path}'" if path else ""
        super().__init__(f"Unsupported input type {type(value).__name__}{where}")
        self.value = value
        self.path = path


def format_error(e: BaseException) -> str:
    """Return a short operator-facing message like 'ConfigError: detail'."""
    name = e.__class__.__name__
    msg = str(e).strip()
    return f"{name}: {msg}" if msg else name
