# error_normalizer/config.py
from functools import lru_cache
from re import Pattern
from typing import Any, Tuple

from pydantic import BaseModel, ConfigDict, ValidationError, field_validator

from error_normalizer import settings
from error_normalizer.errors import ConfigError
from error_normalizer.parsers import ENGLISH, PatternMatcher


class NormalizerConfig(BaseModel):
    """Read-only settings for one normalize call. Build new ones with `with_options`."""
    model_config = ConfigDict(frozen=True, extra="forbid", arbitrary_types_allowed=True, validate_default=True)

    infer_type_from_rule_name: bool = settings.INFER_TYPE_FROM_RULE_NAME
    rule_matcher: Pattern[str] = settings.RULE_MATCHER
    type_name: str = settings.RULE_TYPE_NAME
    i18n_messages: bool = settings.I18N_MESSAGES
    message_parsers: Tuple[PatternMatcher, ...] = (ENGLISH,)
    locale: str = settings.DEFAULT_LOCALE
    default_locale: str = settings.DEFAULT_LOCALE
    schema_namespace: str = settings.SCHEMA_NAMESPACE

    @field_validator("message_parsers")
    @classmethod
    def _at_least_one_parser(cls, v):
        if not v:
            raise ValueError("message_parsers must not be empty")
        return v

    def with_options(self, **options: Any) -> "NormalizerConfig":
        """New config with `options` applied; unknown or invalid options raise ConfigError."""
        if not options:
            return self
        return build_config(**{**dict(self), **options})


def build_config(**options: Any) -> NormalizerConfig:
    try:
        return NormalizerConfig(**options)
    except ValidationError as e:
        raise ConfigError(f"invalid normalizer options: {e}") from e


@lru_cache(maxsize=1)
def default_config() -> NormalizerConfig:
    return build_config()
