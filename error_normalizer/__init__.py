"""
Normalize validation errors to a single flat format:

    {
      "key": "has_already_been_taken",
      "type": "params",
      "message": "has already been taken",
      "payload": {"path": "user.email"}
    }

Input is the nested `field -> [messages]` mapping most validation libraries
produce (dry-validation style messages are recognized out of the box).
"""
from typing import Any, Dict, List

from .config import NormalizerConfig, build_config, default_config
from .errors import (
    ErrorNormalizerError,
    ConfigError,
    DuplicateMatcherKey,
    NoLocaleParserFound,
    UnsupportedInputType,
    format_error,
)
from .models import ErrorRecord
from .normalizer import Normalizer
from .parsers import ENGLISH, MessageParser, PatternMatcher
from .translation import DictLookup, LabelLookup, LabelTranslator, NullLookup

__version__ = "0.4.0"


def normalize(
    input: Any,
    namespace: str | None = None,
    lookup: LabelLookup | None = None,
    config: NormalizerConfig | None = None,
    **options: Any,
) -> List[Dict[str, Any]]:
    """
    Normalize errors to a flat list of structured error dicts.
    `options` override `config` (or the defaults) for this call only,
    e.g. `normalize(errors, namespace="user", i18n_messages=True, lookup=DictLookup(...))`.
    """
    cfg = (config or default_config()).with_options(**options)
    return Normalizer(input, namespace=namespace, config=cfg, lookup=lookup).normalize().to_list()


__all__ = [
    "normalize",
    "Normalizer",
    "NormalizerConfig",
    "build_config",
    "default_config",
    "ErrorRecord",
    "PatternMatcher",
    "MessageParser",
    "ENGLISH",
    "LabelLookup",
    "LabelTranslator",
    "DictLookup",
    "NullLookup",
    "ErrorNormalizerError",
    "ConfigError",
    "DuplicateMatcherKey",
    "NoLocaleParserFound",
    "UnsupportedInputType",
    "format_error",
]
