# error_normalizer/translation.py
import logging
from typing import Any, Dict, List, Mapping, Protocol

from error_normalizer.settings import SCHEMA_NAMESPACE

log = logging.getLogger(__name__)


class LabelLookup(Protocol):
    def exists(self, key: str) -> bool:
        ...

    def translate(self, key: str) -> str:
        ...


class NullLookup(LabelLookup):
    """Default lookup: knows no translations."""
    def exists(self, key: str) -> bool:
        return False

    def translate(self, key: str) -> str:
        return key


class DictLookup(LabelLookup):
    """
    In-memory translations for a single locale.
    Accepts a nested mapping and flattens it to dotted keys:

        {"schemas": {"user": {"@": "User", "name": "Name"}}}
        -> {"schemas.user.@": "User", "schemas.user.name": "Name"}

    Only string leaves are translations; intermediate nodes are not.
    """
    def __init__(self, translations: Mapping[str, Any] | None = None):
        self.translations: Dict[str, str] = {}
        flatten_into(self.translations, translations or {})

    def exists(self, key: str) -> bool:
        return key in self.translations

    def translate(self, key: str) -> str:
        return self.translations.get(key, key)


def flatten_into(out: Dict[str, str], tree: Mapping[str, Any], prefix: str | None = None) -> Dict[str, str]:
    for k, v in tree.items():
        key = f"{prefix}.{k}" if prefix else str(k)
        if isinstance(v, Mapping):
            flatten_into(out, v, key)
        elif isinstance(v, str):
            out[key] = v
    return out


# --- safe access: a broken backend means "not found", never a failed normalize ---

def lookup_exists(lookup: LabelLookup, key: str) -> bool:
    try:
        return bool(lookup.exists(key))
    except Exception:
        log.warning("label lookup failed for %s, treating as missing", key, exc_info=True)
        return False


def lookup_translate(lookup: LabelLookup, key: str) -> str | None:
    if not lookup_exists(lookup, key):
        return None
    try:
        return lookup.translate(key)
    except Exception:
        log.warning("label translation failed for %s, treating as missing", key, exc_info=True)
        return None


class LabelTranslator:
    """
    Translate a dotted path into a human phrase, one label per segment.

    For "user.account.status" the segment "account" is looked up as
    (first existing key wins, raw token otherwise):

        schemas.user.account.@
        schemas.user.account
        schemas.account.@
        schemas.account
        user.account.@
        user.account
        account.@
        account

    ".@" keys label the node itself when it also has children.
    Labels are joined with spaces and only the first character is upper-cased,
    so acronyms coming from translations survive.
    """
    def __init__(self, lookup: LabelLookup | None = None, namespace: str = SCHEMA_NAMESPACE):
        self.lookup = lookup if lookup is not None else NullLookup()
        self.namespace = namespace

    def translate(self, path: str) -> str:
        tokens = path.split(".")
        labels = [self.translate_token(tokens, i) for i in range(len(tokens))]
        return capitalize_first(" ".join(labels))

    def translate_token(self, tokens: List[str], idx: int) -> str:
        token = tokens[idx]
        for key in self.build_lookup(token, ".".join(tokens[: idx + 1])):
            label = lookup_translate(self.lookup, key)
            if label is not None:
                return label
        return token

    def build_lookup(self, token: str, full_path: str) -> List[str]:
        ns = self.namespace
        keys = [
            f"{ns}.{full_path}.@",
            f"{ns}.{full_path}",
            f"{ns}.{token}.@",
            f"{ns}.{token}",
            f"{full_path}.@",
            full_path,
            f"{token}.@",
            token,
        ]
        # first segment: token == full_path, drop the repeats
        return list(dict.fromkeys(keys))


def capitalize_first(s: str) -> str:
    return s[:1].upper() + s[1:]
