# error_normalizer/models.py
import json
from typing import Any, Dict, Mapping

from error_normalizer.settings import ERRORS_NAMESPACE, PARAMS_TYPE_NAME, SCHEMA_NAMESPACE
from error_normalizer.translation import LabelLookup, LabelTranslator, NullLookup, lookup_translate

RECORD_FIELDS = ("key", "message", "payload", "type")


def _is_blank(v: Any) -> bool:
    # None and empty containers/strings are pruned; 0 and False are real values
    if v is None:
        return True
    return isinstance(v, (str, list, tuple, dict, set)) and len(v) == 0


class ErrorRecord:
    """
    A single normalized error:

        {"key": "has_already_been_taken", "type": "params",
         "message": "has already been taken", "payload": {"path": "user.email"}}

    The message is resolved when the record is serialized:
      1. explicit `message`, else the "errors.<key>" translation (i18n on),
         else the key with underscores as spaces
      2. with i18n on, "params" errors carrying a path get the translated
         path label in front: "User email has already been taken"

    Plain dicts carrying key/message/payload/type compare equal to records,
    so already-normalized errors can be mixed into raw input.

        ErrorRecord("not_authorized").to_dict()
        # {"key": "not_authorized", "message": "not authorized", "payload": {}, "type": "params"}
    """

    def __init__(
        self,
        key: str,
        message: str | None = None,
        type: str = PARAMS_TYPE_NAME,
        *,
        i18n_messages: bool = False,
        lookup: LabelLookup | None = None,
        schema_namespace: str = SCHEMA_NAMESPACE,
        **payload: Any,
    ):
        self.key = key
        self.type = type
        self.payload: Dict[str, Any] = {k: v for k, v in payload.items() if not _is_blank(v)}
        self.i18n_messages = i18n_messages
        self.lookup = lookup if lookup is not None else NullLookup()
        self.schema_namespace = schema_namespace
        self._message = message
        self._resolved: str | None = None

    @classmethod
    def matches(cls, other: Any) -> bool:
        """True for records and for mappings shaped like a structured error."""
        if isinstance(other, ErrorRecord):
            return True
        if not isinstance(other, Mapping):
            return False
        h = {str(k): v for k, v in other.items()}
        return all(h.get(f) is not None for f in RECORD_FIELDS)

    @property
    def message(self) -> str:
        if self._resolved is None:
            self._resolved = self._resolve_message()
        return self._resolved

    def _resolve_message(self) -> str:
        base = self._message or self._key_message()
        path = self.payload.get("path")
        if self.i18n_messages and self.type == PARAMS_TYPE_NAME and path:
            label = LabelTranslator(self.lookup, self.schema_namespace).translate(str(path))
            return f"{label} {base}"
        return base

    def _key_message(self) -> str:
        if self.i18n_messages:
            translated = lookup_translate(self.lookup, f"{ERRORS_NAMESPACE}.{self.key}")
            if translated is not None:
                return translated
        return str(self.key).replace("_", " ")

    def to_dict(self) -> Dict[str, Any]:
        return {
            "key": self.key,
            "message": self.message,
            "payload": dict(self.payload),
            "type": self.type,
        }

    def to_json(self) -> str:
        return json.dumps(self.to_dict(), ensure_ascii=False)

    def __eq__(self, other):
        if isinstance(other, ErrorRecord):
            return self.to_dict() == other.to_dict()
        if isinstance(other, Mapping):
            return self.to_dict() == {str(k): v for k, v in other.items()}
        return NotImplemented

    __hash__ = None

    def __repr__(self):
        return f"<ErrorRecord(key={self.key}, type={self.type}, payload={self.payload})>"
