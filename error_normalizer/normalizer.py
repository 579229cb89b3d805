# error_normalizer/normalizer.py
from dataclasses import dataclass
from typing import Any, Dict, List, Mapping, Sequence, Union

from error_normalizer.config import NormalizerConfig, default_config
from error_normalizer.errors import UnsupportedInputType
from error_normalizer.models import ErrorRecord
from error_normalizer.parsers import MessageParser, pick_matcher
from error_normalizer.settings import PARAMS_TYPE_NAME
from error_normalizer.translation import LabelLookup, NullLookup

# --------------------------------------------------------------------
# Input shapes, resolved once per value
# --------------------------------------------------------------------
@dataclass(frozen=True)
class LeafMessages:
    messages: Sequence[str]


@dataclass(frozen=True)
class NestedMap:
    fields: Mapping[Any, Any]


@dataclass(frozen=True)
class PrebuiltRecord:
    record: Union[ErrorRecord, Mapping[str, Any]]


Node = Union[LeafMessages, NestedMap, PrebuiltRecord]


def classify(value: Any, path: str | None = None) -> Node:
    """Tag a raw value; anything that is not a known shape is rejected."""
    if ErrorRecord.matches(value):
        return PrebuiltRecord(value)
    if isinstance(value, Mapping):
        return NestedMap(value)
    if isinstance(value, (list, tuple)) and all(isinstance(v, str) for v in value):
        return LeafMessages(value)
    raise UnsupportedInputType(value, path)


def to_mapping(value: Any) -> Any:
    """Objects exposing a "convert to mapping" method are converted once."""
    if ErrorRecord.matches(value) or isinstance(value, Mapping):
        return value
    for attr in ("to_dict", "model_dump"):
        convert = getattr(value, attr, None)
        if callable(convert):
            return convert()
    return value


# --------------------------------------------------------------------
# Normalizer
# --------------------------------------------------------------------
class Normalizer:
    """
    Convert a nested error tree into a flat list of ErrorRecord.

        errors = {"phone": ["not plausible"]}
        Normalizer(errors, namespace="customer").normalize().to_list()
        # [{"key": "not_plausible", "message": "not plausible",
        #   "payload": {"path": "customer.phone"}, "type": "params"}]

    Records come out in the mapping's own key order, each field's messages
    contiguous and in their original order.
    """

    def __init__(
        self,
        input: Any,
        namespace: str | None = None,
        config: NormalizerConfig | None = None,
        lookup: LabelLookup | None = None,
        parser: MessageParser | None = None,
    ):
        self.input = input
        self.namespace = namespace
        self.config = config or default_config()
        self.lookup = lookup if lookup is not None else NullLookup()
        self.errors: List[Union[ErrorRecord, Mapping[str, Any]]] = []
        self._parser = parser

    @property
    def parser(self) -> MessageParser:
        if self._parser is None:
            cfg = self.config
            matcher = pick_matcher(cfg.message_parsers, cfg.locale, cfg.default_locale)
            self._parser = MessageParser(matcher)
        return self._parser

    def normalize(self) -> "Normalizer":
        node = classify(to_mapping(self.input), self.namespace)
        if isinstance(node, PrebuiltRecord):
            self.add_error(node.record)
        elif isinstance(node, NestedMap):
            self._normalize_map(dict(node.fields))
        else:
            # a bare message list has no field to attach to
            raise UnsupportedInputType(self.input, self.namespace)
        return self

    def add_error(self, error: Any, path: Any = None, **options: Any):
        """
        Append a pre-built record as is, or parse a raw message string.
        `options` are extra ErrorRecord arguments (key, message, type, payload
        entries) and take precedence over what the parser extracted.
        """
        if ErrorRecord.matches(error):
            record = dict(error) if isinstance(error, Mapping) else error
        elif isinstance(error, str):
            record = self._parse_error(error, path, options)
        else:
            raise UnsupportedInputType(error, self._namespaced_path(path))
        self.errors.append(record)
        return record

    def to_list(self) -> List[Dict[str, Any]]:
        return [e.to_dict() if isinstance(e, ErrorRecord) else dict(e) for e in self.errors]

    # --- internals ---

    def _normalize_map(self, fields: Mapping[Any, Any]):
        for key, value in fields.items():
            node = classify(value, self._namespaced_path(key))
            if isinstance(node, LeafMessages):
                options = self._prepare_error_options(key)
                for msg in node.messages:
                    self.add_error(msg, **options)
            elif isinstance(node, NestedMap):
                child = Normalizer(
                    dict(node.fields),
                    namespace=self._namespaced_path(key),
                    config=self.config,
                    lookup=self.lookup,
                    parser=self._parser,
                )
                for e in child.normalize().errors:
                    self.add_error(e)
                self._parser = self._parser or child._parser
            else:
                self.add_error(node.record)

    def _prepare_error_options(self, key: Any) -> Dict[str, Any]:
        cfg = self.config
        if cfg.infer_type_from_rule_name and cfg.rule_matcher.search(str(key)):
            # rule-level errors are not tied to a field
            return {"type": cfg.type_name}
        return {"type": PARAMS_TYPE_NAME, "path": key}

    def _parse_error(self, message: str, path: Any, options: Dict[str, Any]) -> ErrorRecord:
        key, msg, payload = self.parser.parse(message)
        options = dict(options)
        # caller-supplied key/message win over the parsed ones
        key = options.pop("key", key)
        msg = options.pop("message", msg)
        path = options.pop("path", path)
        options.setdefault("i18n_messages", self.config.i18n_messages)
        options.setdefault("lookup", self.lookup)
        options.setdefault("schema_namespace", self.config.schema_namespace)
        return ErrorRecord(key, message=msg, **{**payload, **options, "path": self._namespaced_path(path)})

    def _namespaced_path(self, path: Any) -> str | None:
        if path is None:
            return None
        if self.namespace is None:
            return str(path)
        return f"{self.namespace}.{path}"
