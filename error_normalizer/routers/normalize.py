import logging
from typing import Any, Dict, Optional

from fastapi import APIRouter, HTTPException, Request
from pydantic import BaseModel

from error_normalizer.config import default_config
from error_normalizer.errors import ConfigError, UnsupportedInputType, format_error
from error_normalizer.normalizer import Normalizer
from error_normalizer.translation import DictLookup

log = logging.getLogger(__name__)

# --------------------------------------------------------------------
# Router setup
# --------------------------------------------------------------------
router = APIRouter(prefix="", tags=["normalize"])


# Request schema: raw error tree + per-request options
class NormalizeRequest(BaseModel):
    errors: Dict[str, Any]                          # {field: [messages] | {nested...}} or a structured error
    namespace: Optional[str] = None                 # path prefix, e.g. "user"
    locale: Optional[str] = None                    # active locale for message parsing
    i18n_messages: Optional[bool] = None            # prefix messages with translated path labels
    translations: Optional[Dict[str, Any]] = None   # nested label tree for this locale
    infer_type_from_rule_name: Optional[bool] = None
    type_name: Optional[str] = None


@router.post("/normalize")
def normalize(req: NormalizeRequest, request: Request) -> Dict[str, Any]:
    """
    Normalize a validation error tree.

    Request body:
      {"errors": {"email": ["must be filled"]}, "namespace": "user"}

    Response JSON:
      {
        "ok": True,
        "count": 1,
        "errors": [{"key": "must_be_filled", "message": "must be filled",
                    "payload": {"path": "user.email"}, "type": "params"}]
      }
    """
    base = getattr(request.app.state, "config", None) or default_config()
    # Only options the client actually sent override the defaults
    options = req.model_dump(
        include={"locale", "i18n_messages", "infer_type_from_rule_name", "type_name"},
        exclude_none=True,
    )
    lookup = DictLookup(req.translations) if req.translations else None

    try:
        config = base.with_options(**options)
        normalizer = Normalizer(req.errors, namespace=req.namespace, config=config, lookup=lookup)
        errors = normalizer.normalize().to_list()
    except (UnsupportedInputType, ConfigError) as e:
        log.warning("normalize rejected: %s", format_error(e))
        raise HTTPException(400, format_error(e))

    return {"ok": True, "count": len(errors), "errors": errors}
