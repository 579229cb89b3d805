# error_normalizer/settings.py
import os

# Locale used when the caller does not pass one
DEFAULT_LOCALE = os.getenv("ERROR_NORMALIZER_DEFAULT_LOCALE", "en")

# Type inference by rule name: "email_required_rule" -> type "rule", no path
INFER_TYPE_FROM_RULE_NAME = os.getenv("ERROR_NORMALIZER_INFER_RULE_TYPE", "true").lower() in ("1", "true", "yes")
RULE_MATCHER = r"_rule\Z"
RULE_TYPE_NAME = "rule"
PARAMS_TYPE_NAME = "params"

# Label translation (off unless the host provides translations)
I18N_MESSAGES = os.getenv("ERROR_NORMALIZER_I18N_MESSAGES", "false").lower() in ("1", "true", "yes")
SCHEMA_NAMESPACE = "schemas"
ERRORS_NAMESPACE = "errors"

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
LIBRARY_LOG_LEVEL = os.getenv("ERROR_NORMALIZER_LOG_LEVEL")  # e.g. DEBUG
