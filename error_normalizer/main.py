from contextlib import asynccontextmanager
from fastapi import FastAPI

from error_normalizer import __version__
from error_normalizer.config import default_config
from error_normalizer.routers.normalize import router as normalize_router
from error_normalizer.setup_logging import setup_logging

# --------------------------------------------------------------------
# App bootstrap
# --------------------------------------------------------------------
setup_logging() # Init Logging


# --------------------------------------------------------------------
# FastAPI application with lifespan hook
# --------------------------------------------------------------------
@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Build the default configuration once at startup.
    Matcher setup errors (duplicate keys, bad patterns) surface here,
    before the first request is served.
    """
    app.state.config = default_config()
    yield


# Create the FastAPI app instance
app = FastAPI(title="Error Normalizer", version=__version__, lifespan=lifespan)


@app.get("/healthz")
def health():
    """
    Simple health probe for monitoring.
    Returns:
      - ok: static True if the app is alive
      - locales: locales with a registered message parser
    """
    config = getattr(app.state, "config", None) or default_config()
    return {
        "ok": True,
        "service": "error-normalizer",
        "version": __version__,
        "locales": [m.locale for m in config.message_parsers],
    }

# Register API routers:
app.include_router(normalize_router)
