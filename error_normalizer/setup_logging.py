import logging, sys

from error_normalizer.settings import LOG_LEVEL, LIBRARY_LOG_LEVEL


def _level(name: str) -> int:
    return getattr(logging, name.upper(), logging.INFO)


def setup_logging(level: str = LOG_LEVEL, library_level: str | None = LIBRARY_LOG_LEVEL):
    """
    Install a single stdout handler on the root logger.
    `library_level` tunes only the error_normalizer loggers,
    e.g. DEBUG to trace which pattern matched each message.
    """
    if library_level:
        logging.getLogger("error_normalizer").setLevel(_level(library_level))
    root = logging.getLogger()
    if root.handlers:  # don’t double add during reload
        return
    root.setLevel(_level(level))
    h = logging.StreamHandler(sys.stdout)
    h.setFormatter(logging.Formatter("%(asctime)s %(levelname)s %(name)s :: %(message)s"))
    root.addHandler(h)
