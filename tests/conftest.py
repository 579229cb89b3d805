# tests/conftest.py
import pytest
from fastapi.testclient import TestClient

from error_normalizer.main import app
from error_normalizer.parsers import PatternMatcher
from error_normalizer.translation import DictLookup


@pytest.fixture
def client():
    with TestClient(app) as c:
        yield c


# --- A second locale, registered by the host application ---
@pytest.fixture(scope="session")
def ru_matcher():
    return PatternMatcher(
        "ru",
        value_matchers=[
            ("must_be_filled", r"\A(?P<err>должно быть заполненно)"),
        ],
        list_matchers=[
            ("must_be_one_of", r"\A(?P<err>должно быть одним из): (?P<val>.+)"),
            ("must_not_be_one_of", r"\A(?P<err>не должно быть одним из): (?P<val>.+)"),
        ],
    )


@pytest.fixture
def ru_lookup():
    """
    Mirrors a locale file where nested schemas carry both a node label ("@")
    and labels for their children, plus a top-level (non-schema) entry.
    """
    return DictLookup({
        "schemas": {
            "user": {
                "@": "Юзер",
                "name": "Имя",
                "account": {
                    "@": "Аккаунт",
                    "status": "Статус",
                },
            },
        },
        "role": {
            "@": "Роль",
            "name": "Название",
        },
    })


class BrokenLookup:
    """Translation backend that is down."""
    def exists(self, key):
        raise RuntimeError("translation backend unavailable")

    def translate(self, key):
        raise RuntimeError("translation backend unavailable")


@pytest.fixture
def broken_lookup():
    return BrokenLookup()
