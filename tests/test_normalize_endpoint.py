def test_healthz(client):
    r = client.get("/healthz")
    assert r.status_code == 200
    out = r.json()
    assert out["ok"] is True
    assert out["locales"] == ["en"]


def test_normalize_with_namespace(client):
    r = client.post("/normalize", json={"errors": {"email": ["must be filled"]}, "namespace": "user"})
    assert r.status_code == 200, r.text
    out = r.json()
    assert out["ok"] is True
    assert out["count"] == 1
    assert out["errors"] == [{
        "key": "must_be_filled",
        "message": "must be filled",
        "payload": {"path": "user.email"},
        "type": "params",
    }]


def test_normalize_list_and_rule_errors(client):
    payload = {
        "errors": {
            "color": ["must be one of: red, green, blue"],
            "email_required_rule": ["provide email"],
        },
        "type_name": "custom",
    }
    r = client.post("/normalize", json=payload)
    assert r.status_code == 200, r.text
    color, rule = r.json()["errors"]
    assert color["payload"] == {"path": "color", "list": ["red", "green", "blue"]}
    assert rule["type"] == "custom"
    assert rule["payload"] == {}


def test_normalize_with_translations(client):
    payload = {
        "errors": {"user": {"email": ["has already been taken"]}},
        "i18n_messages": True,
        "translations": {"schemas": {"user": {"@": "Account", "email": "e-mail address"}}},
    }
    r = client.post("/normalize", json=payload)
    assert r.status_code == 200, r.text
    [err] = r.json()["errors"]
    assert err["message"] == "Account e-mail address has already been taken"


def test_structured_error_passes_through(client):
    err = {"key": "not_registered", "message": "no no no", "payload": {}, "type": "custom"}
    r = client.post("/normalize", json={"errors": err})
    assert r.status_code == 200, r.text
    assert r.json()["errors"] == [err]


def test_unknown_locale_falls_back(client):
    r = client.post("/normalize", json={"errors": {"age": ["must be greater than 17"]}, "locale": "de"})
    assert r.status_code == 200, r.text
    assert r.json()["errors"][0]["payload"] == {"path": "age", "value": "17"}


def test_unsupported_input_is_rejected(client):
    r = client.post("/normalize", json={"errors": {"age": 17}})
    assert r.status_code == 400
    assert r.json()["detail"].startswith("UnsupportedInputType")


def test_missing_errors_field(client):
    r = client.post("/normalize", json={"namespace": "user"})
    assert r.status_code == 422
