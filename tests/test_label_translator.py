from error_normalizer.translation import DictLookup, LabelTranslator, NullLookup


def test_without_translations_uses_raw_tokens():
    assert LabelTranslator().translate("user.account.status") == "User account status"
    assert LabelTranslator(NullLookup()).translate("email") == "Email"


def test_full_path_entry_wins_over_bare_token():
    lookup = DictLookup({
        "schemas": {"user": {"name": "Full name"}},
        "name": "Name",
    })
    assert LabelTranslator(lookup).translate("user.name") == "User Full name"
    assert LabelTranslator(lookup).translate("role.name") == "Role Name"


def test_node_label_is_preferred_for_the_node_itself():
    lookup = DictLookup({"schemas": {"user": {"@": "Customer", "name": "login"}}})
    assert LabelTranslator(lookup).translate("user.name") == "Customer login"


def test_hierarchical_lookup(ru_lookup):
    t = LabelTranslator(ru_lookup)
    assert t.translate("user.name") == "Юзер Имя"
    assert t.translate("user.account.status") == "Юзер Аккаунт Статус"
    # outside the schemas namespace
    assert t.translate("role.name") == "Роль Название"


def test_only_first_character_is_capitalized():
    lookup = DictLookup({
        "schemas": {"some_important_license_number": {"@": "some important LISENCE number"}},
    })
    assert LabelTranslator(lookup).translate("some_important_license_number") == "Some important LISENCE number"


def test_custom_namespace():
    lookup = DictLookup({"forms": {"email": "e-mail"}})
    assert LabelTranslator(lookup, namespace="forms").translate("email") == "E-mail"
    assert LabelTranslator(lookup).translate("email") == "Email"


def test_lookup_keys_for_first_segment_are_deduplicated():
    keys = LabelTranslator().build_lookup("user", "user")
    assert keys == ["schemas.user.@", "schemas.user", "user.@", "user"]


def test_lookup_keys_order_for_nested_segment():
    keys = LabelTranslator().build_lookup("account", "user.account")
    assert keys == [
        "schemas.user.account.@",
        "schemas.user.account",
        "schemas.account.@",
        "schemas.account",
        "user.account.@",
        "user.account",
        "account.@",
        "account",
    ]


def test_broken_backend_degrades_to_raw_tokens(broken_lookup, caplog):
    assert LabelTranslator(broken_lookup).translate("user.email") == "User email"
    assert "treating as missing" in caplog.text


def test_dict_lookup_flattens_string_leaves_only():
    lookup = DictLookup({"a": {"b": "B", "c": {"@": "C"}, "n": 3}})
    assert lookup.exists("a.b")
    assert lookup.exists("a.c.@")
    assert not lookup.exists("a.c")
    assert not lookup.exists("a.n")
    assert lookup.translate("a.b") == "B"


def test_null_lookup_is_the_default():
    assert isinstance(LabelTranslator().lookup, NullLookup)
