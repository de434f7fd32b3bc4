import json
import logging

import pytest
from core.i18n import interpolate, load_translations, tokenize


def test_spanish_translation_loaded():
    translations = load_translations()
    assert translations.resolve("common.cancel", "es") == "Cancelar"
    assert translations.resolve("reward.status.redeemed", "fr") == "Utilisé"
    assert translations.resolve("UnknownKey", "es") == "UnknownKey"


def test_missing_language_uses_default():
    translations = load_translations()
    assert translations.resolve("common.save") == "Save"
    assert translations.resolve("common.save", "de") == "Save"


def test_falls_back_to_english_when_key_missing():
    translations = load_translations()
    # checkout.free only exists in en.json and fr.json
    assert translations.resolve("checkout.free", "es") == "Free"
    assert translations.resolve("checkout.free", "fr") == "Offert"


def test_parameters_are_interpolated():
    translations = load_translations()
    text = translations.resolve("quest.tasksCompleted", "es", {"completed": 2, "total": 5})
    assert text == "2 de 5 tareas completadas"


def test_unmatched_placeholder_is_kept():
    translations = load_translations()
    text = translations.resolve("quest.tasksCompleted", "en", {"completed": 1})
    assert text == "1 of {{total}} tasks completed"


def test_key_pointing_at_subtree_is_missing():
    translations = load_translations()
    assert translations.resolve("reward.status", "en") == "reward.status"
    assert translations.resolve("common.cancel.extra", "en") == "common.cancel.extra"


def test_for_language_binds_language():
    t = load_translations().for_language("fr")
    assert t("cart.placeOrder", total="$5.00") == "Commander - $5.00"


def test_bad_file_degrades_to_empty_tree(tmp_path, caplog):
    (tmp_path / "en.json").write_text(json.dumps({"greeting": "Hello {{name}}"}))
    (tmp_path / "es.json").write_text("{not json")
    (tmp_path / "fr.json").write_text(json.dumps(["not", "a", "tree"]))
    with caplog.at_level(logging.WARNING, logger="core.i18n"):
        translations = load_translations(tmp_path)
    assert set(translations.trees) == {"en", "es", "fr"}
    assert dict(translations.tree("es")) == {}
    assert dict(translations.tree("fr")) == {}
    assert translations.resolve("greeting", "es", {"name": "Ana"}) == "Hello Ana"
    assert "es" in caplog.text and "fr" in caplog.text


def test_missing_directory_does_not_raise(tmp_path):
    translations = load_translations(tmp_path / "nowhere")
    assert translations.resolve("common.save", "en") == "common.save"


def test_trees_are_read_only():
    translations = load_translations()
    with pytest.raises(TypeError):
        translations.tree("en")["common"] = {}
    with pytest.raises(TypeError):
        translations.tree("en")["common"]["save"] = "x"


def test_tokenize_splits_literals_and_placeholders():
    tokens = tokenize("Hi {{name}}, {{count}} new")
    assert [(tok.placeholder, tok.text) for tok in tokens] == [
        (False, "Hi "),
        (True, "name"),
        (False, ", "),
        (True, "count"),
        (False, " new"),
    ]


def test_malformed_braces_are_literal():
    assert interpolate("{{ name}} {{name", {"name": "x"}) == "{{ name}} {{name"
    assert interpolate("{{{name}}}", {"name": "x"}) == "{x}"


def test_placeholder_names_are_ascii_word_characters():
    params = {"caf\u00e9": 1, "x\u00b2": 2, "item_2": 3}
    assert interpolate("{{caf\u00e9}} {{x\u00b2}} {{item_2}}", params) == "{{caf\u00e9}} {{x\u00b2}} 3"


def test_repeated_placeholder_replaced_everywhere():
    assert interpolate("{{a}}-{{a}}", {"a": 0}) == "0-0"


def test_no_params_returns_template():
    assert interpolate("Hello {{name}}") == "Hello {{name}}"
