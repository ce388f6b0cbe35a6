from __future__ import annotations

import pytest
from django.core.exceptions import ImproperlyConfigured
from django.test import override_settings

from bootstrap_ui.helpers.base import Helper
from bootstrap_ui.helpers.bootstrap_mixin import ClassOptionsHelper


class _Helper(ClassOptionsHelper, Helper):
    pass


def _render_icon(name: str) -> str:
    return f"<icon:{name}>"


@pytest.fixture
def helper() -> _Helper:
    return _Helper(icon_renderer=_render_icon)


def test_add_class_merges_existing_first(helper: _Helper) -> None:
    options = helper.add_class({"class": "a b", "id": "x"}, "c a")
    assert options == {"class": "a b c", "id": "x"}


def test_add_class_drops_blank_and_duplicate_tokens(helper: _Helper) -> None:
    options = helper.add_class({"class": [" btn ", "", "btn"]}, ["  ", "btn-lg", "btn"])
    assert options["class"] == "btn btn-lg"


def test_add_class_is_idempotent(helper: _Helper) -> None:
    once = helper.add_class({}, "a")
    assert helper.add_class(once, "a") == once


def test_add_class_does_not_mutate_caller(helper: _Helper) -> None:
    original = {"class": "a"}
    helper.add_class(original, "b")
    assert original == {"class": "a"}


def test_add_class_custom_key(helper: _Helper) -> None:
    options = helper.add_class({"class": "a"}, "b", key="label-class")
    assert options == {"class": "a", "label-class": "b"}


def test_add_class_none_input(helper: _Helper) -> None:
    assert helper.add_class({"class": "a"}, None) == {"class": "a"}


def test_add_class_rejects_other_types(helper: _Helper) -> None:
    with pytest.raises(TypeError):
        helper.add_class({}, 42)


def test_button_classes_default_type(helper: _Helper) -> None:
    assert helper.derive_button_classes({}) == {"class": "btn btn-default"}


def test_button_classes_removes_bootstrap_keys(helper: _Helper) -> None:
    options = helper.derive_button_classes(
        {"bootstrap-type": "primary", "bootstrap-size": "lg", "id": "go"}
    )
    assert options == {"id": "go", "class": "btn btn-primary btn-lg"}


def test_button_classes_size(helper: _Helper) -> None:
    classes = helper.derive_button_classes({"bootstrap-size": "lg"})["class"].split()
    assert classes == ["btn", "btn-default", "btn-lg"]


def test_button_classes_keeps_existing_type_class(helper: _Helper) -> None:
    options = helper.derive_button_classes({"class": "btn-outline-primary"})
    assert options["class"] == "btn-outline-primary btn"


def test_button_classes_any_btn_class_suppresses_type(helper: _Helper) -> None:
    options = helper.derive_button_classes({"class": "btn-block", "bootstrap-type": "primary"})
    assert "btn-primary" not in options["class"].split()


@override_settings(BOOTSTRAP_UI={"buttons": {"type": "primary"}})
def test_button_classes_type_from_settings() -> None:
    assert _Helper().derive_button_classes({})["class"] == "btn btn-primary"


def test_button_classes_type_from_instance_config() -> None:
    helper = _Helper(config={"buttons.type": "warning"})
    assert helper.derive_button_classes({})["class"] == "btn btn-warning"


def test_is_associative_mapping() -> None:
    assert not ClassOptionsHelper.is_associative_mapping(["a", "b", "c"])
    assert not ClassOptionsHelper.is_associative_mapping(("a",))
    assert not ClassOptionsHelper.is_associative_mapping({0: "a", 1: "b"})
    assert not ClassOptionsHelper.is_associative_mapping({})
    assert ClassOptionsHelper.is_associative_mapping({"x": 1})
    assert ClassOptionsHelper.is_associative_mapping({1: "a", 0: "b"})


def test_convert_icon_token(helper: _Helper) -> None:
    assert helper.convert_icon_tokens("i:star") == ("<icon:star>", True)


def test_convert_icon_token_keeps_whitespace(helper: _Helper) -> None:
    text, converted = helper.convert_icon_tokens("Save  i:floppy-disk ")
    assert converted
    assert text == "Save  <icon:floppy-disk> "


def test_convert_icon_adjacent_tokens_share_whitespace(helper: _Helper) -> None:
    # The first match consumes the separating space
    text, _ = helper.convert_icon_tokens("i:a i:b")
    assert text == "<icon:a> i:b"


def test_convert_icon_ignores_embedded_tokens(helper: _Helper) -> None:
    assert helper.convert_icon_tokens("hi:there") == ("hi:there", False)
    assert helper.convert_icon_tokens("plain text") == ("plain text", False)


def test_convert_icon_disabled() -> None:
    helper = _Helper(easy_icon=False, icon_renderer=_render_icon)
    assert helper.convert_icon_tokens("i:star") == ("i:star", False)


@override_settings(BOOTSTRAP_UI={"easy_icon": False})
def test_convert_icon_disabled_from_settings() -> None:
    helper = _Helper(icon_renderer=_render_icon)
    assert not helper.easy_icon
    assert helper.convert_icon_tokens("i:star") == ("i:star", False)


def test_convert_icon_without_renderer() -> None:
    with pytest.raises(ImproperlyConfigured):
        _Helper().convert_icon_tokens("i:star")


def test_convert_icon_renderer_errors_propagate() -> None:
    def _fail(name: str) -> str:
        raise LookupError(name)

    with pytest.raises(LookupError):
        _Helper(icon_renderer=_fail).convert_icon_tokens("i:nope")


def test_with_icon_expansion_disables_escape(helper: _Helper) -> None:
    calls = []

    def render(title, options):
        calls.append((title, options))
        return "rendered"

    assert helper.with_icon_expansion(render, "i:star label", {}) == "rendered"
    assert calls == [("<icon:star> label", {"escape": False})]


def test_with_icon_expansion_keeps_explicit_escape(helper: _Helper) -> None:
    title, options = helper.with_icon_expansion(
        lambda t, o: (t, o), "i:star", {"escape": True}
    )
    assert title == "<icon:star>"
    assert options == {"escape": True}


def test_with_icon_expansion_without_icon(helper: _Helper) -> None:
    options = {"id": "x"}
    assert helper.with_icon_expansion(lambda t, o: (t, o), "label", options) == (
        "label",
        {"id": "x"},
    )


def test_button_classes_explicit_none_type_uses_default(helper: _Helper) -> None:
    assert helper.derive_button_classes({"bootstrap-type": None})["class"] == "btn btn-default"


def test_add_class_rejects_non_string_tokens(helper: _Helper) -> None:
    with pytest.raises(TypeError):
        helper.add_class({}, b"btn")
    with pytest.raises(TypeError):
        helper.add_class({}, ["btn", 3])
    with pytest.raises(TypeError):
        helper.add_class({"class": [None]}, "btn")
