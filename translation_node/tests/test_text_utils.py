"""Tests for CJK detection and the already-translated heuristic."""
import pytest

from translation_node.text_utils import (
    NATIVE_TRANSLATED_SETTINGS,
    contains_chinese_characters,
    is_already_translated,
)


@pytest.mark.parametrize("text", ["", None])
def test_empty_text_has_no_chinese(text):
    assert contains_chinese_characters(text) is False


def test_detects_ideographs():
    assert contains_chinese_characters("画面") is True
    assert contains_chinese_characters("Load 模型") is True


def test_latin_text_has_no_chinese():
    assert contains_chinese_characters("Comfy") is False


def test_detects_cjk_punctuation_and_compatibility_ideographs():
    assert contains_chinese_characters("Hello。") is True
    assert contains_chinese_characters("豈") is True


def test_japanese_kana_alone_is_not_detected():
    assert contains_chinese_characters("こんにちは") is False


def test_identical_label_is_not_translated():
    assert is_already_translated("Comfy", "Comfy") is False


def test_chinese_label_is_translated():
    assert is_already_translated("Comfy", "画面") is True


@pytest.mark.parametrize("label", ["load", "LOAD"])
def test_case_variants_are_not_translated(label):
    assert is_already_translated("Load", label) is False


def test_different_latin_label_is_translated():
    assert is_already_translated("Load", "Loader") is True


@pytest.mark.parametrize("original,label", [
    (None, "x"),
    ("x", None),
    ("", "画面"),
    ("Load", ""),
])
def test_missing_input_is_not_translated(original, label):
    assert is_already_translated(original, label) is False


def test_native_translated_settings():
    assert "Comfy" in NATIVE_TRANSLATED_SETTINGS
    assert "遮罩编辑器" in NATIVE_TRANSLATED_SETTINGS
    assert len(NATIVE_TRANSLATED_SETTINGS) == 5
