"""Tests for character-range language sniffing."""
import pytest

from quicktrans.language import detect_language


@pytest.mark.parametrize(
    "text,expected",
    [
        ("你好", "Chinese"),
        ("こんにちは", "Japanese"),
        ("カタカナ", "Japanese"),
        ("안녕", "Korean"),
        ("Hello", "English"),
        ("", "English"),
    ],
)
def test_detect_language(text, expected):
    assert detect_language(text) == expected


def test_priority_order_not_majority():
    """One Chinese character outweighs any amount of other script."""
    assert detect_language("Hello 你好") == "Chinese"
    assert detect_language("안녕하세요 こんにちは") == "Japanese"
    assert detect_language("日本語のテキスト") == "Chinese"
