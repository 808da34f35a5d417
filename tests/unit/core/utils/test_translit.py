"""Unit tests for core/utils/translit.py"""

import pytest

from slugsmith.core.utils.translit import transliterate


@pytest.mark.parametrize("text,expected", [
    ("hello", "hello"),
    ("Æúű", "AEuu"),
    ("méméméoo", "mememeoo"),
    ("", ""),
])
def test_transliterate(text, expected):
    """Accented Latin text maps to plain ASCII."""
    assert transliterate(text) == expected


def test_transliterate_is_ascii():
    """Output for CJK and Cyrillic input is pure ASCII."""
    out = transliterate("影師嗎 Компьютер")
    assert out.isascii()
    assert out.strip()
