"""
Script detection helpers for lyric lines.

Dependencies: re (stdlib)
System role: Pass-through and language-guard decisions
"""

import re

_KANJI_RE = re.compile(r"[\u4e00-\u9fff]")
_KANA_RE = re.compile(r"[\u3040-\u309f\u30a0-\u30ff]")


def contains_kanji(text: str) -> bool:
    return bool(_KANJI_RE.search(text))


def contains_kana(text: str) -> bool:
    return bool(_KANA_RE.search(text))


def is_japanese_text(text: str) -> bool:
    """Kanji plus kana; distinguishes Japanese from Chinese, which has no kana."""
    return contains_kanji(text) and contains_kana(text)


def has_letters(text: str) -> bool:
    """True when the line has any letter in any script."""
    return any(ch.isalpha() for ch in text)
