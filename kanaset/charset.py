"""Recognize the character sets used in written Japanese.

Every predicate takes a single character and returns ``False`` for anything
else, including strings that are not exactly one character long. The
``*_string`` variants hold only for non-empty strings whose characters all
satisfy the single-character predicate.
"""

from typing import Callable

from kanaset.ranges import (
    FULLWIDTH_RANGE,
    HIRAGANA_RANGE,
    JAPANESE_SPECIAL_CHARACTERS,
    KANJI_RANGES,
    KATAKANA_MIDDLE_DOT,
    KATAKANA_RANGE,
    PUNCTUATION_RANGES,
    in_any,
)


def is_hiragana(ch: str) -> bool:
    """Return True if *ch* is in the hiragana block (3040 - 309f)."""
    return ch in HIRAGANA_RANGE


def is_katakana(ch: str) -> bool:
    """Return True if *ch* is in the katakana block (30a0 - 30ff).

    The middle dot ``・`` lives in that block but is punctuation.
    """
    return ch in KATAKANA_RANGE and ch != KATAKANA_MIDDLE_DOT


def is_kana(ch: str) -> bool:
    return is_hiragana(ch) or is_katakana(ch)


def is_kanji(ch: str) -> bool:
    """Return True if *ch* is a CJK unified ideograph (incl. extension A)."""
    return in_any(ch, KANJI_RANGES)


def is_japanese_punctuation(ch: str) -> bool:
    """Return True for CJK symbols and punctuation (3000 - 303f) and ``・``."""
    return in_any(ch, PUNCTUATION_RANGES)


def is_fullwidth(ch: str) -> bool:
    """Return True for full-width roman and half-width katakana (ff00 - ffef)."""
    return ch in FULLWIDTH_RANGE


def is_japanese_special_character(ch: str) -> bool:
    """Return True for the ideographic iteration mark ``々`` and ``〆``."""
    return isinstance(ch, str) and ch in JAPANESE_SPECIAL_CHARACTERS


def is_japanese(ch: str) -> bool:
    """Return True if *ch* is Japanese: kana, kanji, Japanese punctuation or
    full-width forms. Plain ASCII is never Japanese."""
    return (
        is_hiragana(ch)
        or is_katakana(ch)
        or is_kanji(ch)
        or is_japanese_punctuation(ch)
        or is_fullwidth(ch)
    )


def is_japanese_character(ch: str) -> bool:
    """Return True if *ch* is a kana or kanji character (``々`` and ``〆``
    included), i.e. something that spells a word rather than punctuates it."""
    return (
        is_hiragana(ch)
        or is_katakana(ch)
        or is_kanji(ch)
        or is_japanese_special_character(ch)
    )


def _all_chars(text: str, predicate: Callable[[str], bool]) -> bool:
    if not isinstance(text, str) or not text:
        return False
    return all(predicate(ch) for ch in text)


def is_hiragana_string(text: str) -> bool:
    return _all_chars(text, is_hiragana)


def is_katakana_string(text: str) -> bool:
    return _all_chars(text, is_katakana)


def is_kana_string(text: str) -> bool:
    return _all_chars(text, is_kana)


def is_kanji_string(text: str) -> bool:
    return _all_chars(text, is_kanji)


def is_japanese_punctuation_string(text: str) -> bool:
    return _all_chars(text, is_japanese_punctuation)


def is_fullwidth_string(text: str) -> bool:
    return _all_chars(text, is_fullwidth)


def is_japanese_string(text: str) -> bool:
    return _all_chars(text, is_japanese)


def is_japanese_character_string(text: str) -> bool:
    return _all_chars(text, is_japanese_character)
