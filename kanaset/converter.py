"""Convert between hiragana and katakana.

The two blocks list the same syllables in the same order, so conversion is a
constant shift of ``HIRAGANA_KATAKANA_OFFSET`` (0x60) rather than a lookup
table. The shift is only applied inside the convertible sub-ranges; the few
codepoints without a counterpart in the other block pass through unchanged.
"""

from typing import List

from kanaset.logger import logger
from kanaset.ranges import (
    CONVERTIBLE_HIRAGANA_RANGES,
    CONVERTIBLE_KATAKANA_RANGES,
    HIRAGANA_KATAKANA_OFFSET,
    PROLONGED_SOUND_MARK,
    in_any,
)
from kanaset.vowel import (
    VowelMappingError,
    get_prolonged_hiragana_for_vowel,
    get_vowel_for_hiragana,
)


def convert_hiragana_to_katakana_char(ch: str) -> str:
    if in_any(ch, CONVERTIBLE_HIRAGANA_RANGES):
        return chr(ord(ch) + HIRAGANA_KATAKANA_OFFSET)
    return ch


def convert_katakana_to_hiragana_char(ch: str) -> str:
    if in_any(ch, CONVERTIBLE_KATAKANA_RANGES):
        return chr(ord(ch) - HIRAGANA_KATAKANA_OFFSET)
    return ch


def convert_hiragana_to_katakana_string(hiragana: str) -> str:
    """Return *hiragana* with every hiragana syllable turned into katakana.

    Everything else (katakana, kanji, punctuation, ASCII) is kept, so the
    result has exactly as many characters as the input.
    """
    return "".join(convert_hiragana_to_katakana_char(ch) for ch in hiragana)


def convert_katakana_to_hiragana_string(katakana: str) -> str:
    """Return *katakana* with every katakana syllable turned into hiragana.

    The prolonged sound mark "ー" is spelled out as the hiragana that
    lengthens the preceding syllable (キョービ → きょうび). When nothing
    precedes it, or the preceding character has no vowel, the mark is kept.
    The result has exactly as many characters as the input.
    """
    hiragana: List[str] = []

    for ch in katakana:
        if ch == PROLONGED_SOUND_MARK:
            hiragana.append(_expand_prolonged_mark(hiragana))
        else:
            hiragana.append(convert_katakana_to_hiragana_char(ch))

    return "".join(hiragana)


def _expand_prolonged_mark(converted: List[str]) -> str:
    if not converted:
        logger.debug("Prolonged sound mark at start of text, keeping it")
        return PROLONGED_SOUND_MARK

    previous = converted[-1]
    try:
        vowel = get_vowel_for_hiragana(previous)
    except VowelMappingError as e:
        logger.debug(f"Keeping prolonged sound mark: {e}")
        return PROLONGED_SOUND_MARK
    return get_prolonged_hiragana_for_vowel(vowel)
