"""Japanese script recognition and hiragana/katakana conversion.

This package classifies characters and strings into hiragana, katakana,
kanji, Japanese punctuation and full-width forms, and converts text between
the two kana syllabaries.
"""

from .charset import (
    is_fullwidth,
    is_fullwidth_string,
    is_hiragana,
    is_hiragana_string,
    is_japanese,
    is_japanese_character,
    is_japanese_character_string,
    is_japanese_punctuation,
    is_japanese_punctuation_string,
    is_japanese_special_character,
    is_japanese_string,
    is_kana,
    is_kana_string,
    is_kanji,
    is_kanji_string,
    is_katakana,
    is_katakana_string,
)
from .converter import (
    convert_hiragana_to_katakana_char,
    convert_hiragana_to_katakana_string,
    convert_katakana_to_hiragana_char,
    convert_katakana_to_hiragana_string,
)
from .logger import configure_logging
from .vowel import (
    Vowel,
    VowelMappingError,
    convert_vowel_in_stem,
    get_prolonged_hiragana_for_vowel,
    get_vowel_for_hiragana,
)

__all__ = [
    'is_fullwidth',
    'is_fullwidth_string',
    'is_hiragana',
    'is_hiragana_string',
    'is_japanese',
    'is_japanese_character',
    'is_japanese_character_string',
    'is_japanese_punctuation',
    'is_japanese_punctuation_string',
    'is_japanese_special_character',
    'is_japanese_string',
    'is_kana',
    'is_kana_string',
    'is_kanji',
    'is_kanji_string',
    'is_katakana',
    'is_katakana_string',
    'convert_hiragana_to_katakana_char',
    'convert_hiragana_to_katakana_string',
    'convert_katakana_to_hiragana_char',
    'convert_katakana_to_hiragana_string',
    'configure_logging',
    'Vowel',
    'VowelMappingError',
    'convert_vowel_in_stem',
    'get_prolonged_hiragana_for_vowel',
    'get_vowel_for_hiragana',
]
