"""Vowels of the Japanese syllabary and the kana rows built on them."""

from enum import Enum
from typing import Dict, List, Optional

from kanaset.charset import is_hiragana


class Vowel(str, Enum):
    a = "a"
    i = "i"
    u = "u"
    e = "e"
    o = "o"


# ──────────────────────────────────────────────────────────────────────────────
# EXCEPTIONS
# ──────────────────────────────────────────────────────────────────────────────
class VowelMappingError(ValueError):
    """Raised when a hiragana syllable cannot be mapped to or from a vowel."""
    def __init__(self, hiragana: str, vowel: Optional[Vowel], reason: str):
        target = f" with vowel '{vowel.value}'" if vowel is not None else ""
        super().__init__(f"Cannot map hiragana '{hiragana}'{target}: {reason}")
        self.hiragana = hiragana
        self.vowel = vowel
        self.reason = reason


def _row(kana: str, vowels: str = "aiueo") -> Dict[Vowel, str]:
    return {Vowel(v): ch for v, ch in zip(vowels, kana)}


VOWEL_ROW = _row("あいうえお")

# Gojūon rows in lookup order; a syllable belongs to the first row holding it.
KANA_ROWS: List[Dict[Vowel, str]] = [
    VOWEL_ROW,
    _row("ぁぃぅぇぉ"),
    _row("かきくけこ"),
    _row("がぎぐげご"),
    _row("さしすせそ"),
    _row("ざじずぜぞ"),
    _row("たちつてと"),
    _row("だぢづでど"),
    _row("なにぬねの"),
    _row("はひふへほ"),
    _row("ばびぶべぼ"),
    _row("ぱぴぷぺぽ"),
    _row("まみむめも"),
    _row("らりるれろ"),
    _row("やゆよ", "auo"),
    _row("ゃゅょ", "auo"),
]

_ROW_BY_HIRAGANA: Dict[str, Dict[Vowel, str]] = {}
for _kana_row in KANA_ROWS:
    for _kana in _kana_row.values():
        _ROW_BY_HIRAGANA.setdefault(_kana, _kana_row)

# Syllables outside the rows above that still carry a vowel
_EXTRA_VOWELS = {
    "わ": Vowel.a,
    "ゎ": Vowel.a,
    "を": Vowel.o,
    "ゔ": Vowel.u,
}

_VOWEL_BY_HIRAGANA: Dict[str, Vowel] = dict(_EXTRA_VOWELS)
for _kana, _kana_row in _ROW_BY_HIRAGANA.items():
    for _vowel, _member in _kana_row.items():
        if _member == _kana:
            _VOWEL_BY_HIRAGANA[_kana] = _vowel

# え and お are lengthened with い and う in native spelling (けいこ, とうきょう)
_PROLONGED_HIRAGANA = {
    Vowel.a: "あ",
    Vowel.i: "い",
    Vowel.u: "う",
    Vowel.e: "い",
    Vowel.o: "う",
}


def get_vowel_for_hiragana(hiragana: str) -> Vowel:
    """Return the vowel a hiragana syllable ends in.

    Raises:
        VowelMappingError: If *hiragana* carries no vowel (ん, っ, non-kana).
    """
    vowel = _VOWEL_BY_HIRAGANA.get(hiragana) if isinstance(hiragana, str) else None
    if vowel is None:
        raise VowelMappingError(hiragana, None, "no vowel for this character")
    return vowel


def get_prolonged_hiragana_for_vowel(vowel: Vowel) -> str:
    """Return the hiragana used to lengthen *vowel*."""
    return _PROLONGED_HIRAGANA[Vowel(vowel)]


def convert_vowel_in_stem(hiragana: str, to_vowel: Vowel) -> str:
    """Move *hiragana* to *to_vowel* within its row, as verb stems do
    (書き → 書か, 買い → 買わ).

    Characters that are not hiragana or belong to no row are returned as-is.
    ``わ`` is treated as part of the vowel row, and the vowel row in the
    ``a`` column becomes ``わ``.

    Raises:
        VowelMappingError: If the row has no syllable for *to_vowel*.
    """
    if not is_hiragana(hiragana):
        return hiragana

    to_vowel = Vowel(to_vowel)
    row = VOWEL_ROW if hiragana == "わ" else _ROW_BY_HIRAGANA.get(hiragana)
    if row is None:
        return hiragana

    if row is VOWEL_ROW and to_vowel is Vowel.a:
        return "わ"

    converted = row.get(to_vowel)
    if converted is None:
        raise VowelMappingError(hiragana, to_vowel, "row has no such syllable")
    return converted
