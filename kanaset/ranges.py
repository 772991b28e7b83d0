"""Unicode codepoint range tables for the Japanese scripts.

Reference: http://www.rikai.com/library/kanjitables/kanji_codes.unicode.shtml
"""

from typing import Iterator, Tuple

from pydantic import BaseModel, ConfigDict, Field, model_validator

MAX_CODEPOINT = 0x10FFFF


class CodepointRange(BaseModel):
    """Inclusive range of Unicode scalar values."""

    start: int = Field(..., ge=0, le=MAX_CODEPOINT)
    end: int = Field(..., ge=0, le=MAX_CODEPOINT)
    model_config = ConfigDict(frozen=True, extra="forbid")

    @model_validator(mode="after")
    def _check_order(self) -> "CodepointRange":
        if self.start > self.end:
            raise ValueError(
                f"start U+{self.start:04X} is after end U+{self.end:04X}"
            )
        return self

    def __contains__(self, ch: object) -> bool:
        if not isinstance(ch, str) or len(ch) != 1:
            return False
        return self.start <= ord(ch) <= self.end

    def __len__(self) -> int:
        return self.end - self.start + 1

    def shifted(self, offset: int) -> "CodepointRange":
        return CodepointRange(start=self.start + offset, end=self.end + offset)

    def chars(self) -> Iterator[str]:
        """Yield every character of the range in codepoint order."""
        for code in range(self.start, self.end + 1):
            yield chr(code)


def _span(start: int, end: int) -> CodepointRange:
    return CodepointRange(start=start, end=end)


def in_any(ch: str, ranges: Tuple[CodepointRange, ...]) -> bool:
    return any(ch in rng for rng in ranges)


# CJK symbols and punctuation, plus the katakana middle dot
PUNCTUATION_RANGES: Tuple[CodepointRange, ...] = (
    _span(0x3000, 0x303F),
    _span(0x30FB, 0x30FB),
)
HIRAGANA_RANGE = _span(0x3040, 0x309F)
KATAKANA_RANGE = _span(0x30A0, 0x30FF)
KATAKANA_MIDDLE_DOT = "・"
KANJI_RANGES: Tuple[CodepointRange, ...] = (
    _span(0x4E00, 0x9FAF),  # CJK unified ideographs
    _span(0x3400, 0x4DBF),  # extension A
)
# Full-width roman characters and half-width katakana
FULLWIDTH_RANGE = _span(0xFF00, 0xFFEF)

JAPANESE_SPECIAL_CHARACTERS = frozenset("々〆")
PROLONGED_SOUND_MARK = "ー"

HIRAGANA_KATAKANA_OFFSET = ord("ア") - ord("あ")

# Only these sub-ranges line up syllable for syllable across the two blocks.
# The rest (゠, ヷヸヹヺ, combining marks vs ・ー, ゟ vs ヿ) has no counterpart.
CONVERTIBLE_HIRAGANA_RANGES: Tuple[CodepointRange, ...] = (
    _span(0x3041, 0x3096),  # ぁ .. ゖ
    _span(0x309D, 0x309E),  # ゝ ゞ
)
CONVERTIBLE_KATAKANA_RANGES: Tuple[CodepointRange, ...] = tuple(
    rng.shifted(HIRAGANA_KATAKANA_OFFSET) for rng in CONVERTIBLE_HIRAGANA_RANGES
)
