"""Tests for CodepointRange and UnicodeRangeTable."""

import pytest

from letras.unicode_ranges import (
    DEFAULT_RANGE_TABLE,
    DEFAULT_SCRIPT_RANGES,
    EMPTY_RANGE_TABLE,
    CodepointRange,
    UnicodeRangeTable,
)


class TestCodepointRange:
    def test_inclusive_bounds(self) -> None:
        rng = CodepointRange(0x0370, 0x03FF, "Greek and Coptic")
        assert 0x0370 in rng
        assert 0x03FF in rng
        assert 0x0400 not in rng
        assert "λ" in rng
        assert "ab" not in rng

    @pytest.mark.parametrize(("low", "high"), [(10, 5), (-1, 5), (0, 0x110000)])
    def test_invalid(self, low: int, high: int) -> None:
        with pytest.raises(ValueError):
            CodepointRange(low, high)

    def test_str(self) -> None:
        assert str(CodepointRange(0x0400, 0x04FF, "Cyrillic")) == "U+0400..U+04FF Cyrillic"
        assert str(CodepointRange(0x41, 0x5A)) == "U+0041..U+005A"

    def test_frozen(self) -> None:
        rng = CodepointRange(1, 2)
        with pytest.raises(AttributeError):
            rng.low = 0  # type: ignore[misc]


class TestUnicodeRangeTable:
    def test_merges_overlapping_and_adjacent(self) -> None:
        table = UnicodeRangeTable.from_pairs([(50, 60), (15, 30), (10, 20), (31, 40)])
        assert table.intervals == ((10, 40), (50, 60))
        assert len(table) == 4

    def test_contained_range_is_absorbed(self) -> None:
        table = UnicodeRangeTable.from_pairs([(10, 100), (20, 30)])
        assert table.intervals == ((10, 100),)

    @pytest.mark.parametrize(
        ("codepoint", "expected"),
        [
            (9, False),
            (10, True),
            (25, True),
            (40, True),
            (41, False),
            (49, False),
            (50, True),
            (60, True),
            (61, False),
            (0x10FFFF, False),
        ],
    )
    def test_membership(self, codepoint: int, expected: bool) -> None:
        table = UnicodeRangeTable.from_pairs([(10, 40), (50, 60)])
        assert table.contains(codepoint) is expected
        assert (codepoint in table) is expected

    def test_contains_accepts_chars(self) -> None:
        assert "λ" in DEFAULT_RANGE_TABLE
        assert "a" not in DEFAULT_RANGE_TABLE
        assert "ab" not in DEFAULT_RANGE_TABLE
        assert None not in DEFAULT_RANGE_TABLE
        assert DEFAULT_RANGE_TABLE.contains_char("ж")

    def test_empty_table(self) -> None:
        assert not EMPTY_RANGE_TABLE.contains(0x03B1)
        assert EMPTY_RANGE_TABLE.intervals == ()

    def test_extend_returns_new_table(self) -> None:
        extra = CodepointRange(0x0800, 0x083F, "Samaritan")
        extended = DEFAULT_RANGE_TABLE.extend([extra])
        assert 0x0800 in extended
        assert 0x0800 not in DEFAULT_RANGE_TABLE
        assert len(extended) == len(DEFAULT_RANGE_TABLE) + 1
        assert extended.ranges[-1] is extra

    def test_equality_uses_merged_intervals(self) -> None:
        a = UnicodeRangeTable.from_pairs([(1, 5), (6, 9)])
        b = UnicodeRangeTable.from_pairs([(1, 9)])
        assert a == b
        assert hash(a) == hash(b)
        assert a != EMPTY_RANGE_TABLE

    def test_iterates_source_ranges(self) -> None:
        assert tuple(DEFAULT_RANGE_TABLE) == DEFAULT_SCRIPT_RANGES


class TestDefaultTable:
    @pytest.mark.parametrize(
        "char",
        [
            "é",  # Latin-1 Supplement
            "ł",  # Latin Extended-A
            "λ",  # Greek
            "ж",  # Cyrillic
            "ա",  # Armenian
            "א",  # Hebrew
            "ع",  # Arabic
            "क",  # Devanagari
            "ไ",  # Thai
            "ა",  # Georgian
            "한",  # Hangul Syllables
            "漢",  # CJK Unified Ideographs
            "あ",  # Hiragana
            "ア",  # Katakana
            "\u0301",  # Combining Diacritical Marks
            "\u00a0",  # no-break space, Latin-1 Supplement
            "•",  # bullet, General Punctuation
            "€",  # euro sign
            "≈",  # almost equal to
            "\U00020000",  # CJK Extension B
            "\U0001D400",  # Mathematical Alphanumeric Symbols
        ],
    )
    def test_script_letters(self, char: str) -> None:
        assert char in DEFAULT_RANGE_TABLE

    @pytest.mark.parametrize(
        "char", ["a", "Z", "0", " ", "\t", "-", "'", "~", "\x7f", "\U0001F600"]
    )
    def test_excluded(self, char: str) -> None:
        assert char not in DEFAULT_RANGE_TABLE

    def test_ranges_are_named(self) -> None:
        assert all(rng.name for rng in DEFAULT_SCRIPT_RANGES)

    def test_ranges_are_sorted(self) -> None:
        lows = [rng.low for rng in DEFAULT_SCRIPT_RANGES]
        assert lows == sorted(lows)
