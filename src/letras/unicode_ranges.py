"""Unicode block table for script-aware WORD matching.

The WORD rule treats any code point inside a configured block as a
"script letter", so runs of Greek, Cyrillic, Arabic, CJK and so on come out
as single WORD tokens instead of one CHAR per code point.

The table is immutable. Ranges may overlap or arrive in any order; they are
normalised once into sorted disjoint intervals, and membership is a binary
search over the interval starts (O(log n) per character, no per-call
allocation).

Thread Safety:
UnicodeRangeTable and CodepointRange are immutable and safe to share.

Usage:
    >>> from letras.unicode_ranges import DEFAULT_RANGE_TABLE, CodepointRange
    >>> 0x03B1 in DEFAULT_RANGE_TABLE  # Greek small alpha
    True
    >>> ord("a") in DEFAULT_RANGE_TABLE
    False
    >>> runes = DEFAULT_RANGE_TABLE.extend([CodepointRange(0x0800, 0x083F, "Samaritan")])

"""

from __future__ import annotations

from bisect import bisect_right
from collections.abc import Iterable
from dataclasses import dataclass

MAX_CODEPOINT = 0x10FFFF


@dataclass(frozen=True, slots=True)
class CodepointRange:
    """Inclusive code point interval.

    Attributes:
        low: First code point in the range
        high: Last code point in the range (inclusive)
        name: Optional Unicode block name, for display only

    """

    low: int
    high: int
    name: str = ""

    def __post_init__(self) -> None:
        if not 0 <= self.low <= self.high <= MAX_CODEPOINT:
            raise ValueError(
                f"Invalid code point range {self.low:#x}-{self.high:#x}"
            )

    def __contains__(self, codepoint: object) -> bool:
        if isinstance(codepoint, str):
            if len(codepoint) != 1:
                return False
            codepoint = ord(codepoint)
        if not isinstance(codepoint, int):
            return False
        return self.low <= codepoint <= self.high

    def __str__(self) -> str:
        label = f"U+{self.low:04X}..U+{self.high:04X}"
        return f"{label} {self.name}" if self.name else label


class UnicodeRangeTable:
    """Immutable set of code point ranges with fast membership tests.

    Usage:
            >>> table = UnicodeRangeTable.from_pairs([(0x0370, 0x03FF)])
            >>> table.contains_char("λ")
            True
            >>> table.contains_char("z")
            False

    Thread Safety:
        All state is computed in __init__ and never written again.

    """

    __slots__ = ("_ranges", "_starts", "_ends", "_min")

    def __init__(self, ranges: Iterable[CodepointRange] = ()) -> None:
        """Build the table from any iterable of ranges.

        Args:
            ranges: CodepointRange instances; overlap and order do not matter.
        """
        self._ranges: tuple[CodepointRange, ...] = tuple(ranges)

        starts: list[int] = []
        ends: list[int] = []
        for rng in sorted(self._ranges, key=lambda r: (r.low, r.high)):
            # Merge overlapping and adjacent intervals
            if ends and rng.low <= ends[-1] + 1:
                if rng.high > ends[-1]:
                    ends[-1] = rng.high
                continue
            starts.append(rng.low)
            ends.append(rng.high)

        self._starts: tuple[int, ...] = tuple(starts)
        self._ends: tuple[int, ...] = tuple(ends)
        self._min: int = starts[0] if starts else MAX_CODEPOINT + 1

    @classmethod
    def from_pairs(cls, pairs: Iterable[tuple[int, int]]) -> UnicodeRangeTable:
        """Create a table from plain (low, high) tuples."""
        return cls(CodepointRange(low, high) for low, high in pairs)

    def contains(self, codepoint: int) -> bool:
        """Return True if codepoint falls inside any configured range."""
        if codepoint < self._min:
            return False
        idx = bisect_right(self._starts, codepoint) - 1
        return idx >= 0 and codepoint <= self._ends[idx]

    def contains_char(self, char: str) -> bool:
        """Return True if the single character char is a script letter."""
        return self.contains(ord(char))

    def __contains__(self, item: object) -> bool:
        if isinstance(item, str):
            return len(item) == 1 and self.contains(ord(item))
        if isinstance(item, int):
            return self.contains(item)
        return False

    def extend(self, ranges: Iterable[CodepointRange]) -> UnicodeRangeTable:
        """Return a new table with extra ranges added.

        The receiver is left untouched.
        """
        return UnicodeRangeTable((*self._ranges, *ranges))

    @property
    def ranges(self) -> tuple[CodepointRange, ...]:
        """The ranges as supplied, before merging."""
        return self._ranges

    @property
    def intervals(self) -> tuple[tuple[int, int], ...]:
        """Sorted, disjoint (low, high) intervals used for lookups."""
        return tuple(zip(self._starts, self._ends))

    def __len__(self) -> int:
        return len(self._ranges)

    def __iter__(self):
        return iter(self._ranges)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, UnicodeRangeTable):
            return NotImplemented
        return self._starts == other._starts and self._ends == other._ends

    def __hash__(self) -> int:
        return hash((self._starts, self._ends))

    def __repr__(self) -> str:
        return (
            f"UnicodeRangeTable({len(self._ranges)} ranges, "
            f"{len(self._starts)} intervals)"
        )


# Unicode blocks treated as letter-like. Symbol, punctuation and surrogate
# blocks are part of the historical table and stay in it.
DEFAULT_SCRIPT_RANGES: tuple[CodepointRange, ...] = (
    CodepointRange(0x00A0, 0x00FF, "Latin-1 Supplement"),
    CodepointRange(0x0100, 0x017F, "Latin Extended-A"),
    CodepointRange(0x0180, 0x024F, "Latin Extended-B"),
    CodepointRange(0x0250, 0x02AF, "IPA Extensions"),
    CodepointRange(0x02B0, 0x02FF, "Spacing Modifier Letters"),
    CodepointRange(0x0300, 0x036F, "Combining Diacritical Marks"),
    CodepointRange(0x0370, 0x03FF, "Greek and Coptic"),
    CodepointRange(0x0400, 0x04FF, "Cyrillic"),
    CodepointRange(0x0500, 0x052F, "Cyrillic Supplementary"),
    CodepointRange(0x0530, 0x058F, "Armenian"),
    CodepointRange(0x0590, 0x05FF, "Hebrew"),
    CodepointRange(0x0600, 0x06FF, "Arabic"),
    CodepointRange(0x0700, 0x074F, "Syriac"),
    CodepointRange(0x0780, 0x07BF, "Thaana"),
    CodepointRange(0x0900, 0x097F, "Devanagari"),
    CodepointRange(0x0980, 0x09FF, "Bengali"),
    CodepointRange(0x0A00, 0x0A7F, "Gurmukhi"),
    CodepointRange(0x0A80, 0x0AFF, "Gujarati"),
    CodepointRange(0x0B00, 0x0B7F, "Oriya"),
    CodepointRange(0x0B80, 0x0BFF, "Tamil"),
    CodepointRange(0x0C00, 0x0C7F, "Telugu"),
    CodepointRange(0x0C80, 0x0CFF, "Kannada"),
    CodepointRange(0x0D00, 0x0D7F, "Malayalam"),
    CodepointRange(0x0D80, 0x0DFF, "Sinhala"),
    CodepointRange(0x0E00, 0x0E7F, "Thai"),
    CodepointRange(0x0E80, 0x0EFF, "Lao"),
    CodepointRange(0x0F00, 0x0FFF, "Tibetan"),
    CodepointRange(0x1000, 0x109F, "Myanmar"),
    CodepointRange(0x10A0, 0x10FF, "Georgian"),
    CodepointRange(0x1100, 0x11FF, "Hangul Jamo"),
    CodepointRange(0x1200, 0x137F, "Ethiopic"),
    CodepointRange(0x13A0, 0x13FF, "Cherokee"),
    CodepointRange(0x1400, 0x167F, "Unified Canadian Aboriginal Syllabics"),
    CodepointRange(0x1680, 0x169F, "Ogham"),
    CodepointRange(0x16A0, 0x16FF, "Runic"),
    CodepointRange(0x1700, 0x171F, "Tagalog"),
    CodepointRange(0x1720, 0x173F, "Hanunoo"),
    CodepointRange(0x1740, 0x175F, "Buhid"),
    CodepointRange(0x1760, 0x177F, "Tagbanwa"),
    CodepointRange(0x1780, 0x17FF, "Khmer"),
    CodepointRange(0x1800, 0x18AF, "Mongolian"),
    CodepointRange(0x1900, 0x194F, "Limbu"),
    CodepointRange(0x1950, 0x197F, "Tai Le"),
    CodepointRange(0x19E0, 0x19FF, "Khmer Symbols"),
    CodepointRange(0x1D00, 0x1D7F, "Phonetic Extensions"),
    CodepointRange(0x1E00, 0x1EFF, "Latin Extended Additional"),
    CodepointRange(0x1F00, 0x1FFF, "Greek Extended"),
    CodepointRange(0x2000, 0x206F, "General Punctuation"),
    CodepointRange(0x2070, 0x209F, "Superscripts and Subscripts"),
    CodepointRange(0x20A0, 0x20CF, "Currency Symbols"),
    CodepointRange(0x20D0, 0x20FF, "Combining Diacritical Marks for Symbols"),
    CodepointRange(0x2100, 0x214F, "Letterlike Symbols"),
    CodepointRange(0x2150, 0x218F, "Number Forms"),
    CodepointRange(0x2190, 0x21FF, "Arrows"),
    CodepointRange(0x2200, 0x22FF, "Mathematical Operators"),
    CodepointRange(0x2300, 0x23FF, "Miscellaneous Technical"),
    CodepointRange(0x2400, 0x243F, "Control Pictures"),
    CodepointRange(0x2440, 0x245F, "Optical Character Recognition"),
    CodepointRange(0x2460, 0x24FF, "Enclosed Alphanumerics"),
    CodepointRange(0x2500, 0x257F, "Box Drawing"),
    CodepointRange(0x2580, 0x259F, "Block Elements"),
    CodepointRange(0x25A0, 0x25FF, "Geometric Shapes"),
    CodepointRange(0x2600, 0x26FF, "Miscellaneous Symbols"),
    CodepointRange(0x2700, 0x27BF, "Dingbats"),
    CodepointRange(0x27C0, 0x27EF, "Miscellaneous Mathematical Symbols-A"),
    CodepointRange(0x27F0, 0x27FF, "Supplemental Arrows-A"),
    CodepointRange(0x2800, 0x28FF, "Braille Patterns"),
    CodepointRange(0x2900, 0x297F, "Supplemental Arrows-B"),
    CodepointRange(0x2980, 0x29FF, "Miscellaneous Mathematical Symbols-B"),
    CodepointRange(0x2A00, 0x2AFF, "Supplemental Mathematical Operators"),
    CodepointRange(0x2B00, 0x2BFF, "Miscellaneous Symbols and Arrows"),
    CodepointRange(0x2E80, 0x2EFF, "CJK Radicals Supplement"),
    CodepointRange(0x2F00, 0x2FDF, "Kangxi Radicals"),
    CodepointRange(0x2FF0, 0x2FFF, "Ideographic Description Characters"),
    CodepointRange(0x3000, 0x303F, "CJK Symbols and Punctuation"),
    CodepointRange(0x3040, 0x309F, "Hiragana"),
    CodepointRange(0x30A0, 0x30FF, "Katakana"),
    CodepointRange(0x3100, 0x312F, "Bopomofo"),
    CodepointRange(0x3130, 0x318F, "Hangul Compatibility Jamo"),
    CodepointRange(0x3190, 0x319F, "Kanbun"),
    CodepointRange(0x31A0, 0x31BF, "Bopomofo Extended"),
    CodepointRange(0x31F0, 0x31FF, "Katakana Phonetic Extensions"),
    CodepointRange(0x3200, 0x32FF, "Enclosed CJK Letters and Months"),
    CodepointRange(0x3300, 0x33FF, "CJK Compatibility"),
    CodepointRange(0x3400, 0x4DBF, "CJK Unified Ideographs Extension A"),
    CodepointRange(0x4DC0, 0x4DFF, "Yijing Hexagram Symbols"),
    CodepointRange(0x4E00, 0x9FFF, "CJK Unified Ideographs"),
    CodepointRange(0xA000, 0xA48F, "Yi Syllables"),
    CodepointRange(0xA490, 0xA4CF, "Yi Radicals"),
    CodepointRange(0xAC00, 0xD7AF, "Hangul Syllables"),
    CodepointRange(0xD800, 0xDB7F, "High Surrogates"),
    CodepointRange(0xDB80, 0xDBFF, "High Private Use Surrogates"),
    CodepointRange(0xDC00, 0xDFFF, "Low Surrogates"),
    CodepointRange(0xE000, 0xF8FF, "Private Use Area"),
    CodepointRange(0xF900, 0xFAFF, "CJK Compatibility Ideographs"),
    CodepointRange(0xFB00, 0xFB4F, "Alphabetic Presentation Forms"),
    CodepointRange(0xFB50, 0xFDFF, "Arabic Presentation Forms-A"),
    CodepointRange(0xFE00, 0xFE0F, "Variation Selectors"),
    CodepointRange(0xFE20, 0xFE2F, "Combining Half Marks"),
    CodepointRange(0xFE30, 0xFE4F, "CJK Compatibility Forms"),
    CodepointRange(0xFE50, 0xFE6F, "Small Form Variants"),
    CodepointRange(0xFE70, 0xFEFF, "Arabic Presentation Forms-B"),
    CodepointRange(0xFF00, 0xFFEF, "Halfwidth and Fullwidth Forms"),
    CodepointRange(0xFFF0, 0xFFFF, "Specials"),
    CodepointRange(0x10000, 0x1007F, "Linear B Syllabary"),
    CodepointRange(0x10080, 0x100FF, "Linear B Ideograms"),
    CodepointRange(0x10100, 0x1013F, "Aegean Numbers"),
    CodepointRange(0x10300, 0x1032F, "Old Italic"),
    CodepointRange(0x10330, 0x1034F, "Gothic"),
    CodepointRange(0x10380, 0x1039F, "Ugaritic"),
    CodepointRange(0x10400, 0x1044F, "Deseret"),
    CodepointRange(0x10450, 0x1047F, "Shavian"),
    CodepointRange(0x10480, 0x104AF, "Osmanya"),
    CodepointRange(0x10800, 0x1083F, "Cypriot Syllabary"),
    CodepointRange(0x1D000, 0x1D0FF, "Byzantine Musical Symbols"),
    CodepointRange(0x1D100, 0x1D1FF, "Musical Symbols"),
    CodepointRange(0x1D300, 0x1D35F, "Tai Xuan Jing Symbols"),
    CodepointRange(0x1D400, 0x1D7FF, "Mathematical Alphanumeric Symbols"),
    CodepointRange(0x20000, 0x2A6DF, "CJK Unified Ideographs Extension B"),
    CodepointRange(0x2F800, 0x2FA1F, "CJK Compatibility Ideographs Supplement"),
    CodepointRange(0xE0000, 0xE007F, "Tags"),
)

# Module-level default table (built once, shared read-only)
DEFAULT_RANGE_TABLE: UnicodeRangeTable = UnicodeRangeTable(DEFAULT_SCRIPT_RANGES)

# Table with no script letters: WORD falls back to ASCII-only behaviour
EMPTY_RANGE_TABLE: UnicodeRangeTable = UnicodeRangeTable()


__all__ = [
    "DEFAULT_RANGE_TABLE",
    "DEFAULT_SCRIPT_RANGES",
    "EMPTY_RANGE_TABLE",
    "MAX_CODEPOINT",
    "CodepointRange",
    "UnicodeRangeTable",
]
