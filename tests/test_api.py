"""Tests for the public parse() API.

Covers the documented behaviours: lossless round-trip, empty input, type
rejection, in-place editing, and script-aware WORD classification.
"""

import pytest

from letras import (
    DEFAULT_RANGE_TABLE,
    CodepointRange,
    InputTypeError,
    LexConfig,
    TokenKind,
    TokenStream,
    parse,
)
from letras.unicode_ranges import EMPTY_RANGE_TABLE


class TestParse:
    def test_returns_token_stream(self) -> None:
        assert isinstance(parse("hello"), TokenStream)

    def test_empty_input(self) -> None:
        stream = parse("")
        assert len(stream) == 0
        assert stream.join() == ""

    def test_empty_bytes(self) -> None:
        assert len(parse(b"")) == 0

    @pytest.mark.parametrize(
        "data",
        [b"42 ok", bytearray(b"42 ok"), memoryview(b"42 ok"), "42 ok"],
    )
    def test_accepts_text_shapes(self, data: object) -> None:
        assert parse(data).pairs() == [  # type: ignore[arg-type]
            ("NUMBER", "42"),
            ("WHITESPACE", " "),
            ("WORD", "ok"),
        ]

    @pytest.mark.parametrize("data", [[1, 2, 3, 4], 1234, None, 12.5, ("a",), {"a": 1}])
    def test_rejects_other_types(self, data: object) -> None:
        with pytest.raises(InputTypeError):
            parse(data)  # type: ignore[arg-type]

    def test_type_error_is_builtin_type_error(self) -> None:
        with pytest.raises(TypeError):
            parse([1, 2, 3, 4])  # type: ignore[arg-type]


class TestRoundTrip:
    @pytest.mark.parametrize(
        "source",
        [
            "ZoMg Ω≈∂œ™£¢˜Ωπππ¬˜£™¡¢∞•ªº < > & ; ?",
            "ZoMg testΩ≈∂œ™£¢˜Ωπππ¬˜£™¡¢∞•ªº test< > & ; ?",
            "line one\r\nline two\n\n\ttabbed",
            "emoji 😀 and 👍🏽 mixed",
            "   leading and trailing   ",
            "-1000",
        ],
    )
    def test_join_reproduces_input(self, source: str) -> None:
        assert parse(source).join() == source

    def test_invalid_utf8_bytes_round_trip(self) -> None:
        data = b"caf\xe9 \xff\xfe ok"
        assert parse(data).join_bytes() == data

    def test_latin1_encoding(self) -> None:
        data = "café".encode("latin-1")
        stream = parse(data, config=LexConfig(encoding="latin-1"))
        assert stream.pairs() == [("WORD", "café")]
        assert stream.join_bytes("latin-1") == data


class TestMutation:
    def test_replace_propagates_to_join(self) -> None:
        stream = parse("test test test")
        stream.replace(2, "test2")
        assert stream.pairs() == [
            ("WORD", "test"),
            ("WHITESPACE", " "),
            ("WORD", "test2"),
            ("WHITESPACE", " "),
            ("WORD", "test"),
        ]
        assert stream.join() == "test test2 test"

    def test_attribute_assignment(self) -> None:
        stream = parse("test test test")
        stream[2].lexeme = "test2"
        assert stream.join() == "test test2 test"


class TestScriptCoverage:
    """Non-Latin letter runs come out as one WORD each."""

    def test_greek_sentence(self) -> None:
        source = "Καλημέρα κόσμε"
        stream = parse(source)
        assert stream.pairs() == [
            ("WORD", "Καλημέρα"),
            ("WHITESPACE", " "),
            ("WORD", "κόσμε"),
        ]
        assert stream.join() == source

    def test_cyrillic_sentence(self) -> None:
        source = "Привет мир"
        assert parse(source).pairs() == [
            ("WORD", "Привет"),
            ("WHITESPACE", " "),
            ("WORD", "мир"),
        ]

    def test_russian_with_combining_accents(self) -> None:
        source = "This isn't Russian, but this is: ру́сский язы́к"
        stream = parse(source)
        assert stream.pairs()[-3:] == [
            ("WORD", "ру́сский"),
            ("WHITESPACE", " "),
            ("WORD", "язы́к"),
        ]
        assert ("WORD", "isn't") in stream.pairs()
        assert stream.join() == source

    def test_greek_mixed(self) -> None:
        source = "This isn't Greek, but this is: ελληνικά"
        stream = parse(source)
        assert stream.pairs()[-1] == ("WORD", "ελληνικά")
        assert ("CHAR", ",") in stream.pairs()
        assert stream.join() == source

    def test_arabic(self) -> None:
        source = "This isn't Arabic, but this is: عربي ,عربى"
        stream = parse(source)
        assert stream.pairs()[-4:] == [
            ("WORD", "عربي"),
            ("WHITESPACE", " "),
            ("CHAR", ","),
            ("WORD", "عربى"),
        ]
        assert stream.join() == source

    def test_no_char_tokens_for_script_letters(self) -> None:
        stream = parse("Ελληνικά Русский עברית 中文")
        assert stream.count(TokenKind.CHAR) == 0
        assert stream.count(TokenKind.WORD) == 4

    def test_without_script_ranges_letters_are_chars(self) -> None:
        stream = parse("мир", config=LexConfig(script_ranges=EMPTY_RANGE_TABLE))
        assert stream.pairs() == [("CHAR", "м"), ("CHAR", "и"), ("CHAR", "р")]

    def test_extended_ranges(self) -> None:
        """Callers can add blocks without touching the lexer."""
        source = "\u0800\u0801\u0802"  # Samaritan, not in the default table
        assert parse(source).count(TokenKind.CHAR) == 3

        table = DEFAULT_RANGE_TABLE.extend([CodepointRange(0x0800, 0x083F, "Samaritan")])
        stream = parse(source, config=LexConfig(script_ranges=table))
        assert stream.pairs() == [("WORD", source)]
