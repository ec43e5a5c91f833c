"""Thread safety tests.

parse() shares only immutable tables between calls, so concurrent parses
must agree with a sequential one. These tests use real threads.
"""

from concurrent.futures import ThreadPoolExecutor

from letras import parse

SOURCES = [
    "test-1 test + 1 test+1 -1 1000 -1000",
    "This isn't Greek, but this is: ελληνικά",
    "This isn't Russian, but this is: ру́сский язы́к",
    "This isn't Arabic, but this is: عربي ,عربى",
    "ZoMg Ω≈∂œ™£¢˜Ωπππ¬˜£™¡¢∞•ªº < > & ; ?",
] * 20


class TestConcurrentParse:
    def test_results_match_sequential(self) -> None:
        expected = [parse(s).pairs() for s in SOURCES]
        with ThreadPoolExecutor(max_workers=8) as pool:
            results = list(pool.map(lambda s: parse(s).pairs(), SOURCES))
        assert results == expected

    def test_streams_are_independent(self) -> None:
        def edit(i: int) -> str:
            stream = parse("test test test")
            stream.replace(2, f"t{i}")
            return stream.join()

        with ThreadPoolExecutor(max_workers=8) as pool:
            results = list(pool.map(edit, range(50)))
        assert results == [f"test t{i} test" for i in range(50)]
