"""Command-line interface for letras.

Usage:
    letras [--format {pairs,json,join,count}] [--encoding ENC] [-v] [PATH ...]

Tokenizes each PATH (or standard input when no path, or "-", is given) and
prints the result. Exit status is 0 on success and 1 if any file could not
be read; the remaining files are still processed.
"""

from __future__ import annotations

import argparse
import codecs
import logging
import sys
from collections.abc import Sequence

from letras import __version__, parse
from letras.config import LexConfig
from letras.errors import ReadError
from letras.reader import read_bytes
from letras.serialization import to_json
from letras.stream import TokenStream
from letras.tokens import TokenKind
from letras.utils.logger import get_logger

logger = get_logger(__name__)

FORMATS = ("pairs", "json", "join", "count")


def _encoding(name: str) -> str:
    try:
        return codecs.lookup(name).name
    except LookupError as exc:
        raise argparse.ArgumentTypeError(f"unknown encoding: {name}") from exc


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="letras",
        description="Split text into WORD, WHITESPACE, CHAR and NUMBER tokens.",
    )
    parser.add_argument(
        "paths",
        nargs="*",
        metavar="PATH",
        help="Files to tokenize ('-' or nothing reads standard input)",
    )
    parser.add_argument(
        "-f",
        "--format",
        choices=FORMATS,
        default="pairs",
        help="Output format (default: pairs)",
    )
    parser.add_argument(
        "--encoding",
        type=_encoding,
        default="utf-8",
        help="Input encoding (default: utf-8)",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable debug logging on stderr",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def format_stream(stream: TokenStream, fmt: str) -> str:
    """Render a stream in one of the CLI output formats."""
    if fmt == "json":
        return to_json(stream) + "\n"
    if fmt == "join":
        return stream.join()
    if fmt == "count":
        return "".join(f"{kind.value:<10} {stream.count(kind)}\n" for kind in TokenKind)
    return "".join(f"{token.kind.value:<10} {token.lexeme!r}\n" for token in stream)


def _emit(text: str, encoding: str) -> None:
    # Undecodable input bytes come back as lone surrogates; write them raw
    out = sys.stdout
    buffer = getattr(out, "buffer", None)
    if buffer is None:
        out.write(text)
        return
    out.flush()
    buffer.write(text.encode(encoding, "surrogateescape"))
    buffer.flush()


def main(argv: Sequence[str] | None = None) -> int:
    """Run the CLI.

    Args:
        argv: Arguments (defaults to sys.argv[1:])

    Returns:
        Process exit status.
    """
    args = build_parser().parse_args(argv)
    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

    config = LexConfig(encoding=args.encoding)
    paths = args.paths or ["-"]
    show_headers = len(paths) > 1 and args.format != "join"
    status = 0

    for path in paths:
        if path == "-":
            data = sys.stdin.buffer.read()
        else:
            try:
                data = read_bytes(path)
            except ReadError as exc:
                print(f"letras: {exc}", file=sys.stderr)
                status = 1
                continue

        stream = parse(data, config=config)
        logger.debug("%s: %d tokens", path, len(stream))
        if show_headers:
            _emit(f"==> {path} <==\n", "utf-8")
        out_encoding = args.encoding if args.format == "join" else "utf-8"
        _emit(format_stream(stream, args.format), out_encoding)

    return status


if __name__ == "__main__":
    sys.exit(main())
