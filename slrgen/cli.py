"""Command line entry: build the SLR(1) tables and translate one program."""

from __future__ import annotations

import argparse
import sys
from typing import Sequence

from .grammar import GrammarAnalyzer, GrammarConflictError
from .lexer import tokenize
from .parser import ParseError, Parser, format_quads, write_quads

DEFAULT_SOURCE = "while ( a > b ) { x = y }"
_RULE = "------------------------"


def _parse_args(argv: Sequence[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="slrgen",
        description="Build SLR(1) tables from a grammar and emit quadruples.",
    )
    parser.add_argument(
        "-g", "--grammar", default="testfile.txt", help="grammar file"
    )
    parser.add_argument(
        "-s", "--source", default=DEFAULT_SOURCE, help="program text to translate"
    )
    parser.add_argument(
        "-o", "--output", default="output.txt", help="file for the quadruples"
    )
    return parser.parse_args(argv)


def main(argv: Sequence[str] | None = None) -> int:
    """Run the whole pipeline; return the process exit status."""
    args = _parse_args(argv)

    analyzer = GrammarAnalyzer()
    try:
        analyzer.load(args.grammar)
    except OSError as exc:
        print(f"cannot read grammar: {exc}", file=sys.stderr)
        return 1

    print("Grammar:")
    for prod in analyzer.grammar:
        print(prod)
    print(_RULE)

    try:
        analyzer.build()
    except GrammarConflictError as exc:
        print(f"error: {exc}")
        print("The grammar is not SLR(1)!")
        return 1
    except ValueError as exc:
        print(f"error: {exc}")
        return 1

    print("SLR(1) table:")
    print(analyzer.format_table())
    print("SLR(1) table built.")
    print(f"DFA states: {len(analyzer.states)}")
    print(_RULE)

    print(f"Source: {args.source}")
    print(_RULE)
    print("Tokens:")
    for token in tokenize(args.source):
        print(f"<{token.type}, {token.value}> ")
    print()
    print(_RULE)

    try:
        quads = Parser(analyzer, trace=sys.stdout).parse(args.source)
    except ParseError as exc:
        print(f"error: {exc}")
        return 1

    print("Parse succeeded.")
    print("Quadruples:")
    for line in format_quads(quads):
        print(line)
    write_quads(quads, args.output)
    print(f"Quadruples saved to {args.output}")
    return 0


if __name__ == "__main__":
    sys.exit(main())