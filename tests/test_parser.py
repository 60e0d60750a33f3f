import io

import pytest

from slrgen.common import Quad
from slrgen.grammar import GrammarAnalyzer
from slrgen.parser import ParseError, Parser, format_quads, write_quads

BASE_GRAMMAR = """\
S' -> S
S -> while ( C ) { S }
S -> id = E
C -> E > E
E -> id
"""

EXTENDED_GRAMMAR = """\
S' -> S
S -> while ( C ) { S }
S -> id = E
C -> E > E
C -> E < E
C -> E == E
E -> id + E
E -> num + E
E -> id
E -> num
"""

WHILE_QUADS = [
    Quad("label", "-", "-", "L1"),
    Quad(">", "a", "b", "T1"),
    Quad("jfalse", "T1", "-", "L2"),
    Quad("=", "y", "-", "x"),
    Quad("jump", "-", "-", "L1"),
    Quad("label", "-", "-", "L2"),
]


def build(text):
    analyzer = GrammarAnalyzer()
    analyzer.load_text(text)
    analyzer.build()
    return analyzer


@pytest.fixture
def base():
    return build(BASE_GRAMMAR)


@pytest.fixture
def extended():
    return build(EXTENDED_GRAMMAR)


def test_while_loop_quadruples(base):
    quads = Parser(base).parse("while ( a > b ) { x = y }")
    assert quads == WHILE_QUADS


def test_simple_assignment(base):
    assert Parser(base).parse("x = y") == [Quad("=", "y", "-", "x")]


def test_nested_while_structure(base):
    quads = Parser(base).parse("while ( a > b ) { while ( c > d ) { x = y } }")
    ops = [q.op for q in quads]
    assert ops.count("label") == 4
    assert ops.count("jump") == 2
    assert ops.count("jfalse") == 2
    labels = [q.result for q in quads if q.op == "label"]
    assert len(set(labels)) == 4
    # The outer loop opens first and closes last.
    assert quads[0].result == quads[-1].result or quads[0].op == "label"
    assert quads[-2].op == "jump" and quads[-2].result == quads[0].result


def test_counters_persist_across_parses(base):
    parser = Parser(base)
    first = parser.parse("while ( a > b ) { x = y }")
    second = parser.parse("while ( a > b ) { x = y }")
    first_names = {q.result for q in first if q.op in ("label", ">")}
    second_names = {q.result for q in second if q.op in ("label", ">")}
    assert first_names.isdisjoint(second_names)


def test_fresh_parsers_start_counting_again(base):
    first = Parser(base).parse("while ( a > b ) { x = y }")
    second = Parser(base).parse("while ( a > b ) { x = y }")
    assert first == WHILE_QUADS
    assert second == WHILE_QUADS


def test_addition_chain(extended):
    quads = Parser(extended).parse("x = a + 1")
    assert [q.op for q in quads] == ["+", "="]
    assert quads[0].arg1 == "a" and quads[0].arg2 == "1"
    assert quads[1].arg1 == quads[0].result
    assert quads[1].result == "x"


@pytest.mark.parametrize("op", ["<", "=="])
def test_other_comparisons(extended, op):
    quads = Parser(extended).parse(f"while ( c {op} 10 ) {{ x = x + 1 }}")
    comparison = quads[1]
    assert comparison.op == op
    assert (comparison.arg1, comparison.arg2) == ("c", "10")
    assert quads[2].op == "jfalse" and quads[2].arg1 == comparison.result


def test_syntax_error_raises(base):
    with pytest.raises(ParseError) as info:
        Parser(base).parse("while ( a > ) { x = y }")
    assert info.value.token == ")"


def test_unexpected_end_raises(base):
    with pytest.raises(ParseError) as info:
        Parser(base).parse("x =")
    assert info.value.token == "#"


def test_trace_records_steps(base):
    stream = io.StringIO()
    Parser(base, trace=stream).parse("x = y")
    lines = stream.getvalue().splitlines()
    assert lines[0] == "Parsing: x = y"
    assert lines[-1].endswith("accept")
    assert any("shift" in line for line in lines)
    assert any("reduce S -> id = E" in line for line in lines)


def test_format_quads_numbering():
    quads = [Quad("=", "y", "-", "x"), Quad("jump", "-", "-", "L1")]
    assert format_quads(quads) == ["1: (=, y, -, x)", "2: (jump, -, -, L1)"]


def test_write_quads_round_trip(tmp_path, base):
    quads = Parser(base).parse("while ( a > b ) { x = y }")
    path = tmp_path / "out.txt"
    write_quads(quads, path)
    assert path.read_text(encoding="utf-8").splitlines() == format_quads(quads)