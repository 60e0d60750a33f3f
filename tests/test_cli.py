import pytest

from slrgen.cli import DEFAULT_SOURCE, main
from slrgen.grammar import GrammarAnalyzer
from slrgen.parser import Parser, format_quads

GRAMMAR = """\
S' -> S
S -> while ( C ) { S }
S -> id = E
C -> E > E
E -> id
"""

CONFLICT_GRAMMAR = """\
S' -> S
S -> A
S -> B
A -> a
B -> a
"""


@pytest.fixture
def grammar_file(tmp_path):
    path = tmp_path / "grammar.txt"
    path.write_text(GRAMMAR, encoding="utf-8")
    return path


def expected_lines(source):
    analyzer = GrammarAnalyzer()
    analyzer.load_text(GRAMMAR)
    analyzer.build()
    return format_quads(Parser(analyzer).parse(source))


def test_writes_quadruples(grammar_file, tmp_path, capsys):
    out = tmp_path / "out.txt"
    source = "while ( a > b ) { while ( c > d ) { x = y } }"
    status = main(["-g", str(grammar_file), "-s", source, "-o", str(out)])
    assert status == 0
    assert out.read_text(encoding="utf-8").splitlines() == expected_lines(source)
    printed = capsys.readouterr().out
    assert "acc" in printed
    assert "<while, while> " in printed


def test_defaults_use_working_directory(grammar_file, tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    (tmp_path / "testfile.txt").write_text(GRAMMAR, encoding="utf-8")
    assert main([]) == 0
    written = (tmp_path / "output.txt").read_text(encoding="utf-8").splitlines()
    assert written == expected_lines(DEFAULT_SOURCE)


def test_conflicting_grammar_fails(tmp_path, capsys):
    path = tmp_path / "bad.txt"
    path.write_text(CONFLICT_GRAMMAR, encoding="utf-8")
    out = tmp_path / "out.txt"
    assert main(["-g", str(path), "-o", str(out)]) == 1
    assert "not SLR(1)" in capsys.readouterr().out
    assert not out.exists()


def test_syntax_error_fails(grammar_file, tmp_path):
    out = tmp_path / "out.txt"
    status = main(["-g", str(grammar_file), "-s", "while ( a > ) { }", "-o", str(out)])
    assert status == 1
    assert not out.exists()


def test_missing_grammar_file(tmp_path):
    assert main(["-g", str(tmp_path / "absent.txt")]) == 1