# slrgen

`slrgen` reads a context-free grammar, builds its SLR(1) parsing tables,
and uses them to parse a small while-language, emitting intermediate
code as quadruples `(op, arg1, arg2, result)`.

The steps are:

- computing FIRST and FOLLOW sets
- building the canonical collection of LR(0) item sets (the DFA)
- filling the ACTION and GOTO tables, raising an error on
  shift/reduce or reduce/reduce conflicts
- a shift-reduce parse whose semantic actions emit quadruples for
  `while` loops, assignments, comparisons and additions

It has no dependencies outside the standard library.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Grammar files

One production per line, in the form `LHS -> RHS`, symbols separated by
whitespace. Blank lines are skipped; the second word of a line (the
arrow) is not otherwise checked.

- The left-hand side of the first production is the start symbol; it
  should be an augmented start such as `S'`. A completed item of a
  start-symbol production becomes the accept entry on `#`.
- Every symbol that appears on a left-hand side is a non-terminal; every
  other symbol is a terminal.
- The end marker `#` is always added as a terminal.

```
S' -> S
S -> while ( C ) { S }
S -> id = E
C -> E > E
E -> id
```

Terminal names must match the token types the lexer produces (`id`,
`num`, `while`, `(`, `>`, and so on).

## Command line

```
slrgen --help
```

Options:

| option | default | meaning |
| --- | --- | --- |
| `-g`, `--grammar` | `testfile.txt` | grammar file |
| `-s`, `--source` | `while ( a > b ) { x = y }` | program text to translate |
| `-o`, `--output` | `output.txt` | file the quadruples are written to |

`slrgen` loads the grammar, prints its productions and the SLR(1) table
with the number of DFA states, lists the tokens of the source text,
traces each parse step (state, symbol, shift/reduce/accept), prints the
numbered quadruples and writes them to the output file.

It exits with status 1 when the grammar file cannot be read, when the
grammar is empty or not SLR(1), or when the source has a syntax error;
the output file is only written after a successful parse.

## Library use

```python
from slrgen.grammar import GrammarAnalyzer, GrammarConflictError
from slrgen.lexer import tokenize
from slrgen.parser import Parser, ParseError, format_quads, write_quads

analyzer = GrammarAnalyzer()
analyzer.load("grammar.txt")    # or analyzer.load_text(text)
analyzer.build()                # raises GrammarConflictError if not SLR(1)
print(analyzer.format_table())

for token in tokenize("while ( a > b ) { x = y }"):
    print(token.type, token.value)

quads = Parser(analyzer).parse("while ( a > b ) { x = y }")
for line in format_quads(quads):
    print(line)
write_quads(quads, "output.txt")
```

With the grammar above this prints:

```
1: (label, -, -, L1)
2: (>, a, b, T1)
3: (jfalse, T1, -, L2)
4: (=, y, -, x)
5: (jump, -, -, L1)
6: (label, -, -, L2)
```

Notes:

- `GrammarAnalyzer` exposes its results as attributes: `grammar`,
  `terminals`, `non_terminals`, `start_symbol`, `first_sets`,
  `follow_sets`, `states`, `action_table` and `goto_table`. `closure`
  and `goto` compute LR(0) item sets directly.
- `build()` raises `ValueError` if no grammar was loaded, and
  `GrammarConflictError` (a `ValueError` with `state` and `symbol`
  attributes) on a conflict.
- `Parser.parse` returns a list of `Quad` and raises `ParseError`
  (with `state` and `token` attributes) on a syntax error. Pass a text
  stream as `trace=` to get the step-by-step trace. Temporaries
  (`T1`, `T2`, ...) and labels (`L1`, `L2`, ...) keep counting across
  calls on the same parser.
- Semantic actions are chosen by the shape of the production: a
  7-symbol body starting with `while`; a 3-symbol body with `=`, `>`,
  `<`, `==` or `+` in the middle; and `E -> id` / `E -> num`, which pass
  the operand through. Other productions produce no code.

### The lexer

`slrgen.lexer.tokenize` (or `Lexer(source).tokenize()`) recognises:

- **Keywords:** `while`, `if`, `else`, `int`, `float`, `return`
- **Identifiers:** type `id`
- **Numbers:** type `num`, integers or decimals with at most one dot. A
  leading `+` or `-` directly before a digit belongs to the number
  unless the previous token is `id`, `num`, `)` or `}`.
- **Two-character operators:** `>=`, `<=`, `==`, `!=`
- Any other character becomes a one-character token of its own type.

Every token list ends with the `#` end marker.

## Limitations

- FIRST sets are taken from the first symbol of each body only, and
  empty productions contribute nothing: grammars with ε-productions are
  not handled correctly.
- The parser stops at the first syntax error; there is no error
  recovery.
- Programs are given as a string (`--source`); there is no option to
  read the program from a file.