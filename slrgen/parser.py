"""SLR(1) shift-reduce parser that emits quadruples for the while-language."""

from __future__ import annotations

from itertools import count
from pathlib import Path
from typing import Iterable, Sequence, TextIO

from .common import ActionKind, Attribute, Production, Quad
from .grammar import GrammarAnalyzer
from .lexer import tokenize

_COMPARISONS = frozenset({">", "<", "=="})
_BLANK = "-"


class ParseError(ValueError):
    """Raised when the input is not a sentence of the grammar."""

    def __init__(self, message: str, state: int, token: str) -> None:
        super().__init__(message)
        self.state = state
        self.token = token


class Parser:
    """Drives the SLR(1) tables of a built grammar and generates quadruples.

    Temporary and label counters persist across calls to :meth:`parse`,
    so names stay unique for the lifetime of a parser.
    """

    def __init__(self, analyzer: GrammarAnalyzer, trace: TextIO | None = None) -> None:
        self._analyzer = analyzer
        self._trace = trace
        self._temp_count = 0
        self._label_count = 0

    def _new_temp(self) -> str:
        self._temp_count += 1
        return f"T{self._temp_count}"

    def _new_label(self) -> str:
        self._label_count += 1
        return f"L{self._label_count}"

    def _log(self, text: str) -> None:
        if self._trace is not None:
            print(text, file=self._trace)

    def parse(self, source: str) -> list[Quad]:
        """Parse ``source`` and return the quadruples of the accepted program.

        Raises ParseError on a syntax error.
        """
        tokens = tokenize(source)
        states: list[int] = [0]
        symbols: list[Attribute] = []
        position = 0

        self._log(f"Parsing: {source}")
        self._log("Step\tStates\t\tSymbol\tAction")

        for step in count(1):
            state = states[-1]
            token = tokens[position]
            prefix = f"{step}\t{state}\t\t{token.value}\t"

            action = self._analyzer.action_table.get(state, {}).get(token.type)
            if action is None or action.kind is ActionKind.ERROR:
                self._log(prefix + "error")
                raise ParseError(
                    f"syntax error at symbol {token.value}", state, token.value
                )

            if action.kind is ActionKind.SHIFT:
                self._log(f"{prefix}shift {action.value}")
                states.append(action.value)
                symbols.append(Attribute(place=token.value))
                position += 1

            elif action.kind is ActionKind.REDUCE:
                prod = self._analyzer.grammar[action.value]
                self._log(f"{prefix}reduce {prod}")
                split = len(symbols) - len(prod.rhs)
                rhs_attrs = symbols[split:]
                del symbols[split:]
                del states[split + 1:]

                target = self._analyzer.goto_table.get(states[-1], {}).get(prod.lhs)
                if target is None:
                    raise ParseError(
                        f"no goto from state {states[-1]} on {prod.lhs}",
                        states[-1],
                        token.value,
                    )
                states.append(target)
                symbols.append(self._semantic_action(prod, rhs_attrs))

            else:  # accept
                self._log(prefix + "accept")
                if not symbols:
                    return []
                return list(symbols[-1].code)

        raise AssertionError("unreachable")

    def _semantic_action(
        self, prod: Production, rhs: Sequence[Attribute]
    ) -> Attribute:
        """Build the attribute of the production's left side from its right side."""
        body = prod.rhs
        result = Attribute()

        if len(body) == 7 and body[0] == "while":
            cond, stmt = rhs[2], rhs[5]
            start, exit_ = self._new_label(), self._new_label()
            result.code = [
                Quad("label", _BLANK, _BLANK, start),
                *cond.code,
                Quad("jfalse", cond.place, _BLANK, exit_),
                *stmt.code,
                Quad("jump", _BLANK, _BLANK, start),
                Quad("label", _BLANK, _BLANK, exit_),
            ]
        elif len(body) == 3 and body[1] == "=":
            target, expr = rhs[0], rhs[2]
            result.code = [*expr.code, Quad("=", expr.place, _BLANK, target.place)]
        elif len(body) == 3 and body[1] in _COMPARISONS:
            left, right = rhs[0], rhs[2]
            result.place = self._new_temp()
            result.code = [
                *left.code,
                *right.code,
                Quad(body[1], left.place, right.place, result.place),
            ]
        elif len(body) == 3 and body[1] == "+":
            operand, rest = rhs[0], rhs[2]
            result.place = self._new_temp()
            result.code = [
                *rest.code,
                Quad("+", operand.place, rest.place, result.place),
            ]
        elif len(body) == 1 and body[0] in ("id", "num"):
            result.place = rhs[0].place

        return result


def format_quads(quads: Iterable[Quad]) -> list[str]:
    """Return numbered lines ``n: (op, arg1, arg2, result)``."""
    return [f"{number}: {quad}" for number, quad in enumerate(quads, start=1)]


def write_quads(quads: Iterable[Quad], path: str | Path) -> None:
    """Write the numbered quadruples to ``path``, one per line."""
    lines = format_quads(quads)
    Path(path).write_text("".join(f"{line}\n" for line in lines), encoding="utf-8")