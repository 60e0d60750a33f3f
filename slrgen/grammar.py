"""Grammar loading, FIRST/FOLLOW sets, LR(0) automaton and SLR(1) tables."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable

from .common import Action, ActionKind, Item, Production

END_MARKER = "#"


@dataclass
class State:
    """A state of the LR(0) automaton: its item set and outgoing transitions."""

    id: int
    items: frozenset[Item]
    transitions: dict[str, int] = field(default_factory=dict)


class GrammarConflictError(ValueError):
    """Raised when the grammar is not SLR(1)."""

    def __init__(self, message: str, state: int, symbol: str) -> None:
        super().__init__(message)
        self.state = state
        self.symbol = symbol


class GrammarAnalyzer:
    """Holds a grammar and builds its SLR(1) ACTION and GOTO tables."""

    def __init__(self) -> None:
        self.grammar: list[Production] = []
        self.terminals: set[str] = set()
        self.non_terminals: set[str] = set()
        self.start_symbol: str = ""
        self.first_sets: dict[str, set[str]] = {}
        self.follow_sets: dict[str, set[str]] = {}
        self.states: list[State] = []
        self.action_table: dict[int, dict[str, Action]] = {}
        self.goto_table: dict[int, dict[str, int]] = {}

    # ------------------------------------------------------------------ loading

    def load(self, path: str | Path) -> None:
        """Load productions from a file of lines ``LHS -> RHS ...``."""
        self.load_text(Path(path).read_text(encoding="utf-8"))

    def load_text(self, text: str) -> None:
        """Load productions from text, one ``LHS -> RHS ...`` rule per line.

        The left-hand side of the first rule is the start symbol. Every
        right-hand symbol that never appears on a left-hand side is a terminal.
        """
        for line in text.splitlines():
            words = line.split()
            if not words:
                continue
            lhs, rhs = words[0], words[2:]
            if not self.grammar:
                self.start_symbol = lhs
            self.non_terminals.add(lhs)
            self.grammar.append(Production(len(self.grammar), lhs, tuple(rhs)))

        for prod in self.grammar:
            self.terminals.update(
                sym for sym in prod.rhs if sym not in self.non_terminals
            )
        self.terminals.add(END_MARKER)

    def is_terminal(self, symbol: str) -> bool:
        """Return whether ``symbol`` is a terminal of the loaded grammar."""
        return symbol in self.terminals

    # ------------------------------------------------------------- set building

    def _compute_first(self) -> None:
        self.first_sets = {nt: set() for nt in self.non_terminals}
        changed = True
        while changed:
            changed = False
            for prod in self.grammar:
                if not prod.rhs:
                    continue
                target = self.first_sets[prod.lhs]
                before = len(target)
                head = prod.rhs[0]
                if self.is_terminal(head):
                    target.add(head)
                else:
                    target.update(self.first_sets.get(head, ()))
                if len(target) > before:
                    changed = True

    def _compute_follow(self) -> None:
        self.follow_sets = {nt: set() for nt in self.non_terminals}
        self.follow_sets.setdefault(self.start_symbol, set()).add(END_MARKER)
        changed = True
        while changed:
            changed = False
            for prod in self.grammar:
                for i, sym in enumerate(prod.rhs):
                    if self.is_terminal(sym):
                        continue
                    target = self.follow_sets.setdefault(sym, set())
                    before = len(target)
                    if i + 1 < len(prod.rhs):
                        beta = prod.rhs[i + 1]
                        if self.is_terminal(beta):
                            target.add(beta)
                        else:
                            target.update(self.first_sets.get(beta, ()))
                    else:
                        target.update(self.follow_sets.get(prod.lhs, ()))
                    if len(target) > before:
                        changed = True

    # ------------------------------------------------------------ LR(0) machine

    def _symbol_after_dot(self, item: Item) -> str | None:
        rhs = self.grammar[item.prod_index].rhs
        return rhs[item.dot_pos] if item.dot_pos < len(rhs) else None

    def closure(self, items: Iterable[Item]) -> frozenset[Item]:
        """Return the LR(0) closure of an item set."""
        result = set(items)
        pending = list(result)
        while pending:
            symbol = self._symbol_after_dot(pending.pop())
            if symbol is None or symbol not in self.non_terminals:
                continue
            for prod in self.grammar:
                if prod.lhs == symbol:
                    new_item = Item(prod.id, 0)
                    if new_item not in result:
                        result.add(new_item)
                        pending.append(new_item)
        return frozenset(result)

    def goto(self, items: Iterable[Item], symbol: str) -> frozenset[Item]:
        """Return the closure of the items reached by moving the dot over ``symbol``."""
        moved = {
            Item(item.prod_index, item.dot_pos + 1)
            for item in items
            if self._symbol_after_dot(item) == symbol
        }
        return self.closure(moved)

    def _build_dfa(self) -> None:
        start = self.closure({Item(0, 0)})
        self.states = [State(0, start)]
        index = {start: 0}

        for state in self.states:  # grows while iterating
            next_symbols = sorted(
                {
                    sym
                    for sym in map(self._symbol_after_dot, state.items)
                    if sym is not None
                }
            )
            for symbol in next_symbols:
                target = self.goto(state.items, symbol)
                if not target:
                    continue
                target_id = index.get(target)
                if target_id is None:
                    target_id = len(self.states)
                    index[target] = target_id
                    self.states.append(State(target_id, target))
                state.transitions[symbol] = target_id

    # ---------------------------------------------------------------- SLR table

    def _build_slr_table(self) -> None:
        self.action_table = {state.id: {} for state in self.states}
        self.goto_table = {state.id: {} for state in self.states}

        for state in self.states:
            actions = self.action_table[state.id]
            for symbol, target in sorted(state.transitions.items()):
                if self.is_terminal(symbol):
                    if symbol in actions:
                        raise GrammarConflictError(
                            f"shift-reduce conflict in state {state.id} "
                            f"on symbol {symbol}",
                            state.id,
                            symbol,
                        )
                    actions[symbol] = Action(ActionKind.SHIFT, target)
                else:
                    self.goto_table[state.id][symbol] = target

            for item in sorted(state.items):
                prod = self.grammar[item.prod_index]
                if item.dot_pos != len(prod.rhs):
                    continue
                if prod.lhs == self.start_symbol:
                    actions[END_MARKER] = Action(ActionKind.ACCEPT, 0)
                    continue
                for lookahead in sorted(self.follow_sets.get(prod.lhs, ())):
                    existing = actions.get(lookahead)
                    if existing is not None:
                        if existing.kind is ActionKind.SHIFT:
                            raise GrammarConflictError(
                                f"shift-reduce conflict in state {state.id} "
                                f"on symbol {lookahead}",
                                state.id,
                                lookahead,
                            )
                        if (
                            existing.kind is ActionKind.REDUCE
                            and existing.value != item.prod_index
                        ):
                            raise GrammarConflictError(
                                f"reduce-reduce conflict in state {state.id} "
                                f"on symbol {lookahead}",
                                state.id,
                                lookahead,
                            )
                    actions[lookahead] = Action(ActionKind.REDUCE, item.prod_index)

    def build(self) -> None:
        """Compute FIRST/FOLLOW, the LR(0) automaton and the SLR(1) tables.

        Raises GrammarConflictError if the grammar is not SLR(1).
        """
        if not self.grammar:
            raise ValueError("no grammar loaded")
        self._compute_first()
        self._compute_follow()
        self._build_dfa()
        self._build_slr_table()

    def format_table(self) -> str:
        """Render the ACTION and GOTO tables as tab-separated text."""
        goto_columns = {sym for row in self.goto_table.values() for sym in row}
        headers = sorted(self.terminals) + sorted(
            nt for nt in self.non_terminals if nt in goto_columns
        )
        lines = ["State\t" + "".join(f"{h}\t" for h in headers)]
        for state in self.states:
            actions = self.action_table.get(state.id, {})
            gotos = self.goto_table.get(state.id, {})
            cells = []
            for header in headers:
                if header in self.terminals:
                    action = actions.get(header)
                    cells.append(str(action) if action is not None else "")
                else:
                    target = gotos.get(header)
                    cells.append(str(target) if target is not None else "")
            lines.append(f"{state.id}\t" + "".join(f"{c}\t" for c in cells))
        return "\n".join(lines)