"""Core data types shared by the lexer, grammar analyzer and parser."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


@dataclass(frozen=True)
class Quad:
    """A quadruple of intermediate code: ``(op, arg1, arg2, result)``."""

    op: str
    arg1: str
    arg2: str
    result: str

    def __str__(self) -> str:
        return f"({self.op}, {self.arg1}, {self.arg2}, {self.result})"


@dataclass(frozen=True)
class Production:
    """A grammar rule ``lhs -> rhs...`` with a unique numeric id."""

    id: int
    lhs: str
    rhs: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "rhs", tuple(self.rhs))

    def __str__(self) -> str:
        return "".join([f"{self.lhs} ->", *(f" {sym}" for sym in self.rhs)])


@dataclass(frozen=True, order=True)
class Item:
    """An LR(0) item: a production index and the position of the dot."""

    prod_index: int
    dot_pos: int


@dataclass
class Attribute:
    """Semantic attribute carried on the parse stack."""

    place: str = ""
    code: list[Quad] = field(default_factory=list)


class ActionKind(Enum):
    """Kind of an entry in the ACTION table."""

    SHIFT = "s"
    REDUCE = "r"
    ACCEPT = "a"
    ERROR = "e"


@dataclass(frozen=True)
class Action:
    """An ACTION table entry: shift to a state, reduce by a production, or accept."""

    kind: ActionKind
    value: int = 0

    def __str__(self) -> str:
        if self.kind is ActionKind.SHIFT:
            return f"s{self.value}"
        if self.kind is ActionKind.REDUCE:
            return f"r{self.value}"
        if self.kind is ActionKind.ACCEPT:
            return "acc"
        return ""


@dataclass(frozen=True)
class Token:
    """A lexical token: its category and its source text."""

    type: str
    value: str