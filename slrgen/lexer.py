"""Tokenizer for the small while-language."""

from __future__ import annotations

import string

from .common import Token

KEYWORDS = frozenset({"while", "if", "else", "int", "float", "return"})
TWO_CHAR_OPERATORS = frozenset({">=", "<=", "==", "!="})
END_MARKER = "#"

_LETTERS = frozenset(string.ascii_letters + "_")
_WORD_CHARS = frozenset(string.ascii_letters + string.digits + "_")
_DIGITS = frozenset(string.digits)
_WHITESPACE = frozenset(" \t\n\v\f\r")
# A '+' or '-' right after one of these is a binary operator, not a sign.
_OPERAND_ENDINGS = frozenset({"id", "num", ")", "}"})


class Lexer:
    """Splits source text into tokens, ending with the ``#`` end marker."""

    def __init__(self, source: str) -> None:
        self.source = source

    def tokenize(self) -> list[Token]:
        """Return the tokens of the source, terminated by ``Token('#', '#')``."""
        text = self.source
        length = len(text)
        tokens: list[Token] = []
        pos = 0

        while pos < length:
            while pos < length and text[pos] in _WHITESPACE:
                pos += 1
            if pos >= length:
                break

            c = text[pos]
            if c in _LETTERS:
                start = pos
                while pos < length and text[pos] in _WORD_CHARS:
                    pos += 1
                word = text[start:pos]
                kind = word if word in KEYWORDS else "id"
                tokens.append(Token(kind, word))
            elif c in _DIGITS or (
                c in "+-" and pos + 1 < length and text[pos + 1] in _DIGITS
            ):
                is_sign = c in "+-" and not (
                    tokens and tokens[-1].type in _OPERAND_ENDINGS
                )
                if c in _DIGITS or is_sign:
                    token, pos = self._read_number(text, pos, is_sign)
                    tokens.append(token)
                else:
                    tokens.append(Token(c, c))
                    pos += 1
            else:
                pair = text[pos:pos + 2]
                symbol = pair if pair in TWO_CHAR_OPERATORS else c
                tokens.append(Token(symbol, symbol))
                pos += len(symbol)

        tokens.append(Token(END_MARKER, END_MARKER))
        return tokens

    @staticmethod
    def _read_number(text: str, pos: int, signed: bool) -> tuple[Token, int]:
        start = pos
        if signed:
            pos += 1
        seen_dot = False
        while pos < len(text) and (text[pos] in _DIGITS or text[pos] == "."):
            if text[pos] == ".":
                if seen_dot:
                    break
                seen_dot = True
            pos += 1
        return Token("num", text[start:pos]), pos


def tokenize(source: str) -> list[Token]:
    """Tokenize ``source`` and return the token list."""
    return Lexer(source).tokenize()