"""SLR(1) table construction and quadruple generation for a small while-language."""

__version__ = "0.1.0"
__all__ = ["common", "lexer", "grammar", "parser", "cli"]