"""Lexer."""

from yamlnode.lexer.lexer import IndentKind, Lexer, LexerCheckpoint, token_text
from yamlnode.lexer.tokens import Token, TokenFlags, TokenKind

__all__ = [
    "IndentKind",
    "Lexer",
    "LexerCheckpoint",
    "Token",
    "TokenFlags",
    "TokenKind",
    "token_text",
]
