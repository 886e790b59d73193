"""Parser recovery primitives."""

from dataclasses import dataclass
from enum import StrEnum

from yamlnode.lexer import TokenKind
from yamlnode.parser.parser import Parser

_OPENERS = frozenset(
    {
        TokenKind.BLOCK_MAPPING_START,
        TokenKind.BLOCK_SEQUENCE_START,
        TokenKind.FLOW_MAPPING_START,
        TokenKind.FLOW_SEQUENCE_START,
    }
)
_CLOSERS = frozenset(
    {
        TokenKind.BLOCK_END,
        TokenKind.FLOW_MAPPING_END,
        TokenKind.FLOW_SEQUENCE_END,
    }
)


class RecoveryError(StrEnum):
    EOF = "eof"


@dataclass(frozen=True, slots=True)
class ParseRecoveryTokenSet:
    """Recover by skipping tokens until a safe token is reached at the same nesting level.

    At least one token is always consumed, so a caller that reported an error at
    the current token is guaranteed to make progress.
    """

    recovery_set: frozenset[TokenKind]

    def recover(self, parser: Parser) -> RecoveryError | None:
        if parser.at(TokenKind.EOF):
            return RecoveryError.EOF

        depth = 0
        while True:
            token = parser.bump()
            if token.kind in _OPENERS:
                depth += 1
            elif token.kind in _CLOSERS and depth > 0:
                depth -= 1

            if parser.at(TokenKind.EOF):
                return RecoveryError.EOF if depth > 0 else None
            if depth == 0 and parser.at_set(self.recovery_set):
                return None
