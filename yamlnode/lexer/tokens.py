"""Lexer tokens."""

from dataclasses import dataclass
from enum import IntEnum, IntFlag

from yamlnode.text import TextRange


class TokenKind(IntEnum):
    # -------------------------
    # Special / sentinels
    # -------------------------
    EOF = 1

    # -------------------------
    # Stream / document structure
    # -------------------------
    DIRECTIVE = 10  # %YAML 1.2
    DOCUMENT_START = 11  # ---
    DOCUMENT_END = 12  # ...

    # -------------------------
    # Block structure (synthesized from the indentation stack)
    # -------------------------
    BLOCK_SEQUENCE_START = 20
    BLOCK_MAPPING_START = 21
    BLOCK_END = 22
    BLOCK_ENTRY = 23  # -
    KEY = 24  # ? or implicit
    VALUE = 25  # :

    # -------------------------
    # Flow punctuation
    # -------------------------
    FLOW_SEQUENCE_START = 30  # [
    FLOW_SEQUENCE_END = 31  # ]
    FLOW_MAPPING_START = 32  # {
    FLOW_MAPPING_END = 33  # }
    FLOW_ENTRY = 34  # ,

    # -------------------------
    # Node properties
    # -------------------------
    ANCHOR = 40  # &name
    ALIAS = 41  # *name
    TAG = 42  # !tag

    # -------------------------
    # Scalars
    # -------------------------
    PLAIN_SCALAR = 50
    SINGLE_QUOTED_SCALAR = 51
    DOUBLE_QUOTED_SCALAR = 52
    LITERAL_SCALAR = 53  # |
    FOLDED_SCALAR = 54  # >

    @property
    def is_scalar(self) -> bool:
        return TokenKind.PLAIN_SCALAR <= self <= TokenKind.FOLDED_SCALAR

    @property
    def is_flow_start(self) -> bool:
        return self in (TokenKind.FLOW_SEQUENCE_START, TokenKind.FLOW_MAPPING_START)

    @property
    def is_block_start(self) -> bool:
        return self in (TokenKind.BLOCK_SEQUENCE_START, TokenKind.BLOCK_MAPPING_START)


class TokenFlags(IntFlag):
    """Token metadata flags."""

    NONE = 0
    PRECEDING_LINE_BREAK = 1 << 0  # first token on its line
    MULTILINE = 1 << 1  # scalar spans more than one line
    HAS_ESCAPE = 1 << 2


@dataclass(frozen=True, slots=True)
class Token:
    """A single scanned token.

    `line` and `column` are 0-based; `column` doubles as the indentation of a
    token that starts a line. Scalar, anchor, alias, tag and directive tokens
    carry their cooked text in `value`.
    """

    kind: TokenKind
    range: TextRange
    line: int
    column: int
    flags: TokenFlags = TokenFlags.NONE
    value: str | None = None

    def has_preceding_line_break(self) -> bool:
        return bool(self.flags & TokenFlags.PRECEDING_LINE_BREAK)

    def is_multiline(self) -> bool:
        return bool(self.flags & TokenFlags.MULTILINE)
