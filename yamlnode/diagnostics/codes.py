"""Diagnostic codes and messages."""

from dataclasses import dataclass
from enum import StrEnum
from typing import Final, Literal

Severity = Literal["error", "warning"]


class ErrorKind(StrEnum):
    """Caller-facing classification of a parse failure."""

    SYNTAX = "syntax_error"
    INDENTATION = "indentation_error"
    UNTERMINATED_SCALAR = "unterminated_scalar"
    DUPLICATE_KEY = "duplicate_key_policy_violation"


@dataclass(frozen=True, slots=True)
class DiagnosticSpec:
    code: str
    message: str
    kind: ErrorKind = ErrorKind.SYNTAX
    hint: str | None = None
    severity: Severity = "error"
    category: str | None = None


INPUT_INVALID_UTF8: Final[DiagnosticSpec] = DiagnosticSpec(
    code="INPUT_INVALID_UTF8",
    message="Input bytes are not valid UTF-8.",
    category="input",
)

LEXER_UNTERMINATED_QUOTED_SCALAR: Final[DiagnosticSpec] = DiagnosticSpec(
    code="LEXER_UNTERMINATED_QUOTED_SCALAR",
    message="Unterminated quoted scalar.",
    kind=ErrorKind.UNTERMINATED_SCALAR,
    hint="Close the scalar with the same quote character it was opened with.",
    category="lexer",
)

LEXER_INVALID_ESCAPE: Final[DiagnosticSpec] = DiagnosticSpec(
    code="LEXER_INVALID_ESCAPE",
    message="Invalid escape sequence in double-quoted scalar.",
    category="lexer",
)

LEXER_INVALID_BLOCK_SCALAR_HEADER: Final[DiagnosticSpec] = DiagnosticSpec(
    code="LEXER_INVALID_BLOCK_SCALAR_HEADER",
    message="Invalid block scalar header.",
    hint="A block scalar header is `|` or `>` followed by an optional chomping indicator and indentation digit.",
    category="lexer",
)

LEXER_BLOCK_SCALAR_IN_FLOW: Final[DiagnosticSpec] = DiagnosticSpec(
    code="LEXER_BLOCK_SCALAR_IN_FLOW",
    message="Block scalars are not allowed inside flow collections.",
    category="lexer",
)

LEXER_UNEXPECTED_CHARACTER: Final[DiagnosticSpec] = DiagnosticSpec(
    code="LEXER_UNEXPECTED_CHARACTER",
    message="Unexpected character.",
    category="lexer",
)

LEXER_EMPTY_ANCHOR_NAME: Final[DiagnosticSpec] = DiagnosticSpec(
    code="LEXER_EMPTY_ANCHOR_NAME",
    message="Anchor or alias name is empty.",
    category="lexer",
)

LEXER_MAPPING_VALUE_NOT_ALLOWED: Final[DiagnosticSpec] = DiagnosticSpec(
    code="LEXER_MAPPING_VALUE_NOT_ALLOWED",
    message="Mapping values are not allowed here.",
    hint="Implicit keys must fit on one line; nested mappings start on a new, more indented line.",
    category="lexer",
)

LEXER_SEQUENCE_ENTRY_NOT_ALLOWED: Final[DiagnosticSpec] = DiagnosticSpec(
    code="LEXER_SEQUENCE_ENTRY_NOT_ALLOWED",
    message="Sequence entries are not allowed here.",
    category="lexer",
)

LEXER_TAB_INDENTATION: Final[DiagnosticSpec] = DiagnosticSpec(
    code="LEXER_TAB_INDENTATION",
    message="Tab characters are not allowed in indentation.",
    kind=ErrorKind.INDENTATION,
    hint="Indent block content with spaces.",
    category="lexer",
)

LEXER_INCONSISTENT_DEDENT: Final[DiagnosticSpec] = DiagnosticSpec(
    code="LEXER_INCONSISTENT_DEDENT",
    message="Dedent does not match any enclosing indentation level.",
    kind=ErrorKind.INDENTATION,
    hint="Align the line with a sibling entry or with one of its parents.",
    category="lexer",
)

LEXER_MISALIGNED_MAPPING_KEY: Final[DiagnosticSpec] = DiagnosticSpec(
    code="LEXER_MISALIGNED_MAPPING_KEY",
    message="Mapping key is indented deeper than the entry above it.",
    kind=ErrorKind.INDENTATION,
    hint="Align sibling keys to the same column, or start a nested mapping after `key:`.",
    category="lexer",
)

PARSER_UNEXPECTED_INDENTATION: Final[DiagnosticSpec] = DiagnosticSpec(
    code="PARSER_UNEXPECTED_INDENTATION",
    message="Unexpected indentation.",
    kind=ErrorKind.INDENTATION,
    category="parser",
)

PARSER_EXPECTED_KEY: Final[DiagnosticSpec] = DiagnosticSpec(
    code="PARSER_EXPECTED_KEY",
    message="Expected a mapping key",
    category="parser",
)

PARSER_EXPECTED_SEQUENCE_ENTRY: Final[DiagnosticSpec] = DiagnosticSpec(
    code="PARSER_EXPECTED_SEQUENCE_ENTRY",
    message="Expected a sequence entry (`- `)",
    category="parser",
)

PARSER_EXPECTED_NODE: Final[DiagnosticSpec] = DiagnosticSpec(
    code="PARSER_EXPECTED_NODE",
    message="Expected a node",
    category="parser",
)

PARSER_EXPECTED_FLOW_SEPARATOR: Final[DiagnosticSpec] = DiagnosticSpec(
    code="PARSER_EXPECTED_FLOW_SEPARATOR",
    message="Expected `,` or the closing bracket of the flow collection",
    category="parser",
)

PARSER_UNCLOSED_FLOW_COLLECTION: Final[DiagnosticSpec] = DiagnosticSpec(
    code="PARSER_UNCLOSED_FLOW_COLLECTION",
    message="Unclosed flow collection",
    hint="Add the matching `]` or `}`.",
    category="parser",
)

PARSER_EXPECTED_DOCUMENT_START: Final[DiagnosticSpec] = DiagnosticSpec(
    code="PARSER_EXPECTED_DOCUMENT_START",
    message="Expected `---` after directives",
    category="parser",
)

PARSER_EXPECTED_DOCUMENT_END: Final[DiagnosticSpec] = DiagnosticSpec(
    code="PARSER_EXPECTED_DOCUMENT_END",
    message="Expected the end of the document",
    category="parser",
)

PARSER_NESTING_TOO_DEEP: Final[DiagnosticSpec] = DiagnosticSpec(
    code="PARSER_NESTING_TOO_DEEP",
    message="Collections are nested deeper than the configured limit",
    hint="Raise ParserOptions.max_depth to accept deeper documents.",
    category="parser",
)

TREE_NON_SCALAR_KEY: Final[DiagnosticSpec] = DiagnosticSpec(
    code="TREE_NON_SCALAR_KEY",
    message="Mapping keys must be scalars.",
    category="tree",
)

TREE_UNDEFINED_ALIAS: Final[DiagnosticSpec] = DiagnosticSpec(
    code="TREE_UNDEFINED_ALIAS",
    message="Alias refers to an undefined anchor.",
    hint="Anchors must be defined (`&name`) before they are referenced (`*name`).",
    category="tree",
)

TREE_DUPLICATE_KEY: Final[DiagnosticSpec] = DiagnosticSpec(
    code="TREE_DUPLICATE_KEY",
    message="Duplicate mapping key.",
    kind=ErrorKind.DUPLICATE_KEY,
    hint="Keep only one entry per key, or parse with a non-strict duplicate key policy.",
    category="tree",
)

TREE_DUPLICATE_KEY_RESOLVED: Final[DiagnosticSpec] = DiagnosticSpec(
    code="TREE_DUPLICATE_KEY_RESOLVED",
    message="Duplicate mapping key resolved by the duplicate key policy.",
    kind=ErrorKind.DUPLICATE_KEY,
    severity="warning",
    category="tree",
)
