"""Lexer."""

from collections import deque
from dataclasses import dataclass
from enum import StrEnum
from typing import Final

from yamlnode.diagnostics import Diagnostic, DiagnosticSpec
from yamlnode.diagnostics.codes import (
    LEXER_BLOCK_SCALAR_IN_FLOW,
    LEXER_EMPTY_ANCHOR_NAME,
    LEXER_INCONSISTENT_DEDENT,
    LEXER_INVALID_BLOCK_SCALAR_HEADER,
    LEXER_INVALID_ESCAPE,
    LEXER_MAPPING_VALUE_NOT_ALLOWED,
    LEXER_MISALIGNED_MAPPING_KEY,
    LEXER_SEQUENCE_ENTRY_NOT_ALLOWED,
    LEXER_TAB_INDENTATION,
    LEXER_UNEXPECTED_CHARACTER,
    LEXER_UNTERMINATED_QUOTED_SCALAR,
)
from yamlnode.lexer.tokens import Token, TokenFlags, TokenKind
from yamlnode.text import LineIndex, TextRange, slice_text_range

_EOF_CHAR: Final[str] = "\0"
_BLANK: Final[str] = " \t"
_BREAK: Final[str] = "\r\n"
_BLANK_OR_BREAK: Final[str] = " \t\r\n\0"
_FLOW_INDICATORS: Final[str] = ",[]{}"
_INDICATORS: Final[str] = "-?:,[]{}#&*!|>'\"%@`"
_NAME_TERMINATORS: Final[str] = _BLANK_OR_BREAK + _FLOW_INDICATORS

_ESCAPE_REPLACEMENTS: Final[dict[str, str]] = {
    "0": "\0",
    "a": "\x07",
    "b": "\x08",
    "t": "\t",
    "\t": "\t",
    "n": "\n",
    "v": "\x0b",
    "f": "\x0c",
    "r": "\r",
    "e": "\x1b",
    " ": " ",
    '"': '"',
    "/": "/",
    "\\": "\\",
    "N": "\x85",
    "_": "\xa0",
    "L": "\u2028",
    "P": "\u2029",
}

_ESCAPE_CODES: Final[dict[str, int]] = {"x": 2, "u": 4, "U": 8}


class IndentKind(StrEnum):
    MAPPING = "mapping"
    SEQUENCE = "sequence"


@dataclass(frozen=True, slots=True)
class LexerCheckpoint:
    """Lexer checkpoint used by implicit key lookahead."""

    position: int
    diagnostics_position: int


class Lexer:
    """Pull-based YAML scanner.

    Keeps the stack of open block indentation levels and turns indentation
    changes into BLOCK_*_START / BLOCK_END tokens. Implicit keys are detected by
    scanning ahead on the current line and rewinding.
    """

    def __init__(self, source: str) -> None:
        self._source = source
        self._line_index = LineIndex(source)
        self._position = 0
        self._tokens: deque[Token] = deque()
        self._diagnostics: list[Diagnostic] = []
        self._indent = -1
        self._indents: list[tuple[int, IndentKind]] = []
        self._flow_level = 0
        self._allow_simple_key = True
        self._in_simple_key = False
        self._adjacent_value_allowed = False
        self._last_scalar_multiline = False
        self._eof_token: Token | None = None

    @property
    def source(self) -> str:
        return self._source

    @property
    def line_index(self) -> LineIndex:
        return self._line_index

    @property
    def diagnostics(self) -> list[Diagnostic]:
        """List of diagnostics emitted during lexing."""
        return self._diagnostics

    @property
    def position(self) -> int:
        return self._position

    @property
    def is_eof(self) -> bool:
        return self._position >= len(self._source)

    @property
    def indent(self) -> int:
        """Column of the innermost open block collection, -1 at stream level."""
        return self._indent

    def next_token(self) -> Token:
        token = self.peek_token()
        if token.kind != TokenKind.EOF:
            self._tokens.popleft()
        return token

    def peek_token(self) -> Token:
        if self._eof_token is not None and not self._tokens:
            return self._eof_token
        while not self._tokens:
            self._fetch_more_tokens()
        return self._tokens[0]

    def lex(self) -> list[Token]:
        tokens: list[Token] = []
        while True:
            token = self.next_token()
            tokens.append(token)
            if token.kind == TokenKind.EOF:
                break
        return tokens

    def checkpoint(self) -> LexerCheckpoint:
        return LexerCheckpoint(
            position=self._position,
            diagnostics_position=len(self._diagnostics),
        )

    def rewind(self, checkpoint: LexerCheckpoint) -> None:
        self._position = checkpoint.position
        if len(self._diagnostics) > checkpoint.diagnostics_position:
            del self._diagnostics[checkpoint.diagnostics_position :]

    # ------------------------------------------------------------------
    # Token dispatch
    # ------------------------------------------------------------------

    def _fetch_more_tokens(self) -> None:
        self._skip_to_next_token()
        start = self._position
        column = self._line_index.column(start)

        if self._flow_level == 0:
            popped = self._unwind_indent(column)
            if popped and column > self._indent and not self.is_eof:
                self._error(LEXER_INCONSISTENT_DEDENT, start, self._line_end(start))

        if self.is_eof:
            self._fetch_stream_end()
            return

        ch = self._current_char()

        if column == 0:
            if ch == "%":
                self._fetch_directive()
                return
            if self._at_document_marker("---"):
                self._fetch_document_indicator(TokenKind.DOCUMENT_START)
                return
            if self._at_document_marker("..."):
                self._fetch_document_indicator(TokenKind.DOCUMENT_END)
                return

        match ch:
            case "[":
                self._fetch_flow_collection_start(TokenKind.FLOW_SEQUENCE_START)
            case "{":
                self._fetch_flow_collection_start(TokenKind.FLOW_MAPPING_START)
            case "]":
                self._fetch_flow_collection_end(TokenKind.FLOW_SEQUENCE_END)
            case "}":
                self._fetch_flow_collection_end(TokenKind.FLOW_MAPPING_END)
            case ",":
                self._fetch_flow_entry()
            case "-" if self._peek_char() in _BLANK_OR_BREAK:
                self._fetch_block_entry()
            case "?" if self._flow_level > 0 or self._peek_char() in _BLANK_OR_BREAK:
                self._fetch_key()
            case ":" if self._is_value_indicator(self._adjacent_value_allowed):
                self._fetch_value()
            case "|" | ">":
                self._fetch_block_scalar(folded=ch == ">")
            case "&" | "*" | "!" | "'" | '"':
                self._fetch_node_start()
            case _ if self._is_plain_start():
                self._fetch_node_start()
            case _:
                self._advance(1)
                self._error(LEXER_UNEXPECTED_CHARACTER, start, self._position)

    def _fetch_stream_end(self) -> None:
        self._unwind_indent(-1)
        self._allow_simple_key = False
        self._in_simple_key = False
        token = self._make_token(TokenKind.EOF, self._position, self._position)
        self._tokens.append(token)
        self._eof_token = token

    def _fetch_directive(self) -> None:
        self._unwind_indent(-1)
        self._allow_simple_key = False
        start = self._position
        while not self.is_eof and self._current_char() not in _BREAK:
            if self._current_char() == "#" and self._source[self._position - 1] in _BLANK:
                break
            self._advance(1)
        text = self._source[start : self._position].rstrip(_BLANK)
        self._emit(TokenKind.DIRECTIVE, start, start + len(text), value=text)

    def _fetch_document_indicator(self, kind: TokenKind) -> None:
        self._unwind_indent(-1)
        self._flow_level = 0
        self._allow_simple_key = False
        self._in_simple_key = False
        start = self._position
        self._advance(3)
        self._emit(kind, start, self._position)

    def _fetch_flow_collection_start(self, kind: TokenKind) -> None:
        self._flow_level += 1
        self._allow_simple_key = True
        start = self._position
        self._advance(1)
        self._emit(kind, start, self._position)

    def _fetch_flow_collection_end(self, kind: TokenKind) -> None:
        self._flow_level = max(0, self._flow_level - 1)
        self._allow_simple_key = False
        start = self._position
        self._advance(1)
        self._emit(kind, start, self._position)

    def _fetch_flow_entry(self) -> None:
        self._allow_simple_key = True
        start = self._position
        self._advance(1)
        self._emit(TokenKind.FLOW_ENTRY, start, self._position)

    def _fetch_block_entry(self) -> None:
        start = self._position
        column = self._line_index.column(start)
        if self._flow_level > 0 or not self._allow_simple_key:
            self._error(LEXER_SEQUENCE_ENTRY_NOT_ALLOWED, start, start + 1)
        elif self._add_indent(column, IndentKind.SEQUENCE):
            self._emit(TokenKind.BLOCK_SEQUENCE_START, start, start)
        self._allow_simple_key = True
        self._advance(1)
        self._emit(TokenKind.BLOCK_ENTRY, start, self._position)

    def _fetch_key(self) -> None:
        start = self._position
        column = self._line_index.column(start)
        if self._flow_level == 0:
            if not self._allow_simple_key:
                self._error(
                    LEXER_MAPPING_VALUE_NOT_ALLOWED,
                    start,
                    start + 1,
                    message="Mapping keys are not allowed here.",
                )
            elif self._add_indent(column, IndentKind.MAPPING):
                self._emit(TokenKind.BLOCK_MAPPING_START, start, start)
        self._allow_simple_key = self._flow_level == 0
        self._advance(1)
        self._emit(TokenKind.KEY, start, self._position)

    def _fetch_value(self) -> None:
        start = self._position
        column = self._line_index.column(start)
        if self._in_simple_key:
            self._in_simple_key = False
            self._allow_simple_key = False
        else:
            if self._flow_level == 0:
                if not self._allow_simple_key and self._last_scalar_multiline and self._in_block_mapping():
                    # A deeper-indented `key:` line was folded into the scalar above it.
                    line_start = self._line_index.line_start(self._line_index.line_number(start))
                    key_start = line_start + len(self._source[line_start:start]) - len(
                        self._source[line_start:start].lstrip(_BLANK)
                    )
                    self._error(LEXER_MISALIGNED_MAPPING_KEY, key_start, start)
                elif not self._allow_simple_key:
                    self._error(LEXER_MAPPING_VALUE_NOT_ALLOWED, start, start + 1)
                elif self._add_indent(column, IndentKind.MAPPING):
                    self._emit(TokenKind.BLOCK_MAPPING_START, start, start)
            self._allow_simple_key = self._flow_level == 0
        self._advance(1)
        self._emit(TokenKind.VALUE, start, self._position)

    def _fetch_node_start(self) -> None:
        start = self._position
        if self._allow_simple_key and not self._in_simple_key and self._is_simple_key_ahead():
            if self._flow_level == 0:
                column = self._line_index.column(start)
                if self._add_indent(column, IndentKind.MAPPING):
                    self._emit(TokenKind.BLOCK_MAPPING_START, start, start)
            self._emit(TokenKind.KEY, start, start)
            self._in_simple_key = True
        self._allow_simple_key = False

        ch = self._current_char()
        match ch:
            case "&":
                name = self._scan_anchor_name()
                self._emit(TokenKind.ANCHOR, start, self._position, value=name)
            case "*":
                name = self._scan_anchor_name()
                self._emit(TokenKind.ALIAS, start, self._position, value=name)
            case "!":
                tag = self._scan_tag()
                self._emit(TokenKind.TAG, start, self._position, value=tag)
            case "'" | '"':
                value, flags = self._scan_flow_scalar(ch)
                kind = TokenKind.SINGLE_QUOTED_SCALAR if ch == "'" else TokenKind.DOUBLE_QUOTED_SCALAR
                self._emit(kind, start, self._position, flags=flags, value=value)
            case _:
                value, multiline = self._scan_plain(single_line=self._in_simple_key)
                flags = TokenFlags.MULTILINE if multiline else TokenFlags.NONE
                self._emit(TokenKind.PLAIN_SCALAR, start, self._position, flags=flags, value=value)

    def _fetch_block_scalar(self, *, folded: bool) -> None:
        start = self._position
        if self._flow_level > 0:
            self._advance(1)
            self._error(LEXER_BLOCK_SCALAR_IN_FLOW, start, self._position)
            return
        self._allow_simple_key = True
        value = self._scan_block_scalar(folded=folded)
        kind = TokenKind.FOLDED_SCALAR if folded else TokenKind.LITERAL_SCALAR
        self._emit(kind, start, self._position, flags=TokenFlags.MULTILINE, value=value)

    # ------------------------------------------------------------------
    # Indentation stack
    # ------------------------------------------------------------------

    def _add_indent(self, column: int, kind: IndentKind) -> bool:
        if self._indent < column:
            self._indents.append((column, kind))
            self._indent = column
            return True
        return False

    def _in_block_mapping(self) -> bool:
        return bool(self._indents) and self._indents[-1][1] == IndentKind.MAPPING

    def _unwind_indent(self, column: int) -> bool:
        popped = False
        while self._indent > column:
            self._indents.pop()
            self._indent = self._indents[-1][0] if self._indents else -1
            self._emit(TokenKind.BLOCK_END, self._position, self._position)
            popped = True
        return popped

    # ------------------------------------------------------------------
    # Implicit keys
    # ------------------------------------------------------------------

    def _is_simple_key_ahead(self) -> bool:
        """Whether the node starting here is an implicit key on this line."""
        checkpoint = self.checkpoint()
        try:
            start_line = self._line_index.line_number(self._position)
            while self._current_char() in "&!":
                if self._current_char() == "&":
                    self._scan_anchor_name()
                else:
                    self._scan_tag()
                self._skip_blanks()

            ch = self._current_char()
            json_like = False
            if ch == "*":
                self._scan_anchor_name()
            elif ch in "'\"":
                self._scan_flow_scalar(ch)
                json_like = True
            elif self._is_plain_start():
                self._scan_plain(single_line=True)
            else:
                return False

            self._skip_blanks()
            if self._line_index.line_number(self._position) != start_line:
                return False
            return self._current_char() == ":" and self._is_value_indicator(json_like)
        finally:
            self.rewind(checkpoint)

    def _is_value_indicator(self, adjacent_allowed: bool) -> bool:
        if self._current_char() != ":":
            return False
        following = self._peek_char()
        if following in _BLANK_OR_BREAK:
            return True
        if self._flow_level > 0:
            return adjacent_allowed or following in _FLOW_INDICATORS
        return False

    # ------------------------------------------------------------------
    # Scanners (move the position, never touch token state)
    # ------------------------------------------------------------------

    def _skip_to_next_token(self) -> None:
        tab_position: int | None = None
        while True:
            while self._current_char() in _BLANK and not self.is_eof:
                if (
                    self._current_char() == "\t"
                    and self._flow_level == 0
                    and tab_position is None
                    and self._only_blanks_before(self._position)
                ):
                    tab_position = self._position
                self._advance(1)

            if self._current_char() == "#" and not self.is_eof:
                self._skip_to_line_end()

            if self._current_char() in _BREAK and not self.is_eof:
                self._consume_line_break()
                if self._flow_level == 0:
                    self._allow_simple_key = True
                tab_position = None
                continue
            break

        if tab_position is not None and not self.is_eof:
            self._error(LEXER_TAB_INDENTATION, tab_position, tab_position + 1)

    def _scan_anchor_name(self) -> str:
        start = self._position
        self._advance(1)
        name_start = self._position
        while not self.is_eof and self._current_char() not in _NAME_TERMINATORS:
            self._advance(1)
        name = self._source[name_start : self._position]
        if not name:
            self._error(LEXER_EMPTY_ANCHOR_NAME, start, self._position + 1)
        return name

    def _scan_tag(self) -> str:
        start = self._position
        if self._peek_char() == "<":
            self._advance(2)
            while not self.is_eof and self._current_char() not in ">" + _BLANK_OR_BREAK:
                self._advance(1)
            if self._current_char() == ">":
                self._advance(1)
            else:
                self._error(
                    LEXER_UNEXPECTED_CHARACTER,
                    self._position,
                    self._position + 1,
                    message="Verbatim tag is missing its closing `>`.",
                )
            return self._source[start : self._position]

        self._advance(1)
        while not self.is_eof and self._current_char() not in _NAME_TERMINATORS:
            self._advance(1)
        return self._source[start : self._position]

    def _scan_plain(self, *, single_line: bool) -> tuple[str, bool]:
        chunks: list[str] = []
        end = self._position
        min_column = self._indent + 1
        separator = ""
        multiline = False
        broke = False

        while self._current_char() != "#":
            length = 0
            while True:
                ch = self._peek_char(length)
                if ch in _BLANK_OR_BREAK:
                    break
                if ch == ":":
                    following = self._peek_char(length + 1)
                    if following in _BLANK_OR_BREAK:
                        break
                    if self._flow_level > 0 and following in _FLOW_INDICATORS:
                        break
                if self._flow_level > 0 and ch in _FLOW_INDICATORS:
                    break
                length += 1
            if length == 0:
                break

            if broke:
                multiline = True
            chunks.append(separator)
            chunks.append(self._source[self._position : self._position + length])
            self._advance(length)
            end = self._position

            spaces = self._scan_plain_spaces(single_line=single_line, min_column=min_column)
            if spaces is None:
                break
            separator, broke = spaces

        self._position = end
        return "".join(chunks), multiline

    def _scan_plain_spaces(self, *, single_line: bool, min_column: int) -> tuple[str, bool] | None:
        start = self._position
        self._skip_blanks()
        if self.is_eof:
            return None
        if self._current_char() not in _BREAK:
            if self._current_char() == "#":
                return None
            return self._source[start : self._position], False
        if single_line:
            return None

        breaks = 0
        while not self.is_eof:
            ch = self._current_char()
            if ch in _BREAK:
                self._consume_line_break()
                breaks += 1
                if self._at_document_marker("---") or self._at_document_marker("..."):
                    return None
            elif ch in _BLANK:
                self._advance(1)
            else:
                break

        if self.is_eof or self._current_char() == "#":
            return None
        if self._flow_level == 0 and self._line_index.column(self._position) < min_column:
            return None
        return (" " if breaks == 1 else "\n" * (breaks - 1)), True

    def _scan_flow_scalar(self, quote: str) -> tuple[str, TokenFlags]:
        start = self._position
        self._advance(1)
        chunks: list[str] = []
        flags = TokenFlags.NONE

        while True:
            # Non-blank run.
            while True:
                if self.is_eof:
                    self._error(LEXER_UNTERMINATED_QUOTED_SCALAR, start, self._position)
                    return "".join(chunks), flags
                ch = self._current_char()
                if quote == "'" and ch == "'" and self._peek_char() == "'":
                    chunks.append("'")
                    self._advance(2)
                elif ch == quote:
                    self._advance(1)
                    return "".join(chunks), flags
                elif quote == '"' and ch == "\\":
                    flags |= TokenFlags.HAS_ESCAPE
                    self._scan_escape(chunks)
                elif ch in _BLANK or ch in _BREAK:
                    break
                else:
                    chunks.append(ch)
                    self._advance(1)

            # Blank run, folded when it contains line breaks.
            blank_start = self._position
            self._skip_blanks()
            if self._current_char() not in _BREAK or self.is_eof:
                chunks.append(self._source[blank_start : self._position])
                continue

            flags |= TokenFlags.MULTILINE
            breaks = 0
            while not self.is_eof:
                ch = self._current_char()
                if ch in _BREAK:
                    self._consume_line_break()
                    breaks += 1
                    if self._at_document_marker("---") or self._at_document_marker("..."):
                        self._error(
                            LEXER_UNTERMINATED_QUOTED_SCALAR,
                            start,
                            self._position,
                            message="Document marker inside a quoted scalar.",
                        )
                        return "".join(chunks), flags
                elif ch in _BLANK:
                    self._advance(1)
                else:
                    break
            chunks.append(" " if breaks == 1 else "\n" * (breaks - 1))

    def _scan_escape(self, chunks: list[str]) -> None:
        start = self._position
        self._advance(1)
        if self.is_eof:
            return
        ch = self._current_char()

        if ch in _ESCAPE_REPLACEMENTS:
            chunks.append(_ESCAPE_REPLACEMENTS[ch])
            self._advance(1)
            return

        if ch in _ESCAPE_CODES:
            length = _ESCAPE_CODES[ch]
            digits = self._source[self._position + 1 : self._position + 1 + length]
            if len(digits) == length and all(d in "0123456789abcdefABCDEF" for d in digits):
                code_point = int(digits, 16)
                if code_point <= 0x10FFFF:
                    chunks.append(chr(code_point))
                    self._advance(1 + length)
                    return
            self._advance(1)
            self._error(LEXER_INVALID_ESCAPE, start, self._position)
            return

        if ch in _BREAK:
            # Escaped line break: join without a space, keep empty lines.
            self._consume_line_break()
            while not self.is_eof:
                if self._current_char() in _BLANK:
                    self._advance(1)
                elif self._current_char() in _BREAK:
                    self._consume_line_break()
                    chunks.append("\n")
                else:
                    break
            return

        self._advance(1)
        self._error(LEXER_INVALID_ESCAPE, start, self._position)

    def _scan_block_scalar(self, *, folded: bool) -> str:
        self._advance(1)
        chomping: bool | None = None
        increment: int | None = None

        ch = self._current_char()
        if ch in "+-":
            chomping = ch == "+"
            self._advance(1)
            if self._current_char().isdigit():
                increment = int(self._current_char())
                self._advance(1)
        elif ch.isdigit():
            increment = int(ch)
            self._advance(1)
            if self._current_char() in "+-":
                chomping = self._current_char() == "+"
                self._advance(1)

        if increment == 0:
            self._error(
                LEXER_INVALID_BLOCK_SCALAR_HEADER,
                self._position - 1,
                self._position,
                message="Block scalar indentation indicator must be between 1 and 9.",
            )
            increment = 1

        self._skip_blanks()
        if self._current_char() == "#":
            self._skip_to_line_end()
        if not self.is_eof and self._current_char() not in _BREAK:
            header_error_start = self._position
            self._skip_to_line_end()
            self._error(LEXER_INVALID_BLOCK_SCALAR_HEADER, header_error_start, self._position)
        if not self.is_eof:
            self._consume_line_break()

        min_indent = max(self._indent + 1, 1)
        if increment is not None:
            indent = self._indent + increment if self._indent >= 0 else increment
            breaks = self._scan_block_scalar_breaks(indent)
        else:
            breaks, max_indent = self._scan_block_scalar_indentation()
            indent = max(min_indent, max_indent)

        chunks: list[str] = []
        line_break = ""
        while self._line_index.column(self._position) == indent and not self.is_eof:
            chunks.extend(breaks)
            leading_non_blank = self._current_char() not in _BLANK
            line_start = self._position
            self._skip_to_line_end()
            chunks.append(self._source[line_start : self._position])
            line_break = self._consume_line_break()
            breaks = self._scan_block_scalar_breaks(indent)
            if self._line_index.column(self._position) == indent and not self.is_eof:
                if folded and line_break == "\n" and leading_non_blank and self._current_char() not in _BLANK:
                    if not breaks:
                        chunks.append(" ")
                else:
                    chunks.append(line_break)
            else:
                break

        if chomping is not False:
            chunks.append(line_break)
        if chomping is True:
            chunks.extend(breaks)
        return "".join(chunks)

    def _scan_block_scalar_indentation(self) -> tuple[list[str], int]:
        breaks: list[str] = []
        max_indent = 0
        while not self.is_eof and self._current_char() in " \r\n":
            if self._current_char() == " ":
                self._advance(1)
                max_indent = max(max_indent, self._line_index.column(self._position))
            else:
                self._consume_line_break()
                breaks.append("\n")
        return breaks, max_indent

    def _scan_block_scalar_breaks(self, indent: int) -> list[str]:
        breaks: list[str] = []
        self._skip_indentation(indent)
        while not self.is_eof and self._current_char() in _BREAK:
            self._consume_line_break()
            breaks.append("\n")
            self._skip_indentation(indent)
        return breaks

    # ------------------------------------------------------------------
    # Character helpers
    # ------------------------------------------------------------------

    def _is_plain_start(self) -> bool:
        ch = self._current_char()
        if ch in _BLANK_OR_BREAK:
            return False
        if ch in "-?:":
            following = self._peek_char()
            if following in _BLANK_OR_BREAK:
                return False
            return not (self._flow_level > 0 and following in _FLOW_INDICATORS)
        return ch not in _INDICATORS

    def _at_document_marker(self, marker: str) -> bool:
        if self._line_index.column(self._position) != 0:
            return False
        return (
            self._source.startswith(marker, self._position)
            and self._peek_char(3) in _BLANK_OR_BREAK
        )

    def _only_blanks_before(self, offset: int) -> bool:
        line_start = self._line_index.line_start(self._line_index.line_number(offset))
        return self._source[line_start:offset].strip(_BLANK) == ""

    def _line_end(self, offset: int) -> int:
        end = offset
        while end < len(self._source) and self._source[end] not in _BREAK:
            end += 1
        return end

    def _skip_blanks(self) -> None:
        while not self.is_eof and self._current_char() in _BLANK:
            self._advance(1)

    def _skip_indentation(self, indent: int) -> None:
        while (
            not self.is_eof
            and self._current_char() == " "
            and self._line_index.column(self._position) < indent
        ):
            self._advance(1)

    def _skip_to_line_end(self) -> None:
        # Consume until end of line, do not consume the line break itself.
        while not self.is_eof and self._current_char() not in _BREAK:
            self._advance(1)

    def _consume_line_break(self) -> str:
        if self._current_char() == "\n":
            self._advance(1)
            return "\n"
        if self._current_char() == "\r":
            if self._peek_char() == "\n":
                self._advance(2)
            else:
                self._advance(1)
            return "\n"
        return ""

    def _current_char(self) -> str:
        if self.is_eof:
            return _EOF_CHAR
        return self._source[self._position]

    def _peek_char(self, ahead: int = 1) -> str:
        index = self._position + ahead
        if index >= len(self._source):
            return _EOF_CHAR
        return self._source[index]

    def _advance(self, steps: int) -> None:
        self._position += steps

    # ------------------------------------------------------------------
    # Emission
    # ------------------------------------------------------------------

    def _make_token(
        self,
        kind: TokenKind,
        start: int,
        end: int,
        flags: TokenFlags = TokenFlags.NONE,
        value: str | None = None,
    ) -> Token:
        line = self._line_index.line_number(start)
        column = start - self._line_index.line_start(line)
        if self._only_blanks_before(start):
            flags |= TokenFlags.PRECEDING_LINE_BREAK
        return Token(
            kind=kind,
            range=TextRange.from_offsets(start, end),
            line=line,
            column=column,
            flags=flags,
            value=value,
        )

    def _emit(
        self,
        kind: TokenKind,
        start: int,
        end: int,
        *,
        flags: TokenFlags = TokenFlags.NONE,
        value: str | None = None,
    ) -> None:
        self._tokens.append(self._make_token(kind, start, end, flags, value))
        self._adjacent_value_allowed = kind in (
            TokenKind.SINGLE_QUOTED_SCALAR,
            TokenKind.DOUBLE_QUOTED_SCALAR,
            TokenKind.FLOW_SEQUENCE_END,
            TokenKind.FLOW_MAPPING_END,
        )
        self._last_scalar_multiline = kind == TokenKind.PLAIN_SCALAR and bool(flags & TokenFlags.MULTILINE)

    def _error(self, spec: DiagnosticSpec, start: int, end: int, *, message: str | None = None) -> None:
        end = min(max(start, end), len(self._source))
        start = min(start, end)
        self._diagnostics.append(
            Diagnostic.from_spec(
                spec,
                TextRange.from_offsets(start, end),
                self._line_index,
                message=message,
            )
        )


def token_text(source: str, token: Token) -> str:
    """Get the text of a token from the source string based on its range."""
    if token.kind == TokenKind.EOF:
        return ""
    return slice_text_range(source, token.range)
