"""YAML grammar: documents, block collections and flow collections."""

from dataclasses import dataclass
from enum import StrEnum
from typing import Final

from yamlnode.diagnostics.codes import (
    PARSER_EXPECTED_DOCUMENT_END,
    PARSER_EXPECTED_DOCUMENT_START,
    PARSER_EXPECTED_FLOW_SEPARATOR,
    PARSER_EXPECTED_KEY,
    PARSER_EXPECTED_NODE,
    PARSER_EXPECTED_SEQUENCE_ENTRY,
    PARSER_NESTING_TOO_DEEP,
    PARSER_UNCLOSED_FLOW_COLLECTION,
    PARSER_UNEXPECTED_INDENTATION,
)
from yamlnode.lexer import Token, TokenKind
from yamlnode.node.model import ScalarStyle
from yamlnode.parser.event import (
    AliasEvent,
    CollectionKind,
    FinishEvent,
    NullEvent,
    ScalarEvent,
    StartEvent,
)
from yamlnode.parser.parse_recovery import ParseRecoveryTokenSet
from yamlnode.parser.parser import ParseAborted, Parser, ParserProgress
from yamlnode.text import TextRange

DOCUMENT_BOUNDARY: Final[frozenset[TokenKind]] = frozenset(
    {TokenKind.DOCUMENT_START, TokenKind.DOCUMENT_END, TokenKind.EOF}
)
# Inside brackets the lexer only closes block levels when the document ends.
_FLOW_BOUNDARY: Final[frozenset[TokenKind]] = DOCUMENT_BOUNDARY | {TokenKind.BLOCK_END}

_PROPERTIES: Final[frozenset[TokenKind]] = frozenset({TokenKind.ANCHOR, TokenKind.TAG})

_SCALAR_STYLES: Final[dict[TokenKind, ScalarStyle]] = {
    TokenKind.PLAIN_SCALAR: ScalarStyle.PLAIN,
    TokenKind.SINGLE_QUOTED_SCALAR: ScalarStyle.SINGLE_QUOTED,
    TokenKind.DOUBLE_QUOTED_SCALAR: ScalarStyle.DOUBLE_QUOTED,
    TokenKind.LITERAL_SCALAR: ScalarStyle.LITERAL,
    TokenKind.FOLDED_SCALAR: ScalarStyle.FOLDED,
}

# Tokens after `key:` / `? ` / `- ` that mean the node is empty.
_MAPPING_EMPTY_FOLLOWERS: Final[frozenset[TokenKind]] = frozenset(
    {TokenKind.KEY, TokenKind.VALUE, TokenKind.BLOCK_END}
)
_SEQUENCE_EMPTY_FOLLOWERS: Final[frozenset[TokenKind]] = frozenset(
    {TokenKind.BLOCK_ENTRY, TokenKind.BLOCK_END}
)
_INDENTLESS_EMPTY_FOLLOWERS: Final[frozenset[TokenKind]] = frozenset(
    {TokenKind.BLOCK_ENTRY, TokenKind.KEY, TokenKind.VALUE, TokenKind.BLOCK_END}
)

_MAPPING_RECOVERY: Final[ParseRecoveryTokenSet] = ParseRecoveryTokenSet(
    _MAPPING_EMPTY_FOLLOWERS | DOCUMENT_BOUNDARY
)
_SEQUENCE_RECOVERY: Final[ParseRecoveryTokenSet] = ParseRecoveryTokenSet(
    _SEQUENCE_EMPTY_FOLLOWERS | DOCUMENT_BOUNDARY
)


class FrameKind(StrEnum):
    BLOCK_MAPPING = "block_mapping"
    BLOCK_SEQUENCE = "block_sequence"
    INDENTLESS_SEQUENCE = "indentless_sequence"


@dataclass(slots=True)
class BlockFrame:
    """An open block collection and the column its entries start at."""

    kind: FrameKind
    indent: int
    expect_value: bool = False


def parse_stream(parser: Parser) -> None:
    """Parse the first document of the stream into events."""
    try:
        parse_document(parser)
    except ParseAborted:
        pass


def parse_document(parser: Parser) -> None:
    while parser.eat(TokenKind.DOCUMENT_END):
        pass

    if parser.at(TokenKind.DIRECTIVE):
        while parser.eat(TokenKind.DIRECTIVE):
            pass
        if not parser.at(TokenKind.DOCUMENT_START):
            parser.error_at_current(PARSER_EXPECTED_DOCUMENT_START)
            parser.abort()

    parser.eat(TokenKind.DOCUMENT_START)
    if parser.at_set(DOCUMENT_BOUNDARY):
        parser.push(NullEvent(range=_empty_range(parser.current)))
    else:
        parse_block_node(parser)

    if not parser.at_set(DOCUMENT_BOUNDARY):
        parser.error_at_current(PARSER_EXPECTED_DOCUMENT_END)


def parse_block_node(parser: Parser) -> None:
    """Parse one block node, driving nested block collections with a frame stack."""
    frames: list[BlockFrame] = []
    _begin_node(parser, frames, indentless_allowed=False)

    while frames:
        frame = frames[-1]
        match frame.kind:
            case FrameKind.BLOCK_MAPPING:
                _block_mapping_step(parser, frames, frame)
            case FrameKind.BLOCK_SEQUENCE:
                _block_sequence_step(parser, frames, frame)
            case FrameKind.INDENTLESS_SEQUENCE:
                _indentless_sequence_step(parser, frames, frame)


def _block_mapping_step(parser: Parser, frames: list[BlockFrame], frame: BlockFrame) -> None:
    token = parser.current
    match token.kind:
        case TokenKind.KEY:
            if frame.expect_value:
                parser.push(NullEvent(range=_empty_range(token)))
            parser.bump()
            frame.expect_value = True
            _block_child(parser, frames, frame, token, _MAPPING_EMPTY_FOLLOWERS, indentless_allowed=True)
        case TokenKind.VALUE:
            if not frame.expect_value:
                parser.push(NullEvent(range=_empty_range(token)))
            parser.bump()
            frame.expect_value = False
            _block_child(parser, frames, frame, token, _MAPPING_EMPTY_FOLLOWERS, indentless_allowed=True)
        case TokenKind.BLOCK_END:
            if frame.expect_value:
                parser.push(NullEvent(range=_empty_range(token)))
                frame.expect_value = False
            parser.bump()
            _close_block(parser, frames, token)
        case _:
            _unexpected_in_block(parser, frame)


def _block_sequence_step(parser: Parser, frames: list[BlockFrame], frame: BlockFrame) -> None:
    token = parser.current
    match token.kind:
        case TokenKind.BLOCK_ENTRY:
            parser.bump()
            _block_child(parser, frames, frame, token, _SEQUENCE_EMPTY_FOLLOWERS, indentless_allowed=False)
        case TokenKind.BLOCK_END:
            parser.bump()
            _close_block(parser, frames, token)
        case _:
            _unexpected_in_block(parser, frame)


def _indentless_sequence_step(parser: Parser, frames: list[BlockFrame], frame: BlockFrame) -> None:
    token = parser.current
    if token.kind == TokenKind.BLOCK_ENTRY:
        parser.bump()
        _block_child(parser, frames, frame, token, _INDENTLESS_EMPTY_FOLLOWERS, indentless_allowed=False)
        return
    # Anything but `- ` at the same column closes the sequence without consuming.
    _close_block(parser, frames, token)


def _block_child(
    parser: Parser,
    frames: list[BlockFrame],
    frame: BlockFrame,
    indicator: Token,
    empty_followers: frozenset[TokenKind],
    *,
    indentless_allowed: bool,
) -> None:
    token = parser.current
    if token.kind in empty_followers:
        parser.push(NullEvent(range=_empty_range(token)))
        return

    # Content on a line after its indicator must be indented deeper than the
    # parent, except `- ` entries of an indentless sequence.
    if (
        token.line != indicator.line
        and token.column <= frame.indent
        and not (indentless_allowed and token.kind == TokenKind.BLOCK_ENTRY)
    ):
        parser.push(NullEvent(range=_empty_range(token)))
        return

    _begin_node(parser, frames, indentless_allowed=indentless_allowed)


def _begin_node(parser: Parser, frames: list[BlockFrame], *, indentless_allowed: bool) -> None:
    if parser.at(TokenKind.ALIAS):
        _alias(parser)
        return

    start = parser.current
    anchor, tag = _parse_properties(parser)
    token = parser.current

    if indentless_allowed and token.kind == TokenKind.BLOCK_ENTRY:
        _open_block(parser, frames, FrameKind.INDENTLESS_SEQUENCE, token, anchor, tag)
    elif token.kind.is_scalar:
        _scalar(parser, anchor, tag)
    elif token.kind.is_flow_start:
        parse_flow_collection(parser, anchor, tag, depth=len(frames) + 1)
    elif token.kind == TokenKind.BLOCK_MAPPING_START:
        parser.bump()
        _open_block(parser, frames, FrameKind.BLOCK_MAPPING, token, anchor, tag)
    elif token.kind == TokenKind.BLOCK_SEQUENCE_START:
        parser.bump()
        _open_block(parser, frames, FrameKind.BLOCK_SEQUENCE, token, anchor, tag)
    elif anchor is not None or tag is not None:
        parser.push(NullEvent(range=start.range, anchor=anchor, tag=tag))
    else:
        parser.error_at_current(PARSER_EXPECTED_NODE)


def _open_block(
    parser: Parser,
    frames: list[BlockFrame],
    kind: FrameKind,
    token: Token,
    anchor: str | None,
    tag: str | None,
) -> None:
    if len(frames) >= parser.options.max_depth:
        parser.error(PARSER_NESTING_TOO_DEEP, token.range)
        parser.abort()

    frames.append(BlockFrame(kind=kind, indent=token.column))
    collection = CollectionKind.MAPPING if kind == FrameKind.BLOCK_MAPPING else CollectionKind.SEQUENCE
    parser.push(StartEvent(kind=collection, range=token.range, anchor=anchor, tag=tag))


def _close_block(parser: Parser, frames: list[BlockFrame], token: Token) -> None:
    frames.pop()
    parser.push(FinishEvent(range=_empty_range(token)))


def _unexpected_in_block(parser: Parser, frame: BlockFrame) -> None:
    token = parser.current
    is_mapping = frame.kind == FrameKind.BLOCK_MAPPING

    if token.kind.is_block_start or (token.has_preceding_line_break() and token.column != frame.indent):
        spec = PARSER_UNEXPECTED_INDENTATION
    elif is_mapping:
        spec = PARSER_EXPECTED_KEY
    else:
        spec = PARSER_EXPECTED_SEQUENCE_ENTRY
    parser.error_at_current(spec)

    if token.kind in DOCUMENT_BOUNDARY:
        parser.abort()
    recovery = _MAPPING_RECOVERY if is_mapping else _SEQUENCE_RECOVERY
    if recovery.recover(parser) is not None:
        parser.abort()


def parse_flow_collection(parser: Parser, anchor: str | None, tag: str | None, *, depth: int) -> None:
    """Parse `[...]` or `{...}`; indentation is ignored until the closing bracket."""
    open_token = parser.current
    if depth > parser.options.max_depth:
        parser.error(PARSER_NESTING_TOO_DEEP, open_token.range)
        parser.abort()
    parser.bump()

    is_mapping = open_token.kind == TokenKind.FLOW_MAPPING_START
    closing = TokenKind.FLOW_MAPPING_END if is_mapping else TokenKind.FLOW_SEQUENCE_END
    entry_end = frozenset({TokenKind.FLOW_ENTRY, closing}) | _FLOW_BOUNDARY
    recovery = ParseRecoveryTokenSet(entry_end)

    parser.push(
        StartEvent(
            kind=CollectionKind.MAPPING if is_mapping else CollectionKind.SEQUENCE,
            range=open_token.range,
            anchor=anchor,
            tag=tag,
            flow=True,
        )
    )

    progress = ParserProgress()
    while not parser.at(closing):
        progress.assert_progressing(parser)
        if parser.at_set(_FLOW_BOUNDARY):
            parser.error(PARSER_UNCLOSED_FLOW_COLLECTION, open_token.range)
            parser.abort()

        if is_mapping:
            _parse_flow_mapping_entry(parser, entry_end, depth=depth)
        else:
            _parse_flow_sequence_entry(parser, entry_end, depth=depth)

        if parser.at(closing) or parser.at_set(_FLOW_BOUNDARY):
            continue
        if not parser.eat(TokenKind.FLOW_ENTRY):
            parser.error_at_current(PARSER_EXPECTED_FLOW_SEPARATOR)
            recovery.recover(parser)
            parser.eat(TokenKind.FLOW_ENTRY)

    close_token = parser.bump()
    parser.push(FinishEvent(range=close_token.range))


def _parse_flow_sequence_entry(parser: Parser, terminators: frozenset[TokenKind], *, depth: int) -> None:
    token = parser.current
    if token.kind in (TokenKind.KEY, TokenKind.VALUE):
        # `[a: 1]` is a sequence holding a single-pair mapping.
        parser.push(StartEvent(kind=CollectionKind.MAPPING, range=_empty_range(token), flow=True))
        parser.eat(TokenKind.KEY)
        _parse_flow_pair(parser, terminators, depth=depth + 1)
        parser.push(FinishEvent(range=_empty_range(parser.current)))
        return
    _parse_flow_node(parser, depth=depth)


def _parse_flow_mapping_entry(parser: Parser, terminators: frozenset[TokenKind], *, depth: int) -> None:
    if parser.at(TokenKind.FLOW_ENTRY):
        parser.error_at_current(PARSER_EXPECTED_NODE)
        return
    parser.eat(TokenKind.KEY)
    _parse_flow_pair(parser, terminators, depth=depth)


def _parse_flow_pair(parser: Parser, terminators: frozenset[TokenKind], *, depth: int) -> None:
    if parser.at(TokenKind.VALUE) or parser.at_set(terminators):
        parser.push(NullEvent(range=_empty_range(parser.current)))
    else:
        _parse_flow_node(parser, depth=depth)

    if not parser.eat(TokenKind.VALUE):
        parser.push(NullEvent(range=_empty_range(parser.current)))
        return

    if parser.at_set(terminators):
        parser.push(NullEvent(range=_empty_range(parser.current)))
    else:
        _parse_flow_node(parser, depth=depth)


def _parse_flow_node(parser: Parser, *, depth: int) -> None:
    if parser.at(TokenKind.ALIAS):
        _alias(parser)
        return

    start = parser.current
    anchor, tag = _parse_properties(parser)
    token = parser.current

    if token.kind.is_scalar:
        _scalar(parser, anchor, tag)
    elif token.kind.is_flow_start:
        parse_flow_collection(parser, anchor, tag, depth=depth + 1)
    elif anchor is not None or tag is not None:
        parser.push(NullEvent(range=start.range, anchor=anchor, tag=tag))
    else:
        parser.error_at_current(PARSER_EXPECTED_NODE)


def _parse_properties(parser: Parser) -> tuple[str | None, str | None]:
    anchor: str | None = None
    tag: str | None = None
    while parser.at_set(_PROPERTIES):
        token = parser.bump()
        if token.kind == TokenKind.ANCHOR:
            anchor = token.value
        else:
            tag = token.value
    return anchor, tag


def _scalar(parser: Parser, anchor: str | None, tag: str | None) -> None:
    token = parser.bump()
    parser.push(
        ScalarEvent(
            value=token.value or "",
            style=_SCALAR_STYLES[token.kind],
            range=token.range,
            anchor=anchor,
            tag=tag,
        )
    )


def _alias(parser: Parser) -> None:
    token = parser.bump()
    parser.push(AliasEvent(name=token.value or "", range=token.range))


def _empty_range(token: Token) -> TextRange:
    return TextRange.empty(token.range.start)
