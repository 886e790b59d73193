"""High-level parse entrypoints for YAML source text."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from yamlnode.diagnostics import Diagnostic, collect_diagnostics, has_errors
from yamlnode.diagnostics.codes import INPUT_INVALID_UTF8
from yamlnode.lexer import Lexer
from yamlnode.parser.grammar import parse_stream
from yamlnode.parser.options import ParseMode, ParserOptions
from yamlnode.parser.parse import build_node_tree
from yamlnode.parser.parser import Parser
from yamlnode.text import LineIndex, TextRange

if TYPE_CHECKING:
    from yamlnode.node import Node
    from yamlnode.pipeline import YamlParseResult

_LOGGER = logging.getLogger(__name__)

_BOM = "\ufeff"


def _resolve_options(
    options: ParserOptions | None,
    mode: ParseMode | None,
) -> ParserOptions:
    if mode is not None and options is not None:
        raise ValueError("Pass either options or mode, not both")

    if options is not None:
        return options

    if mode is not None:
        return ParserOptions.for_mode(mode)

    return ParserOptions()


def decode_source(data: str | bytes) -> tuple[str, Diagnostic | None]:
    """Decode input to text, dropping a leading byte order mark.

    Bytes must be UTF-8. On failure the returned text is the valid prefix and
    the diagnostic points just past it.
    """
    if isinstance(data, str):
        return data.removeprefix(_BOM), None

    try:
        return data.decode("utf-8").removeprefix(_BOM), None
    except UnicodeDecodeError as exc:
        prefix = data[: exc.start].decode("utf-8")
        offset = len(prefix)
        diagnostic = Diagnostic.from_spec(
            INPUT_INVALID_UTF8,
            TextRange.from_offsets(offset, offset),
            LineIndex(prefix),
            message=f"Input bytes are not valid UTF-8 (byte offset {exc.start}).",
        )
        return prefix, diagnostic


def parse_result(
    text: str | bytes,
    options: ParserOptions | None = None,
    *,
    mode: ParseMode | None = None,
) -> YamlParseResult:
    from yamlnode.pipeline import YamlParseResult

    resolved_options = _resolve_options(options=options, mode=mode)
    source, decode_error = decode_source(text)
    if decode_error is not None:
        _LOGGER.debug("rejected undecodable input at %d:%d", decode_error.line, decode_error.column)
        return YamlParseResult(
            source_text=source,
            root=None,
            diagnostics=[decode_error],
            options=resolved_options,
        )

    lexer = Lexer(source)
    parser = Parser(lexer, options=resolved_options)
    parse_stream(parser)
    events, parser_diagnostics = parser.finish()
    diagnostics = collect_diagnostics(lexer.diagnostics, parser_diagnostics)

    root: Node | None = None
    if not has_errors(diagnostics):
        tree = build_node_tree(events, lexer.line_index, resolved_options)
        diagnostics = collect_diagnostics(diagnostics, tree.diagnostics)
        if not has_errors(diagnostics):
            root = tree.root

    _LOGGER.debug(
        "parsed %d characters: %d events, %d diagnostics, root=%s",
        len(source),
        len(events),
        len(diagnostics),
        None if root is None else root.kind,
    )
    return YamlParseResult(
        source_text=source,
        root=root,
        diagnostics=diagnostics,
        options=resolved_options,
    )


def parse(
    text: str | bytes,
    options: ParserOptions | None = None,
    *,
    mode: ParseMode | None = None,
) -> Node:
    """Parse the first YAML document in `text` into a node tree.

    Raises `ParseError` for the earliest error; no partial tree is returned.
    """
    return parse_result(text, options, mode=mode).unwrap()
