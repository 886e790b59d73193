"""Parser infrastructure (pull lexer + event-based parser + node tree sink)."""

from yamlnode.parser.document import decode_source, parse, parse_result
from yamlnode.parser.event import (
    AliasEvent,
    CollectionKind,
    Event,
    FinishEvent,
    NullEvent,
    ScalarEvent,
    StartEvent,
    process_events,
)
from yamlnode.parser.grammar import BlockFrame, FrameKind, parse_block_node, parse_document, parse_stream
from yamlnode.parser.options import DEFAULT_MAX_DEPTH, DuplicateKeyPolicy, ParseMode, ParserOptions
from yamlnode.parser.parse import build_node_tree
from yamlnode.parser.parse_recovery import ParseRecoveryTokenSet, RecoveryError
from yamlnode.parser.parser import ParseAborted, Parser, ParserProgress
from yamlnode.parser.tree_sink import NodeTreeSink, ParsedNodeTree

__all__ = [
    "DEFAULT_MAX_DEPTH",
    "AliasEvent",
    "BlockFrame",
    "CollectionKind",
    "DuplicateKeyPolicy",
    "Event",
    "FinishEvent",
    "FrameKind",
    "NodeTreeSink",
    "NullEvent",
    "ParseAborted",
    "ParseMode",
    "ParseRecoveryTokenSet",
    "ParsedNodeTree",
    "Parser",
    "ParserOptions",
    "ParserProgress",
    "RecoveryError",
    "ScalarEvent",
    "StartEvent",
    "build_node_tree",
    "decode_source",
    "parse",
    "parse_block_node",
    "parse_document",
    "parse_result",
    "parse_stream",
    "process_events",
]
