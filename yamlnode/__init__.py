"""Parse YAML documents into immutable node trees."""

from yamlnode.decode import DecodeError, DecodeErrorKind, YamlDecoder, decode
from yamlnode.diagnostics import Diagnostic, ErrorKind
from yamlnode.errors import ParseError
from yamlnode.node import (
    MappingNode,
    Node,
    NodeKind,
    NodeView,
    NullNode,
    ScalarInterpretation,
    ScalarKind,
    ScalarNode,
    ScalarStyle,
    SequenceNode,
)
from yamlnode.parser import DuplicateKeyPolicy, ParseMode, ParserOptions, parse, parse_result
from yamlnode.pipeline import YamlParseResult

__all__ = [
    "DecodeError",
    "DecodeErrorKind",
    "Diagnostic",
    "DuplicateKeyPolicy",
    "ErrorKind",
    "MappingNode",
    "Node",
    "NodeKind",
    "NodeView",
    "NullNode",
    "ParseError",
    "ParseMode",
    "ParserOptions",
    "ScalarInterpretation",
    "ScalarKind",
    "ScalarNode",
    "ScalarStyle",
    "SequenceNode",
    "YamlDecoder",
    "YamlParseResult",
    "decode",
    "parse",
    "parse_result",
]
