"""Document node model, scalar interpretation and consumer views."""

from yamlnode.node.model import (
    MappingNode,
    Node,
    NodeKind,
    NullNode,
    ScalarNode,
    ScalarStyle,
    SequenceNode,
)
from yamlnode.node.scalar import (
    ScalarInterpretation,
    ScalarKind,
    interpret_scalar,
    parse_bool,
    parse_float,
    parse_int,
    parse_null,
)
from yamlnode.node.views import NodeView

__all__ = [
    "MappingNode",
    "Node",
    "NodeKind",
    "NodeView",
    "NullNode",
    "ScalarInterpretation",
    "ScalarKind",
    "ScalarNode",
    "ScalarStyle",
    "SequenceNode",
    "interpret_scalar",
    "parse_bool",
    "parse_float",
    "parse_int",
    "parse_null",
]
