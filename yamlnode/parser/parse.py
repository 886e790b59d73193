"""Helpers to build a node tree from parser events."""

from yamlnode.parser.event import Event, process_events
from yamlnode.parser.options import ParserOptions
from yamlnode.parser.tree_sink import NodeTreeSink, ParsedNodeTree
from yamlnode.text import LineIndex


def build_node_tree(
    events: list[Event],
    line_index: LineIndex,
    options: ParserOptions | None = None,
) -> ParsedNodeTree:
    sink = NodeTreeSink(line_index=line_index, options=options)
    process_events(sink, events)
    return sink.finish()
