"""Node tree sink for parser events."""

from dataclasses import dataclass, field

from yamlnode.diagnostics import Diagnostic, DiagnosticSpec
from yamlnode.diagnostics.codes import (
    TREE_DUPLICATE_KEY,
    TREE_DUPLICATE_KEY_RESOLVED,
    TREE_NON_SCALAR_KEY,
    TREE_UNDEFINED_ALIAS,
)
from yamlnode.node.model import MappingNode, Node, NullNode, ScalarNode, ScalarStyle, SequenceNode
from yamlnode.node.scalar import STRING_TAGS
from yamlnode.parser.event import (
    AliasEvent,
    CollectionKind,
    FinishEvent,
    NullEvent,
    ScalarEvent,
    StartEvent,
)
from yamlnode.parser.options import DuplicateKeyPolicy, ParserOptions
from yamlnode.text import LineIndex, TextRange


@dataclass(frozen=True, slots=True)
class ParsedNodeTree:
    root: Node | None
    diagnostics: list[Diagnostic]


@dataclass(slots=True)
class _OpenCollection:
    start: StartEvent
    items: list[Node] = field(default_factory=list)
    entries: dict[str, Node] = field(default_factory=dict)
    key: str | None = None
    key_range: TextRange | None = None
    expecting_value: bool = False


class NodeTreeSink:
    """Folds parser events into an immutable node tree.

    Applies the duplicate key policy, resolves aliases against anchors defined
    earlier in the document, and rejects non-scalar mapping keys.
    """

    def __init__(self, line_index: LineIndex, options: ParserOptions | None = None) -> None:
        self._line_index = line_index
        self._options = options or ParserOptions()
        self._stack: list[_OpenCollection] = []
        self._anchors: dict[str, Node] = {}
        self._root: Node | None = None
        self._diagnostics: list[Diagnostic] = []

    @property
    def diagnostics(self) -> list[Diagnostic]:
        return self._diagnostics

    def start_collection(self, event: StartEvent) -> None:
        self._stack.append(_OpenCollection(start=event))

    def finish_collection(self, event: FinishEvent) -> None:
        collection = self._stack.pop()
        node: Node
        if collection.start.kind == CollectionKind.MAPPING:
            node = MappingNode(collection.entries)
        else:
            node = SequenceNode(tuple(collection.items))
        self._register_anchor(collection.start.anchor, node)
        self._add(node, collection.start.range)

    def scalar(self, event: ScalarEvent) -> None:
        node = ScalarNode(value=event.value, style=event.style, tag=event.tag)
        self._register_anchor(event.anchor, node)
        self._add(node, event.range)

    def null(self, event: NullEvent) -> None:
        node: Node
        if event.tag in STRING_TAGS:
            node = ScalarNode(value="", style=ScalarStyle.PLAIN, tag=event.tag)
        else:
            node = NullNode()
        self._register_anchor(event.anchor, node)
        self._add(node, event.range)

    def alias(self, event: AliasEvent) -> None:
        node = self._anchors.get(event.name)
        if node is None:
            self._error(
                TREE_UNDEFINED_ALIAS,
                event.range,
                message=f"Alias `*{event.name}` refers to an undefined anchor.",
            )
            node = NullNode()
        # Nodes are immutable, so sharing the anchored subtree is indistinguishable from a copy.
        self._add(node, event.range)

    def finish(self) -> ParsedNodeTree:
        if self._stack:
            raise RuntimeError("finish called with unclosed collections")
        return ParsedNodeTree(root=self._root, diagnostics=self._diagnostics)

    def _register_anchor(self, anchor: str | None, node: Node) -> None:
        if anchor is not None:
            self._anchors[anchor] = node

    def _add(self, node: Node, range: TextRange) -> None:
        if not self._stack:
            self._root = node
            return

        parent = self._stack[-1]
        if parent.start.kind == CollectionKind.SEQUENCE:
            parent.items.append(node)
            return

        if not parent.expecting_value:
            parent.key = self._key_text(node, range)
            parent.key_range = range
            parent.expecting_value = True
            return

        parent.expecting_value = False
        key = parent.key
        key_range = parent.key_range
        parent.key = None
        parent.key_range = None
        if key is None or key_range is None:
            return
        self._insert(parent, key, key_range, node)

    def _key_text(self, node: Node, range: TextRange) -> str | None:
        if isinstance(node, ScalarNode):
            return node.value
        if isinstance(node, NullNode):
            return ""
        self._error(TREE_NON_SCALAR_KEY, range)
        return None

    def _insert(self, parent: _OpenCollection, key: str, key_range: TextRange, value: Node) -> None:
        if key not in parent.entries:
            parent.entries[key] = value
            return

        match self._options.duplicate_keys:
            case DuplicateKeyPolicy.ERROR:
                self._error(
                    TREE_DUPLICATE_KEY,
                    key_range,
                    message=f"Duplicate mapping key `{key}`.",
                )
            case DuplicateKeyPolicy.FIRST_WINS:
                self._error(
                    TREE_DUPLICATE_KEY_RESOLVED,
                    key_range,
                    message=f"Duplicate mapping key `{key}`; the first value is kept.",
                )
            case DuplicateKeyPolicy.LAST_WINS:
                parent.entries[key] = value
                self._error(
                    TREE_DUPLICATE_KEY_RESOLVED,
                    key_range,
                    message=f"Duplicate mapping key `{key}`; the last value wins.",
                )

    def _error(self, spec: DiagnosticSpec, range: TextRange, *, message: str | None = None) -> None:
        self._diagnostics.append(Diagnostic.from_spec(spec, range, self._line_index, message=message))
