"""Consumer views built on top of document nodes."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass

from yamlnode.node.model import Node, ScalarNode
from yamlnode.node.scalar import ScalarInterpretation


@dataclass(frozen=True, slots=True)
class NodeView:
    """Explicit lookup helpers over one `Node`."""

    node: Node

    @property
    def is_mapping(self) -> bool:
        return self.node.as_mapping() is not None

    @property
    def is_sequence(self) -> bool:
        return self.node.as_sequence() is not None

    @property
    def is_scalar(self) -> bool:
        return self.node.as_scalar() is not None

    @property
    def is_null(self) -> bool:
        return self.node.is_null

    def get(self, key: str) -> Node | None:
        mapping = self.node.as_mapping()
        if mapping is None:
            return None
        return mapping.get(key)

    def at(self, index: int) -> Node | None:
        items = self.node.as_sequence()
        if items is None or not -len(items) <= index < len(items):
            return None
        return items[index]

    def child(self, key: str) -> NodeView | None:
        node = self.get(key)
        if node is None:
            return None
        return NodeView(node)

    def path(self, *parts: str | int) -> Node | None:
        """Follow mapping keys (str) and sequence indexes (int) from this node."""
        current: Node | None = self.node
        for part in parts:
            if current is None:
                return None
            view = NodeView(current)
            current = view.at(part) if isinstance(part, int) else view.get(part)
        return current

    def get_scalar(
        self,
        key: str,
        *,
        allow_quoted: bool = False,
    ) -> ScalarInterpretation | None:
        scalar = _as_scalar(self.get(key))
        if scalar is None:
            return None
        return scalar.interpret(allow_quoted=allow_quoted)

    def scalars(self, *, allow_quoted: bool = False) -> Mapping[str, ScalarInterpretation] | None:
        """Interpretations of the scalar-valued entries of a mapping."""
        mapping = self.node.as_mapping()
        if mapping is None:
            return None
        interpretations: dict[str, ScalarInterpretation] = {}
        for key, value in mapping.items():
            scalar = _as_scalar(value)
            if scalar is None:
                continue
            interpretations[key] = scalar.interpret(allow_quoted=allow_quoted)
        return interpretations


def _as_scalar(value: Node | None) -> ScalarNode | None:
    if isinstance(value, ScalarNode):
        return value
    return None


__all__ = ["NodeView"]
