"""Immutable document tree."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from enum import StrEnum
from types import MappingProxyType
from typing import Any, ClassVar

from yamlnode.node.scalar import ScalarInterpretation, interpret_scalar


class NodeKind(StrEnum):
    MAPPING = "mapping"
    SEQUENCE = "sequence"
    SCALAR = "scalar"
    NULL = "null"


class ScalarStyle(StrEnum):
    """How a scalar was written in the source. Presentation only."""

    PLAIN = "plain"
    SINGLE_QUOTED = "single_quoted"
    DOUBLE_QUOTED = "double_quoted"
    LITERAL = "literal"
    FOLDED = "folded"

    @property
    def is_quoted(self) -> bool:
        return self in (ScalarStyle.SINGLE_QUOTED, ScalarStyle.DOUBLE_QUOTED)

    @property
    def is_block(self) -> bool:
        return self in (ScalarStyle.LITERAL, ScalarStyle.FOLDED)


class Node:
    """Base of the closed node variants.

    Accessors for the wrong variant return `None`; querying a node for a shape
    it does not have is an ordinary outcome, not an error.
    """

    __slots__ = ()

    kind: ClassVar[NodeKind]

    def as_mapping(self) -> Mapping[str, Node] | None:
        return None

    def as_sequence(self) -> tuple[Node, ...] | None:
        return None

    def as_scalar(self) -> str | None:
        return None

    @property
    def is_null(self) -> bool:
        return self.kind == NodeKind.NULL

    def to_python(self) -> Any:
        """Convert the tree to plain `dict` / `list` / scalar values.

        A subtree shared through an alias converts once; every reference to it
        receives the same Python object.
        """
        return self._to_python({})

    def _to_python(self, memo: dict[int, Any]) -> Any:
        raise NotImplementedError


@dataclass(frozen=True, slots=True, init=False, eq=False, repr=False)
class MappingNode(Node):
    """String-keyed mapping that keeps insertion order.

    Equality ignores key order.
    """

    _entries: dict[str, Node]
    _hash: int | None = field(default=None, repr=False)

    kind: ClassVar[NodeKind] = NodeKind.MAPPING

    def __init__(self, entries: Mapping[str, Node] | Iterable[tuple[str, Node]] = ()) -> None:
        pairs = entries.items() if isinstance(entries, Mapping) else entries
        built: dict[str, Node] = {}
        for key, value in pairs:
            if not isinstance(key, str):
                raise TypeError(f"Mapping keys must be str, got {type(key).__name__}")
            if not isinstance(value, Node):
                raise TypeError(f"Mapping values must be Node, got {type(value).__name__}")
            if key in built:
                raise ValueError(f"Duplicate mapping key: {key!r}")
            built[key] = value
        object.__setattr__(self, "_entries", built)
        object.__setattr__(self, "_hash", None)

    def as_mapping(self) -> Mapping[str, Node]:
        return MappingProxyType(self._entries)

    def _to_python(self, memo: dict[int, Any]) -> dict[str, Any]:
        converted = memo.get(id(self))
        if converted is None:
            converted = {key: value._to_python(memo) for key, value in self._entries.items()}
            memo[id(self)] = converted
        return converted

    def __len__(self) -> int:
        return len(self._entries)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, MappingNode):
            return NotImplemented
        return _nodes_equal(self, other, set())

    def __hash__(self) -> int:
        if self._hash is None:
            object.__setattr__(self, "_hash", hash((NodeKind.MAPPING, frozenset(self._entries.items()))))
        return self._hash

    def __repr__(self) -> str:
        return f"MappingNode({self._entries!r})"


@dataclass(frozen=True, slots=True, eq=False)
class SequenceNode(Node):
    items: tuple[Node, ...] = ()
    _hash: int | None = field(default=None, init=False, repr=False)

    kind: ClassVar[NodeKind] = NodeKind.SEQUENCE

    def __post_init__(self) -> None:
        if not isinstance(self.items, tuple):
            object.__setattr__(self, "items", tuple(self.items))
        for item in self.items:
            if not isinstance(item, Node):
                raise TypeError(f"Sequence items must be Node, got {type(item).__name__}")

    def as_sequence(self) -> tuple[Node, ...]:
        return self.items

    def _to_python(self, memo: dict[int, Any]) -> list[Any]:
        converted = memo.get(id(self))
        if converted is None:
            converted = [item._to_python(memo) for item in self.items]
            memo[id(self)] = converted
        return converted

    def __len__(self) -> int:
        return len(self.items)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SequenceNode):
            return NotImplemented
        return _nodes_equal(self, other, set())

    def __hash__(self) -> int:
        if self._hash is None:
            object.__setattr__(self, "_hash", hash((NodeKind.SEQUENCE, self.items)))
        return self._hash


@dataclass(frozen=True, slots=True)
class ScalarNode(Node):
    """Scalar text after quote, escape and folding resolution.

    `style` and `tag` record how the scalar was written and are ignored by
    equality and hashing.
    """

    value: str
    style: ScalarStyle = field(default=ScalarStyle.PLAIN, compare=False)
    tag: str | None = field(default=None, compare=False)

    kind: ClassVar[NodeKind] = NodeKind.SCALAR

    def as_scalar(self) -> str:
        return self.value

    def interpret(self, *, allow_quoted: bool = False) -> ScalarInterpretation:
        return interpret_scalar(
            self.value,
            was_quoted=self.style != ScalarStyle.PLAIN,
            allow_quoted=allow_quoted,
            tag=self.tag,
        )

    def _to_python(self, memo: dict[int, Any]) -> None | bool | int | float | str:
        return self.interpret().value


@dataclass(frozen=True, slots=True)
class NullNode(Node):
    """The explicit empty value (empty document, `key:` with no value)."""

    kind: ClassVar[NodeKind] = NodeKind.NULL

    def _to_python(self, memo: dict[int, Any]) -> None:
        return None


def _nodes_equal(left: Node, right: Node, seen: set[tuple[int, int]]) -> bool:
    """Structural equality that compares each pair of shared subtrees once."""
    if left is right:
        return True
    if type(left) is not type(right) or hash(left) != hash(right):
        return False
    pair = (id(left), id(right))
    if pair in seen:
        return True

    if isinstance(left, MappingNode) and isinstance(right, MappingNode):
        equal = left._entries.keys() == right._entries.keys() and all(
            _nodes_equal(value, right._entries[key], seen) for key, value in left._entries.items()
        )
    elif isinstance(left, SequenceNode) and isinstance(right, SequenceNode):
        equal = len(left.items) == len(right.items) and all(
            _nodes_equal(a, b, seen) for a, b in zip(left.items, right.items)
        )
    else:
        return left == right

    if equal:
        seen.add(pair)
    return equal


__all__ = [
    "MappingNode",
    "Node",
    "NodeKind",
    "NullNode",
    "ScalarNode",
    "ScalarStyle",
    "SequenceNode",
]
