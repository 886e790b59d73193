"""Parser events."""

from dataclasses import dataclass
from enum import StrEnum
from typing import Protocol, TypeAlias

from yamlnode.node.model import ScalarStyle
from yamlnode.text import TextRange


class CollectionKind(StrEnum):
    MAPPING = "mapping"
    SEQUENCE = "sequence"


@dataclass(frozen=True, slots=True)
class StartEvent:
    kind: CollectionKind
    range: TextRange
    anchor: str | None = None
    tag: str | None = None
    flow: bool = False


@dataclass(frozen=True, slots=True)
class FinishEvent:
    range: TextRange


@dataclass(frozen=True, slots=True)
class ScalarEvent:
    value: str
    style: ScalarStyle
    range: TextRange
    anchor: str | None = None
    tag: str | None = None


@dataclass(frozen=True, slots=True)
class NullEvent:
    """An empty node: a missing value, key or document body."""

    range: TextRange
    anchor: str | None = None
    tag: str | None = None


@dataclass(frozen=True, slots=True)
class AliasEvent:
    name: str
    range: TextRange


Event: TypeAlias = StartEvent | FinishEvent | ScalarEvent | NullEvent | AliasEvent


class TreeSink(Protocol):
    def start_collection(self, event: StartEvent) -> None: ...

    def finish_collection(self, event: FinishEvent) -> None: ...

    def scalar(self, event: ScalarEvent) -> None: ...

    def null(self, event: NullEvent) -> None: ...

    def alias(self, event: AliasEvent) -> None: ...


def process_events(sink: TreeSink, events: list[Event]) -> None:
    for event in events:
        match event:
            case StartEvent():
                sink.start_collection(event)
            case FinishEvent():
                sink.finish_collection(event)
            case ScalarEvent():
                sink.scalar(event)
            case NullEvent():
                sink.null(event)
            case AliasEvent():
                sink.alias(event)
