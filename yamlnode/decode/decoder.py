"""Typed decoding of node trees into Python values."""

from __future__ import annotations

import dataclasses
from enum import Enum, StrEnum
import logging
from types import NoneType, UnionType
from typing import Any, TypeAlias, Union, get_args, get_origin, get_type_hints

from yamlnode.errors import ParseError
from yamlnode.node import MappingNode, Node, NullNode, ScalarKind, ScalarNode, SequenceNode
from yamlnode.parser import ParserOptions, parse

_LOGGER = logging.getLogger(__name__)

PathElement: TypeAlias = str | int
CodingPath: TypeAlias = tuple[PathElement, ...]

_RENAME_METADATA_KEY = "yaml"


class DecodeErrorKind(StrEnum):
    TYPE_MISMATCH = "type_mismatch"
    KEY_NOT_FOUND = "key_not_found"
    VALUE_NOT_FOUND = "value_not_found"
    DATA_CORRUPTED = "data_corrupted"


class DecodeError(Exception):
    """A node tree does not fit the requested type.

    `path` is the chain of mapping keys and sequence indexes leading to the
    offending node.
    """

    def __init__(self, kind: DecodeErrorKind, message: str, path: CodingPath = ()) -> None:
        self.kind = kind
        self.message = message
        self.path = path
        location = f" (at {format_path(path)})" if path else ""
        super().__init__(f"{kind}: {message}{location}")


def format_path(path: CodingPath) -> str:
    """Render a coding path as `items[0].Id`."""
    rendered = ""
    for element in path:
        if isinstance(element, int):
            rendered += f"[{element}]"
        elif rendered:
            rendered += f".{element}"
        else:
            rendered = element
    return rendered


class YamlDecoder:
    """Decode a `Node`, YAML text or UTF-8 bytes into a typed Python value.

    Supported targets: `Node` (and its variants), `Any`/`object`, `str`, `bool`,
    `int`, `float`, `None`, optionals and unions, `list`, `tuple`, `set`,
    `frozenset`, `dict` with `str` keys, `Enum` subclasses and dataclasses.
    """

    def __init__(self, options: ParserOptions | None = None) -> None:
        self._options = options

    @property
    def options(self) -> ParserOptions | None:
        return self._options

    def decode(self, type_: Any, source: Node | str | bytes) -> Any:
        _LOGGER.debug("decoding %s from %s", _type_name(type_), type(source).__name__)
        root = self._load(source)
        return self._decode(type_, root, ())

    def _load(self, source: Node | str | bytes) -> Node:
        if isinstance(source, Node):
            return source

        if isinstance(source, bytes):
            try:
                source = source.decode("utf-8")
            except UnicodeDecodeError as exc:
                raise DecodeError(
                    DecodeErrorKind.DATA_CORRUPTED,
                    "The given data was not valid UTF-8.",
                ) from exc

        try:
            return parse(source, self._options)
        except ParseError as exc:
            raise DecodeError(
                DecodeErrorKind.DATA_CORRUPTED,
                "The given data was not valid YAML.",
            ) from exc

    def _decode(self, type_: Any, node: Node, path: CodingPath) -> Any:
        if type_ is Any or type_ is object:
            return node.to_python()

        if type_ is None or type_ is NoneType:
            if _is_null(node):
                return None
            raise _type_mismatch(type_, node, path)

        origin = get_origin(type_)
        if origin is Union or origin is UnionType:
            return self._decode_union(type_, node, path)

        if origin is not None:
            return self._decode_generic(type_, origin, get_args(type_), node, path)

        if isinstance(type_, type):
            if issubclass(type_, Node):
                if isinstance(node, type_):
                    return node
                raise _type_mismatch(type_, node, path)
            if type_ is bool:
                return self._decode_bool(node, path)
            if issubclass(type_, Enum):
                return self._decode_enum(type_, node, path)
            if type_ is str:
                return self._scalar(type_, node, path).value
            if type_ is int:
                return self._decode_int(node, path)
            if type_ is float:
                return self._decode_float(node, path)
            if dataclasses.is_dataclass(type_):
                return self._decode_dataclass(type_, node, path)
            if type_ in (list, tuple, set, frozenset, dict):
                return self._decode_generic(type_, type_, (), node, path)

        raise TypeError(f"Unsupported decode target: {type_!r}")

    def _decode_union(self, type_: Any, node: Node, path: CodingPath) -> Any:
        members = get_args(type_)
        if NoneType in members and _is_null(node):
            return None

        for member in members:
            if member is NoneType:
                continue
            try:
                return self._decode(member, node, path)
            except DecodeError:
                continue
        raise _type_mismatch(type_, node, path)

    def _decode_generic(
        self,
        type_: Any,
        origin: Any,
        args: tuple[Any, ...],
        node: Node,
        path: CodingPath,
    ) -> Any:
        if origin in (list, set, frozenset):
            element = args[0] if args else Any
            items = self._sequence(type_, node, path)
            values = [self._decode(element, item, (*path, index)) for index, item in enumerate(items)]
            return values if origin is list else origin(values)

        if origin is tuple:
            items = self._sequence(type_, node, path)
            if not args or (len(args) == 2 and args[1] is Ellipsis):
                element = args[0] if args else Any
                return tuple(self._decode(element, item, (*path, index)) for index, item in enumerate(items))
            if len(items) != len(args):
                raise DecodeError(
                    DecodeErrorKind.TYPE_MISMATCH,
                    f"Expected to decode {len(args)} items but found {len(items)} instead.",
                    path,
                )
            return tuple(
                self._decode(element, item, (*path, index))
                for index, (element, item) in enumerate(zip(args, items, strict=True))
            )

        if origin is dict:
            key_type, value_type = args if args else (str, Any)
            if key_type not in (str, Any):
                raise TypeError(f"Mapping keys decode to str only, got {key_type!r}")
            mapping = self._mapping(type_, node, path)
            return {key: self._decode(value_type, value, (*path, key)) for key, value in mapping.items()}

        raise TypeError(f"Unsupported decode target: {type_!r}")

    def _decode_dataclass(self, type_: type, node: Node, path: CodingPath) -> Any:
        mapping = self._mapping(type_, node, path)
        hints = get_type_hints(type_)
        values: dict[str, Any] = {}
        for field in dataclasses.fields(type_):
            if not field.init:
                continue
            key = field.metadata.get(_RENAME_METADATA_KEY, field.name)
            field_type = hints.get(field.name, Any)
            child = mapping.get(key)
            if child is not None:
                values[field.name] = self._decode(field_type, child, (*path, key))
            elif field.default is not dataclasses.MISSING or field.default_factory is not dataclasses.MISSING:
                continue
            elif _accepts_none(field_type):
                values[field.name] = None
            else:
                raise DecodeError(
                    DecodeErrorKind.KEY_NOT_FOUND,
                    f'No value associated with key "{key}".',
                    path,
                )
        return type_(**values)

    def _decode_enum(self, type_: type[Enum], node: Node, path: CodingPath) -> Enum:
        scalar = self._scalar(type_, node, path)
        interpretation = scalar.interpret(allow_quoted=True)
        for member in type_:
            if isinstance(member.value, str) and member.value == scalar.value:
                return member
            if (
                isinstance(member.value, int | float)
                and not isinstance(member.value, bool)
                and interpretation.number_value is not None
                and interpretation.number_value == member.value
            ):
                return member
        raise DecodeError(
            DecodeErrorKind.DATA_CORRUPTED,
            f"Cannot initialize {type_.__name__} from invalid value {scalar.value!r}.",
            path,
        )

    def _decode_bool(self, node: Node, path: CodingPath) -> bool:
        scalar = self._scalar(bool, node, path)
        if scalar.value == "true":
            return True
        if scalar.value == "false":
            return False
        raise _type_mismatch(bool, node, path)

    def _decode_int(self, node: Node, path: CodingPath) -> int:
        interpretation = self._scalar(int, node, path).interpret(allow_quoted=True)
        if interpretation.kind != ScalarKind.INT or interpretation.number_value is None:
            raise _type_mismatch(int, node, path)
        return int(interpretation.number_value)

    def _decode_float(self, node: Node, path: CodingPath) -> float:
        interpretation = self._scalar(float, node, path).interpret(allow_quoted=True)
        if interpretation.number_value is None:
            raise _type_mismatch(float, node, path)
        return float(interpretation.number_value)

    def _scalar(self, type_: Any, node: Node, path: CodingPath) -> ScalarNode:
        if isinstance(node, ScalarNode):
            return node
        if isinstance(node, NullNode):
            raise DecodeError(
                DecodeErrorKind.VALUE_NOT_FOUND,
                f"Expected {_type_name(type_)} value but found null instead.",
                path,
            )
        raise _type_mismatch(type_, node, path)

    def _sequence(self, type_: Any, node: Node, path: CodingPath) -> tuple[Node, ...]:
        items = node.as_sequence()
        if items is None:
            raise _type_mismatch(type_, node, path)
        return items

    def _mapping(self, type_: Any, node: Node, path: CodingPath) -> dict[str, Node]:
        mapping = node.as_mapping()
        if mapping is None:
            raise _type_mismatch(type_, node, path)
        return dict(mapping)


def decode(type_: Any, source: Node | str | bytes, options: ParserOptions | None = None) -> Any:
    """Shortcut for `YamlDecoder(options).decode(type_, source)`."""
    return YamlDecoder(options).decode(type_, source)


def _is_null(node: Node) -> bool:
    if isinstance(node, NullNode):
        return True
    return isinstance(node, ScalarNode) and node.interpret().is_null


def _accepts_none(type_: Any) -> bool:
    if type_ is Any or type_ is None or type_ is NoneType:
        return True
    origin = get_origin(type_)
    return (origin is Union or origin is UnionType) and NoneType in get_args(type_)


def _type_mismatch(type_: Any, node: Node, path: CodingPath) -> DecodeError:
    return DecodeError(
        DecodeErrorKind.TYPE_MISMATCH,
        f"Expected to decode {_type_name(type_)} but found {_describe(node)} instead.",
        path,
    )


def _type_name(type_: Any) -> str:
    if type_ is None or type_ is NoneType:
        return "None"
    if isinstance(type_, type) and get_origin(type_) is None:
        return type_.__name__
    return repr(type_).removeprefix("typing.")


def _describe(node: Node) -> str:
    match node:
        case MappingNode():
            return "a mapping"
        case SequenceNode():
            return "a sequence"
        case ScalarNode(value=value):
            return f"scalar {value!r}"
        case _:
            return "null"


__all__ = [
    "CodingPath",
    "DecodeError",
    "DecodeErrorKind",
    "YamlDecoder",
    "decode",
    "format_path",
]
