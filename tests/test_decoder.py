from dataclasses import dataclass, field
from enum import Enum
import textwrap

import pytest

from yamlnode.decode import DecodeError, DecodeErrorKind, YamlDecoder, decode, format_path
from yamlnode.errors import ParseError
from yamlnode.node import MappingNode, Node, ScalarNode, SequenceNode
from yamlnode.parser import ParseMode, ParserOptions


@dataclass
class Item:
    id: int = field(metadata={"yaml": "Id"})
    name: str = field(metadata={"yaml": "Name"})


@dataclass
class Catalog:
    items: list[Item]
    title: str = "untitled"
    note: str | None = None


class Level(Enum):
    LOW = "low"
    HIGH = "high"


class Priority(Enum):
    ONE = 1
    TWO = 2


@dataclass
class Settings:
    level: Level
    priority: Priority
    ratio: float
    enabled: bool
    tags: set[str]
    limits: dict[str, int]
    origin: tuple[int, int]
    raw: Node


ITEMS_SOURCE = textwrap.dedent(
    """
    - Id: 1
      Name: |
        first
        item
    - Id: 2
      Name: >
        second
        item
    """
).lstrip()


def test_decode_items_with_block_scalars() -> None:
    items = decode(list[Item], ITEMS_SOURCE)

    assert items == [
        Item(id=1, name="first\nitem\n"),
        Item(id=2, name="second item\n"),
    ]


def test_decode_nested_dataclass_with_defaults() -> None:
    source = "items:\n" + textwrap.indent(ITEMS_SOURCE, "  ")

    catalog = YamlDecoder().decode(Catalog, source)

    assert catalog.title == "untitled"
    assert catalog.note is None
    assert [item.id for item in catalog.items] == [1, 2]


def test_decode_mixed_targets() -> None:
    source = textwrap.dedent(
        """
        level: high
        priority: 2
        ratio: 1
        enabled: true
        tags: [a, b, a]
        limits: {cpu: 2, mem: "512"}
        origin: [3, 4]
        raw: {x: y}
        """
    )

    settings = decode(Settings, source)

    assert settings.level is Level.HIGH
    assert settings.priority is Priority.TWO
    assert settings.ratio == 1.0
    assert isinstance(settings.ratio, float)
    assert settings.enabled is True
    assert settings.tags == {"a", "b"}
    assert settings.limits == {"cpu": 2, "mem": 512}
    assert settings.origin == (3, 4)
    assert settings.raw == MappingNode({"x": ScalarNode("y")})


def test_decode_optional_and_union_targets() -> None:
    assert decode(int | None, "~") is None
    assert decode(int | None, "5") == 5
    assert decode(int | str, "abc") == "abc"
    assert decode(tuple[str, ...], "[a, b]") == ("a", "b")


def test_decode_any_returns_plain_python() -> None:
    assert decode(object, "a: [1, true, ~, x]") == {"a": [1, True, None, "x"]}


def test_decode_accepts_nodes() -> None:
    node = SequenceNode((ScalarNode("1"), ScalarNode("2")))

    assert decode(list[int], node) == [1, 2]


def test_decode_bool_accepts_only_true_and_false() -> None:
    assert decode(bool, "false") is False
    with pytest.raises(DecodeError) as excinfo:
        decode(bool, "yes")

    assert excinfo.value.kind == DecodeErrorKind.TYPE_MISMATCH
    assert excinfo.value.message == "Expected to decode bool but found scalar 'yes' instead."


def test_decode_type_mismatch_carries_coding_path() -> None:
    source = "items:\n  - Id: 1\n    Name: a\n  - Id: two\n    Name: b\n"

    with pytest.raises(DecodeError) as excinfo:
        decode(Catalog, source)

    error = excinfo.value
    assert error.kind == DecodeErrorKind.TYPE_MISMATCH
    assert error.path == ("items", 1, "Id")
    assert str(error).endswith("(at items[1].Id)")


def test_decode_missing_key() -> None:
    with pytest.raises(DecodeError) as excinfo:
        decode(Item, "Id: 3\n")

    assert excinfo.value.kind == DecodeErrorKind.KEY_NOT_FOUND
    assert excinfo.value.message == 'No value associated with key "Name".'


def test_decode_null_for_scalar_target() -> None:
    with pytest.raises(DecodeError) as excinfo:
        decode(dict[str, int], "a:\n")

    assert excinfo.value.kind == DecodeErrorKind.VALUE_NOT_FOUND
    assert excinfo.value.path == ("a",)


def test_decode_invalid_enum_value() -> None:
    with pytest.raises(DecodeError) as excinfo:
        decode(Level, "medium")

    assert excinfo.value.kind == DecodeErrorKind.DATA_CORRUPTED


def test_decode_wraps_parse_errors() -> None:
    with pytest.raises(DecodeError) as excinfo:
        decode(dict[str, str], "a: 'open")

    assert excinfo.value.kind == DecodeErrorKind.DATA_CORRUPTED
    assert excinfo.value.message == "The given data was not valid YAML."
    assert isinstance(excinfo.value.__cause__, ParseError)


def test_decode_rejects_invalid_utf8() -> None:
    with pytest.raises(DecodeError) as excinfo:
        decode(str, b"\xff")

    assert excinfo.value.kind == DecodeErrorKind.DATA_CORRUPTED


def test_decoder_uses_parser_options() -> None:
    strict = YamlDecoder(ParserOptions.for_mode(ParseMode.STRICT))

    assert decode(dict[str, int], "a: 1\na: 2\n") == {"a": 2}
    with pytest.raises(DecodeError):
        strict.decode(dict[str, int], "a: 1\na: 2\n")


def test_unsupported_target_is_a_type_error() -> None:
    with pytest.raises(TypeError):
        decode(dict[int, str], "1: a")


def test_format_path() -> None:
    assert format_path(()) == ""
    assert format_path(("items", 0, "Id")) == "items[0].Id"
    assert format_path((2, "name")) == "[2].name"
