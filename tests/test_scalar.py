import math

import pytest

from yamlnode.node import ScalarKind, ScalarNode, ScalarStyle, interpret_scalar, parse_bool, parse_int
from yamlnode.parser import parse


@pytest.mark.parametrize(
    ("text", "kind", "value"),
    [
        ("42", ScalarKind.INT, 42),
        ("-7", ScalarKind.INT, -7),
        ("+12", ScalarKind.INT, 12),
        ("0x1F", ScalarKind.INT, 31),
        ("0o17", ScalarKind.INT, 15),
        ("3.5", ScalarKind.FLOAT, 3.5),
        ("1e3", ScalarKind.FLOAT, 1000.0),
        ("-.5", ScalarKind.FLOAT, -0.5),
        ("true", ScalarKind.BOOL, True),
        ("False", ScalarKind.BOOL, False),
        ("~", ScalarKind.NULL, None),
        ("null", ScalarKind.NULL, None),
        ("", ScalarKind.NULL, None),
        ("yes", ScalarKind.STRING, "yes"),
        ("1.2.3", ScalarKind.STRING, "1.2.3"),
        ("0x", ScalarKind.STRING, "0x"),
    ],
)
def test_interpret_plain_scalar(text: str, kind: ScalarKind, value: object) -> None:
    interpretation = interpret_scalar(text)

    assert interpretation.kind == kind
    assert interpretation.value == value


def test_interpret_special_floats() -> None:
    assert interpret_scalar(".inf").value == math.inf
    assert interpret_scalar("-.Inf").value == -math.inf
    nan = interpret_scalar(".nan")
    assert nan.kind == ScalarKind.FLOAT
    assert math.isnan(nan.value)


def test_quoted_scalars_stay_strings_unless_allowed() -> None:
    quoted = interpret_scalar("42", was_quoted=True)
    allowed = interpret_scalar("42", was_quoted=True, allow_quoted=True)

    assert quoted.is_string
    assert quoted.value == "42"
    assert allowed.kind == ScalarKind.INT
    assert allowed.number_value == 42


def test_str_tag_forces_string() -> None:
    interpretation = interpret_scalar("123", tag="!!str", allow_quoted=True)

    assert interpretation.is_string
    assert interpretation.value == "123"


def test_bool_and_number_projections() -> None:
    assert interpret_scalar("TRUE").bool_value is True
    assert interpret_scalar("TRUE").number_value is None
    assert interpret_scalar("2.5").number_value == 2.5
    assert parse_bool("maybe") is None
    assert parse_int("12a") is None


def test_scalar_node_interpretation_is_lazy_and_uses_style() -> None:
    root = parse("a: 007\nb: '007'\nc: !!str 7\nd: |\n  7\n")
    mapping = root.as_mapping()

    assert mapping["a"].as_scalar() == "007"
    assert mapping["a"].interpret().value == 7
    assert mapping["b"].interpret().value == "007"
    assert mapping["b"].interpret(allow_quoted=True).value == 7
    assert mapping["c"].interpret(allow_quoted=True).value == "7"
    assert mapping["d"].style == ScalarStyle.LITERAL
    assert mapping["d"].interpret().value == "7\n"


def test_scalar_node_to_python() -> None:
    assert ScalarNode("~").to_python() is None
    assert ScalarNode("off").to_python() == "off"
    assert ScalarNode("10", style=ScalarStyle.SINGLE_QUOTED).to_python() == "10"
