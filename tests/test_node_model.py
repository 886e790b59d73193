import pytest

from yamlnode.node import MappingNode, NodeKind, NullNode, ScalarNode, ScalarStyle, SequenceNode


def test_each_node_answers_only_its_own_accessor() -> None:
    mapping = MappingNode({"a": ScalarNode("1")})
    sequence = SequenceNode((ScalarNode("x"),))
    scalar = ScalarNode("text")
    null = NullNode()

    assert mapping.as_mapping() == {"a": ScalarNode("1")}
    assert mapping.as_sequence() is None
    assert mapping.as_scalar() is None

    assert sequence.as_sequence() == (ScalarNode("x"),)
    assert sequence.as_mapping() is None
    assert sequence.as_scalar() is None

    assert scalar.as_scalar() == "text"
    assert scalar.as_mapping() is None
    assert scalar.as_sequence() is None

    assert null.as_mapping() is None
    assert null.as_sequence() is None
    assert null.as_scalar() is None
    assert null.is_null
    assert not scalar.is_null


def test_node_kinds() -> None:
    assert MappingNode().kind == NodeKind.MAPPING
    assert SequenceNode().kind == NodeKind.SEQUENCE
    assert ScalarNode("").kind == NodeKind.SCALAR
    assert NullNode().kind == NodeKind.NULL


def test_as_scalar_is_idempotent() -> None:
    scalar = ScalarNode("value")

    assert scalar.as_scalar() is scalar.as_scalar()


def test_mapping_equality_ignores_key_order() -> None:
    first = MappingNode([("a", ScalarNode("1")), ("b", ScalarNode("2"))])
    second = MappingNode([("b", ScalarNode("2")), ("a", ScalarNode("1"))])

    assert first == second
    assert hash(first) == hash(second)
    assert list(first.as_mapping()) == ["a", "b"]
    assert list(second.as_mapping()) == ["b", "a"]


def test_variants_never_compare_equal_to_each_other() -> None:
    assert NullNode() != ScalarNode("")
    assert ScalarNode("") != MappingNode()
    assert MappingNode() != SequenceNode()
    assert ScalarNode("null") != NullNode()


def test_scalar_equality_ignores_style_and_tag() -> None:
    assert ScalarNode("x", style=ScalarStyle.DOUBLE_QUOTED, tag="!t") == ScalarNode("x")
    assert hash(ScalarNode("x", style=ScalarStyle.LITERAL)) == hash(ScalarNode("x"))


def test_nodes_are_immutable() -> None:
    mapping = MappingNode({"a": NullNode()})
    scalar = ScalarNode("x")
    sequence = SequenceNode([scalar])

    with pytest.raises(AttributeError):
        scalar.value = "y"  # type: ignore
    with pytest.raises(AttributeError):
        sequence.items = ()  # type: ignore
    with pytest.raises(TypeError):
        mapping.as_mapping()["b"] = NullNode()  # type: ignore
    assert isinstance(sequence.items, tuple)


def test_mapping_constructor_validates_entries() -> None:
    with pytest.raises(TypeError):
        MappingNode({1: NullNode()})  # type: ignore
    with pytest.raises(TypeError):
        MappingNode({"a": "not a node"})  # type: ignore
    with pytest.raises(ValueError):
        MappingNode([("a", NullNode()), ("a", NullNode())])


def test_sequence_constructor_validates_items() -> None:
    with pytest.raises(TypeError):
        SequenceNode(("plain string",))  # type: ignore


def test_mapping_copies_its_input() -> None:
    entries = {"a": ScalarNode("1")}
    mapping = MappingNode(entries)
    entries["b"] = ScalarNode("2")

    assert len(mapping) == 1


def test_to_python_converts_whole_tree() -> None:
    tree = MappingNode(
        {
            "name": ScalarNode("demo"),
            "count": ScalarNode("3"),
            "ratio": ScalarNode("0.5"),
            "enabled": ScalarNode("true"),
            "quoted": ScalarNode("3", style=ScalarStyle.DOUBLE_QUOTED),
            "missing": NullNode(),
            "items": SequenceNode((ScalarNode("~"), ScalarNode("x"))),
        }
    )

    assert tree.to_python() == {
        "name": "demo",
        "count": 3,
        "ratio": 0.5,
        "enabled": True,
        "quoted": "3",
        "missing": None,
        "items": [None, "x"],
    }


def test_repr_is_readable() -> None:
    assert repr(MappingNode({"a": NullNode()})) == "MappingNode({'a': NullNode()})"


def _shared_chain(leaf: str, levels: int) -> SequenceNode:
    node = SequenceNode((ScalarNode(leaf),))
    for _ in range(levels):
        node = SequenceNode((node, node))
    return node


def test_shared_subtrees_are_walked_once() -> None:
    chain = _shared_chain("x", 64)
    converted = MappingNode({"root": chain}).to_python()

    assert converted["root"][0] is converted["root"][1]
    assert hash(chain) == hash(_shared_chain("x", 64))
    assert chain == _shared_chain("x", 64)
    assert chain != _shared_chain("y", 64)
