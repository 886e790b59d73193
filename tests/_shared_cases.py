"""Centralized YAML source cases used across lexer/parser/node tests."""

from __future__ import annotations

from dataclasses import dataclass
import textwrap

from yamlnode.diagnostics import ErrorKind
from yamlnode.node import MappingNode, Node, NullNode, ScalarNode, SequenceNode


@dataclass(frozen=True, slots=True)
class YamlCase:
    name: str
    source: str
    expected: Node


@dataclass(frozen=True, slots=True)
class YamlErrorCase:
    name: str
    source: str
    kind: ErrorKind
    line: int
    column: int
    code: str


def _dedent(text: str) -> str:
    return textwrap.dedent(text).lstrip()


def s(value: str) -> ScalarNode:
    return ScalarNode(value)


def seq(*items: Node) -> SequenceNode:
    return SequenceNode(items)


def m(**entries: Node) -> MappingNode:
    return MappingNode(entries)


PARSER_CASES: tuple[YamlCase, ...] = (
    YamlCase(name="key_value", source="key: value", expected=m(key=s("value"))),
    YamlCase(name="empty_input", source="", expected=NullNode()),
    YamlCase(
        name="comment_only",
        source=_dedent(
            """
            # nothing but comments

            # and blank lines
            """
        ),
        expected=NullNode(),
    ),
    YamlCase(name="block_sequence", source="- a\n- b\n- c", expected=seq(s("a"), s("b"), s("c"))),
    YamlCase(
        name="nested_mapping",
        source="a:\n  b: 1\n  c: 2",
        expected=m(a=m(b=s("1"), c=s("2"))),
    ),
    YamlCase(
        name="flow_mapping_with_nested_sequence",
        source="{a: 1, b: [2, 3]}",
        expected=m(a=s("1"), b=seq(s("2"), s("3"))),
    ),
    YamlCase(
        name="nested_block_collections",
        source=_dedent(
            """
            server:
              host: localhost
              ports:
                - 80
                - 443
            debug: false
            """
        ),
        expected=m(
            server=m(host=s("localhost"), ports=seq(s("80"), s("443"))),
            debug=s("false"),
        ),
    ),
    YamlCase(
        name="indentless_sequence_value",
        source=_dedent(
            """
            items:
            - a
            - b
            after: x
            """
        ),
        expected=m(items=seq(s("a"), s("b")), after=s("x")),
    ),
    YamlCase(
        name="sequence_of_mappings",
        source=_dedent(
            """
            - name: a
              value: 1
            - name: b
              value: 2
            """
        ),
        expected=seq(m(name=s("a"), value=s("1")), m(name=s("b"), value=s("2"))),
    ),
    YamlCase(
        name="nested_sequences",
        source="- - a\n  - b\n- c\n",
        expected=seq(seq(s("a"), s("b")), s("c")),
    ),
    YamlCase(
        name="empty_value_is_null_but_null_text_is_scalar",
        source="a:\nb: ~\nc: null\n",
        expected=m(a=NullNode(), b=s("~"), c=s("null")),
    ),
    YamlCase(
        name="quoted_scalars",
        source="single: 'it''s'\n" 'double: "a\\tb \\u00e9 \\"q\\""\n',
        expected=m(single=s("it's"), double=s('a\tb \u00e9 "q"')),
    ),
    YamlCase(
        name="comment_inside_quotes_is_text",
        source='a: "not # a comment" # a comment\n',
        expected=m(a=s("not # a comment")),
    ),
    YamlCase(
        name="multiline_plain_scalar",
        source=_dedent(
            """
            text: first
              second
              third
            next: 1
            """
        ),
        expected=m(text=s("first second third"), next=s("1")),
    ),
    YamlCase(
        name="multiline_double_quoted_scalar",
        source='text: "one\n  two"\n',
        expected=m(text=s("one two")),
    ),
    YamlCase(
        name="literal_block_scalar",
        source=_dedent(
            """
            text: |
              line one
              line two
            next: x
            """
        ),
        expected=m(text=s("line one\nline two\n"), next=s("x")),
    ),
    YamlCase(
        name="folded_block_scalar",
        source=_dedent(
            """
            text: >
              a
              b

              c
            """
        ),
        expected=m(text=s("a b\nc\n")),
    ),
    YamlCase(
        name="block_scalar_chomping",
        source="strip: |-\n  x\nkeep: |+\n  y\n\nclip: |\n  z\n",
        expected=m(strip=s("x"), keep=s("y\n\n"), clip=s("z\n")),
    ),
    YamlCase(
        name="anchor_and_alias",
        source=_dedent(
            """
            base: &b
              x: 1
            copy: *b
            """
        ),
        expected=m(base=m(x=s("1")), copy=m(x=s("1"))),
    ),
    YamlCase(
        name="flow_sequence_single_pair",
        source="[a: 1, b]",
        expected=seq(m(a=s("1")), s("b")),
    ),
    YamlCase(
        name="multiline_flow_collection",
        source="{a: [1,\n  2], b: {c: d}}\n",
        expected=m(a=seq(s("1"), s("2")), b=m(c=s("d"))),
    ),
    YamlCase(
        name="explicit_document_markers",
        source="---\na: 1\n...\n",
        expected=m(a=s("1")),
    ),
    YamlCase(
        name="directive_then_document",
        source="%YAML 1.2\n---\nfoo\n",
        expected=s("foo"),
    ),
    YamlCase(
        name="only_first_document_is_read",
        source="a: 1\n---\nb: 2\n",
        expected=m(a=s("1")),
    ),
    YamlCase(
        name="urls_keep_their_colons",
        source="url: http://example.com:8080/path\n",
        expected=m(url=s("http://example.com:8080/path")),
    ),
)


ERROR_CASES: tuple[YamlErrorCase, ...] = (
    YamlErrorCase(
        name="inconsistent_dedent",
        source="a:\n  b: 1\n c: 2",
        kind=ErrorKind.INDENTATION,
        line=3,
        column=2,
        code="LEXER_INCONSISTENT_DEDENT",
    ),
    YamlErrorCase(
        name="tab_indentation",
        source="a:\n\tb: 1\n",
        kind=ErrorKind.INDENTATION,
        line=2,
        column=1,
        code="LEXER_TAB_INDENTATION",
    ),
    YamlErrorCase(
        name="misaligned_sibling_key",
        source="a: 1\n  b: 2\n",
        kind=ErrorKind.INDENTATION,
        line=2,
        column=3,
        code="LEXER_MISALIGNED_MAPPING_KEY",
    ),
    YamlErrorCase(
        name="unexpected_indentation_after_flow_value",
        source="key: [1]\n  other: 2\n",
        kind=ErrorKind.INDENTATION,
        line=2,
        column=3,
        code="PARSER_UNEXPECTED_INDENTATION",
    ),
    YamlErrorCase(
        name="unterminated_double_quoted",
        source='a: "hello\n',
        kind=ErrorKind.UNTERMINATED_SCALAR,
        line=1,
        column=4,
        code="LEXER_UNTERMINATED_QUOTED_SCALAR",
    ),
    YamlErrorCase(
        name="unterminated_single_quoted",
        source="'abc",
        kind=ErrorKind.UNTERMINATED_SCALAR,
        line=1,
        column=1,
        code="LEXER_UNTERMINATED_QUOTED_SCALAR",
    ),
    YamlErrorCase(
        name="unclosed_flow_sequence",
        source="[1, 2\n",
        kind=ErrorKind.SYNTAX,
        line=1,
        column=1,
        code="PARSER_UNCLOSED_FLOW_COLLECTION",
    ),
    YamlErrorCase(
        name="missing_flow_separator",
        source='["a" "b"]',
        kind=ErrorKind.SYNTAX,
        line=1,
        column=6,
        code="PARSER_EXPECTED_FLOW_SEPARATOR",
    ),
    YamlErrorCase(
        name="empty_flow_mapping_entry",
        source="{a: 1, , b: 2}",
        kind=ErrorKind.SYNTAX,
        line=1,
        column=8,
        code="PARSER_EXPECTED_NODE",
    ),
    YamlErrorCase(
        name="nested_mapping_on_value_line",
        source="a: b: c\n",
        kind=ErrorKind.SYNTAX,
        line=1,
        column=5,
        code="LEXER_MAPPING_VALUE_NOT_ALLOWED",
    ),
    YamlErrorCase(
        name="value_not_indented_under_key",
        source="key:\nvalue\n",
        kind=ErrorKind.SYNTAX,
        line=2,
        column=1,
        code="PARSER_EXPECTED_KEY",
    ),
    YamlErrorCase(
        name="invalid_escape",
        source='"\\q"',
        kind=ErrorKind.SYNTAX,
        line=1,
        column=2,
        code="LEXER_INVALID_ESCAPE",
    ),
    YamlErrorCase(
        name="invalid_block_scalar_header",
        source="a: |x\n  t\n",
        kind=ErrorKind.SYNTAX,
        line=1,
        column=5,
        code="LEXER_INVALID_BLOCK_SCALAR_HEADER",
    ),
    YamlErrorCase(
        name="undefined_alias",
        source="a: *missing\n",
        kind=ErrorKind.SYNTAX,
        line=1,
        column=4,
        code="TREE_UNDEFINED_ALIAS",
    ),
    YamlErrorCase(
        name="directive_without_document_start",
        source="%YAML 1.2\nfoo: bar\n",
        kind=ErrorKind.SYNTAX,
        line=2,
        column=1,
        code="PARSER_EXPECTED_DOCUMENT_START",
    ),
    YamlErrorCase(
        name="content_after_root_node",
        source="[a]\nb\n",
        kind=ErrorKind.SYNTAX,
        line=2,
        column=1,
        code="PARSER_EXPECTED_DOCUMENT_END",
    ),
)


def case_id(case: YamlCase | YamlErrorCase) -> str:
    return case.name
