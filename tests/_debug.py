"""Shared debug printers for lexer/parser/node tests."""

from __future__ import annotations

import os

from yamlnode.diagnostics import Diagnostic
from yamlnode.lexer import Token, token_text
from yamlnode.node import Node
from yamlnode.parser import Event

PRINT_TOKENS = os.getenv("PRINT_TOKENS", "0").lower() in {"1", "true", "yes", "on"}
PRINT_EVENTS = os.getenv("PRINT_EVENTS", "0").lower() in {"1", "true", "yes", "on"}
PRINT_TREE = os.getenv("PRINT_TREE", "0").lower() in {"1", "true", "yes", "on"}
PRINT_SOURCE = os.getenv("PRINT_SOURCE", "0").lower() in {"1", "true", "yes", "on"}
PRINT_DIAGNOSTICS = os.getenv("PRINT_DIAGNOSTICS", "0").lower() in {
    "1",
    "true",
    "yes",
    "on",
}


def debug_print_source(test_name: str, source: str) -> None:
    if not PRINT_SOURCE:
        return
    print(f"\n===== {test_name} SOURCE =====")
    print(source)


def debug_dump_tokens(test_name: str, source: str, tokens: list[Token]) -> None:
    if not PRINT_TOKENS:
        return
    debug_print_source(test_name, source)
    print(f"\n===== {test_name} TOKENS =====")
    for index, tok in enumerate(tokens):
        text = token_text(source, tok)
        print(
            f"{index:03d} {tok.kind.name:<24} range={tok.range.as_tuple()} "
            f"at={tok.line}:{tok.column} flags={tok.flags!r} value={tok.value!r} text={text!r}"
        )


def debug_dump_events(test_name: str, events: list[Event]) -> None:
    if not PRINT_EVENTS:
        return
    print(f"\n===== {test_name} EVENTS =====")
    for index, event in enumerate(events):
        print(f"{index:03d} {event}")


def debug_dump_tree(test_name: str, root: Node | None, source: str | None = None) -> None:
    if not PRINT_TREE:
        return
    if source is not None:
        debug_print_source(test_name, source)
    print(f"\n===== {test_name} TREE =====")
    if root is None:
        print("(no root)")
        return
    print(_dump_tree(root))


def debug_dump_diagnostics(test_name: str, diagnostics: list[Diagnostic], source: str | None = None) -> None:
    if not PRINT_DIAGNOSTICS:
        return
    if source is not None:
        debug_print_source(test_name, source)
    print(f"===== {test_name} DIAGNOSTICS =====")
    if not diagnostics:
        print("(none)")
        return
    for diagnostic in diagnostics:
        print(diagnostic)


def _dump_tree(root: Node) -> str:
    lines: list[str] = []

    def walk(node: Node, depth: int, label: str) -> None:
        indent = "  " * depth
        mapping = node.as_mapping()
        if mapping is not None:
            lines.append(f"{indent}{label}Mapping(len={len(mapping)})")
            for key, value in mapping.items():
                walk(value, depth + 1, f"{key!r}: ")
            return
        items = node.as_sequence()
        if items is not None:
            lines.append(f"{indent}{label}Sequence(len={len(items)})")
            for item in items:
                walk(item, depth + 1, "- ")
            return
        text = node.as_scalar()
        if text is not None:
            lines.append(f"{indent}{label}Scalar({text!r})")
            return
        lines.append(f"{indent}{label}Null")

    walk(root, 0, "")
    return "\n".join(lines)
