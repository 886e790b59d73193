"""Parse carrier for parse-once/consume-many workflows."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from yamlnode.diagnostics import has_errors
from yamlnode.errors import ParseError
from yamlnode.parser.options import ParserOptions

if TYPE_CHECKING:
    from yamlnode.diagnostics import Diagnostic
    from yamlnode.node import Node, NodeView


@dataclass(slots=True)
class YamlParseResult:
    """Outcome of one parse: a complete root node, or no root and error diagnostics."""

    source_text: str
    root: Node | None
    diagnostics: list[Diagnostic]
    options: ParserOptions
    _root_view: NodeView | None = field(default=None, init=False, repr=False)

    @property
    def has_errors(self) -> bool:
        return has_errors(self.diagnostics)

    @property
    def errors(self) -> list[Diagnostic]:
        return [d for d in self.diagnostics if d.severity == "error"]

    @property
    def warnings(self) -> list[Diagnostic]:
        return [d for d in self.diagnostics if d.severity == "warning"]

    def raise_for_errors(self) -> None:
        if self.has_errors:
            raise ParseError.from_diagnostics(self.diagnostics)

    def unwrap(self) -> Node:
        """Return the root node, raising `ParseError` if the parse failed."""
        self.raise_for_errors()
        if self.root is None:
            raise RuntimeError("Parse produced neither a root node nor an error")
        return self.root

    def root_view(self) -> NodeView:
        if self._root_view is None:
            from yamlnode.node import NodeView

            self._root_view = NodeView(self.unwrap())
        return self._root_view
