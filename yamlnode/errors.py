"""Exceptions raised by the public entrypoints."""

from __future__ import annotations

from collections.abc import Sequence

from yamlnode.diagnostics import Diagnostic, ErrorKind, first_error


class ParseError(Exception):
    """A document could not be parsed.

    Points at the earliest error; every error diagnostic of the parse is kept on
    `diagnostics`.
    """

    def __init__(self, diagnostic: Diagnostic, diagnostics: Sequence[Diagnostic] = ()) -> None:
        self.diagnostic = diagnostic
        self.diagnostics: tuple[Diagnostic, ...] = tuple(diagnostics) or (diagnostic,)
        super().__init__(render_diagnostic(diagnostic))

    @staticmethod
    def from_diagnostics(diagnostics: Sequence[Diagnostic]) -> ParseError:
        diagnostic = first_error(diagnostics)
        if diagnostic is None:
            raise ValueError("No error diagnostics to raise")
        return ParseError(diagnostic, [d for d in diagnostics if d.is_error])

    @property
    def kind(self) -> ErrorKind:
        return self.diagnostic.kind

    @property
    def line(self) -> int:
        return self.diagnostic.line

    @property
    def column(self) -> int:
        return self.diagnostic.column

    @property
    def message(self) -> str:
        return self.diagnostic.message

    @property
    def context(self) -> str | None:
        return self.diagnostic.context

    @property
    def code(self) -> str:
        return self.diagnostic.code


def render_diagnostic(diagnostic: Diagnostic) -> str:
    """Render `kind at line L, column C: message` followed by the source line and a caret."""
    lines = [f"{diagnostic.kind} at line {diagnostic.line}, column {diagnostic.column}: {diagnostic.message}"]
    if diagnostic.context is not None:
        # Keep tabs so the caret lines up with the source line.
        prefix = "".join("\t" if ch == "\t" else " " for ch in diagnostic.context[: diagnostic.column - 1])
        lines.append(f"    {diagnostic.context}")
        lines.append(f"    {prefix}^")
    if diagnostic.hint:
        lines.append(f"hint: {diagnostic.hint}")
    return "\n".join(lines)


__all__ = ["ParseError", "render_diagnostic"]
