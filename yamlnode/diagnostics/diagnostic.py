"""Diagnostics core types."""

from dataclasses import dataclass

from yamlnode.diagnostics.codes import DiagnosticSpec, ErrorKind, Severity
from yamlnode.text import LineIndex, TextRange


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured diagnostic emitted by the lexer, parser or tree sink.

    `line` and `column` are 1-based and point at the start of `range`.
    `context` is the source line the diagnostic points into.
    """

    code: str
    message: str
    range: TextRange
    line: int
    column: int
    severity: Severity = "error"
    kind: ErrorKind = ErrorKind.SYNTAX
    hint: str | None = None
    category: str | None = None
    context: str | None = None

    @staticmethod
    def from_spec(
        spec: DiagnosticSpec,
        range: TextRange,
        line_index: LineIndex,
        *,
        message: str | None = None,
    ) -> "Diagnostic":
        position = line_index.line_column(range.start)
        return Diagnostic(
            code=spec.code,
            message=message if message is not None else spec.message,
            range=range,
            line=position.line,
            column=position.column,
            severity=spec.severity,
            kind=spec.kind,
            hint=spec.hint,
            category=spec.category,
            context=line_index.line_text(position.line - 1),
        )

    @property
    def is_error(self) -> bool:
        return self.severity == "error"
