"""Event-based parser core."""

from dataclasses import dataclass

from yamlnode.diagnostics import Diagnostic, DiagnosticSpec
from yamlnode.lexer import Lexer, Token, TokenKind
from yamlnode.parser.event import Event
from yamlnode.parser.options import ParserOptions
from yamlnode.text import LineIndex, TextRange


class ParseAborted(Exception):
    """Raised internally when parsing cannot continue past an error."""


@dataclass(slots=True)
class ParserProgress:
    """Detect parser stalls inside list-style loops."""

    _position: int | None = None

    def has_progressed(self, parser: "Parser") -> bool:
        has_progressed = self._position is None or self._position < parser.position
        self._position = parser.position
        return has_progressed

    def assert_progressing(self, parser: "Parser") -> None:
        if not self.has_progressed(parser):
            raise RuntimeError(
                f"Parser stopped making progress at {parser.current.kind.name} {parser.current.range}"
            )


class Parser:
    """Event-based parser over a pull lexer."""

    def __init__(self, lexer: Lexer, options: ParserOptions | None = None) -> None:
        self._lexer = lexer
        self._options = options or ParserOptions()
        self._events: list[Event] = []
        self._diagnostics: list[Diagnostic] = []
        self._bumped = 0

    @property
    def lexer(self) -> Lexer:
        return self._lexer

    @property
    def options(self) -> ParserOptions:
        return self._options

    @property
    def line_index(self) -> LineIndex:
        return self._lexer.line_index

    @property
    def events(self) -> list[Event]:
        return self._events

    @property
    def diagnostics(self) -> list[Diagnostic]:
        return self._diagnostics

    @property
    def current(self) -> Token:
        return self._lexer.peek_token()

    @property
    def position(self) -> int:
        """Number of tokens consumed so far.

        Synthetic block tokens are zero-width, so progress is measured in tokens
        rather than source offsets.
        """
        return self._bumped

    def at(self, kind: TokenKind) -> bool:
        return self.current.kind == kind

    def at_set(self, kinds: frozenset[TokenKind] | set[TokenKind]) -> bool:
        return self.current.kind in kinds

    def bump(self) -> Token:
        token = self._lexer.next_token()
        if token.kind != TokenKind.EOF:
            self._bumped += 1
        return token

    def eat(self, kind: TokenKind) -> bool:
        if self.at(kind):
            self.bump()
            return True
        return False

    def push(self, event: Event) -> None:
        self._events.append(event)

    def error(self, spec: DiagnosticSpec, range: TextRange, *, message: str | None = None) -> None:
        if self._diagnostics:
            previous = self._diagnostics[-1]
            if previous.range.start == range.start:
                return
        self._diagnostics.append(Diagnostic.from_spec(spec, range, self.line_index, message=message))

    def error_at_current(self, spec: DiagnosticSpec, *, message: str | None = None) -> None:
        token = self.current
        range = token.range
        if range.is_empty() and token.kind != TokenKind.EOF:
            # Synthetic block tokens are zero-width: point at the rest of their line.
            line_end = self.line_index.line_start(token.line) + len(self.line_index.line_text(token.line))
            range = TextRange.from_offsets(range.start.value, max(range.start.value, line_end))
        self.error(spec, range, message=message)

    def abort(self) -> None:
        raise ParseAborted

    def finish(self) -> tuple[list[Event], list[Diagnostic]]:
        return self._events, self._diagnostics
