"""Offset to line/column mapping."""

from __future__ import annotations

from bisect import bisect_right
from dataclasses import dataclass

from yamlnode.text.text import TextSize


@dataclass(frozen=True, slots=True)
class LineColumn:
    """1-based line and column of a source offset."""

    line: int
    column: int


class LineIndex:
    """Start offsets of every line in a source text.

    `\\n`, `\\r\\n` and a lone `\\r` all end a line.
    """

    def __init__(self, source: str) -> None:
        self._source = source
        starts = [0]
        index = 0
        length = len(source)
        while index < length:
            ch = source[index]
            if ch == "\r":
                if index + 1 < length and source[index + 1] == "\n":
                    index += 1
                starts.append(index + 1)
            elif ch == "\n":
                starts.append(index + 1)
            index += 1
        self._starts = tuple(starts)

    @property
    def line_count(self) -> int:
        return len(self._starts)

    def line_number(self, offset: int) -> int:
        """0-based line containing `offset`."""
        return bisect_right(self._starts, offset) - 1

    def line_start(self, line_number: int) -> int:
        return self._starts[line_number]

    def column(self, offset: int) -> int:
        """0-based column of `offset` within its line."""
        return offset - self._starts[self.line_number(offset)]

    def line_column(self, offset: TextSize | int) -> LineColumn:
        value = offset.value if isinstance(offset, TextSize) else offset
        line = self.line_number(value)
        return LineColumn(line=line + 1, column=value - self._starts[line] + 1)

    def line_text(self, line_number: int) -> str:
        """Text of a 0-based line without its line break."""
        start = self._starts[line_number]
        if line_number + 1 < len(self._starts):
            end = self._starts[line_number + 1]
        else:
            end = len(self._source)
        return self._source[start:end].rstrip("\r\n")
