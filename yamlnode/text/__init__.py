"""Source text positions."""

from yamlnode.text.line_index import LineColumn, LineIndex
from yamlnode.text.text import TextRange, TextSize, slice_text_range

__all__ = [
    "LineColumn",
    "LineIndex",
    "TextRange",
    "TextSize",
    "slice_text_range",
]
