"""Typed decoding of node trees."""

from yamlnode.decode.decoder import (
    CodingPath,
    DecodeError,
    DecodeErrorKind,
    YamlDecoder,
    decode,
    format_path,
)

__all__ = [
    "CodingPath",
    "DecodeError",
    "DecodeErrorKind",
    "YamlDecoder",
    "decode",
    "format_path",
]
