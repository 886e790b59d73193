"""Scalar interpretation helpers (YAML 1.2 core schema)."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
import math
import re

_NULL_RE = re.compile(r"^(?:~|null|Null|NULL|)$")
_TRUE_RE = re.compile(r"^(?:true|True|TRUE)$")
_FALSE_RE = re.compile(r"^(?:false|False|FALSE)$")
_INTEGER_RE = re.compile(r"^[-+]?[0-9]+$")
_OCTAL_RE = re.compile(r"^0o[0-7]+$")
_HEX_RE = re.compile(r"^0x[0-9a-fA-F]+$")
_FLOAT_RE = re.compile(r"^[-+]?(?:\.[0-9]+|[0-9]+(?:\.[0-9]*)?)(?:[eE][-+]?[0-9]+)?$")
_INFINITY_RE = re.compile(r"^[-+]?\.(?:inf|Inf|INF)$")
_NAN_RE = re.compile(r"^\.(?:nan|NaN|NAN)$")

STRING_TAGS = frozenset({"!!str", "tag:yaml.org,2002:str", "!<tag:yaml.org,2002:str>"})


class ScalarKind(StrEnum):
    NULL = "null"
    BOOL = "bool"
    INT = "int"
    FLOAT = "float"
    STRING = "string"


@dataclass(frozen=True, slots=True)
class ScalarInterpretation:
    kind: ScalarKind
    value: None | bool | int | float | str
    bool_value: bool | None
    number_value: int | float | None

    @property
    def is_null(self) -> bool:
        return self.kind == ScalarKind.NULL

    @property
    def is_string(self) -> bool:
        return self.kind == ScalarKind.STRING


def parse_null(text: str) -> bool:
    return _NULL_RE.fullmatch(text) is not None


def parse_bool(text: str) -> bool | None:
    if _TRUE_RE.fullmatch(text):
        return True
    if _FALSE_RE.fullmatch(text):
        return False
    return None


def parse_int(text: str) -> int | None:
    if _INTEGER_RE.fullmatch(text):
        return int(text, 10)
    if _OCTAL_RE.fullmatch(text):
        return int(text[2:], 8)
    if _HEX_RE.fullmatch(text):
        return int(text[2:], 16)
    return None


def parse_float(text: str) -> float | None:
    if _FLOAT_RE.fullmatch(text):
        return float(text)
    if _INFINITY_RE.fullmatch(text):
        return -math.inf if text.startswith("-") else math.inf
    if _NAN_RE.fullmatch(text):
        return math.nan
    return None


def interpret_scalar(
    text: str,
    *,
    was_quoted: bool = False,
    allow_quoted: bool = False,
    tag: str | None = None,
) -> ScalarInterpretation:
    """Resolve scalar text to a core-schema value.

    Quoted and block scalars are strings unless `allow_quoted` is set. A `!!str`
    tag always yields a string.
    """
    if tag in STRING_TAGS or (was_quoted and not allow_quoted):
        return _string(text)

    if parse_null(text):
        return ScalarInterpretation(
            kind=ScalarKind.NULL,
            value=None,
            bool_value=None,
            number_value=None,
        )

    bool_value = parse_bool(text)
    if bool_value is not None:
        return ScalarInterpretation(
            kind=ScalarKind.BOOL,
            value=bool_value,
            bool_value=bool_value,
            number_value=None,
        )

    int_value = parse_int(text)
    if int_value is not None:
        return ScalarInterpretation(
            kind=ScalarKind.INT,
            value=int_value,
            bool_value=None,
            number_value=int_value,
        )

    float_value = parse_float(text)
    if float_value is not None:
        return ScalarInterpretation(
            kind=ScalarKind.FLOAT,
            value=float_value,
            bool_value=None,
            number_value=float_value,
        )

    return _string(text)


def _string(text: str) -> ScalarInterpretation:
    return ScalarInterpretation(
        kind=ScalarKind.STRING,
        value=text,
        bool_value=None,
        number_value=None,
    )


__all__ = [
    "STRING_TAGS",
    "ScalarInterpretation",
    "ScalarKind",
    "interpret_scalar",
    "parse_bool",
    "parse_float",
    "parse_int",
    "parse_null",
]
