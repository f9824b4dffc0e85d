"""
TypedEnv
Copyright (c) 2026 Chris Menendez.
All Rights Reserved.
See LICENSE for permitted use.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Optional, Union

INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1

_INTEGER_RE = re.compile(r"[+-]?[0-9]+")
_FLOAT_RE = re.compile(r"[+-]?(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")
_BOOLEAN_LITERALS = {"true": True, "false": False}


@dataclass(frozen=True)
class Boolean:
    value: bool

    kind = "boolean"

    def __post_init__(self) -> None:
        if not isinstance(self.value, bool):
            raise TypeError(f"Boolean payload must be bool, got {type(self.value).__name__}")

    def __str__(self) -> str:
        return render(self)


@dataclass(frozen=True)
class Integer:
    value: int

    kind = "integer"

    def __post_init__(self) -> None:
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise TypeError(f"Integer payload must be int, got {type(self.value).__name__}")
        if not INT64_MIN <= self.value <= INT64_MAX:
            raise ValueError(f"Integer payload out of 64-bit range: {self.value}")

    def __str__(self) -> str:
        return render(self)


@dataclass(frozen=True)
class Float:
    value: float

    kind = "float"

    def __post_init__(self) -> None:
        if isinstance(self.value, bool) or not isinstance(self.value, (int, float)):
            raise TypeError(f"Float payload must be float, got {type(self.value).__name__}")
        if isinstance(self.value, int):
            object.__setattr__(self, "value", float(self.value))

    def __str__(self) -> str:
        return render(self)


@dataclass(frozen=True)
class String:
    value: str

    kind = "string"

    def __post_init__(self) -> None:
        if not isinstance(self.value, str):
            raise TypeError(f"String payload must be str, got {type(self.value).__name__}")

    def __str__(self) -> str:
        return render(self)


Value = Union[Boolean, Integer, Float, String]
VALUE_TYPES = (Boolean, Integer, Float, String)


def _parse_int64(raw: str) -> Optional[int]:
    if not _INTEGER_RE.fullmatch(raw):
        return None
    number = int(raw)
    if not INT64_MIN <= number <= INT64_MAX:
        return None
    return number


def _unquote(raw: str) -> str:
    text = raw
    if len(text) >= 2 and text[0] == '"' and text[-1] == '"':
        text = text[1:-1]
    return text.replace('\\"', '"')


def infer(raw: str) -> Value:
    """
    Classify a raw string as the most specific value type.

    Order matters: booleans first, then floats that are not also valid
    integers, then integers, with strings as the catch-all. ``"3"`` is
    therefore an ``Integer`` even though it is valid float syntax, while an
    integer literal too large for 64 bits becomes a ``Float``.
    """
    boolean = _BOOLEAN_LITERALS.get(raw.lower())
    if boolean is not None:
        return Boolean(boolean)

    integer = _parse_int64(raw)
    if integer is None and _FLOAT_RE.fullmatch(raw):
        return Float(float(raw))
    if integer is not None:
        return Integer(integer)

    return String(_unquote(raw))


def render(value: Value) -> str:
    """Render a value the way it is written back to a .env file (no re-quoting)."""
    if isinstance(value, Boolean):
        return "true" if value.value else "false"
    if isinstance(value, Integer):
        return str(value.value)
    if isinstance(value, Float):
        return repr(value.value)
    if isinstance(value, String):
        return value.value
    raise TypeError(f"not a dotenv value: {value!r}")


def coerce(value: Union[Value, str, bool, int, float]) -> Value:
    """Wrap a Python literal in the matching variant; strings go through ``infer``."""
    if isinstance(value, VALUE_TYPES):
        return value
    if isinstance(value, bool):
        return Boolean(value)
    if isinstance(value, int):
        return Integer(value)
    if isinstance(value, float):
        return Float(value)
    if isinstance(value, str):
        return infer(value)
    raise TypeError(f"cannot store {type(value).__name__} as a dotenv value")


def is_value(obj: object) -> bool:
    return isinstance(obj, VALUE_TYPES)
