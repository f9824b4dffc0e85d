"""
TypedEnv
Copyright (c) 2026 Chris Menendez.
All Rights Reserved.
See LICENSE for permitted use.

Insertion-ordered key/value store backing a .env file.
"""

from __future__ import annotations

from typing import Dict, Iterable, Iterator, Mapping, MutableMapping, Optional, Tuple, Union

from typed_dotenv.errors import EmptyPairError, UnsupportedPairError
from typed_dotenv.parser import Entry, parse
from typed_dotenv.settings import DEFAULT_SETTINGS, DotenvSettings
from typed_dotenv.value import String, Value, coerce, infer, render

RawValue = Union[Value, str, bool, int, float]
EntrySource = Union[Mapping[str, RawValue], Iterable[Union[Entry, Tuple[str, RawValue]]]]

_LINE_BREAKS = ("\n", "\r")
EMPTY_STRING_LITERAL = '""'


def _checked(key: str, value: RawValue, trusted: bool = False) -> Value:
    if not key:
        raise EmptyPairError(key=key, value=value if isinstance(value, str) else render(coerce(value)))
    if isinstance(value, str):
        # emptiness applies to the raw text; '""' is a real, empty string value
        if not value:
            raise EmptyPairError(key=key, value=value)
        return infer(value)
    typed = coerce(value)
    if not trusted and isinstance(typed, String) and not typed.value:
        raise EmptyPairError(key=key, value=typed.value)
    return typed


def _check_writable(key: str, value: Value, delimiter: str) -> None:
    for forbidden in (delimiter,) + _LINE_BREAKS:
        if forbidden in key:
            raise UnsupportedPairError(key=key, value=render(value), reason=f"key contains {forbidden!r}")
        if isinstance(value, String) and forbidden in value.value:
            raise UnsupportedPairError(key=key, value=value.value, reason=f"value contains {forbidden!r}")


def _pairs(entries: EntrySource) -> Iterator[Tuple[str, RawValue, bool]]:
    if isinstance(entries, Mapping):
        for key, value in entries.items():
            yield key, value, False
        return
    for item in entries:
        key, value = item
        # parsed entries already passed the raw-text emptiness check
        yield key, value, isinstance(item, Entry)


def _line_value(value: Value) -> str:
    if isinstance(value, String) and not value.value:
        return EMPTY_STRING_LITERAL
    return render(value)


class Store(MutableMapping[str, Value]):
    """
    Ordered mapping of key to typed value.

    Keys are case-sensitive and stored verbatim. Insertion order is the
    serialization order; replacing a value keeps the key's original position.
    Construction validates every entry before anything is stored, so a
    malformed batch never yields a partially built store.

    Keys and string values may not contain the delimiter or a line break;
    such pairs cannot be written as a single ``key<delimiter>value`` line
    and raise ``UnsupportedPairError``.
    """

    def __init__(self, entries: EntrySource = (), *, delimiter: str = DEFAULT_SETTINGS.delimiter) -> None:
        values: Dict[str, Value] = {}
        for key, value, trusted in _pairs(entries):
            typed = _checked(key, value, trusted)
            _check_writable(key, typed, delimiter)
            values[key] = typed
        self._values = values
        self.delimiter = delimiter

    @classmethod
    def from_entries(cls, entries: EntrySource, *, delimiter: str = DEFAULT_SETTINGS.delimiter) -> "Store":
        return cls(entries, delimiter=delimiter)

    @classmethod
    def from_text(cls, text: str, settings: DotenvSettings = DEFAULT_SETTINGS) -> "Store":
        return cls(parse(text, settings=settings), delimiter=settings.delimiter)

    def __getitem__(self, key: str) -> Value:
        return self._values[key]

    def __setitem__(self, key: str, value: RawValue) -> None:
        self.set(key, value, overwrite=True)

    def __delitem__(self, key: str) -> None:
        del self._values[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._values)

    def __len__(self) -> int:
        return len(self._values)

    def __contains__(self, key: object) -> bool:
        return key in self._values

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Store):
            return list(self._values.items()) == list(other._values.items())
        return NotImplemented

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        body = ", ".join(f"{key!r}: {value!r}" for key, value in self._values.items())
        return f"Store({{{body}}})"

    def get(self, key: str, default: Optional[Value] = None) -> Optional[Value]:
        return self._values.get(key, default)

    def set(self, key: str, value: RawValue, overwrite: bool = True) -> bool:
        """
        Store ``value`` under ``key``.

        With ``overwrite=False`` an existing key keeps its value and the call
        returns ``False``; that is a no-op, not an error.
        """
        typed = _checked(key, value)
        return self._assign(key, typed, overwrite)

    def add(self, entry: Entry, overwrite: bool = True) -> bool:
        """Like ``set`` for an already parsed ``Entry``; an empty ``String`` is accepted."""
        typed = _checked(entry.key, entry.value, trusted=True)
        return self._assign(entry.key, typed, overwrite)

    def _assign(self, key: str, typed: Value, overwrite: bool) -> bool:
        _check_writable(key, typed, self.delimiter)
        if not overwrite and key in self._values:
            return False
        self._values[key] = typed
        return True

    def remove(self, key: str) -> Optional[Value]:
        return self._values.pop(key, None)

    def serialize(self, delimiter: Optional[str] = None) -> str:
        """
        Render one ``key<delimiter>value`` line per entry, in insertion order.

        String values are written verbatim. Quotes stripped by inference on
        the way in are not put back, so a quoted value does not round-trip
        byte for byte. The empty string is the exception: it is written as
        ``""`` so the line reads back as ``String("")``.
        """
        delim = delimiter or self.delimiter
        if delim != self.delimiter:
            for key, value in self._values.items():
                _check_writable(key, value, delim)
        return "".join(f"{key}{delim}{_line_value(value)}\n" for key, value in self._values.items())

    def to_strings(self) -> Dict[str, str]:
        return {key: render(value) for key, value in self._values.items()}

    def copy(self) -> "Store":
        clone = Store(delimiter=self.delimiter)
        clone._values = dict(self._values)
        return clone
