"""
TypedEnv
Copyright (c) 2026 Chris Menendez.
All Rights Reserved.
See LICENSE for permitted use.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import AsyncIterable, AsyncIterator, Iterable, Iterator, List, Optional

from typed_dotenv.errors import EmptyPairError, MalformedPairError
from typed_dotenv.settings import DEFAULT_SETTINGS, DotenvSettings
from typed_dotenv.value import Value, infer


@dataclass(frozen=True)
class Entry:
    key: str
    value: Value

    def __iter__(self) -> Iterator[object]:
        yield self.key
        yield self.value


def parse_line(line: str, line_number: int, settings: DotenvSettings = DEFAULT_SETTINGS) -> Optional[Entry]:
    """
    Parse one line of a .env file.

    Returns ``None`` for comment lines and, unless blank lines are strict,
    for whitespace-only lines. Raises ``MalformedPairError`` when the line
    does not split into exactly two segments and ``EmptyPairError`` when the
    key or value is empty after trimming.
    """
    if line.startswith(settings.comment_marker):
        return None
    if settings.skip_blank_lines and not line.strip():
        return None

    segments = line.split(settings.delimiter)
    if len(segments) != 2:
        raise MalformedPairError(line_number=line_number, line=line, segments=len(segments))

    key = segments[0].strip()
    raw_value = segments[1].strip()
    if not key or not raw_value:
        raise EmptyPairError(key=key, value=raw_value, line_number=line_number)
    return Entry(key=key, value=infer(raw_value))


def iter_entries(lines: Iterable[str], settings: DotenvSettings = DEFAULT_SETTINGS) -> Iterator[Entry]:
    """Yield entries in file order; a bad line raises after earlier entries were yielded."""
    for line_number, line in enumerate(lines, start=1):
        entry = parse_line(line.rstrip("\n"), line_number, settings)
        if entry is not None:
            yield entry


async def aiter_entries(
    lines: AsyncIterable[str], settings: DotenvSettings = DEFAULT_SETTINGS
) -> AsyncIterator[Entry]:
    line_number = 0
    async for line in lines:
        line_number += 1
        entry = parse_line(line.rstrip("\n"), line_number, settings)
        if entry is not None:
            yield entry


def split_lines(text: str) -> List[str]:
    lines = text.split("\n")
    # a trailing newline terminates the last line; it does not open a new one
    if lines and lines[-1] == "":
        lines.pop()
    return lines


def parse(
    text: str,
    delimiter: Optional[str] = None,
    *,
    settings: DotenvSettings = DEFAULT_SETTINGS,
) -> List[Entry]:
    """Parse whole-file text into ordered entries; one bad line fails the whole call."""
    if delimiter is not None and delimiter != settings.delimiter:
        settings = settings.with_overrides(delimiter=delimiter)
    return list(iter_entries(split_lines(text), settings))
