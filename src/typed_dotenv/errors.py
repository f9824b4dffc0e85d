"""
TypedEnv
Copyright (c) 2026 Chris Menendez.
All Rights Reserved.
See LICENSE for permitted use.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Optional


class DotenvError(Exception):
    """Base class for every failure raised by typed_dotenv."""


@dataclass
class MissingSourceError(DotenvError):
    path: Path

    def __str__(self) -> str:
        return f"environment file is missing: {self.path}"


@dataclass
class UnreadableSourceError(DotenvError):
    path: Path
    reason: str

    def __str__(self) -> str:
        return f"unable to read environment file {self.path}: {self.reason}"


@dataclass
class MalformedPairError(DotenvError, ValueError):
    line_number: int
    line: str
    segments: int

    def __str__(self) -> str:
        return (
            f"line {self.line_number}: expected exactly one delimiter-separated key/value pair, "
            f"got {self.segments} segment(s): {self.line!r}"
        )


@dataclass
class EmptyPairError(DotenvError, ValueError):
    key: str
    value: str
    line_number: Optional[int] = None

    def __str__(self) -> str:
        where = f"line {self.line_number}: " if self.line_number is not None else ""
        return f"{where}empty key or value in pair ({self.key!r}, {self.value!r})"


@dataclass
class UnsupportedPairError(DotenvError, ValueError):
    key: str
    value: str
    reason: str

    def __str__(self) -> str:
        return f"cannot store ({self.key!r}, {self.value!r}) in a .env file: {self.reason}"


@dataclass
class DestinationExistsError(DotenvError):
    path: Path

    def __str__(self) -> str:
        return f"refusing to overwrite existing file (use force): {self.path}"
