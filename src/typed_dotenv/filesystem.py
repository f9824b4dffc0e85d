"""
TypedEnv
Copyright (c) 2026 Chris Menendez.
All Rights Reserved.
See LICENSE for permitted use.
"""

from __future__ import annotations

import os
import tempfile
from pathlib import Path
from typing import IO, Iterator, Union

PathLike = Union[str, os.PathLike]


class LocalFileSystem:
    """Filesystem access used by the load/save facade."""

    def exists(self, path: PathLike) -> bool:
        return Path(path).exists()

    def read_text(self, path: PathLike, encoding: str = "utf-8") -> str:
        return Path(path).read_text(encoding=encoding)

    def open_text(self, path: PathLike, encoding: str = "utf-8") -> IO[str]:
        # universal newlines, as in read_text: "\r\n" and a lone "\r" both end a line
        return open(path, "r", encoding=encoding)

    def iter_lines(self, path: PathLike, encoding: str = "utf-8") -> Iterator[str]:
        with self.open_text(path, encoding) as handle:
            for line in handle:
                yield line

    def write_text(self, path: PathLike, content: str, encoding: str = "utf-8") -> None:
        """
        Write text to a temp file in the same directory, then atomically replace.

        The temp file is removed if writing or replacing fails.
        """
        target = Path(path)
        self.create_directories(target.parent)
        with tempfile.NamedTemporaryFile("w", dir=target.parent, prefix=f".{target.name}.", delete=False) as tmp:
            tmp_path = Path(tmp.name)
        try:
            tmp_path.write_text(content, encoding=encoding)
            os.replace(tmp_path, target)
        finally:
            tmp_path.unlink(missing_ok=True)

    def create_directories(self, path: PathLike) -> None:
        Path(path).mkdir(parents=True, exist_ok=True)

    def remove_file(self, path: PathLike) -> None:
        Path(path).unlink(missing_ok=True)
