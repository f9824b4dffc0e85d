"""
TypedEnv
Copyright (c) 2026 Chris Menendez.
All Rights Reserved.
See LICENSE for permitted use.

Load, save and apply .env files.

Loading is all-or-nothing: one bad line fails the whole file. ``configure``
applies pairs to the process environment as it streams the file, so a
failure part-way through leaves the variables set before the bad line in
place. That partial application is expected; nothing is rolled back.
"""

from __future__ import annotations

import asyncio
import contextlib
import logging
from pathlib import Path
from typing import IO, AsyncIterator, Iterator, Optional

from typed_dotenv.errors import DestinationExistsError, MissingSourceError, UnreadableSourceError
from typed_dotenv.filesystem import LocalFileSystem, PathLike
from typed_dotenv.parser import aiter_entries, iter_entries, parse
from typed_dotenv.process_env import ProcessEnvironment
from typed_dotenv.resolver import Environment
from typed_dotenv.settings import DEFAULT_SETTINGS, DotenvSettings
from typed_dotenv.store import Store
from typed_dotenv.value import Value, render

logger = logging.getLogger(__name__)


class Dotenv:
    """Facade tying settings, the filesystem and the process environment together."""

    def __init__(
        self,
        settings: DotenvSettings = DEFAULT_SETTINGS,
        filesystem: Optional[LocalFileSystem] = None,
        process_env: Optional[ProcessEnvironment] = None,
    ) -> None:
        self.settings = settings
        self.filesystem = filesystem if filesystem is not None else LocalFileSystem()
        self.process_env = process_env if process_env is not None else ProcessEnvironment()

    def _resolve_path(self, path: Optional[PathLike]) -> Path:
        return Path(path) if path is not None else Path(self.settings.path)

    def _require_source(self, path: Path) -> None:
        if not self.filesystem.exists(path):
            raise MissingSourceError(path=path)

    def _read_text(self, path: Path) -> str:
        self._require_source(path)
        try:
            return self.filesystem.read_text(path, self.settings.encoding)
        except UnicodeDecodeError as exc:
            raise UnreadableSourceError(path=path, reason=f"not valid {self.settings.encoding} text: {exc}") from exc
        except OSError as exc:
            raise UnreadableSourceError(path=path, reason=str(exc)) from exc

    def _lines(self, path: Path) -> Iterator[str]:
        self._require_source(path)
        try:
            yield from self.filesystem.iter_lines(path, self.settings.encoding)
        except UnicodeDecodeError as exc:
            raise UnreadableSourceError(path=path, reason=f"not valid {self.settings.encoding} text: {exc}") from exc
        except OSError as exc:
            raise UnreadableSourceError(path=path, reason=str(exc)) from exc

    async def _alines(self, path: Path) -> AsyncIterator[str]:
        self._require_source(path)
        try:
            handle: IO[str] = await asyncio.to_thread(self.filesystem.open_text, path, self.settings.encoding)
        except OSError as exc:
            raise UnreadableSourceError(path=path, reason=str(exc)) from exc
        try:
            while True:
                try:
                    line = await asyncio.to_thread(handle.readline)
                except UnicodeDecodeError as exc:
                    raise UnreadableSourceError(
                        path=path, reason=f"not valid {self.settings.encoding} text: {exc}"
                    ) from exc
                except OSError as exc:
                    raise UnreadableSourceError(path=path, reason=str(exc)) from exc
                if not line:
                    return
                yield line
        finally:
            handle.close()

    def load(self, path: Optional[PathLike] = None) -> Store:
        """Read and parse a .env file into a ``Store``."""
        env_path = self._resolve_path(path)
        store = Store(parse(self._read_text(env_path), settings=self.settings), delimiter=self.settings.delimiter)
        logger.info("Loaded %d entries from %s", len(store), env_path)
        return store

    async def load_async(self, path: Optional[PathLike] = None) -> Store:
        """Like ``load`` but reads line by line without blocking the event loop."""
        env_path = self._resolve_path(path)
        async with contextlib.aclosing(self._alines(env_path)) as lines:
            entries = [entry async for entry in aiter_entries(lines, self.settings)]
        store = Store(entries, delimiter=self.settings.delimiter)
        logger.info("Loaded %d entries from %s", len(store), env_path)
        return store

    def environment(self, path: Optional[PathLike] = None) -> Environment:
        return Environment(self.load(path), process_env=self.process_env, settings=self.settings)

    def save(self, store: Store, path: Optional[PathLike] = None, force: bool = False) -> Path:
        """
        Write ``store`` to ``path``.

        Only store contents are persisted; the process environment is never
        read. Without ``force`` an existing destination is left untouched.
        """
        env_path = self._resolve_path(path)
        contents = store.serialize(self.settings.delimiter)
        if not force and self.filesystem.exists(env_path):
            raise DestinationExistsError(path=env_path)
        self.filesystem.write_text(env_path, contents, self.settings.encoding)
        logger.info("Saved %d entries to %s", len(store), env_path)
        return env_path

    def configure(self, path: Optional[PathLike] = None, overwrite: bool = True) -> Store:
        """
        Apply a .env file to the process environment, one line at a time.

        Returns the pairs that were read. Variables that already exist are
        kept unless ``overwrite`` is set.
        """
        env_path = self._resolve_path(path)
        applied = Store(delimiter=self.settings.delimiter)
        for entry in iter_entries(self._lines(env_path), self.settings):
            self._apply(entry.key, entry.value, overwrite)
            applied.add(entry)
        logger.info("Configured %d variables from %s", len(applied), env_path)
        return applied

    async def configure_async(self, path: Optional[PathLike] = None, overwrite: bool = True) -> Store:
        env_path = self._resolve_path(path)
        applied = Store(delimiter=self.settings.delimiter)
        async with contextlib.aclosing(self._alines(env_path)) as lines:
            async for entry in aiter_entries(lines, self.settings):
                self._apply(entry.key, entry.value, overwrite)
                applied.add(entry)
        logger.info("Configured %d variables from %s", len(applied), env_path)
        return applied

    def _apply(self, key: str, value: Value, overwrite: bool) -> None:
        if not self.process_env.set(key, render(value), overwrite=overwrite):
            logger.debug("Skipped %s: already set in the process environment", key)


def load(path: Optional[PathLike] = None, settings: DotenvSettings = DEFAULT_SETTINGS) -> Store:
    return Dotenv(settings).load(path)


async def load_async(path: Optional[PathLike] = None, settings: DotenvSettings = DEFAULT_SETTINGS) -> Store:
    return await Dotenv(settings).load_async(path)


def save(
    store: Store,
    path: Optional[PathLike] = None,
    force: bool = False,
    settings: DotenvSettings = DEFAULT_SETTINGS,
) -> Path:
    return Dotenv(settings).save(store, path, force=force)


def configure(
    path: Optional[PathLike] = None,
    overwrite: bool = True,
    settings: DotenvSettings = DEFAULT_SETTINGS,
) -> Store:
    return Dotenv(settings).configure(path, overwrite=overwrite)


async def configure_async(
    path: Optional[PathLike] = None,
    overwrite: bool = True,
    settings: DotenvSettings = DEFAULT_SETTINGS,
) -> Store:
    return await Dotenv(settings).configure_async(path, overwrite=overwrite)
