"""
TypedEnv
Copyright (c) 2026 Chris Menendez.
All Rights Reserved.
See LICENSE for permitted use.

Two-tier lookup over a Store and the process environment.
"""

from __future__ import annotations

from typing import Callable, Dict, List, Optional

from typed_dotenv.process_env import ProcessEnvironment
from typed_dotenv.settings import DEFAULT_SETTINGS, DataSource, DotenvSettings, FallbackStrategy
from typed_dotenv.store import RawValue, Store
from typed_dotenv.value import String, Value, infer

Lookup = Callable[[str], Optional[Value]]


class Environment:
    """
    Bind one ``Store`` to a process environment and a fallback strategy.

    Queries walk the strategy's sources in order and return the first value
    found. Mutations only ever reach the bound store.
    """

    def __init__(
        self,
        store: Optional[Store] = None,
        *,
        process_env: Optional[ProcessEnvironment] = None,
        settings: DotenvSettings = DEFAULT_SETTINGS,
    ) -> None:
        self._store = store if store is not None else Store(delimiter=settings.delimiter)
        self._process_env = process_env if process_env is not None else ProcessEnvironment()
        self._settings = settings
        self._lookups = self._build_lookups(settings.fallback)

    @property
    def store(self) -> Store:
        return self._store

    @property
    def strategy(self) -> FallbackStrategy:
        return self._settings.fallback

    @property
    def settings(self) -> DotenvSettings:
        return self._settings

    def _lookup_store(self, key: str) -> Optional[Value]:
        return self._store.get(key)

    def _lookup_process(self, key: str) -> Optional[Value]:
        raw = self._process_env.get(key)
        if raw is None:
            return None if self._settings.absent_is_missing else String("")
        return infer(raw)

    def _build_lookups(self, strategy: FallbackStrategy) -> List[Lookup]:
        by_source: Dict[DataSource, Lookup] = {
            "store": self._lookup_store,
            "process": self._lookup_process,
        }
        return [by_source[source] for source in strategy.sources]

    def query(self, key: str) -> Optional[Value]:
        for lookup in self._lookups:
            value = lookup(key)
            if value is not None:
                return value
        return None

    def get(self, key: str, default: Optional[Value] = None) -> Optional[Value]:
        value = self.query(key)
        return default if value is None else value

    def __getitem__(self, key: str) -> Value:
        value = self.query(key)
        if value is None:
            raise KeyError(key)
        return value

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and self.query(key) is not None

    def set(self, key: str, value: RawValue, overwrite: bool = True) -> bool:
        return self._store.set(key, value, overwrite=overwrite)

    def remove(self, key: str) -> Optional[Value]:
        return self._store.remove(key)

    def with_strategy(self, strategy: FallbackStrategy) -> "Environment":
        return Environment(
            self._store,
            process_env=self._process_env,
            settings=self._settings.model_copy(update={"fallback": strategy}),
        )

    def __repr__(self) -> str:
        sources = ",".join(self.strategy.sources)
        return f"Environment(keys={len(self._store)}, sources={sources})"
