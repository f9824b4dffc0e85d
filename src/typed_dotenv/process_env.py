"""
TypedEnv
Copyright (c) 2026 Chris Menendez.
All Rights Reserved.
See LICENSE for permitted use.
"""

from __future__ import annotations

import os
from typing import Dict, MutableMapping, Optional


class ProcessEnvironment:
    """
    Accessor for a process environment table.

    Wraps ``os.environ`` by default; tests pass a plain dict instead. This is
    the only place typed_dotenv mutates environment variables, and it assumes
    a single mutator at a time.
    """

    def __init__(self, environ: Optional[MutableMapping[str, str]] = None) -> None:
        self._environ = os.environ if environ is None else environ

    def get_all(self) -> Dict[str, str]:
        return dict(self._environ)

    def get(self, key: str) -> Optional[str]:
        return self._environ.get(key)

    def set(self, key: str, value: str, overwrite: bool = True) -> bool:
        """Set ``key``; returns False when it already exists and ``overwrite`` is off."""
        if not overwrite and key in self._environ:
            return False
        self._environ[key] = value
        return True

    def unset(self, key: str) -> Optional[str]:
        return self._environ.pop(key, None)

    def __contains__(self, key: object) -> bool:
        return key in self._environ
