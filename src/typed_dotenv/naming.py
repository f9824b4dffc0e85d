"""
TypedEnv
Copyright (c) 2026 Chris Menendez.
All Rights Reserved.
See LICENSE for permitted use.

Opt-in translation between Python-style member names and .env key names.

``member_to_key("apiKey") == "API_KEY"``. The store never applies this on
its own; keys there stay case-sensitive and verbatim.
"""

from __future__ import annotations

import re
from typing import Optional

from typed_dotenv.resolver import Environment
from typed_dotenv.value import Value

_CAMEL_BOUNDARY_RE = re.compile(r"(?<=[a-z0-9])(?=[A-Z])|(?<=[A-Z])(?=[A-Z][a-z])")


def member_to_key(name: str) -> str:
    """Translate ``apiKey`` / ``api_key`` / ``HTTPTimeout`` into ``API_KEY`` / ``HTTP_TIMEOUT``."""
    spaced = _CAMEL_BOUNDARY_RE.sub("_", name)
    return re.sub(r"_+", "_", spaced).upper()


def key_to_member(key: str) -> str:
    parts = [part for part in key.lower().split("_") if part]
    if not parts:
        return ""
    return parts[0] + "".join(part.capitalize() for part in parts[1:])


class MemberAccess:
    """Attribute-style view over an ``Environment``: ``MemberAccess(env).apiKey``."""

    def __init__(self, environment: Environment) -> None:
        object.__setattr__(self, "_environment", environment)

    def __getattr__(self, name: str) -> Optional[Value]:
        if name.startswith("_"):
            raise AttributeError(name)
        return self._environment.query(member_to_key(name))

    def __setattr__(self, name: str, value: object) -> None:
        raise AttributeError("MemberAccess is read-only; use Environment.set()")

    def __dir__(self) -> list:
        return sorted(set(super().__dir__()) | {key_to_member(key) for key in self._environment.store})
