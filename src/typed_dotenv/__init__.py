"""
TypedEnv
Copyright (c) 2026 Chris Menendez.
All Rights Reserved.
See LICENSE for permitted use.
"""

from .dotenv import Dotenv, configure, configure_async, load, load_async, save
from .errors import (
    DestinationExistsError,
    DotenvError,
    EmptyPairError,
    MalformedPairError,
    MissingSourceError,
    UnreadableSourceError,
    UnsupportedPairError,
)
from .filesystem import LocalFileSystem
from .naming import MemberAccess, key_to_member, member_to_key
from .parser import Entry, aiter_entries, iter_entries, parse, parse_line
from .process_env import ProcessEnvironment
from .resolver import Environment
from .settings import DEFAULT_SETTINGS, DotenvSettings, FallbackStrategy, SettingsError
from .store import Store
from .value import Boolean, Float, Integer, String, Value, coerce, infer, render

__all__ = [
    "Boolean",
    "Integer",
    "Float",
    "String",
    "Value",
    "infer",
    "render",
    "coerce",
    "Entry",
    "parse",
    "parse_line",
    "iter_entries",
    "aiter_entries",
    "Store",
    "Environment",
    "ProcessEnvironment",
    "LocalFileSystem",
    "MemberAccess",
    "member_to_key",
    "key_to_member",
    "DotenvSettings",
    "FallbackStrategy",
    "DEFAULT_SETTINGS",
    "SettingsError",
    "Dotenv",
    "load",
    "load_async",
    "save",
    "configure",
    "configure_async",
    "DotenvError",
    "MissingSourceError",
    "UnreadableSourceError",
    "MalformedPairError",
    "EmptyPairError",
    "UnsupportedPairError",
    "DestinationExistsError",
]
