"""
TypedEnv
Copyright (c) 2026 Chris Menendez.
All Rights Reserved.
See LICENSE for permitted use.

Explicit configuration for parsing, resolving and persisting .env files.
"""

from __future__ import annotations

import os
from typing import Literal, Mapping, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator, model_validator

DataSource = Literal["store", "process"]

DATA_SOURCES: Tuple[str, ...] = ("store", "process")
ENV_PREFIX = "TYPED_DOTENV_"
_TRUTHY = {"1", "true", "yes", "on"}
_SOURCE_ALIASES = {
    "store": "store",
    "file": "store",
    "dotenv": "store",
    "process": "process",
    "env": "process",
    "environ": "process",
}


class SettingsError(ValueError):
    pass


class FallbackStrategy(BaseModel):
    """Ordered pair of data sources consulted when resolving a key."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    primary: DataSource = "store"
    secondary: Optional[DataSource] = "process"

    @property
    def sources(self) -> Tuple[DataSource, ...]:
        # a source repeated as secondary is consulted once
        if self.secondary is None or self.secondary == self.primary:
            return (self.primary,)
        return (self.primary, self.secondary)

    @classmethod
    def parse(cls, text: str) -> "FallbackStrategy":
        """Build a strategy from a comma list such as ``store,process`` or ``process``."""
        names = [item.strip().lower() for item in text.split(",") if item.strip()]
        if not names or len(names) > 2:
            raise SettingsError(f"fallback must name one or two sources, got {text!r}")
        resolved = []
        for name in names:
            if name == "none" and resolved:
                resolved.append(None)
                continue
            if name not in _SOURCE_ALIASES:
                raise SettingsError(f"unknown data source {name!r}; expected one of {', '.join(DATA_SOURCES)}")
            resolved.append(_SOURCE_ALIASES[name])
        secondary = resolved[1] if len(resolved) == 2 else None
        return cls(primary=resolved[0], secondary=secondary)


class DotenvSettings(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    delimiter: str = Field(default="=")
    comment_marker: str = Field(default="#")
    path: str = Field(default=".env")
    encoding: str = Field(default="utf-8")
    skip_blank_lines: bool = True
    absent_is_missing: bool = True
    fallback: FallbackStrategy = Field(default_factory=FallbackStrategy)

    @field_validator("delimiter")
    @classmethod
    def _validate_delimiter(cls, value: str) -> str:
        if len(value) != 1:
            raise ValueError("delimiter must be exactly one character")
        if value in ("\n", "\r"):
            raise ValueError("delimiter cannot be a line break")
        return value

    @field_validator("comment_marker")
    @classmethod
    def _validate_comment_marker(cls, value: str) -> str:
        if not value or "\n" in value:
            raise ValueError("comment_marker must be a non-empty single-line string")
        return value

    @field_validator("path")
    @classmethod
    def _validate_path(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("path must not be empty")
        return value

    @model_validator(mode="after")
    def _validate_marker_vs_delimiter(self) -> "DotenvSettings":
        if self.comment_marker.startswith(self.delimiter):
            raise ValueError("comment_marker cannot start with the delimiter")
        return self

    @classmethod
    def from_environ(cls, environ: Optional[Mapping[str, str]] = None) -> "DotenvSettings":
        """
        Build settings from ``TYPED_DOTENV_*`` variables, falling back to defaults.

        Recognised: ``TYPED_DOTENV_PATH``, ``TYPED_DOTENV_DELIMITER``,
        ``TYPED_DOTENV_ENCODING``, ``TYPED_DOTENV_FALLBACK`` and
        ``TYPED_DOTENV_STRICT_BLANK_LINES``.
        """
        source = os.environ if environ is None else environ
        values: dict = {}
        for field in ("path", "delimiter", "encoding"):
            raw = source.get(f"{ENV_PREFIX}{field.upper()}")
            if raw:
                values[field] = raw
        fallback = source.get(f"{ENV_PREFIX}FALLBACK")
        if fallback:
            values["fallback"] = FallbackStrategy.parse(fallback)
        strict = source.get(f"{ENV_PREFIX}STRICT_BLANK_LINES")
        if strict is not None:
            values["skip_blank_lines"] = strict.strip().lower() not in _TRUTHY
        return build_settings(**values)

    def with_overrides(self, **changes: object) -> "DotenvSettings":
        """Return a validated copy with the given fields replaced; ``None`` values are ignored."""
        merged = self.model_dump()
        merged["fallback"] = self.fallback
        merged.update({key: value for key, value in changes.items() if value is not None})
        return build_settings(**merged)


def build_settings(**values: object) -> DotenvSettings:
    try:
        return DotenvSettings(**values)
    except ValidationError as exc:
        raise SettingsError(str(exc)) from exc


DEFAULT_SETTINGS = DotenvSettings()
