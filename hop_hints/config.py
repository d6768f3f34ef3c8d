"""
(C) 2026 Joseph Tingiris (joseph.tingiris@gmail.com)

User configuration, read from a JSON5 file.

Lookup order (first hit wins):

    1. `--config PATH`
    2. `$HOP_HINTS_CONFIG`
    3. `$XDG_CONFIG_HOME/hop-hints/config.json5` (default `~/.config`), if present

Example

    // ~/.config/hop-hints/config.json5
    {
      keyset: "asdfghjkl",
      abort_key: "<esc>",
      face: "HopHint",
      format: "kakoune",
    }

Command line options always override file values.
"""
from __future__ import annotations

import os
from dataclasses import dataclass, fields, replace
from typing import Any

import json5

from .debug import debug_echo, warn
from .errors import ConfigurationError
from .kakoune import DEFAULT_FACE
from .reduction import DEFAULT_ABORT_KEY

CONFIG_ENV_VAR = "HOP_HINTS_CONFIG"

DEFAULT_KEYSET = "etovxqpdygfblzhckisuran"

FORMATS = ("kakoune", "plain")


@dataclass(frozen=True)
class Config:
    keyset: str = DEFAULT_KEYSET
    abort_key: str = DEFAULT_ABORT_KEY
    face: str = DEFAULT_FACE
    format: str = "kakoune"

    def validate(self) -> "Config":
        for f in fields(self):
            value = getattr(self, f.name)
            if not isinstance(value, str):
                raise ConfigurationError(f"{f.name} must be a string, not {type(value).__name__}")
        if not self.keyset:
            raise ConfigurationError("keyset must not be empty")
        if self.format not in FORMATS:
            raise ConfigurationError(f"format must be one of {', '.join(FORMATS)}: {self.format!r}")
        return self

    def override(self, **values: Any) -> "Config":
        """Return a copy with every non-None value applied."""
        changes = {key: value for key, value in values.items() if value is not None}
        return replace(self, **changes).validate()


def default_config_path() -> str:
    base = os.environ.get("XDG_CONFIG_HOME") or os.path.join(os.path.expanduser("~"), ".config")
    return os.path.join(base, "hop-hints", "config.json5")


def resolve_config_path(path: str | None = None) -> str | None:
    """Return the config file to read, or None when there is none."""
    if path:
        return path
    env_path = os.environ.get(CONFIG_ENV_VAR)
    if env_path:
        return env_path
    candidate = default_config_path()
    if os.path.isfile(candidate):
        return candidate
    return None


def config_from_mapping(data: Any, source: str = "<config>") -> Config:
    if not isinstance(data, dict):
        raise ConfigurationError(f"{source}: top level must be an object")
    known = {f.name for f in fields(Config)}
    values = {}
    for key, value in data.items():
        if key not in known:
            warn(f"{source}: ignoring unknown option {key!r}")
            continue
        values[key] = value
    return Config(**values).validate()


def load_config(path: str | None = None) -> Config:
    """Load the configuration, falling back to defaults when no file exists."""
    resolved = resolve_config_path(path)
    if resolved is None:
        debug_echo(1, "config", "no config file, using defaults")
        return Config()

    debug_echo(1, "config", f"reading {resolved}")
    try:
        with open(resolved, "r", encoding="utf-8") as handle:
            data = json5.load(handle)
    except OSError as exc:
        raise ConfigurationError(f"cannot read config {resolved}: {exc}") from exc
    except ValueError as exc:
        raise ConfigurationError(f"invalid JSON5 in {resolved}: {exc}") from exc
    return config_from_mapping(data, resolved)
