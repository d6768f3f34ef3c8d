"""
(C) 2026 Joseph Tingiris (joseph.tingiris@gmail.com)

Diagnostics for hop-hints.

stdout is reserved for commands evaluated by the editor, so everything here
writes to stderr:

- `debug_echo(level, category, msg)` — leveled, category-filtered debug
  lines, enabled with `--debug` or `HOP_HINTS_DEBUG`;
- `warn(msg)` / `error(msg)` — `warn: ...` / `error: ...` lines.
"""
from __future__ import annotations

import os
import sys

# color default output value, options: 'auto'|'always'|'never'
COLOR: str = 'auto'

# debug defaults
DEBUG_LEVEL: int = 0  # off
DEBUG_TARGET_CATEGORY: str | None = None  # set via --debug target=['labels', 'reduce', 'parse', 'config', ...]

DEBUG_ENV_VAR = "HOP_HINTS_DEBUG"


def configure(level: int = 0, category: str | None = None, color: str = 'auto') -> None:
    """Set the module debug globals."""
    global DEBUG_LEVEL, DEBUG_TARGET_CATEGORY, COLOR
    DEBUG_LEVEL = level
    DEBUG_TARGET_CATEGORY = category
    COLOR = color


def parse_debug_specs(specs: list[str] | None) -> tuple[int, str | None]:
    """Fold repeated `--debug` values into a (level, category) pair.

    Each value is a positive integer level, `level=N`, or `target=NAME`
    (alias `category=NAME`). A bare `--debug` means level 1.
    """
    level = 0
    category = None
    for spec in specs or []:
        spec = str(spec if spec is not None else '1').strip()
        if '=' in spec:
            key, value = spec.split('=', 1)
            key = key.strip().lower()
            value = value.strip()
            if key in ('target', 'category'):
                category = value or None
                level = max(level, 1)
            elif key == 'level':
                level = max(level, int(value))
            else:
                raise ValueError(f"unknown debug filter: {key}")
        else:
            level = max(level, int(spec))
    return level, category


def configure_from_env() -> None:
    """Apply `HOP_HINTS_DEBUG` (same syntax as `--debug`, comma separated)."""
    raw = os.environ.get(DEBUG_ENV_VAR, '').strip()
    if not raw:
        return
    try:
        level, category = parse_debug_specs([part for part in raw.split(',') if part.strip()])
    except ValueError as exc:
        warn(f"ignoring {DEBUG_ENV_VAR}={raw!r}: {exc}")
        return
    configure(level, category, COLOR)


def _color_enabled() -> bool:
    if COLOR == 'never':
        return False
    if COLOR == 'always':
        return True
    try:
        # auto (default)
        return sys.stderr.isatty()
    except (AttributeError, ValueError):
        return False


def debug_color(text: str, level: int) -> str:
    if not _color_enabled():
        return text

    # simple level -> color mapping
    colors = {
        1: '\x1b[33m',
        2: '\x1b[36m',
        3: '\x1b[35m',
        4: '\x1b[34m',
    }

    code = colors.get(level, '\x1b[37m')
    return f"{code}{text}\x1b[0m"


def debug_echo(level: int, category: str, msg: str) -> None:
    """Emit a filtered, leveled debug message to stderr.

    Messages are emitted when `level` <= `DEBUG_LEVEL` and the category
    filter (if set) matches.
    """
    if DEBUG_LEVEL <= 0:
        return
    if level > DEBUG_LEVEL:
        return
    if DEBUG_TARGET_CATEGORY and DEBUG_TARGET_CATEGORY != 'all' and category != DEBUG_TARGET_CATEGORY:
        return
    out = f"[DEBUG:{level}:{category}] {msg}"
    sys.stderr.write(debug_color(out, level) + '\n')


def warn(msg: str) -> None:
    print(f"warn: {msg}", file=sys.stderr)


def error(msg: str) -> None:
    print(f"error: {msg}", file=sys.stderr)
