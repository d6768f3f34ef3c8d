"""
(C) 2026 Joseph Tingiris (joseph.tingiris@gmail.com)

Kakoune command formatting.

The editor keeps no Python process around: `hop` runs `hop-hints hints` with
the current selections, evaluates the commands printed here, then waits for
a key and runs `hop-hints reduce` with the candidates stored in the
`hop_candidates` window option. Each call prints the commands for the next
state of the session.
"""
from __future__ import annotations

from typing import Sequence

from .display import truncate_label
from .reduction import Active, Cancelled, Exhausted, Resolved, State
from .selections import Selection, format_candidate

DEFAULT_FACE = "HopHint"

INIT_SCRIPT = r"""# hop-hints: label selections and jump to one of them
declare-option -docstring 'keys used to build hop hints' str hop_keyset '{keyset}'
declare-option -hidden range-specs hop_ranges
declare-option -hidden str-list hop_candidates
set-face global {face} 'black,yellow+F'

define-command -hidden hop-clear %{{
  try %{{ remove-highlighter window/hop }}
  set-option window hop_candidates
  set-option window hop_ranges %val{{timestamp}}
}}

define-command -hidden hop-await-key %{{
  on-key %{{
    evaluate-commands %sh{{
      eval "set -- $kak_quoted_opt_hop_candidates"
      {program} --keyset "$kak_opt_hop_keyset" reduce --key "$kak_key" -- "$@"
    }}
  }}
}}

define-command -docstring 'label every selection with a hint and jump to the one typed' hop %{{
  evaluate-commands %sh{{
    {program} --keyset "$kak_opt_hop_keyset" hints -- $kak_selections_desc
  }}
}}
"""


def quote(text: str) -> str:
    """Quote `text` as a Kakoune single-quoted string."""
    return "'" + text.replace("'", "''") + "'"


def escape_markup(text: str) -> str:
    return text.replace("\\", "\\\\").replace("{", "\\{")


def render_init_script(keyset: str, face: str = DEFAULT_FACE, program: str = "hop-hints") -> str:
    return INIT_SCRIPT.format(keyset=keyset.replace("'", "''"), face=face, program=program)


def range_spec(label: str, selection: Selection, face: str = DEFAULT_FACE) -> str:
    """`start,end|{face}label` with the label cut to the selection width."""
    shown = truncate_label(label, selection.width)
    return f"{selection.range_describe()}|{{{face}}}{escape_markup(shown)}"


def _format_candidates(candidates: Sequence[tuple[str, Selection]], face: str) -> list[str]:
    stored = " ".join(quote(format_candidate(label, sel)) for label, sel in candidates)
    ranges = " ".join(quote(range_spec(label, sel, face)) for label, sel in candidates)
    return [
        f"set-option window hop_candidates {stored}".rstrip(),
        f"set-option window hop_ranges %val{{timestamp}} {ranges}".rstrip(),
        "add-highlighter -override window/hop replace-ranges hop_ranges",
        "hop-await-key",
    ]


def format_hints(pairs: Sequence[tuple[str, Selection]], face: str = DEFAULT_FACE) -> str:
    """Commands that display freshly assigned labels and wait for a key."""
    if not pairs:
        return "echo -markup '{Error}hop: nothing to label'\n"
    if len(pairs) == 1:
        return format_state(Resolved(pairs[0][1]), face)
    return "\n".join(_format_candidates(pairs, face)) + "\n"


def format_state(state: State, face: str = DEFAULT_FACE, key: str | None = None) -> str:
    """Commands for the state reached after a key."""
    if isinstance(state, Active):
        pairs = [(candidate.suffix, candidate.target) for candidate in state.candidates]
        return "\n".join(_format_candidates(pairs, face)) + "\n"
    if isinstance(state, Resolved):
        return f"hop-clear\nselect {state.target.describe()}\n"
    if isinstance(state, Exhausted):
        typed = f" {escape_markup(key)}" if key else ""
        return f"hop-clear\necho -markup {quote('{Error}hop: no hint starts with' + typed)}\n"
    if isinstance(state, Cancelled):
        return "hop-clear\n"
    raise TypeError(f"unknown hint state: {state!r}")

