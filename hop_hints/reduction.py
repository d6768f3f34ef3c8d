"""
(C) 2026 Joseph Tingiris (joseph.tingiris@gmail.com)

Narrow labelled candidates one typed key at a time.

A hint session starts `Active` with every (label, target) pair. Each key
either cancels the session (the abort key) or keeps the candidates whose
remaining label starts with that key, dropping the key from each survivor:

    Active --key--> Active      more than one candidate left
    Active --key--> Resolved    exactly one candidate left
    Active --key--> Exhausted   no label starts with the key
    Active --abort-> Cancelled

`Resolved`, `Exhausted` and `Cancelled` are terminal. Keystrokes never raise;
only advancing a finished session does.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Generic, Iterable, Sequence, TypeVar, Union

from .debug import debug_echo
from .errors import HintSessionError

T = TypeVar("T")

DEFAULT_ABORT_KEY = "<esc>"


@dataclass(frozen=True)
class Candidate(Generic[T]):
    """A target with the part of its label still to be typed."""

    suffix: str
    target: T


@dataclass(frozen=True)
class Reduced(Generic[T]):
    candidates: tuple[Candidate[T], ...]


@dataclass(frozen=True)
class Active(Generic[T]):
    candidates: tuple[Candidate[T], ...]

    name = "active"
    terminal = False


@dataclass(frozen=True)
class Resolved(Generic[T]):
    target: T

    name = "resolved"
    terminal = True


@dataclass(frozen=True)
class Exhausted:
    name = "exhausted"
    terminal = True


@dataclass(frozen=True)
class Cancelled:
    name = "cancelled"
    terminal = True


Outcome = Union[Reduced, Cancelled]
State = Union[Active, Resolved, Exhausted, Cancelled]


def make_candidates(pairs: Iterable[tuple[str, T]]) -> tuple[Candidate[T], ...]:
    """Turn (label, target) pairs into candidates."""
    return tuple(Candidate(label, target) for label, target in pairs)


def reduce_candidates(
    candidates: Sequence[Candidate[T]],
    key: str,
    abort_key: str = DEFAULT_ABORT_KEY,
) -> Outcome:
    """Apply one typed key to `candidates`."""
    if key == abort_key:
        return Cancelled()

    survivors = tuple(
        Candidate(candidate.suffix[1:], candidate.target)
        for candidate in candidates
        if candidate.suffix and candidate.suffix[:1] == key
    )
    return Reduced(survivors)


def next_state(state: State, key: str, abort_key: str = DEFAULT_ABORT_KEY) -> State:
    """Return the state reached from `state` after typing `key`."""
    if state.terminal:
        raise HintSessionError(f"hint session is already {state.name}")

    outcome = reduce_candidates(state.candidates, key, abort_key)
    if isinstance(outcome, Cancelled):
        debug_echo(1, "reduce", f"key {key!r} cancelled {len(state.candidates)} candidate(s)")
        return outcome

    remaining = outcome.candidates
    debug_echo(2, "reduce", f"key {key!r}: {len(state.candidates)} -> {len(remaining)} candidate(s)")
    if not remaining:
        return Exhausted()
    if len(remaining) == 1:
        return Resolved(remaining[0].target)
    return Active(remaining)


class HintSession:
    """Caller-held hint session, advanced once per key."""

    def __init__(self, pairs: Iterable[tuple[str, Any]], abort_key: str = DEFAULT_ABORT_KEY):
        self.abort_key = abort_key
        self.state: State = Active(make_candidates(pairs))

    @property
    def finished(self) -> bool:
        return self.state.terminal

    def advance(self, key: str) -> State:
        self.state = next_state(self.state, key, self.abort_key)
        return self.state
