"""
(C) 2026 Joseph Tingiris (joseph.tingiris@gmail.com)

Prefix-free jump hints for editor selections.
"""
from .errors import ConfigurationError, HintSessionError, HopHintsError, SelectionParseError
from .labels import Alphabet, LabelTree, assign_labels, generate_labels
from .reduction import (
    Active,
    Cancelled,
    Candidate,
    Exhausted,
    HintSession,
    Reduced,
    Resolved,
    make_candidates,
    next_state,
    reduce_candidates,
)

__version__ = "0.1.0"

__all__ = [
    "Active",
    "Alphabet",
    "Cancelled",
    "Candidate",
    "ConfigurationError",
    "Exhausted",
    "HintSession",
    "HintSessionError",
    "HopHintsError",
    "LabelTree",
    "Reduced",
    "Resolved",
    "SelectionParseError",
    "assign_labels",
    "generate_labels",
    "make_candidates",
    "next_state",
    "reduce_candidates",
]
