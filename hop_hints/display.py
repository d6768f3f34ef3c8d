"""
(C) 2026 Joseph Tingiris (joseph.tingiris@gmail.com)

Grapheme-aware width helpers for drawing labels over selections.

A label drawn over a selection must not spill past it, and must never be cut
in the middle of a user-perceived character (a base character with its
combining marks, variation selectors or zero-width-joiner sequence).
"""
from __future__ import annotations

import functools
import unicodedata

ZERO_WIDTH_JOINER = "\u200d"


def _extends_cluster(char: str) -> bool:
    if unicodedata.combining(char):
        return True
    if char == ZERO_WIDTH_JOINER:
        return True
    # variation selectors, spacing/enclosing marks
    return unicodedata.category(char) in ("Mn", "Me", "Mc") or "\ufe00" <= char <= "\ufe0f"


def grapheme_clusters(text: str) -> list[str]:
    """Split `text` into user-perceived characters."""
    clusters: list[str] = []
    for char in text:
        joined = clusters and clusters[-1].endswith(ZERO_WIDTH_JOINER)
        if clusters and (joined or _extends_cluster(char)):
            clusters[-1] += char
        else:
            clusters.append(char)
    return clusters


@functools.lru_cache(maxsize=1024)
def char_width(char: str) -> int:
    """Terminal columns used by a single code point."""
    if _extends_cluster(char):
        return 0
    return 2 if unicodedata.east_asian_width(char) in "WF" else 1


def cluster_width(cluster: str) -> int:
    # a cluster is as wide as its base character
    return max((char_width(char) for char in cluster), default=0)


def display_width(text: str) -> int:
    return sum(cluster_width(cluster) for cluster in grapheme_clusters(text))


def truncate_label(label: str, width: int | None) -> str:
    """Return the longest run of whole clusters of `label` that fits `width`."""
    if width is None:
        return label
    out = []
    used = 0
    for cluster in grapheme_clusters(label):
        size = cluster_width(cluster)
        if used + size > width:
            break
        out.append(cluster)
        used += size
    return "".join(out)
