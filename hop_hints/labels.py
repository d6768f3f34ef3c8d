"""
(C) 2026 Joseph Tingiris (joseph.tingiris@gmail.com)

Prefix-free hint labels built from a keyset.

Labels come from a tree that is grown one leaf at a time. Every leaf is a
label (the symbols on its path, root excluded), so the set of labels is
prefix-free at any moment: typing a full label never passes through another
label on the way.

Growth rules (applied from the root, walking down):

    1. a node with fewer children than the alphabet size gets a new leaf
       whose symbol is `alphabet[len(children)]`;
    2. a saturated node looks for the *last* child that still has room; a
       leaf child is grown twice (the first growth turns it into a node);
    3. when every child is saturated, growth continues in the last child.

The resulting code is right-skewed: the first keys of the keyset stay short
for as long as possible, e.g. `abcd` with 10 targets yields

    a b ca cb cc cd da db dc dd

Examples

    >>> generate_labels(4, Alphabet.from_keys("abcd"))
    ['a', 'b', 'c', 'd']
    >>> assign_labels(["x", "y"], Alphabet.from_keys("abcd"))
    [('a', 'x'), ('b', 'y')]
"""
from __future__ import annotations

from typing import Iterator, Sequence, TypeVar

from .debug import debug_echo
from .errors import ConfigurationError

T = TypeVar("T")

ROOT_SYMBOL = " "  # never part of a label


class Alphabet:
    """Ordered, immutable sequence of symbols used to build labels."""

    __slots__ = ("_symbols",)

    def __init__(self, symbols: Sequence[str]):
        self._symbols = tuple(symbols)

    @classmethod
    def from_keys(cls, keys: str) -> "Alphabet":
        """Build an alphabet from a keyset string, one symbol per character."""
        return cls(list(keys))

    @property
    def size(self) -> int:
        return len(self._symbols)

    def __len__(self) -> int:
        return len(self._symbols)

    def __getitem__(self, index: int) -> str:
        return self._symbols[index]

    def __iter__(self) -> Iterator[str]:
        return iter(self._symbols)

    def __contains__(self, symbol: object) -> bool:
        return symbol in self._symbols

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Alphabet):
            return NotImplemented
        return self._symbols == other._symbols

    def __hash__(self) -> int:
        return hash(self._symbols)

    def __repr__(self) -> str:
        return f"Alphabet({''.join(self._symbols)!r})"


class LabelNode:
    """One tree node; `children` is owned exclusively by this node."""

    __slots__ = ("symbol", "children")

    def __init__(self, symbol: str = ROOT_SYMBOL):
        self.symbol = symbol
        self.children: list[LabelNode] = []

    def is_leaf(self) -> bool:
        return not self.children

    def grow(self, alphabet: Alphabet) -> None:
        """Add exactly one leaf below this node."""
        k = len(alphabet)
        node = self

        # walk down the last children while every child is saturated
        while len(node.children) >= k:
            # a single symbol cannot tell two labels apart
            if k < 2:
                raise ConfigurationError(
                    f"an alphabet of {k} symbol(s) cannot label more than {k} target(s)"
                )
            for child in reversed(node.children):
                if len(child.children) < k:
                    if child.is_leaf():
                        child.add_leaf(alphabet)
                    child.add_leaf(alphabet)
                    return
            node = node.children[-1]

        node.add_leaf(alphabet)

    def add_leaf(self, alphabet: Alphabet) -> None:
        """Append the next unused symbol of `alphabet` as a new leaf."""
        self.children.append(LabelNode(alphabet[len(self.children)]))

    def paths(self, prefix: str, out: list[str]) -> None:
        """Append the labels of the leaves below this node, pre-order."""
        stack = [(self, prefix)]
        while stack:
            node, parent_path = stack.pop()
            path = parent_path + node.symbol
            if not node.children:
                out.append(path)
                continue
            # reversed so the first child is visited first
            stack.extend((child, path) for child in reversed(node.children))


class LabelTree:
    """A label tree grown incrementally until it holds the requested leaves."""

    __slots__ = ("root", "alphabet", "grown")

    def __init__(self, alphabet: Alphabet):
        if len(alphabet) == 0:
            raise ConfigurationError("the keyset is empty; at least one key is required")
        self.alphabet = alphabet
        self.root = LabelNode()
        self.grown = 0

    def grow(self, count: int = 1) -> None:
        """Perform `count` sequential single-leaf growths."""
        for _ in range(count):
            self.root.grow(self.alphabet)
            self.grown += 1

    def labels(self) -> list[str]:
        """Return every label in depth-first, insertion order."""
        out: list[str] = []
        for child in self.root.children:
            child.paths("", out)
        return out

    def __len__(self) -> int:
        return len(self.labels())


def generate_labels(count: int, alphabet: Alphabet) -> list[str]:
    """Return `count` prefix-free labels for `alphabet`."""
    if count < 0:
        raise ValueError(f"label count must not be negative: {count}")
    tree = LabelTree(alphabet)
    tree.grow(count)
    return tree.labels()


def assign_labels(targets: Sequence[T], alphabet: Alphabet) -> list[tuple[str, T]]:
    """Pair each target, in input order, with a label in traversal order."""
    labels = generate_labels(len(targets), alphabet)
    debug_echo(2, "labels", f"{len(labels)} label(s) from {alphabet!r}: {' '.join(labels)}")
    return list(zip(labels, targets))
