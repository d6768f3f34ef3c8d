#!/usr/bin/env python3
"""
(C) 2026 Joseph Tingiris (joseph.tingiris@gmail.com)

Label generation tests for `hop_hints/labels.py`.
"""

import unittest

from hop_hints.errors import ConfigurationError
from hop_hints.labels import Alphabet, LabelTree, assign_labels, generate_labels


ABCD = Alphabet.from_keys("abcd")


def is_prefix_free(labels: list[str]) -> bool:
    for i, left in enumerate(labels):
        for j, right in enumerate(labels):
            if i != j and right.startswith(left):
                return False
    return True


def is_prefix_free_sorted(labels: list[str]) -> bool:
    """Same check in O(n log n): a prefix sorts right before its extensions."""
    ordered = sorted(labels)
    return not any(right.startswith(left) for left, right in zip(ordered, ordered[1:]))


class AlphabetTests(unittest.TestCase):
    """Alphabet access."""

    def test_indexed_access(self) -> None:
        self.assertEqual(len(ABCD), 4)
        self.assertEqual(ABCD.size, 4)
        self.assertEqual(ABCD[0], "a")
        self.assertEqual(ABCD[3], "d")
        self.assertEqual(list(ABCD), ["a", "b", "c", "d"])
        self.assertIn("c", ABCD)

    def test_immutable(self) -> None:
        with self.assertRaises(AttributeError):
            ABCD.extra = "x"  # type: ignore[attr-defined]
        with self.assertRaises(TypeError):
            ABCD[0] = "z"  # type: ignore[index]


class GrowthTests(unittest.TestCase):
    """Regression vectors for the right-skewed growth order."""

    def test_four_labels_use_single_keys(self) -> None:
        self.assertEqual(generate_labels(4, ABCD), ["a", "b", "c", "d"])

    def test_ten_labels(self) -> None:
        self.assertEqual(
            generate_labels(10, ABCD),
            ["a", "b", "ca", "cb", "cc", "cd", "da", "db", "dc", "dd"],
        )

    def test_fifth_label_splits_last_key(self) -> None:
        self.assertEqual(generate_labels(5, ABCD), ["a", "b", "c", "da", "db"])

    def test_sixteen_labels_fill_second_level(self) -> None:
        expected = [x + y for x in "abcd" for y in "abcd"]
        self.assertEqual(generate_labels(16, ABCD), expected)

    def test_full_level_falls_back_to_last_child(self) -> None:
        labels = generate_labels(17, ABCD)
        expected = [x + y for x in "abcd" for y in "abcd"][:-1] + ["dda", "ddb"]
        self.assertEqual(labels, expected)

    def test_prefix_free_and_counted(self) -> None:
        for keys in ("ab", "abc", "abcd", "asdfg"):
            alphabet = Alphabet.from_keys(keys)
            for count in range(0, 70):
                labels = generate_labels(count, alphabet)
                self.assertEqual(len(labels), count, msg=f"{keys}/{count}")
                self.assertEqual(len(set(labels)), count, msg=f"{keys}/{count}")
                self.assertTrue(is_prefix_free(labels), msg=f"{keys}/{count}: {labels}")
                for label in labels:
                    self.assertTrue(set(label) <= set(keys))

    def test_large_counts_do_not_overflow_the_stack(self) -> None:
        cases = [("ab", 3000), ("abc", 4000), ("abcd", 5000), ("asdfghjkl", 5000)]
        for keys, count in cases:
            labels = generate_labels(count, Alphabet.from_keys(keys))
            self.assertEqual(len(labels), count, msg=keys)
            self.assertEqual(len(set(labels)), count, msg=keys)
            self.assertTrue(is_prefix_free_sorted(labels), msg=keys)

    def test_two_keys_grow_deep_labels(self) -> None:
        labels = generate_labels(2500, Alphabet.from_keys("ab"))
        self.assertGreater(max(len(label) for label in labels), 500)
        self.assertEqual(labels[:2], ["aa", "ab"])

    def test_tree_counts_growths(self) -> None:
        tree = LabelTree(ABCD)
        tree.grow()
        tree.grow(6)
        self.assertEqual(tree.grown, 7)
        self.assertEqual(len(tree), 7)
        self.assertEqual(len(tree.labels()), 7)

    def test_no_node_exceeds_alphabet_size(self) -> None:
        tree = LabelTree(Alphabet.from_keys("abc"))
        tree.grow(40)
        stack = [tree.root]
        while stack:
            node = stack.pop()
            self.assertLessEqual(len(node.children), 3)
            stack.extend(node.children)

    def test_deterministic(self) -> None:
        self.assertEqual(generate_labels(33, ABCD), generate_labels(33, ABCD))


class AssignTests(unittest.TestCase):
    """Pairing labels with targets."""

    def test_pairs_in_input_order(self) -> None:
        targets = [f"t{i}" for i in range(10)]
        pairs = assign_labels(targets, ABCD)
        self.assertEqual([target for _, target in pairs], targets)
        self.assertEqual(pairs[0], ("a", "t0"))
        self.assertEqual(pairs[2], ("ca", "t2"))
        self.assertEqual(pairs[-1], ("dd", "t9"))

    def test_no_targets(self) -> None:
        self.assertEqual(assign_labels([], ABCD), [])
        tree = LabelTree(ABCD)
        self.assertEqual(tree.labels(), [])
        self.assertEqual(tree.grown, 0)

    def test_single_target_gets_first_key(self) -> None:
        for keys in ("a", "qwe", "zyx"):
            self.assertEqual(assign_labels(["only"], Alphabet.from_keys(keys)), [(keys[0], "only")])

    def test_empty_alphabet_is_rejected(self) -> None:
        with self.assertRaises(ConfigurationError):
            assign_labels(["x"], Alphabet.from_keys(""))
        with self.assertRaises(ConfigurationError):
            generate_labels(0, Alphabet.from_keys(""))

    def test_single_key_alphabet_labels_one_target_only(self) -> None:
        self.assertEqual(generate_labels(1, Alphabet.from_keys("x")), ["x"])
        with self.assertRaises(ConfigurationError):
            generate_labels(2, Alphabet.from_keys("x"))

    def test_negative_count(self) -> None:
        with self.assertRaises(ValueError):
            generate_labels(-1, ABCD)


if __name__ == "__main__":
    unittest.main()
