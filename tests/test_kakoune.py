#!/usr/bin/env python3
"""
(C) 2026 Joseph Tingiris (joseph.tingiris@gmail.com)

Kakoune command formatting tests for `hop_hints/kakoune.py`.
"""

import unittest

from hop_hints.kakoune import (
    INIT_SCRIPT,
    escape_markup,
    format_hints,
    format_state,
    quote,
    range_spec,
    render_init_script,
)
from hop_hints.reduction import Active, Cancelled, Candidate, Exhausted, Resolved
from hop_hints.selections import parse_selection


class QuotingTests(unittest.TestCase):

    def test_quote(self) -> None:
        self.assertEqual(quote("abc"), "'abc'")
        self.assertEqual(quote("it's"), "'it''s'")

    def test_escape_markup(self) -> None:
        self.assertEqual(escape_markup("a{b}\\"), "a\\{b}\\\\")


class FormatTests(unittest.TestCase):

    def test_range_spec_truncates_to_selection(self) -> None:
        self.assertEqual(range_spec("ab", parse_selection("1.4")), "1.4,1.4|{HopHint}a")
        self.assertEqual(range_spec("ab", parse_selection("1.6,1.4")), "1.4,1.6|{HopHint}ab")
        self.assertEqual(range_spec("ab", parse_selection("1.4,2.1"), face="Jump"), "1.4,2.1|{Jump}ab")

    def test_format_hints(self) -> None:
        pairs = [("a", parse_selection("1.1,1.3")), ("b", parse_selection("2.1,2.5"))]
        out = format_hints(pairs)
        lines = out.splitlines()
        self.assertEqual(lines[0], "set-option window hop_candidates 'a:1.1,1.3' 'b:2.1,2.5'")
        self.assertEqual(
            lines[1],
            "set-option window hop_ranges %val{timestamp} '1.1,1.3|{HopHint}a' '2.1,2.5|{HopHint}b'",
        )
        self.assertIn("add-highlighter -override window/hop replace-ranges hop_ranges", lines)
        self.assertEqual(lines[-1], "hop-await-key")

    def test_single_target_selects_directly(self) -> None:
        out = format_hints([("a", parse_selection("4.2,4.6"))])
        self.assertEqual(out, "hop-clear\nselect 4.2,4.6\n")

    def test_nothing_to_label(self) -> None:
        self.assertIn("{Error}", format_hints([]))

    def test_states(self) -> None:
        sel = parse_selection("3.1,3.2")
        active = format_state(Active((Candidate("b", sel), Candidate("c", parse_selection("5.5")))))
        self.assertIn("'b:3.1,3.2'", active)
        self.assertIn("hop-await-key", active)
        self.assertEqual(format_state(Resolved(sel)), "hop-clear\nselect 3.1,3.2\n")
        self.assertEqual(format_state(Cancelled()), "hop-clear\n")
        exhausted = format_state(Exhausted(), key="z")
        self.assertTrue(exhausted.startswith("hop-clear\n"))
        self.assertIn("'{Error}hop: no hint starts with z'", exhausted)


class InitScriptTests(unittest.TestCase):

    def test_render(self) -> None:
        script = render_init_script("asdf", face="Jump", program="/opt/hop-hints")
        self.assertIn("str hop_keyset 'asdf'", script)
        self.assertIn("set-face global Jump", script)
        self.assertIn("/opt/hop-hints --keyset", script)
        self.assertIn("define-command -docstring", script)
        self.assertIn("%val{timestamp}", script)
        self.assertNotIn("{{", script)
        self.assertNotIn("{keyset}", script)

    def test_keyset_quote(self) -> None:
        self.assertIn("'a''b'", render_init_script("a'b"))

    def test_template_placeholders(self) -> None:
        for name in ("{keyset}", "{face}", "{program}"):
            self.assertIn(name, INIT_SCRIPT)


if __name__ == "__main__":
    unittest.main()
