from __future__ import annotations

import unittest
from pathlib import Path

from lrgen.grammar.loader import load_grammar, load_grammar_text
from lrgen.grammar.parser import parse_grammar

GRAMMARS = Path(__file__).parent / "grammar_test"


class GrammarParserTests(unittest.TestCase):
    def test_alternatives_become_separate_productions(self) -> None:
        prods = load_grammar(str(GRAMMARS / "cc.g"))
        self.assertEqual([str(p) for p in prods], ["s -> c c", "c -> C c", "c -> D"])
        self.assertEqual([p.line for p in prods], [2, 3, 3])
        self.assertFalse(prods[0].lhs.is_terminal)
        self.assertTrue(prods[1].rhs[0].is_terminal)
        self.assertFalse(prods[1].rhs[1].is_terminal)

    def test_epsilon_alternative(self) -> None:
        prods = load_grammar(str(GRAMMARS / "eps.g"))
        eps = [p for p in prods if p.is_epsilon]
        self.assertEqual(len(eps), 1)
        self.assertEqual(eps[0].lhs.name, "a")
        self.assertTrue(eps[0].rhs[0].is_terminal)

    def test_comments_blank_lines_and_repeated_lhs(self) -> None:
        src = "# header\n\nx ---> A y\n\ny ---> B\ny ---> *\n"
        prods = parse_grammar(src)
        self.assertEqual([str(p) for p in prods], ["x -> A y", "y -> B", "y -> *"])
        self.assertEqual([p.line for p in prods], [3, 5, 6])

    def test_loader_normalizes_newlines(self) -> None:
        text = load_grammar_text(str(GRAMMARS / "expr.g"))
        self.assertNotIn("\r", text)
        self.assertEqual(len(parse_grammar(text)), 6)

    def test_crlf_text_is_accepted(self) -> None:
        prods = parse_grammar("s ---> c c\r\nc ---> C c | D\r\n")
        self.assertEqual([str(p) for p in prods], ["s -> c c", "c -> C c", "c -> D"])
        self.assertEqual([p.line for p in prods], [1, 2, 2])
        self.assertEqual(len(parse_grammar("s ---> A\rs ---> B\r")), 2)

    def test_unexpected_char(self) -> None:
        with self.assertRaises(SyntaxError) as cm:
            parse_grammar("s ---> A\x0bB\n")
        msg = str(cm.exception)
        self.assertIn("Unexpected char '\\x0b' at 1:9", msg)
        self.assertTrue(msg.endswith("\n        ^"))

    def test_errors(self) -> None:
        cases = {
            "s --->": "Malformed production rule",
            "S ---> A": "invalid non-terminal on left hand side",
            "s -> A": "Expected '--->'",
            "s ---> A |": "Empty alternative",
            "s ---> | A": "Empty alternative",
            "s ---> A1": "invalid (non-)terminal on right hand side",
            "s ---> A *": "Epsilon '*' must be the only symbol",
            "s ---> A t": "Unresolved non-terminal 't'",
            "# only a comment\n": "Grammar has no production rules",
        }
        for src, msg in cases.items():
            with self.subTest(src=src):
                with self.assertRaises(SyntaxError) as cm:
                    parse_grammar(src)
                self.assertIn(msg, str(cm.exception))

    def test_error_points_at_the_token(self) -> None:
        with self.assertRaises(SyntaxError) as cm:
            parse_grammar("s ---> A\nt ---> s u\n")
        self.assertIn("at 2:10", str(cm.exception))
        self.assertTrue(str(cm.exception).endswith("t ---> s u\n         ^"))


if __name__ == "__main__":
    unittest.main()
