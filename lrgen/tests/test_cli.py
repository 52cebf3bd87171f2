from __future__ import annotations

import io
import json
import tempfile
import unittest
from contextlib import redirect_stderr, redirect_stdout
from pathlib import Path

from lrgen.lrgenc import main

GRAMMARS = Path(__file__).parent / "grammar_test"
CC = str(GRAMMARS / "cc.g")


def _run(argv):
    out, err = io.StringIO(), io.StringIO()
    with redirect_stdout(out), redirect_stderr(err):
        code = main(argv)
    return code, out.getvalue(), err.getvalue()


class CliTests(unittest.TestCase):
    def test_check(self) -> None:
        code, out, err = _run(["check", CC])
        self.assertEqual(code, 0)
        self.assertEqual(out.strip(), "[CHECK OK] states=10 prods=3 accept=1")
        self.assertEqual(err, "")

    def test_check_debug_reports_merges(self) -> None:
        code, out, err = _run(["check", CC, "-D"])
        self.assertEqual(code, 0)
        self.assertIn("[merge] state 0, on C: state 4 -> state 3", err)
        self.assertIn("[State 0 items]", err)

    def test_table_json_to_file(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "out" / "cc.json"
            code, out, _ = _run(["table", CC, "-o", str(path)])
            self.assertEqual(code, 0)
            self.assertIn("[EMIT]", out)
            data = json.loads(path.read_text(encoding="utf-8"))
        self.assertEqual(data["1"], {"$": {"action": "accept"}})
        self.assertEqual(data["0"]["C"], {"action": "shift", "state": 3})

    def test_table_text(self) -> None:
        code, out, _ = _run(["table", CC, "--format", "text"])
        self.assertEqual(code, 0)
        self.assertTrue(out.startswith("state"))
        self.assertIn("acc", out)

    def test_dot(self) -> None:
        code, out, _ = _run(["dot", CC])
        self.assertEqual(code, 0)
        self.assertTrue(out.startswith("digraph G {"))

    def test_productions(self) -> None:
        code, out, _ = _run(["productions", CC])
        self.assertEqual(code, 0)
        data = json.loads(out)
        self.assertEqual(len(data), 3)
        self.assertEqual(data[1], {
            "leftHandSide": {"name": "c", "isTerminal": False},
            "rightHandSide": [{"name": "C", "isTerminal": True}, {"name": "c", "isTerminal": False}],
            "lineNum": 3,
        })

    def test_bad_grammar_exits_with_2(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "bad.g"
            path.write_text("s ---> A t\n", encoding="utf-8")
            code, out, err = _run(["check", str(path)])
        self.assertEqual(code, 2)
        self.assertIn("[SYNTAX ERROR]", err)
        self.assertIn("Unresolved non-terminal 't'", err)

    def test_missing_file_exits_with_2(self) -> None:
        code, _, err = _run(["check", str(GRAMMARS / "nope.g")])
        self.assertEqual(code, 2)
        self.assertIn("[ERROR] FileNotFoundError", err)


if __name__ == "__main__":
    unittest.main()
