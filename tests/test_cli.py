import io
import json
import unittest
from contextlib import redirect_stderr, redirect_stdout

from cathedral_core.cli import main


def _run(argv):
    out = io.StringIO()
    err = io.StringIO()
    with redirect_stdout(out), redirect_stderr(err):
        code = main(argv)
    return code, out.getvalue(), err.getvalue()


class TestCli(unittest.TestCase):
    def test_given_no_args_when_run_then_table_listing(self):
        code, out, _ = _run([])
        self.assertEqual(code, 0)
        self.assertIn("Cathedral", out)
        self.assertIn("Tavern", out)
        self.assertIn("Supply: 14 pieces, 48 cells", out)

    def test_given_piece_when_run_then_sketch_and_offsets(self):
        code, out, _ = _run(["--piece", "Square"])
        self.assertEqual(code, 0)
        self.assertIn("Square (count 1, 4 cells, 2x2)", out)
        self.assertIn("@ #", out)
        self.assertIn("Offsets: [(0, 0), (1, 0), (0, 1), (1, 1)]", out)

    def test_given_json_flag_when_run_then_records_dumped(self):
        code, out, _ = _run(["--json"])
        self.assertEqual(code, 0)
        recs = json.loads(out)
        self.assertEqual(len(recs), 11)
        self.assertIn("count", recs[0])

    def test_given_json_without_counts_when_run_for_piece_then_no_count(self):
        code, out, _ = _run(["--piece", "Inn", "--json", "--no-counts"])
        self.assertEqual(code, 0)
        rec = json.loads(out)
        self.assertEqual(rec["name"], "Inn")
        self.assertNotIn("count", rec)

    def test_given_unknown_piece_when_run_then_error_and_status_two(self):
        code, out, err = _run(["--piece", "Palace"])
        self.assertEqual(code, 2)
        self.assertEqual(out, "")
        self.assertIn("error: unknown piece 'Palace'", err)


if __name__ == "__main__":
    unittest.main(verbosity=2)
