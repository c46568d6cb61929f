import io
import unittest
from contextlib import redirect_stdout, redirect_stderr

from ogrpy import __version__
from ogrpy.cli import main


def run(*argv):
    out, err = io.StringIO(), io.StringIO()
    with redirect_stdout(out), redirect_stderr(err):
        code = main(list(argv))
    return code, out.getvalue(), err.getvalue()


class TestCli(unittest.TestCase):

    def test_version(self):
        code, out, _ = run("version")
        self.assertEqual(code, 0)
        self.assertIn(__version__, out)

    def test_enumerate_length(self):
        code, out, _ = run("enumerate", "--length", "3")
        self.assertEqual(code, 0)
        self.assertEqual(out.splitlines(), ["[0, 3]", "[0, 2, 3]", "[0, 1, 3]", "[0, 1, 2, 3]"])

    def test_enumerate_golomb(self):
        code, out, _ = run("enumerate", "--length", "6", "--order", "4", "--golomb", "--pruned", "--count")
        self.assertEqual(code, 0)
        self.assertEqual(out.splitlines(), ["[0, 2, 5, 6]", "[0, 1, 4, 6]", "2 rulers"])

    def test_enumerate_ids(self):
        code, out, _ = run("enumerate", "--max-length", "2", "--ids")
        self.assertEqual(code, 0)
        self.assertEqual(out.splitlines(), ["[2] [0, 2]", "[3] [0, 1, 2]"])

    def test_enumerate_depth(self):
        code, out, _ = run("enumerate", "--max-length", "7", "--order", "4", "--depth", "1", "--count")
        self.assertEqual(code, 0)
        self.assertTrue(out.splitlines()[-1].endswith("rulers"))

    def test_enumerate_pruned_max_length(self):
        code, pruned, _ = run("enumerate", "--max-length", "4", "--order", "3", "--pruned", "--count")
        self.assertEqual(code, 0)
        self.assertEqual(pruned.splitlines()[0], "[0, 1, 2]")
        self.assertEqual(pruned.splitlines()[-1], "6 rulers")
        _, filtered, _ = run("enumerate", "--max-length", "4", "--order", "3", "--count")
        self.assertEqual(pruned, filtered)

    def test_enumerate_missing_length(self):
        code, _, err = run("enumerate", "--order", "3")
        self.assertEqual(code, 1)
        self.assertIn("--length", err)

    def test_id(self):
        code, out, _ = run("id", "0", "1", "6")
        self.assertEqual(code, 0)
        self.assertEqual(out.splitlines(), ["[0] [0]", "[1] [0, 1]", "[6] [0, 2, 3]"])

        code, out, _ = run("id", "--marks", "1", "3", "7")
        self.assertEqual(code, 0)
        self.assertEqual(out.strip(), str(64 + 1 + 4))

    def test_id_overflow(self):
        code, _, err = run("id", "--marks", "65")
        self.assertEqual(code, 1)
        self.assertIn("64 bits", err)

    def test_invalid_marks(self):
        code, _, err = run("id", "--marks", "3", "2")
        self.assertEqual(code, 1)
        self.assertIn("strictly increasing", err)
