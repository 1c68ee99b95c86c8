import unittest
import math
import tempfile
from pathlib import Path

import numpy as np

from charge_analyzer.ingest.readers_charge import (
    ChargeFileOpenError,
    ChargeFileReader,
    ChargeReaderConfig,
    load_charges,
    parse_charge_line,
)


class _ListLog:
    def __init__(self):
        self.warnings = []

    def warning(self, message):
        self.warnings.append(message)


class TestParseChargeLine(unittest.TestCase):
    def test_validation_table(self):
        cases = [
            ("12.5", 12.5, None),
            ("-3.2", None, "negative"),
            ("12.5 foo", None, "trailing content"),
            ("   7.0   ", 7.0, None),
            ("abc", None, "unparseable"),
            ("", None, "blank"),
            ("\t \n", None, "blank"),
            ("1.602e-19\n", 1.602e-19, None),
            ("+3", 3.0, None),
            (".5", 0.5, None),
            ("5.", 5.0, None),
            ("12.3abc", None, "trailing content"),
            ("1 2", None, "trailing content"),
            ("nan", None, "unparseable"),
            ("inf", None, "unparseable"),
            ("1e999", None, "non-finite"),
            ("1_000", None, "trailing content"),
            ("0", 0.0, None),
            ("\u0661\u0662", None, "unparseable"),
            ("\uff13\uff14", None, "unparseable"),
            ("1\u0662", None, "trailing content"),
        ]
        for line, value, reason in cases:
            with self.subTest(line=line):
                got_value, got_reason = parse_charge_line(line)
                self.assertEqual(got_reason, reason)
                if value is None:
                    self.assertIsNone(got_value)
                else:
                    self.assertAlmostEqual(got_value, value, places=30)

    def test_negative_zero_is_accepted(self):
        value, reason = parse_charge_line("-0.0")
        self.assertIsNone(reason)
        self.assertEqual(value, 0.0)
        self.assertEqual(math.copysign(1.0, value), 1.0)


class TestChargeFileReader(unittest.TestCase):
    def _write(self, d: str, text: str, name: str = "charges.dat") -> Path:
        p = Path(d) / name
        p.write_text(text, encoding="utf-8")
        return p

    def test_order_preserved_and_rejected_lines_removed(self):
        with tempfile.TemporaryDirectory() as d:
            p = self._write(d, "3.0\n-1.0\n1.0\nabc\n\n2.0 x\n2.0\n")
            log = _ListLog()
            mset = ChargeFileReader(log=log).read(p)

            self.assertTrue(np.array_equal(mset.values, np.array([3.0, 1.0, 2.0])))
            self.assertEqual(mset.values.dtype, np.float64)
            self.assertEqual(mset.n_values, 3)
            self.assertEqual(mset.n_lines, 7)
            self.assertEqual([r.line_no for r in mset.rejected], [2, 4, 5, 6])
            self.assertEqual(
                [r.reason for r in mset.rejected],
                ["negative", "unparseable", "blank", "trailing content"],
            )
            self.assertEqual(mset.rejected[3].text, "2.0 x")

            # One live notice per rejected line, in file order
            self.assertEqual(len(log.warnings), 4)
            self.assertIn("corrupt data point", log.warnings[0])
            self.assertIn("line 2", log.warnings[0])
            self.assertIn("Skipping that data point.", log.warnings[0])
            self.assertIn("skipped 4 of 7 lines", mset.warnings[-1])

    def test_missing_trailing_newline_and_crlf(self):
        with tempfile.TemporaryDirectory() as d:
            p = Path(d) / "crlf.dat"
            p.write_bytes(b"1.5\r\n2.5\r\n3.5")
            mset = ChargeFileReader().read(p)
            self.assertEqual(mset.values.tolist(), [1.5, 2.5, 3.5])
            self.assertEqual(mset.n_rejected, 0)
            self.assertEqual(mset.warnings, ())

    def test_empty_file_yields_zero_values(self):
        with tempfile.TemporaryDirectory() as d:
            p = self._write(d, "")
            mset = ChargeFileReader().read(p)
            self.assertEqual(mset.n_values, 0)
            self.assertEqual(mset.n_lines, 0)

    def test_undecodable_bytes_reject_only_that_line(self):
        with tempfile.TemporaryDirectory() as d:
            p = Path(d) / "bad.dat"
            p.write_bytes(b"1.0\n\xff\xfe\n2.0\n")
            mset = ChargeFileReader(ChargeReaderConfig(encoding="utf-8")).read(p)
            self.assertEqual(mset.values.tolist(), [1.0, 2.0])
            self.assertEqual(mset.rejected[0].line_no, 2)

    def test_missing_file_raises_open_error(self):
        with tempfile.TemporaryDirectory() as d:
            p = Path(d) / "does_not_exist.dat"
            with self.assertRaises(ChargeFileOpenError) as ctx:
                ChargeFileReader().read(p)
            self.assertEqual(ctx.exception.path, p)
            self.assertIn("Could not open file", str(ctx.exception))
            self.assertIsInstance(ctx.exception, OSError)

    def test_directory_raises_open_error(self):
        with tempfile.TemporaryDirectory() as d:
            with self.assertRaises(ChargeFileOpenError):
                ChargeFileReader().read(d)

    def test_reading_twice_is_identical(self):
        with tempfile.TemporaryDirectory() as d:
            p = self._write(d, "1.0\n2.0\nbad\n4.0\n")
            reader = ChargeFileReader()
            a = reader.read(p)
            b = reader.read(p)
            self.assertTrue(np.array_equal(a.values, b.values))
            self.assertEqual(a.rejected, b.rejected)

    def test_load_charges_contract(self):
        with tempfile.TemporaryDirectory() as d:
            p = self._write(d, "  1.0\n2.0  \n-5\n")
            values, count = load_charges(p)
            self.assertEqual(count, 2)
            self.assertEqual(values.tolist(), [1.0, 2.0])


if __name__ == "__main__":
    unittest.main()
