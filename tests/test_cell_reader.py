"""
Unit Tests for the Cell Value Reader

PURPOSE: Every kind of raw cell becomes a trimmed string, and nothing raises

RUN TESTS:
    python3 -m pytest tests/ -v
"""

import os
import sys
import unittest
from datetime import date, datetime, time, timedelta
from decimal import Decimal

# Add parent directory to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from parsers.cell_reader import read_cell


class TestReadCell(unittest.TestCase):
    """Raw cell value -> normalized string."""

    def test_empty(self):
        """None is an empty cell."""
        self.assertEqual(read_cell(None), '')

    def test_text_trimmed(self):
        """Strings are trimmed."""
        self.assertEqual(read_cell("  VGroup: A \n"), 'VGroup: A')

    def test_whole_numbers(self):
        """Integral numbers never show a decimal point."""
        self.assertEqual(read_cell(30.0), '30')
        self.assertEqual(read_cell(12), '12')
        self.assertEqual(read_cell(1e20), '100000000000000000000')

    def test_fractional_numbers(self):
        """Fractions render as plain decimals, never scientific."""
        self.assertEqual(read_cell(1.5), '1.5')
        self.assertEqual(read_cell(0.0000125), '0.0000125')
        self.assertEqual(read_cell(Decimal('2.50')), '2.5')

    def test_booleans(self):
        """Booleans are lowercase words, not 1/0."""
        self.assertEqual(read_cell(True), 'true')
        self.assertEqual(read_cell(False), 'false')

    def test_dates(self):
        """Date cells render as ISO dates, with time only when present."""
        self.assertEqual(read_cell(datetime(2024, 3, 1)), '2024-03-01')
        self.assertEqual(read_cell(datetime(2024, 3, 1, 8, 30)), '2024-03-01 08:30:00')
        self.assertEqual(read_cell(date(2024, 3, 1)), '2024-03-01')

    def test_times_and_durations(self):
        """Time-formatted delays survive as something the delay parser reads."""
        self.assertEqual(read_cell(time(0, 1, 30)), '00:01:30')
        self.assertEqual(read_cell(timedelta(minutes=1, seconds=30)), '90')

    def test_error_literals(self):
        """Cached spreadsheet errors read as empty."""
        for literal in ('#REF!', '#N/A', '#VALUE!', '#DIV/0!'):
            self.assertEqual(read_cell(literal), '', literal)

    def test_formula_without_value(self):
        """An uncached formula arrives as None and reads as empty."""
        self.assertEqual(read_cell(None), '')

    def test_text_starting_with_equals_kept(self):
        """Plain text that starts with '=' is ordinary text."""
        self.assertEqual(read_cell('= see charge nurse '), '= see charge nurse')

    def test_non_finite_and_unknown(self):
        """NaN and unknown objects read as empty without raising."""
        self.assertEqual(read_cell(float('nan')), '')
        self.assertEqual(read_cell(object()), '')


if __name__ == "__main__":
    unittest.main(verbosity=2)
