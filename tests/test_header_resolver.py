"""
Unit Tests for the Header Resolver

PURPOSE: Test header row detection and alias-based column mapping

AVIATION ANALOGY: Reading a load sheet from another station - the
boxes are in different places but the right figure must land in the
right field

RUN TESTS:
    python3 -m pytest tests/ -v
"""

import os
import sys
import unittest

# Add parent directory to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from parsers.header_resolver import HeaderResolver, normalize_header
from parsers.workbook_loader import SheetGrid

UNIT_ALIASES = {
    'facility': ['Facility', 'Facility Name'],
    'unit_names': ['Common Unit Name', 'Unit'],
    'nurse_group': ['Nurse Call Configuration Group'],
}


class TestNormalizeHeader(unittest.TestCase):
    """Case and punctuation are ignored."""

    def test_punctuation_collapses(self):
        """Non-alphanumeric runs become one space."""
        self.assertEqual(normalize_header("  Ringtone Device - A "), 'ringtone device a')
        self.assertEqual(normalize_header("Time to 1st Recipient (after alarm triggers)"),
                         'time to 1st recipient after alarm triggers')

    def test_none(self):
        """None normalizes to empty."""
        self.assertEqual(normalize_header(None), '')


class TestHeaderDetection(unittest.TestCase):
    """Best-scoring row within the scan window is the header."""

    def setUp(self):
        self.resolver = HeaderResolver(UNIT_ALIASES)

    def test_header_below_title_rows(self):
        """Title and blank rows above the header are skipped."""
        sheet = SheetGrid.from_rows('Unit Breakdown', [
            ['St. Mary Alarm Configuration'],
            [],
            ['Facility', 'Common Unit Name', 'Comments'],
            ['St. Mary', '4 West', 'first floor'],
        ])
        self.assertEqual(self.resolver.find_header_row(sheet), 2)

    def test_tie_keeps_first_row(self):
        """Two equally good rows: the earlier one wins."""
        sheet = SheetGrid.from_rows('Units', [
            ['Facility', 'Unit'],
            ['Facility', 'Unit'],
        ])
        self.assertEqual(self.resolver.find_header_row(sheet), 0)

    def test_blank_sheet_has_no_header(self):
        """Nothing scores above zero on a blank sheet."""
        self.assertIsNone(self.resolver.find_header_row(SheetGrid.from_rows('Units', [])))
        self.assertIsNone(self.resolver.find_header_row(SheetGrid.from_rows('Units', [[None, '']])))
        self.assertIsNone(self.resolver.resolve(None))

    def test_scan_window_is_bounded(self):
        """Rows beyond the window are never considered."""
        rows = [[] for _ in range(5)] + [['Facility', 'Unit']]
        resolver = HeaderResolver(UNIT_ALIASES, scan_rows=5)
        self.assertIsNone(resolver.find_header_row(SheetGrid.from_rows('Units', rows)))


class TestColumnMapping(unittest.TestCase):
    """Fields map to the column of their first matching alias."""

    def setUp(self):
        self.resolver = HeaderResolver(UNIT_ALIASES)

    def test_alias_order_wins(self):
        """The first alias in the list wins, wherever its column is."""
        columns = self.resolver.map_columns(['unit', 'common unit name', 'facility'])
        self.assertEqual(columns['unit_names'], 1)
        self.assertEqual(columns['facility'], 2)

    def test_case_and_punctuation_insensitive(self):
        """Headers match after normalization."""
        sheet = SheetGrid.from_rows('Units', [['FACILITY ', 'Common-Unit-Name']])
        match = self.resolver.resolve(sheet)
        self.assertEqual(match.row_index, 0)
        self.assertEqual(match.column_for('facility'), 0)
        self.assertEqual(match.column_for('unit_names'), 1)

    def test_unresolved_field(self):
        """A field with no matching header maps to None."""
        sheet = SheetGrid.from_rows('Units', [['Facility', 'Unit']])
        match = self.resolver.resolve(sheet)
        self.assertIsNone(match.column_for('nurse_group'))
        self.assertEqual(match.missing_fields(), ['nurse_group'])


if __name__ == "__main__":
    unittest.main(verbosity=2)
