"""
Unit Tests for the Unit Link Index

PURPOSE: Config group -> units and facility -> fail-safe group lookups

RUN TESTS:
    python3 -m pytest tests/ -v
"""

import os
import sys
import unittest

# Add parent directory to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from managers.unit_link_index import UnitLink, UnitLinkIndex
from parsers.records import FlowType, UnitRecord


def make_index():
    return UnitLinkIndex([
        UnitRecord('St. Mary', ('4 West', '4 East'), 'NC-4W', 'PM-4W', 'House Supervisor'),
        UnitRecord('St. Mary', ('ICU',), 'NC-ICU', 'SHARED', ''),
        UnitRecord('St. Joseph', ('2 North',), 'SHARED', '', 'Nursing Office'),
        UnitRecord('St. Joseph', ('2 North',), 'SHARED', '', 'Night Supervisor'),
    ])


class TestUnitLinks(unittest.TestCase):
    """Config group -> units."""

    def setUp(self):
        self.index = make_index()

    def test_first_seen_order(self):
        """Units come back in sheet order."""
        self.assertEqual(self.index.units_for('NC-4W', FlowType.NURSE_CALLS),
                         [UnitLink('St. Mary', '4 West'), UnitLink('St. Mary', '4 East')])

    def test_duplicate_links_collapse(self):
        """A unit listed twice for the same group appears once."""
        self.assertEqual(self.index.units_for('SHARED', FlowType.NURSE_CALLS),
                         [UnitLink('St. Joseph', '2 North')])

    def test_flow_types_kept_apart(self):
        """A label on both sides only returns its own side's units."""
        self.assertEqual(self.index.units_for('SHARED', FlowType.CLINICALS),
                         [UnitLink('St. Mary', 'ICU')])

    def test_merged_view(self):
        """No flow type: nurse call links first, then clinical."""
        self.assertEqual(self.index.units_for('SHARED'),
                         [UnitLink('St. Joseph', '2 North'), UnitLink('St. Mary', 'ICU')])

    def test_unknown_group(self):
        """Unknown or empty group -> empty list."""
        self.assertEqual(self.index.units_for('NOPE', FlowType.NURSE_CALLS), [])
        self.assertEqual(self.index.units_for('', FlowType.NURSE_CALLS), [])

    def test_first_facility(self):
        """Facility of the first linked unit."""
        self.assertEqual(self.index.first_facility_for('PM-4W', FlowType.CLINICALS), 'St. Mary')
        self.assertEqual(self.index.first_facility_for('NOPE'), '')

    def test_all_units_and_counts(self):
        """Every unit once; linked group counts per type."""
        self.assertEqual(len(self.index.all_units()), 4)
        self.assertEqual(self.index.linked_group_count(FlowType.NURSE_CALLS), 3)
        self.assertEqual(self.index.linked_group_count(FlowType.CLINICALS), 2)

    def test_link_dict(self):
        """Output form of a unit link."""
        self.assertEqual(UnitLink('St. Mary', '4 West').to_dict(),
                         {'facilityName': 'St. Mary', 'name': '4 West'})


class TestFailSafeGroups(unittest.TestCase):
    """Facility -> no-caregiver group."""

    def setUp(self):
        self.index = make_index()

    def test_lookup(self):
        """Facility with a fail-safe group."""
        self.assertEqual(self.index.fail_safe_group_for('St. Mary'), 'House Supervisor')

    def test_empty_value_does_not_overwrite(self):
        """A later row with an empty cell keeps the earlier value."""
        self.assertEqual(self.index.fail_safe_group_for('St. Mary'), 'House Supervisor')

    def test_last_write_wins(self):
        """A later non-empty value replaces the earlier one."""
        self.assertEqual(self.index.fail_safe_group_for('St. Joseph'), 'Night Supervisor')

    def test_absent(self):
        """Unknown or empty facility -> None."""
        self.assertIsNone(self.index.fail_safe_group_for('Mercy'))
        self.assertIsNone(self.index.fail_safe_group_for(''))


if __name__ == "__main__":
    unittest.main(verbosity=2)
