"""
Unit Tests for the Flow Bundler

PURPOSE: Rows that differ only by alarm name collapse into one bundle

RUN TESTS:
    python3 -m pytest tests/ -v
"""

import os
import sys
import unittest

# Add parent directory to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from managers.flow_bundler import FlowBundler, bundle_key
from parsers.records import FlowRecord, FlowType, RecipientSlot


def make_record(alarm, group='NC-4W', priority='high', recipient='VGroup: Charge RN',
                ringtone='', flow_type=FlowType.NURSE_CALLS):
    slots = (RecipientSlot('0', recipient),) + tuple(RecipientSlot() for _ in range(4))
    return FlowRecord(flow_type=flow_type, config_group=group, alarm_name=alarm,
                      priority=priority, ringtone=ringtone, slots=slots)


class TestBundling(unittest.TestCase):
    """FlowRecords -> FlowBundles."""

    def setUp(self):
        self.bundler = FlowBundler()

    def test_same_rule_one_bundle(self):
        """Different alarm names, same everything else: one bundle."""
        bundles = self.bundler.bundle([make_record('Call Bell'), make_record('Bed Alarm')])
        self.assertEqual(len(bundles), 1)
        self.assertEqual(bundles[0].alarm_names, ['Call Bell', 'Bed Alarm'])
        self.assertEqual(len(bundles[0].records), 2)

    def test_different_recipient_splits(self):
        """Any signature field difference makes a new bundle."""
        bundles = self.bundler.bundle([
            make_record('Call Bell'),
            make_record('Bed Alarm', recipient='VGroup: Unit Secretary'),
            make_record('Toilet', priority='urgent'),
            make_record('Toilet', flow_type=FlowType.CLINICALS),
        ])
        self.assertEqual(len(bundles), 4)

    def test_case_folded_signature(self):
        """Signature ignores case; the first row is the sample."""
        bundles = self.bundler.bundle([
            make_record('Call Bell', group='NC-4W'),
            make_record('Bed Alarm', group='nc-4w', recipient='vgroup: charge rn'),
        ])
        self.assertEqual(len(bundles), 1)
        self.assertEqual(bundles[0].sample.config_group, 'NC-4W')

    def test_duplicate_alarm_names(self):
        """Alarm names are listed once, first-seen order."""
        bundles = self.bundler.bundle([
            make_record('Call Bell'), make_record('Bed Alarm'), make_record('Call Bell'),
        ])
        self.assertEqual(bundles[0].alarm_names, ['Call Bell', 'Bed Alarm'])

    def test_first_seen_bundle_order(self):
        """Bundles come back in the order their first row appeared."""
        bundles = self.bundler.bundle([
            make_record('A', group='G2'), make_record('B', group='G1'), make_record('C', group='G2'),
        ])
        self.assertEqual([b.sample.config_group for b in bundles], ['G2', 'G1'])

    def test_no_separator_collisions(self):
        """Field boundaries are part of the key, not a joined string."""
        first = make_record('A', group='x|y', ringtone='')
        second = make_record('B', group='x', ringtone='y|')
        self.assertNotEqual(bundle_key(first), bundle_key(second))
        self.assertEqual(len(self.bundler.bundle([first, second])), 2)

    def test_rebundling_is_stable(self):
        """Bundling one row per bundle again yields the same bundles."""
        records = [make_record('Call Bell'), make_record('Bed Alarm'),
                   make_record('Code Blue', priority='urgent')]
        first_pass = self.bundler.bundle(records)
        second_pass = self.bundler.bundle([b.sample for b in first_pass])
        self.assertEqual([b.key for b in first_pass], [b.key for b in second_pass])

    def test_empty_alarm_ignored(self):
        """Records with no alarm name never enter a bundle."""
        self.assertEqual(self.bundler.bundle([make_record('')]), [])


if __name__ == "__main__":
    unittest.main(verbosity=2)
