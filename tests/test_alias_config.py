"""
Unit Tests for the Alias Configuration

PURPOSE: The shipped YAML loads, bad files fail loudly, and callers
         cannot alter a loaded table

RUN TESTS:
    python3 -m pytest tests/ -v
"""

import os
import sys
import tempfile
import unittest
from pathlib import Path

# Add parent directory to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from config import default_alias_config, get_config_path, load_alias_config


class TestShippedAliases(unittest.TestCase):
    """config/field_aliases.yaml."""

    def test_loads(self):
        """Version, scan window and field lists are present."""
        aliases = default_alias_config()
        self.assertEqual(aliases.version, '1.1.0')
        self.assertEqual(aliases.header_scan_rows, 40)
        self.assertEqual(aliases.flow_fields['alarm_name'][0], 'Common Alert or Alarm Name')
        self.assertIn('facility', aliases.unit_fields)
        for n in range(1, 6):
            self.assertIn(f'delay_{n}', aliases.flow_fields)
            self.assertIn(f'recipient_{n}', aliases.flow_fields)

    def test_sheet_candidates(self):
        """Each logical sheet has candidate names."""
        aliases = default_alias_config()
        self.assertIn('Nurse Call', aliases.sheet_candidates('nurse_call'))
        self.assertIn('Patient Monitoring', aliases.sheet_candidates('patient_monitoring'))
        self.assertEqual(aliases.sheet_candidates('nope'), [])

    def test_normalized_fields(self):
        """Normalized aliases match the form the header resolver compares."""
        fields = default_alias_config().normalized_fields('flow_fields')
        self.assertIn('ringtone device a', fields['ringtone'])
        self.assertEqual(fields['device'], ['device a', 'device'])
        with self.assertRaises(ValueError):
            default_alias_config().normalized_fields('sheets')

    def test_returned_mappings_are_copies(self):
        """Changing a returned mapping leaves the table alone."""
        aliases = default_alias_config()
        fields = aliases.flow_fields
        fields['alarm_name'].append('Something Else')
        fields.pop('priority')
        self.assertNotIn('Something Else', aliases.flow_fields['alarm_name'])
        self.assertIn('priority', aliases.flow_fields)

    def test_path_helper(self):
        """get_config_path points inside the config package."""
        self.assertTrue(Path(get_config_path('field_aliases.yaml')).exists())


class TestAliasFileErrors(unittest.TestCase):
    """Broken alias files raise builtin errors."""

    def setUp(self):
        self.temp_dir = tempfile.TemporaryDirectory()

    def tearDown(self):
        self.temp_dir.cleanup()

    def _write(self, text: str) -> str:
        path = os.path.join(self.temp_dir.name, 'aliases.yaml')
        with open(path, 'w') as f:
            f.write(text)
        return path

    def test_missing_file(self):
        """Missing path -> FileNotFoundError."""
        with self.assertRaises(FileNotFoundError):
            load_alias_config(os.path.join(self.temp_dir.name, 'missing.yaml'))

    def test_missing_section(self):
        """Required sections must be present."""
        path = self._write('version: "2.0"\nsheets: {}\n')
        with self.assertRaises(ValueError) as ctx:
            load_alias_config(path)
        self.assertIn('unit_fields', str(ctx.exception))

    def test_not_a_mapping(self):
        """A YAML list is not an alias table."""
        with self.assertRaises(ValueError):
            load_alias_config(self._write('- a\n- b\n'))

    def test_custom_file(self):
        """A minimal custom table loads; single strings become lists."""
        path = self._write(
            'version: "2.0"\n'
            'sheets:\n  nurse_call: [Calls]\n'
            'unit_fields:\n  facility: Site\n'
            'flow_fields:\n  alarm_name: [Alarm]\n'
        )
        aliases = load_alias_config(path)
        self.assertEqual(aliases.version, '2.0')
        self.assertEqual(aliases.header_scan_rows, 40)
        self.assertEqual(aliases.unit_fields, {'facility': ['Site']})


if __name__ == "__main__":
    unittest.main(verbosity=2)
