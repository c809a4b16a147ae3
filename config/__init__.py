"""
Config package for the Alarm Flow Toolkit

Contains YAML configuration files:
- field_aliases.yaml: accepted header names per logical field, candidate
  sheet names, header scan window and the output version
"""

from pathlib import Path
from typing import Dict, List, Optional, Tuple

import yaml

from parsers.header_resolver import normalize_header

# Path to config directory
CONFIG_DIR = Path(__file__).parent

DEFAULT_ALIAS_FILE = 'field_aliases.yaml'

REQUIRED_SECTIONS = ('version', 'sheets', 'unit_fields', 'flow_fields')

SHEET_KEYS = ('unit_breakdown', 'nurse_call', 'patient_monitoring')


def get_config_path(filename: str) -> str:
    """
    Get absolute path to a config file.

    Args:
        filename: Name of config file (e.g., 'field_aliases.yaml')

    Returns:
        Absolute path to the config file
    """
    return str(CONFIG_DIR / filename)


class AliasConfig:
    """
    PURPOSE: Read-only view of the alias table

    ATTRIBUTES:
        version: Version string stamped on generated documents
        header_scan_rows: Header search window
        sheet_names: logical sheet -> candidate sheet names
        unit_fields: logical field -> header aliases (Unit Breakdown)
        flow_fields: logical field -> header aliases (alarm sheets)

    The mappings are copied on the way in and on the way out, so a caller
    cannot change the table another conversion is using.
    """

    def __init__(self, version: str, header_scan_rows: int,
                 sheet_names: Dict[str, List[str]],
                 unit_fields: Dict[str, List[str]],
                 flow_fields: Dict[str, List[str]]):
        self._version = str(version)
        self._header_scan_rows = int(header_scan_rows)
        self._sheet_names = _freeze(sheet_names)
        self._unit_fields = _freeze(unit_fields)
        self._flow_fields = _freeze(flow_fields)

    @property
    def version(self) -> str:
        return self._version

    @property
    def header_scan_rows(self) -> int:
        return self._header_scan_rows

    @property
    def sheet_names(self) -> Dict[str, List[str]]:
        return _thaw(self._sheet_names)

    @property
    def unit_fields(self) -> Dict[str, List[str]]:
        return _thaw(self._unit_fields)

    @property
    def flow_fields(self) -> Dict[str, List[str]]:
        return _thaw(self._flow_fields)

    def sheet_candidates(self, sheet_key: str) -> List[str]:
        """Candidate sheet names for 'unit_breakdown', 'nurse_call' or 'patient_monitoring'."""
        return list(dict(self._sheet_names).get(sheet_key, ()))

    def normalized_fields(self, section: str) -> Dict[str, List[str]]:
        """
        Aliases of 'unit_fields' or 'flow_fields' in the form headers are
        compared in ("Ringtone Device - A" -> "ringtone device a"). Aliases
        that normalize alike are kept once, first position wins.
        """
        if section not in ('unit_fields', 'flow_fields'):
            raise ValueError(f"Unknown alias section: {section}")
        fields = self.unit_fields if section == 'unit_fields' else self.flow_fields
        normalized = {}
        for name, aliases in fields.items():
            normalized[name] = []
            for alias in aliases:
                key = normalize_header(alias)
                if key and key not in normalized[name]:
                    normalized[name].append(key)
        return normalized

    def __repr__(self) -> str:
        return (f"AliasConfig(version={self._version!r}, "
                f"unit_fields={len(self._unit_fields)}, flow_fields={len(self._flow_fields)})")


def load_alias_config(path: Optional[str] = None) -> AliasConfig:
    """
    Load the alias table from YAML.

    PURPOSE: Read config/field_aliases.yaml (or a caller-supplied file)

    PARAMETERS:
        path: YAML file to read; defaults to the shipped field_aliases.yaml

    RETURNS:
        AliasConfig

    RAISES:
        FileNotFoundError: path does not exist
        ValueError: the document is not a mapping or lacks a required section

    EXAMPLE:
        aliases = load_alias_config()
        aliases.flow_fields['alarm_name']
        # ['Common Alert or Alarm Name', 'Alarm Name', 'Common Alert Name']
    """
    config_path = Path(path) if path else Path(get_config_path(DEFAULT_ALIAS_FILE))
    if not config_path.exists():
        raise FileNotFoundError(f"Alias config not found: {config_path}")

    with open(config_path, 'r') as f:
        data = yaml.safe_load(f)

    if not isinstance(data, dict):
        raise ValueError(f"Alias config must be a mapping: {config_path}")

    missing = [section for section in REQUIRED_SECTIONS if section not in data]
    if missing:
        raise ValueError(f"Alias config {config_path} missing section(s): {', '.join(missing)}")

    return AliasConfig(
        version=data['version'],
        header_scan_rows=data.get('header_scan_rows', 40),
        sheet_names=_string_lists(data['sheets'], 'sheets'),
        unit_fields=_string_lists(data['unit_fields'], 'unit_fields'),
        flow_fields=_string_lists(data['flow_fields'], 'flow_fields'),
    )


def default_alias_config() -> AliasConfig:
    """Alias table shipped with the toolkit. Re-read on every call."""
    return load_alias_config()


# =============================================================================
# HELPERS
# =============================================================================

def _string_lists(section, section_name: str) -> Dict[str, List[str]]:
    if not isinstance(section, dict):
        raise ValueError(f"Alias config section '{section_name}' must be a mapping")

    result = {}
    for key, values in section.items():
        if values is None:
            values = []
        elif isinstance(values, str):
            values = [values]
        result[str(key)] = [str(v) for v in values]
    return result


def _freeze(mapping: Dict[str, List[str]]) -> Tuple[Tuple[str, Tuple[str, ...]], ...]:
    return tuple((key, tuple(values)) for key, values in mapping.items())


def _thaw(frozen) -> Dict[str, List[str]]:
    return {key: list(values) for key, values in frozen}


__all__ = [
    'CONFIG_DIR',
    'AliasConfig',
    'default_alias_config',
    'get_config_path',
    'load_alias_config',
]
