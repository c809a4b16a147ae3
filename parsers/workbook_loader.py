"""
Workbook Loader - Excel file to in-memory sheet grids

PURPOSE: Open an .xlsx workbook with openpyxl and hand back the three
         logical sheets (Unit Breakdown, Nurse Call, Patient Monitoring)
         as plain grids of cell values

R EQUIVALENT: Like readxl::excel_sheets() + read_excel(col_names = FALSE)
for each sheet, keeping every cell as it was typed

AVIATION ANALOGY: Like the ground crew unloading the cargo hold - the
containers come off in the same order they went in and nobody opens
them here; inspection happens downstream

The rest of the engine only ever sees SheetGrid, so tests and other
callers can build grids from plain lists without any workbook at all.
"""

import logging
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence

# openpyxl for Excel reading
try:
    from openpyxl import load_workbook
    OPENPYXL_AVAILABLE = True
except ImportError:
    OPENPYXL_AVAILABLE = False

import sys
import os
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from parsers.cell_reader import ERROR_LITERALS

LOGGER = logging.getLogger(__name__)

WORKBOOK_SUFFIXES = ('.xlsx', '.xlsm')

UNIT_BREAKDOWN = 'unit_breakdown'
NURSE_CALL = 'nurse_call'
PATIENT_MONITORING = 'patient_monitoring'


class SheetGrid:
    """
    PURPOSE: A 2-D grid of raw cell values with 0-based addressing

    ATTRIBUTES:
        name: Sheet name as it appeared in the workbook
        rows: List of rows, each a list of raw values (None = empty)
        last_row: Index of the last row (-1 when empty)
        last_column: Index of the last column in the widest row (-1 when empty)

    EXAMPLE:
        grid = SheetGrid.from_rows('Nurse Call', [
            ['Configuration Group', 'Common Alert or Alarm Name'],
            ['NC-4W', 'Call Bell'],
        ])
        grid.cell(1, 1)   # 'Call Bell'
        grid.cell(9, 9)   # None
    """

    def __init__(self, name: str, rows: List[List[Any]]):
        self.name = name
        self.rows = rows

    @classmethod
    def from_rows(cls, name: str, rows: Sequence[Sequence[Any]]) -> 'SheetGrid':
        """Build a grid from any sequence of row sequences."""
        return cls(name, [list(row) for row in rows])

    @property
    def last_row(self) -> int:
        return len(self.rows) - 1

    @property
    def last_column(self) -> int:
        if not self.rows:
            return -1
        return max(len(row) for row in self.rows) - 1

    def cell(self, row: int, col: int) -> Any:
        """Raw value at (row, col); None outside the grid."""
        if row < 0 or col < 0 or row >= len(self.rows):
            return None
        values = self.rows[row]
        if col >= len(values):
            return None
        return values[col]

    def __repr__(self) -> str:
        return f"SheetGrid({self.name!r}, rows={len(self.rows)})"


def find_sheet(sheet_names: List[str], possible_names: List[str]) -> Optional[str]:
    """
    Find a sheet by checking multiple possible names.

    PURPOSE: Flexible sheet name matching (case-insensitive, surrounding
             whitespace ignored)

    RETURNS:
        str: Matching sheet name, or None if not found
    """
    for possible in possible_names:
        for sheet in sheet_names:
            if sheet.strip().lower() == possible.strip().lower():
                return sheet
    return None


def load_workbook_sheets(excel_path: str, alias_config) -> Dict[str, Optional[SheetGrid]]:
    """
    Read the three logical sheets from an Excel workbook.

    PARAMETERS:
        excel_path: Path to an .xlsx / .xlsm file
        alias_config: AliasConfig supplying the candidate sheet names

    RETURNS:
        Dict with keys 'unit_breakdown', 'nurse_call', 'patient_monitoring';
        a value is None when the workbook has no matching sheet

    RAISES:
        ImportError: openpyxl is not installed
        FileNotFoundError: excel_path does not exist
        ValueError: not an Excel workbook, or openpyxl cannot read it

    EXAMPLE:
        sheets = load_workbook_sheets("St_Mary_Alarms.xlsx", default_alias_config())
        doc = transform(sheets['unit_breakdown'], sheets['nurse_call'],
                        sheets['patient_monitoring'])
    """
    if not OPENPYXL_AVAILABLE:
        raise ImportError("openpyxl required. Install with: pip install openpyxl")

    path = Path(excel_path)
    if not path.exists():
        raise FileNotFoundError(f"Workbook not found: {excel_path}")
    if path.suffix.lower() not in WORKBOOK_SUFFIXES:
        raise ValueError(f"Not an Excel workbook (.xlsx/.xlsm): {excel_path}")

    try:
        wb = load_workbook(str(path), data_only=True, read_only=True)
    except Exception as e:
        raise ValueError(f"Could not read workbook {excel_path}: {e}") from e

    try:
        sheets = {}
        for sheet_key in (UNIT_BREAKDOWN, NURSE_CALL, PATIENT_MONITORING):
            sheet_name = find_sheet(wb.sheetnames, alias_config.sheet_candidates(sheet_key))
            if sheet_name is None:
                LOGGER.warning("No '%s' sheet in %s (looked for: %s)", sheet_key, path.name,
                               ', '.join(alias_config.sheet_candidates(sheet_key)))
                sheets[sheet_key] = None
                continue
            sheets[sheet_key] = _read_grid(wb[sheet_name])
            LOGGER.debug("Read sheet '%s' as %s (%d rows)", sheet_name, sheet_key,
                         len(sheets[sheet_key].rows))
    finally:
        wb.close()

    return sheets


def _read_grid(ws) -> SheetGrid:
    rows = []
    for row in ws.iter_rows(values_only=True):
        rows.append([_clean_value(value) for value in row])

    # Trailing blank rows carry no data
    while rows and all(value is None for value in rows[-1]):
        rows.pop()

    return SheetGrid(ws.title, rows)


def _clean_value(value):
    if isinstance(value, str) and value.strip() in ERROR_LITERALS:
        return None
    return value
