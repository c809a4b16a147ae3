"""
Parsers package - Reading the input sheets

Turns sheet grids into typed records:
- header_resolver: header row detection and alias-based column mapping
- cell_reader: raw cell -> normalized string
- field_parsers: priority, delay and recipient parsing
- row_extractor: grids -> UnitRecord / FlowRecord
- workbook_loader: .xlsx file -> SheetGrid per logical sheet
"""

from .cell_reader import read_cell
from .field_parsers import (
    Recipient,
    normalize_priority,
    parse_delay,
    parse_recipients,
    split_unit_names,
)
from .header_resolver import HeaderMatch, HeaderResolver, normalize_header
from .records import FlowRecord, FlowType, RecipientSlot, UnitRecord
from .row_extractor import RowExtractor
from .workbook_loader import SheetGrid, load_workbook_sheets

__all__ = [
    'FlowRecord',
    'FlowType',
    'HeaderMatch',
    'HeaderResolver',
    'Recipient',
    'RecipientSlot',
    'RowExtractor',
    'SheetGrid',
    'UnitRecord',
    'load_workbook_sheets',
    'normalize_header',
    'normalize_priority',
    'parse_delay',
    'parse_recipients',
    'read_cell',
    'split_unit_names',
]
