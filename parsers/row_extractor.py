"""
Row Extractor - Sheet grids to typed records

PURPOSE: Walk the data rows below each detected header row and build
         UnitRecord / FlowRecord objects from them

R EQUIVALENT:
    units <- read_excel(path, sheet = "Unit Breakdown", skip = header_row) %>%
      rename(any_of(aliases)) %>%
      filter(!(is.na(facility) & is.na(unit_names)))

AVIATION ANALOGY: Like transcribing a paper tech log into the maintenance
system - each line is read against the column headings, blank lines are
skipped, and an entry with no defect description is not logged at all

ROW RULES:
    - Unit Breakdown row: skipped when facility AND unit cell are both empty
    - Alarm row: skipped when the alarm name is empty
    - Field with no matching column: reads as '' for every row
"""

import logging
from typing import List, Optional

import sys
import os
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from parsers.cell_reader import read_cell
from parsers.field_parsers import normalize_priority, split_unit_names, strip_voice_prefix
from parsers.header_resolver import HeaderMatch, HeaderResolver
from parsers.records import SLOT_COUNT, FlowRecord, FlowType, RecipientSlot, UnitRecord

LOGGER = logging.getLogger(__name__)


class RowExtractor:
    """
    PURPOSE: Turn the three input sheets into records

    PARAMETERS:
        alias_config: AliasConfig with unit_fields / flow_fields / header_scan_rows

    EXAMPLE:
        extractor = RowExtractor(default_alias_config())
        units = extractor.extract_units(unit_sheet)
        nurse_calls = extractor.extract_flows(nurse_sheet, FlowType.NURSE_CALLS)
    """

    def __init__(self, alias_config):
        self.alias_config = alias_config
        self.unit_resolver = HeaderResolver(alias_config.normalized_fields('unit_fields'),
                                            scan_rows=alias_config.header_scan_rows)
        self.flow_resolver = HeaderResolver(alias_config.normalized_fields('flow_fields'),
                                            scan_rows=alias_config.header_scan_rows)

    # =========================================================================
    # UNIT BREAKDOWN
    # =========================================================================

    def extract_units(self, sheet) -> List[UnitRecord]:
        """
        Read the Unit Breakdown sheet.

        RETURNS:
            List of UnitRecord in sheet order ([] for a missing sheet or header)
        """
        match = self._resolve(sheet, self.unit_resolver, 'Unit Breakdown')
        if match is None:
            return []

        records = []
        for row_index in range(match.row_index + 1, sheet.last_row + 1):
            facility = self._value(sheet, row_index, match, 'facility')
            unit_cell = self._value(sheet, row_index, match, 'unit_names')

            if not facility and not unit_cell:
                LOGGER.debug("Unit Breakdown row %d skipped: no facility or unit", row_index + 1)
                continue

            records.append(UnitRecord(
                facility=facility,
                unit_names=tuple(split_unit_names(unit_cell)),
                nurse_group=self._value(sheet, row_index, match, 'nurse_group'),
                clinical_group=self._value(sheet, row_index, match, 'clinical_group'),
                fail_safe_group=strip_voice_prefix(
                    self._value(sheet, row_index, match, 'fail_safe_group')),
            ))

        return records

    # =========================================================================
    # NURSE CALL / PATIENT MONITORING
    # =========================================================================

    def extract_flows(self, sheet, flow_type: str) -> List[FlowRecord]:
        """
        Read a Nurse Call or Patient Monitoring sheet.

        PARAMETERS:
            sheet: SheetGrid (or None)
            flow_type: FlowType.NURSE_CALLS or FlowType.CLINICALS

        RETURNS:
            List of FlowRecord in sheet order ([] for a missing sheet or header)
        """
        if flow_type not in FlowType.ALL:
            raise ValueError(f"Unknown flow type: {flow_type}")

        label = 'Nurse Call' if flow_type == FlowType.NURSE_CALLS else 'Patient Monitoring'
        match = self._resolve(sheet, self.flow_resolver, label)
        if match is None:
            return []

        records = []
        for row_index in range(match.row_index + 1, sheet.last_row + 1):
            alarm_name = self._value(sheet, row_index, match, 'alarm_name')
            if not alarm_name:
                LOGGER.debug("%s row %d skipped: no alarm name", label, row_index + 1)
                continue

            priority_raw = self._value(sheet, row_index, match, 'priority')
            slots = tuple(
                RecipientSlot(
                    delay=self._value(sheet, row_index, match, f'delay_{n}'),
                    recipient=self._value(sheet, row_index, match, f'recipient_{n}'),
                )
                for n in range(1, SLOT_COUNT + 1)
            )

            records.append(FlowRecord(
                flow_type=flow_type,
                config_group=self._value(sheet, row_index, match, 'config_group'),
                alarm_name=alarm_name,
                sending_name=self._value(sheet, row_index, match, 'sending_name'),
                priority_raw=priority_raw,
                priority=normalize_priority(priority_raw),
                ringtone=self._value(sheet, row_index, match, 'ringtone'),
                response_options=self._value(sheet, row_index, match, 'response_options'),
                device=self._value(sheet, row_index, match, 'device'),
                slots=slots,
            ))

        return records

    # =========================================================================
    # HELPERS
    # =========================================================================

    def _resolve(self, sheet, resolver: HeaderResolver, label: str) -> Optional[HeaderMatch]:
        if sheet is None:
            LOGGER.warning("%s sheet missing - no rows read", label)
            return None

        match = resolver.resolve(sheet)
        if match is None:
            LOGGER.warning("%s sheet has no header row - no rows read", label)
            return None

        missing = match.missing_fields()
        if missing:
            LOGGER.debug("%s sheet: no column for %s", label, ', '.join(missing))
        return match

    def _value(self, sheet, row_index: int, match: HeaderMatch, field_name: str) -> str:
        col = match.column_for(field_name)
        if col is None:
            return ''
        return read_cell(sheet.cell(row_index, col))
