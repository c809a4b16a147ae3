"""
Alarm Definition Builder

PURPOSE: List every alarm the platform must recognize, once per
         (name, type), with the name the sending system uses for it

EXAMPLE OUTPUT:
    {"name": "Call Bell", "type": "NurseCalls",
     "values": [{"category": "", "value": "CALL_BELL"}]}
"""

from typing import Any, Dict, Iterable, List

import sys
import os
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from parsers.records import FlowRecord


class AlarmDefinition:
    """One alarm the platform recognizes. value = sending name, else the alarm name."""

    def __init__(self, name: str, alarm_type: str, value: str):
        self.name = name
        self.alarm_type = alarm_type
        self.value = value

    def to_dict(self) -> Dict[str, Any]:
        return {
            'name': self.name,
            'type': self.alarm_type,
            'values': [{'category': '', 'value': self.value}],
        }

    def __repr__(self) -> str:
        return f"AlarmDefinition({self.name!r}, {self.alarm_type!r}, value={self.value!r})"


class AlarmDefinitionBuilder:
    """Deduplicate FlowRecords into AlarmDefinitions; first occurrence wins."""

    def build(self, records: Iterable[FlowRecord]) -> List[AlarmDefinition]:
        definitions: Dict[tuple, AlarmDefinition] = {}
        for record in records:
            if not record.alarm_name:
                continue
            key = (record.alarm_name, record.flow_type)
            if key in definitions:
                continue
            definitions[key] = AlarmDefinition(
                record.alarm_name,
                record.flow_type,
                record.sending_name or record.alarm_name,
            )
        return list(definitions.values())
