"""
Load Summary - What was read and what was built

PURPOSE: Give the person running a conversion a quick sanity check:
         how many rows each sheet contributed, how many config groups
         actually link to units, and how many flows came out

AVIATION ANALOGY: Like the load summary handed to the captain before
pushback - passengers, bags and fuel at a glance, no detail

EXAMPLE OUTPUT:
    {
        'unit_rows': 12,
        'nurse_call_rows': 48,
        'patient_monitoring_rows': 20,
        'nurse_groups_linked': 3,
        'clinical_groups_linked': 2,
        'nurse_call_flows': 9,
        'clinical_flows': 4,
        'alarm_definitions': 61,
        'unlinked_flows': 1
    }
"""

from typing import Any, Dict, List

import sys
import os
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from builders.document_assembler import LoadedTables
from managers.unit_link_index import UnitLinkIndex
from parsers.records import FlowType

# Order rows are printed in by the CLI
SUMMARY_LABELS = [
    ('unit_rows', 'Unit Breakdown rows'),
    ('nurse_call_rows', 'Nurse Call rows'),
    ('patient_monitoring_rows', 'Patient Monitoring rows'),
    ('nurse_groups_linked', 'Nurse call groups linked to units'),
    ('clinical_groups_linked', 'Patient monitoring groups linked to units'),
    ('nurse_call_flows', 'Nurse call flows'),
    ('clinical_flows', 'Clinical flows'),
    ('alarm_definitions', 'Alarm definitions'),
    ('unlinked_flows', 'Flows with no units'),
]


def build_load_summary(tables: LoadedTables, document: Dict[str, Any]) -> Dict[str, int]:
    """
    Count what a conversion read and produced.

    PARAMETERS:
        tables: Records the document was built from
        document: Output of DocumentAssembler.assemble()

    RETURNS:
        Dict of counter name -> count (keys as in SUMMARY_LABELS)
    """
    index = UnitLinkIndex(tables.units)
    flows: List[Dict[str, Any]] = document.get('deliveryFlows', [])

    return {
        'unit_rows': len(tables.units),
        'nurse_call_rows': len(tables.nurse_calls),
        'patient_monitoring_rows': len(tables.clinicals),
        'nurse_groups_linked': index.linked_group_count(FlowType.NURSE_CALLS),
        'clinical_groups_linked': index.linked_group_count(FlowType.CLINICALS),
        'nurse_call_flows': sum(1 for f in flows if f['name'].startswith('SEND NURSECALL')),
        'clinical_flows': sum(1 for f in flows if f['name'].startswith('SEND CLINICAL')),
        'alarm_definitions': len(document.get('alarmAlertDefinitions', [])),
        'unlinked_flows': sum(1 for f in flows if not f['units']),
    }
