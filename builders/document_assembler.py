"""
Document Assembler - Records to the notification configuration document

PURPOSE: Run the whole conversion: sheets -> records -> unit links ->
         bundles -> destinations + parameters -> one JSON-ready document

R EQUIVALENT: Like the final list(...) you hand to jsonlite::toJSON(),
built from the tibbles of every earlier step

AVIATION ANALOGY: Like compiling the final load sheet - every department
has done its part, this step puts the figures in their boxes in the
order the captain reads them

DOCUMENT SHAPE:
    {
      "version": "1.1.0",
      "alarmAlertDefinitions": [...],
      "deliveryFlows": [
        {"alarmsAlerts", "conditions", "destinations", "interfaces", "name",
         "parameterAttributes", "priority", "status", "units"}
      ]
    }

Every conversion builds fresh state; nothing carries over between calls.

AUTHOR: Glen Lewis
DATE: 2025
"""

import logging
from typing import Any, Dict, List, Optional

import sys
import os
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from builders.alarm_definitions import AlarmDefinitionBuilder
from builders.destination_builder import DestinationBuilder
from builders.parameter_builder import ParameterBuilder
from config import default_alias_config
from managers.flow_bundler import FlowBundle, FlowBundler
from managers.unit_link_index import UnitLink, UnitLinkIndex
from parsers.records import FlowRecord, FlowType, UnitRecord
from parsers.row_extractor import RowExtractor

LOGGER = logging.getLogger(__name__)

ACTIVE = 'Active'

NAME_SEPARATOR = ' | '
LIST_SEPARATOR = ' / '

FLOW_KIND = {
    FlowType.NURSE_CALLS: 'NURSECALL',
    FlowType.CLINICALS: 'CLINICAL',
}

OUTGOING_WCTP = 'OutgoingWCTP'


def nurse_call_conditions() -> List[Dict[str, Any]]:
    """Fixed condition every nurse call flow carries (fresh copy per call)."""
    return [{
        'filters': [
            {'attributePath': 'bed', 'operator': 'not_null'},
            {'attributePath': 'to.type', 'operator': 'not_equal', 'value': 'TargetGroups'},
        ],
        'name': 'NurseCallsCondition',
    }]


def outgoing_interfaces() -> List[Dict[str, str]]:
    return [{'componentName': OUTGOING_WCTP, 'referenceName': OUTGOING_WCTP}]


class LoadedTables:
    """
    The three input tables as records.

    ATTRIBUTES:
        units: UnitRecords from the Unit Breakdown sheet
        nurse_calls: FlowRecords from the Nurse Call sheet
        clinicals: FlowRecords from the Patient Monitoring sheet
    """

    def __init__(self, units: List[UnitRecord], nurse_calls: List[FlowRecord],
                 clinicals: List[FlowRecord]):
        self.units = units
        self.nurse_calls = nurse_calls
        self.clinicals = clinicals

    def __repr__(self) -> str:
        return (f"LoadedTables(units={len(self.units)}, nurse_calls={len(self.nurse_calls)}, "
                f"clinicals={len(self.clinicals)})")


def extract_tables(unit_sheet, nurse_sheet, clinical_sheet, alias_config=None) -> LoadedTables:
    """
    Read the three sheets into records.

    PARAMETERS:
        unit_sheet / nurse_sheet / clinical_sheet: SheetGrid or None
        alias_config: AliasConfig (shipped table when omitted)
    """
    alias_config = alias_config or default_alias_config()
    extractor = RowExtractor(alias_config)
    tables = LoadedTables(
        units=extractor.extract_units(unit_sheet),
        nurse_calls=extractor.extract_flows(nurse_sheet, FlowType.NURSE_CALLS),
        clinicals=extractor.extract_flows(clinical_sheet, FlowType.CLINICALS),
    )
    LOGGER.info("Loaded %d unit rows, %d nurse call rows, %d patient monitoring rows",
                len(tables.units), len(tables.nurse_calls), len(tables.clinicals))
    return tables


class DocumentAssembler:
    """
    PURPOSE: Compose the configuration document from loaded records

    PARAMETERS:
        version: Version string stamped on the document
        all_units_fallback: When True, a flow whose config group links to
                            no units gets every unit of the Unit Breakdown
                            sheet instead of an empty list. Off by default.

    EXAMPLE:
        assembler = DocumentAssembler(version="1.1.0")
        doc = assembler.assemble(tables)
        nurse_only = assembler.assemble(tables, flow_type=FlowType.NURSE_CALLS)
    """

    def __init__(self, version: str = '1.1.0', all_units_fallback: bool = False):
        self.version = version
        self.all_units_fallback = all_units_fallback

    def assemble(self, tables: LoadedTables, flow_type: Optional[str] = None) -> Dict[str, Any]:
        """
        Build the document.

        PARAMETERS:
            tables: LoadedTables
            flow_type: Restrict to FlowType.NURSE_CALLS or FlowType.CLINICALS;
                       None builds both (nurse calls first)

        RETURNS:
            Dict with keys version, alarmAlertDefinitions, deliveryFlows
        """
        if flow_type is not None and flow_type not in FlowType.ALL:
            raise ValueError(f"Unknown flow type: {flow_type}")

        link_index = UnitLinkIndex(tables.units)
        destination_builder = DestinationBuilder(link_index)
        parameter_builder = ParameterBuilder()
        bundler = FlowBundler()

        record_sets = []
        if flow_type in (None, FlowType.NURSE_CALLS):
            record_sets.append(tables.nurse_calls)
        if flow_type in (None, FlowType.CLINICALS):
            record_sets.append(tables.clinicals)

        definitions = []
        flows = []
        for records in record_sets:
            definitions.extend(d.to_dict() for d in AlarmDefinitionBuilder().build(records))
            for bundle in bundler.bundle(records):
                links = self._links_for(bundle, link_index)
                destinations = destination_builder.build(bundle, links)
                params = parameter_builder.build(bundle, destinations)
                flows.append(self._flow(bundle, links, destinations, params))

        LOGGER.info("Built %d delivery flows and %d alarm definitions",
                    len(flows), len(definitions))

        return {
            'version': self.version,
            'alarmAlertDefinitions': definitions,
            'deliveryFlows': flows,
        }

    # =========================================================================
    # HELPERS
    # =========================================================================

    def _links_for(self, bundle: FlowBundle, link_index: UnitLinkIndex) -> List[UnitLink]:
        sample = bundle.sample
        links = link_index.units_for(sample.config_group, sample.flow_type)
        if not links and self.all_units_fallback:
            LOGGER.debug("Config group %r links no units; using all units", sample.config_group)
            links = link_index.all_units()
        return links

    def _flow(self, bundle: FlowBundle, links: List[UnitLink], destinations, params) -> Dict[str, Any]:
        sample = bundle.sample
        return {
            'alarmsAlerts': list(bundle.alarm_names),
            'conditions': nurse_call_conditions() if sample.flow_type == FlowType.NURSE_CALLS else [],
            'destinations': [d.to_dict() for d in destinations],
            'interfaces': outgoing_interfaces(),
            'name': flow_name(bundle, links),
            'parameterAttributes': [p.to_dict() for p in params],
            'priority': sample.priority or '',
            'status': ACTIVE,
            'units': [link.to_dict() for link in links],
        }


def flow_name(bundle: FlowBundle, links: List[UnitLink]) -> str:
    """
    Human-readable flow name.

    FORMAT:
        SEND <KIND> | <PRIORITY> | <alarm / alarm> | <unit / unit> | <facility>

    EXAMPLE:
        'SEND NURSECALL | HIGH | Call Bell / Bed Alarm | 4 West | St. Mary'
    """
    sample = bundle.sample
    unit_names = []
    for link in links:
        if link.name and link.name not in unit_names:
            unit_names.append(link.name)

    return NAME_SEPARATOR.join([
        'SEND ' + FLOW_KIND[sample.flow_type],
        (sample.priority or '').upper(),
        LIST_SEPARATOR.join(bundle.alarm_names),
        LIST_SEPARATOR.join(unit_names),
        links[0].facility if links else '',
    ])


def transform(unit_sheet, nurse_sheet, clinical_sheet, alias_config=None,
              all_units_fallback: bool = False, flow_type: Optional[str] = None) -> Dict[str, Any]:
    """
    Convert the three input sheets into a configuration document.

    PURPOSE: Single entry point - no state survives the call

    PARAMETERS:
        unit_sheet: Unit Breakdown SheetGrid (None if absent)
        nurse_sheet: Nurse Call SheetGrid (None if absent)
        clinical_sheet: Patient Monitoring SheetGrid (None if absent)
        alias_config: AliasConfig (shipped field_aliases.yaml when omitted)
        all_units_fallback: Attach every unit to flows whose group links none
        flow_type: Restrict output to one flow type

    EXAMPLE:
        sheets = load_workbook_sheets("alarms.xlsx", aliases)
        doc = transform(sheets['unit_breakdown'], sheets['nurse_call'],
                        sheets['patient_monitoring'], aliases)
        write_document(doc, "output/alarms.json")
    """
    alias_config = alias_config or default_alias_config()
    tables = extract_tables(unit_sheet, nurse_sheet, clinical_sheet, alias_config)
    assembler = DocumentAssembler(version=alias_config.version,
                                  all_units_fallback=all_units_fallback)
    return assembler.assemble(tables, flow_type=flow_type)
