"""
Unit Link Index - Config group -> units, facility -> fail-safe group

PURPOSE: Answer the two questions every delivery flow needs:
         - which units does this configuration group cover?
         - who gets alerted when nobody is assigned in this facility?

R EQUIVALENT: Like split(units, units$config_group) plus a named vector
facility -> no-caregiver group built with setNames()

AVIATION ANALOGY: Like a station directory - the flight plan only names
the route ("NC-4W"), the directory tells you which gates (units) and
which duty manager (fail-safe group) that route maps to

AUTHOR: Glen Lewis
DATE: 2025
"""

from dataclasses import dataclass
from typing import Dict, Iterable, List, Optional

import sys
import os
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from parsers.records import FlowType, UnitRecord


@dataclass(frozen=True)
class UnitLink:
    """One unit covered by a config group."""
    facility: str
    name: str

    def to_dict(self) -> Dict[str, str]:
        return {'facilityName': self.facility, 'name': self.name}


class UnitLinkIndex:
    """
    PURPOSE: Lookup tables built once from the Unit Breakdown records

    Nurse call and patient monitoring groups are kept in separate maps:
    a group label used on both sides of the Unit Breakdown sheet does not
    pull the other side's units into a flow.

    ATTRIBUTES:
        nurse_links: nurse call group -> [UnitLink] (first-seen order)
        clinical_links: patient monitoring group -> [UnitLink]
        fail_safe_groups: facility -> fail-safe group (last non-empty wins)

    EXAMPLE:
        index = UnitLinkIndex(unit_records)
        index.units_for('NC-4W', FlowType.NURSE_CALLS)
        # [UnitLink(facility='St. Mary', name='4 West')]
        index.fail_safe_group_for('St. Mary')
        # 'House Supervisor' or None
    """

    def __init__(self, unit_records: Iterable[UnitRecord] = ()):
        self.nurse_links: Dict[str, List[UnitLink]] = {}
        self.clinical_links: Dict[str, List[UnitLink]] = {}
        self.fail_safe_groups: Dict[str, str] = {}
        self._all_units: List[UnitLink] = []

        for record in unit_records:
            self.add(record)

    def add(self, record: UnitRecord) -> None:
        """Index one UnitRecord."""
        for unit_name in record.unit_names:
            link = UnitLink(record.facility, unit_name)
            _append_unique(self._all_units, link)
            if record.nurse_group:
                _append_unique(self.nurse_links.setdefault(record.nurse_group, []), link)
            if record.clinical_group:
                _append_unique(self.clinical_links.setdefault(record.clinical_group, []), link)

        if record.facility and record.fail_safe_group:
            self.fail_safe_groups[record.facility] = record.fail_safe_group

    # =========================================================================
    # LOOKUPS
    # =========================================================================

    def units_for(self, config_group: str, flow_type: Optional[str] = None) -> List[UnitLink]:
        """
        Units linked to a config group.

        PARAMETERS:
            config_group: Group label from an alarm row
            flow_type: Which map to read; None merges both (nurse call first)

        RETURNS:
            List of UnitLink, [] when the group is unknown or empty
        """
        if not config_group:
            return []

        if flow_type == FlowType.NURSE_CALLS:
            return list(self.nurse_links.get(config_group, []))
        if flow_type == FlowType.CLINICALS:
            return list(self.clinical_links.get(config_group, []))

        merged = []
        for link in self.nurse_links.get(config_group, []) + self.clinical_links.get(config_group, []):
            _append_unique(merged, link)
        return merged

    def first_facility_for(self, config_group: str, flow_type: Optional[str] = None) -> str:
        """Facility of the first linked unit, '' when none are linked."""
        links = self.units_for(config_group, flow_type)
        return links[0].facility if links else ''

    def fail_safe_group_for(self, facility: str) -> Optional[str]:
        """No-caregiver group for a facility, or None."""
        if not facility:
            return None
        return self.fail_safe_groups.get(facility)

    def all_units(self) -> List[UnitLink]:
        """Every unit in the Unit Breakdown sheet, first-seen order."""
        return list(self._all_units)

    def linked_group_count(self, flow_type: str) -> int:
        """Number of distinct config groups of one flow type that link to units."""
        if flow_type == FlowType.CLINICALS:
            return len(self.clinical_links)
        return len(self.nurse_links)

    def __repr__(self) -> str:
        return (f"UnitLinkIndex(nurse_groups={len(self.nurse_links)}, "
                f"clinical_groups={len(self.clinical_links)}, "
                f"fail_safe_facilities={len(self.fail_safe_groups)})")


def _append_unique(links: List[UnitLink], link: UnitLink) -> None:
    if link not in links:
        links.append(link)
