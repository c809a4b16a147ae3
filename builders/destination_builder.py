"""
Destination Builder - Recipient slots to ordered destinations

PURPOSE: Turn the five (delay, recipient) slots of a delivery rule into
         the destination list the alerting platform escalates through,
         plus the no-caregiver fail-safe for patient monitoring flows

R EQUIVALENT: Like tidyr::pivot_longer() over recipient_1..recipient_5
followed by a mutate() that classifies each recipient

AVIATION ANALOGY: Like an escalation phone tree on the ops desk - call the
first number, wait, call the next, and if nobody is rostered at all the
duty manager gets the call

DESTINATION RULES:
    - A slot with neither delay nor recipient is skipped
    - A slot whose recipient cell holds nothing usable is skipped
    - Group tokens and functional-role tokens of one slot become two
      destinations with the SAME order (groups first), never one
      destination carrying both
    - Patient monitoring only: if the facility has a no-caregiver group,
      one NoDeliveries destination is appended with order = count so far

AUTHOR: Glen Lewis
DATE: 2025
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Tuple

import sys
import os
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from managers.flow_bundler import FlowBundle
from managers.unit_link_index import UnitLink, UnitLinkIndex
from parsers.field_parsers import FUNCTIONAL_ROLE, GROUP, parse_delay, parse_recipients
from parsers.records import FlowType

LOGGER = logging.getLogger(__name__)

NORMAL = 'Normal'
NO_DELIVERIES = 'NoDeliveries'

PRESENCE_DEVICE = 'device'
PRESENCE_USER_AND_DEVICE = 'user_and_device'


@dataclass(frozen=True)
class Target:
    """One group or functional role a destination alerts."""
    facility: str
    name: str

    def to_dict(self) -> Dict[str, str]:
        return {'facilityName': self.facility, 'name': self.name}


@dataclass(frozen=True)
class Destination:
    """
    One step of a delivery flow's escalation.

    ATTRIBUTES:
        order: 0-based escalation step (shared by the group and role
               destinations of a mixed slot)
        delay_seconds: Wait before this step fires
        destination_type: 'Normal' or 'NoDeliveries'
        recipient_type: 'group' or 'functional_role'
        presence_config: 'device' or 'user_and_device'
        groups / functional_roles: Targets; exactly one of the two is non-empty
    """
    order: int
    delay_seconds: int
    destination_type: str
    recipient_type: str
    presence_config: str
    groups: Tuple[Target, ...] = field(default_factory=tuple)
    functional_roles: Tuple[Target, ...] = field(default_factory=tuple)

    @property
    def is_functional_role(self) -> bool:
        return self.recipient_type == FUNCTIONAL_ROLE

    @property
    def destination_name(self) -> str:
        """First functional role name, or 'Group' for group destinations."""
        if self.functional_roles:
            return self.functional_roles[0].name
        return 'Group'

    def to_dict(self) -> Dict[str, Any]:
        """Output form, keys in platform order."""
        return {
            'order': self.order,
            'delayTime': self.delay_seconds,
            'destinationType': self.destination_type,
            'users': [],
            'functionalRoles': [t.to_dict() for t in self.functional_roles],
            'groups': [t.to_dict() for t in self.groups],
            'presenceConfig': self.presence_config,
            'recipientType': self.recipient_type,
        }


class DestinationBuilder:
    """
    PURPOSE: Build the destination list of one FlowBundle

    PARAMETERS:
        link_index: UnitLinkIndex for facility and fail-safe lookups

    EXAMPLE:
        builder = DestinationBuilder(UnitLinkIndex(unit_records))
        for d in builder.build(bundle):
            print(d.order, d.recipient_type, [g.name for g in d.groups])
    """

    def __init__(self, link_index: UnitLinkIndex):
        self.link_index = link_index

    def build(self, bundle: FlowBundle, links: Optional[List[UnitLink]] = None) -> List[Destination]:
        """
        Build destinations for a bundle.

        PARAMETERS:
            bundle: The delivery rule
            links: Units already resolved for the bundle; looked up from
                   the index by config group when omitted

        RETURNS:
            List of Destination, order non-decreasing
        """
        sample = bundle.sample
        if links is None:
            facility = self.link_index.first_facility_for(sample.config_group, sample.flow_type)
        else:
            facility = links[0].facility if links else ''

        destinations: List[Destination] = []
        for order, slot in enumerate(sample.slots):
            if slot.is_empty:
                continue
            built = self._slot_destinations(order, slot.delay, slot.recipient, facility)
            if not built:
                LOGGER.debug("Slot %d of %r skipped: no usable recipient", order + 1,
                             sample.config_group)
                continue
            destinations.extend(built)

        if sample.flow_type == FlowType.CLINICALS:
            fail_safe = self.link_index.fail_safe_group_for(facility)
            if fail_safe:
                # destination count, raised to the last slot order when gaps put it behind
                order = len(destinations)
                if destinations and order < destinations[-1].order:
                    order = destinations[-1].order
                destinations.append(Destination(
                    order=order,
                    delay_seconds=0,
                    destination_type=NO_DELIVERIES,
                    recipient_type=GROUP,
                    presence_config=PRESENCE_DEVICE,
                    groups=(Target(facility, fail_safe),),
                ))

        return destinations

    def _slot_destinations(self, order: int, delay_text: str, recipient_text: str,
                           facility: str) -> List[Destination]:
        recipients = parse_recipients(recipient_text)
        groups = tuple(Target(facility, r.name) for r in recipients if not r.is_functional_role)
        roles = tuple(Target(facility, r.name) for r in recipients if r.is_functional_role)
        delay = parse_delay(delay_text)

        built = []
        if groups:
            built.append(Destination(
                order=order,
                delay_seconds=delay,
                destination_type=NORMAL,
                recipient_type=GROUP,
                presence_config=PRESENCE_DEVICE,
                groups=groups,
            ))
        if roles:
            built.append(Destination(
                order=order,
                delay_seconds=delay,
                destination_type=NORMAL,
                recipient_type=FUNCTIONAL_ROLE,
                presence_config=PRESENCE_USER_AND_DEVICE,
                functional_roles=roles,
            ))
        return built
