"""
Flow Bundler - Collapse alarm rows into delivery rules

PURPOSE: Many alarm rows describe the same delivery rule for different
         alarms (same group, priority, tone, responses and recipients).
         Those rows become ONE delivery flow that lists every alarm.

R EQUIVALENT:
    flows <- alarms %>%
      group_by(across(c(config_group, priority, ringtone, ..., recipient_5))) %>%
      summarise(alarm_names = list(unique(alarm_name)), .groups = "keep")

AVIATION ANALOGY: Like grouping passengers by connecting flight - everyone
going to the same gate at the same time goes on one bus

SIGNATURE:
    (flow type, config group, normalized priority, ringtone, response
     options, device, delay_1, recipient_1, ... delay_5, recipient_5)

    Every text part is case-folded. The key is a tuple so no separator
    character inside the data can make two different rows collide.

AUTHOR: Glen Lewis
DATE: 2025
"""

from typing import Dict, Iterable, List, Tuple

import sys
import os
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from parsers.records import FlowRecord


def bundle_key(record: FlowRecord) -> Tuple[str, ...]:
    """
    Signature shared by every member of a bundle.

    EXAMPLE:
        bundle_key(record)
        # ('nursecalls', 'nc-4w', 'high', '', '', '', '0', 'vgroup: charge rn', '', ...)
    """
    parts = [
        record.flow_type,
        record.config_group,
        record.priority or '',
        record.ringtone,
        record.response_options,
        record.device,
    ]
    for slot in record.slots:
        parts.append(slot.delay)
        parts.append(slot.recipient)
    return tuple(part.casefold() for part in parts)


class FlowBundle:
    """
    PURPOSE: One delivery rule and the alarm rows that share it

    ATTRIBUTES:
        key: Signature tuple (see bundle_key)
        records: Member FlowRecords in sheet order
        sample: First member; supplies every attribute except alarm name
        alarm_names: Distinct alarm names, first-seen order
    """

    def __init__(self, key: Tuple[str, ...], first: FlowRecord):
        self.key = key
        self.records: List[FlowRecord] = [first]
        self.alarm_names: List[str] = [first.alarm_name]

    @property
    def sample(self) -> FlowRecord:
        return self.records[0]

    @property
    def flow_type(self) -> str:
        return self.sample.flow_type

    def add(self, record: FlowRecord) -> None:
        self.records.append(record)
        if record.alarm_name not in self.alarm_names:
            self.alarm_names.append(record.alarm_name)

    def __repr__(self) -> str:
        return (f"FlowBundle({self.sample.flow_type}, group={self.sample.config_group!r}, "
                f"alarms={self.alarm_names})")


class FlowBundler:
    """
    PURPOSE: Partition FlowRecords into FlowBundles

    EXAMPLE:
        bundles = FlowBundler().bundle(nurse_call_records)
        for b in bundles:
            print(b.alarm_names)   # ['Call Bell', 'Bed Alarm']
    """

    def bundle(self, records: Iterable[FlowRecord]) -> List[FlowBundle]:
        """
        Group records by signature.

        RETURNS:
            Bundles in first-seen order. Records with an empty alarm name
            are ignored.
        """
        bundles: Dict[Tuple[str, ...], FlowBundle] = {}
        for record in records:
            if not record.alarm_name:
                continue
            key = bundle_key(record)
            if key in bundles:
                bundles[key].add(record)
            else:
                bundles[key] = FlowBundle(key, record)
        return list(bundles.values())
