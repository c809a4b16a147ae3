"""
Typed Records - One row of input after extraction

PURPOSE: Hold the cleaned values of a Unit Breakdown row or an alarm row
         (Nurse Call / Patient Monitoring) so later stages never touch
         raw sheet cells again

R EQUIVALENT: Like a tibble with fixed column types, one row per record

Records are immutable once created.
"""

from dataclasses import dataclass, field
from typing import Optional, Tuple

SLOT_COUNT = 5


class FlowType:
    """The two kinds of alarm flow, named as the alerting platform names them."""
    NURSE_CALLS = 'NurseCalls'
    CLINICALS = 'Clinicals'

    ALL = (NURSE_CALLS, CLINICALS)


@dataclass(frozen=True)
class UnitRecord:
    """
    One qualifying Unit Breakdown row.

    ATTRIBUTES:
        facility: Facility name
        unit_names: Distinct unit names split from the unit cell
        nurse_group: Nurse call configuration group ('' if none)
        clinical_group: Patient monitoring configuration group ('' if none)
        fail_safe_group: No-caregiver group with any VGroup:/VAssign: prefix removed
    """
    facility: str
    unit_names: Tuple[str, ...]
    nurse_group: str = ''
    clinical_group: str = ''
    fail_safe_group: str = ''

    def group_for(self, flow_type: str) -> str:
        """Config group this unit belongs to for the given flow type."""
        if flow_type == FlowType.CLINICALS:
            return self.clinical_group
        return self.nurse_group


@dataclass(frozen=True)
class RecipientSlot:
    """One (delay, recipient) pair - '1st Recipient' through '5th Recipient'."""
    delay: str = ''
    recipient: str = ''

    @property
    def is_empty(self) -> bool:
        return not self.delay and not self.recipient


@dataclass(frozen=True)
class FlowRecord:
    """
    One qualifying Nurse Call or Patient Monitoring row.

    ATTRIBUTES:
        flow_type: FlowType.NURSE_CALLS or FlowType.CLINICALS
        config_group: Links the row to units via the Unit Breakdown sheet
        alarm_name: Common alert or alarm name (never empty)
        sending_name: Name the sending system uses for the alarm
        priority_raw: Priority cell as typed
        priority: Normalized priority, None when the cell was empty
        ringtone: Ringtone for device A
        response_options: Response options text
        device: Device A label
        slots: Exactly five RecipientSlot entries
    """
    flow_type: str
    config_group: str
    alarm_name: str
    sending_name: str = ''
    priority_raw: str = ''
    priority: Optional[str] = None
    ringtone: str = ''
    response_options: str = ''
    device: str = ''
    slots: Tuple[RecipientSlot, ...] = field(
        default_factory=lambda: tuple(RecipientSlot() for _ in range(SLOT_COUNT)))
