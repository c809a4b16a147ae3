"""
Field Parsers - Priority, delay and recipient cells

PURPOSE: Interpret the free-text cells of the alarm sheets:
         - Priority labels   -> normal / high / urgent
         - Delay expressions -> whole seconds
         - Recipient cells   -> group / functional-role tokens

R EQUIVALENT: Like a set of small dplyr::case_when() helpers applied with
mutate() before the data is reshaped

AVIATION ANALOGY: Like decoding a hand-written flight strip - the same
information is written many ways ("90", "1:30", "90 secs") and each
field has to be read into one standard form before anyone acts on it

None of these functions raise. Unknown input is either passed through
(priority) or resolved to a safe default (delay -> 0, recipient -> group).
"""

import re
from typing import List, Optional


# =============================================================================
# PRIORITY
# =============================================================================
# The spreadsheet labels are shifted one step up on the alerting platform:
#   "High"   -> urgent
#   "Medium" -> high
#   "Low"    -> normal
# Matching is by substring so decorated labels like "Low(Edge)" work too.
# =============================================================================

PRIORITY_RULES = [
    ('high', 'urgent'),
    ('medium', 'high'),
    ('low', 'normal'),
]


def normalize_priority(raw: Optional[str]) -> Optional[str]:
    """
    Map a priority label to the platform priority.

    RETURNS:
        'urgent' / 'high' / 'normal' for recognized labels,
        None for an empty cell (not specified - NOT the same as normal),
        the original text for anything unrecognized

    EXAMPLE:
        normalize_priority("Medium(Edge)")  # 'high'
        normalize_priority("")              # None
        normalize_priority("P2")            # 'P2'
    """
    text = (raw or '').strip()
    if not text:
        return None

    lowered = text.lower()
    for probe, mapped in PRIORITY_RULES:
        if probe in lowered:
            return mapped
    return text


# =============================================================================
# DELAY
# =============================================================================

_DELAY_PATTERNS = [
    # 90
    (re.compile(r'^(\d+)$'), lambda m: int(m.group(1))),
    # 90s, 90 sec, 90 secs, 90 seconds
    (re.compile(r'^(\d+)\s*s(?:ec(?:ond)?s?)?$'), lambda m: int(m.group(1))),
    # 2m, 2 min, 2 mins, 2 minutes
    (re.compile(r'^(\d+)\s*m(?:in(?:ute)?s?)?$'), lambda m: int(m.group(1)) * 60),
    # 1:30 / 01:30
    (re.compile(r'^(\d{1,2}):(\d{2})$'), lambda m: int(m.group(1)) * 60 + int(m.group(2))),
    # 0:01:30 - time-formatted cells come through as HH:MM:SS
    (re.compile(r'^(\d{1,2}):(\d{2}):(\d{2})$'),
     lambda m: int(m.group(1)) * 3600 + int(m.group(2)) * 60 + int(m.group(3))),
]


def parse_delay(raw: Optional[str]) -> int:
    """
    Parse a delay cell into seconds.

    PURPOSE: Accept the many ways people type a delay

    RETURNS:
        int: Seconds (0 when nothing usable is found)

    EXAMPLE:
        parse_delay("90")       # 90
        parse_delay("2m")       # 120
        parse_delay("1:30")     # 90
        parse_delay("30 sec")   # 30
        parse_delay("garbage")  # 0
    """
    text = (raw or '').strip().lower()
    if not text:
        return 0

    for pattern, to_seconds in _DELAY_PATTERNS:
        match = pattern.match(text)
        if match:
            return to_seconds(match)

    # Last resort: whatever digits are in there
    digits = re.sub(r'\D', '', text)
    if not digits:
        return 0
    return int(digits)


# =============================================================================
# RECIPIENTS
# =============================================================================

GROUP = 'group'
FUNCTIONAL_ROLE = 'functional_role'

# Cells may list several recipients separated by any of these
_RECIPIENT_SPLIT = re.compile(r'[,;\n]')

# Placeholders people type instead of leaving the cell blank
_BLANK_TOKENS = {'n/a', 'na'}

_VASSIGN_PREFIX = re.compile(r'^vassign\s*:?\s*', re.IGNORECASE)
_BRACKET_QUALIFIER = re.compile(r'^\[[^\]]*\]\s*')
_VOICE_PREFIX = re.compile(r'^v(?:group|assign)[:\s]*', re.IGNORECASE)


class Recipient:
    """
    One parsed recipient token.

    ATTRIBUTES:
        kind: 'group' or 'functional_role'
        name: Recipient name with prefixes removed
    """

    def __init__(self, kind: str, name: str):
        self.kind = kind
        self.name = name

    @property
    def is_functional_role(self) -> bool:
        return self.kind == FUNCTIONAL_ROLE

    def __eq__(self, other):
        if not isinstance(other, Recipient):
            return NotImplemented
        return (self.kind, self.name) == (other.kind, other.name)

    def __hash__(self):
        return hash((self.kind, self.name))

    def __repr__(self) -> str:
        return f"Recipient({self.kind!r}, {self.name!r})"


def split_recipients(cell: Optional[str]) -> List[str]:
    """Split a recipient cell on comma / semicolon / newline, dropping blanks and N/A."""
    tokens = []
    for token in _RECIPIENT_SPLIT.split(cell or ''):
        token = token.strip()
        if not token or token.lower() in _BLANK_TOKENS:
            continue
        tokens.append(token)
    return tokens


def classify_recipient(token: str) -> Recipient:
    """
    Classify one recipient token.

    RULES:
        "VGroup: House Supervisor"  -> group 'House Supervisor'
        "VAssign: [Room] CNA"       -> functional_role 'CNA'
        "[Room] VAssign: CNA"       -> functional_role 'CNA'
        anything else               -> group, named by the raw token

    EXAMPLE:
        classify_recipient("VAssign: [Room] Charge Nurse").name  # 'Charge Nurse'
    """
    text = token.strip()
    lowered = text.lower()

    if lowered.startswith('vgroup'):
        _, _, name = text.partition(':')
        return Recipient(GROUP, name.strip())

    # Qualifier may come before or after the VAssign prefix
    unqualified = _BRACKET_QUALIFIER.sub('', text)
    if lowered.startswith('vassign') or unqualified.lower().startswith('vassign'):
        name = _VASSIGN_PREFIX.sub('', unqualified)
        name = _BRACKET_QUALIFIER.sub('', name)
        return Recipient(FUNCTIONAL_ROLE, name.strip())

    return Recipient(GROUP, text)


def parse_recipients(cell: Optional[str]) -> List[Recipient]:
    """
    Parse a whole recipient cell.

    RETURNS:
        List of Recipient in cell order; tokens whose name ends up empty
        (e.g. a bare "VGroup:") are dropped
    """
    recipients = []
    for token in split_recipients(cell):
        recipient = classify_recipient(token)
        if recipient.name:
            recipients.append(recipient)
    return recipients


# =============================================================================
# UNIT BREAKDOWN HELPERS
# =============================================================================

_UNIT_SPLIT = re.compile(r'[,;/\n]')


def split_unit_names(cell: Optional[str]) -> List[str]:
    """
    Split a unit-name cell into distinct names, order preserved.

    EXAMPLE:
        split_unit_names("4 West, 4 East; 4 West")  # ['4 West', '4 East']
    """
    names = []
    for token in _UNIT_SPLIT.split(cell or ''):
        token = token.strip()
        if token and token not in names:
            names.append(token)
    return names


def strip_voice_prefix(value: Optional[str]) -> str:
    """Remove a leading 'VGroup:' / 'VAssign:' from a fail-safe group cell."""
    return _VOICE_PREFIX.sub('', (value or '').strip()).strip()
