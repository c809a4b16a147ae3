"""
Unit Tests for the Parameter Builder

PURPOSE: Parameter attributes come out in exactly the expected order
         with the expected serialized values

RUN TESTS:
    python3 -m pytest tests/ -v
"""

import os
import sys
import unittest

# Add parent directory to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from builders.destination_builder import DestinationBuilder
from builders.parameter_builder import ParameterAttribute, ParameterBuilder, literal
from managers.flow_bundler import FlowBundler
from managers.unit_link_index import UnitLinkIndex
from parsers.records import FlowRecord, FlowType, RecipientSlot, UnitRecord

NURSE_TAIL = ['breakThrough', 'alertSound', 'popup', 'enunciate', 'ttl', 'retractRules',
              'vibrate', 'message', 'patientMRN', 'placeUid', 'patientName',
              'eventIdentification', 'shortMessage', 'subject']


def build(flow_type=FlowType.NURSE_CALLS, responses='Accept', priority='high',
          ringtone='Tone 1', recipients=('VGroup: Charge RN',)):
    slots = tuple(RecipientSlot('0', r) for r in recipients)
    slots += tuple(RecipientSlot() for _ in range(5 - len(slots)))
    record = FlowRecord(flow_type=flow_type, config_group='G1', alarm_name='Alarm',
                        priority=priority, ringtone=ringtone, response_options=responses,
                        slots=slots)
    bundle = FlowBundler().bundle([record])[0]
    index = UnitLinkIndex([UnitRecord('St. Mary', ('4 West',), 'G1', 'G1', 'House Supervisor')])
    destinations = DestinationBuilder(index).build(bundle)
    return ParameterBuilder().build(bundle, destinations)


def by_name(params, name):
    return [p for p in params if p.name == name]


class TestLiteral(unittest.TestCase):
    """Values are serialized literals."""

    def test_literals(self):
        """Strings quoted, booleans/numbers bare, lists as JSON."""
        self.assertEqual(literal('Accepted'), '"Accepted"')
        self.assertEqual(literal(True), 'true')
        self.assertEqual(literal(False), 'false')
        self.assertEqual(literal(10), '10')
        self.assertEqual(literal(['ttlHasElapsed']), '["ttlHasElapsed"]')

    def test_attribute_dict(self):
        """destinationOrder only appears when set."""
        self.assertEqual(ParameterAttribute('ttl', '10').to_dict(), {'name': 'ttl', 'value': '10'})
        self.assertEqual(list(ParameterAttribute('decline', '"x"', 0).to_dict()),
                         ['name', 'value', 'destinationOrder'])


class TestNurseCallParameters(unittest.TestCase):
    """NurseCalls branch."""

    def test_accept_order(self):
        """Accept/Decline responses, no escalate."""
        names = [p.name for p in build()]
        self.assertEqual(names, ['destinationName', 'accept', 'acceptAndCall', 'acceptBadgePhrases',
                                 'respondingLine', 'respondingUser', 'responsePath',
                                 'responseType'] + NURSE_TAIL)

    def test_escalate_adds_decline_at_order_zero(self):
        """Escalate adds decline + declineBadgePhrases tied to destination 0."""
        params = build(responses='Accept, Escalate')
        names = [p.name for p in params]
        self.assertEqual(names[7:10], ['responseType', 'decline', 'declineBadgePhrases'])
        self.assertEqual(by_name(params, 'decline')[0].destination_order, 0)
        self.assertEqual(by_name(params, 'declineBadgePhrases')[0].value, '["Escalate"]')

    def test_no_response(self):
        """No Response: responseType None and responseAllowed false, no accept."""
        params = build(responses='No Response')
        names = [p.name for p in params]
        self.assertEqual(names[1:3], ['responseType', 'responseAllowed'])
        self.assertNotIn('accept', names)
        self.assertEqual(by_name(params, 'responseType')[0].value, '"None"')
        self.assertEqual(by_name(params, 'responseAllowed')[0].value, 'false')

    def test_break_through_follows_priority(self):
        """Only urgent flows break through."""
        self.assertEqual(by_name(build(priority='urgent'), 'breakThrough')[0].value, '"voceraAndDevice"')
        self.assertEqual(by_name(build(priority='high'), 'breakThrough')[0].value, '"none"')
        self.assertEqual(by_name(build(priority=None), 'breakThrough')[0].value, '"none"')

    def test_alert_sound_only_with_ringtone(self):
        """No ringtone, no alertSound."""
        self.assertEqual(by_name(build(ringtone='Tone 1'), 'alertSound')[0].value, '"Tone 1"')
        self.assertEqual(by_name(build(ringtone=''), 'alertSound'), [])

    def test_fixed_values(self):
        """Fixed parameters carry their literal values."""
        params = build()
        values = {p.name: p.value for p in params}
        self.assertEqual(values['accept'], '"Accepted"')
        self.assertEqual(values['acceptAndCall'], '"Call Back"')
        self.assertEqual(values['acceptBadgePhrases'], '["Accept"]')
        self.assertEqual(values['ttl'], '10')
        self.assertEqual(values['retractRules'], '["ttlHasElapsed"]')
        self.assertEqual(values['vibrate'], '"short"')
        self.assertEqual(values['eventIdentification'], '"NurseCalls:#{id}"')
        self.assertEqual(values['message'],
                         '"Patient: #{bed.patient.last_name}, #{bed.patient.first_name}\\n'
                         'Room/Bed: #{bed.room.name} - #{bed.bed_number}"')

    def test_destination_names(self):
        """One destinationName per destination: role name or 'Group'."""
        params = build(recipients=('VAssign: [Room] Nurse', 'VGroup: Charge RN'))
        names = [(p.value, p.destination_order) for p in by_name(params, 'destinationName')]
        self.assertEqual(names, [('"Nurse"', 0), ('"Group"', 1)])


class TestClinicalParameters(unittest.TestCase):
    """Clinicals branch."""

    def test_order(self):
        """Prefix (including the fail-safe), fixed header block, then the body."""
        params = build(flow_type=FlowType.CLINICALS, recipients=('VAssign: Nurse',))
        self.assertEqual([(p.name, p.destination_order) for p in params[:7]], [
            ('destinationName', 0),
            ('destinationName', 1),
            ('destinationName', 0),
            ('destinationName', 1),
            ('message', 1),
            ('shortMessage', 1),
            ('subject', 1),
        ])
        self.assertEqual([p.name for p in params[7:]], [
            'alertSound', 'responseAllowed', 'breakThrough', 'enunciate', 'message',
            'patientMRN', 'patientName', 'placeUid', 'popup', 'eventIdentification',
            'responseType', 'shortMessage', 'subject', 'ttl', 'retractRules', 'vibrate',
        ])

    def test_fixed_header_values(self):
        """Nurse Alert at 0, NoCaregivers overrides at 1."""
        params = build(flow_type=FlowType.CLINICALS, recipients=('VAssign: Nurse',))
        self.assertEqual(params[2].value, '"Nurse Alert"')
        self.assertEqual(params[3].value, '"NoCaregivers"')
        self.assertEqual(params[6].value, '"Alert Without Caregivers"')

    def test_always_breaks_through_without_responses(self):
        """breakThrough and responseType do not depend on priority or responses."""
        params = build(flow_type=FlowType.CLINICALS, priority='normal', responses='Accept')
        values = {p.name: p.value for p in params if p.destination_order is None}
        self.assertEqual(values['breakThrough'], '"voceraAndDevice"')
        self.assertEqual(values['responseType'], '"None"')
        self.assertEqual(values['responseAllowed'], 'false')
        self.assertNotIn('accept', values)

    def test_fallback_tone(self):
        """Missing ringtone uses the fallback tone."""
        params = build(flow_type=FlowType.CLINICALS, ringtone='')
        self.assertEqual(by_name(params, 'alertSound')[0].value, '"Vocera Tone 0 Long"')


if __name__ == "__main__":
    unittest.main(verbosity=2)
