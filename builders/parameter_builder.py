"""
Parameter Builder - Ordered parameter attributes per delivery flow

PURPOSE: Produce the parameterAttributes list of a delivery flow: how the
         badge presents the alert (sound, popup, text), what responses it
         offers and per-destination overrides

R EQUIVALENT: Like building a named list in a fixed order with c(), where
some elements are appended only under if() conditions

AVIATION ANALOGY: Like the ATIS broadcast - the same items read in the
same order every time, because listeners expect each item where it
always is

VALUE FORMAT:
    Every value is a serialized literal held as a string:
        text    -> '"Accepted"'        (JSON-quoted)
        boolean -> 'true' / 'false'
        number  -> '10'
        list    -> '["ttlHasElapsed"]'
    Placeholder tokens like #{bed.room.name} are not interpreted here.

AUTHOR: Glen Lewis
DATE: 2025
"""

import json
from typing import Any, Dict, List, Optional

import sys
import os
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from builders.destination_builder import Destination
from managers.flow_bundler import FlowBundle
from parsers.records import FlowType

URGENT = 'urgent'

CLINICAL_FALLBACK_TONE = 'Vocera Tone 0 Long'

# =============================================================================
# MESSAGE TEMPLATES
# =============================================================================
# Placeholders are resolved by the alerting platform, not by this toolkit.
# =============================================================================

ALERT_SUMMARY = "#{alert_type} #{bed.room.name}"

NURSE_MESSAGE = ("Patient: #{bed.patient.last_name}, #{bed.patient.first_name}\n"
                 "Room/Bed: #{bed.room.name} - #{bed.bed_number}")
NURSE_PATIENT_MRN = "#{bed.patient.mrn}:#{bed.patient.visit_number}"
NURSE_PATIENT_NAME = "#{bed.patient.first_name} #{bed.patient.middle_name} #{bed.patient.last_name}"
NURSE_EVENT_ID = "NurseCalls:#{id}"

CLINICAL_MESSAGE = ("Clinical Alert ${destinationName}\n"
                    "Room: #{bed.room.name} - #{bed.bed_number}\n"
                    "Alert Type: #{alert_type}\n"
                    "Alarm Time: #{alarm_time.as_time}")
CLINICAL_PATIENT_MRN = "#{clinical_patient.mrn}:#{clinical_patient.visit_number}"
CLINICAL_PATIENT_NAME = ("#{clinical_patient.first_name} #{clinical_patient.middle_name} "
                         "#{clinical_patient.last_name}")
CLINICAL_EVENT_ID = "#{id}"

NO_CAREGIVER_MESSAGE = ("#{alert_type}\n"
                        "Issue: A Clinical Alert has been received without any caregivers "
                        "assigned to room.\n"
                        "Room/Bed: #{bed.room.name} - #{bed.bed_number} \n"
                        "Alarm Time: #{alarm_time.as_time}")
NO_CAREGIVER_SHORT = "No Caregivers Assigned for #{alert_type} in #{bed.room.name} #{bed.bed_number}"
NO_CAREGIVER_SUBJECT = "Alert Without Caregivers"

PLACE_UID = "#{bed.uid}"


def literal(value: Any) -> str:
    """
    Serialize a Python value as the literal string the platform expects.

    EXAMPLE:
        literal("Accepted")          # '"Accepted"'
        literal(True)                # 'true'
        literal(10)                  # '10'
        literal(["ttlHasElapsed"])   # '["ttlHasElapsed"]'
    """
    return json.dumps(value, ensure_ascii=False)


class ParameterAttribute:
    """
    One entry of parameterAttributes.

    ATTRIBUTES:
        name: Parameter name
        value: Serialized literal (see literal())
        destination_order: Ties the parameter to one destination order, or None
    """

    def __init__(self, name: str, value: str, destination_order: Optional[int] = None):
        self.name = name
        self.value = value
        self.destination_order = destination_order

    def to_dict(self) -> Dict[str, Any]:
        result = {'name': self.name, 'value': self.value}
        if self.destination_order is not None:
            result['destinationOrder'] = self.destination_order
        return result

    def __eq__(self, other):
        if not isinstance(other, ParameterAttribute):
            return NotImplemented
        return self.to_dict() == other.to_dict()

    def __repr__(self) -> str:
        if self.destination_order is None:
            return f"ParameterAttribute({self.name!r}, {self.value!r})"
        return f"ParameterAttribute({self.name!r}, {self.value!r}, order={self.destination_order})"


class ParameterBuilder:
    """
    PURPOSE: Build the parameter list of one delivery flow

    Order matters: some platform deployments read parameters by position,
    so the sequence below is reproduced exactly for every flow.

    EXAMPLE:
        params = ParameterBuilder().build(bundle, destinations)
        [p.name for p in params][:3]
        # ['destinationName', 'accept', 'acceptAndCall']
    """

    def build(self, bundle: FlowBundle, destinations: List[Destination]) -> List[ParameterAttribute]:
        """
        Build parameters for a bundle.

        PARAMETERS:
            bundle: The delivery rule (sample supplies ringtone, priority, responses)
            destinations: Output of DestinationBuilder for the same bundle
        """
        params = [
            ParameterAttribute('destinationName', literal(d.destination_name), d.order)
            for d in destinations
        ]

        if bundle.flow_type == FlowType.CLINICALS:
            params.extend(self._clinical_params(bundle))
        else:
            params.extend(self._nurse_call_params(bundle))
        return params

    # =========================================================================
    # NURSE CALLS
    # =========================================================================

    def _nurse_call_params(self, bundle: FlowBundle) -> List[ParameterAttribute]:
        sample = bundle.sample
        responses = sample.response_options.lower()
        params = []

        if 'no response' in responses:
            params.append(ParameterAttribute('responseType', literal('None')))
            params.append(ParameterAttribute('responseAllowed', literal(False)))
        else:
            params.append(ParameterAttribute('accept', literal('Accepted')))
            params.append(ParameterAttribute('acceptAndCall', literal('Call Back')))
            params.append(ParameterAttribute('acceptBadgePhrases', literal(['Accept'])))
            params.append(ParameterAttribute('respondingLine', literal('responses.line.number')))
            params.append(ParameterAttribute('respondingUser', literal('responses.usr.login')))
            params.append(ParameterAttribute('responsePath', literal('responses.action')))
            params.append(ParameterAttribute('responseType', literal('Accept/Decline')))
            if 'escalate' in responses:
                params.append(ParameterAttribute('decline', literal('Decline Primary'), 0))
                params.append(ParameterAttribute('declineBadgePhrases', literal(['Escalate']), 0))

        break_through = 'voceraAndDevice' if sample.priority == URGENT else 'none'
        params.append(ParameterAttribute('breakThrough', literal(break_through)))
        if sample.ringtone:
            params.append(ParameterAttribute('alertSound', literal(sample.ringtone)))

        params.extend([
            ParameterAttribute('popup', literal(True)),
            ParameterAttribute('enunciate', literal(True)),
            ParameterAttribute('ttl', literal(10)),
            ParameterAttribute('retractRules', literal(['ttlHasElapsed'])),
            ParameterAttribute('vibrate', literal('short')),
            ParameterAttribute('message', literal(NURSE_MESSAGE)),
            ParameterAttribute('patientMRN', literal(NURSE_PATIENT_MRN)),
            ParameterAttribute('placeUid', literal(PLACE_UID)),
            ParameterAttribute('patientName', literal(NURSE_PATIENT_NAME)),
            ParameterAttribute('eventIdentification', literal(NURSE_EVENT_ID)),
            ParameterAttribute('shortMessage', literal(ALERT_SUMMARY)),
            ParameterAttribute('subject', literal(ALERT_SUMMARY)),
        ])
        return params

    # =========================================================================
    # CLINICALS
    # =========================================================================

    def _clinical_params(self, bundle: FlowBundle) -> List[ParameterAttribute]:
        sample = bundle.sample
        # Clinicals never offer accept/decline and always break through
        return [
            ParameterAttribute('destinationName', literal('Nurse Alert'), 0),
            ParameterAttribute('destinationName', literal('NoCaregivers'), 1),
            ParameterAttribute('message', literal(NO_CAREGIVER_MESSAGE), 1),
            ParameterAttribute('shortMessage', literal(NO_CAREGIVER_SHORT), 1),
            ParameterAttribute('subject', literal(NO_CAREGIVER_SUBJECT), 1),
            ParameterAttribute('alertSound', literal(sample.ringtone or CLINICAL_FALLBACK_TONE)),
            ParameterAttribute('responseAllowed', literal(False)),
            ParameterAttribute('breakThrough', literal('voceraAndDevice')),
            ParameterAttribute('enunciate', literal(True)),
            ParameterAttribute('message', literal(CLINICAL_MESSAGE)),
            ParameterAttribute('patientMRN', literal(CLINICAL_PATIENT_MRN)),
            ParameterAttribute('patientName', literal(CLINICAL_PATIENT_NAME)),
            ParameterAttribute('placeUid', literal(PLACE_UID)),
            ParameterAttribute('popup', literal(True)),
            ParameterAttribute('eventIdentification', literal(CLINICAL_EVENT_ID)),
            ParameterAttribute('responseType', literal('None')),
            ParameterAttribute('shortMessage', literal(ALERT_SUMMARY)),
            ParameterAttribute('subject', literal(ALERT_SUMMARY)),
            ParameterAttribute('ttl', literal(10)),
            ParameterAttribute('retractRules', literal(['ttlHasElapsed'])),
            ParameterAttribute('vibrate', literal('short')),
        ]
