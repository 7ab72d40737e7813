"""
Doctor suggestion for a stored patient.

A patient's symptom is resolved to a speciality through a fixed table,
then doctors practising that speciality in the patient's city are
returned.  The checks run in a fixed order and the first one that fails
decides the outcome:

1. the patient must exist,
2. the patient's city must be served,
3. the symptom must map to a speciality,
4. at least one doctor must match.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Callable, List, Optional

from clinic.constants import ALLOWED_CITIES, SYMPTOM_SPECIALITY
from clinic.models import Doctor, Patient
from clinic.services.doctors import find_by_city_and_speciality
from clinic.services.patients import get_patient

logger = logging.getLogger(__name__)

MATCHED = 'matched'
PATIENT_NOT_FOUND = 'patient_not_found'
LOCATION_NOT_SUPPORTED = 'location_not_supported'
SYMPTOM_UNRECOGNIZED = 'symptom_unrecognized'
NO_MATCHING_DOCTOR = 'no_matching_doctor'

MESSAGES = {
    PATIENT_NOT_FOUND: 'Patient not found',
    LOCATION_NOT_SUPPORTED: 'We are still waiting to expand to your location',
    SYMPTOM_UNRECOGNIZED: 'Symptom does not match any speciality',
    NO_MATCHING_DOCTOR: "There isn't any doctor present at your location for your symptom",
}

DoctorLookup = Callable[[str, str], List[Doctor]]


@dataclass(frozen=True)
class Suggestion:
    outcome: str
    doctors: List[Doctor] = field(default_factory=list)

    @property
    def matched(self) -> bool:
        return self.outcome == MATCHED

    @property
    def message(self) -> Optional[str]:
        return MESSAGES.get(self.outcome)


def resolve_speciality(symptom: str) -> Optional[str]:
    return SYMPTOM_SPECIALITY.get(symptom)


def suggest_for_patient(patient: Patient, lookup: DoctorLookup = find_by_city_and_speciality) -> Suggestion:
    """Run checks 2-4 for an already loaded patient."""
    if patient.city not in ALLOWED_CITIES:
        return Suggestion(LOCATION_NOT_SUPPORTED)
    speciality = resolve_speciality(patient.symptom)
    if speciality is None:
        return Suggestion(SYMPTOM_UNRECOGNIZED)
    doctors = lookup(patient.city, speciality)
    if not doctors:
        return Suggestion(NO_MATCHING_DOCTOR)
    return Suggestion(MATCHED, doctors)


def suggest_doctor(patient_id: int) -> Suggestion:
    patient = get_patient(patient_id)
    if patient is None:
        suggestion = Suggestion(PATIENT_NOT_FOUND)
    else:
        suggestion = suggest_for_patient(patient)
    logger.info(
        f"Suggestion for patient {patient_id}: {suggestion.outcome} ({len(suggestion.doctors)} doctors)"
    )
    return suggestion
