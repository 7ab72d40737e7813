"""
Plain-function entry points to the request validation.

Each returns a mapping of field name to the list of messages that field
failed with.  An empty mapping means the payload is acceptable.
"""
from __future__ import annotations

from typing import Any, Dict, List, Mapping

from clinic.serializers.doctor import DoctorSerializer
from clinic.serializers.patient import PatientSerializer


def _violations(serializer) -> Dict[str, List[str]]:
    if serializer.is_valid():
        return {}
    return {field: [str(e) for e in errors] for field, errors in serializer.errors.items()}


def doctor_violations(payload: Mapping[str, Any]) -> Dict[str, List[str]]:
    return _violations(DoctorSerializer(data=payload))


def patient_violations(payload: Mapping[str, Any]) -> Dict[str, List[str]]:
    return _violations(PatientSerializer(data=payload))
