import logging
from typing import Optional

from clinic.models import Patient

logger = logging.getLogger(__name__)


def create_patient(*, name: str, city: str, email: str, phone: str, symptom: str) -> Patient:
    """Validate and insert a patient; the database assigns the id."""
    patient = Patient(name=name, city=city, email=email, phone=phone, symptom=symptom)
    patient.full_clean()
    patient.save()
    logger.info(f"Patient created: id={patient.id} city={patient.city} symptom={patient.symptom}")
    return patient


def get_patient(patient_id: int) -> Optional[Patient]:
    return Patient.objects.filter(id=patient_id).first()


def delete_patient(patient_id: int) -> bool:
    deleted, _ = Patient.objects.filter(id=patient_id).delete()
    if not deleted:
        logger.info(f"Patient not found for delete: id={patient_id}")
        return False
    logger.info(f"Patient deleted: id={patient_id}")
    return True
