import logging
from typing import List, Optional

from clinic.models import Doctor

logger = logging.getLogger(__name__)


def create_doctor(*, name: str, city: str, email: str, phone: str, speciality: str) -> Doctor:
    """Validate and insert a doctor; the database assigns the id.

    Raises ``django.core.exceptions.ValidationError`` without writing
    anything when a field constraint is violated.
    """
    doctor = Doctor(name=name, city=city, email=email, phone=phone, speciality=speciality)
    doctor.full_clean()
    doctor.save()
    logger.info(f"Doctor created: id={doctor.id} city={doctor.city} speciality={doctor.speciality}")
    return doctor


def get_doctor(doctor_id: int) -> Optional[Doctor]:
    return Doctor.objects.filter(id=doctor_id).first()


def delete_doctor(doctor_id: int) -> bool:
    deleted, _ = Doctor.objects.filter(id=doctor_id).delete()
    if not deleted:
        logger.info(f"Doctor not found for delete: id={doctor_id}")
        return False
    logger.info(f"Doctor deleted: id={doctor_id}")
    return True


def find_by_city_and_speciality(city: str, speciality: str) -> List[Doctor]:
    # Ids are monotonic, so id order is insertion order.
    return list(Doctor.objects.filter(city=city, speciality=speciality).order_by('id'))
