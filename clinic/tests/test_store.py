import pytest
from django.core.exceptions import ValidationError

from clinic.models import Doctor, Patient
from clinic.services.doctors import create_doctor, delete_doctor, find_by_city_and_speciality, get_doctor
from clinic.services.patients import create_patient, delete_patient, get_patient

pytestmark = pytest.mark.django_db


def doctor_fields(**overrides):
    data = dict(name="Dr. Meera Nair", city="Noida", email="meera@example.com", phone="9810000041", speciality="Dermatology")
    data.update(overrides)
    return data


def test_create_doctor_assigns_id_and_round_trips():
    doctor = create_doctor(**doctor_fields())
    assert doctor.id is not None
    stored = get_doctor(doctor.id)
    assert stored == doctor
    for key, value in doctor_fields().items():
        assert getattr(stored, key) == value


def test_create_doctor_refuses_invalid_rows():
    with pytest.raises(ValidationError) as exc:
        create_doctor(**doctor_fields(city="Gurgaon", phone="123"))
    assert set(exc.value.message_dict) == {"city", "phone"}
    assert Doctor.objects.count() == 0


def test_ids_are_not_reused_after_delete():
    first = create_doctor(**doctor_fields())
    assert delete_doctor(first.id) is True
    second = create_doctor(**doctor_fields(email="other@example.com"))
    assert second.id > first.id


def test_delete_missing_doctor_returns_false():
    assert delete_doctor(424242) is False
    assert get_doctor(424242) is None


def test_find_by_city_and_speciality_in_insertion_order():
    a = create_doctor(**doctor_fields(email="a@example.com"))
    create_doctor(**doctor_fields(email="b@example.com", city="Delhi"))
    create_doctor(**doctor_fields(email="c@example.com", speciality="ENT"))
    d = create_doctor(**doctor_fields(email="d@example.com"))
    assert find_by_city_and_speciality("Noida", "Dermatology") == [a, d]
    assert find_by_city_and_speciality("Faridabad", "Dermatology") == []


def test_patient_store_accepts_any_city():
    patient = create_patient(name="Ishaan", city="Chennai", email="ishaan@example.com", phone="9899000005", symptom="skin burn")
    assert get_patient(patient.id).city == "Chennai"
    assert delete_patient(patient.id) is True
    assert delete_patient(patient.id) is False
    assert Patient.objects.count() == 0


def test_patient_store_refuses_unknown_symptom():
    with pytest.raises(ValidationError) as exc:
        create_patient(name="Ishaan", city="Delhi", email="ishaan@example.com", phone="9899000005", symptom="Migraine")
    assert "symptom" in exc.value.message_dict
    assert Patient.objects.count() == 0
