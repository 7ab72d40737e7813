from io import StringIO

import pytest
from django.core.management import call_command

from clinic.constants import CITIES, SPECIALITIES
from clinic.models import Doctor

pytestmark = pytest.mark.django_db


def test_seed_doctors_covers_every_city_and_speciality():
    out = StringIO()
    call_command("seed_doctors", stdout=out)
    pairs = set(Doctor.objects.values_list("city", "speciality"))
    assert pairs == {(c, s) for c in CITIES for s in SPECIALITIES}
    assert "12 created, 0 already present." in out.getvalue()


def test_seed_doctors_is_idempotent():
    call_command("seed_doctors", stdout=StringIO())
    out = StringIO()
    call_command("seed_doctors", stdout=out)
    assert Doctor.objects.count() == len(CITIES) * len(SPECIALITIES)
    assert "0 created, 12 already present." in out.getvalue()


def test_seed_doctors_for_one_city():
    call_command("seed_doctors", "--city", "Noida", stdout=StringIO())
    assert set(Doctor.objects.values_list("city", flat=True)) == {"Noida"}
    assert Doctor.objects.count() == len(SPECIALITIES)
