"""
Database models for the doctor suggestion service.

Doctors and patients are stored in two independent tables.  There is
no foreign key between them: the suggestion engine pairs a patient with
doctors at query time by city and speciality.  Field validators mirror
the request validation so that ``full_clean()`` refuses the same rows
the API refuses.
"""
from __future__ import annotations

from django.core.validators import MinLengthValidator
from django.db import models

from .constants import (
    CITY_CHOICES,
    CITY_MAX_LENGTH,
    NAME_MIN_LENGTH,
    NAME_MIN_MESSAGE,
    PHONE_MAX_LENGTH,
    PHONE_MIN_LENGTH,
    PHONE_MIN_MESSAGE,
    SPECIALITY_CHOICES,
    SYMPTOM_CHOICES,
)


class Doctor(models.Model):
    """A doctor practising one speciality in one of the served cities."""
    name = models.CharField(
        max_length=255,
        validators=[MinLengthValidator(NAME_MIN_LENGTH, message=NAME_MIN_MESSAGE)],
    )
    # Indexed together with speciality for the suggestion lookup.
    city = models.CharField(
        max_length=CITY_MAX_LENGTH,
        choices=CITY_CHOICES,
    )
    email = models.EmailField()
    phone = models.CharField(
        max_length=PHONE_MAX_LENGTH,
        validators=[MinLengthValidator(PHONE_MIN_LENGTH, message=PHONE_MIN_MESSAGE)],
    )
    speciality = models.CharField(max_length=32, choices=SPECIALITY_CHOICES)

    class Meta:
        ordering = ['id']
        indexes = [
            models.Index(fields=['city', 'speciality'], name='doctor_city_speciality_idx'),
        ]

    def __str__(self) -> str:
        return f"{self.name} ({self.speciality}, {self.city})"


class Patient(models.Model):
    """A patient reporting a single symptom.

    ``city`` is free text here; whether the city is served is decided
    when a suggestion is requested.
    """
    name = models.CharField(
        max_length=255,
        validators=[MinLengthValidator(NAME_MIN_LENGTH, message=NAME_MIN_MESSAGE)],
    )
    city = models.CharField(
        max_length=CITY_MAX_LENGTH,
    )
    email = models.EmailField()
    phone = models.CharField(
        max_length=PHONE_MAX_LENGTH,
        validators=[MinLengthValidator(PHONE_MIN_LENGTH, message=PHONE_MIN_MESSAGE)],
    )
    symptom = models.CharField(max_length=32, choices=SYMPTOM_CHOICES)

    class Meta:
        ordering = ['id']

    def __str__(self) -> str:
        return f"{self.name} ({self.symptom})"
