import html

import bleach
from rest_framework import serializers

from clinic.constants import (
    ALLOWED_CITIES,
    CITY_CHOICE_MESSAGE,
    CITY_MAX_LENGTH,
    CITY_MAX_MESSAGE,
    NAME_MIN_LENGTH,
    NAME_MIN_MESSAGE,
    PHONE_MAX_LENGTH,
    PHONE_MIN_LENGTH,
    PHONE_MIN_MESSAGE,
    SPECIALITIES,
    SPECIALITY_MESSAGE,
)
from clinic.models import Doctor


def clean_name(v):
    # Drop every tag, then undo the entity escaping bleach applies to text.
    v = html.unescape(bleach.clean((v or '').strip(), tags=set(), strip=True)).strip()
    if len(v) < NAME_MIN_LENGTH:
        raise serializers.ValidationError(NAME_MIN_MESSAGE)
    return v


class DoctorSerializer(serializers.ModelSerializer):
    name = serializers.CharField(max_length=255, error_messages={'blank': NAME_MIN_MESSAGE})
    city = serializers.CharField(
        max_length=CITY_MAX_LENGTH,
        error_messages={'max_length': CITY_MAX_MESSAGE, 'blank': CITY_CHOICE_MESSAGE},
    )
    email = serializers.EmailField(max_length=254)
    phone = serializers.CharField(
        min_length=PHONE_MIN_LENGTH,
        max_length=PHONE_MAX_LENGTH,
        error_messages={'min_length': PHONE_MIN_MESSAGE, 'blank': PHONE_MIN_MESSAGE},
    )
    speciality = serializers.ChoiceField(
        choices=SPECIALITIES,
        error_messages={'invalid_choice': SPECIALITY_MESSAGE},
    )

    class Meta:
        model = Doctor
        fields = ['id', 'name', 'city', 'email', 'phone', 'speciality']
        read_only_fields = ['id']

    def validate_name(self, v):
        return clean_name(v)

    def validate_city(self, v):
        if v not in ALLOWED_CITIES:
            raise serializers.ValidationError(CITY_CHOICE_MESSAGE)
        return v
