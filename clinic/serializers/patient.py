from rest_framework import serializers

from clinic.constants import (
    CITY_MAX_LENGTH,
    CITY_MAX_MESSAGE,
    PHONE_MAX_LENGTH,
    PHONE_MIN_LENGTH,
    PHONE_MIN_MESSAGE,
    NAME_MIN_MESSAGE,
    SYMPTOMS,
    SYMPTOM_MESSAGE,
)
from clinic.models import Patient
from clinic.serializers.doctor import clean_name


class PatientSerializer(serializers.ModelSerializer):
    name = serializers.CharField(max_length=255, error_messages={'blank': NAME_MIN_MESSAGE})
    # Any city is accepted; served cities are checked when suggesting.
    city = serializers.CharField(
        max_length=CITY_MAX_LENGTH,
        error_messages={'max_length': CITY_MAX_MESSAGE},
    )
    email = serializers.EmailField(max_length=254)
    phone = serializers.CharField(
        min_length=PHONE_MIN_LENGTH,
        max_length=PHONE_MAX_LENGTH,
        error_messages={'min_length': PHONE_MIN_MESSAGE, 'blank': PHONE_MIN_MESSAGE},
    )
    symptom = serializers.ChoiceField(
        choices=SYMPTOMS,
        error_messages={'invalid_choice': SYMPTOM_MESSAGE},
    )

    class Meta:
        model = Patient
        fields = ['id', 'name', 'city', 'email', 'phone', 'symptom']
        read_only_fields = ['id']

    def validate_name(self, v):
        return clean_name(v)
