"""
Doctor suggestion endpoint.

The body is the suggestion result as-is: a JSON array of doctors when
some match, otherwise a JSON string describing why none could be
suggested.  An unknown patient answers 404; every other outcome is a
normal 200 response.
"""
from __future__ import annotations

from drf_yasg import openapi
from drf_yasg.utils import swagger_auto_schema
from rest_framework import status
from rest_framework.decorators import api_view
from rest_framework.response import Response

from clinic.serializers.doctor import DoctorSerializer
from clinic.services.suggestion import PATIENT_NOT_FOUND, suggest_doctor

_outcome_schema = openapi.Schema(type=openapi.TYPE_STRING, description='Reason no doctor was suggested')


@swagger_auto_schema(
    method='get',
    responses={
        200: openapi.Response('Matching doctors, or an outcome message', DoctorSerializer(many=True)),
        404: openapi.Response('Patient not found', _outcome_schema),
    },
)
@api_view(['GET'])
def suggest_doctor_view(request, patient_id: int):
    suggestion = suggest_doctor(patient_id)
    if suggestion.matched:
        return Response(DoctorSerializer(suggestion.doctors, many=True).data)
    if suggestion.outcome == PATIENT_NOT_FOUND:
        return Response(suggestion.message, status=status.HTTP_404_NOT_FOUND)
    return Response(suggestion.message)
