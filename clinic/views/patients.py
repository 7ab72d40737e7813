from __future__ import annotations

from drf_yasg.utils import swagger_auto_schema
from rest_framework import status
from rest_framework.decorators import api_view
from rest_framework.exceptions import NotFound
from rest_framework.response import Response

from clinic.serializers.patient import PatientSerializer
from clinic.services.patients import create_patient, delete_patient, get_patient


@swagger_auto_schema(method='post', request_body=PatientSerializer, responses={201: PatientSerializer})
@api_view(['POST'])
def add_patient(request):
    serializer = PatientSerializer(data=request.data)
    serializer.is_valid(raise_exception=True)
    patient = create_patient(**serializer.validated_data)
    return Response(PatientSerializer(patient).data, status=status.HTTP_201_CREATED)


@api_view(['GET', 'DELETE'])
def patient_detail(request, pk: int):
    if request.method == 'DELETE':
        if not delete_patient(pk):
            raise NotFound('patient not found')
        return Response(status=status.HTTP_204_NO_CONTENT)
    patient = get_patient(pk)
    if patient is None:
        raise NotFound('patient not found')
    return Response(PatientSerializer(patient).data)
