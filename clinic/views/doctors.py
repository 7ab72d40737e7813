"""
Doctor endpoints: register a doctor, read one back and delete one.
"""
from __future__ import annotations

from drf_yasg.utils import swagger_auto_schema
from rest_framework import status
from rest_framework.decorators import api_view
from rest_framework.exceptions import NotFound
from rest_framework.response import Response

from clinic.serializers.doctor import DoctorSerializer
from clinic.services.doctors import create_doctor, delete_doctor, get_doctor


@swagger_auto_schema(method='post', request_body=DoctorSerializer, responses={201: DoctorSerializer})
@api_view(['POST'])
def add_doctor(request):
    serializer = DoctorSerializer(data=request.data)
    serializer.is_valid(raise_exception=True)
    doctor = create_doctor(**serializer.validated_data)
    return Response(DoctorSerializer(doctor).data, status=status.HTTP_201_CREATED)


@api_view(['GET', 'DELETE'])
def doctor_detail(request, pk: int):
    """GET returns the doctor; DELETE removes it and returns 204.

    Both answer 404 when no doctor has this id, including a second
    delete of the same id.
    """
    if request.method == 'DELETE':
        if not delete_doctor(pk):
            raise NotFound('doctor not found')
        return Response(status=status.HTTP_204_NO_CONTENT)
    doctor = get_doctor(pk)
    if doctor is None:
        raise NotFound('doctor not found')
    return Response(DoctorSerializer(doctor).data)
