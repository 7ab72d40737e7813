"""
URL mappings for the clinic API, mounted under ``/api/``.

Trailing slashes are deliberately omitted.
"""
from django.urls import path

from .views import doctors, patients, suggestion

urlpatterns = [
    # Doctors
    path('doctors', doctors.add_doctor, name='add_doctor'),
    path('doctors/<int:pk>', doctors.doctor_detail, name='doctor_detail'),
    # Patients
    path('patients', patients.add_patient, name='add_patient'),
    path('patients/<int:pk>', patients.patient_detail, name='patient_detail'),
    # Suggestion
    path('suggest-doctor/<int:patient_id>', suggestion.suggest_doctor_view, name='suggest_doctor'),
]
