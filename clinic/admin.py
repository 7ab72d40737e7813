"""
Django admin registrations for doctors and patients.

Lets a superuser inspect and correct rows through ``/admin/``.
"""

from django.contrib import admin

from .models import Doctor, Patient


@admin.register(Doctor)
class DoctorAdmin(admin.ModelAdmin):
    list_display = ('id', 'name', 'city', 'speciality', 'email', 'phone')
    list_filter = ('city', 'speciality')
    search_fields = ('name', 'email')


@admin.register(Patient)
class PatientAdmin(admin.ModelAdmin):
    list_display = ('id', 'name', 'city', 'symptom', 'email', 'phone')
    list_filter = ('city', 'symptom')
    search_fields = ('name', 'email')
