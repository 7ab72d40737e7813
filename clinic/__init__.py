"""Clinic application for the doctor suggestion service.

This package contains the Doctor and Patient models, their serializers,
the store and suggestion services, and the API views and routes.
"""
