"""
URL configuration for the doctor suggestion service.

Routes the Django admin, the API provided by the clinic app, a health
probe, Prometheus metrics and the OpenAPI documentation
(``/api-docs``, ``/swagger/`` and ``/redoc/``).
"""
from django.contrib import admin
from django.urls import path, include

from rest_framework import permissions
from drf_yasg.views import get_schema_view
from drf_yasg import openapi

from clinic.views import health

api_info = openapi.Info(
    title="Doctor Suggestion API",
    default_version='1.0.0',
    description="APIs to manage doctors, patients and suggest doctors based on symptoms.",
)

schema_view = get_schema_view(
    api_info,
    public=True,
    permission_classes=(permissions.AllowAny,),
)

urlpatterns = [
    path('admin/', admin.site.urls),
    path('', include('django_prometheus.urls')),
    path('healthz', health.healthz),
    path('api/', include('clinic.routers')),
    # OpenAPI
    path('api-docs', schema_view.without_ui(cache_timeout=0), {'format': 'json'}, name='schema-json'),
    path('swagger/', schema_view.with_ui('swagger', cache_timeout=0), name='schema-swagger-ui'),
    path('redoc/', schema_view.with_ui('redoc', cache_timeout=0), name='schema-redoc'),
]
