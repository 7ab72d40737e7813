import logging

from django.core.exceptions import ValidationError as DjangoValidationError
from rest_framework import status
from rest_framework.exceptions import ValidationError
from rest_framework.response import Response
from rest_framework.views import exception_handler as drf_exception_handler

logger = logging.getLogger(__name__)


def api_exception_handler(exc, context):
    # Model-level validation raised by the store surfaces like serializer errors.
    if isinstance(exc, DjangoValidationError):
        exc = ValidationError(exc.message_dict if hasattr(exc, 'error_dict') else exc.messages)
    resp = drf_exception_handler(exc, context)
    if resp is None:
        request = context.get('request')
        logger.error(f"Unhandled error on {getattr(request, 'path', '?')}", exc_info=exc)
        return Response(
            {'ok': False, 'error': {'code': 'server_error', 'message': str(exc)}},
            status=status.HTTP_500_INTERNAL_SERVER_ERROR,
        )
    if isinstance(exc, ValidationError):
        fields = resp.data if isinstance(resp.data, dict) else {'non_field_errors': resp.data}
        logger.warning(f"Validation failed on fields: {', '.join(sorted(fields))}")
        return Response(
            {'ok': False, 'error': {'code': 'validation_error', 'message': 'Invalid input', 'fields': fields}},
            status=status.HTTP_400_BAD_REQUEST,
        )
    # normalize response
    if isinstance(resp.data, dict):
        detail = resp.data.get('detail') or resp.data
        if not isinstance(detail, dict):
            detail = str(detail)
    else:
        detail = str(resp.data)
    code = 'not_found' if resp.status_code == status.HTTP_404_NOT_FOUND else 'api_error'
    return Response({'ok': False, 'error': {'code': code, 'message': detail}}, status=resp.status_code)
