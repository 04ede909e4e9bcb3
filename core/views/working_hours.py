"""
Working-hours validation endpoints.

These endpoints are thin callers of :mod:`core.services.working_hours`.
A schedule that fails validation is answered with HTTP 400 carrying the
rendered error messages together with their structured form, so clients
can present them in their own language.  A passing schedule gets 200 and
the caller may go on to persist it.
"""
from __future__ import annotations

import logging

from drf_yasg.utils import swagger_auto_schema
from rest_framework import status
from rest_framework.decorators import api_view, authentication_classes, permission_classes
from rest_framework.permissions import AllowAny
from rest_framework.response import Response

from ..serializers.working_hours import (
    HierarchicalValidationSerializer,
    ScheduleValidationSerializer,
    SuggestionRequestSerializer,
)
from ..services.suggestions import suggest_schedule
from ..services.working_hours import (
    ValidationResult,
    validate_hierarchical_working_hours,
    validate_working_hours,
)

logger = logging.getLogger(__name__)


def _result_response(result: ValidationResult) -> Response:
    body = {
        'ok': result.is_valid,
        **result.as_dict(),
        'issues': [issue.as_dict() for issue in result.issues],
    }
    code = status.HTTP_200_OK if result.is_valid else status.HTTP_400_BAD_REQUEST
    return Response(body, status=code)


@swagger_auto_schema(method='post', request_body=ScheduleValidationSerializer)
@api_view(['POST'])
@authentication_classes([])
@permission_classes([AllowAny])
def validate_schedule(request):
    """Validate a single weekly schedule on its own."""
    s = ScheduleValidationSerializer(data=request.data)
    s.is_valid(raise_exception=True)
    result = validate_working_hours(s.validated_data['schedule'])
    if not result.is_valid:
        logger.info('schedule rejected with %d error(s)', len(result.issues))
    return _result_response(result)


@swagger_auto_schema(method='post', request_body=HierarchicalValidationSerializer)
@api_view(['POST'])
@authentication_classes([])
@permission_classes([AllowAny])
def validate_hierarchical(request):
    """Validate a child unit's schedule against its parent's schedule.

    Labels default from ``entityType`` / ``parentEntityType`` when given
    (``clinic`` -> ``Clinic``), else ``child`` / ``parent``.
    """
    s = HierarchicalValidationSerializer(data=request.data)
    s.is_valid(raise_exception=True)
    data = s.validated_data
    result = validate_hierarchical_working_hours(
        data['parentSchedule'],
        data['childSchedule'],
        parent_label=data['parentLabel'],
        child_label=data['childLabel'],
    )
    if not result.is_valid:
        logger.info(
            'hierarchical schedule rejected (%s within %s) with %d error(s)',
            data['childLabel'] or 'child', data['parentLabel'] or 'parent', len(result.issues),
        )
    return _result_response(result)


@swagger_auto_schema(method='post', request_body=SuggestionRequestSerializer)
@api_view(['POST'])
@authentication_classes([])
@permission_classes([AllowAny])
def suggest(request):
    """Suggest a starting schedule: the parent's hours or standard business hours."""
    s = SuggestionRequestSerializer(data=request.data)
    s.is_valid(raise_exception=True)
    data = s.validated_data
    return Response(suggest_schedule(data['parentSchedule'], data.get('parentLabel')))
