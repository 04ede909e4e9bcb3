"""
URL mappings for the clinic backend API.

Trailing slashes are deliberately omitted; clients call the paths
exactly as listed here.
"""
from django.urls import path

from .views import health
from .views.working_hours import suggest, validate_hierarchical, validate_schedule

urlpatterns = [
    path('healthz', health.healthz, name='healthz'),
    path('api/working-hours/validate', validate_schedule, name='working_hours_validate'),
    path('api/working-hours/validate-hierarchical', validate_hierarchical, name='working_hours_validate_hierarchical'),
    path('api/working-hours/suggest', suggest, name='working_hours_suggest'),
]
