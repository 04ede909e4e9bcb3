"""Core application for the clinic backend.

Working-hours validation for the organization -> complex -> clinic
hierarchy, with the serializers and views exposing it over the API.
"""
