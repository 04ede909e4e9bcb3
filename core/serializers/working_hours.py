import html

import bleach
from rest_framework import serializers

from core.services.hierarchy import ENTITY_TYPES, default_label, parent_entity_type


def _time_field():
    # format checks belong to the working-hours engine, not here
    return serializers.CharField(required=False, allow_blank=True, allow_null=True, trim_whitespace=False)


def _clean_label(v):
    # labels end up in plain-text messages, so undo bleach's entity escaping
    return html.unescape(bleach.clean((v or '').strip(), strip=True))


class WorkingHourSerializer(serializers.Serializer):
    dayOfWeek = serializers.CharField(max_length=32, trim_whitespace=False)
    isWorkingDay = serializers.BooleanField()
    openingTime = _time_field()
    closingTime = _time_field()
    breakStartTime = _time_field()
    breakEndTime = _time_field()


class ScheduleValidationSerializer(serializers.Serializer):
    schedule = WorkingHourSerializer(many=True, default=list)


class HierarchicalValidationSerializer(serializers.Serializer):
    parentSchedule = WorkingHourSerializer(many=True, default=list)
    childSchedule = WorkingHourSerializer(many=True, default=list)
    parentLabel = serializers.CharField(required=False, allow_blank=True, max_length=128)
    childLabel = serializers.CharField(required=False, allow_blank=True, max_length=128)
    entityType = serializers.ChoiceField(choices=ENTITY_TYPES, required=False)
    parentEntityType = serializers.ChoiceField(choices=ENTITY_TYPES, required=False)

    def validate_parentLabel(self, v):
        return _clean_label(v)

    def validate_childLabel(self, v):
        return _clean_label(v)

    def validate(self, attrs):
        entity_type = attrs.get('entityType')
        parent_type = attrs.get('parentEntityType')
        if entity_type:
            expected = parent_entity_type(entity_type)
            if parent_type and parent_type != expected:
                raise serializers.ValidationError(
                    f'{parent_type} hours do not constrain {entity_type} hours'
                )
            parent_type = parent_type or expected
        attrs['parentLabel'] = attrs.get('parentLabel') or default_label(parent_type)
        attrs['childLabel'] = attrs.get('childLabel') or default_label(entity_type)
        return attrs


class SuggestionRequestSerializer(serializers.Serializer):
    parentSchedule = WorkingHourSerializer(many=True, default=list)
    parentLabel = serializers.CharField(required=False, allow_blank=True, max_length=128)
    entityType = serializers.ChoiceField(choices=ENTITY_TYPES, required=False)

    def validate_parentLabel(self, v):
        return _clean_label(v)

    def validate(self, attrs):
        if not attrs.get('parentLabel') and attrs.get('entityType'):
            attrs['parentLabel'] = default_label(parent_entity_type(attrs['entityType']))
        return attrs
