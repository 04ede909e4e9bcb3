import pytest

from core.services.hierarchy import default_label, parent_entity_type
from core.services.suggestions import STANDARD_BUSINESS_HOURS, suggest_schedule
from core.services.working_hours import validate_hierarchical_working_hours, validate_working_hours


def test_standard_hours_without_parent():
    out = suggest_schedule()
    assert out['source'] == 'Standard Business Hours'
    assert out['canModify'] is True
    assert out['suggestedSchedule'] == STANDARD_BUSINESS_HOURS
    assert [d['dayOfWeek'] for d in out['suggestedSchedule']] == [
        'monday', 'tuesday', 'wednesday', 'thursday', 'friday', 'saturday', 'sunday',
    ]
    assert validate_working_hours(out['suggestedSchedule']).is_valid


def test_standard_hours_are_copied():
    out = suggest_schedule()
    out['suggestedSchedule'][0]['openingTime'] = '06:00'
    assert STANDARD_BUSINESS_HOURS[0]['openingTime'] == '09:00'


def test_parent_without_hours_keeps_parent_as_source():
    out = suggest_schedule([], 'Complex')
    assert out['source'] == 'Complex'
    assert out['suggestedSchedule'] == STANDARD_BUSINESS_HOURS


def test_parent_hours_are_suggested_with_wire_keys():
    parent = [
        {'day_of_week': 'monday', 'is_working_day': True, 'opening_time': '08:00', 'closing_time': '16:00',
         'break_start_time': '12:00', 'break_end_time': '12:30'},
        {'dayOfWeek': 'friday', 'isWorkingDay': False},
    ]
    out = suggest_schedule(parent, 'Complex')
    assert out['source'] == 'Complex'
    assert out['suggestedSchedule'] == [
        {'dayOfWeek': 'monday', 'isWorkingDay': True, 'openingTime': '08:00', 'closingTime': '16:00',
         'breakStartTime': '12:00', 'breakEndTime': '12:30'},
        {'dayOfWeek': 'friday', 'isWorkingDay': False},
    ]
    assert validate_hierarchical_working_hours(parent, out['suggestedSchedule']).is_valid


@pytest.mark.parametrize('entity_type,parent', [
    ('user', 'clinic'),
    ('clinic', 'complex'),
    ('Complex', 'organization'),
    ('organization', None),
])
def test_parent_entity_type(entity_type, parent):
    assert parent_entity_type(entity_type) == parent


@pytest.mark.parametrize('entity_type', ['hospital', 'department'])
def test_unknown_entity_type(entity_type):
    with pytest.raises(ValueError):
        parent_entity_type(entity_type)


def test_default_label():
    assert default_label('complex') == 'Complex'
    assert default_label(None) is None
