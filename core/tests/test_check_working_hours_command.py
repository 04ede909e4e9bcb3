import json
from io import StringIO

import pytest
from django.core.management import call_command
from django.core.management.base import CommandError


def write(tmp_path, payload):
    path = tmp_path / 'hours.json'
    path.write_text(json.dumps(payload), encoding='utf-8')
    return str(path)


def test_valid_hierarchy(tmp_path):
    path = write(tmp_path, {
        'parentSchedule': [{'dayOfWeek': 'monday', 'isWorkingDay': True, 'openingTime': '08:00', 'closingTime': '18:00'}],
        'childSchedule': [{'dayOfWeek': 'monday', 'isWorkingDay': True, 'openingTime': '09:00', 'closingTime': '17:00'}],
    })
    out = StringIO()
    call_command('check_working_hours', path, stdout=out)
    assert 'Working hours are valid.' in out.getvalue()


def test_invalid_hierarchy_prints_errors(tmp_path):
    path = write(tmp_path, {
        'parentLabel': 'Complex',
        'childLabel': 'Clinic',
        'parentSchedule': [{'dayOfWeek': 'friday', 'isWorkingDay': False}],
        'childSchedule': [{'dayOfWeek': 'friday', 'isWorkingDay': True, 'openingTime': '09:00', 'closingTime': '17:00'}],
    })
    out = StringIO()
    with pytest.raises(CommandError, match='1 working-hours error'):
        call_command('check_working_hours', path, stdout=out)
    assert 'Clinic cannot be open on friday when Complex is closed' in out.getvalue()


def test_single_schedule(tmp_path):
    path = write(tmp_path, {'schedule': [{'dayOfWeek': 'caturday', 'isWorkingDay': False}]})
    out = StringIO()
    with pytest.raises(CommandError):
        call_command('check_working_hours', path, stdout=out)
    assert 'Invalid day: caturday' in out.getvalue()


def test_bad_file(tmp_path):
    with pytest.raises(CommandError, match='cannot read'):
        call_command('check_working_hours', str(tmp_path / 'missing.json'))
    with pytest.raises(CommandError, match='must be a list of objects'):
        call_command('check_working_hours', write(tmp_path, {'schedule': ['monday']}))


def test_non_string_day_name(tmp_path):
    path = write(tmp_path, {'schedule': [{'dayOfWeek': ['monday'], 'isWorkingDay': True}]})
    out = StringIO()
    with pytest.raises(CommandError, match='1 working-hours error'):
        call_command('check_working_hours', path, stdout=out)
    assert "Invalid day: ['monday']" in out.getvalue()
