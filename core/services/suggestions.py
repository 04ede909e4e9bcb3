"""
Suggested working hours for a unit that has none configured yet.

A child unit starts from its parent's hours so that the suggestion is
valid by construction.  Without a parent schedule the standard business
week is offered instead.
"""
from typing import Any, Dict, List, Optional, Sequence

from .working_hours import FIELD_ALIASES, WorkingHoursEntry, Weekday, entry_value

STANDARD_HOURS_SOURCE = 'Standard Business Hours'

STANDARD_BUSINESS_HOURS: List[Dict[str, Any]] = [
    {'dayOfWeek': day.value, 'isWorkingDay': True, 'openingTime': '09:00', 'closingTime': '17:00'}
    for day in (Weekday.MONDAY, Weekday.TUESDAY, Weekday.WEDNESDAY, Weekday.THURSDAY, Weekday.FRIDAY)
] + [
    {'dayOfWeek': Weekday.SATURDAY.value, 'isWorkingDay': False},
    {'dayOfWeek': Weekday.SUNDAY.value, 'isWorkingDay': False},
]


def _as_wire(entry: WorkingHoursEntry) -> Dict[str, Any]:
    """Copy an entry using wire keys only, dropping unset time fields."""
    out: Dict[str, Any] = {}
    for key in FIELD_ALIASES:
        value = entry_value(entry, key)
        if value is None:
            continue
        out[key] = value
    out['isWorkingDay'] = bool(out.get('isWorkingDay'))
    return out


def suggest_schedule(
    parent_schedule: Optional[Sequence[WorkingHoursEntry]] = None,
    parent_label: Optional[str] = None,
) -> Dict[str, Any]:
    if parent_schedule:
        suggested = [_as_wire(entry) for entry in parent_schedule]
        source = parent_label or 'parent'
    else:
        suggested = [dict(entry) for entry in STANDARD_BUSINESS_HOURS]
        source = parent_label or STANDARD_HOURS_SOURCE
    return {
        'suggestedSchedule': suggested,
        'source': source,
        'canModify': True,
    }
