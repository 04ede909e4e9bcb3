"""
Weekly working-hours validation.

Two layers live here:

* structural checks for a single weekly schedule (day names, duplicates,
  required fields and ``HH:MM`` formats), and
* hierarchical containment checks between a parent unit's schedule
  (e.g. a medical complex) and a child unit's schedule (e.g. a clinic).

Schedules are plain lists of dicts exactly as they arrive in request
payloads or come out of stored hours.  Both the camelCase wire keys
(``dayOfWeek``, ``isWorkingDay``, ``openingTime`` ...) and their
snake_case spellings are accepted.  Nothing in this module raises for an
invalid schedule: every failure is collected as a :class:`ScheduleIssue`
inside the returned :class:`ValidationResult`.
"""
from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Mapping, Optional, Sequence

logger = logging.getLogger(__name__)

TIME_PATTERN = re.compile(r'^([01][0-9]|2[0-3]):[0-5][0-9]$')

DEFAULT_PARENT_LABEL = 'parent'
DEFAULT_CHILD_LABEL = 'child'

WorkingHoursEntry = Mapping[str, Any]


class Weekday(str, Enum):
    MONDAY = 'monday'
    TUESDAY = 'tuesday'
    WEDNESDAY = 'wednesday'
    THURSDAY = 'thursday'
    FRIDAY = 'friday'
    SATURDAY = 'saturday'
    SUNDAY = 'sunday'

    @classmethod
    def parse(cls, value: Any) -> Optional['Weekday']:
        """Return the weekday for ``value`` (case-insensitive) or None."""
        if not isinstance(value, str):
            return None
        try:
            return cls(value.lower())
        except ValueError:
            return None


# Wire key -> python key.  Lookups try the wire key first.
FIELD_ALIASES = {
    'dayOfWeek': 'day_of_week',
    'isWorkingDay': 'is_working_day',
    'openingTime': 'opening_time',
    'closingTime': 'closing_time',
    'breakStartTime': 'break_start_time',
    'breakEndTime': 'break_end_time',
}

# Time fields in the order they are format-checked, with their display names.
TIME_FIELDS = (
    ('openingTime', 'opening time'),
    ('closingTime', 'closing time'),
    ('breakStartTime', 'break start time'),
    ('breakEndTime', 'break end time'),
)


def entry_value(entry: WorkingHoursEntry, key: str) -> Any:
    value = entry.get(key)
    if value is None and key in FIELD_ALIASES:
        value = entry.get(FIELD_ALIASES[key])
    return value


def _present(value: Any) -> bool:
    return value is not None and value != ''


def _is_open(entry: WorkingHoursEntry) -> bool:
    return bool(entry_value(entry, 'isWorkingDay'))


# -----------------------------------------------------------------------------
# Time arithmetic
# -----------------------------------------------------------------------------

def is_valid_time(value: Any) -> bool:
    """True if ``value`` is a strict 24h ``HH:MM`` string."""
    return isinstance(value, str) and TIME_PATTERN.fullmatch(value) is not None


def parse_time(value: str) -> int:
    """Convert a validated ``HH:MM`` string to minutes since midnight."""
    hours, minutes = value.split(':')
    return int(hours) * 60 + int(minutes)


def format_time(minutes: int) -> str:
    hours, mins = divmod(minutes, 60)
    return f'{hours:02d}:{mins:02d}'


def is_within_range(check: str, start: str, end: str) -> bool:
    """Inclusive containment of ``check`` in ``[start, end]``."""
    return parse_time(start) <= parse_time(check) <= parse_time(end)


# -----------------------------------------------------------------------------
# Issues & results
# -----------------------------------------------------------------------------

class IssueKind(str, Enum):
    DUPLICATE_DAYS = 'duplicate_days'
    INVALID_DAY = 'invalid_day'
    TIMES_REQUIRED = 'times_required'
    INVALID_TIME_FORMAT = 'invalid_time_format'
    OPEN_WHEN_PARENT_CLOSED = 'open_when_parent_closed'
    OPENS_BEFORE_PARENT = 'opens_before_parent'
    CLOSES_AFTER_PARENT = 'closes_after_parent'
    BREAK_OUTSIDE_HOURS = 'break_outside_hours'


MESSAGES: Dict[IssueKind, str] = {
    IssueKind.DUPLICATE_DAYS: 'Duplicate days found: {days}',
    IssueKind.INVALID_DAY: 'Invalid day: {value}',
    IssueKind.TIMES_REQUIRED: 'Opening and closing times required for working day: {day}',
    IssueKind.INVALID_TIME_FORMAT: 'Invalid {field} format for {day}: {value}',
    IssueKind.OPEN_WHEN_PARENT_CLOSED: '{child} cannot be open on {day} when {parent} is closed',
    IssueKind.OPENS_BEFORE_PARENT: (
        '{child} opening time ({child_time}) on {day} must be at or after '
        '{parent} opening time ({parent_time})'
    ),
    IssueKind.CLOSES_AFTER_PARENT: (
        '{child} closing time ({child_time}) on {day} must be at or before '
        '{parent} closing time ({parent_time})'
    ),
    IssueKind.BREAK_OUTSIDE_HOURS: '{child} break time on {day} must be within working hours',
}


@dataclass(frozen=True)
class ScheduleIssue:
    """A single validation failure.

    ``scope`` is set when a structural issue is reported as part of a
    hierarchical check; it names the side (parent or child label) the
    issue belongs to and is rendered as a ``"<scope>: "`` prefix.
    """
    kind: IssueKind
    day: Optional[str] = None
    values: Dict[str, Any] = field(default_factory=dict)
    scope: Optional[str] = None

    def scoped(self, scope: str) -> 'ScheduleIssue':
        return ScheduleIssue(self.kind, self.day, dict(self.values), scope)

    def render(self, templates: Optional[Mapping[IssueKind, str]] = None) -> str:
        template = (templates or MESSAGES)[self.kind]
        params = {'day': self.day, **self.values}
        if 'days' in params:
            params['days'] = ', '.join(params['days'])
        text = template.format(**params)
        if self.scope is not None:
            return f'{self.scope}: {text}'
        return text

    def as_dict(self) -> Dict[str, Any]:
        return {
            'kind': self.kind.value,
            'day': self.day,
            'scope': self.scope,
            'values': dict(self.values),
            'message': self.render(),
        }


@dataclass
class ValidationResult:
    issues: List[ScheduleIssue] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        return not self.issues

    @property
    def errors(self) -> List[str]:
        return [issue.render() for issue in self.issues]

    def as_dict(self) -> Dict[str, Any]:
        return {'isValid': self.is_valid, 'errors': self.errors}


# -----------------------------------------------------------------------------
# Structural validation
# -----------------------------------------------------------------------------

def validate_day(entry: WorkingHoursEntry) -> List[ScheduleIssue]:
    """Validate one day entry on its own.

    The day name is reported as supplied.  A closed day is never checked
    for times.  Closing after opening is not enforced.
    """
    raw_day = entry_value(entry, 'dayOfWeek')
    if Weekday.parse(raw_day) is None:
        return [ScheduleIssue(IssueKind.INVALID_DAY, values={'value': raw_day})]

    if not _is_open(entry):
        return []

    opening = entry_value(entry, 'openingTime')
    closing = entry_value(entry, 'closingTime')
    if not _present(opening) or not _present(closing):
        return [ScheduleIssue(IssueKind.TIMES_REQUIRED, day=raw_day)]

    issues = []
    for key, label in TIME_FIELDS:
        value = entry_value(entry, key)
        # break times are optional
        if not _present(value):
            continue
        if not is_valid_time(value):
            issues.append(ScheduleIssue(
                IssueKind.INVALID_TIME_FORMAT,
                day=raw_day,
                values={'field': label, 'value': value},
            ))
    return issues


def _duplicate_days(schedule: Sequence[WorkingHoursEntry]) -> List[str]:
    seen = set()
    duplicates = []
    for entry in schedule:
        raw_day = entry_value(entry, 'dayOfWeek')
        key = raw_day.lower() if isinstance(raw_day, str) else repr(raw_day)
        if key in seen:
            duplicates.append(key)
        else:
            seen.add(key)
    return duplicates


def validate_working_hours(schedule: Optional[Sequence[WorkingHoursEntry]]) -> ValidationResult:
    """Structurally validate a weekly schedule.

    An empty or missing schedule means "not configured" and is valid.
    Every problem is reported: the duplicate-day summary first, then the
    per-day issues in input order.
    """
    result = ValidationResult()
    if not schedule:
        return result

    duplicates = _duplicate_days(schedule)
    if duplicates:
        result.issues.append(ScheduleIssue(
            IssueKind.DUPLICATE_DAYS,
            values={'days': [str(d) for d in duplicates]},
        ))

    for entry in schedule:
        result.issues.extend(validate_day(entry))
    return result


# -----------------------------------------------------------------------------
# Hierarchical validation
# -----------------------------------------------------------------------------

def _by_weekday(schedule: Optional[Sequence[WorkingHoursEntry]]) -> Dict[Weekday, WorkingHoursEntry]:
    days: Dict[Weekday, WorkingHoursEntry] = {}
    for entry in schedule or ():
        day = Weekday.parse(entry_value(entry, 'dayOfWeek'))
        if day is not None:
            days.setdefault(day, entry)
    return days


def _check_day_within_parent(
    parent_day: WorkingHoursEntry,
    child_day: WorkingHoursEntry,
    day: Weekday,
    parent_label: str,
    child_label: str,
) -> List[ScheduleIssue]:
    """Containment checks for a day on which both sides are open."""
    issues = []
    labels = {'parent': parent_label, 'child': child_label}

    parent_opening = entry_value(parent_day, 'openingTime')
    parent_closing = entry_value(parent_day, 'closingTime')
    child_opening = entry_value(child_day, 'openingTime')
    child_closing = entry_value(child_day, 'closingTime')

    child_open = parse_time(child_opening)
    child_close = parse_time(child_closing)

    if child_open < parse_time(parent_opening):
        issues.append(ScheduleIssue(
            IssueKind.OPENS_BEFORE_PARENT,
            day=day.value,
            values={**labels, 'child_time': child_opening, 'parent_time': parent_opening},
        ))

    if child_close > parse_time(parent_closing):
        issues.append(ScheduleIssue(
            IssueKind.CLOSES_AFTER_PARENT,
            day=day.value,
            values={**labels, 'child_time': child_closing, 'parent_time': parent_closing},
        ))

    break_start = entry_value(child_day, 'breakStartTime')
    break_end = entry_value(child_day, 'breakEndTime')
    if _present(break_start) and _present(break_end):
        child_break_start = parse_time(break_start)
        child_break_end = parse_time(break_end)
        if child_break_start < child_open or child_break_end > child_close:
            issues.append(ScheduleIssue(IssueKind.BREAK_OUTSIDE_HOURS, day=day.value, values=labels))

        parent_break_start = entry_value(parent_day, 'breakStartTime')
        parent_break_end = entry_value(parent_day, 'breakEndTime')
        if _present(parent_break_start) and _present(parent_break_end):
            overlaps = not (
                child_break_end < parse_time(parent_break_start)
                or child_break_start > parse_time(parent_break_end)
            )
            # A clinic may keep its own break; misalignment is not an error.
            if not overlaps:
                logger.debug('%s break on %s does not overlap %s break', child_label, day.value, parent_label)

    return issues


def validate_hierarchical_working_hours(
    parent_schedule: Optional[Sequence[WorkingHoursEntry]],
    child_schedule: Optional[Sequence[WorkingHoursEntry]],
    parent_label: Optional[str] = None,
    child_label: Optional[str] = None,
) -> ValidationResult:
    """Check that ``child_schedule`` fits inside ``parent_schedule``.

    Both schedules are first validated on their own.  If either has
    structural problems those are returned (prefixed with the owning
    side's label) and no containment checks are made.

    Otherwise, for every day of the child schedule in order:

    * a day missing from the parent schedule is unconstrained;
    * a child open on a day the parent is closed is an error, and nothing
      else is checked for that day;
    * a closed child day is always fine;
    * when both are open, the child must open at or after and close at
      or before the parent, and a child break (when both bounds are
      given) must lie within the child's own hours.
    """
    if parent_label is None:
        parent_label = DEFAULT_PARENT_LABEL
    if child_label is None:
        child_label = DEFAULT_CHILD_LABEL

    parent_result = validate_working_hours(parent_schedule)
    child_result = validate_working_hours(child_schedule)

    result = ValidationResult()
    result.issues.extend(issue.scoped(parent_label) for issue in parent_result.issues)
    result.issues.extend(issue.scoped(child_label) for issue in child_result.issues)
    if result.issues:
        return result

    parent_days = _by_weekday(parent_schedule)
    for day, child_day in _by_weekday(child_schedule).items():
        parent_day = parent_days.get(day)
        if parent_day is None:
            continue

        if not _is_open(child_day):
            continue

        if not _is_open(parent_day):
            result.issues.append(ScheduleIssue(
                IssueKind.OPEN_WHEN_PARENT_CLOSED,
                day=day.value,
                values={'parent': parent_label, 'child': child_label},
            ))
            continue

        result.issues.extend(
            _check_day_within_parent(parent_day, child_day, day, parent_label, child_label)
        )

    logger.debug(
        'hierarchical working hours %s -> %s: %d issue(s)',
        parent_label, child_label, len(result.issues),
    )
    return result
