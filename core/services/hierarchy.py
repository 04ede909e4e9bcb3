"""
Organisational hierarchy used for working-hours checks.

Each unit's schedule is constrained by the schedule of the unit directly
above it: user -> clinic, clinic -> complex,
complex -> organization.
"""
from typing import Optional

ENTITY_TYPES = ('organization', 'complex', 'clinic', 'user')

PARENT_ENTITY_TYPE = {
    'user': 'clinic',
    'clinic': 'complex',
    'complex': 'organization',
    'organization': None,
}


def parent_entity_type(entity_type: str) -> Optional[str]:
    """Return the entity type whose hours constrain ``entity_type``."""
    key = (entity_type or '').lower()
    if key not in PARENT_ENTITY_TYPE:
        raise ValueError(f'Unknown entity type: {entity_type}')
    return PARENT_ENTITY_TYPE[key]


def default_label(entity_type: Optional[str]) -> Optional[str]:
    """Display label for an entity type, e.g. ``complex`` -> ``Complex``."""
    if not entity_type:
        return None
    return entity_type.strip().title()
