from datetime import datetime
from typing import Any, Dict, List, Optional

import attrs

from src.platform.exception.exceptions import DomainError


REQUIRED_TEXT_FIELDS = ('title', 'description', 'location')


def _validate_non_empty_string(instance: object, attribute: attrs.Attribute, value: str) -> None:
    if not value or not value.strip():
        raise DomainError(f'Event {attribute.name} cannot be empty')


@attrs.define
class EventEntity:
    title: str = attrs.field(validator=_validate_non_empty_string)
    description: str = attrs.field(validator=_validate_non_empty_string)
    image_url: str
    date: datetime
    location: str = attrs.field(validator=_validate_non_empty_string)
    address: str
    organized_by_id: int
    featured: bool = False
    tags: List[str] = attrs.field(factory=list)
    id: Optional[int] = None

    @staticmethod
    def validate_changes(changes: Dict[str, Any]) -> None:
        """Same text rules as construction, applied to a partial update."""
        for field in REQUIRED_TEXT_FIELDS:
            if field in changes:
                value = changes[field]
                if not value or not str(value).strip():
                    raise DomainError(f'Event {field} cannot be empty')


# Fields an organizer may change through a partial update
EVENT_UPDATABLE_FIELDS = frozenset(
    {
        'title',
        'description',
        'image_url',
        'date',
        'location',
        'address',
        'organized_by_id',
        'featured',
        'tags',
    }
)
