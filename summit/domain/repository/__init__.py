"""Domain repository interfaces."""

from summit.domain.repository.delegate import (
    LIFECYCLE_FIELDS,
    DelegateFilter,
    DelegateRepository,
    GroupField,
)
from summit.domain.repository.event import EventRepository

__all__ = [
    "LIFECYCLE_FIELDS",
    "DelegateFilter",
    "DelegateRepository",
    "EventRepository",
    "GroupField",
]
