"""Domain model entities for summit."""

from summit.domain.model.delegate import Delegate
from summit.domain.model.event import Event

__all__ = [
    "Delegate",
    "Event",
]
