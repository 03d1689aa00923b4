"""Strongly typed identifiers for summit domain entities.

Using NewType for strong typing prevents mixing up different entity IDs
and makes the code more self-documenting.
"""

from typing import NewType
from uuid import UUID

DelegateId = NewType("DelegateId", UUID)
EventId = NewType("EventId", UUID)

# Administrative actors are identified by an opaque string (admin username or id)
ActorId = NewType("ActorId", str)
