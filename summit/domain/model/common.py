"""Base model for all domain entities."""

from datetime import datetime, timezone
from typing import Any, Self

from pydantic import BaseModel, ConfigDict


def utcnow() -> datetime:
    """Timezone-aware current time used for every domain timestamp."""
    return datetime.now(timezone.utc)


class DomainModel(BaseModel):
    """Base class for all domain models.

    Models are immutable; changes produce a new instance via ``with_changes``.
    """

    model_config = ConfigDict(
        frozen=True,  # All domain models are immutable
        arbitrary_types_allowed=True,  # Allow custom value objects
    )

    def with_changes(self, **changes: Any) -> Self:
        """Return a copy with the given fields replaced and ``updated_at`` bumped."""
        if "updated_at" in type(self).model_fields:
            changes.setdefault("updated_at", utcnow())
        return self.model_copy(update=changes)
