"""In-memory delegate repository for testing."""

from collections import Counter
from typing import Any, Optional

from summit.domain.error import DuplicateDelegateError
from summit.domain.model import Delegate
from summit.domain.model.common import utcnow
from summit.domain.repository import (
    LIFECYCLE_FIELDS,
    DelegateFilter,
    DelegateRepository,
    GroupField,
)
from summit.domain.value import DelegateId, DelegateStatus


def _matches(delegate: Delegate, filters: DelegateFilter) -> bool:
    if filters.event_id is not None and delegate.event_id != filters.event_id:
        return False
    if (
        filters.delegate_type is not None
        and delegate.delegate_type != filters.delegate_type
    ):
        return False
    if (
        filters.attendance_mode is not None
        and delegate.attendance_mode != filters.attendance_mode
    ):
        return False
    if filters.event_year is not None and delegate.event_year != filters.event_year:
        return False
    return True


class InMemoryDelegateRepository(DelegateRepository):
    """In-memory implementation of DelegateRepository for testing."""

    def __init__(self) -> None:
        self._delegates: dict[DelegateId, Delegate] = {}

    async def find_by_id(self, delegate_id: DelegateId) -> Optional[Delegate]:
        """Find a delegate by ID."""
        return self._delegates.get(delegate_id)

    async def find_by_email(
        self, email: str, event_year: int | None = None
    ) -> Optional[Delegate]:
        """Find a delegate by email, most recent event year first."""
        matches = [
            d
            for d in self._delegates.values()
            if d.email == email and (event_year is None or d.event_year == event_year)
        ]
        matches.sort(key=lambda d: (d.event_year, d.created_at), reverse=True)
        return matches[0] if matches else None

    async def exists_by_email_and_year(
        self, email: str, event_year: int, exclude_id: DelegateId | None = None
    ) -> bool:
        """Check whether a registration exists for an email and event year."""
        return any(
            d.email == email and d.event_year == event_year and d.id != exclude_id
            for d in self._delegates.values()
        )

    async def find_all(
        self, filters: DelegateFilter, limit: int = 10, offset: int = 0
    ) -> list[Delegate]:
        """Find delegates matching filters, newest first."""
        matches = [d for d in self._delegates.values() if _matches(d, filters)]
        matches.sort(key=lambda d: d.created_at, reverse=True)
        return matches[offset : offset + limit]

    async def count(self, filters: DelegateFilter) -> int:
        """Count delegates matching filters."""
        return sum(1 for d in self._delegates.values() if _matches(d, filters))

    async def count_grouped_by(
        self, field: GroupField, filters: DelegateFilter
    ) -> dict[str, int]:
        """Count delegates grouped by a field."""
        counter: Counter[str] = Counter()
        for delegate in self._delegates.values():
            if not _matches(delegate, filters):
                continue
            value = getattr(delegate, field)
            counter[getattr(value, "value", value)] += 1
        return dict(counter)

    async def save(self, delegate: Delegate) -> Delegate:
        """Save a delegate (create or update).

        Raises:
            DuplicateDelegateError: If the email is already registered for the
                event year
        """
        if await self.exists_by_email_and_year(
            delegate.email, delegate.event_year, exclude_id=delegate.id
        ):
            raise DuplicateDelegateError(delegate.email, delegate.event_year)

        self._delegates[delegate.id] = delegate
        return delegate

    async def update_fields(
        self, delegate_id: DelegateId, changes: dict[str, Any]
    ) -> Optional[Delegate]:
        """Apply changes on top of the currently stored record."""
        touched = LIFECYCLE_FIELDS.intersection(changes)
        if touched:
            raise ValueError(f"Lifecycle fields cannot be updated: {sorted(touched)}")

        current = self._delegates.get(delegate_id)
        if current is None:
            return None
        updated = current.model_copy(update={**changes, "updated_at": utcnow()})
        if await self.exists_by_email_and_year(
            updated.email, updated.event_year, exclude_id=delegate_id
        ):
            raise DuplicateDelegateError(updated.email, updated.event_year)
        self._delegates[delegate_id] = updated
        return updated

    async def update_if_status(
        self,
        delegate_id: DelegateId,
        allowed_statuses: set[DelegateStatus],
        changes: dict[str, Any],
    ) -> Optional[Delegate]:
        """Apply changes if the delegate's current status is allowed."""
        current = self._delegates.get(delegate_id)
        if current is None or current.status not in allowed_statuses:
            return None
        updated = current.model_copy(update={"updated_at": utcnow(), **changes})
        self._delegates[delegate_id] = updated
        return updated

    async def add_push_token(self, delegate_id: DelegateId, token: str) -> bool:
        """Add a token unless already present."""
        current = self._delegates.get(delegate_id)
        if current is None:
            return False
        if token not in current.push_tokens:
            self._delegates[delegate_id] = current.with_changes(
                push_tokens=[*current.push_tokens, token]
            )
        return True

    async def delete(self, delegate_id: DelegateId) -> bool:
        """Delete a delegate."""
        return self._delegates.pop(delegate_id, None) is not None

    async def commit(self) -> None:
        """Writes are immediately visible; nothing to commit."""
        pass
