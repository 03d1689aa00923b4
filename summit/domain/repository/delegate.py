"""Delegate repository interface."""

from abc import ABC, abstractmethod
from typing import Any, Literal

from pydantic import BaseModel

from summit.domain.model.delegate import Delegate
from summit.domain.value import (
    AttendanceMode,
    DelegateId,
    DelegateStatus,
    DelegateType,
    EventId,
)

GroupField = Literal["delegate_type", "attendance_mode", "nationality"]

# Written only by update_if_status and add_push_token
LIFECYCLE_FIELDS = frozenset(
    {
        "id",
        "status",
        "registration_date",
        "approved_by",
        "approval_date",
        "rejected_by",
        "rejection_date",
        "rejection_reason",
        "has_checked_in",
        "checked_in_by",
        "check_in_date",
        "check_in_location",
        "check_in_notes",
        "push_tokens",
        "created_at",
    }
)


class DelegateFilter(BaseModel):
    """Optional equality filters applied to delegate queries."""

    event_id: EventId | None = None
    delegate_type: DelegateType | None = None
    attendance_mode: AttendanceMode | None = None
    event_year: int | None = None


class DelegateRepository(ABC):
    """Repository for Delegate entity.

    Defines the contract for delegate persistence operations.
    Implementations live in the persistence layer.
    """

    @abstractmethod
    async def find_by_id(self, delegate_id: DelegateId) -> Delegate | None:
        """Find a delegate by ID.

        Args:
            delegate_id: The delegate's unique identifier

        Returns:
            The delegate if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_email(
        self, email: str, event_year: int | None = None
    ) -> Delegate | None:
        """Find a delegate by email.

        When no year is given and the email is registered for several event
        years, the most recent registration is returned.

        Args:
            email: Lower-cased email address
            event_year: Optional event year to narrow the lookup

        Returns:
            The delegate if found, None otherwise
        """
        pass

    @abstractmethod
    async def exists_by_email_and_year(
        self, email: str, event_year: int, exclude_id: DelegateId | None = None
    ) -> bool:
        """Check whether a registration exists for an email and event year.

        Args:
            email: Lower-cased email address
            event_year: Event year
            exclude_id: Delegate to ignore (used when updating that delegate)

        Returns:
            True if another matching delegate exists
        """
        pass

    @abstractmethod
    async def find_all(
        self, filters: DelegateFilter, limit: int = 10, offset: int = 0
    ) -> list[Delegate]:
        """Find delegates matching filters, newest first.

        Args:
            filters: Equality filters
            limit: Maximum number of results
            offset: Number of results to skip

        Returns:
            List of delegates
        """
        pass

    @abstractmethod
    async def count(self, filters: DelegateFilter) -> int:
        """Count delegates matching filters."""
        pass

    @abstractmethod
    async def count_grouped_by(
        self, field: GroupField, filters: DelegateFilter
    ) -> dict[str, int]:
        """Count delegates matching filters, grouped by a column.

        Args:
            field: Column to group by
            filters: Equality filters

        Returns:
            Mapping of column value to count
        """
        pass

    @abstractmethod
    async def save(self, delegate: Delegate) -> Delegate:
        """Save a delegate (create or update).

        Args:
            delegate: The delegate to save

        Returns:
            The saved delegate

        Raises:
            DuplicateDelegateError: If the email is already registered for the
                event year
        """
        pass

    @abstractmethod
    async def update_fields(
        self, delegate_id: DelegateId, changes: dict[str, Any]
    ) -> Delegate | None:
        """Write only the given columns and return the stored record.

        Columns that are not in ``changes`` keep whatever value is stored,
        so a concurrent transition or token registration is never overwritten.

        Args:
            delegate_id: Delegate to update
            changes: Field values to write; must not touch LIFECYCLE_FIELDS

        Returns:
            The updated delegate, or None if no delegate matched

        Raises:
            ValueError: If a lifecycle field is in ``changes``
            DuplicateDelegateError: If the email/year pair is taken
        """
        pass

    @abstractmethod
    async def update_if_status(
        self,
        delegate_id: DelegateId,
        allowed_statuses: set[DelegateStatus],
        changes: dict[str, Any],
    ) -> Delegate | None:
        """Atomically apply changes if the delegate's status is allowed.

        The status check and the write happen in one statement, so two
        concurrent transitions cannot both succeed.

        Args:
            delegate_id: Delegate to update
            allowed_statuses: Statuses the delegate must currently be in
            changes: Field values to write

        Returns:
            The updated delegate, or None if no delegate matched
        """
        pass

    @abstractmethod
    async def add_push_token(self, delegate_id: DelegateId, token: str) -> bool:
        """Add a push token to a delegate's set of tokens.

        Args:
            delegate_id: Delegate to update
            token: Expo push token

        Returns:
            True if the delegate exists
        """
        pass

    @abstractmethod
    async def delete(self, delegate_id: DelegateId) -> bool:
        """Delete a delegate.

        Returns:
            True if a delegate was deleted
        """
        pass

    @abstractmethod
    async def commit(self) -> None:
        """Commit pending writes so they are visible before side effects run."""
        pass
