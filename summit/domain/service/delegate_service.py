"""Delegate domain service.

Query and validation layer over the delegate record store: ID parsing,
lookups, uniqueness of (email, event year), pagination and statistics.
Lifecycle transitions live in ``LifecycleService``.
"""

from typing import Any
from uuid import UUID

import logfire
from pydantic import BaseModel

from summit.domain.error import (
    DuplicateDelegateError,
    InvalidStateError,
    NotFoundError,
    ValidationError,
)
from summit.domain.model import Delegate
from summit.domain.repository import (
    LIFECYCLE_FIELDS,
    DelegateFilter,
    DelegateRepository,
)
from summit.domain.value import DelegateId, EventId

# Changed only through CredentialService
SECRET_FIELDS = frozenset(
    {"password_hash", "reset_password_pin", "reset_password_expires"}
)


class DelegateStatistics(BaseModel):
    """Aggregate counts over delegates."""

    total: int
    by_type: dict[str, int]
    by_attendance_mode: dict[str, int]
    by_nationality: dict[str, int]


def _parse_uuid(raw: str | UUID, label: str) -> UUID:
    if isinstance(raw, UUID):
        return raw
    try:
        return UUID(raw)
    except (ValueError, TypeError, AttributeError):
        raise InvalidStateError(f"Invalid {label} ID format")


class DelegateService:
    """Domain service for delegate records."""

    def __init__(self, delegate_repository: DelegateRepository) -> None:
        """Initialize delegate service.

        Args:
            delegate_repository: Delegate repository
        """
        self.delegate_repository = delegate_repository

    @staticmethod
    def parse_delegate_id(raw: str | UUID) -> DelegateId:
        """Parse a delegate ID.

        Raises:
            InvalidStateError: If the ID is not a well-formed UUID
        """
        return DelegateId(_parse_uuid(raw, "delegate"))

    @staticmethod
    def parse_event_id(raw: str | UUID) -> EventId:
        """Parse an event ID.

        Raises:
            InvalidStateError: If the ID is not a well-formed UUID
        """
        return EventId(_parse_uuid(raw, "event"))

    async def get_by_id(self, delegate_id: DelegateId) -> Delegate:
        """Get a delegate by ID.

        Raises:
            NotFoundError: If the delegate doesn't exist
        """
        delegate = await self.delegate_repository.find_by_id(delegate_id)
        if not delegate:
            raise NotFoundError(
                "Delegate", str(delegate_id), f"Delegate with ID {delegate_id} not found"
            )
        return delegate

    async def get_by_email(self, email: str, event_year: int | None = None) -> Delegate:
        """Get a delegate by email.

        Raises:
            ValidationError: If the email is malformed
            NotFoundError: If no delegate uses the email
        """
        if "@" not in email:
            raise ValidationError("Invalid email format")

        normalized = email.strip().lower()
        delegate = await self.delegate_repository.find_by_email(normalized, event_year)
        if not delegate:
            raise NotFoundError(
                "Delegate", normalized, f"Delegate with email {normalized} not found"
            )
        return delegate

    async def list_delegates(
        self, filters: DelegateFilter, page: int = 1, limit: int = 10
    ) -> tuple[list[Delegate], int]:
        """List delegates newest first.

        Args:
            filters: Equality filters
            page: 1-based page number
            limit: Page size

        Returns:
            Tuple of (delegates on the page, total matching)
        """
        with logfire.span(
            "delegate_service.list_delegates",
            page=page,
            limit=limit,
            filters=filters.model_dump(exclude_none=True, mode="json"),
        ):
            offset = (page - 1) * limit
            delegates = await self.delegate_repository.find_all(filters, limit, offset)
            total = await self.delegate_repository.count(filters)
            return delegates, total

    async def ensure_unique(
        self, email: str, event_year: int, exclude_id: DelegateId | None = None
    ) -> None:
        """Raise if another delegate uses the email for the event year.

        Raises:
            DuplicateDelegateError: If the pair is taken
        """
        if await self.delegate_repository.exists_by_email_and_year(
            email, event_year, exclude_id
        ):
            logfire.warn(
                "Duplicate delegate registration", email=email, event_year=event_year
            )
            raise DuplicateDelegateError(email, event_year)

    async def register(self, delegate: Delegate) -> Delegate:
        """Persist a new delegate and commit.

        Raises:
            DuplicateDelegateError: If the email is already registered for the year
        """
        with logfire.span(
            "delegate_service.register",
            email=delegate.email,
            event_year=delegate.event_year,
        ):
            await self.ensure_unique(delegate.email, delegate.event_year)

            # Raises DuplicateDelegateError if a concurrent registration won
            await self.delegate_repository.save(delegate)

            await self.delegate_repository.commit()
            logfire.info(
                "Delegate registered",
                delegate_id=str(delegate.id),
                event_year=delegate.event_year,
            )
            return delegate

    async def update(self, delegate_id: DelegateId, changes: dict[str, Any]) -> Delegate:
        """Apply a partial update to a delegate's record.

        Args:
            delegate_id: Delegate to update
            changes: Validated field values

        Raises:
            NotFoundError: If the delegate doesn't exist
            InvalidStateError: If a lifecycle or credential field is in changes
            DuplicateDelegateError: If the new email/year pair is taken
        """
        with logfire.span(
            "delegate_service.update",
            delegate_id=str(delegate_id),
            fields=sorted(changes),
        ):
            protected = (LIFECYCLE_FIELDS | SECRET_FIELDS).intersection(changes)
            if protected:
                fields = ", ".join(sorted(protected))
                raise InvalidStateError(f"Fields cannot be changed by an update: {fields}")

            current = await self.get_by_id(delegate_id)
            if "email" in changes:
                changes["email"] = changes["email"].strip().lower()

            email = changes.get("email", current.email)
            event_year = changes.get("event_year", current.event_year)
            if (email, event_year) != (current.email, current.event_year):
                await self.ensure_unique(email, event_year, exclude_id=delegate_id)
                # Write the pair together so a unique violation names both
                changes.update(email=email, event_year=event_year)

            # Only the changed columns are written; status and tokens stay as stored
            updated = await self.delegate_repository.update_fields(
                delegate_id, changes
            )
            if updated is None:
                raise NotFoundError(
                    "Delegate", str(delegate_id), f"Delegate with ID {delegate_id} not found"
                )

            await self.delegate_repository.commit()
            logfire.info("Delegate updated", delegate_id=str(delegate_id))
            return updated

    async def delete(self, delegate_id: DelegateId) -> None:
        """Delete a delegate.

        Raises:
            NotFoundError: If the delegate doesn't exist
        """
        with logfire.span("delegate_service.delete", delegate_id=str(delegate_id)):
            deleted = await self.delegate_repository.delete(delegate_id)
            if not deleted:
                raise NotFoundError(
                    "Delegate",
                    str(delegate_id),
                    f"Delegate with ID {delegate_id} not found",
                )
            await self.delegate_repository.commit()
            logfire.info("Delegate deleted", delegate_id=str(delegate_id))

    async def statistics(self, filters: DelegateFilter) -> DelegateStatistics:
        """Count delegates overall and by type, attendance mode and nationality."""
        with logfire.span("delegate_service.statistics"):
            repo = self.delegate_repository
            return DelegateStatistics(
                total=await repo.count(filters),
                by_type=await repo.count_grouped_by("delegate_type", filters),
                by_attendance_mode=await repo.count_grouped_by(
                    "attendance_mode", filters
                ),
                by_nationality=await repo.count_grouped_by("nationality", filters),
            )
