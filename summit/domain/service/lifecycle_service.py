"""Delegate lifecycle domain service.

Status machine:

    pending   --approve--> approved --check_in--> checked_in
    pending   --reject---> rejected
    approved  --reject---> rejected
    rejected  --approve--> approved
    suspended --approve/reject--> approved/rejected

``checked_in`` is final. Each transition is one conditional update guarded
by the allowed source statuses. When nothing matches, the record is re-read
to report why.
"""

from typing import Any

import logfire

from summit.domain.error import (
    AlreadyInStateError,
    ConflictError,
    InvalidStateError,
    NotFoundError,
    ValidationError,
)
from summit.domain.model import Delegate
from summit.domain.model.common import utcnow
from summit.domain.repository import DelegateRepository
from summit.domain.value import ActorId, DelegateId, DelegateStatus

APPROVABLE = frozenset(
    {DelegateStatus.PENDING, DelegateStatus.REJECTED, DelegateStatus.SUSPENDED}
)
REJECTABLE = frozenset(
    {DelegateStatus.PENDING, DelegateStatus.APPROVED, DelegateStatus.SUSPENDED}
)
CHECK_IN_READY = frozenset({DelegateStatus.APPROVED})


class LifecycleService:
    """Domain service for delegate status transitions."""

    def __init__(self, delegate_repository: DelegateRepository) -> None:
        """Initialize lifecycle service.

        Args:
            delegate_repository: Delegate repository
        """
        self.delegate_repository = delegate_repository

    async def approve(self, delegate_id: DelegateId, approved_by: ActorId) -> Delegate:
        """Approve a delegate's registration.

        Args:
            delegate_id: Delegate to approve
            approved_by: Administrator performing the approval

        Returns:
            The approved delegate

        Raises:
            NotFoundError: If the delegate doesn't exist
            AlreadyInStateError: If the delegate is already approved
            InvalidStateError: If the delegate has checked in
        """
        with logfire.span(
            "lifecycle_service.approve",
            delegate_id=str(delegate_id),
            approved_by=approved_by,
        ):
            changes = {
                "status": DelegateStatus.APPROVED,
                "approved_by": approved_by,
                "approval_date": utcnow(),
            }
            delegate = await self._transition(
                delegate_id, APPROVABLE, changes, action="approved"
            )
            logfire.info(
                "Delegate approved",
                delegate_id=str(delegate_id),
                approved_by=approved_by,
            )
            return delegate

    async def reject(
        self, delegate_id: DelegateId, rejection_reason: str, rejected_by: ActorId
    ) -> Delegate:
        """Reject a delegate's registration.

        Rejection is also allowed after approval, as long as the delegate has
        not checked in.

        Args:
            delegate_id: Delegate to reject
            rejection_reason: Reason sent to the delegate
            rejected_by: Administrator performing the rejection

        Returns:
            The rejected delegate

        Raises:
            ValidationError: If the reason is blank
            NotFoundError: If the delegate doesn't exist
            AlreadyInStateError: If the delegate is already rejected
            InvalidStateError: If the delegate has checked in
        """
        with logfire.span(
            "lifecycle_service.reject",
            delegate_id=str(delegate_id),
            rejected_by=rejected_by,
        ):
            if not rejection_reason or not rejection_reason.strip():
                raise ValidationError("A rejection reason is required")

            changes = {
                "status": DelegateStatus.REJECTED,
                "rejection_reason": rejection_reason.strip(),
                "rejected_by": rejected_by,
                "rejection_date": utcnow(),
            }
            delegate = await self._transition(
                delegate_id, REJECTABLE, changes, action="rejected"
            )
            logfire.info(
                "Delegate rejected",
                delegate_id=str(delegate_id),
                rejected_by=rejected_by,
            )
            return delegate

    async def check_in(
        self,
        delegate_id: DelegateId,
        check_in_location: str | None,
        checked_in_by: ActorId,
    ) -> Delegate:
        """Check an approved delegate in at the venue.

        Args:
            delegate_id: Delegate to check in
            check_in_location: Desk or venue where check-in happened
            checked_in_by: Staff member performing the check-in

        Returns:
            The checked-in delegate

        Raises:
            NotFoundError: If the delegate doesn't exist
            InvalidStateError: If the delegate is not approved
        """
        with logfire.span(
            "lifecycle_service.check_in",
            delegate_id=str(delegate_id),
            checked_in_by=checked_in_by,
        ):
            changes = {
                "status": DelegateStatus.CHECKED_IN,
                "has_checked_in": True,
                "checked_in_by": checked_in_by,
                "check_in_date": utcnow(),
                "check_in_location": check_in_location,
            }
            delegate = await self.delegate_repository.update_if_status(
                delegate_id, set(CHECK_IN_READY), changes
            )
            if delegate is None:
                current = await self._require(delegate_id)
                logfire.warn(
                    "Check-in refused",
                    delegate_id=str(delegate_id),
                    status=current.status.value,
                )
                raise InvalidStateError(
                    f"Delegate cannot be checked in. Current status: {current.status.value}"
                )

            await self.delegate_repository.commit()
            logfire.info(
                "Delegate checked in",
                delegate_id=str(delegate_id),
                location=check_in_location,
            )
            return delegate

    async def _transition(
        self,
        delegate_id: DelegateId,
        allowed: frozenset[DelegateStatus],
        changes: dict[str, Any],
        action: str,
    ) -> Delegate:
        """Apply a guarded approve/reject transition and commit it."""
        target: DelegateStatus = changes["status"]
        delegate = await self.delegate_repository.update_if_status(
            delegate_id, set(allowed), changes
        )
        if delegate is not None:
            await self.delegate_repository.commit()
            return delegate

        current = await self._require(delegate_id)
        logfire.warn(
            "Transition refused",
            delegate_id=str(delegate_id),
            status=current.status.value,
            target=target.value,
        )
        if current.status == target:
            raise AlreadyInStateError(f"Delegate is already {action}.")
        if current.status == DelegateStatus.CHECKED_IN:
            raise InvalidStateError(
                f"Delegate cannot be {action}. Current status: {current.status.value}"
            )
        # Status changed between the update and the re-read
        raise ConflictError("Delegate was modified concurrently. Please retry.")

    async def _require(self, delegate_id: DelegateId) -> Delegate:
        delegate = await self.delegate_repository.find_by_id(delegate_id)
        if not delegate:
            raise NotFoundError(
                "Delegate", str(delegate_id), f"Delegate with ID {delegate_id} not found"
            )
        return delegate
