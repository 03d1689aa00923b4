"""Update delegate use case."""

import logfire
from pydantic import BaseModel

from summit.application.usecase.delegate.fields import DelegateResponse, DelegateUpdate
from summit.domain.error import ValidationError
from summit.domain.service import DelegateService, EventService


class UpdateDelegateRequest(BaseModel):
    """Update delegate request."""

    delegate_id: str
    changes: DelegateUpdate


class UpdateDelegateUseCase:
    """Use case for editing a delegate's data.

    Status changes only happen through approve, reject and check-in.
    Moving a delegate to another event year re-resolves the event.
    """

    def __init__(
        self, delegate_service: DelegateService, event_service: EventService
    ) -> None:
        self.delegate_service = delegate_service
        self.event_service = event_service

    async def execute(self, request: UpdateDelegateRequest) -> DelegateResponse:
        """Apply the update.

        Raises:
            InvalidStateError: If an ID is malformed
            NotFoundError: If the delegate or the target event doesn't exist
            ValidationError: If event_id doesn't match the event year
            DuplicateDelegateError: If the new email/year pair is taken
        """
        delegate_id = self.delegate_service.parse_delegate_id(request.delegate_id)
        # Keep nested value objects as models, not dicts
        changes = {
            name: getattr(request.changes, name)
            for name in request.changes.model_fields_set
            if getattr(request.changes, name) is not None
        }

        with logfire.span(
            "update_delegate.execute",
            delegate_id=str(delegate_id),
            fields=sorted(changes),
        ):
            raw_event_id = changes.pop("event_id", None)
            event_id = (
                self.delegate_service.parse_event_id(raw_event_id)
                if raw_event_id
                else None
            )

            if "event_year" in changes:
                event = await self.event_service.get_by_year(changes["event_year"])
                if event_id is not None and event_id != event.id:
                    raise ValidationError(
                        f"Event {event_id} is not the event for year {changes['event_year']}"
                    )
                changes["event_id"] = event.id
            elif event_id is not None:
                current = await self.delegate_service.get_by_id(delegate_id)
                if event_id != current.event_id:
                    raise ValidationError(
                        "Changing the event requires the matching event_year"
                    )

            delegate = await self.delegate_service.update(delegate_id, changes)
            return DelegateResponse.from_domain(delegate)
