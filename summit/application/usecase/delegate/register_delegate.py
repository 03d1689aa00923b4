"""Register delegate use case."""

from uuid import uuid4

import logfire
from pydantic import Field

from summit.application import messages
from summit.application.usecase.delegate.fields import DelegateFields, DelegateResponse
from summit.config import Settings
from summit.domain.error import ValidationError
from summit.domain.model import Delegate
from summit.domain.service import (
    CredentialService,
    DelegateService,
    EventService,
    NotificationService,
    UploadedFile,
    UploadService,
)
from summit.domain.value import DelegateId


class RegisterDelegateRequest(DelegateFields):
    """Register delegate request."""

    password: str = Field(min_length=6, max_length=128)
    event_id: str | None = None
    profile_picture: UploadedFile | None = None
    identification_document: UploadedFile | None = None


class RegisterDelegateUseCase:
    """Use case for self-registration of a delegate.

    The record is created ``pending``. After it is committed, a confirmation
    email is sent and a "registration under review" push is queued with a
    delay; neither can fail the registration.
    """

    def __init__(
        self,
        delegate_service: DelegateService,
        event_service: EventService,
        credential_service: CredentialService,
        upload_service: UploadService,
        notification_service: NotificationService,
        settings: Settings,
    ) -> None:
        self.delegate_service = delegate_service
        self.event_service = event_service
        self.credential_service = credential_service
        self.upload_service = upload_service
        self.notification_service = notification_service
        self.settings = settings

    async def execute(self, request: RegisterDelegateRequest) -> DelegateResponse:
        """Register a delegate.

        Args:
            request: Registration data, password and optional files

        Returns:
            The created delegate

        Raises:
            NotFoundError: If no event is held in the requested year
            InvalidStateError: If event_id is not a well-formed ID
            ValidationError: If event_id doesn't belong to the requested year
            DuplicateDelegateError: If the email is already registered that year
        """
        email = request.email.lower()
        with logfire.span(
            "register_delegate.execute", email=email, event_year=request.event_year
        ):
            event = await self.event_service.get_by_year(request.event_year)
            if request.event_id is not None:
                event_id = self.delegate_service.parse_event_id(request.event_id)
                if event_id != event.id:
                    raise ValidationError(
                        f"Event {event_id} is not the event for year {request.event_year}"
                    )

            # Fail fast before uploading anything
            await self.delegate_service.ensure_unique(email, request.event_year)

            storage = self.settings.storage
            profile_picture = None
            if request.profile_picture:
                profile_picture = await self.upload_service.upload(
                    request.profile_picture, storage.profile_picture_folder
                )

            identification = request.identification
            if request.identification_document:
                document_url = await self.upload_service.upload(
                    request.identification_document, storage.document_folder
                )
                identification = identification.model_copy(
                    update={"document_url": document_url}
                )

            fields = request.model_dump(
                exclude={
                    "email",
                    "password",
                    "event_id",
                    "profile_picture",
                    "identification_document",
                    "identification",
                }
            )
            delegate = Delegate(
                id=DelegateId(uuid4()),
                email=email,
                event_id=event.id,
                identification=identification,
                profile_picture=profile_picture,
                password_hash=await self.credential_service.hash_password(
                    request.password
                ),
                **fields,
            )
            delegate = await self.delegate_service.register(delegate)

            await self.notification_service.send_email(
                messages.registration_received_email(delegate)
            )
            await self.notification_service.schedule_push(
                delegate.id,
                messages.REGISTRATION_REVIEW_TITLE,
                messages.registration_review_push_body(delegate),
                self.settings.queue.registration_review_delay_seconds,
            )

            return DelegateResponse.from_domain(delegate)
