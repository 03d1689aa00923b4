"""Application layer DI providers."""

from dishka import Scope, provide

from summit.application.usecase.auth import (
    ConfirmPasswordResetUseCase,
    LoginUseCase,
    RequestPasswordResetUseCase,
)
from summit.application.usecase.delegate import (
    DeleteDelegateUseCase,
    DownloadBadgeUseCase,
    GetDelegateByEmailUseCase,
    GetDelegateUseCase,
    GetStatisticsUseCase,
    ListDelegatesUseCase,
    RegisterDelegateUseCase,
    RegisterPushTokenUseCase,
    UpdateDelegateUseCase,
)
from summit.application.usecase.lifecycle import (
    ApproveDelegateUseCase,
    CheckInDelegateUseCase,
    RejectDelegateUseCase,
)
from summit.config import Settings
from summit.domain.service import (
    BadgeService,
    CredentialService,
    DelegateService,
    EventService,
    JWTService,
    LifecycleService,
    NotificationService,
    UploadService,
)
from summit.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    scope = Scope.REQUEST

    # Delegate use cases
    @provide
    def get_register_delegate_use_case(
        self,
        delegate_service: DelegateService,
        event_service: EventService,
        credential_service: CredentialService,
        upload_service: UploadService,
        notification_service: NotificationService,
        settings: Settings,
    ) -> RegisterDelegateUseCase:
        """Provide register delegate use case."""
        return RegisterDelegateUseCase(
            delegate_service=delegate_service,
            event_service=event_service,
            credential_service=credential_service,
            upload_service=upload_service,
            notification_service=notification_service,
            settings=settings,
        )

    @provide
    def get_list_delegates_use_case(
        self, delegate_service: DelegateService
    ) -> ListDelegatesUseCase:
        """Provide list delegates use case."""
        return ListDelegatesUseCase(delegate_service=delegate_service)

    @provide
    def get_get_delegate_use_case(
        self, delegate_service: DelegateService
    ) -> GetDelegateUseCase:
        """Provide get delegate use case."""
        return GetDelegateUseCase(delegate_service=delegate_service)

    @provide
    def get_get_delegate_by_email_use_case(
        self, delegate_service: DelegateService
    ) -> GetDelegateByEmailUseCase:
        """Provide get delegate by email use case."""
        return GetDelegateByEmailUseCase(delegate_service=delegate_service)

    @provide
    def get_update_delegate_use_case(
        self, delegate_service: DelegateService, event_service: EventService
    ) -> UpdateDelegateUseCase:
        """Provide update delegate use case."""
        return UpdateDelegateUseCase(
            delegate_service=delegate_service, event_service=event_service
        )

    @provide
    def get_delete_delegate_use_case(
        self, delegate_service: DelegateService
    ) -> DeleteDelegateUseCase:
        """Provide delete delegate use case."""
        return DeleteDelegateUseCase(delegate_service=delegate_service)

    @provide
    def get_statistics_use_case(
        self, delegate_service: DelegateService
    ) -> GetStatisticsUseCase:
        """Provide statistics use case."""
        return GetStatisticsUseCase(delegate_service=delegate_service)

    @provide
    def get_register_push_token_use_case(
        self,
        delegate_service: DelegateService,
        notification_service: NotificationService,
    ) -> RegisterPushTokenUseCase:
        """Provide register push token use case."""
        return RegisterPushTokenUseCase(
            delegate_service=delegate_service,
            notification_service=notification_service,
        )

    @provide
    def get_download_badge_use_case(
        self, delegate_service: DelegateService, badge_service: BadgeService
    ) -> DownloadBadgeUseCase:
        """Provide download badge use case."""
        return DownloadBadgeUseCase(
            delegate_service=delegate_service, badge_service=badge_service
        )

    # Lifecycle use cases
    @provide
    def get_approve_delegate_use_case(
        self,
        delegate_service: DelegateService,
        lifecycle_service: LifecycleService,
        badge_service: BadgeService,
        notification_service: NotificationService,
        settings: Settings,
    ) -> ApproveDelegateUseCase:
        """Provide approve delegate use case."""
        return ApproveDelegateUseCase(
            delegate_service=delegate_service,
            lifecycle_service=lifecycle_service,
            badge_service=badge_service,
            notification_service=notification_service,
            settings=settings,
        )

    @provide
    def get_reject_delegate_use_case(
        self,
        delegate_service: DelegateService,
        lifecycle_service: LifecycleService,
        notification_service: NotificationService,
    ) -> RejectDelegateUseCase:
        """Provide reject delegate use case."""
        return RejectDelegateUseCase(
            delegate_service=delegate_service,
            lifecycle_service=lifecycle_service,
            notification_service=notification_service,
        )

    @provide
    def get_check_in_delegate_use_case(
        self,
        delegate_service: DelegateService,
        lifecycle_service: LifecycleService,
        notification_service: NotificationService,
    ) -> CheckInDelegateUseCase:
        """Provide check-in use case."""
        return CheckInDelegateUseCase(
            delegate_service=delegate_service,
            lifecycle_service=lifecycle_service,
            notification_service=notification_service,
        )

    # Auth use cases
    @provide
    def get_login_use_case(
        self, credential_service: CredentialService, jwt_service: JWTService
    ) -> LoginUseCase:
        """Provide login use case."""
        return LoginUseCase(
            credential_service=credential_service, jwt_service=jwt_service
        )

    @provide
    def get_request_password_reset_use_case(
        self,
        credential_service: CredentialService,
        notification_service: NotificationService,
        settings: Settings,
    ) -> RequestPasswordResetUseCase:
        """Provide request password reset use case."""
        return RequestPasswordResetUseCase(
            credential_service=credential_service,
            notification_service=notification_service,
            settings=settings,
        )

    @provide
    def get_confirm_password_reset_use_case(
        self, credential_service: CredentialService
    ) -> ConfirmPasswordResetUseCase:
        """Provide confirm password reset use case."""
        return ConfirmPasswordResetUseCase(credential_service=credential_service)
