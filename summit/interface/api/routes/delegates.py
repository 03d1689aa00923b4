"""Delegate routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Depends, Query, Request, Response, status
from pydantic import BaseModel, Field

from summit.application.usecase.auth import (
    ConfirmPasswordResetRequest,
    ConfirmPasswordResetUseCase,
    LoginRequest,
    LoginResponse,
    LoginUseCase,
    PasswordResetMessage,
    RequestPasswordResetRequest,
    RequestPasswordResetUseCase,
)
from summit.application.usecase.delegate import (
    DelegateResponse,
    DelegateUpdate,
    DeleteDelegateRequest,
    DeleteDelegateUseCase,
    DownloadBadgeRequest,
    DownloadBadgeUseCase,
    GetDelegateByEmailRequest,
    GetDelegateByEmailUseCase,
    GetDelegateRequest,
    GetDelegateUseCase,
    GetStatisticsRequest,
    GetStatisticsUseCase,
    ListDelegatesRequest,
    ListDelegatesResponse,
    ListDelegatesUseCase,
    RegisterDelegateUseCase,
    RegisterPushTokenRequest,
    RegisterPushTokenResponse,
    RegisterPushTokenUseCase,
    UpdateDelegateRequest,
    UpdateDelegateUseCase,
)
from summit.application.usecase.lifecycle import (
    ApproveDelegateRequest,
    ApproveDelegateUseCase,
    CheckInDelegateRequest,
    CheckInDelegateUseCase,
    RejectDelegateRequest,
    RejectDelegateUseCase,
)
from summit.domain.service import DelegateStatistics, JWTService
from summit.domain.value import AttendanceMode, DelegateType
from summit.interface.api.forms import parse_registration_form
from summit.interface.api.routes.auth import bearer_token, require_admin, require_token

router = APIRouter(prefix="/delegates", tags=["delegates"], route_class=DishkaRoute)


class ApproveAPIRequest(BaseModel):
    """API request for approving a delegate."""

    approved_by: str = Field(min_length=1)


class RejectAPIRequest(BaseModel):
    """API request for rejecting a delegate."""

    rejection_reason: str
    rejected_by: str = Field(min_length=1)


class CheckInAPIRequest(BaseModel):
    """API request for checking a delegate in."""

    check_in_location: str | None = None
    checked_in_by: str | None = None


class PushTokenAPIRequest(BaseModel):
    """API request for registering a device push token."""

    token: str


# Fixed paths are declared before "/{delegate_id}" so they are matched first.


@router.post("/", response_model=DelegateResponse, status_code=status.HTTP_201_CREATED)
async def register_delegate(
    request: Request, use_case: FromDishka[RegisterDelegateUseCase]
) -> DelegateResponse:
    """Register a delegate from a multipart form. Public."""
    form = await request.form()
    try:
        registration = await parse_registration_form(form)
    finally:
        await form.close()
    return await use_case.execute(registration)


@router.get("/", response_model=ListDelegatesResponse)
async def list_delegates(
    jwt_service: FromDishka[JWTService],
    use_case: FromDishka[ListDelegatesUseCase],
    page: int = Query(default=1, ge=1),
    limit: int = Query(default=10, ge=1, le=100),
    event_id: str | None = None,
    delegate_type: DelegateType | None = None,
    attendance_mode: AttendanceMode | None = None,
    year: int | None = None,
    token: str | None = Depends(bearer_token),
) -> ListDelegatesResponse:
    """List delegates, newest first. Admin only."""
    require_admin(jwt_service, token)
    return await use_case.execute(
        ListDelegatesRequest(
            page=page,
            limit=limit,
            event_id=event_id,
            delegate_type=delegate_type,
            attendance_mode=attendance_mode,
            year=year,
        )
    )


@router.get("/statistics", response_model=DelegateStatistics)
async def get_statistics(
    jwt_service: FromDishka[JWTService],
    use_case: FromDishka[GetStatisticsUseCase],
    event_id: str | None = None,
    token: str | None = Depends(bearer_token),
) -> DelegateStatistics:
    """Delegate counts by type, attendance mode and nationality. Admin only."""
    require_admin(jwt_service, token)
    return await use_case.execute(GetStatisticsRequest(event_id=event_id))


@router.get("/email/{email}", response_model=DelegateResponse)
async def get_delegate_by_email(
    email: str,
    jwt_service: FromDishka[JWTService],
    use_case: FromDishka[GetDelegateByEmailUseCase],
    event_year: int | None = None,
    token: str | None = Depends(bearer_token),
) -> DelegateResponse:
    """Look a delegate up by email. Admin only."""
    require_admin(jwt_service, token)
    return await use_case.execute(
        GetDelegateByEmailRequest(email=email, event_year=event_year)
    )


@router.post("/login", response_model=LoginResponse)
async def login(
    request: LoginRequest, use_case: FromDishka[LoginUseCase]
) -> LoginResponse:
    """Password login for approved delegates. Public."""
    return await use_case.execute(request)


@router.post("/request-password-reset", response_model=PasswordResetMessage)
async def request_password_reset(
    request: RequestPasswordResetRequest,
    use_case: FromDishka[RequestPasswordResetUseCase],
) -> PasswordResetMessage:
    """Email a reset PIN. The response doesn't reveal whether the email exists."""
    return await use_case.execute(request)


@router.post("/confirm-password-reset", response_model=PasswordResetMessage)
async def confirm_password_reset(
    request: ConfirmPasswordResetRequest,
    use_case: FromDishka[ConfirmPasswordResetUseCase],
) -> PasswordResetMessage:
    """Set a new password using the emailed PIN. Public."""
    return await use_case.execute(request)


@router.post(
    "/delegate/{delegate_id}/push-token", response_model=RegisterPushTokenResponse
)
async def register_push_token(
    delegate_id: str,
    request: PushTokenAPIRequest,
    jwt_service: FromDishka[JWTService],
    use_case: FromDishka[RegisterPushTokenUseCase],
    token: str | None = Depends(bearer_token),
) -> RegisterPushTokenResponse:
    """Register a device token for push notifications. Any bearer token."""
    require_token(jwt_service, token)
    return await use_case.execute(
        RegisterPushTokenRequest(delegate_id=delegate_id, token=request.token)
    )


@router.post("/{delegate_id}/approve", response_model=DelegateResponse)
async def approve_delegate(
    delegate_id: str,
    request: ApproveAPIRequest,
    jwt_service: FromDishka[JWTService],
    use_case: FromDishka[ApproveDelegateUseCase],
    token: str | None = Depends(bearer_token),
) -> DelegateResponse:
    """Approve a registration. Admin only."""
    require_admin(jwt_service, token)
    return await use_case.execute(
        ApproveDelegateRequest(delegate_id=delegate_id, approved_by=request.approved_by)
    )


@router.post("/{delegate_id}/reject", response_model=DelegateResponse)
async def reject_delegate(
    delegate_id: str,
    request: RejectAPIRequest,
    jwt_service: FromDishka[JWTService],
    use_case: FromDishka[RejectDelegateUseCase],
    token: str | None = Depends(bearer_token),
) -> DelegateResponse:
    """Reject a registration with a reason. Admin only."""
    require_admin(jwt_service, token)
    return await use_case.execute(
        RejectDelegateRequest(
            delegate_id=delegate_id,
            rejection_reason=request.rejection_reason,
            rejected_by=request.rejected_by,
        )
    )


@router.post("/{delegate_id}/check-in", response_model=DelegateResponse)
async def check_in_delegate(
    delegate_id: str,
    jwt_service: FromDishka[JWTService],
    use_case: FromDishka[CheckInDelegateUseCase],
    request: CheckInAPIRequest | None = None,
    token: str | None = Depends(bearer_token),
) -> DelegateResponse:
    """Check an approved delegate in. Admin only.

    ``checked_in_by`` defaults to the subject of the caller's token.
    """
    payload = require_admin(jwt_service, token)
    body = request or CheckInAPIRequest()
    return await use_case.execute(
        CheckInDelegateRequest(
            delegate_id=delegate_id,
            checked_in_by=body.checked_in_by or payload.sub,
            check_in_location=body.check_in_location,
        )
    )


@router.get("/{delegate_id}/badge")
async def download_badge(
    delegate_id: str, use_case: FromDishka[DownloadBadgeUseCase]
) -> Response:
    """Printable PNG badge. Public."""
    badge = await use_case.execute(DownloadBadgeRequest(delegate_id=delegate_id))
    return Response(
        content=badge.content,
        media_type=badge.media_type,
        headers={"Content-Disposition": f'attachment; filename="{badge.filename}"'},
    )


@router.get("/{delegate_id}", response_model=DelegateResponse)
async def get_delegate(
    delegate_id: str,
    jwt_service: FromDishka[JWTService],
    use_case: FromDishka[GetDelegateUseCase],
    token: str | None = Depends(bearer_token),
) -> DelegateResponse:
    """Fetch a delegate. Admin only."""
    require_admin(jwt_service, token)
    return await use_case.execute(GetDelegateRequest(delegate_id=delegate_id))


@router.patch("/{delegate_id}", response_model=DelegateResponse)
async def update_delegate(
    delegate_id: str,
    changes: DelegateUpdate,
    jwt_service: FromDishka[JWTService],
    use_case: FromDishka[UpdateDelegateUseCase],
    token: str | None = Depends(bearer_token),
) -> DelegateResponse:
    """Edit a delegate's data. Admin only."""
    require_admin(jwt_service, token)
    return await use_case.execute(
        UpdateDelegateRequest(delegate_id=delegate_id, changes=changes)
    )


@router.delete("/{delegate_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_delegate(
    delegate_id: str,
    jwt_service: FromDishka[JWTService],
    use_case: FromDishka[DeleteDelegateUseCase],
    token: str | None = Depends(bearer_token),
) -> Response:
    """Delete a delegate. Admin only."""
    require_admin(jwt_service, token)
    await use_case.execute(DeleteDelegateRequest(delegate_id=delegate_id))
    return Response(status_code=status.HTTP_204_NO_CONTENT)
