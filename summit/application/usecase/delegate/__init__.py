"""Delegate use cases."""

from .delete_delegate import DeleteDelegateRequest, DeleteDelegateUseCase
from .download_badge import (
    DownloadBadgeRequest,
    DownloadBadgeResponse,
    DownloadBadgeUseCase,
)
from .fields import DelegateFields, DelegateResponse, DelegateUpdate
from .get_delegate import (
    GetDelegateByEmailRequest,
    GetDelegateByEmailUseCase,
    GetDelegateRequest,
    GetDelegateUseCase,
)
from .get_statistics import GetStatisticsRequest, GetStatisticsUseCase
from .list_delegates import (
    ListDelegatesRequest,
    ListDelegatesResponse,
    ListDelegatesUseCase,
)
from .register_delegate import RegisterDelegateRequest, RegisterDelegateUseCase
from .register_push_token import (
    RegisterPushTokenRequest,
    RegisterPushTokenResponse,
    RegisterPushTokenUseCase,
)
from .update_delegate import UpdateDelegateRequest, UpdateDelegateUseCase

__all__ = [
    "DelegateFields",
    "DelegateResponse",
    "DelegateUpdate",
    "DeleteDelegateRequest",
    "DeleteDelegateUseCase",
    "DownloadBadgeRequest",
    "DownloadBadgeResponse",
    "DownloadBadgeUseCase",
    "GetDelegateByEmailRequest",
    "GetDelegateByEmailUseCase",
    "GetDelegateRequest",
    "GetDelegateUseCase",
    "GetStatisticsRequest",
    "GetStatisticsUseCase",
    "ListDelegatesRequest",
    "ListDelegatesResponse",
    "ListDelegatesUseCase",
    "RegisterDelegateRequest",
    "RegisterDelegateUseCase",
    "RegisterPushTokenRequest",
    "RegisterPushTokenResponse",
    "RegisterPushTokenUseCase",
    "UpdateDelegateRequest",
    "UpdateDelegateUseCase",
]
