"""Registration lifecycle use cases."""

from .approve_delegate import ApproveDelegateRequest, ApproveDelegateUseCase
from .check_in_delegate import CheckInDelegateRequest, CheckInDelegateUseCase
from .reject_delegate import RejectDelegateRequest, RejectDelegateUseCase

__all__ = [
    "ApproveDelegateRequest",
    "ApproveDelegateUseCase",
    "CheckInDelegateRequest",
    "CheckInDelegateUseCase",
    "RejectDelegateRequest",
    "RejectDelegateUseCase",
]
