"""Unit tests for RejectDelegateUseCase."""

import pydantic
import pytest

from summit.application.usecase.lifecycle import (
    RejectDelegateRequest,
    RejectDelegateUseCase,
)
from summit.domain.error import AlreadyInStateError
from summit.domain.repository import DelegateRepository
from summit.domain.service import EmailSender, PushSender
from summit.domain.value import DelegateStatus
from tests.conftest import make_delegate
from tests.harness import create_env_fixture

unit_env = create_env_fixture()

TOKEN = "ExpoPushToken[reject-test]"


class TestRejectDelegate:
    """Tests for rejecting a registration."""

    @pytest.mark.asyncio
    async def test_reject_records_reason_and_notifies(self, unit_env):
        # Arrange
        repo = await unit_env.get(DelegateRepository)
        use_case = await unit_env.get(RejectDelegateUseCase)
        email = await unit_env.get(EmailSender)
        push = await unit_env.get(PushSender)
        delegate = await repo.save(make_delegate(push_tokens=[TOKEN]))

        # Act
        result = await use_case.execute(
            RejectDelegateRequest(
                delegate_id=str(delegate.id),
                rejection_reason="Incomplete documents",
                rejected_by="admin-2",
            )
        )

        # Assert
        assert result.status == DelegateStatus.REJECTED
        assert result.rejection_reason == "Incomplete documents"
        assert result.rejected_by == "admin-2"
        assert result.rejection_date is not None
        [message] = email.sent
        assert message.subject == "Update on Your Registration Status"
        [notification] = push.sent
        assert notification["title"] == "Registration Update"
        assert notification["data"] == {
            "delegateId": str(delegate.id),
            "status": "rejected",
        }

    @pytest.mark.asyncio
    async def test_reject_after_approval(self, unit_env):
        repo = await unit_env.get(DelegateRepository)
        use_case = await unit_env.get(RejectDelegateUseCase)
        delegate = await repo.save(make_delegate(status=DelegateStatus.APPROVED))

        result = await use_case.execute(
            RejectDelegateRequest(
                delegate_id=str(delegate.id),
                rejection_reason="Seat limit reached",
                rejected_by="admin-2",
            )
        )

        assert result.status == DelegateStatus.REJECTED

    @pytest.mark.asyncio
    async def test_reject_twice(self, unit_env):
        repo = await unit_env.get(DelegateRepository)
        use_case = await unit_env.get(RejectDelegateUseCase)
        delegate = await repo.save(make_delegate(status=DelegateStatus.REJECTED))

        with pytest.raises(AlreadyInStateError):
            await use_case.execute(
                RejectDelegateRequest(
                    delegate_id=str(delegate.id),
                    rejection_reason="Again",
                    rejected_by="admin-2",
                )
            )

    def test_reason_is_required(self):
        with pytest.raises(pydantic.ValidationError):
            RejectDelegateRequest(
                delegate_id="x", rejection_reason="", rejected_by="admin-2"
            )
