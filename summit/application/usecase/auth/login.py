"""Delegate login use case."""

import logfire
from pydantic import BaseModel

from summit.application.usecase.delegate.fields import DelegateResponse
from summit.domain.service import CredentialService, JWTService


class LoginRequest(BaseModel):
    """Login request."""

    email: str
    password: str


class LoginResponse(BaseModel):
    """Login response."""

    user: DelegateResponse
    token: str
    expires_in: int


class LoginUseCase:
    """Use case for password login of approved delegates."""

    def __init__(
        self, credential_service: CredentialService, jwt_service: JWTService
    ) -> None:
        """Initialize login use case.

        Args:
            credential_service: Password verification
            jwt_service: JWT token domain service
        """
        self.credential_service = credential_service
        self.jwt_service = jwt_service

    async def execute(self, request: LoginRequest) -> LoginResponse:
        """Authenticate and issue a bearer token.

        Raises:
            UnauthorizedError: If the credentials are wrong or the delegate
                is not approved
        """
        delegate = await self.credential_service.authenticate(
            request.email, request.password
        )
        token = self.jwt_service.create_delegate_token(delegate)
        logfire.info("Delegate logged in", delegate_id=str(delegate.id))
        return LoginResponse(
            user=DelegateResponse.from_domain(delegate),
            token=token,
            expires_in=self.jwt_service.expires_in,
        )
