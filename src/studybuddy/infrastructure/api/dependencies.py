"""FastAPI dependencies for authentication.

Provides dependencies for the token service, the auth service and the
authenticated account of a request.
"""

from typing import Annotated

from fastapi import Depends, Header, Request
from sqlalchemy.ext.asyncio import AsyncSession

from studybuddy.domain.services import AuthService
from studybuddy.infrastructure.auth import AuthenticatedAccount, Authenticator, JWTService
from studybuddy.infrastructure.persistence.database import get_db_session


def get_jwt_service(request: Request) -> JWTService:
    """Get the token service configured on the application at startup."""
    return request.app.state.jwt_service


async def get_current_account(
    authorization: Annotated[str | None, Header()] = None,
    session: AsyncSession = Depends(get_db_session),
    jwt_service: JWTService = Depends(get_jwt_service),
) -> AuthenticatedAccount:
    """Authenticate the request from its Authorization header.

    Raises:
        AuthenticationError: Translated to 401 by the application's
            exception handlers.
    """
    authenticator = Authenticator(jwt_service)
    return await authenticator.authenticate(authorization, session)


def get_auth_service(
    session: AsyncSession = Depends(get_db_session),
    jwt_service: JWTService = Depends(get_jwt_service),
) -> AuthService:
    """Build an AuthService bound to the request session."""
    return AuthService(session, jwt_service)


# Type aliases for dependency injection
CurrentAccount = Annotated[AuthenticatedAccount, Depends(get_current_account)]
AuthServiceDep = Annotated[AuthService, Depends(get_auth_service)]
