"""Authentication API routes.

Provides endpoints for signup, login, logout and the current account.
"""

from fastapi import APIRouter, status
from fastapi.responses import JSONResponse

from studybuddy.core.logging import get_logger
from studybuddy.domain.services import InvalidCredentialsError, SignupValidationError
from studybuddy.infrastructure.api.dependencies import AuthServiceDep, CurrentAccount
from studybuddy.infrastructure.api.schemas import (
    AuthResponse,
    ErrorResponse,
    LoginRequest,
    MeResponse,
    MessageResponse,
    SignupRequest,
    UserPayload,
    ValidationErrorResponse,
)

logger = get_logger(__name__)

router = APIRouter()


@router.post(
    "/signup",
    status_code=status.HTTP_201_CREATED,
    response_model=AuthResponse,
    responses={422: {"model": ValidationErrorResponse}},
)
async def signup(request: SignupRequest, auth_service: AuthServiceDep) -> AuthResponse | JSONResponse:
    """Create an account and return a token for it."""
    try:
        result = await auth_service.signup(
            request.email, request.password, request.password_confirmation
        )
    except SignupValidationError as e:
        return JSONResponse(
            status_code=422,
            content={"error": "User creation failed", "details": e.details},
        )

    return AuthResponse(
        message="User created successfully",
        user=UserPayload(**result.account.to_dict()),
        token=result.token,
    )


@router.post(
    "/login",
    status_code=status.HTTP_200_OK,
    response_model=AuthResponse,
    responses={401: {"model": ErrorResponse}},
)
async def login(request: LoginRequest, auth_service: AuthServiceDep) -> AuthResponse | JSONResponse:
    """Authenticate with email and password and return a fresh token.

    Unknown email and wrong password produce the same response.
    """
    try:
        result = await auth_service.login(request.email, request.password)
    except InvalidCredentialsError as e:
        return JSONResponse(
            status_code=status.HTTP_401_UNAUTHORIZED,
            content={"error": e.message},
        )

    return AuthResponse(
        message="Login successful",
        user=UserPayload(**result.account.to_dict()),
        token=result.token,
    )


@router.delete("/logout", response_model=MessageResponse)
async def logout(current: CurrentAccount, auth_service: AuthServiceDep) -> MessageResponse:
    """Revoke the token used for this request."""
    await auth_service.logout(current, current.token)
    return MessageResponse(message="Logged out successfully")


@router.get("/me", response_model=MeResponse)
async def me(current: CurrentAccount, auth_service: AuthServiceDep) -> MeResponse:
    """Return the authenticated account."""
    return MeResponse(user=UserPayload(**auth_service.who_am_i(current)))
