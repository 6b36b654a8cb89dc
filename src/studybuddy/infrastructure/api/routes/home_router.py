"""Protected demonstration route."""

from fastapi import APIRouter

from studybuddy.infrastructure.api.dependencies import CurrentAccount
from studybuddy.infrastructure.api.schemas import MessageResponse

router = APIRouter()


@router.get("/protected", response_model=MessageResponse)
async def protected(current: CurrentAccount) -> MessageResponse:
    """Greet an authenticated caller."""
    return MessageResponse(message="Welcome to Study Buddy Application")
