"""
Users API Router - recipient directory for composing messages.
"""

from fastapi import APIRouter, Depends
from dishka.integrations.fastapi import FromDishka, inject

from src.application.dto.message import ParticipantDTO
from src.application.queries.users import ListRecipientsHandler, ListRecipientsQuery
from src.presentation.dependencies.auth import AuthUser, get_current_user

router = APIRouter(prefix="/users", tags=["users"])


@router.get("/recipients", response_model=list[ParticipantDTO])
@inject
async def list_recipients(
    handler: FromDishka[ListRecipientsHandler],
    current_user: AuthUser = Depends(get_current_user),
):
    """Every user except the caller, ordered by name."""
    participants = await handler.execute(ListRecipientsQuery(user_id=current_user.id))
    return [ParticipantDTO.from_entity(p) for p in participants]
