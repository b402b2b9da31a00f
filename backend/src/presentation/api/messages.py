"""
Messages API Router - FastAPI endpoints for internal messaging.

- Receives handlers via Dependency Injection (Dishka)
- Thin layer: only handles HTTP concerns (request/response)
- Delegates business rules to Application layer handlers
- DomainError is not caught here; the app-level handler maps error.kind
  to the status code and JSON body

Flow:
  HTTP Request → Router → Command/Query → Handler → Repository → Database
                                   ↓
  HTTP Response ← Router ← Result ←
"""

from typing import Optional
from fastapi import APIRouter, Depends, status
from dishka.integrations.fastapi import FromDishka, inject
from pydantic import BaseModel

from src.application.commands.messages import (
    DeleteMessageCommand,
    DeleteMessageHandler,
    MarkMessageAsReadCommand,
    MarkMessageAsReadHandler,
    SendMessageCommand,
    SendMessageHandler,
)
from src.application.queries.messages import (
    GetInboxMessagesHandler,
    GetInboxMessagesQuery,
    GetSentMessagesHandler,
    GetSentMessagesQuery,
)
from src.application.dto.message import MessageDTO, MessageWithParticipantsDTO
from src.domain.value_objects.message_id import MessageId
from src.presentation.dependencies.auth import AuthUser, get_current_user

# ==================== REQUEST/RESPONSE MODELS ====================

class SendMessageRequest(BaseModel):
    """
    Request body for sending a message. The sender is always the caller.

    Fields are optional so that missing values reach the message validation
    and are reported together with any other violations.
    """

    subject: Optional[str] = None
    body: Optional[str] = None
    receiver_id: Optional[str] = None

class DeleteMessageResponse(BaseModel):
    message: str

router = APIRouter(prefix="/messages", tags=["messages"])

# ==================== ENDPOINTS ====================

@router.get("", response_model=list[MessageWithParticipantsDTO])
@inject
async def get_inbox(
    handler: FromDishka[GetInboxMessagesHandler],
    current_user: AuthUser = Depends(get_current_user),
):
    """Messages received by the caller, newest first."""
    messages = await handler.execute(GetInboxMessagesQuery(user_id=current_user.id))
    return [MessageWithParticipantsDTO.from_entity(m) for m in messages]

@router.post(
    "",
    response_model=MessageWithParticipantsDTO,
    status_code=status.HTTP_201_CREATED,
)
@inject
async def send_message(
    request: SendMessageRequest,
    handler: FromDishka[SendMessageHandler],
    current_user: AuthUser = Depends(get_current_user),
):
    message = await handler.execute(
        SendMessageCommand(
            subject=request.subject,
            body=request.body,
            sender_id=current_user.id,
            receiver_id=request.receiver_id,
        )
    )
    return MessageWithParticipantsDTO.from_entity(message)

@router.get("/sent", response_model=list[MessageWithParticipantsDTO])
@inject
async def get_sent(
    handler: FromDishka[GetSentMessagesHandler],
    current_user: AuthUser = Depends(get_current_user),
):
    """Messages sent by the caller, newest first."""
    messages = await handler.execute(GetSentMessagesQuery(user_id=current_user.id))
    return [MessageWithParticipantsDTO.from_entity(m) for m in messages]

@router.patch("/{message_id}/read", response_model=MessageDTO)
@inject
async def mark_message_as_read(
    message_id: str,
    handler: FromDishka[MarkMessageAsReadHandler],
    current_user: AuthUser = Depends(get_current_user),
):
    message = await handler.execute(
        MarkMessageAsReadCommand(
            message_id=MessageId.parse(message_id),
            user_id=current_user.id,
        )
    )
    return MessageDTO.from_entity(message)

@router.delete("/{message_id}", response_model=DeleteMessageResponse)
@inject
async def delete_message(
    message_id: str,
    handler: FromDishka[DeleteMessageHandler],
    current_user: AuthUser = Depends(get_current_user),
):
    await handler.execute(
        DeleteMessageCommand(
            message_id=MessageId.parse(message_id),
            user_id=current_user.id,
        )
    )
    return DeleteMessageResponse(message="Message deleted")
