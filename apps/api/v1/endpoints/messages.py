"""Chat endpoints."""

from typing import List, Optional

from fastapi import APIRouter, Depends, File, Query, UploadFile

from core.application.dtos.message_dto import (
    ConversationDTO,
    MessageDTO,
    ReactRequest,
    SendMessageRequest,
    StartConversationRequest,
)
from core.application.dtos.profile_dto import ProfileDTO
from core.application.dtos.return_dto import UploadedPhoto
from core.application.services import MessagingService

from apps.api.deps import get_current_user, get_messaging_service

router = APIRouter(tags=["messages"])


@router.get("/conversations", response_model=List[ConversationDTO])
async def list_conversations(
    search: Optional[str] = Query(default=None, description="Counterpart name or product title"),
    user: ProfileDTO = Depends(get_current_user),
    service: MessagingService = Depends(get_messaging_service),
) -> List[ConversationDTO]:
    return await service.list_conversations(user.id, search)


@router.post("/conversations", response_model=ConversationDTO)
async def start_conversation(
    request: StartConversationRequest,
    user: ProfileDTO = Depends(get_current_user),
    service: MessagingService = Depends(get_messaging_service),
) -> ConversationDTO:
    """Open the chat with a product's seller, reusing an existing one."""
    return await service.start_from_product(user.id, request.product_id)


@router.get("/conversations/{conversation_id}/messages", response_model=List[MessageDTO])
async def list_messages(
    conversation_id: str,
    user: ProfileDTO = Depends(get_current_user),
    service: MessagingService = Depends(get_messaging_service),
) -> List[MessageDTO]:
    return await service.list_messages(user.id, conversation_id)


@router.post("/conversations/{conversation_id}/read")
async def mark_read(
    conversation_id: str,
    user: ProfileDTO = Depends(get_current_user),
    service: MessagingService = Depends(get_messaging_service),
) -> dict:
    return {"marked": await service.mark_read(user.id, conversation_id)}


@router.post("/conversations/{conversation_id}/messages", response_model=MessageDTO, status_code=201)
async def send_message(
    conversation_id: str,
    request: SendMessageRequest,
    user: ProfileDTO = Depends(get_current_user),
    service: MessagingService = Depends(get_messaging_service),
) -> MessageDTO:
    return await service.send_text(user.id, conversation_id, request.content)


@router.post("/conversations/{conversation_id}/images", response_model=MessageDTO, status_code=201)
async def send_image(
    conversation_id: str,
    image: UploadFile = File(...),
    user: ProfileDTO = Depends(get_current_user),
    service: MessagingService = Depends(get_messaging_service),
) -> MessageDTO:
    photo = UploadedPhoto(
        filename=image.filename or "image.jpg",
        content=await image.read(),
        content_type=image.content_type,
    )
    return await service.send_image(user.id, conversation_id, photo)


@router.post("/messages/{message_id}/reactions", response_model=MessageDTO)
async def react(
    message_id: str,
    request: ReactRequest,
    user: ProfileDTO = Depends(get_current_user),
    service: MessagingService = Depends(get_messaging_service),
) -> MessageDTO:
    return await service.react(user.id, message_id, request.reaction)


@router.delete("/messages/{message_id}", response_model=MessageDTO)
async def delete_message(
    message_id: str,
    user: ProfileDTO = Depends(get_current_user),
    service: MessagingService = Depends(get_messaging_service),
) -> MessageDTO:
    """Soft-delete one of the caller's messages."""
    return await service.delete_message(user.id, message_id)
