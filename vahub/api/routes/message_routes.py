"""
Message Routes

GET /messages/{user_id} - Every message sent or received by the user, oldest first
POST /messages - Send a message
"""

from fastapi import APIRouter, Depends
from typing import List

from vahub.api.deps import get_repositories
from vahub.db.repositories import Repositories
from vahub.schemas.schemas import MessageCreate, MessageResponse, IdResponse

router = APIRouter(prefix="/messages", tags=["Messages"])


@router.get("/{user_id}", response_model=List[MessageResponse])
async def get_messages(user_id: str, repos: Repositories = Depends(get_repositories, scope="function")):
    """Flat list; conversations are grouped by the client."""
    return repos.messages.list_for_user(user_id)


@router.post("", response_model=IdResponse)
async def send_message(message: MessageCreate, repos: Repositories = Depends(get_repositories, scope="function")):
    message_id = repos.messages.create(message.sender_id, message.receiver_id, message.message_body)
    return IdResponse(id=message_id)
