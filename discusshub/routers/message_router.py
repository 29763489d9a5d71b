from fastapi import APIRouter, Depends
from typing import List
from ..services import MessageService
from ..schemas import MessageCreate, MessagePublic, MessageResponse
from ..models import User
from ..security import get_current_user

router = APIRouter(tags=["Message"])

@router.post("", response_model=MessagePublic, status_code=201)
async def send_message(
    message_data: MessageCreate,
    current_user: User = Depends(get_current_user)
):
    """Gửi tin nhắn trực tiếp tới một người dùng theo tên đăng nhập."""
    return await MessageService.send_message(
        sender_id=str(current_user.id),
        recipient_username=message_data.recipientUsername,
        content=message_data.content
    )

@router.get("", response_model=List[MessagePublic])
async def list_messages(current_user: User = Depends(get_current_user)):
    """Lấy lịch sử tin nhắn đã gửi và đã nhận của người dùng hiện tại."""
    return await MessageService.list_messages(user_id=str(current_user.id))

@router.patch("/{message_id}/read", response_model=MessagePublic)
async def mark_message_read(
    message_id: str,
    current_user: User = Depends(get_current_user)
):
    return await MessageService.mark_read(
        message_id=message_id,
        acting_user_id=str(current_user.id)
    )

@router.delete("/{message_id}", response_model=MessageResponse)
async def delete_message(
    message_id: str,
    current_user: User = Depends(get_current_user)
):
    return await MessageService.delete_message(
        message_id=message_id,
        acting_user_id=str(current_user.id)
    )
