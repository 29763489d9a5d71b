import logging
from typing import List
from ..models import Message, User
from ..schemas import MessagePublic
from ..exceptions import ForbiddenError, NotFoundError
from ..utils import parse_object_id, require_text
from .hydration import hydrate_message, hydrate_messages

logger = logging.getLogger(__name__)

class MessageService:

    @staticmethod
    async def _get_message(message_id: str) -> Message:
        message = await Message.get(parse_object_id(message_id, "message"))
        if not message:
            raise NotFoundError("Message not found")
        return message

    @staticmethod
    async def send_message(sender_id: str, recipient_username: str, content: str) -> MessagePublic:
        """
        Gửi tin nhắn trực tiếp tới người dùng có tên đăng nhập recipient_username.
        Không ghi gì vào cơ sở dữ liệu nếu người nhận không tồn tại.
        """
        content = require_text(content, "Message content is required")
        recipient = await User.find_one(User.username == recipient_username)
        if not recipient:
            raise NotFoundError("Recipient not found")

        message = Message(
            senderId=sender_id,
            recipientId=str(recipient.id),
            content=content,
        )
        await message.insert()
        logger.info("Message %s sent from %s to %s", message.id, sender_id, recipient.id)
        return await hydrate_message(message)

    @staticmethod
    async def list_messages(user_id: str) -> List[MessagePublic]:
        """Lấy tất cả tin nhắn mà người dùng đã gửi hoặc nhận, mới nhất trước."""
        messages = await Message.find(
            {"$or": [{"senderId": user_id}, {"recipientId": user_id}]},
            sort="-createdAt"
        ).to_list()
        return await hydrate_messages(messages)

    @staticmethod
    async def mark_read(message_id: str, acting_user_id: str) -> MessagePublic:
        """Đánh dấu đã đọc. Chỉ người nhận được phép; gọi lại nhiều lần không gây lỗi."""
        message = await MessageService._get_message(message_id)
        if message.recipientId != acting_user_id:
            raise ForbiddenError("Not authorized to mark this message as read")

        if not message.read:
            await message.set({"read": True})
        return await hydrate_message(message)

    @staticmethod
    async def delete_message(message_id: str, acting_user_id: str):
        message = await MessageService._get_message(message_id)
        if acting_user_id not in (message.senderId, message.recipientId):
            raise ForbiddenError("Not authorized to delete this message")

        await message.delete()
        logger.info("Message %s deleted by %s", message_id, acting_user_id)
        return {"message": "Message deleted successfully"}
