from beanie import Document
from pydantic import Field
from datetime import datetime

class Message(Document):
    """
    Đại diện cho một tin nhắn trực tiếp giữa hai người dùng.
    """
    senderId: str = Field(..., description="ID của người gửi tin nhắn.")
    recipientId: str = Field(..., description="ID của người nhận tin nhắn.")
    content: str = Field(..., description="Nội dung văn bản của tin nhắn.")
    read: bool = Field(default=False, description="Người nhận đã đọc tin nhắn hay chưa.")
    createdAt: datetime = Field(default_factory=datetime.utcnow, description="Thời điểm tin nhắn được gửi.")

    class Settings:
        name = "messages"
        indexes = [
            "senderId",
            "recipientId",
            "createdAt",
        ]
