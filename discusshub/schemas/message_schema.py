from pydantic import BaseModel, Field
from typing import Optional
from datetime import datetime
from .comment_schema import UserSummary

class MessageCreate(BaseModel):
    recipientUsername: str = Field(..., description="Tên đăng nhập của người nhận")
    content: str = Field(..., description="Nội dung tin nhắn")

class MessagePublic(BaseModel):
    id: str
    sender: Optional[UserSummary]
    recipient: Optional[UserSummary]
    content: str
    read: bool
    createdAt: datetime
