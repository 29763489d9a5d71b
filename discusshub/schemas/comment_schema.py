from pydantic import BaseModel, Field
from typing import List, Optional
from datetime import datetime

class CommentCreate(BaseModel):
    content: str = Field(..., description="Nội dung bình luận")

class ReplyCreate(BaseModel):
    content: str = Field(..., description="Nội dung phản hồi")

class UserSummary(BaseModel):
    """Thông tin hiển thị tối thiểu của người viết bình luận, phản hồi hoặc tin nhắn."""
    id: str
    username: str

class AuthorPublic(UserSummary):
    """Tác giả bài đăng: có thêm email."""
    email: str

class ReplyPublic(BaseModel):
    id: str
    content: str
    author: Optional[UserSummary]
    createdAt: datetime

class CommentPublic(BaseModel):
    id: str
    content: str
    author: Optional[UserSummary]
    replies: List[ReplyPublic] = []
    createdAt: datetime
