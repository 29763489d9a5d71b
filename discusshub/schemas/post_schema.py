from pydantic import BaseModel, Field
from typing import List, Optional
from datetime import datetime
from .comment_schema import AuthorPublic, CommentPublic

class PostCreate(BaseModel):
    title: str = Field(..., description="Tiêu đề bài đăng")
    content: str = Field(..., description="Nội dung bài đăng")
    category: Optional[str] = Field(default=None, description="Chuyên mục, mặc định là 'general'")

class PostPublic(BaseModel):
    id: str
    title: str
    content: str
    category: str
    author: Optional[AuthorPublic]
    comments: List[CommentPublic] = []
    createdAt: datetime
