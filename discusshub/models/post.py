from beanie import Document
from pydantic import Field
from typing import List
from datetime import datetime
from .comment import Comment

DEFAULT_CATEGORY = "general"

class Post(Document):
    """
    Đại diện cho một bài đăng trong collection 'posts'.
    Bình luận và phản hồi được lưu nhúng ngay trong tài liệu bài đăng.
    """
    title: str = Field(..., description="Tiêu đề bài đăng.")
    content: str = Field(..., description="Nội dung văn bản của bài đăng.")
    category: str = Field(default=DEFAULT_CATEGORY, description="Chuyên mục của bài đăng.")
    authorId: str = Field(..., description="ID của tác giả bài đăng.")
    comments: List[Comment] = Field(default_factory=list, description="Danh sách bình luận theo thứ tự thêm vào.")
    createdAt: datetime = Field(default_factory=datetime.utcnow, description="Thời điểm bài đăng được tạo.")

    class Settings:
        name = "posts"
        indexes = [
            "authorId",
            "category",
            "createdAt",
        ]
