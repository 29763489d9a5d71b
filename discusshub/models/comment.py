from bson import ObjectId
from pydantic import Field, BaseModel
from typing import List
from datetime import datetime


def new_embedded_id() -> str:
    """Sinh id cho phần tử nhúng; chỉ cần duy nhất trong phạm vi phần tử cha."""
    return str(ObjectId())


class Reply(BaseModel):
    """Một phản hồi nằm trong danh sách replies của bình luận."""
    id: str = Field(default_factory=new_embedded_id, description="ID của phản hồi, duy nhất trong bình luận cha.")
    content: str = Field(..., description="Nội dung phản hồi.")
    authorId: str = Field(..., description="ID của tác giả phản hồi.")
    createdAt: datetime = Field(default_factory=datetime.utcnow, description="Thời điểm phản hồi được tạo.")


class Comment(BaseModel):
    """
    Một bình luận được nhúng trong bài đăng.
    Xóa bình luận sẽ xóa luôn toàn bộ phản hồi bên trong.
    """
    id: str = Field(default_factory=new_embedded_id, description="ID của bình luận, duy nhất trong bài đăng.")
    content: str = Field(..., description="Nội dung bình luận.")
    authorId: str = Field(..., description="ID của tác giả bình luận.")
    replies: List[Reply] = Field(default_factory=list, description="Danh sách phản hồi theo thứ tự thêm vào.")
    createdAt: datetime = Field(default_factory=datetime.utcnow, description="Thời điểm bình luận được tạo.")

