from beanie import Document
from pydantic import Field, EmailStr
from datetime import datetime

class User(Document):
    """
    Đại diện cho một người dùng trong collection 'users'.
    Các bản ghi khác chỉ tham chiếu tới người dùng qua id, không nhúng theo giá trị.
    """
    username: str = Field(..., description="Tên đăng nhập duy nhất của người dùng.")
    email: EmailStr = Field(..., description="Địa chỉ email duy nhất của người dùng.")
    hashedPassword: str = Field(..., description="Mật khẩu đã được băm của người dùng.")
    createdAt: datetime = Field(default_factory=datetime.utcnow, description="Thời điểm người dùng được tạo.")
    updatedAt: datetime = Field(default_factory=datetime.utcnow, description="Thời điểm mật khẩu được đổi lần cuối.")

    class Settings:
        name = "users"
        # Thêm các chỉ mục để tối ưu hóa truy vấn
        indexes = [
            "username",
            "email",
        ]
