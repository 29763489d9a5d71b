import logging
from datetime import datetime
from typing import Optional

from beanie import PydanticObjectId
from passlib.context import CryptContext

from ..exceptions import ConflictError, ForbiddenError, InvalidInputError
from ..models.user import User

logger = logging.getLogger(__name__)

# Thiết lập ngữ cảnh băm mật khẩu
pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")

MIN_PASSWORD_LENGTH = 6

class AuthService:

    @staticmethod
    def verify_password(plain_password, hashed_password):
        """Xác minh mật khẩu thuần túy với mật khẩu đã được băm."""
        return pwd_context.verify(plain_password, hashed_password)

    @staticmethod
    def get_password_hash(password):
        """Băm một mật khẩu thuần túy."""
        return pwd_context.hash(password)

    @staticmethod
    def _check_password_strength(password: str):
        if not password or len(password) < MIN_PASSWORD_LENGTH:
            raise InvalidInputError(f"Password must be at least {MIN_PASSWORD_LENGTH} characters long")

    @staticmethod
    async def get_user_by_id(user_id: str) -> Optional[User]:
        """Tra cứu người dùng theo id; trả về None nếu id sai định dạng hoặc không tồn tại."""
        if not PydanticObjectId.is_valid(user_id):
            return None
        return await User.get(PydanticObjectId(user_id))

    @staticmethod
    async def register_user(username: str, email: str, password: str) -> User:
        """
        Xử lý đăng ký người dùng mới.
        Kiểm tra tên người dùng/email đã tồn tại, băm mật khẩu và tạo người dùng.
        """
        username = (username or "").strip()
        if not username:
            raise InvalidInputError("Username is required")
        AuthService._check_password_strength(password)

        if await User.find_one(User.username == username):
            raise ConflictError(f"Username '{username}' is already taken")
        if await User.find_one(User.email == email):
            raise ConflictError(f"Email '{email}' is already registered")

        # Salt được passlib xử lý tự động và là một phần của chuỗi băm.
        new_user = User(
            username=username,
            email=email,
            hashedPassword=AuthService.get_password_hash(password),
        )
        await new_user.insert()
        logger.info("Registered user %s", username)
        return new_user

    @staticmethod
    async def login_user(username: str, password: str) -> Optional[User]:
        """
        Xử lý đăng nhập của người dùng.
        Trả về None khi không tìm thấy người dùng hoặc mật khẩu sai.
        """
        user = await User.find_one(User.username == username)
        if not user:
            return None
        if not AuthService.verify_password(password, user.hashedPassword):
            return None
        return user

    @staticmethod
    async def change_password(user: User, current_password: str, new_password: str):
        """Đổi mật khẩu; đây là thay đổi duy nhất được phép trên tài khoản."""
        if not AuthService.verify_password(current_password, user.hashedPassword):
            raise ForbiddenError("Current password is incorrect")
        AuthService._check_password_strength(new_password)

        await user.set({
            "hashedPassword": AuthService.get_password_hash(new_password),
            "updatedAt": datetime.utcnow(),
        })
        logger.info("Password changed for user %s", user.id)
        return {"message": "Password updated successfully"}
