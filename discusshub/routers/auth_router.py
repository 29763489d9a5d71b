from fastapi import APIRouter, Depends
from ..services import AuthService, jwt_service
from ..security import get_current_user
from ..models import User
from ..schemas import (
    UserCreate,
    UserPublic,
    UserLogin,
    TokenResponse,
    ChangePasswordRequest,
    MessageResponse
)
from ..exceptions import AuthenticationError
from ..utils import map_user_to_public

router = APIRouter(tags=["Auth"])

@router.post("/register", response_model=UserPublic, status_code=201)
async def register_user(user_data: UserCreate):
    """
    Endpoint để đăng ký người dùng mới.
    - Trả về thông tin người dùng công khai nếu thành công.
    - Trả về 409 nếu tên người dùng hoặc email đã tồn tại.
    """
    new_user = await AuthService.register_user(
        username=user_data.username,
        email=user_data.email,
        password=user_data.password
    )
    return map_user_to_public(new_user)

@router.post("/login", response_model=TokenResponse)
async def login_for_access_token(login_data: UserLogin):
    """
    Endpoint để đăng nhập và nhận token truy cập.
    Token mang id người dùng trong claim "sub".
    """
    user = await AuthService.login_user(
        username=login_data.username,
        password=login_data.password
    )
    if not user:
        raise AuthenticationError("Invalid username or password")

    access_token = jwt_service.create_access_token(data={"sub": str(user.id)})
    return TokenResponse(access_token=access_token)

@router.get("/me", response_model=UserPublic)
async def read_current_user(current_user: User = Depends(get_current_user)):
    return map_user_to_public(current_user)

@router.post("/change-password", response_model=MessageResponse)
async def change_password(
    payload: ChangePasswordRequest,
    current_user: User = Depends(get_current_user)
):
    """Đổi mật khẩu của người dùng hiện tại."""
    return await AuthService.change_password(
        user=current_user,
        current_password=payload.current_password,
        new_password=payload.new_password
    )
