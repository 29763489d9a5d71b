import logging
from typing import Awaitable, Callable, Optional
from beanie import PydanticObjectId
from fastapi import Depends
from fastapi.security import OAuth2PasswordBearer
from .services import jwt_service
from .services.auth_service import AuthService
from .models import User
from .exceptions import (
    AuthenticationError,
    MalformedCredentialError,
    MissingCredentialError,
    UnknownSubjectError,
)

logger = logging.getLogger(__name__)

# auto_error=False để tự báo MissingCredential thay vì lỗi mặc định của FastAPI
oauth2_scheme = OAuth2PasswordBearer(tokenUrl="/api/auth/login", auto_error=False)

UserLoader = Callable[[str], Awaitable[Optional[User]]]

async def resolve_credential(token: Optional[str], load_user: UserLoader) -> User:
    """
    Xác thực một bearer token và trả về người dùng tương ứng.
    Không phụ thuộc vào FastAPI; load_user được truyền vào để tra cứu người dùng theo id.

    Raises:
        MissingCredentialError, MalformedCredentialError,
        ExpiredCredentialError, UnknownSubjectError
    """
    if not token or not token.strip():
        raise MissingCredentialError()

    try:
        token_data = jwt_service.decode_access_token(token.strip())
        if not PydanticObjectId.is_valid(token_data.subject):
            raise MalformedCredentialError()

        user = await load_user(token_data.subject)
        if user is None:
            raise UnknownSubjectError()
        return user
    except AuthenticationError as e:
        logger.warning("Authentication failed: %s", e.message)
        raise

async def get_current_user(token: Optional[str] = Depends(oauth2_scheme)) -> User:
    return await resolve_credential(token, AuthService.get_user_by_id)
