from datetime import datetime, timedelta
from typing import Optional
from jose import ExpiredSignatureError, JWTError, jwt
from pydantic import BaseModel

from .. import configs
from ..exceptions import ExpiredCredentialError, MalformedCredentialError

class TokenData(BaseModel):
    """Mô hình dữ liệu cho payload được giải mã từ token."""
    subject: str

def create_access_token(data: dict, expires_delta: Optional[timedelta] = None) -> str:
    """
    Tạo một token truy cập JWT mới.

    Args:
        data (dict): Dữ liệu (payload) để mã hóa vào token, thường là {"sub": <user id>}.
        expires_delta (Optional[timedelta]): Thời gian tồn tại của token.
            Mặc định lấy ACCESS_TOKEN_EXPIRE_MINUTES từ cấu hình.

    Returns:
        str: Token JWT đã được mã hóa.
    """
    to_encode = data.copy()
    if expires_delta is None:
        expires_delta = timedelta(minutes=configs.ACCESS_TOKEN_EXPIRE_MINUTES)
    to_encode.update({"exp": datetime.utcnow() + expires_delta})

    return jwt.encode(to_encode, configs.require_secret_key(), algorithm=configs.ALGORITHM)


def decode_access_token(token: str) -> TokenData:
    """
    Giải mã một token truy cập JWT.

    Raises:
        ExpiredCredentialError: token đã hết hạn.
        MalformedCredentialError: chữ ký sai, sai định dạng, thiếu claim "sub" hoặc "exp".
        ValueError: SECRET_KEY chưa được cấu hình.
    """
    secret_key = configs.require_secret_key()
    try:
        payload = jwt.decode(
            token,
            secret_key,
            algorithms=[configs.ALGORITHM],
            options={"require_exp": True}
        )
    except ExpiredSignatureError:
        raise ExpiredCredentialError()
    except JWTError:
        raise MalformedCredentialError()

    subject = payload.get("sub")
    if not subject or not isinstance(subject, str):
        raise MalformedCredentialError()
    return TokenData(subject=subject)
