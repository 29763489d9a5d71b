from .auth_service import AuthService
from .jwt_service import create_access_token, decode_access_token
from .message_service import MessageService
from .post_service import PostService
from .permissions import DeleteGrant, resolve_delete_grant

__all__ = [
    "AuthService",
    "create_access_token",
    "decode_access_token",
    "MessageService",
    "PostService",
    "DeleteGrant",
    "resolve_delete_grant"
]
