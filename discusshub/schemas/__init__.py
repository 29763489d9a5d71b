from .auth_schema import (
    UserCreate,
    UserLogin,
    UserPublic,
    TokenResponse,
    ChangePasswordRequest,
    MessageResponse
)
from .comment_schema import CommentCreate, ReplyCreate, UserSummary, AuthorPublic, CommentPublic, ReplyPublic
from .post_schema import PostCreate, PostPublic
from .message_schema import MessageCreate, MessagePublic
