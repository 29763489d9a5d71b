from typing import Dict, Optional
from ..schemas import (
    AuthorPublic,
    UserSummary,
    CommentPublic,
    MessagePublic,
    PostPublic,
    ReplyPublic,
    UserPublic
)
from ..models.comment import Comment, Reply
from ..models.message import Message
from ..models.post import Post
from ..models.user import User

# Các hàm trợ giúp chuyển mô hình lưu trữ thành schema công khai.
# users_by_id ánh xạ id (chuỗi) -> User; id không có trong bảng được hiển thị là null.

def map_user_to_public(user: User) -> UserPublic:
    """Chuyển đổi User thành UserPublic, bỏ mật khẩu đã băm."""
    return UserPublic(
        id=str(user.id),
        username=user.username,
        email=user.email,
        createdAt=user.createdAt
    )

def map_user_to_summary(user_id: str, users_by_id: Dict[str, User]) -> Optional[UserSummary]:
    user = users_by_id.get(user_id)
    if user is None:
        return None
    return UserSummary(id=str(user.id), username=user.username)

def map_user_to_author(user_id: str, users_by_id: Dict[str, User]) -> Optional[AuthorPublic]:
    """Tác giả bài đăng được hiển thị kèm email."""
    user = users_by_id.get(user_id)
    if user is None:
        return None
    return AuthorPublic(id=str(user.id), username=user.username, email=user.email)

def map_reply_to_public(reply: Reply, users_by_id: Dict[str, User]) -> ReplyPublic:
    return ReplyPublic(
        id=reply.id,
        content=reply.content,
        author=map_user_to_summary(reply.authorId, users_by_id),
        createdAt=reply.createdAt
    )

def map_comment_to_public(comment: Comment, users_by_id: Dict[str, User]) -> CommentPublic:
    return CommentPublic(
        id=comment.id,
        content=comment.content,
        author=map_user_to_summary(comment.authorId, users_by_id),
        replies=[map_reply_to_public(reply, users_by_id) for reply in comment.replies],
        createdAt=comment.createdAt
    )

def map_post_to_public(post: Post, users_by_id: Dict[str, User]) -> PostPublic:
    """Chuyển đổi Post (kèm bình luận và phản hồi lồng nhau) thành PostPublic."""
    return PostPublic(
        id=str(post.id),
        title=post.title,
        content=post.content,
        category=post.category,
        author=map_user_to_author(post.authorId, users_by_id),
        comments=[map_comment_to_public(comment, users_by_id) for comment in post.comments or []],
        createdAt=post.createdAt
    )

def map_message_to_public(msg: Message, users_by_id: Dict[str, User]) -> MessagePublic:
    return MessagePublic(
        id=str(msg.id),
        sender=map_user_to_summary(msg.senderId, users_by_id),
        recipient=map_user_to_summary(msg.recipientId, users_by_id),
        content=msg.content,
        read=msg.read,
        createdAt=msg.createdAt
    )
