from fastapi import APIRouter, Depends
from ..services import PostService
from ..schemas import CommentCreate, ReplyCreate, PostPublic
from ..models import User
from ..security import get_current_user

# Bình luận và phản hồi nằm trong bài đăng nên mọi endpoint đều trả về bài đăng đã cập nhật
router = APIRouter(tags=["Comment"])

@router.post("/{post_id}/comments", response_model=PostPublic, status_code=201)
async def add_comment(
    post_id: str,
    comment_data: CommentCreate,
    current_user: User = Depends(get_current_user)
):
    """Thêm bình luận vào bài đăng. Yêu cầu xác thực người dùng."""
    return await PostService.add_comment(
        post_id=post_id,
        content=comment_data.content,
        author_id=str(current_user.id)
    )

@router.post("/{post_id}/comments/{comment_id}/replies", response_model=PostPublic, status_code=201)
async def add_reply(
    post_id: str,
    comment_id: str,
    reply_data: ReplyCreate,
    current_user: User = Depends(get_current_user)
):
    """Trả lời một bình luận."""
    return await PostService.add_reply(
        post_id=post_id,
        comment_id=comment_id,
        content=reply_data.content,
        author_id=str(current_user.id)
    )

@router.delete("/{post_id}/comments/{comment_id}", response_model=PostPublic)
async def delete_comment(
    post_id: str,
    comment_id: str,
    current_user: User = Depends(get_current_user)
):
    """Xóa một bình luận. Chỉ tác giả bình luận hoặc tác giả bài đăng mới có quyền xóa."""
    return await PostService.delete_comment(
        post_id=post_id,
        comment_id=comment_id,
        acting_user_id=str(current_user.id)
    )

@router.delete("/{post_id}/comments/{comment_id}/replies/{reply_id}", response_model=PostPublic)
async def delete_reply(
    post_id: str,
    comment_id: str,
    reply_id: str,
    current_user: User = Depends(get_current_user)
):
    """Xóa một phản hồi. Tác giả phản hồi, bình luận hoặc bài đăng đều có quyền xóa."""
    return await PostService.delete_reply(
        post_id=post_id,
        comment_id=comment_id,
        reply_id=reply_id,
        acting_user_id=str(current_user.id)
    )
