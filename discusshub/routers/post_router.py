from fastapi import APIRouter, Depends
from typing import List
from ..services import PostService
from ..schemas import PostCreate, PostPublic
from ..models import User
from ..security import get_current_user

router = APIRouter(tags=["Post"])

@router.post("", response_model=PostPublic, status_code=201)
async def create_post(
    post_data: PostCreate,
    current_user: User = Depends(get_current_user)
):
    """Tạo một bài đăng mới. Yêu cầu xác thực người dùng."""
    return await PostService.create_post(
        title=post_data.title,
        content=post_data.content,
        category=post_data.category,
        author_id=str(current_user.id)
    )

@router.get("", response_model=List[PostPublic])
async def list_posts():
    """Lấy tất cả bài đăng, mới nhất trước. Không cần đăng nhập."""
    return await PostService.list_posts()

@router.get("/category/{category}", response_model=List[PostPublic])
async def list_posts_by_category(category: str):
    """Lấy các bài đăng thuộc một chuyên mục. Không cần đăng nhập."""
    return await PostService.list_posts(category=category)
