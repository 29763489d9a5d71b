import logging
from typing import List, Optional
from beanie.odm.queries.update import UpdateResponse
from ..models import Comment, Post, Reply, DEFAULT_CATEGORY
from ..schemas import PostPublic
from ..exceptions import ForbiddenError, NotFoundError
from ..utils import parse_object_id, require_text
from .hydration import hydrate_post, hydrate_posts
from .permissions import resolve_delete_grant

logger = logging.getLogger(__name__)


def find_by_id(items, item_id: str):
    """Tìm phần tử nhúng (bình luận/phản hồi) theo id trong danh sách."""
    return next((item for item in items if item.id == item_id), None)


def normalize_category(category: Optional[str]) -> str:
    if category is None or not category.strip():
        return DEFAULT_CATEGORY
    return category.strip().lower()


class PostService:
    """
    Bài đăng là tài liệu gốc; bình luận và phản hồi được nhúng bên trong.
    Mọi thao tác thêm/xóa phần tử nhúng đều là một lệnh cập nhật có điều kiện duy nhất
    trên tài liệu bài đăng, không đọc-sửa-ghi lại cả danh sách.
    """

    @staticmethod
    async def _get_post(post_id: str) -> Post:
        post = await Post.get(parse_object_id(post_id, "post"))
        if not post:
            raise NotFoundError("Post not found")
        return post

    @staticmethod
    async def create_post(title: str, content: str, category: Optional[str], author_id: str) -> PostPublic:
        """Tạo một bài đăng mới với danh sách bình luận rỗng."""
        new_post = Post(
            title=require_text(title, "Post title is required"),
            content=require_text(content, "Post content is required"),
            category=normalize_category(category),
            authorId=author_id,
        )
        await new_post.insert()
        logger.info("Post %s created by %s", new_post.id, author_id)
        return await hydrate_post(new_post)

    @staticmethod
    async def list_posts(category: Optional[str] = None) -> List[PostPublic]:
        """
        Lấy tất cả bài đăng (có thể lọc theo chuyên mục), mới nhất trước,
        kèm bình luận và phản hồi.
        """
        query = {"category": normalize_category(category)} if category is not None else {}
        posts = await Post.find(query, sort="-createdAt").to_list()
        return await hydrate_posts(posts)

    @staticmethod
    async def add_comment(post_id: str, content: str, author_id: str) -> PostPublic:
        content = require_text(content, "Comment content is required")
        post = await PostService._get_post(post_id)

        new_comment = Comment(content=content, authorId=author_id)
        updated_post = await Post.find_one({"_id": post.id}).update(
            {"$push": {"comments": new_comment.model_dump()}},
            response_type=UpdateResponse.NEW_DOCUMENT,
        )
        if updated_post is None:
            raise NotFoundError("Post not found")

        logger.info("Comment %s added to post %s by %s", new_comment.id, post_id, author_id)
        return await hydrate_post(updated_post)

    @staticmethod
    async def add_reply(post_id: str, comment_id: str, content: str, author_id: str) -> PostPublic:
        content = require_text(content, "Reply content is required")
        post = await PostService._get_post(post_id)
        if find_by_id(post.comments, comment_id) is None:
            raise NotFoundError("Comment not found")

        new_reply = Reply(content=content, authorId=author_id)
        # Toán tử vị trí $ trỏ tới đúng bình luận khớp với comments.id trong bộ lọc
        updated_post = await Post.find_one({"_id": post.id, "comments.id": comment_id}).update(
            {"$push": {"comments.$.replies": new_reply.model_dump()}},
            response_type=UpdateResponse.NEW_DOCUMENT,
        )
        if updated_post is None:
            raise NotFoundError("Comment not found")

        logger.info("Reply %s added to comment %s on post %s", new_reply.id, comment_id, post_id)
        return await hydrate_post(updated_post)

    @staticmethod
    async def delete_comment(post_id: str, comment_id: str, acting_user_id: str) -> PostPublic:
        """
        Xóa một bình luận cùng toàn bộ phản hồi của nó.
        Chỉ tác giả bình luận hoặc tác giả bài đăng mới có quyền xóa.
        """
        post = await PostService._get_post(post_id)
        comment = find_by_id(post.comments, comment_id)
        if comment is None:
            raise NotFoundError("Comment not found")

        grant = resolve_delete_grant(acting_user_id, post.authorId, comment.authorId)
        if grant is None:
            logger.warning(
                "Unauthorized comment delete: user=%s comment_author=%s post_author=%s",
                acting_user_id, comment.authorId, post.authorId
            )
            raise ForbiddenError("Not authorized to delete this comment")

        # Bộ lọc gồm cả id bình luận: nếu một yêu cầu xóa đồng thời đã thắng thì không khớp gì cả
        updated_post = await Post.find_one({"_id": post.id, "comments.id": comment_id}).update(
            {"$pull": {"comments": {"id": comment_id}}},
            response_type=UpdateResponse.NEW_DOCUMENT,
        )
        if updated_post is None:
            raise NotFoundError("Comment not found")

        logger.info("Comment %s deleted from post %s (%s)", comment_id, post_id, grant.value)
        return await hydrate_post(updated_post)

    @staticmethod
    async def delete_reply(post_id: str, comment_id: str, reply_id: str, acting_user_id: str) -> PostPublic:
        """
        Xóa một phản hồi. Tác giả phản hồi, tác giả bình luận hoặc tác giả bài đăng đều có quyền xóa.
        """
        post = await PostService._get_post(post_id)
        comment = find_by_id(post.comments, comment_id)
        if comment is None:
            raise NotFoundError("Comment not found")
        reply = find_by_id(comment.replies, reply_id)
        if reply is None:
            raise NotFoundError("Reply not found")

        grant = resolve_delete_grant(acting_user_id, post.authorId, comment.authorId, reply.authorId)
        if grant is None:
            logger.warning(
                "Unauthorized reply delete: user=%s reply_author=%s comment_author=%s post_author=%s",
                acting_user_id, reply.authorId, comment.authorId, post.authorId
            )
            raise ForbiddenError("Not authorized to delete this reply")

        updated_post = await Post.find_one({
            "_id": post.id,
            "comments": {"$elemMatch": {"id": comment_id, "replies.id": reply_id}},
        }).update(
            {"$pull": {"comments.$.replies": {"id": reply_id}}},
            response_type=UpdateResponse.NEW_DOCUMENT,
        )
        if updated_post is None:
            raise NotFoundError("Reply not found")

        logger.info("Reply %s deleted from comment %s on post %s (%s)", reply_id, comment_id, post_id, grant.value)
        return await hydrate_post(updated_post)
